"""
CipherBench Output Module
==========================

Console display and report generation for CipherBench results.
"""

from cipherbench.output.console import BenchConsoleOutput
from cipherbench.output.report import BenchReportGenerator

__all__ = [
    "BenchConsoleOutput",
    "BenchReportGenerator",
]

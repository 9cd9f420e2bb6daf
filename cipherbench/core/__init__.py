"""
CipherBench Core Module
========================

Data models shared by the algorithms, the benchmark harness and the
output layer.  The engine facade lives in :mod:`cipherbench.core.engine`.
"""

from cipherbench.core.models import (
    BenchmarkResult,
    CipherId,
    ComparisonResult,
    IndividualTestResult,
    SecurityLevel,
)

__all__ = [
    "BenchmarkResult",
    "CipherId",
    "ComparisonResult",
    "IndividualTestResult",
    "SecurityLevel",
]

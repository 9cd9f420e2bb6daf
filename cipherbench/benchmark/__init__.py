"""
CipherBench Benchmark Harness
==============================

Timing primitives and the comparison routine that measures all three
ciphers on the same input.
"""

from cipherbench.benchmark.timing import format_time, measure_time

__all__ = ["format_time", "measure_time"]

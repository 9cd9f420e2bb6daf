"""
CipherBench Shared Module
=========================

Common utilities, models, and configuration management shared by the
CipherBench engine, output layer and CLI.
"""

from shared.config import BenchConfig

__all__ = ["BenchConfig"]

"""
CipherBench -- Classical Cipher Comparison Toolkit
===================================================

Encrypts and decrypts text with three classical substitution ciphers
(Vigenère, Caesar, keyword substitution) and compares their execution
speed.  These ciphers are deliberately weak and exist here for
pedagogical comparison only.

Modules:
    - cipherbench.algorithms: Cipher transforms and alphabet/key utilities
    - cipherbench.benchmark: Timing primitives and the comparison harness
    - cipherbench.core: Pydantic data models and the engine facade
    - cipherbench.output: Console and report output
    - cipherbench.cli: Click-based command-line interface
"""

__version__ = "1.0.0"
__tool_name__ = "cipherbench"

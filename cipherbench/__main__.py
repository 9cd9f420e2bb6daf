"""
CipherBench Entry Point
========================

Allows running the CLI via: python -m cipherbench
"""

from cipherbench.cli import main

if __name__ == "__main__":
    main()

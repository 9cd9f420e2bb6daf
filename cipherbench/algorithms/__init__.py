"""
CipherBench Algorithms
=======================

The three classical cipher transforms and the alphabet/key utilities
they share.  Every function is pure: plain strings and integers in,
plain strings out.
"""

from cipherbench.algorithms.alphabet import (
    caesar_shift_from_key,
    generate_substitution_key,
    is_valid_caesar_key,
    is_valid_key,
    is_valid_text,
    normalize_text,
)
from cipherbench.algorithms.caesar import caesar_decrypt, caesar_encrypt
from cipherbench.algorithms.registry import (
    CIPHERS,
    CipherSpec,
    decrypt_with_cipher,
    encrypt_with_cipher,
)
from cipherbench.algorithms.substitution import (
    substitution_decrypt,
    substitution_encrypt,
)
from cipherbench.algorithms.vigenere import vigenere_decrypt, vigenere_encrypt

__all__ = [
    "CIPHERS",
    "CipherSpec",
    "caesar_decrypt",
    "caesar_encrypt",
    "caesar_shift_from_key",
    "decrypt_with_cipher",
    "encrypt_with_cipher",
    "generate_substitution_key",
    "is_valid_caesar_key",
    "is_valid_key",
    "is_valid_text",
    "normalize_text",
    "substitution_decrypt",
    "substitution_encrypt",
    "vigenere_decrypt",
    "vigenere_encrypt",
]

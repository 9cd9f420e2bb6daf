"""
Cipher Registry
================

Static description of every supported cipher and dispatch helpers that
route an encrypt/decrypt request to the right transform by
:class:`~cipherbench.core.models.CipherId`.

The Caesar cipher takes an integer shift rather than a key; the
dispatchers derive it from the first letter of the shared key
('A' -> 1, ..., 'Z' -> 26) and ignore the rest of the key.
"""

from __future__ import annotations

from dataclasses import dataclass

from cipherbench.algorithms.alphabet import caesar_shift_from_key
from cipherbench.algorithms.caesar import caesar_decrypt, caesar_encrypt
from cipherbench.algorithms.substitution import (
    substitution_decrypt,
    substitution_encrypt,
)
from cipherbench.algorithms.vigenere import vigenere_decrypt, vigenere_encrypt
from cipherbench.core.models import CipherId, SecurityLevel


@dataclass(frozen=True, slots=True)
class CipherSpec:
    """Display metadata for one cipher."""

    name: str
    description: str
    key_help: str
    complexity: str
    security: SecurityLevel


CIPHERS: dict[CipherId, CipherSpec] = {
    CipherId.VIGENERE: CipherSpec(
        name="Vigenère Cipher",
        description="Repeating key",
        key_help=(
            "Letters only (A-Z). The key is repeated to cover the "
            "whole message."
        ),
        complexity="O(n)",
        security=SecurityLevel.MEDIUM,
    ),
    CipherId.CAESAR: CipherSpec(
        name="Caesar Cipher",
        description="Simple shift",
        key_help="Only the first letter is used: A=1, B=2, C=3, etc.",
        complexity="O(n)",
        security=SecurityLevel.LOW,
    ),
    CipherId.SUBSTITUTION: CipherSpec(
        name="Substitution Cipher",
        description="Alphabet swap",
        key_help="Letters only (A-Z). The key defines the new alphabet.",
        complexity="O(n)",
        security=SecurityLevel.MEDIUM_HIGH,
    ),
}


def encrypt_with_cipher(text: str, key: str, cipher: CipherId | str) -> str:
    """Encrypt normalised *text* with *key* using *cipher*.

    Raises:
        ValueError: If *cipher* is unknown or *key* is empty.
    """
    cipher = CipherId(cipher)
    if cipher is CipherId.CAESAR:
        return caesar_encrypt(text, caesar_shift_from_key(key))
    if cipher is CipherId.SUBSTITUTION:
        return substitution_encrypt(text, key)
    return vigenere_encrypt(text, key)


def decrypt_with_cipher(text: str, key: str, cipher: CipherId | str) -> str:
    """Decrypt normalised *text* with *key* using *cipher*.

    Raises:
        ValueError: If *cipher* is unknown or *key* is empty.
    """
    cipher = CipherId(cipher)
    if cipher is CipherId.CAESAR:
        return caesar_decrypt(text, caesar_shift_from_key(key))
    if cipher is CipherId.SUBSTITUTION:
        return substitution_decrypt(text, key)
    return vigenere_decrypt(text, key)

"""
Vigenère Cipher
================

Polyalphabetic substitution: each letter is shifted by the alphabet
position of the key letter at the same index, with the key repeating to
cover the whole message.

The key index advances on *every* input character, including spaces and
punctuation that are copied through unchanged.  Two messages that differ
only in punctuation therefore encrypt their letters differently.

Reference:
    - Kahn, D. (1996). The Codebreakers. Scribner. Ch. 4.
"""

from __future__ import annotations

_A = ord("A")
_Z = ord("Z")


def _require_key(key: str) -> None:
    if not key:
        raise ValueError("Vigenère key must not be empty")


def vigenere_encrypt(plain_text: str, key: str) -> str:
    """Encrypt uppercase *plain_text* with *key* (case-insensitive).

    Raises:
        ValueError: If *key* is empty.
    """
    _require_key(key)
    key = key.upper()
    key_len = len(key)
    out: list[str] = []
    for i, ch in enumerate(plain_text):
        code = ord(ch)
        if _A <= code <= _Z:
            k = ord(key[i % key_len]) - _A
            out.append(chr((code - _A + k) % 26 + _A))
        else:
            out.append(ch)
    return "".join(out)


def vigenere_decrypt(cipher_text: str, key: str) -> str:
    """Invert :func:`vigenere_encrypt`.

    Raises:
        ValueError: If *key* is empty.
    """
    _require_key(key)
    key = key.upper()
    key_len = len(key)
    out: list[str] = []
    for i, ch in enumerate(cipher_text):
        code = ord(ch)
        if _A <= code <= _Z:
            k = ord(key[i % key_len]) - _A
            out.append(chr((code - _A - k + 26) % 26 + _A))
        else:
            out.append(ch)
    return "".join(out)

"""
Caesar Cipher
==============

Fixed-shift monoalphabetic substitution.  Every letter A-Z moves the same
number of places along the alphabet; all other characters are copied
through.
"""

from __future__ import annotations

_A = ord("A")
_Z = ord("Z")


def _shift_text(text: str, shift: int) -> str:
    out: list[str] = []
    for ch in text:
        code = ord(ch)
        if _A <= code <= _Z:
            out.append(chr((code - _A + shift) % 26 + _A))
        else:
            out.append(ch)
    return "".join(out)


def caesar_encrypt(plain_text: str, shift: int) -> str:
    """Shift every uppercase letter of *plain_text* forward by *shift*."""
    return _shift_text(plain_text, int(shift) % 26)


def caesar_decrypt(cipher_text: str, shift: int) -> str:
    """Shift every uppercase letter of *cipher_text* back by *shift*."""
    return _shift_text(cipher_text, 26 - int(shift) % 26)

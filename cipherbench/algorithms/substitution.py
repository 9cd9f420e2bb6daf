"""
Keyword Substitution Cipher
============================

Monoalphabetic substitution through a 26-letter permutation derived from
a keyword (see :func:`~cipherbench.algorithms.alphabet.generate_substitution_key`).
Plaintext letter at alphabet index ``j`` maps to ``permutation[j]``;
decryption is the inverse lookup.
"""

from __future__ import annotations

from cipherbench.algorithms.alphabet import ALPHABET, generate_substitution_key

_A = ord("A")
_Z = ord("Z")


def _require_keyword(keyword: str) -> None:
    if not keyword:
        raise ValueError("Substitution keyword must not be empty")


def substitution_encrypt(plain_text: str, keyword: str) -> str:
    """Encrypt uppercase *plain_text* with the alphabet seeded by *keyword*.

    Raises:
        ValueError: If *keyword* is empty.
    """
    _require_keyword(keyword)
    permutation = generate_substitution_key(keyword)
    out: list[str] = []
    for ch in plain_text:
        code = ord(ch)
        if _A <= code <= _Z:
            out.append(permutation[code - _A])
        else:
            out.append(ch)
    return "".join(out)


def substitution_decrypt(cipher_text: str, keyword: str) -> str:
    """Invert :func:`substitution_encrypt`.

    Each letter is located in the permutation with a linear search; a
    letter missing from the permutation is copied through unchanged.

    Raises:
        ValueError: If *keyword* is empty.
    """
    _require_keyword(keyword)
    permutation = generate_substitution_key(keyword)
    out: list[str] = []
    for ch in cipher_text:
        code = ord(ch)
        if _A <= code <= _Z:
            index = permutation.find(ch)
            out.append(ALPHABET[index] if index != -1 else ch)
        else:
            out.append(ch)
    return "".join(out)

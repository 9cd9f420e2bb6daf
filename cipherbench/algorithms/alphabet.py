"""
Alphabet and Key Utilities
===========================

Validation and normalisation of free text and cipher keys, plus
construction of the keyword-seeded substitution alphabet.

All three ciphers operate on the 26 uppercase Latin letters (code points
65-90).  Callers are expected to run :func:`normalize_text` on both the
message and the key before handing them to a cipher transform.
"""

from __future__ import annotations

import re
import string

ALPHABET: str = string.ascii_uppercase
ALPHABET_SIZE: int = len(ALPHABET)

# Letters, digits, whitespace and basic punctuation; empty text is valid.
TEXT_PATTERN = re.compile(r"^[A-Za-z0-9\s.,!?;:'\"()\-]*$")

# Regex-level key rule.  The all-quantifier matches "" vacuously, which is
# why is_valid_key() adds an explicit non-empty check on top of it.
KEY_PATTERN_ALL_LETTERS = re.compile(r"^[A-Za-z]*$")

CAESAR_KEY_PATTERN = re.compile(r"^[A-Za-z]$")


def is_valid_text(text: str) -> bool:
    """Return ``True`` if *text* only contains characters the ciphers accept."""
    return TEXT_PATTERN.fullmatch(text) is not None


def is_valid_key(key: str) -> bool:
    """Return ``True`` if *key* is a non-empty run of ASCII letters.

    The empty string satisfies :data:`KEY_PATTERN_ALL_LETTERS` but is
    rejected here: an empty key has no letter to derive a shift from.
    """
    return bool(key) and KEY_PATTERN_ALL_LETTERS.fullmatch(key) is not None


def is_valid_caesar_key(key: str) -> bool:
    """Return ``True`` if *key* is exactly one ASCII letter."""
    return CAESAR_KEY_PATTERN.fullmatch(key) is not None


def normalize_text(text: str) -> str:
    """Uppercase *text*; nothing else is changed."""
    return text.upper()


def caesar_shift_from_key(key: str) -> int:
    """Derive the Caesar shift from the first letter of *key*.

    The shift is the letter's 1-based alphabet position ('A' -> 1,
    'Z' -> 26).  The remaining letters of the key are ignored.

    Raises:
        ValueError: If *key* is empty.
    """
    if not key:
        raise ValueError("Caesar key must contain at least one letter")
    return ord(key[0].upper()) - ord("A") + 1


def generate_substitution_key(keyword: str) -> str:
    """Build the 26-letter substitution alphabet seeded by *keyword*.

    The keyword is uppercased and stripped of non-letters; its letters are
    written in first-occurrence order, followed by every remaining letter
    of the alphabet in A-Z order.  An empty keyword yields the identity
    alphabet.

    Example:
        >>> generate_substitution_key("KEY")
        'KEYABCDFGHIJLMNOPQRSTUVWXZ'
    """
    letters = (ch for ch in keyword.upper() if ch in ALPHABET)

    # dict preserves insertion order, so fromkeys() drops duplicates
    # while keeping the first occurrence of each letter.
    permutation = dict.fromkeys(letters)
    permutation.update(dict.fromkeys(ALPHABET))
    return "".join(permutation)

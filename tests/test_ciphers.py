"""Tests for the Vigenère, Caesar and substitution transforms."""

from __future__ import annotations

import pytest

from cipherbench.algorithms.caesar import caesar_decrypt, caesar_encrypt
from cipherbench.algorithms.registry import (
    CIPHERS,
    decrypt_with_cipher,
    encrypt_with_cipher,
)
from cipherbench.algorithms.substitution import (
    substitution_decrypt,
    substitution_encrypt,
)
from cipherbench.algorithms.vigenere import vigenere_decrypt, vigenere_encrypt
from cipherbench.core.models import CipherId, SecurityLevel

SAMPLES = [
    "HELLO WORLD",
    "ATTACK AT DAWN!",
    "THE QUICK BROWN FOX JUMPS OVER THE LAZY DOG.",
    "1234 -- (NO LETTERS?) ;:'\"",
    "",
]
KEYS = ["KEY", "A", "LEMON", "ZZZZ", "QWERTYUIOPASDFGHJKLZXCVBNMQ"]


class TestVigenere:
    def test_key_advances_on_every_character(self):
        assert vigenere_encrypt("HELLO WORLD", "KEY") == "RIJVS GSPVH"

    def test_letters_only_message(self):
        assert vigenere_encrypt("HELLOWORLD", "KEY") == "RIJVSUYVJN"

    def test_pass_through_characters_consume_key_letters(self):
        assert vigenere_encrypt("AA", "AB") == "AB"
        assert vigenere_encrypt("A A", "AB") == "A A"

    def test_decrypt(self):
        assert vigenere_decrypt("RIJVS GSPVH", "KEY") == "HELLO WORLD"

    def test_lowercase_key(self):
        assert vigenere_encrypt("HELLO WORLD", "key") == "RIJVS GSPVH"
        assert vigenere_decrypt("RIJVS GSPVH", "kEy") == "HELLO WORLD"

    def test_key_a_is_identity(self):
        assert vigenere_encrypt("HELLO", "A") == "HELLO"

    def test_lowercase_passes_through(self):
        assert vigenere_encrypt("hello", "KEY") == "hello"

    def test_empty_key_raises(self):
        with pytest.raises(ValueError):
            vigenere_encrypt("HELLO", "")
        with pytest.raises(ValueError):
            vigenere_decrypt("HELLO", "")


class TestCaesar:
    def test_encrypt(self):
        assert caesar_encrypt("HELLO", 3) == "KHOOR"

    def test_decrypt(self):
        assert caesar_decrypt("KHOOR", 3) == "HELLO"

    def test_wraps_around(self):
        assert caesar_encrypt("XYZ", 3) == "ABC"
        assert caesar_decrypt("ABC", 3) == "XYZ"

    def test_shift_normalised_mod_26(self):
        assert caesar_encrypt("HELLO", 26) == "HELLO"
        assert caesar_encrypt("HELLO", 29) == "KHOOR"
        assert caesar_encrypt("KHOOR", -3) == "HELLO"

    def test_non_letters_pass_through(self):
        assert caesar_encrypt("HELLO, WORLD 123", 3) == "KHOOR, ZRUOG 123"


class TestSubstitution:
    def test_encrypt(self):
        assert substitution_encrypt("HELLO", "KEY") == "FBJJN"
        assert substitution_encrypt("ABC", "KEY") == "KEY"

    def test_decrypt(self):
        assert substitution_decrypt("FBJJN", "KEY") == "HELLO"

    def test_non_letters_and_lowercase_pass_through(self):
        assert substitution_encrypt("HI, you 42", "KEY") == "FG, you 42"
        assert substitution_decrypt("FG, you 42", "KEY") == "HI, you 42"

    def test_keyword_without_letters_is_identity(self):
        assert substitution_encrypt("HELLO", "123") == "HELLO"

    def test_empty_keyword_raises(self):
        with pytest.raises(ValueError):
            substitution_encrypt("HELLO", "")
        with pytest.raises(ValueError):
            substitution_decrypt("HELLO", "")


@pytest.mark.parametrize("cipher", list(CipherId))
@pytest.mark.parametrize("text", SAMPLES)
@pytest.mark.parametrize("key", KEYS)
class TestSharedProperties:
    def test_round_trip(self, cipher, text, key):
        encrypted = encrypt_with_cipher(text, key, cipher)
        assert decrypt_with_cipher(encrypted, key, cipher) == text

    def test_length_and_non_letters_preserved(self, cipher, text, key):
        encrypted = encrypt_with_cipher(text, key, cipher)
        assert len(encrypted) == len(text)
        for original, produced in zip(text, encrypted):
            if not "A" <= original <= "Z":
                assert produced == original
            else:
                assert "A" <= produced <= "Z"


class TestRegistry:
    def test_caesar_shift_from_first_key_letter(self):
        assert encrypt_with_cipher("HELLO", "C", CipherId.CAESAR) == "KHOOR"
        assert encrypt_with_cipher("HELLO", "CAT", "caesar") == "KHOOR"
        assert decrypt_with_cipher("KHOOR", "CAT", "caesar") == "HELLO"

    def test_dispatch_by_string_id(self):
        assert encrypt_with_cipher("HELLO", "KEY", "substitution") == "FBJJN"
        assert encrypt_with_cipher("HELLO WORLD", "KEY", "vigenere") == "RIJVS GSPVH"

    def test_unknown_cipher_raises(self):
        with pytest.raises(ValueError):
            encrypt_with_cipher("HELLO", "KEY", "enigma")

    def test_cipher_metadata(self):
        assert list(CIPHERS) == [
            CipherId.VIGENERE,
            CipherId.CAESAR,
            CipherId.SUBSTITUTION,
        ]
        assert CIPHERS[CipherId.CAESAR].security is SecurityLevel.LOW
        assert CIPHERS[CipherId.VIGENERE].security is SecurityLevel.MEDIUM
        assert CIPHERS[CipherId.SUBSTITUTION].security is SecurityLevel.MEDIUM_HIGH
        assert all(spec.complexity == "O(n)" for spec in CIPHERS.values())

"""
CipherBench Core Data Models
=============================

Pydantic models for the results produced by the cipher benchmark harness
and the individual round-trip test.  All models serialise to JSON and are
consumed by both the console output layer and the report generators.

Field aliases follow the camelCase record keys of the browser demo the
toolkit grew out of (``encryptTime``, ``decryptTime``, ...), so a
``model_dump(by_alias=True)`` yields the familiar shape while Python code
uses snake_case attributes.
"""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# ===================================================================== #
#  Enumerations
# ===================================================================== #


class CipherId(str, enum.Enum):
    """Identifier of a supported cipher.

    Declaration order is the fixed order in which the benchmark measures
    the ciphers.
    """

    VIGENERE = "vigenere"
    CAESAR = "caesar"
    SUBSTITUTION = "substitution"


class SecurityLevel(str, enum.Enum):
    """Qualitative security label shown next to each cipher's timings."""

    LOW = "Low"
    MEDIUM = "Medium"
    MEDIUM_HIGH = "Medium-High"


# ===================================================================== #
#  Benchmark Models
# ===================================================================== #


class _RecordModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class BenchmarkResult(_RecordModel):
    """Timings and samples for one cipher in a comparison run.

    Attributes:
        name: Display name of the cipher.
        encrypt_time: Average milliseconds per encryption call.
        decrypt_time: Average milliseconds per decryption call.
        encrypted: Ciphertext produced from the benchmark input.
        decrypted: Plaintext recovered from *encrypted*.
        complexity: Asymptotic complexity label.
        security: Qualitative security label.
    """

    name: str
    encrypt_time: float = Field(default=0.0, ge=0.0)
    decrypt_time: float = Field(default=0.0, ge=0.0)
    encrypted: str = ""
    decrypted: str = ""
    complexity: str = "O(n)"
    security: SecurityLevel


class ComparisonResult(_RecordModel):
    """All three :class:`BenchmarkResult` records of one comparison run.

    Attributes:
        results: Per-cipher results in measurement order.
        iterations: Timing loop repetitions per operation.
        message_length: Length of the benchmark input text.
        fastest_encrypt: Cipher with the lowest average encryption time.
        fastest_decrypt: Cipher with the lowest average decryption time.
    """

    results: dict[CipherId, BenchmarkResult]
    iterations: int = Field(..., ge=1)
    message_length: int = Field(..., ge=0)
    fastest_encrypt: CipherId
    fastest_decrypt: CipherId


class IndividualTestResult(_RecordModel):
    """Outcome of a single encrypt-then-decrypt pass with one cipher.

    Attributes:
        cipher: Cipher that was exercised.
        name: Display name of the cipher.
        key: Normalised key used for both operations.
        original: Normalised input text.
        encrypted: Ciphertext.
        decrypted: Plaintext recovered from *encrypted*.
        execution_time: Milliseconds spent on both operations together.
    """

    cipher: CipherId
    name: str
    key: str
    original: str
    encrypted: str
    decrypted: str
    execution_time: float = Field(default=0.0, ge=0.0)

    @property
    def round_trip_ok(self) -> bool:
        """``True`` when decryption recovered the original text."""
        return self.decrypted == self.original

"""
Cipher Benchmark Harness
=========================

Runs the three ciphers over the same input and assembles one
:class:`~cipherbench.core.models.BenchmarkResult` per cipher, plus the
helpers used to produce ad hoc test inputs.

Measurement is strictly sequential and always in the order Vigenère,
Caesar, Substitution.  There is no warm-up exclusion and no outlier
trimming, so interpreter warm-up effects accumulate across the sequence
in the same way on every run.
"""

from __future__ import annotations

import random
import time
from typing import Optional

from cipherbench.algorithms.alphabet import caesar_shift_from_key, normalize_text
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
from cipherbench.benchmark.timing import measure_time
from cipherbench.core.models import (
    BenchmarkResult,
    CipherId,
    ComparisonResult,
    IndividualTestResult,
)

TEST_DATA_CHARS: str = "ABCDEFGHIJKLMNOPQRSTUVWXYZ "


def _benchmark_one(
    cipher: CipherId,
    encrypt,
    decrypt,
    text: str,
    iterations: int,
) -> BenchmarkResult:
    spec = CIPHERS[cipher]

    encrypted = encrypt(text)
    encrypt_time = measure_time(lambda: encrypt(text), iterations)
    decrypt_time = measure_time(lambda: decrypt(encrypted), iterations)
    decrypted = decrypt(encrypted)

    return BenchmarkResult(
        name=spec.name,
        encrypt_time=encrypt_time,
        decrypt_time=decrypt_time,
        encrypted=encrypted,
        decrypted=decrypted,
        complexity=spec.complexity,
        security=spec.security,
    )


def test_cipher_performance(
    plain_text: str,
    key: str,
    iterations: int = 1000,
) -> dict[CipherId, BenchmarkResult]:
    """Benchmark encryption and decryption of all three ciphers.

    Text and key are normalised once.  For each cipher the encrypted
    sample is computed, *iterations* encryptions are timed, *iterations*
    decryptions of that sample are timed, and finally the decrypted
    sample is computed.  The Caesar shift is derived from the first
    letter of the shared key.

    Args:
        plain_text: Message to benchmark with.
        key: Non-empty alphabetic key shared by all three ciphers.
        iterations: Timing loop repetitions per operation.

    Returns:
        Mapping of cipher id to result, in measurement order.

    Raises:
        ValueError: If *key* is empty or *iterations* is less than 1.
    """
    text = normalize_text(plain_text)
    norm_key = normalize_text(key)
    shift = caesar_shift_from_key(norm_key)

    results: dict[CipherId, BenchmarkResult] = {}
    results[CipherId.VIGENERE] = _benchmark_one(
        CipherId.VIGENERE,
        lambda t: vigenere_encrypt(t, norm_key),
        lambda t: vigenere_decrypt(t, norm_key),
        text,
        iterations,
    )
    results[CipherId.CAESAR] = _benchmark_one(
        CipherId.CAESAR,
        lambda t: caesar_encrypt(t, shift),
        lambda t: caesar_decrypt(t, shift),
        text,
        iterations,
    )
    results[CipherId.SUBSTITUTION] = _benchmark_one(
        CipherId.SUBSTITUTION,
        lambda t: substitution_encrypt(t, norm_key),
        lambda t: substitution_decrypt(t, norm_key),
        text,
        iterations,
    )
    return results


# Keep pytest from collecting the harness entry point when imported by name.
test_cipher_performance.__test__ = False  # type: ignore[attr-defined]


def build_comparison(
    results: dict[CipherId, BenchmarkResult],
    iterations: int,
    message_length: int,
) -> ComparisonResult:
    """Wrap *results* with run parameters and the fastest ciphers.

    Ties go to the cipher measured first.
    """
    fastest_encrypt = min(results, key=lambda c: results[c].encrypt_time)
    fastest_decrypt = min(results, key=lambda c: results[c].decrypt_time)
    return ComparisonResult(
        results=results,
        iterations=iterations,
        message_length=message_length,
        fastest_encrypt=fastest_encrypt,
        fastest_decrypt=fastest_decrypt,
    )


def run_individual_test(
    text: str,
    key: str,
    cipher: CipherId | str,
) -> IndividualTestResult:
    """Encrypt then decrypt *text* once with *cipher*, timing both together."""
    cipher = CipherId(cipher)
    message = normalize_text(text)
    norm_key = normalize_text(key)

    start = time.perf_counter()
    encrypted = encrypt_with_cipher(message, norm_key, cipher)
    decrypted = decrypt_with_cipher(encrypted, norm_key, cipher)
    execution_time = (time.perf_counter() - start) * 1000.0

    return IndividualTestResult(
        cipher=cipher,
        name=CIPHERS[cipher].name,
        key=norm_key,
        original=message,
        encrypted=encrypted,
        decrypted=decrypted,
        execution_time=execution_time,
    )


def generate_test_data(
    length: int = 100,
    rng: Optional[random.Random] = None,
) -> str:
    """Return *length* random characters from A-Z and space, stripped.

    Characters are drawn uniformly with replacement, so the stripped
    result may be shorter than *length*.  Without *rng* the module-level
    generator is used and the output is not reproducible.
    """
    rng = rng or random
    return "".join(rng.choice(TEST_DATA_CHARS) for _ in range(length)).strip()


def generate_random_test(
    rng: Optional[random.Random] = None,
    *,
    message_range: tuple[int, int] = (50, 100),
    key_range: tuple[int, int] = (5, 10),
) -> tuple[str, str]:
    """Draw a random ``(message, key)`` pair for a quick comparison run.

    The key is cut from generated test data with spaces removed; if that
    leaves nothing, a single random letter is used instead.
    """
    rng = rng or random
    message = generate_test_data(rng.randint(*message_range), rng)

    key_length = rng.randint(*key_range)
    key = generate_test_data(key_length, rng).replace(" ", "")[:key_length]
    if not key:
        key = rng.choice(TEST_DATA_CHARS[:-1])
    return message, key

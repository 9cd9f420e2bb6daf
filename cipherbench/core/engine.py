"""
CipherBench Engine
===================

Central orchestrator for the CipherBench toolkit.  The
:class:`CipherBenchEngine` validates input at the application boundary,
dispatches to the cipher transforms and the benchmark harness, and wraps
every outcome in a :class:`~shared.models.RunResult` envelope for the
output layer.

The cipher core is synchronous.  The engine's operations are coroutines
so that a host (the CLI, a web handler) can await them; the blocking
comparison run is pushed to a worker thread with :func:`asyncio.to_thread`
so it never stalls an event loop.
"""

from __future__ import annotations

import asyncio
import random
from typing import Optional

from shared.config import BenchConfig
from shared.logger import BenchLogger
from shared.models import Finding, RunResult, Severity

from cipherbench.algorithms.alphabet import (
    generate_substitution_key,
    is_valid_key,
    is_valid_text,
    normalize_text,
)
from cipherbench.algorithms.registry import (
    CIPHERS,
    decrypt_with_cipher,
    encrypt_with_cipher,
)
from cipherbench.benchmark import harness
from cipherbench.benchmark.timing import format_time
from cipherbench.core.models import (
    CipherId,
    ComparisonResult,
    IndividualTestResult,
    SecurityLevel,
)


_SECURITY_SEVERITY: dict[SecurityLevel, Severity] = {
    SecurityLevel.LOW: Severity.HIGH,
    SecurityLevel.MEDIUM: Severity.MEDIUM,
    SecurityLevel.MEDIUM_HIGH: Severity.LOW,
}

_WEAKNESSES: dict[CipherId, tuple[str, list[str]]] = {
    CipherId.VIGENERE: (
        "The repeating key leaks its length through repeated ciphertext "
        "fragments; once the period is known each column falls to single-"
        "letter frequency analysis.",
        [
            "Kasiski, F. W. (1863). Die Geheimschriften und die Dechiffrirkunst.",
            "Friedman, W. F. (1922). The Index of Coincidence.",
        ],
    ),
    CipherId.CAESAR: (
        "Only 26 distinct shifts exist, so every key can be tried by hand "
        "in minutes.",
        ["Singh, S. (1999). The Code Book. Ch. 1."],
    ),
    CipherId.SUBSTITUTION: (
        "The keyspace is large (26! permutations) but letter frequencies "
        "survive encryption unchanged, so a few hundred characters of "
        "ciphertext are usually enough to recover the alphabet.",
        ["Sinkov, A. (1966). Elementary Cryptanalysis."],
    ),
}


class CipherBenchEngine:
    """Orchestrates encryption, decryption and benchmark operations.

    Usage::

        engine = CipherBenchEngine()
        result = await engine.encrypt("HELLO", "KEY", "vigenere")
        result = await engine.compare("ATTACK AT DAWN", "LEMON", iterations=500)

    Attributes:
        config: Toolkit configuration instance.
        logger: Logger for the engine.
    """

    def __init__(
        self,
        config: Optional[BenchConfig] = None,
        logger: Optional[BenchLogger] = None,
    ) -> None:
        self.config = config or BenchConfig()
        settings = self.config.global_settings
        self.logger = logger or BenchLogger(
            "engine",
            log_level="DEBUG" if settings.debug else settings.log_level,
            log_file=settings.log_file,
            json_logs=settings.log_json,
        )

    # ------------------------------------------------------------------ #
    #  Input validation
    # ------------------------------------------------------------------ #

    def validate_inputs(self, text: str, key: str) -> tuple[str, str]:
        """Validate and normalise a message/key pair.

        Returns:
            ``(message, key)`` uppercased.

        Raises:
            ValueError: If *text* is empty or contains unsupported
                characters, or *key* is not a non-empty run of letters.
        """
        if not text:
            raise ValueError("Text must not be empty.")
        if not is_valid_text(text):
            raise ValueError(
                "Text may only contain letters, digits, whitespace and "
                "the punctuation .,!?;:'\"()-"
            )
        if not is_valid_key(key):
            raise ValueError("Key must contain only letters (A-Z).")

        limit = self.config.benchmark.text_soft_limit
        if len(text) > limit:
            self.logger.warning(
                "Text is %d characters long (soft limit %d)",
                len(text),
                limit,
                length=len(text),
                soft_limit=limit,
            )
        return normalize_text(text), normalize_text(key)

    def resolve_iterations(self, iterations: Optional[int]) -> int:
        """Apply the configured default and bounds to *iterations*.

        Raises:
            ValueError: If the value is below 1 or above ``max_iterations``.
        """
        bench = self.config.benchmark
        value = bench.default_iterations if iterations is None else iterations
        if value < 1:
            raise ValueError(f"Iterations must be at least 1, got {value}.")
        if value > bench.max_iterations:
            raise ValueError(
                f"Iterations must not exceed {bench.max_iterations}, got {value}."
            )
        return value

    # ------------------------------------------------------------------ #
    #  Encryption / Decryption
    # ------------------------------------------------------------------ #

    async def encrypt(
        self, text: str, key: str, cipher: CipherId | str
    ) -> RunResult:
        """Encrypt *text* with *cipher* and return the wrapped result."""
        return self._transform(text, key, CipherId(cipher), encrypting=True)

    async def decrypt(
        self, text: str, key: str, cipher: CipherId | str
    ) -> RunResult:
        """Decrypt *text* with *cipher* and return the wrapped result."""
        return self._transform(text, key, CipherId(cipher), encrypting=False)

    def _transform(
        self, text: str, key: str, cipher: CipherId, *, encrypting: bool
    ) -> RunResult:
        message, norm_key = self.validate_inputs(text, key)
        action = "encrypt" if encrypting else "decrypt"

        result = RunResult(tool_name=action, target=CIPHERS[cipher].name)

        with self.logger.operation(action):
            self.logger.debug(
                "%s %d characters with %s",
                action,
                len(message),
                cipher.value,
                cipher=cipher.value,
                length=len(message),
            )
            if encrypting:
                output = encrypt_with_cipher(message, norm_key, cipher)
            else:
                output = decrypt_with_cipher(message, norm_key, cipher)

        if cipher is CipherId.CAESAR and len(norm_key) > 1:
            result.add_finding(Finding(
                severity=Severity.INFO,
                title="Caesar Key Truncated",
                description=(
                    f"Only the first letter of '{norm_key}' sets the shift; "
                    f"the remaining {len(norm_key) - 1} letter(s) are ignored."
                ),
            ))

        result.metadata = {
            "action": action,
            "cipher": cipher.value,
            "name": CIPHERS[cipher].name,
            "key": norm_key,
            "input": message,
            "output": output,
        }
        return result.finalize(
            f"{CIPHERS[cipher].name}: {action}ed {len(message)} characters"
        )

    # ------------------------------------------------------------------ #
    #  Comparison benchmark
    # ------------------------------------------------------------------ #

    async def compare(
        self, text: str, key: str, iterations: Optional[int] = None
    ) -> RunResult:
        """Benchmark all three ciphers on the same input.

        Args:
            text: Message to benchmark with.
            key: Key shared by the three ciphers.
            iterations: Timing loop repetitions; defaults to the
                configured ``default_iterations``.

        Returns:
            RunResult whose metadata is the dumped
            :class:`~cipherbench.core.models.ComparisonResult`.
        """
        message, norm_key = self.validate_inputs(text, key)
        count = self.resolve_iterations(iterations)

        result = RunResult(
            tool_name="compare",
            target=f"{len(message)} characters, key length {len(norm_key)}",
        )

        with self.logger.operation("compare"):
            try:
                with self.logger.timed(f"comparison ({count} iterations)"):
                    per_cipher = await asyncio.to_thread(
                        harness.test_cipher_performance, message, norm_key, count
                    )
            except Exception:
                self.logger.exception("Comparison run failed", iterations=count)
                raise

            comparison = harness.build_comparison(per_cipher, count, len(message))
            self.logger.info(
                "Comparison finished",
                iterations=count,
                message_length=len(message),
                fastest_encrypt=comparison.fastest_encrypt.value,
                fastest_decrypt=comparison.fastest_decrypt.value,
            )

        result.metadata = comparison.model_dump(mode="json", by_alias=True)
        for finding in self._comparison_findings(comparison, message):
            result.add_finding(finding)

        fastest = CIPHERS[comparison.fastest_encrypt].name
        return result.finalize(
            f"Compared 3 ciphers over {count:,} iterations on "
            f"{len(message)} characters; fastest encryption: {fastest}"
        )

    @staticmethod
    def _comparison_findings(
        comparison: ComparisonResult, message: str
    ) -> list[Finding]:
        findings: list[Finding] = []
        results = comparison.results

        enc = results[comparison.fastest_encrypt]
        findings.append(Finding(
            severity=Severity.INFO,
            title=f"Fastest Encryption: {enc.name}",
            description=(
                f"{enc.name} averaged {format_time(enc.encrypt_time)} per "
                f"encryption over {comparison.iterations:,} iterations."
            ),
            evidence={c.value: r.encrypt_time for c, r in results.items()},
        ))

        dec = results[comparison.fastest_decrypt]
        findings.append(Finding(
            severity=Severity.INFO,
            title=f"Fastest Decryption: {dec.name}",
            description=(
                f"{dec.name} averaged {format_time(dec.decrypt_time)} per "
                f"decryption over {comparison.iterations:,} iterations."
            ),
            evidence={c.value: r.decrypt_time for c, r in results.items()},
        ))

        for cipher, bench in results.items():
            if bench.decrypted != message:
                findings.append(Finding(
                    severity=Severity.HIGH,
                    title=f"Round-Trip Mismatch: {bench.name}",
                    description="Decrypting the sample did not recover the input.",
                    evidence={"expected": message, "actual": bench.decrypted},
                ))

            description, references = _WEAKNESSES[cipher]
            findings.append(Finding(
                severity=_SECURITY_SEVERITY[bench.security],
                title=f"{bench.name}: {bench.security.value} Security",
                description=description,
                recommendation="Use a modern authenticated cipher such as AES-GCM for real data.",
                references=references,
            ))
        return findings

    # ------------------------------------------------------------------ #
    #  Individual test
    # ------------------------------------------------------------------ #

    async def individual_test(
        self, text: str, key: str, cipher: CipherId | str
    ) -> RunResult:
        """Run one timed encrypt-then-decrypt pass with *cipher*."""
        message, norm_key = self.validate_inputs(text, key)
        cipher = CipherId(cipher)

        result = RunResult(tool_name="individual", target=CIPHERS[cipher].name)

        with self.logger.operation("individual"):
            outcome: IndividualTestResult = harness.run_individual_test(
                message, norm_key, cipher
            )
            self.logger.debug(
                "%s round trip took %.4f ms",
                cipher.value,
                outcome.execution_time,
                cipher=cipher.value,
                round_trip_ok=outcome.round_trip_ok,
            )

        result.metadata = outcome.model_dump(mode="json", by_alias=True)
        if outcome.round_trip_ok:
            result.add_finding(Finding(
                severity=Severity.INFO,
                title="Round Trip Verified",
                description="Decryption recovered the original text exactly.",
            ))
        else:
            result.add_finding(Finding(
                severity=Severity.HIGH,
                title="Round Trip Failed",
                description="Decryption did not recover the original text.",
                evidence={"expected": outcome.original, "actual": outcome.decrypted},
            ))
        return result.finalize(
            f"{outcome.name}: encrypt + decrypt in "
            f"{format_time(outcome.execution_time)}"
        )

    # ------------------------------------------------------------------ #
    #  Helpers
    # ------------------------------------------------------------------ #

    def random_test(self, rng: Optional[random.Random] = None) -> tuple[str, str]:
        """Draw a random message/key pair within the configured ranges."""
        bench = self.config.benchmark
        return harness.generate_random_test(
            rng,
            message_range=(bench.random_message_min, bench.random_message_max),
            key_range=(bench.random_key_min, bench.random_key_max),
        )

    def sample_data(
        self, length: Optional[int] = None, rng: Optional[random.Random] = None
    ) -> str:
        """Generate random benchmark text of the configured sample length."""
        size = self.config.benchmark.sample_length if length is None else length
        return harness.generate_test_data(size, rng)

    @staticmethod
    def substitution_alphabet(keyword: str) -> str:
        """Return the substitution alphabet derived from *keyword*."""
        return generate_substitution_key(keyword)

"""Tests for the timing primitives and the comparison harness."""

from __future__ import annotations

import math
import random
from types import SimpleNamespace

import pytest

from cipherbench.algorithms.alphabet import is_valid_key
from cipherbench.algorithms.vigenere import vigenere_encrypt
from cipherbench.benchmark import harness, timing
from cipherbench.benchmark.timing import format_time, measure_time
from cipherbench.core.models import BenchmarkResult, CipherId, SecurityLevel


class TestMeasureTime:
    def test_calls_function_exactly_iterations_times(self):
        calls = []
        measure_time(lambda: calls.append(1), 37)
        assert len(calls) == 37

    def test_average_is_total_span_divided_by_iterations(self, monkeypatch):
        ticks = iter([10.0, 12.0])
        monkeypatch.setattr(
            timing, "time", SimpleNamespace(perf_counter=lambda: next(ticks))
        )
        assert measure_time(lambda: None, 4) == pytest.approx(500.0)

    def test_returns_non_negative_finite_average(self):
        avg = measure_time(lambda: sum(range(100)), 1000)
        assert avg >= 0.0
        assert math.isfinite(avg)

    def test_single_and_many_iterations_same_order_of_magnitude(self):
        text = "THE QUICK BROWN FOX JUMPS OVER THE LAZY DOG " * 50
        work = lambda: vigenere_encrypt(text, "LEMON")  # noqa: E731
        one = measure_time(work, 1)
        many = measure_time(work, 1000)
        assert one > 0.0 and many > 0.0
        assert 0.01 < one / many < 100

    @pytest.mark.parametrize("iterations", [0, -5])
    def test_rejects_fewer_than_one_iteration(self, iterations):
        with pytest.raises(ValueError):
            measure_time(lambda: None, iterations)


@pytest.mark.parametrize(
    ("ms", "expected"),
    [
        (0.0005, "0.500 μs"),
        (0.0, "0.000 μs"),
        (0.25, "0.250 ms"),
        (1.0, "1.00 ms"),
        (12.3456, "12.35 ms"),
    ],
)
def test_format_time(ms, expected):
    assert format_time(ms) == expected


class TestCipherPerformance:
    def test_results_in_fixed_order(self):
        results = harness.test_cipher_performance("hello world", "key", 10)
        assert list(results) == [
            CipherId.VIGENERE,
            CipherId.CAESAR,
            CipherId.SUBSTITUTION,
        ]

    def test_samples_are_normalised_and_round_trip(self):
        results = harness.test_cipher_performance("hello world", "key", 10)
        assert results[CipherId.VIGENERE].encrypted == "RIJVS GSPVH"
        assert results[CipherId.CAESAR].encrypted == "SPWWZ HZCWO"
        assert results[CipherId.SUBSTITUTION].encrypted == "FBJJN VNQJA"
        for bench in results.values():
            assert bench.decrypted == "HELLO WORLD"

    def test_lookup_by_plain_string_id(self):
        results = harness.test_cipher_performance("HELLO", "KEY", 1)
        assert results["caesar"].name == "Caesar Cipher"

    def test_labels_and_timings(self):
        results = harness.test_cipher_performance("ATTACK AT DAWN", "LEMON", 20)
        assert results[CipherId.VIGENERE].security is SecurityLevel.MEDIUM
        assert results[CipherId.CAESAR].security is SecurityLevel.LOW
        assert results[CipherId.SUBSTITUTION].security is SecurityLevel.MEDIUM_HIGH
        for bench in results.values():
            assert bench.complexity == "O(n)"
            assert bench.encrypt_time >= 0.0
            assert bench.decrypt_time >= 0.0

    def test_measures_sequentially_encrypt_then_decrypt(self, monkeypatch):
        seen = []

        def fake_measure(fn, iterations):
            seen.append((fn(), iterations))
            return 0.0

        monkeypatch.setattr(harness, "measure_time", fake_measure)
        harness.test_cipher_performance("HELLO WORLD", "KEY", 7)

        assert seen == [
            ("RIJVS GSPVH", 7),
            ("HELLO WORLD", 7),
            ("SPWWZ HZCWO", 7),
            ("HELLO WORLD", 7),
            ("FBJJN VNQJA", 7),
            ("HELLO WORLD", 7),
        ]

    def test_serialises_with_camel_case_keys(self):
        results = harness.test_cipher_performance("HELLO", "KEY", 1)
        record = results[CipherId.VIGENERE].model_dump(by_alias=True)
        assert {"name", "encryptTime", "decryptTime", "encrypted",
                "decrypted", "complexity", "security"} == set(record)

    def test_empty_key_raises(self):
        with pytest.raises(ValueError):
            harness.test_cipher_performance("HELLO", "", 10)

    def test_zero_iterations_raises(self):
        with pytest.raises(ValueError):
            harness.test_cipher_performance("HELLO", "KEY", 0)


def _bench(name: str, enc: float, dec: float) -> BenchmarkResult:
    return BenchmarkResult(
        name=name, encrypt_time=enc, decrypt_time=dec, security=SecurityLevel.LOW
    )


class TestBuildComparison:
    def test_picks_fastest_per_operation(self):
        results = {
            CipherId.VIGENERE: _bench("V", 0.3, 0.1),
            CipherId.CAESAR: _bench("C", 0.1, 0.2),
            CipherId.SUBSTITUTION: _bench("S", 0.2, 0.3),
        }
        comparison = harness.build_comparison(results, 100, 11)
        assert comparison.fastest_encrypt is CipherId.CAESAR
        assert comparison.fastest_decrypt is CipherId.VIGENERE
        assert comparison.iterations == 100
        assert comparison.message_length == 11

    def test_tie_goes_to_first_measured(self):
        results = {c: _bench(c.value, 0.1, 0.1) for c in CipherId}
        comparison = harness.build_comparison(results, 1, 0)
        assert comparison.fastest_encrypt is CipherId.VIGENERE


class TestIndividualTest:
    def test_round_trip(self):
        outcome = harness.run_individual_test("attack at dawn", "lemon", "caesar")
        assert outcome.cipher is CipherId.CAESAR
        assert outcome.name == "Caesar Cipher"
        assert outcome.key == "LEMON"
        assert outcome.original == "ATTACK AT DAWN"
        assert outcome.encrypted == "MFFMOW MF PMIZ"
        assert outcome.round_trip_ok
        assert outcome.execution_time >= 0.0

    def test_unknown_cipher_raises(self):
        with pytest.raises(ValueError):
            harness.run_individual_test("HELLO", "KEY", "rot13")


class TestGenerateTestData:
    def test_draws_from_letters_and_space(self, rng):
        data = harness.generate_test_data(200, rng)
        assert len(data) <= 200
        assert set(data) <= set(harness.TEST_DATA_CHARS)
        assert data == data.strip()

    def test_zero_length(self):
        assert harness.generate_test_data(0) == ""

    def test_seeded_generator_is_reproducible(self):
        first = harness.generate_test_data(50, random.Random(9))
        second = harness.generate_test_data(50, random.Random(9))
        assert first == second

    def test_unseeded_output_is_valid(self):
        data = harness.generate_test_data(30)
        assert set(data) <= set(harness.TEST_DATA_CHARS)


def test_generate_random_test_ranges(rng):
    for _ in range(25):
        message, key = harness.generate_random_test(rng)
        assert len(message) <= 100
        assert set(message) <= set(harness.TEST_DATA_CHARS)
        assert 1 <= len(key) <= 10
        assert is_valid_key(key)

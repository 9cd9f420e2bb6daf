"""Tests for the CipherBenchEngine facade."""

from __future__ import annotations

import asyncio
import json
import random

import pytest

from cipherbench.core.engine import CipherBenchEngine
from cipherbench.core.models import CipherId, ComparisonResult, IndividualTestResult
from shared.logger import BenchLogger
from shared.models import Severity


def run(coro):
    return asyncio.run(coro)


class TestValidation:
    def test_normalises_text_and_key(self, engine):
        assert engine.validate_inputs("hello, world", "key") == ("HELLO, WORLD", "KEY")

    @pytest.mark.parametrize(
        ("text", "key"),
        [("", "KEY"), ("héllo", "KEY"), ("a@b", "KEY"), ("HELLO", ""), ("HELLO", "K3Y")],
    )
    def test_rejects_invalid_input(self, engine, text, key):
        with pytest.raises(ValueError):
            engine.validate_inputs(text, key)

    def test_iterations_default_and_bounds(self, engine):
        assert engine.resolve_iterations(None) == 1000
        assert engine.resolve_iterations(5) == 5
        with pytest.raises(ValueError):
            engine.resolve_iterations(0)
        with pytest.raises(ValueError):
            engine.resolve_iterations(engine.config.benchmark.max_iterations + 1)


class TestTransforms:
    def test_encrypt(self, engine):
        result = run(engine.encrypt("hello world", "key", "vigenere"))
        assert result.tool_name == "encrypt"
        assert result.metadata["output"] == "RIJVS GSPVH"
        assert result.metadata["input"] == "HELLO WORLD"
        assert result.end_time is not None
        assert result.duration_seconds >= 0

    def test_decrypt(self, engine):
        result = run(engine.decrypt("FBJJN", "KEY", CipherId.SUBSTITUTION))
        assert result.metadata["output"] == "HELLO"
        assert result.metadata["action"] == "decrypt"

    def test_caesar_multi_letter_key_reports_truncation(self, engine):
        result = run(engine.encrypt("HELLO", "CAT", "caesar"))
        assert result.metadata["output"] == "KHOOR"
        assert [f.title for f in result.findings] == ["Caesar Key Truncated"]

    def test_caesar_single_letter_key_has_no_findings(self, engine):
        result = run(engine.encrypt("HELLO", "C", "caesar"))
        assert result.findings == []

    def test_unknown_cipher(self, engine):
        with pytest.raises(ValueError):
            run(engine.encrypt("HELLO", "KEY", "playfair"))


class TestCompare:
    def test_metadata_is_a_comparison(self, engine):
        result = run(engine.compare("Attack at dawn", "lemon", iterations=5))
        comparison = ComparisonResult.model_validate(result.metadata)
        assert comparison.iterations == 5
        assert comparison.message_length == 14
        assert list(comparison.results) == list(CipherId)
        for bench in comparison.results.values():
            assert bench.decrypted == "ATTACK AT DAWN"

    def test_findings(self, engine):
        result = run(engine.compare("HELLO WORLD", "KEY", iterations=3))
        titles = [f.title for f in result.findings]
        assert titles[0].startswith("Fastest Encryption: ")
        assert titles[1].startswith("Fastest Decryption: ")
        assert "Caesar Cipher: Low Security" in titles
        assert not any(t.startswith("Round-Trip Mismatch") for t in titles)
        severities = {f.title: f.severity for f in result.findings}
        assert severities["Caesar Cipher: Low Security"] is Severity.HIGH
        assert severities["Substitution Cipher: Medium-High Security"] is Severity.LOW

    def test_summary(self, engine):
        result = run(engine.compare("HELLO", "KEY", iterations=2))
        assert "2 iterations" in result.summary
        assert result.target == "5 characters, key length 3"

    def test_invalid_iterations(self, engine):
        with pytest.raises(ValueError):
            run(engine.compare("HELLO", "KEY", iterations=0))


class TestIndividual:
    def test_round_trip_verified(self, engine):
        result = run(engine.individual_test("attack at dawn", "lemon", "substitution"))
        outcome = IndividualTestResult.model_validate(result.metadata)
        assert outcome.round_trip_ok
        assert outcome.original == "ATTACK AT DAWN"
        assert result.findings[0].title == "Round Trip Verified"


class TestHelpers:
    def test_random_test_uses_configured_ranges(self, engine):
        engine.config.benchmark.random_key_min = 3
        engine.config.benchmark.random_key_max = 3
        _, key = engine.random_test(random.Random(5))
        assert 1 <= len(key) <= 3

    def test_sample_data_default_length(self, engine):
        engine.config.benchmark.sample_length = 40
        assert len(engine.sample_data(rng=random.Random(1))) <= 40

    def test_substitution_alphabet(self, engine):
        assert engine.substitution_alphabet("KEY") == "KEYABCDFGHIJLMNOPQRSTUVWXZ"


def test_compare_logs_structured_summary(tmp_path, config):
    log_path = tmp_path / "engine.log"
    logger = BenchLogger(
        "engine", log_level="INFO", log_file=log_path, json_logs=True, console_output=False
    )
    engine = CipherBenchEngine(config, logger=logger)
    run(engine.compare("HELLO WORLD", "KEY", iterations=2))
    logger.close()

    entries = [json.loads(l) for l in log_path.read_text(encoding="utf-8").splitlines()]
    finished = [e for e in entries if e["message"] == "Comparison finished"]
    assert len(finished) == 1
    assert finished[0]["operation"] == "compare"
    context = finished[0]["context"]
    assert context["iterations"] == 2
    assert context["message_length"] == 11
    assert context["fastest_encrypt"] in {"vigenere", "caesar", "substitution"}


def test_soft_limit_warning_carries_length(tmp_path, config):
    log_path = tmp_path / "engine.log"
    logger = BenchLogger(
        "engine", log_level="WARNING", log_file=log_path, json_logs=True, console_output=False
    )
    engine = CipherBenchEngine(config, logger=logger)
    engine.validate_inputs("A" * 150, "KEY")
    logger.close()

    entry = json.loads(log_path.read_text(encoding="utf-8"))
    assert entry["level"] == "WARNING"
    assert entry["context"] == {"length": 150, "soft_limit": 100}

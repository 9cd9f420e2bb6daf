"""Shared fixtures for the CipherBench test suite."""

from __future__ import annotations

import random

import pytest
from click.testing import CliRunner

import shared.config
from shared.config import BenchConfig
from shared.logger import BenchLogger
from cipherbench.core.engine import CipherBenchEngine


@pytest.fixture(autouse=True)
def default_config_path(tmp_path, monkeypatch):
    """Point the implicit ``config.toml`` lookup at an empty temp directory."""
    path = tmp_path / "config.toml"
    monkeypatch.setattr(shared.config, "_DEFAULT_CONFIG_PATH", path)
    return path


@pytest.fixture
def config() -> BenchConfig:
    return BenchConfig()


@pytest.fixture
def engine(config: BenchConfig) -> CipherBenchEngine:
    logger = BenchLogger("test", console_output=False)
    return CipherBenchEngine(config, logger=logger)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()

"""
CipherBench Configuration Management
=====================================

Centralized configuration for the CipherBench toolkit using Python
dataclasses and TOML-based persistence.

Configuration is kept separate from code so that benchmark defaults,
random test-input ranges, and logging behaviour can be tuned without
touching the cipher implementations.

References:
    - Wiggins, A. (2011). The Twelve-Factor App. https://12factor.net/
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[no-redef]


# ---------------------------------------------------------------------------
# Default configuration file path relative to the project root
# ---------------------------------------------------------------------------
_DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent / "config.toml"


# ========================== Tool-Specific Configs ==========================


@dataclass(frozen=False, slots=True)
class BenchmarkConfig:
    """Configuration for the cipher benchmark harness.

    Controls iteration counts for the timing loops, the size of generated
    sample data, and the ranges used when drawing random test inputs.
    """

    # Timing loop parameters
    default_iterations: int = 1000
    max_iterations: int = 100_000

    # Sample data parameters
    sample_length: int = 100
    random_message_min: int = 50
    random_message_max: int = 100
    random_key_min: int = 5
    random_key_max: int = 10

    # Soft display limit; longer texts are accepted with a warning
    text_soft_limit: int = 100
    default_cipher: str = "vigenere"


# =========================== Global Settings ===============================


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Global settings shared across CipherBench modules.

    Controls logging verbosity, log destinations and the default output
    directory for generated reports.
    """

    log_level: str = "WARNING"
    log_file: str | None = None
    log_json: bool = False
    output_dir: str = "output"
    debug: bool = False


# =========================== Master Config =================================


@dataclass(frozen=False, slots=True)
class BenchConfig:
    """Master configuration aggregating global and benchmark settings.

    Usage:
        >>> config = BenchConfig.load()                  # from default path
        >>> config = BenchConfig.load("custom.toml")     # from custom path
        >>> print(config.benchmark.default_iterations)
        1000
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    benchmark: BenchmarkConfig = field(default_factory=BenchmarkConfig)

    # ------------------------------------------------------------------ #
    #  TOML Loading
    # ------------------------------------------------------------------ #

    @classmethod
    def load(cls, path: str | Path | None = None) -> BenchConfig:
        """Load configuration from a TOML file.

        If *path* is ``None`` the loader looks for ``config.toml`` in the
        project root.  Missing keys fall back to dataclass defaults.

        Args:
            path: Filesystem path to a TOML configuration file.
                  Defaults to ``<project_root>/config.toml``.

        Returns:
            A fully-populated :class:`BenchConfig` instance.

        Raises:
            FileNotFoundError: If the specified path does not exist
                *and* was explicitly provided by the caller.
        """
        config_path = Path(path) if path is not None else _DEFAULT_CONFIG_PATH

        if not config_path.exists():
            if path is not None:
                raise FileNotFoundError(
                    f"Configuration file not found: {config_path}"
                )
            return cls()

        with open(config_path, "rb") as fh:
            raw: dict[str, Any] = tomllib.load(fh)

        return cls(
            global_settings=cls._build_section(GlobalConfig, raw.get("global", {})),
            benchmark=cls._build_section(BenchmarkConfig, raw.get("benchmark", {})),
        )

    # ------------------------------------------------------------------ #
    #  Internal helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _build_section(cls: type, data: dict[str, Any]) -> Any:
        """Instantiate a dataclass *cls* using only the keys it declares.

        Unknown keys in the TOML source are ignored.
        """
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}  # type: ignore[attr-defined]
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered)

"""
CipherBench Shared Data Models
===============================

Pydantic v2 models shared by the CipherBench engine, console output and
report generators.  :class:`RunResult` is the envelope every engine
operation returns; :class:`Finding` carries individual observations such
as "fastest encryption" or a cipher's known weaknesses.

References:
    - SARIF v2.1.0 Specification (OASIS, 2020).
    - Pydantic v2 documentation. https://docs.pydantic.dev/latest/
"""

from __future__ import annotations

import datetime as _dt
import json as _json
from enum import Enum
from typing import Any, Optional

from pydantic import (
    BaseModel,
    Field,
    ConfigDict,
    field_validator,
)


def _utcnow() -> _dt.datetime:
    return _dt.datetime.now(_dt.timezone.utc)


# ========================== Enumerations ===================================


class Severity(str, Enum):
    """Finding severity level.

    Classical ciphers offer no real protection, so the scale is used to
    rank how quickly each cipher falls to textbook cryptanalysis.

    Attributes:
        HIGH:   Broken by exhaustive search in seconds.
        MEDIUM: Broken by frequency analysis with modest effort.
        LOW:    Requires more ciphertext or a smarter attack.
        INFO:   Informational observation (timings, round-trip checks).
    """

    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"
    INFO = "INFO"


# ========================== Core Models ====================================


class Finding(BaseModel):
    """A single observation produced by a CipherBench operation.

    Attributes:
        severity:       Qualitative severity rating.
        title:          Short, descriptive finding title.
        description:    Detailed explanation of the finding.
        evidence:       Raw data supporting the finding.
        recommendation: Suggested follow-up.
        references:     External reference citations.
    """

    model_config = ConfigDict(
        str_strip_whitespace=True,
        validate_assignment=True,
        extra="ignore",
    )

    severity: Severity = Field(
        ...,
        description="Severity level of this finding",
    )
    title: str = Field(
        ...,
        min_length=1,
        max_length=256,
        description="Short descriptive title",
    )
    description: str = Field(
        ...,
        min_length=1,
        description="Detailed explanation",
    )
    evidence: str = Field(
        default="",
        description="Supporting evidence or raw data",
    )
    recommendation: str = Field(
        default="",
        description="Suggested follow-up",
    )
    references: list[str] = Field(
        default_factory=list,
        description="Academic or technical references",
    )

    @field_validator("evidence", mode="before")
    @classmethod
    def _coerce_evidence(cls, v: Any) -> str:
        """Auto-convert non-string evidence (dict, list) to JSON string."""
        if isinstance(v, str):
            return v
        if isinstance(v, (dict, list)):
            return _json.dumps(v, ensure_ascii=False, default=str)
        return str(v)


class RunResult(BaseModel):
    """Aggregated result of a single CipherBench operation.

    Bundles timing information, findings and the operation-specific
    payload (stored in *metadata*) into one serialisable object suitable
    for report generation.

    Attributes:
        tool_name:  Name of the operation that produced the result.
        target:     Short description of the input that was processed.
        start_time: UTC timestamp when the operation started.
        end_time:   UTC timestamp when the operation ended.
        findings:   List of individual findings.
        summary:    Human-readable summary text.
        metadata:   Operation payload (model_dump of the domain result).
    """

    model_config = ConfigDict(
        validate_assignment=True,
        extra="ignore",
    )

    tool_name: str = Field(
        ...,
        min_length=1,
        description="Operation name",
    )
    target: str = Field(
        ...,
        min_length=1,
        description="Processed input description",
    )
    start_time: _dt.datetime = Field(
        default_factory=_utcnow,
        description="Operation start timestamp (UTC)",
    )
    end_time: Optional[_dt.datetime] = Field(
        default=None,
        description="Operation end timestamp (UTC)",
    )
    findings: list[Finding] = Field(
        default_factory=list,
        description="List of findings",
    )
    summary: str = Field(
        default="",
        description="Human-readable result summary",
    )
    metadata: dict[str, Any] = Field(
        default_factory=dict,
        description="Operation payload",
    )

    # ------------------------------------------------------------------ #
    #  Derived properties
    # ------------------------------------------------------------------ #

    @property
    def duration_seconds(self) -> float | None:
        """Elapsed time in seconds, or ``None`` if *end_time* is unset."""
        if self.end_time is None:
            return None
        return (self.end_time - self.start_time).total_seconds()

    @property
    def severity_counts(self) -> dict[str, int]:
        """Count of findings grouped by severity."""
        counts: dict[str, int] = {s.value: 0 for s in Severity}
        for finding in self.findings:
            counts[finding.severity.value] += 1
        return counts

    @property
    def finding_count(self) -> int:
        """Total number of findings."""
        return len(self.findings)

    # ------------------------------------------------------------------ #
    #  Mutating helpers
    # ------------------------------------------------------------------ #

    def add_finding(self, finding: Finding) -> None:
        """Append a finding to the result."""
        self.findings.append(finding)

    def finalize(self, summary: str | None = None) -> RunResult:
        """Mark the operation as complete by setting *end_time* and *summary*.

        If *summary* is ``None`` a default is generated from severity counts.

        Returns:
            ``self`` for fluent chaining.
        """
        self.end_time = _utcnow()
        if summary is not None:
            self.summary = summary
        else:
            parts = [
                f"{sev}: {cnt}" for sev, cnt in self.severity_counts.items() if cnt > 0
            ]
            self.summary = (
                f"{self.tool_name} complete. "
                f"Findings: {len(self.findings)} "
                f"({', '.join(parts) if parts else 'none'})"
            )
        return self

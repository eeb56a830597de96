"""Exit-code policy — map the worst reported issue severity to a CLI exit code.

Philosophy:
  - Deterministic: same report, same exit code
  - Monotonic: a worse severity never produces a lower exit code
  - Unknown severities are fail-safe (treated as ERROR)

Every ``resharper-tools`` command exits with an :class:`ExitCode`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Literal

from resharper_globaltools.model.report import InspectionReport


class ExitCode(IntEnum):
    """Process exit status of the CLI."""

    SUCCESS = 0
    # Issues reported at or above the --fail-on threshold, or
    # --throw-on-violations tripped.
    VIOLATION = 1
    # Usage error, tool not found, tool failed, unreadable report or settings.
    ERROR = 2


Severity = Literal["NONE", "INFO", "HINT", "SUGGESTION", "WARNING", "ERROR"]


@dataclass(frozen=True)
class ExitCodePolicy:
    """Threshold for severity → exit-code mapping."""

    ok: int = ExitCode.SUCCESS
    violation: int = ExitCode.VIOLATION
    # Minimum severity that counts as a violation
    fail_at: Severity = "WARNING"


DEFAULT_POLICY = ExitCodePolicy()


_SEV_RANK: dict[Severity, int] = {
    "NONE": 0,
    "INFO": 1,
    "HINT": 2,
    "SUGGESTION": 3,
    "WARNING": 4,
    "ERROR": 5,
}


def normalize_severity(value: str | None) -> Severity:
    """Canonicalize a raw severity string; unknown values become ``ERROR``."""
    if not value:
        return "NONE"
    v = value.strip().upper()
    if v in _SEV_RANK:
        return v  # type: ignore[return-value]
    return "ERROR"


def worst_severity(report: InspectionReport) -> Severity:
    """Highest severity among *report*'s issues, ``"NONE"`` when clean."""
    worst: Severity = "NONE"
    for issue in report.issues:
        sev = normalize_severity(report.severity_of(issue))
        if _SEV_RANK[sev] > _SEV_RANK[worst]:
            worst = sev
    return worst


def exit_code_for_worst_severity(
    worst: str | None,
    *,
    policy: ExitCodePolicy = DEFAULT_POLICY,
) -> int:
    sev = normalize_severity(worst)
    if sev != "NONE" and _SEV_RANK[sev] >= _SEV_RANK[policy.fail_at]:
        return policy.violation
    return policy.ok


def exit_code_for_report(
    report: InspectionReport,
    *,
    policy: ExitCodePolicy = DEFAULT_POLICY,
) -> int:
    return exit_code_for_worst_severity(worst_severity(report), policy=policy)

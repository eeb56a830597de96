"""InspectionReport — the parsed content of an ``inspectcode`` XML report."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field

# Severity reported for issues whose ``TypeId`` has no ``IssueType`` entry.
DEFAULT_ISSUE_SEVERITY = "WARNING"


@dataclass(frozen=True, slots=True)
class IssueType:
    """One ``/Report/IssueTypes/IssueType`` element."""

    id: str
    category: str = ""
    description: str = ""
    severity: str = DEFAULT_ISSUE_SEVERITY


@dataclass(frozen=True, slots=True)
class Issue:
    """One ``/Report/Issues/Project/Issue`` element."""

    type_id: str
    project: str
    file: str
    line: int
    message: str
    offset: str = ""


@dataclass(frozen=True, slots=True)
class InspectionReport:
    """Immutable view of an inspection report.

    ``issue_types`` is keyed by ``IssueType.id``.
    """

    issue_types: dict[str, IssueType] = field(default_factory=dict)
    issues: tuple[Issue, ...] = ()
    tools_version: str = ""

    @property
    def has_violations(self) -> bool:
        return bool(self.issues)

    def severity_of(self, issue: Issue) -> str:
        issue_type = self.issue_types.get(issue.type_id)
        if issue_type is None:
            return DEFAULT_ISSUE_SEVERITY
        return issue_type.severity

    def counts_by_severity(self) -> dict[str, int]:
        """Issue count per severity, e.g. ``{"ERROR": 1, "WARNING": 3}``."""
        return dict(Counter(self.severity_of(i) for i in self.issues))

    # ── serialisation ───────────────────────────────────────────────

    def to_dict(self) -> dict:
        return {
            "tools_version": self.tools_version,
            "counts": {
                "issues_total": len(self.issues),
                "by_severity": self.counts_by_severity(),
            },
            "issues": [
                {
                    "type_id": i.type_id,
                    "severity": self.severity_of(i),
                    "project": i.project,
                    "file": i.file,
                    "line": i.line,
                    "offset": i.offset,
                    "message": i.message,
                }
                for i in self.issues
            ],
        }

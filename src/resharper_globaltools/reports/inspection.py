"""Read ``inspectcode`` XML reports.

Layout consumed (all other elements are ignored)::

    <Report ToolsVersion="...">
      <IssueTypes>
        <IssueType Id="..." Category="..." Description="..." Severity="WARNING"/>
      </IssueTypes>
      <Issues>
        <Project Name="...">
          <Issue TypeId="..." File="..." Offset="..." Line="12" Message="..."/>
        </Project>
      </Issues>
    </Report>

The report comes from an external process, so it is parsed with
``defusedxml`` rather than the bare stdlib parser.
"""

from __future__ import annotations

from pathlib import Path

import defusedxml.ElementTree as ET
from defusedxml import DefusedXmlException

from resharper_globaltools.errors import ReportParseError
from resharper_globaltools.model.report import (
    DEFAULT_ISSUE_SEVERITY,
    InspectionReport,
    Issue,
    IssueType,
)

VIOLATION_SUMMARY_PREFIX = "Code Inspection Error(s) Located."


def _to_int(raw: str | None) -> int:
    try:
        return int(raw) if raw else 0
    except ValueError:
        return 0


def parse_report(path: Path | str) -> InspectionReport:
    """Parse the report at *path*.

    Raises
    ------
    ReportParseError
        If the file cannot be opened or is not well-formed XML.
    """
    report_path = Path(path)
    try:
        with report_path.open("rb") as fh:
            root = ET.parse(fh).getroot()
    except OSError as exc:
        raise ReportParseError(report_path, exc.strerror or str(exc)) from exc
    except (ET.ParseError, DefusedXmlException) as exc:
        raise ReportParseError(report_path, str(exc)) from exc

    issue_types: dict[str, IssueType] = {}
    for node in root.iterfind("./IssueTypes/IssueType"):
        type_id = node.get("Id", "")
        issue_types[type_id] = IssueType(
            id=type_id,
            category=node.get("Category", ""),
            description=node.get("Description", ""),
            severity=(node.get("Severity") or DEFAULT_ISSUE_SEVERITY).upper(),
        )

    issues: list[Issue] = []
    for project in root.iterfind("./Issues/Project"):
        project_name = project.get("Name", "")
        for node in project.iterfind("Issue"):
            issues.append(
                Issue(
                    type_id=node.get("TypeId", ""),
                    project=project_name,
                    file=node.get("File", ""),
                    line=_to_int(node.get("Line")),
                    message=node.get("Message", ""),
                    offset=node.get("Offset", ""),
                )
            )

    return InspectionReport(
        issue_types=issue_types,
        issues=tuple(issues),
        tools_version=root.get("ToolsVersion", ""),
    )


def format_violation_summary(report: InspectionReport) -> str:
    """Render the single log message emitted when a report has violations."""
    lines = [f"{VIOLATION_SUMMARY_PREFIX} {len(report.issues)} issue(s) reported."]
    for issue in report.issues:
        lines.append(
            f"  [{report.severity_of(issue)}] {issue.file}:{issue.line} "
            f"({issue.project}) {issue.message}"
        )
    return "\n".join(lines)

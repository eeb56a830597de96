"""Exception types raised by the ReSharper tool runners.

Messages are fixed literal strings; build scripts and CI log scrapers match on
them, so do not reword them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from resharper_globaltools.model.report import InspectionReport


class ArgumentNullError(ValueError):
    """Raised when a required argument is ``None``."""

    def __init__(self, param_name: str) -> None:
        self.param_name = param_name
        super().__init__(f"Value cannot be null. (Parameter '{param_name}')")


class ReSharperToolError(RuntimeError):
    """Base class for failures while running a ReSharper command-line tool."""


class ToolNotFoundError(ReSharperToolError):
    def __init__(self, tool_name: str) -> None:
        self.tool_name = tool_name
        super().__init__(f"{tool_name}: Could not locate executable.")


class ProcessNotStartedError(ReSharperToolError):
    def __init__(self, tool_name: str) -> None:
        self.tool_name = tool_name
        super().__init__(f"{tool_name}: Process was not started.")


class ProcessExitError(ReSharperToolError):
    """The tool exited with a nonzero exit code."""

    def __init__(self, tool_name: str, exit_code: int) -> None:
        self.tool_name = tool_name
        self.exit_code = exit_code
        super().__init__(
            f"{tool_name}: Process returned an error (exit code {exit_code})."
        )


class ViolationsFoundError(ReSharperToolError):
    """Raised instead of logging when the settings ask to fail on violations."""

    def __init__(self, report: InspectionReport) -> None:
        self.report = report
        super().__init__("Code Inspection Violations found in code base.")


class ReportParseError(ReSharperToolError):
    def __init__(self, path: object, detail: str) -> None:
        self.path = path
        super().__init__(f"Unable to parse inspection report {path}: {detail}")


class SettingsFileError(ReSharperToolError):
    """A settings file could not be read or failed schema validation."""

    def __init__(self, path: object, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"{path}: {detail}")

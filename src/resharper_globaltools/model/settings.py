"""Settings dataclasses for InspectCode and CleanupCode runs.

Every field is optional. ``None`` (or an empty collection / ``False``) means
"omit the corresponding flag"; tri-state booleans such as
:attr:`InspectCodeSettings.build` emit one of two flags only when set.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

from . import InspectCodeSeverity, ReSharperSettingsLayer, ReSharperVerbosity

PathLike = Union[str, Path]


@dataclass
class ReSharperSettings:
    """Options shared by every ReSharper command-line tool."""

    # Tool / process
    tool_path: PathLike | None = None
    working_directory: PathLike | None = None
    environment_variables: dict[str, str] = field(default_factory=dict)
    use_x86_tool: bool = False

    # Common tool flags
    caches_home: PathLike | None = None
    extensions: list[str] = field(default_factory=list)
    debug: bool = False
    no_buildin_settings: bool = False
    disabled_settings_layers: list[ReSharperSettingsLayer] = field(default_factory=list)
    profile: PathLike | None = None
    verbosity: ReSharperVerbosity | None = None
    msbuild_properties: dict[str, str] = field(default_factory=dict)


@dataclass
class InspectCodeSettings(ReSharperSettings):
    """Settings for ``inspectcode``.

    ``profile`` is the path to a ``.DotSettings`` file.
    """

    output_file: PathLike | None = None
    build: bool | None = None
    solution_wide_analysis: bool | None = None
    project_filter: str | None = None
    severity: InspectCodeSeverity | None = None
    throw_exception_on_finding_violations: bool = False
    skip_output_analysis: bool = False


@dataclass
class CleanupCodeSettings(ReSharperSettings):
    """Settings for ``cleanupcode``.

    ``profile`` is the *name* of a cleanup profile (e.g.
    ``"Built-in: Full Cleanup"``), not a path. The ``.DotSettings`` file
    goes in ``settings_file``.
    """

    settings_file: PathLike | None = None
    include: list[str] = field(default_factory=list)
    exclude: list[str] = field(default_factory=list)

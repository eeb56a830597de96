"""CleanupCode runner — reformat and clean a solution with ``cleanupcode``."""

from __future__ import annotations

from pathlib import Path

from resharper_globaltools.core.arguments import ArgumentList, PathLike, make_absolute
from resharper_globaltools.core.process import ProcessResult
from resharper_globaltools.errors import ArgumentNullError
from resharper_globaltools.model import VERBOSITY_FLAGS
from resharper_globaltools.model.settings import CleanupCodeSettings
from resharper_globaltools.runners.base import ReSharperTool, append_shared_arguments


def build_cleanup_arguments(
    solution: PathLike,
    settings: CleanupCodeSettings,
    working_directory: Path,
) -> ArgumentList:
    """Map *settings* to the ``cleanupcode`` command line."""
    args = ArgumentList()
    append_shared_arguments(args, settings, working_directory)

    if settings.settings_file is not None:
        args.append_switch_quoted(
            "--settings", make_absolute(settings.settings_file, working_directory)
        )

    # A profile name such as "Built-in: Full Cleanup", not a path.
    if settings.profile:
        args.append_switch_quoted("--profile", str(settings.profile))

    if settings.include:
        args.append_switch_quoted("--include", ";".join(settings.include))

    if settings.exclude:
        args.append_switch_quoted("--exclude", ";".join(settings.exclude))

    if settings.verbosity is not None:
        args.append_switch("--verbosity", VERBOSITY_FLAGS[settings.verbosity])

    args.append_quoted(make_absolute(solution, working_directory))
    return args


class CleanupCodeRunner(ReSharperTool):
    """Runs ReSharper's CleanupCode."""

    tool_name = "CleanupCode"
    executable_stem = "cleanupcode"
    settings_class = CleanupCodeSettings

    def prepare(
        self,
        solution: PathLike | None,
        settings: CleanupCodeSettings | None = None,
    ) -> tuple[Path, ArgumentList]:
        if solution is None:
            raise ArgumentNullError("solution")
        settings = settings if settings is not None else CleanupCodeSettings()
        executable = self.locate(settings)
        arguments = build_cleanup_arguments(
            solution, settings, self.resolve_working_directory(settings)
        )
        return executable, arguments

    def run(
        self,
        solution: PathLike | None,
        settings: CleanupCodeSettings | None = None,
    ) -> ProcessResult:
        settings = settings if settings is not None else CleanupCodeSettings()
        executable, arguments = self.prepare(solution, settings)
        return self.run_process(executable, arguments, settings)

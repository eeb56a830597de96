"""InspectCode runner — build arguments, run ``inspectcode``, analyze the report.

Usage::

    runner = InspectCodeRunner()
    report = runner.run("src/App.sln", InspectCodeSettings(output_file="build/inspect.xml"))
"""

from __future__ import annotations

from pathlib import Path

from resharper_globaltools.core.arguments import ArgumentList, PathLike, make_absolute
from resharper_globaltools.errors import ArgumentNullError, ViolationsFoundError
from resharper_globaltools.model import SEVERITY_FLAGS, VERBOSITY_FLAGS
from resharper_globaltools.model.report import InspectionReport
from resharper_globaltools.model.settings import InspectCodeSettings
from resharper_globaltools.reports.inspection import format_violation_summary, parse_report
from resharper_globaltools.runners.base import ReSharperTool, append_shared_arguments


def build_inspect_arguments(
    solution: PathLike,
    settings: InspectCodeSettings,
    working_directory: Path,
) -> ArgumentList:
    """Map *settings* to the ``inspectcode`` command line.

    Order is fixed: shared flags, profile, verbosity, build, swea, project,
    severity, output, then the solution.
    """
    args = ArgumentList()
    append_shared_arguments(args, settings, working_directory)

    if settings.profile is not None:
        args.append_switch_quoted(
            "--profile", make_absolute(settings.profile, working_directory)
        )

    if settings.verbosity is not None:
        args.append_switch("--verbosity", VERBOSITY_FLAGS[settings.verbosity])

    # Unset means build, matching the tool's own default.
    args.append("--no-build" if settings.build is False else "--build")

    if settings.solution_wide_analysis is not None:
        args.append("--swea" if settings.solution_wide_analysis else "--no-swea")

    if settings.project_filter:
        args.append_switch_quoted("--project", settings.project_filter)

    if settings.severity is not None:
        args.append_switch("--severity", SEVERITY_FLAGS[settings.severity])

    if settings.output_file is not None:
        args.append_switch_quoted(
            "--output", make_absolute(settings.output_file, working_directory)
        )

    args.append_quoted(make_absolute(solution, working_directory))
    return args


class InspectCodeRunner(ReSharperTool):
    """Runs ReSharper's InspectCode."""

    tool_name = "InspectCode"
    executable_stem = "inspectcode"
    settings_class = InspectCodeSettings

    def prepare(
        self,
        solution: PathLike | None,
        settings: InspectCodeSettings | None = None,
    ) -> tuple[Path, ArgumentList]:
        """Locate the tool and build its arguments without running anything."""
        if solution is None:
            raise ArgumentNullError("solution")
        settings = settings if settings is not None else InspectCodeSettings()
        executable = self.locate(settings)
        arguments = build_inspect_arguments(
            solution, settings, self.resolve_working_directory(settings)
        )
        return executable, arguments

    def run(
        self,
        solution: PathLike | None,
        settings: InspectCodeSettings | None = None,
    ) -> InspectionReport | None:
        """Inspect *solution*.

        Returns the parsed report when output analysis ran, else ``None``.

        Raises
        ------
        ArgumentNullError
            If *solution* is ``None``.
        ViolationsFoundError
            If the report has issues and
            ``settings.throw_exception_on_finding_violations`` is set.
        """
        settings = settings if settings is not None else InspectCodeSettings()
        executable, arguments = self.prepare(solution, settings)
        self.run_process(executable, arguments, settings)

        if settings.output_file is None or settings.skip_output_analysis:
            return None

        output = make_absolute(settings.output_file, self.resolve_working_directory(settings))
        return self.analyze_output(output, settings)

    def analyze_output(
        self, output_file: PathLike, settings: InspectCodeSettings
    ) -> InspectionReport:
        report = parse_report(output_file)
        if not report.has_violations:
            self.log.info("Code inspection found no issues.")
            return report

        if settings.throw_exception_on_finding_violations:
            raise ViolationsFoundError(report)

        self.log.error(format_violation_summary(report))
        return report

"""
resharper_globaltools.api
=========================

Programmatic entrypoints for build scripts.

Goals:
  - No argparse / CLI dependencies
  - One call per tool run; nothing outlives the call
  - Failures surface as typed exceptions from ``resharper_globaltools.errors``

Usage::

    from resharper_globaltools.api import inspect_code, cleanup_code
    from resharper_globaltools.model.settings import InspectCodeSettings

    report = inspect_code("./src/MySolution.sln", InspectCodeSettings(
        output_file="build/inspect.xml",
        throw_exception_on_finding_violations=True,
    ))
    cleanup_code("./src/MySolution.sln")
    inspect_code_from_config("./src/inspectcode.config")
"""

from __future__ import annotations

import logging
from pathlib import Path

from resharper_globaltools.core.locator import ToolLocator
from resharper_globaltools.core.process import ProcessResult, ProcessRunner
from resharper_globaltools.model.report import InspectionReport
from resharper_globaltools.model.settings import CleanupCodeSettings, InspectCodeSettings
from resharper_globaltools.runners.cleanup_code import CleanupCodeRunner
from resharper_globaltools.runners.inspect_code import InspectCodeRunner


def _runner_kwargs(
    process_runner: ProcessRunner | None,
    locator: ToolLocator | None,
    working_directory: str | Path | None,
    platform: str | None,
    log: logging.Logger | None,
) -> dict:
    return {
        "process_runner": process_runner,
        "locator": locator,
        "working_directory": working_directory,
        "platform": platform,
        "log": log,
    }


# ── InspectCode ─────────────────────────────────────────────────────


def inspect_code(
    solution: str | Path | None,
    settings: InspectCodeSettings | None = None,
    *,
    process_runner: ProcessRunner | None = None,
    locator: ToolLocator | None = None,
    working_directory: str | Path | None = None,
    platform: str | None = None,
    log: logging.Logger | None = None,
) -> InspectionReport | None:
    """Analyze *solution* with ReSharper's InspectCode.

    Parameters
    ----------
    solution:
        Path to the ``.sln`` file, relative to *working_directory*.
    settings:
        Tool options; defaults to an empty :class:`InspectCodeSettings`.
    process_runner, locator, working_directory, platform, log:
        Host-service overrides (see :class:`~resharper_globaltools.runners.base.ReSharperTool`).

    Returns
    -------
    The parsed report when ``settings.output_file`` is set and output analysis
    was not skipped, otherwise ``None``.

    Raises
    ------
    ArgumentNullError
        If *solution* is ``None``.
    ToolNotFoundError, ProcessNotStartedError, ProcessExitError
        If the tool cannot be found, started, or exits nonzero.
    ViolationsFoundError
        If violations were found and
        ``settings.throw_exception_on_finding_violations`` is set.
    """
    runner = InspectCodeRunner(
        **_runner_kwargs(process_runner, locator, working_directory, platform, log)
    )
    return runner.run(solution, settings)


def inspect_code_from_config(
    config_file: str | Path | None,
    *,
    process_runner: ProcessRunner | None = None,
    locator: ToolLocator | None = None,
    working_directory: str | Path | None = None,
    platform: str | None = None,
    log: logging.Logger | None = None,
) -> ProcessResult:
    """Run InspectCode with all options taken from *config_file*."""
    runner = InspectCodeRunner(
        **_runner_kwargs(process_runner, locator, working_directory, platform, log)
    )
    return runner.run_from_config(config_file)


# ── CleanupCode ─────────────────────────────────────────────────────


def cleanup_code(
    solution: str | Path | None,
    settings: CleanupCodeSettings | None = None,
    *,
    process_runner: ProcessRunner | None = None,
    locator: ToolLocator | None = None,
    working_directory: str | Path | None = None,
    platform: str | None = None,
    log: logging.Logger | None = None,
) -> ProcessResult:
    """Clean up *solution* with ReSharper's CleanupCode."""
    runner = CleanupCodeRunner(
        **_runner_kwargs(process_runner, locator, working_directory, platform, log)
    )
    return runner.run(solution, settings)


def cleanup_code_from_config(
    config_file: str | Path | None,
    *,
    process_runner: ProcessRunner | None = None,
    locator: ToolLocator | None = None,
    working_directory: str | Path | None = None,
    platform: str | None = None,
    log: logging.Logger | None = None,
) -> ProcessResult:
    """Run CleanupCode with all options taken from *config_file*."""
    runner = CleanupCodeRunner(
        **_runner_kwargs(process_runner, locator, working_directory, platform, log)
    )
    return runner.run_from_config(config_file)

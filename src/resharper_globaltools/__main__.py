"""CLI entry-point for resharper_globaltools.

Usage:
    python -m resharper_globaltools inspect <solution> [--settings FILE] [--output FILE] [...]
    python -m resharper_globaltools inspect --config <inspectcode.config>
    python -m resharper_globaltools cleanup <solution> [--settings FILE] [--profile NAME] [...]
    python -m resharper_globaltools cleanup --config <cleanupcode.config>
    python -m resharper_globaltools report <report.xml> [--json] [--fail-on LEVEL]

Exit codes follow ``policy.exit_codes.ExitCode``: 0 success, 1 violations,
2 usage / tool / process error.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import fields
from pathlib import Path
from typing import Any

from resharper_globaltools import __version__
from resharper_globaltools.core.arguments import ArgumentList
from resharper_globaltools.core.config import load_settings
from resharper_globaltools.errors import (
    ReSharperToolError,
    ViolationsFoundError,
)
from resharper_globaltools.model import (
    InspectCodeSeverity,
    ReSharperSettingsLayer,
    ReSharperVerbosity,
    parse_enum,
)
from resharper_globaltools.model.report import InspectionReport
from resharper_globaltools.model.settings import (
    CleanupCodeSettings,
    InspectCodeSettings,
    ReSharperSettings,
)
from resharper_globaltools.policy.exit_codes import (
    DEFAULT_POLICY,
    ExitCode,
    ExitCodePolicy,
    exit_code_for_report,
    worst_severity,
)
from resharper_globaltools.reports.inspection import parse_report
from resharper_globaltools.runners.cleanup_code import CleanupCodeRunner
from resharper_globaltools.runners.inspect_code import InspectCodeRunner
from resharper_globaltools.utils.json_norm import stable_json_dumps

LOG_LEVEL_ENV = "RESHARPER_TOOLS_LOG_LEVEL"

_SEVERITY_CHOICES = [m.name.lower() for m in InspectCodeSeverity]
_VERBOSITY_CHOICES = [m.name.lower() for m in ReSharperVerbosity]


# ── argument types ──────────────────────────────────────────────────


def _severity(raw: str) -> InspectCodeSeverity:
    try:
        return parse_enum(InspectCodeSeverity, raw)  # type: ignore[return-value]
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _verbosity(raw: str) -> ReSharperVerbosity:
    try:
        return parse_enum(ReSharperVerbosity, raw)  # type: ignore[return-value]
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _layer(raw: str) -> ReSharperSettingsLayer:
    try:
        return parse_enum(ReSharperSettingsLayer, raw)  # type: ignore[return-value]
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _property(raw: str) -> tuple[str, str]:
    key, sep, value = raw.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {raw!r}")
    return key, value


# ── parser ──────────────────────────────────────────────────────────


def _add_common_args(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "solution",
        nargs="?",
        type=Path,
        default=None,
        help="Solution (.sln) to process.",
    )
    p.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Run from a tool config file instead of a solution (all other flags ignored).",
    )
    p.add_argument(
        "--settings",
        dest="settings_path",
        type=Path,
        default=None,
        help="YAML or JSON settings file; command-line flags override it.",
    )
    p.add_argument("--tool-path", type=Path, default=None, help="Explicit tool executable.")
    p.add_argument("--working-directory", type=Path, default=None)
    p.add_argument("--x86", dest="use_x86_tool", action="store_true", default=None,
                   help="Use the x86 executable (Windows only).")
    p.add_argument("--caches-home", type=Path, default=None)
    p.add_argument("-x", "--extension", dest="extensions", action="append", default=None,
                   help="ReSharper extension id (repeatable).")
    p.add_argument("--debug", action="store_true", default=None)
    p.add_argument("--no-buildin-settings", action="store_true", default=None)
    p.add_argument("--disable-settings-layer", dest="disabled_settings_layers",
                   action="append", type=_layer, default=None,
                   help="Settings layer to disable (repeatable), e.g. GlobalAll.")
    p.add_argument("--verbosity", type=_verbosity, default=None,
                   help=f"One of: {', '.join(_VERBOSITY_CHOICES)}.")
    p.add_argument("--property", dest="msbuild_properties", action="append",
                   type=_property, default=None, metavar="KEY=VALUE",
                   help="MSBuild property (repeatable).")
    p.add_argument("--dry-run", action="store_true", default=False,
                   help="Print the command line without running the tool.")
    p.add_argument("-v", "--verbose", action="store_true", default=False)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="resharper-tools",
        description="Run ReSharper InspectCode / CleanupCode.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    sub = p.add_subparsers(dest="command")

    # ── inspect ─────────────────────────────────────────────────────
    insp = sub.add_parser("inspect", help="Run InspectCode on a solution.")
    _add_common_args(insp)
    insp.add_argument("--profile", type=Path, default=None,
                      help="Path to a .DotSettings profile.")
    insp.add_argument("--output", dest="output_file", type=Path, default=None,
                      help="Report file to write (and analyze).")
    build = insp.add_mutually_exclusive_group()
    build.add_argument("--build", dest="build", action="store_const", const=True, default=None)
    build.add_argument("--no-build", dest="build", action="store_const", const=False)
    swea = insp.add_mutually_exclusive_group()
    swea.add_argument("--swea", dest="solution_wide_analysis", action="store_const",
                      const=True, default=None)
    swea.add_argument("--no-swea", dest="solution_wide_analysis", action="store_const",
                      const=False)
    insp.add_argument("--project", dest="project_filter", default=None,
                      help="Project name filter (wildcards allowed).")
    insp.add_argument("--severity", type=_severity, default=None,
                      help=f"One of: {', '.join(_SEVERITY_CHOICES)}.")
    insp.add_argument("--throw-on-violations", dest="throw_exception_on_finding_violations",
                      action="store_true", default=None,
                      help="Fail (exit 1) when the report lists any issue.")
    insp.add_argument("--skip-output-analysis", action="store_true", default=None)
    insp.add_argument("--fail-on", type=_severity, default=None,
                      help="Exit 1 when an issue at or above this severity is reported.")
    insp.add_argument("--json", dest="json_out", action="store_true", default=False,
                      help="Print the analyzed report as JSON to stdout.")

    # ── cleanup ─────────────────────────────────────────────────────
    clean = sub.add_parser("cleanup", help="Run CleanupCode on a solution.")
    _add_common_args(clean)
    clean.add_argument("--profile", default=None,
                       help='Cleanup profile name, e.g. "Built-in: Full Cleanup".')
    clean.add_argument("--dotsettings", dest="settings_file", type=Path, default=None,
                       help="Path to a .DotSettings file.")
    clean.add_argument("--include", action="append", default=None, metavar="MASK")
    clean.add_argument("--exclude", action="append", default=None, metavar="MASK")

    # ── report ──────────────────────────────────────────────────────
    rep = sub.add_parser("report", help="Summarize an existing InspectCode XML report.")
    rep.add_argument("report", type=Path)
    rep.add_argument("--json", dest="json_out", action="store_true", default=False)
    rep.add_argument("--fail-on", type=_severity, default=None,
                     help=f"Default: {DEFAULT_POLICY.fail_at.lower()}.")
    rep.add_argument("-v", "--verbose", action="store_true", default=False)

    return p


# ── helpers ─────────────────────────────────────────────────────────


def _configure_logging(verbose: bool) -> None:
    level_name = os.getenv(LOG_LEVEL_ENV, "INFO").upper()
    level = logging.DEBUG if verbose else getattr(logging, level_name, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _settings_from_args(args: argparse.Namespace, settings_cls: type) -> ReSharperSettings:
    """Load ``--settings`` (if any), then overlay every flag that was given."""
    if args.settings_path is not None:
        settings = load_settings(args.settings_path, settings_cls)
    else:
        settings = settings_cls()

    overrides: dict[str, Any] = {}
    for f in fields(settings_cls):
        if f.name == "working_directory":
            # Applied once, on the runner.
            continue
        # Unset flags are None; store_const False (--no-build, --no-swea) is a value.
        value = getattr(args, f.name, None)
        if value is None or value == []:
            continue
        overrides[f.name] = value
    if "msbuild_properties" in overrides:
        overrides["msbuild_properties"] = {
            **settings.msbuild_properties,
            **dict(overrides["msbuild_properties"]),
        }

    for name, value in overrides.items():
        setattr(settings, name, value)
    return settings


def _print_report_summary(report: InspectionReport) -> None:
    """Human-readable summary on stderr."""
    total = len(report.issues)
    print(f"\n   Issues   : {total}", file=sys.stderr)
    counts = report.counts_by_severity()
    if counts:
        parts = [f"{k}={v}" for k, v in sorted(counts.items())]
        print(f"   Severity : {', '.join(parts)}", file=sys.stderr)
        print(f"   Worst    : {worst_severity(report)}", file=sys.stderr)
    for issue in report.issues[:10]:
        print(f"      • {issue.file}:{issue.line} {issue.message}", file=sys.stderr)
    if total > 10:
        print(f"      … and {total - 10} more", file=sys.stderr)
    print("", file=sys.stderr)


def _policy(fail_on: InspectCodeSeverity | None) -> ExitCodePolicy:
    if fail_on is None:
        return DEFAULT_POLICY
    return ExitCodePolicy(fail_at=fail_on.name)  # type: ignore[arg-type]


def _check_target(args: argparse.Namespace) -> int | None:
    if (args.solution is None) == (args.config is None):
        print(
            f"error: {args.command} needs exactly one of <solution> or --config",
            file=sys.stderr,
        )
        return ExitCode.ERROR
    return None


def _dry_run(prepared: tuple[Path, ArgumentList]) -> int:
    executable, arguments = prepared
    print(f"{executable} {arguments.render()}")
    return ExitCode.SUCCESS


# ── command handlers ────────────────────────────────────────────────


def _cmd_inspect(args: argparse.Namespace) -> int:
    err = _check_target(args)
    if err is not None:
        return err

    runner = InspectCodeRunner(working_directory=args.working_directory)

    if args.config is not None:
        if args.dry_run:
            return _dry_run(runner.prepare_from_config(args.config))
        runner.run_from_config(args.config)
        return ExitCode.SUCCESS

    settings = _settings_from_args(args, InspectCodeSettings)
    if args.dry_run:
        return _dry_run(runner.prepare(args.solution, settings))

    try:
        report = runner.run(args.solution, settings)
    except ViolationsFoundError as exc:
        print(f"error: {exc}", file=sys.stderr)
        if args.json_out:
            sys.stdout.write(stable_json_dumps(exc.report.to_dict()))
        return ExitCode.VIOLATION

    if report is None:
        return ExitCode.SUCCESS
    if args.json_out:
        sys.stdout.write(stable_json_dumps(report.to_dict()))
    else:
        _print_report_summary(report)
    if args.fail_on is not None:
        return exit_code_for_report(report, policy=_policy(args.fail_on))
    return ExitCode.SUCCESS


def _cmd_cleanup(args: argparse.Namespace) -> int:
    err = _check_target(args)
    if err is not None:
        return err

    runner = CleanupCodeRunner(working_directory=args.working_directory)

    if args.config is not None:
        if args.dry_run:
            return _dry_run(runner.prepare_from_config(args.config))
        runner.run_from_config(args.config)
        return ExitCode.SUCCESS

    settings = _settings_from_args(args, CleanupCodeSettings)
    if args.dry_run:
        return _dry_run(runner.prepare(args.solution, settings))
    runner.run(args.solution, settings)
    return ExitCode.SUCCESS


def _cmd_report(args: argparse.Namespace) -> int:
    report = parse_report(args.report)
    if args.json_out:
        sys.stdout.write(stable_json_dumps(report.to_dict()))
    else:
        _print_report_summary(report)
    return exit_code_for_report(report, policy=_policy(args.fail_on))


_COMMANDS = {
    "inspect": _cmd_inspect,
    "cleanup": _cmd_cleanup,
    "report": _cmd_report,
}


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help(sys.stderr)
        return ExitCode.ERROR

    _configure_logging(args.verbose)

    try:
        return int(_COMMANDS[args.command](args))
    except ReSharperToolError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return ExitCode.ERROR


if __name__ == "__main__":
    raise SystemExit(main())

"""SubprocessRunner against a real child process."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from resharper_globaltools.core.arguments import ArgumentList
from resharper_globaltools.core.locator import ToolLocator
from resharper_globaltools.core.process import ProcessSettings, SubprocessRunner
from resharper_globaltools.errors import ProcessExitError, ProcessNotStartedError
from resharper_globaltools.model.settings import CleanupCodeSettings
from resharper_globaltools.runners.cleanup_code import CleanupCodeRunner


def _python(code: str) -> ArgumentList:
    return ArgumentList().append("-c").append(code)


def test_exit_code_and_environment(tmp_path: Path):
    code = (
        "import os, pathlib; "
        "pathlib.Path('seen.txt').write_text(os.environ['RS_MARKER']); "
        "raise SystemExit(3)"
    )
    process = SubprocessRunner().start(
        Path(sys.executable),
        ProcessSettings(_python(code), tmp_path, {"RS_MARKER": "hello"}),
    )
    assert process.wait() == 3
    assert (tmp_path / "seen.txt").read_text() == "hello"


def test_missing_executable_raises_os_error(tmp_path: Path):
    with pytest.raises(OSError):
        SubprocessRunner().start(tmp_path / "nope", ProcessSettings(ArgumentList(), tmp_path))


def test_runner_reports_nonzero_exit(tmp_path: Path):
    runner = CleanupCodeRunner(locator=ToolLocator(environ={}, use_path=False), working_directory=tmp_path)
    with pytest.raises(ProcessExitError, match=r"exit code 5"):
        runner.run_process(Path(sys.executable), _python("raise SystemExit(5)"), CleanupCodeSettings())


def test_runner_reports_unstartable_tool(tmp_path: Path):
    runner = CleanupCodeRunner(working_directory=tmp_path)
    with pytest.raises(ProcessNotStartedError):
        runner.run_process(tmp_path / "nope", ArgumentList(), CleanupCodeSettings())

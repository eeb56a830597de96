"""Shared fixtures: a fake working directory with tool executables, and a
recording process runner."""

from __future__ import annotations

from pathlib import Path

import pytest

from fakes import FakeProcessRunner
from resharper_globaltools.core.locator import ToolLocator
from resharper_globaltools.runners.cleanup_code import CleanupCodeRunner
from resharper_globaltools.runners.inspect_code import InspectCodeRunner

_TOOL_FILES = (
    "inspectcode.exe",
    "inspectcode.x86.exe",
    "cleanupcode.exe",
    "cleanupcode.x86.exe",
)


@pytest.fixture()
def workdir(tmp_path: Path) -> Path:
    """``<tmp>/Working`` with the GlobalTools executables under ``tools/``."""
    wd = tmp_path / "Working"
    tools = wd / "tools"
    tools.mkdir(parents=True)
    for name in _TOOL_FILES:
        (tools / name).write_text("", encoding="utf-8")
    return wd


@pytest.fixture()
def process_runner() -> FakeProcessRunner:
    return FakeProcessRunner()


@pytest.fixture()
def locator() -> ToolLocator:
    # Isolated from the developer machine's PATH and environment.
    return ToolLocator(environ={}, use_path=False)


@pytest.fixture()
def inspect_runner(
    workdir: Path, process_runner: FakeProcessRunner, locator: ToolLocator
) -> InspectCodeRunner:
    return InspectCodeRunner(
        process_runner=process_runner,
        locator=locator,
        working_directory=workdir,
        platform="linux",
    )


@pytest.fixture()
def cleanup_runner(
    workdir: Path, process_runner: FakeProcessRunner, locator: ToolLocator
) -> CleanupCodeRunner:
    return CleanupCodeRunner(
        process_runner=process_runner,
        locator=locator,
        working_directory=workdir,
        platform="linux",
    )

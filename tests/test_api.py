"""Public API surface: the one-call entrypoints route to the runners."""

from __future__ import annotations

import logging

import pytest

import resharper_globaltools
from fakes import write_report
from resharper_globaltools.api import (
    cleanup_code,
    cleanup_code_from_config,
    inspect_code,
    inspect_code_from_config,
)
from resharper_globaltools.errors import ArgumentNullError
from resharper_globaltools.model.settings import CleanupCodeSettings, InspectCodeSettings


def test_package_exports():
    for name in resharper_globaltools.__all__:
        assert hasattr(resharper_globaltools, name), name


def test_inspect_code(workdir, process_runner, locator, caplog):
    caplog.set_level(logging.ERROR)
    process_runner.on_start = write_report("violations.xml", workdir / "out.xml")
    log = logging.getLogger("build.inspect")

    report = inspect_code(
        "Test.sln",
        InspectCodeSettings(output_file="out.xml"),
        process_runner=process_runner,
        locator=locator,
        working_directory=workdir,
        platform="linux",
        log=log,
    )

    assert report is not None and len(report.issues) == 3
    assert [r.name for r in caplog.records] == ["build.inspect"]


def test_inspect_code_from_config(workdir, process_runner, locator):
    result = inspect_code_from_config(
        "inspect.config", process_runner=process_runner, locator=locator,
        working_directory=workdir, platform="linux",
    )
    assert result.args == f'--config="{workdir / "inspect.config"}"'
    assert result.executable == workdir / "tools" / "inspectcode.exe"


def test_cleanup_code(workdir, process_runner, locator):
    result = cleanup_code(
        "Test.sln", CleanupCodeSettings(debug=True), process_runner=process_runner,
        locator=locator, working_directory=workdir, platform="linux",
    )
    assert result.args == f'--debug "{workdir / "Test.sln"}"'
    assert result.executable == workdir / "tools" / "cleanupcode.exe"


def test_cleanup_code_from_config_requires_file(workdir, process_runner, locator):
    with pytest.raises(ArgumentNullError, match=r"\(Parameter 'configFile'\)"):
        cleanup_code_from_config(
            None, process_runner=process_runner, locator=locator, working_directory=workdir,
        )
    assert process_runner.calls == []


def test_signatures_use_union_none():
    for fn in (inspect_code, inspect_code_from_config, cleanup_code, cleanup_code_from_config):
        for name, annotation in fn.__annotations__.items():
            assert "Optional" not in annotation, (fn.__name__, name)

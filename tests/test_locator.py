"""ToolLocator — explicit path, search directories, environment, PATH."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from resharper_globaltools.core.locator import (
    TOOLS_DIR_ENV,
    ToolLocator,
    executable_names,
    is_windows,
)
from resharper_globaltools.errors import ToolNotFoundError
from resharper_globaltools.model.settings import InspectCodeSettings


def _touch(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("", encoding="utf-8")
    return path


class TestExecutableNames:
    @pytest.mark.parametrize("platform", ["win32", "cygwin", "WIN32"])
    def test_windows_platforms(self, platform: str) -> None:
        assert is_windows(platform)
        assert executable_names("inspectcode", platform=platform) == ["inspectcode.exe"]

    def test_windows_x86(self) -> None:
        assert executable_names("inspectcode", use_x86_tool=True, platform="win32") == [
            "inspectcode.x86.exe"
        ]

    @pytest.mark.parametrize("use_x86_tool", [True, False])
    def test_unix_prefers_shell_script(self, use_x86_tool: bool) -> None:
        assert not is_windows("linux")
        assert executable_names("cleanupcode", use_x86_tool=use_x86_tool, platform="darwin") == [
            "cleanupcode.sh",
            "cleanupcode.exe",
        ]


class TestToolLocator:
    def test_working_directory_tools_folder(self, tmp_path: Path) -> None:
        exe = _touch(tmp_path / "tools" / "inspectcode.sh")
        locator = ToolLocator(environ={}, use_path=False)
        found = locator.locate(
            "InspectCode", "inspectcode", InspectCodeSettings(),
            working_directory=tmp_path, platform="linux",
        )
        assert found == exe

    def test_search_dirs_come_first(self, tmp_path: Path) -> None:
        _touch(tmp_path / "tools" / "inspectcode.exe")
        preferred = _touch(tmp_path / "custom" / "inspectcode.exe")
        locator = ToolLocator(search_dirs=[tmp_path / "custom"], environ={}, use_path=False)
        found = locator.locate(
            "InspectCode", "inspectcode", InspectCodeSettings(),
            working_directory=tmp_path, platform="win32",
        )
        assert found == preferred

    def test_environment_directories(self, tmp_path: Path) -> None:
        exe = _touch(tmp_path / "b" / "inspectcode.exe")
        environ = {TOOLS_DIR_ENV: os.pathsep.join([str(tmp_path / "a"), str(tmp_path / "b")])}
        locator = ToolLocator(environ=environ, use_path=False)
        found = locator.locate(
            "InspectCode", "inspectcode", InspectCodeSettings(),
            working_directory=tmp_path / "wd", platform="win32",
        )
        assert found == exe

    def test_candidate_dirs_order(self, tmp_path: Path) -> None:
        locator = ToolLocator(
            search_dirs=[tmp_path / "s"], environ={TOOLS_DIR_ENV: str(tmp_path / "e")}
        )
        assert locator.candidate_dirs(tmp_path) == [
            tmp_path / "s",
            tmp_path / "e",
            tmp_path / "tools",
        ]

    def test_explicit_tool_path_relative_to_working_directory(self, tmp_path: Path) -> None:
        exe = _touch(tmp_path / "jb" / "inspectcode.exe")
        locator = ToolLocator(environ={}, use_path=False)
        found = locator.locate(
            "InspectCode", "inspectcode", InspectCodeSettings(tool_path="jb/inspectcode.exe"),
            working_directory=tmp_path,
        )
        assert found == exe

    def test_missing_explicit_tool_path_does_not_fall_back(self, tmp_path: Path) -> None:
        _touch(tmp_path / "tools" / "inspectcode.exe")
        locator = ToolLocator(environ={}, use_path=False)
        with pytest.raises(ToolNotFoundError):
            locator.locate(
                "InspectCode", "inspectcode", InspectCodeSettings(tool_path="missing.exe"),
                working_directory=tmp_path, platform="win32",
            )

    def test_path_lookup(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        on_path = tmp_path / "bin" / "inspectcode.sh"
        seen: list[str] = []

        def fake_which(name: str) -> str | None:
            seen.append(name)
            return str(on_path) if name == "inspectcode.sh" else None

        monkeypatch.setattr("resharper_globaltools.core.locator.shutil.which", fake_which)
        locator = ToolLocator(environ={})
        found = locator.locate(
            "InspectCode", "inspectcode", InspectCodeSettings(),
            working_directory=tmp_path, platform="linux",
        )
        assert found == on_path
        assert seen == ["inspectcode.sh"]

    def test_not_found_message(self, tmp_path: Path) -> None:
        locator = ToolLocator(environ={}, use_path=False)
        with pytest.raises(ToolNotFoundError) as exc:
            locator.locate(
                "InspectCode", "inspectcode", InspectCodeSettings(),
                working_directory=tmp_path,
            )
        assert str(exc.value) == "InspectCode: Could not locate executable."
        assert exc.value.tool_name == "InspectCode"

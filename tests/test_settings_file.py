"""Settings files: YAML / JSON loading, schema validation, enum coercion."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from resharper_globaltools.core.config import load_settings
from resharper_globaltools.errors import SettingsFileError
from resharper_globaltools.model import (
    InspectCodeSeverity,
    ReSharperSettingsLayer,
    ReSharperVerbosity,
)
from resharper_globaltools.model.settings import CleanupCodeSettings, InspectCodeSettings


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


class TestLoadSettings:
    def test_yaml(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path / "inspect.yaml",
            "output_file: build/inspect.xml\n"
            "severity: warning\n"
            "verbosity: ERROR\n"
            "solution_wide_analysis: false\n"
            "build: false\n"
            "disabled_settings_layers: [GlobalAll, solution_personal]\n"
            "extensions: [ReSharper.AgentSmith]\n",
        )
        settings = load_settings(path, InspectCodeSettings)
        assert settings.output_file == "build/inspect.xml"
        assert settings.severity is InspectCodeSeverity.WARNING
        assert settings.verbosity is ReSharperVerbosity.ERROR
        assert settings.solution_wide_analysis is False
        assert settings.build is False
        assert settings.disabled_settings_layers == [
            ReSharperSettingsLayer.GLOBAL_ALL,
            ReSharperSettingsLayer.SOLUTION_PERSONAL,
        ]
        assert settings.extensions == ["ReSharper.AgentSmith"]

    def test_json(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path / "cleanup.json",
            json.dumps({"profile": "Built-in: Full Cleanup", "include": ["src/**"]}),
        )
        settings = load_settings(path, CleanupCodeSettings)
        assert settings.profile == "Built-in: Full Cleanup"
        assert settings.include == ["src/**"]

    def test_empty_yaml_gives_defaults(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "empty.yml", "")
        assert load_settings(path, InspectCodeSettings) == InspectCodeSettings()

    def test_msbuild_values_are_strings(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path / "props.yaml",
            "msbuild_properties:\n"
            "  TreatWarningsAsErrors: true\n"
            "  Optimize: false\n"
            "  WarningLevel: 4\n",
        )
        settings = load_settings(path, InspectCodeSettings)
        assert settings.msbuild_properties == {
            "TreatWarningsAsErrors": "true",
            "Optimize": "false",
            "WarningLevel": "4",
        }
        assert list(settings.msbuild_properties) == ["TreatWarningsAsErrors", "Optimize", "WarningLevel"]

    def test_keys_for_the_other_tool_are_ignored(self, tmp_path: Path, caplog) -> None:
        caplog.set_level(logging.DEBUG, logger="resharper_globaltools.core.config")
        path = _write(tmp_path / "shared.yaml", "debug: true\ninclude: ['*.cs']\n")
        settings = load_settings(path, InspectCodeSettings)
        assert settings.debug is True
        assert not hasattr(settings, "include")
        assert "ignoring keys not used by InspectCodeSettings: include" in caplog.text


class TestLoadSettingsErrors:
    def test_unknown_key_fails_schema(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "bad.yaml", "outptu_file: x.xml\n")
        with pytest.raises(SettingsFileError, match="outptu_file"):
            load_settings(path, InspectCodeSettings)

    def test_wrong_type_names_the_field(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "bad.yaml", "debug: 'yes please'\n")
        with pytest.raises(SettingsFileError) as exc:
            load_settings(path, InspectCodeSettings)
        assert exc.value.detail.startswith("debug: ")

    def test_bad_enum_value(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "bad.yaml", "severity: catastrophic\n")
        with pytest.raises(SettingsFileError, match="InspectCodeSeverity"):
            load_settings(path, InspectCodeSettings)

    def test_top_level_list(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "list.yaml", "- a\n- b\n")
        with pytest.raises(SettingsFileError, match="mapping"):
            load_settings(path, InspectCodeSettings)

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "bad.json", "{not json")
        with pytest.raises(SettingsFileError, match="not valid json"):
            load_settings(path, InspectCodeSettings)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(SettingsFileError):
            load_settings(tmp_path / "nope.yaml", InspectCodeSettings)

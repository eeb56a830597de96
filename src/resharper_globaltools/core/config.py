"""Settings files — load InspectCode / CleanupCode settings from YAML or JSON.

A settings file is a flat mapping of snake_case field names::

    # inspect.yaml
    output_file: build/inspect.xml
    severity: warning
    solution_wide_analysis: false
    msbuild_properties:
      Configuration: Release
    disabled_settings_layers: [GlobalAll, SolutionPersonal]

It is validated against ``data/schemas/settings.schema.json``.  Keys that
belong to the other tool (e.g. ``include`` in an InspectCode run) are ignored.
"""

from __future__ import annotations

import json
import logging
from dataclasses import fields
from pathlib import Path
from typing import Any, TypeVar

import jsonschema
import yaml

from resharper_globaltools.contracts.load import validate_instance
from resharper_globaltools.errors import SettingsFileError
from resharper_globaltools.model import (
    InspectCodeSeverity,
    ReSharperSettingsLayer,
    ReSharperVerbosity,
    parse_enum,
)
from resharper_globaltools.model.settings import ReSharperSettings

logger = logging.getLogger(__name__)

SETTINGS_SCHEMA = "settings.schema.json"

S = TypeVar("S", bound=ReSharperSettings)


def _read_mapping(path: Path) -> dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SettingsFileError(path, exc.strerror or str(exc)) from exc

    try:
        if path.suffix.lower() in (".yaml", ".yml"):
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise SettingsFileError(path, f"not valid {path.suffix.lstrip('.') or 'JSON'}: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise SettingsFileError(path, "top-level value must be a mapping")
    return data


def _msbuild_value(value: Any) -> str:
    # MSBuild expects lowercase booleans.
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _coerce(path: Path, data: dict[str, Any]) -> dict[str, Any]:
    out = dict(data)
    try:
        if "verbosity" in out:
            out["verbosity"] = parse_enum(ReSharperVerbosity, out["verbosity"])
        if "severity" in out:
            out["severity"] = parse_enum(InspectCodeSeverity, out["severity"])
        if "disabled_settings_layers" in out:
            out["disabled_settings_layers"] = [
                parse_enum(ReSharperSettingsLayer, v) for v in out["disabled_settings_layers"]
            ]
    except ValueError as exc:
        raise SettingsFileError(path, str(exc)) from exc
    if "msbuild_properties" in out:
        out["msbuild_properties"] = {
            str(k): _msbuild_value(v) for k, v in out["msbuild_properties"].items()
        }
    return out


def load_settings(path: Path | str, settings_cls: type[S]) -> S:
    """Read *path* and build a *settings_cls* instance from it.

    Raises
    ------
    SettingsFileError
        If the file is unreadable, malformed, or fails schema validation.
    """
    settings_path = Path(path)
    data = _read_mapping(settings_path)

    try:
        validate_instance(data, SETTINGS_SCHEMA)
    except jsonschema.ValidationError as exc:
        where = "/".join(str(p) for p in exc.absolute_path) or "<root>"
        raise SettingsFileError(settings_path, f"{where}: {exc.message}") from exc

    known = {f.name for f in fields(settings_cls)}
    ignored = sorted(set(data) - known)
    if ignored:
        logger.debug(
            "%s: ignoring keys not used by %s: %s",
            settings_path,
            settings_cls.__name__,
            ", ".join(ignored),
        )

    values = _coerce(settings_path, {k: v for k, v in data.items() if k in known})
    return settings_cls(**values)

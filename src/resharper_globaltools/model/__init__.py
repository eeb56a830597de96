"""Enums shared by the settings, argument builders and report model."""

from __future__ import annotations

from enum import Enum


class ReSharperVerbosity(str, Enum):
    """Logging verbosity of the command-line tool (``--verbosity``)."""

    OFF = "off"
    FATAL = "fatal"
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    VERBOSE = "verbose"
    TRACE = "trace"


class InspectCodeSeverity(str, Enum):
    """Minimum severity of reported issues (``--severity``)."""

    INFO = "info"
    HINT = "hint"
    SUGGESTION = "suggestion"
    WARNING = "warning"
    ERROR = "error"


class ReSharperSettingsLayer(str, Enum):
    """Settings layers that can be disabled (``--disable-settings-layers``)."""

    GLOBAL_ALL = "global_all"
    GLOBAL_PER_PRODUCT = "global_per_product"
    SOLUTION_SHARED = "solution_shared"
    SOLUTION_PERSONAL = "solution_personal"
    PROJECT_SHARED = "project_shared"
    PROJECT_PERSONAL = "project_personal"


# ── flag lookup tables ──────────────────────────────────────────────
# Every member must have an entry; tests assert the tables are exhaustive.

VERBOSITY_FLAGS: dict[ReSharperVerbosity, str] = {
    ReSharperVerbosity.OFF: "OFF",
    ReSharperVerbosity.FATAL: "FATAL",
    ReSharperVerbosity.ERROR: "ERROR",
    ReSharperVerbosity.WARN: "WARN",
    ReSharperVerbosity.INFO: "INFO",
    ReSharperVerbosity.VERBOSE: "VERBOSE",
    ReSharperVerbosity.TRACE: "TRACE",
}

SEVERITY_FLAGS: dict[InspectCodeSeverity, str] = {
    InspectCodeSeverity.INFO: "INFO",
    InspectCodeSeverity.HINT: "HINT",
    InspectCodeSeverity.SUGGESTION: "SUGGESTION",
    InspectCodeSeverity.WARNING: "WARNING",
    InspectCodeSeverity.ERROR: "ERROR",
}

SETTINGS_LAYER_FLAGS: dict[ReSharperSettingsLayer, str] = {
    ReSharperSettingsLayer.GLOBAL_ALL: "GlobalAll",
    ReSharperSettingsLayer.GLOBAL_PER_PRODUCT: "GlobalPerProduct",
    ReSharperSettingsLayer.SOLUTION_SHARED: "SolutionShared",
    ReSharperSettingsLayer.SOLUTION_PERSONAL: "SolutionPersonal",
    ReSharperSettingsLayer.PROJECT_SHARED: "ProjectShared",
    ReSharperSettingsLayer.PROJECT_PERSONAL: "ProjectPersonal",
}


def parse_enum(enum_cls: type[Enum], raw: str) -> Enum:
    """Look up *raw* by member name, value or flag spelling (case-insensitive).

    ``"GlobalAll"``, ``"GLOBAL_ALL"`` and ``"global_all"`` all resolve to
    :attr:`ReSharperSettingsLayer.GLOBAL_ALL`.
    """
    key = raw.strip().replace("-", "_").lower()
    for member in enum_cls:
        if key in (member.name.lower(), str(member.value).lower()):
            return member
    flags = _FLAG_TABLES.get(enum_cls, {})
    for member, flag in flags.items():
        if flag.lower() == raw.strip().lower():
            return member
    raise ValueError(f"unknown {enum_cls.__name__} value: {raw!r}")


_FLAG_TABLES: dict[type[Enum], dict] = {
    ReSharperVerbosity: VERBOSITY_FLAGS,
    InspectCodeSeverity: SEVERITY_FLAGS,
    ReSharperSettingsLayer: SETTINGS_LAYER_FLAGS,
}

"""resharper_globaltools — run ReSharper InspectCode / CleanupCode from Python builds."""

__all__ = [
    "__version__",
    "inspect_code",
    "inspect_code_from_config",
    "cleanup_code",
    "cleanup_code_from_config",
    # Settings
    "InspectCodeSettings",
    "CleanupCodeSettings",
    "InspectCodeSeverity",
    "ReSharperSettingsLayer",
    "ReSharperVerbosity",
]
__version__ = "0.1.0"

from resharper_globaltools.api import (  # noqa: E402, F401
    cleanup_code,
    cleanup_code_from_config,
    inspect_code,
    inspect_code_from_config,
)
from resharper_globaltools.model import (  # noqa: E402, F401
    InspectCodeSeverity,
    ReSharperSettingsLayer,
    ReSharperVerbosity,
)
from resharper_globaltools.model.settings import (  # noqa: E402, F401
    CleanupCodeSettings,
    InspectCodeSettings,
)

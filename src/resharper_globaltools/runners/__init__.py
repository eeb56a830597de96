"""Tool runners, one per ReSharper command-line tool."""

from resharper_globaltools.runners.base import ReSharperTool, build_config_arguments
from resharper_globaltools.runners.cleanup_code import CleanupCodeRunner, build_cleanup_arguments
from resharper_globaltools.runners.inspect_code import InspectCodeRunner, build_inspect_arguments

__all__ = [
    "ReSharperTool",
    "InspectCodeRunner",
    "CleanupCodeRunner",
    "build_inspect_arguments",
    "build_cleanup_arguments",
    "build_config_arguments",
]

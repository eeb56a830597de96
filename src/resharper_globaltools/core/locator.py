"""Tool discovery — find the ``inspectcode`` / ``cleanupcode`` executable."""

from __future__ import annotations

import logging
import os
import shutil
import sys
from pathlib import Path
from typing import Mapping, Sequence

from resharper_globaltools.core.arguments import PathLike, make_absolute
from resharper_globaltools.errors import ToolNotFoundError
from resharper_globaltools.model.settings import ReSharperSettings

logger = logging.getLogger(__name__)

# os.pathsep-separated list of extra directories to search first.
TOOLS_DIR_ENV = "RESHARPER_TOOLS_DIR"

# Directory (relative to the working directory) where build scripts
# conventionally unpack the JetBrains.ReSharper.GlobalTools package.
_DEFAULT_TOOLS_SUBDIR = "tools"


def is_windows(platform: str | None = None) -> bool:
    """Return True for a ``sys.platform``-style Windows identifier."""
    return (platform or sys.platform).lower().startswith(("win", "cygwin"))


def executable_names(
    stem: str,
    *,
    use_x86_tool: bool = False,
    platform: str | None = None,
) -> list[str]:
    """Candidate file names for *stem*, in preference order.

    The ``x86`` build only exists in the Windows distribution, so the flag is
    ignored elsewhere.
    """
    if is_windows(platform):
        if use_x86_tool:
            return [f"{stem}.x86.exe"]
        return [f"{stem}.exe"]
    return [f"{stem}.sh", f"{stem}.exe"]


class ToolLocator:
    """Resolve a tool executable from settings, known directories and ``PATH``.

    Parameters
    ----------
    search_dirs:
        Extra directories searched before the defaults.
    environ:
        Mapping to read ``RESHARPER_TOOLS_DIR`` from.  Defaults to
        :data:`os.environ`.
    use_path:
        Fall back to ``shutil.which`` when nothing else matched.
    """

    def __init__(
        self,
        *,
        search_dirs: Sequence[PathLike] = (),
        environ: Mapping[str, str] | None = None,
        use_path: bool = True,
    ) -> None:
        self.search_dirs = [Path(d) for d in search_dirs]
        self.environ = os.environ if environ is None else environ
        self.use_path = use_path

    def candidate_dirs(self, working_directory: PathLike) -> list[Path]:
        dirs = list(self.search_dirs)
        raw = self.environ.get(TOOLS_DIR_ENV, "")
        dirs.extend(Path(p) for p in raw.split(os.pathsep) if p)
        dirs.append(Path(working_directory) / _DEFAULT_TOOLS_SUBDIR)
        return dirs

    def locate(
        self,
        tool_name: str,
        stem: str,
        settings: ReSharperSettings,
        *,
        working_directory: PathLike,
        platform: str | None = None,
    ) -> Path:
        """Return the executable path or raise :class:`ToolNotFoundError`.

        *tool_name* is the display name used in error messages
        (``"InspectCode"``); *stem* is the file-name stem (``"inspectcode"``).
        """
        if settings.tool_path is not None:
            explicit = Path(make_absolute(settings.tool_path, working_directory))
            if explicit.is_file():
                return explicit
            logger.debug("Configured tool path %s does not exist", explicit)
            raise ToolNotFoundError(tool_name)

        names = executable_names(
            stem, use_x86_tool=settings.use_x86_tool, platform=platform
        )
        for directory in self.candidate_dirs(working_directory):
            for name in names:
                candidate = directory / name
                if candidate.is_file():
                    logger.debug("Resolved %s to %s", tool_name, candidate)
                    return candidate

        if self.use_path:
            for name in names:
                found = shutil.which(name)
                if found:
                    logger.debug("Resolved %s to %s via PATH", tool_name, found)
                    return Path(found)

        raise ToolNotFoundError(tool_name)

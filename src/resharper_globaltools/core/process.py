"""Process execution seam.

Runners never call :mod:`subprocess` directly; they go through a
:class:`ProcessRunner` so tests can substitute a recording fake.
"""

from __future__ import annotations

import os
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from resharper_globaltools.core.arguments import ArgumentList


@dataclass(frozen=True)
class ProcessSettings:
    """Everything needed to start the tool process."""

    arguments: ArgumentList
    working_directory: Path
    environment: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class ProcessResult:
    """Outcome of a finished tool run.  Not persisted."""

    executable: Path
    arguments: ArgumentList
    exit_code: int

    @property
    def args(self) -> str:
        return self.arguments.render()


class Process(Protocol):
    def wait(self) -> int:
        """Block until the process exits and return its exit code."""
        ...


class ProcessRunner(Protocol):
    def start(self, executable: Path, settings: ProcessSettings) -> Process | None:
        """Start *executable*; return ``None`` when the process could not start."""
        ...


class SubprocessRunner:
    """Default :class:`ProcessRunner` backed by :class:`subprocess.Popen`.

    Output is inherited from the parent so the tool's progress shows up in
    the build log as it happens.  ``OSError`` from ``Popen`` propagates.
    """

    def start(self, executable: Path, settings: ProcessSettings) -> subprocess.Popen:
        env = None
        if settings.environment:
            env = {**os.environ, **settings.environment}
        return subprocess.Popen(  # noqa: S603
            [str(executable), *settings.arguments.to_argv()],
            cwd=settings.working_directory,
            env=env,
        )

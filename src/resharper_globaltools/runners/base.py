"""ReSharperTool — shared locate → launch → check-exit-code pipeline."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import ClassVar

from resharper_globaltools.core.arguments import ArgumentList, PathLike, make_absolute
from resharper_globaltools.core.locator import ToolLocator
from resharper_globaltools.core.process import (
    ProcessResult,
    ProcessRunner,
    ProcessSettings,
    SubprocessRunner,
)
from resharper_globaltools.errors import (
    ArgumentNullError,
    ProcessExitError,
    ProcessNotStartedError,
)
from resharper_globaltools.model import SETTINGS_LAYER_FLAGS
from resharper_globaltools.model.settings import ReSharperSettings

logger = logging.getLogger(__name__)


class ReSharperTool:
    """Base class for the InspectCode and CleanupCode runners.

    Subclasses set :attr:`tool_name` (used in error messages),
    :attr:`executable_stem` (used to find the executable) and
    :attr:`settings_class`, and build their own argument lists.  Config-file
    mode is identical for every tool and lives here.

    Parameters
    ----------
    process_runner:
        Starts the tool process.  Defaults to :class:`SubprocessRunner`.
    locator:
        Finds the executable.  Defaults to a plain :class:`ToolLocator`.
    working_directory:
        Base for relative paths when the settings do not set one.
        Defaults to the current directory at call time.
    platform:
        ``sys.platform``-style override for executable selection.
    log:
        Logger receiving run output; defaults to this module's logger.
    """

    tool_name: ClassVar[str] = ""
    executable_stem: ClassVar[str] = ""
    settings_class: ClassVar[type[ReSharperSettings]] = ReSharperSettings

    def __init__(
        self,
        *,
        process_runner: ProcessRunner | None = None,
        locator: ToolLocator | None = None,
        working_directory: PathLike | None = None,
        platform: str | None = None,
        log: logging.Logger | None = None,
    ) -> None:
        self.process_runner = process_runner or SubprocessRunner()
        self.locator = locator or ToolLocator()
        self.working_directory = working_directory
        self.platform = platform
        self.log = log or logger

    def resolve_working_directory(self, settings: ReSharperSettings) -> Path:
        base = Path(self.working_directory) if self.working_directory else Path.cwd()
        if settings.working_directory is None:
            return base
        return Path(make_absolute(settings.working_directory, base))

    def locate(self, settings: ReSharperSettings) -> Path:
        return self.locator.locate(
            self.tool_name,
            self.executable_stem,
            settings,
            working_directory=self.resolve_working_directory(settings),
            platform=self.platform,
        )

    def run_process(
        self,
        executable: Path,
        arguments: ArgumentList,
        settings: ReSharperSettings,
    ) -> ProcessResult:
        """Start the tool, wait for it, and fail on a nonzero exit code."""
        process_settings = ProcessSettings(
            arguments=arguments,
            working_directory=self.resolve_working_directory(settings),
            environment=dict(settings.environment_variables),
        )
        self.log.debug("Executing: %s %s", executable, arguments.render())

        try:
            process = self.process_runner.start(executable, process_settings)
        except OSError as exc:
            raise ProcessNotStartedError(self.tool_name) from exc
        if process is None:
            raise ProcessNotStartedError(self.tool_name)

        exit_code = process.wait()
        if exit_code != 0:
            raise ProcessExitError(self.tool_name, exit_code)

        return ProcessResult(executable=executable, arguments=arguments, exit_code=exit_code)

    def prepare_from_config(self, config_file: PathLike | None) -> tuple[Path, ArgumentList]:
        if config_file is None:
            raise ArgumentNullError("configFile")
        settings = self.settings_class()
        executable = self.locate(settings)
        arguments = build_config_arguments(
            config_file, self.resolve_working_directory(settings)
        )
        return executable, arguments

    def run_from_config(self, config_file: PathLike | None) -> ProcessResult:
        """Run the tool with every option taken from *config_file*."""
        executable, arguments = self.prepare_from_config(config_file)
        return self.run_process(executable, arguments, self.settings_class())


def build_config_arguments(config_file: PathLike, working_directory: Path) -> ArgumentList:
    """``--config="<abs>"`` and nothing else."""
    return ArgumentList().append_switch_quoted(
        "--config", make_absolute(config_file, working_directory)
    )


def append_shared_arguments(
    args: ArgumentList,
    settings: ReSharperSettings,
    working_directory: Path,
) -> None:
    """Flags common to every tool, in their fixed leading order."""
    for key, value in settings.msbuild_properties.items():
        args.append_switch_quoted(f"--properties:{key}", value)

    if settings.caches_home is not None:
        args.append_switch_quoted(
            "--caches-home", make_absolute(settings.caches_home, working_directory)
        )

    if settings.extensions:
        args.append_switch_quoted("-x", ";".join(settings.extensions))

    if settings.debug:
        args.append("--debug")

    if settings.no_buildin_settings:
        args.append("--no-buildin-settings")

    if settings.disabled_settings_layers:
        args.append_switch(
            "--disable-settings-layers",
            ";".join(SETTINGS_LAYER_FLAGS[layer] for layer in settings.disabled_settings_layers),
        )

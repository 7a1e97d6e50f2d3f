"""Dependency installation through npm or yarn."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from pathlib import Path

from .config import BASE_DEV_DEPENDENCIES, ResolvedConfig
from .errors import ExternalProcessError
from .utils import console, format_command, run_command

CommandRunner = Callable[..., Awaitable[tuple[int, str, str]]]


def build_dependency_list(config: ResolvedConfig) -> list[str]:
    """Packages to install as dev dependencies, in install order.

    The commitlint config package is only included when one was chosen.
    """
    packages = [*BASE_DEV_DEPENDENCIES, config.commitizen_adapter]
    if config.commitlint_config:
        packages.append(config.commitlint_config)
    return packages


def build_install_commands(config: ResolvedConfig, packages: list[str]) -> list[list[str]]:
    """Commands that add *packages* and then install the whole tree.

    Only ``yarn`` selects yarn; any other packager value falls back to npm.
    """
    if config.uses_yarn:
        return [
            ["yarn", "add", "--dev", "--ignore-workspace-root-check", *packages],
            ["yarn", "install"],
        ]
    return [
        ["npm", "install", "--save-dev", *packages],
        ["npm", "install"],
    ]


class PackageInstaller:
    """Runs the install commands in the destination directory.

    Failures are not retried; the first non-zero exit raises
    ``ExternalProcessError``.
    """

    def __init__(self, runner: CommandRunner = run_command, timeout: int = 600) -> None:
        self.runner = runner
        self.timeout = timeout

    async def install(self, config: ResolvedConfig, destination: Path) -> list[str]:
        """Install the dev dependencies for *config*.

        Returns:
            The dependency list that was installed.
        """
        packages = build_dependency_list(config)
        for cmd in build_install_commands(config, packages):
            console.print(f"  [dim]$ {format_command(cmd)}[/dim]")
            try:
                returncode, _stdout, stderr = await self.runner(
                    cmd, cwd=destination, timeout=self.timeout, capture=False
                )
            except FileNotFoundError as exc:
                raise ExternalProcessError(format_command(cmd), 127, str(exc)) from exc
            if returncode != 0:
                raise ExternalProcessError(format_command(cmd), returncode, stderr)
        return packages

"""Scaffold orchestrator.

Drives the four phases of a run, strictly in order:

Phase 1: OPTIONS   -- Layer CLI flags and the module name over the persisted store.
Phase 2: PROMPTING -- Ask the remaining questions and persist the answers.
Phase 3: WRITING   -- Render commitlint/commitizen configs and patch package.json.
Phase 4: INSTALL   -- Install the dev dependencies with npm or yarn.

Nothing is retried or rolled back: an exception in any phase ends the run and
leaves earlier side effects in place.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

from rich.panel import Panel

from .config import GeneratorSettings, OptionKey, ResolvedConfig
from .installer import PackageInstaller, build_dependency_list, build_install_commands
from .options import OptionResolution, resolve_options
from .prompting import Prompter, RichPrompter, collect_answers
from .store import ConfigStore
from .templates import TemplateRenderer
from .utils import (
    PHASE_NAMES,
    console,
    format_command,
    print_phase_header,
    print_success,
    print_summary_table,
    print_warning,
)
from .writing import write_artifacts

GREETING = "No bad commits for you!"
INTRO = (
    "If you are unsure of which option to choose, go with the default.\n"
    "You can always run create-semantic-module again and select a different option."
)


class ScaffoldOrchestrator:
    """Runs one invocation of the generator.

    Attributes:
        settings: Runtime settings (store location, install behaviour).
        prompter: Asks the interactive questions.
        renderer: Renders and copies templates.
        installer: Invokes the package manager.
        store_factory: Opens the persisted store for a destination directory.
    """

    def __init__(
        self,
        settings: GeneratorSettings | None = None,
        *,
        prompter: Prompter | None = None,
        renderer: TemplateRenderer | None = None,
        installer: PackageInstaller | None = None,
        store_factory: Callable[[Path], ConfigStore] | None = None,
    ) -> None:
        self.settings = settings or GeneratorSettings()
        self.prompter = prompter or RichPrompter()
        self.renderer = renderer or TemplateRenderer()
        self.installer = installer or PackageInstaller(timeout=self.settings.install_timeout)
        self.store_factory = store_factory or (
            lambda destination: ConfigStore.for_directory(destination, self.settings)
        )
        self.store: ConfigStore | None = None
        self.resolution: OptionResolution | None = None

    async def run(
        self,
        module_name: str | None = None,
        flags: dict[str, Any] | None = None,
        cwd: str | Path | None = None,
    ) -> ResolvedConfig:
        """Execute all four phases.

        Args:
            module_name: Positional module name, used as the destination
                directory when the ``moduleName`` flag is absent.
            flags: Parsed CLI flags keyed by option name; unknown keys are
                ignored.
            cwd: Base directory, defaults to the process working directory.

        Returns:
            The configuration the artifacts were written with.
        """
        print_phase_header(1, PHASE_NAMES[1])
        resolution, store = self.resolve(module_name, flags or {}, cwd)

        console.print(Panel(f"[bold]{GREETING}[/bold]", border_style="bright_green"))
        console.print(INTRO)

        print_phase_header(2, PHASE_NAMES[2])
        await self.prompting(store, resolution.prompt_packager)

        config = ResolvedConfig.model_validate(store.get_all())
        print_summary_table(_summary(config, resolution.destination), title="Resolved options")

        print_phase_header(3, PHASE_NAMES[3])
        written = await write_artifacts(
            config,
            resolution.destination,
            self.renderer,
            manifest_filename=self.settings.manifest_filename,
        )
        for path in written:
            console.print(f"  [green]+[/green] {path.name}")

        print_phase_header(4, PHASE_NAMES[4])
        await self.install(config, resolution.destination)

        print_success(f"Semantic commits configured in {resolution.destination}")
        return config

    # -- Phases ------------------------------------------------------------

    def resolve(
        self,
        module_name: str | None,
        flags: dict[str, Any],
        cwd: str | Path | None = None,
    ) -> tuple[OptionResolution, ConfigStore]:
        resolution, store = resolve_options(module_name, flags, self.store_factory, cwd=cwd)
        self.resolution = resolution
        self.store = store
        console.print(f"  Destination: [bold]{resolution.destination}[/bold]")
        return resolution, store

    async def prompting(self, store: ConfigStore, prompt_packager: bool) -> dict[str, Any]:
        return await collect_answers(self.prompter, store, prompt_packager)

    async def install(self, config: ResolvedConfig, destination: Path) -> list[str]:
        if self.settings.skip_install:
            packages = build_dependency_list(config)
            commands = build_install_commands(config, packages)
            print_warning("Skipping installation. Run this when you are ready:")
            console.print(f"  {format_command(commands[0])}")
            return packages
        return await self.installer.install(config, destination)


def _summary(config: ResolvedConfig, destination: Path) -> dict[str, str]:
    options = config.as_options()
    summary = {"destination": str(destination)}
    for key in OptionKey:
        if key.value in options:
            summary[key.value] = str(options[key.value])
    return summary

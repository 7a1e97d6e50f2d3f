"""Option resolution: CLI flags and positional name layered over the store."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from .config import DEFAULT_OPTIONS, OptionKey, filter_options
from .store import ConfigStore
from .utils import ensure_dir


class OptionResolution(BaseModel):
    """Outcome of the first phase."""

    destination: Path
    module_name: str | None = None
    prompt_packager: bool = True
    cli_options: dict[str, Any] = {}


def resolve_options(
    module_name_arg: str | None,
    flags: dict[str, Any],
    store_factory: Callable[[Path], ConfigStore],
    cwd: str | Path | None = None,
) -> tuple[OptionResolution, ConfigStore]:
    """Seed the persisted store for this run.

    The module name flag wins over the positional argument.  When a module
    name is given it becomes the destination directory (created if needed)
    and is persisted straight away; otherwise the working directory is used.

    Supplied flags are layered over the built-in defaults and the result is
    written as store defaults, so values an earlier run stored still win.

    Returns:
        The resolution and the store opened for the destination.
    """
    base = Path(cwd) if cwd is not None else Path.cwd()
    cli_options = filter_options(flags)

    module_name = cli_options.get(OptionKey.MODULE_NAME.value) or module_name_arg or None
    prompt_packager = OptionKey.PACKAGER.value not in cli_options

    if module_name:
        destination = ensure_dir(base / module_name)
    else:
        destination = base.resolve()

    store = store_factory(destination)
    if module_name:
        store.set(OptionKey.MODULE_NAME, module_name)

    store.defaults({**DEFAULT_OPTIONS, **cli_options})

    resolution = OptionResolution(
        destination=destination,
        module_name=module_name,
        prompt_packager=prompt_packager,
        cli_options=cli_options,
    )
    return resolution, store

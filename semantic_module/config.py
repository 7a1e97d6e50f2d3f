"""create-semantic-module configuration.

Typed models for the generator's option set and its runtime settings.  All
models use Pydantic v2 so answers read back from the persisted store are
validated at construction time and serialised with their camelCase keys.
"""

from __future__ import annotations

import os
from enum import Enum
from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class OptionKey(str, Enum):
    """Recognised configuration fields, named as they are persisted."""

    MODULE_NAME = "moduleName"
    PACKAGER = "packager"
    COMMITIZEN_ADAPTER = "commitizenAdapter"
    COMMITLINT_CONFIG = "commitlintConfig"

    @property
    def flag(self) -> str:
        """CLI spelling of the option, e.g. ``--commitizen-adapter``."""
        return "--" + _FLAG_NAMES[self]


_FLAG_NAMES: dict[OptionKey, str] = {
    OptionKey.MODULE_NAME: "module-name",
    OptionKey.PACKAGER: "packager",
    OptionKey.COMMITIZEN_ADAPTER: "commitizen-adapter",
    OptionKey.COMMITLINT_CONFIG: "commitlint-config",
}


# ---------------------------------------------------------------------------
# Choices and defaults
# ---------------------------------------------------------------------------

PACKAGERS: list[str] = ["npm", "yarn"]

COMMITIZEN_ADAPTERS: list[str] = ["@commitlint/prompt", "cz-customizable"]

CUSTOMIZABLE_ADAPTER = "cz-customizable"

KNOWN_COMMITLINT_CONFIGS: list[str] = [
    "@commitlint/config-conventional",
    "@commitlint/config-angular",
    "@commitlint/config-lerna-scopes",
    "@commitlint/config-patternplate",
]

CUSTOM_CHOICE = "custom"
NONE_CHOICE = "none"

DEFAULT_OPTIONS: dict[str, str] = {
    OptionKey.PACKAGER.value: "npm",
    OptionKey.COMMITIZEN_ADAPTER.value: "@commitlint/prompt",
    OptionKey.COMMITLINT_CONFIG.value: "@commitlint/config-conventional",
}

BASE_DEV_DEPENDENCIES: list[str] = ["commitizen", "@commitlint/cli", "husky"]


def filter_options(flags: dict[str, Any]) -> dict[str, Any]:
    """Keep only recognised option keys that were actually supplied.

    Unknown keys and ``None`` values (flags argparse left unset) are dropped.
    """
    known = {key.value for key in OptionKey}
    return {
        key: value
        for key, value in flags.items()
        if key in known and value is not None
    }


# ---------------------------------------------------------------------------
# Resolved option set
# ---------------------------------------------------------------------------


class ResolvedConfig(BaseModel):
    """Final answer set for one run.

    ``commitlint_config`` is either a package name or ``False`` when the user
    opted out of a commitlint rule set.
    """

    model_config = ConfigDict(populate_by_name=True)

    module_name: str | None = Field(default=None, alias=OptionKey.MODULE_NAME.value)
    packager: str = Field(
        default=DEFAULT_OPTIONS[OptionKey.PACKAGER.value],
        alias=OptionKey.PACKAGER.value,
    )
    commitizen_adapter: str = Field(
        default=DEFAULT_OPTIONS[OptionKey.COMMITIZEN_ADAPTER.value],
        alias=OptionKey.COMMITIZEN_ADAPTER.value,
    )
    commitlint_config: Union[str, Literal[False]] = Field(
        default=DEFAULT_OPTIONS[OptionKey.COMMITLINT_CONFIG.value],
        alias=OptionKey.COMMITLINT_CONFIG.value,
    )

    @property
    def uses_yarn(self) -> bool:
        return self.packager == "yarn"

    @property
    def uses_customizable_adapter(self) -> bool:
        return self.commitizen_adapter == CUSTOMIZABLE_ADAPTER

    def as_options(self) -> dict[str, Any]:
        """Return the persisted ``{optionKey: value}`` mapping."""
        return self.model_dump(by_alias=True, exclude_none=True)


# ---------------------------------------------------------------------------
# Runtime settings
# ---------------------------------------------------------------------------


class GeneratorSettings(BaseModel):
    """Runtime knobs that are not part of the persisted answers."""

    store_filename: str = Field(default=".yo-rc.json")
    store_namespace: str = Field(default="generator-semantic-module")
    manifest_filename: str = Field(default="package.json")
    install_timeout: int = Field(
        default=600, ge=30, description="Per-command package-manager timeout in seconds"
    )
    skip_install: bool = Field(default=False)

    @classmethod
    def from_env(cls, **overrides: Any) -> "GeneratorSettings":
        """Build settings from environment variables.

        Recognised variables (all optional):
            SEMANTIC_MODULE_SKIP_INSTALL, SEMANTIC_MODULE_INSTALL_TIMEOUT.

        Keyword *overrides* win over the environment.
        """
        kwargs: dict[str, Any] = {}
        skip = os.environ.get("SEMANTIC_MODULE_SKIP_INSTALL", "")
        if skip:
            kwargs["skip_install"] = skip.strip().lower() in ("1", "true", "yes", "on")
        if os.environ.get("SEMANTIC_MODULE_INSTALL_TIMEOUT"):
            kwargs["install_timeout"] = int(os.environ["SEMANTIC_MODULE_INSTALL_TIMEOUT"])
        kwargs.update(overrides)
        return cls(**kwargs)

"""create-semantic-module -- semantic commit tooling for JavaScript modules.

Collects a packager, a commitizen adapter and a commitlint config, writes
``commitlint.config.js`` (plus ``commitizen.config.js`` for cz-customizable),
patches ``package.json`` and installs the dev dependencies.

Quick usage::

    import asyncio
    from semantic_module import ScaffoldOrchestrator

    asyncio.run(ScaffoldOrchestrator().run("my-module", {"packager": "yarn"}))
"""

from semantic_module.config import GeneratorSettings, OptionKey, ResolvedConfig
from semantic_module.generator import ScaffoldOrchestrator
from semantic_module.store import ConfigStore

__all__ = [
    "ConfigStore",
    "GeneratorSettings",
    "OptionKey",
    "ResolvedConfig",
    "ScaffoldOrchestrator",
]

"""Artifact writing: commitlint/commitizen config files and the manifest patch."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any

from .config import ResolvedConfig
from .errors import ManifestNotFoundError, ManifestParseError
from .templates import TemplateRenderer
from .utils import load_json, save_json

COMMITLINT_FILE = "commitlint.config.js"
COMMITLINT_COMMITIZEN_TEMPLATE = "commitlint-commitizen.config.js"
COMMITIZEN_FILE = "commitizen.config.js"

SCRIPTS: dict[str, str] = {
    "commit": "git-cz",
    "commit:retry": "git-cz --retry",
    "commitmsg": "commitlint -e",
}


def select_commitlint_template(config: ResolvedConfig) -> str:
    """Pick the template variant for ``commitlint.config.js``."""
    if config.uses_customizable_adapter:
        return COMMITLINT_COMMITIZEN_TEMPLATE
    return COMMITLINT_FILE


def build_manifest_patch(config: ResolvedConfig) -> dict[str, Any]:
    """Build the ``package.json`` fields this generator owns."""
    patch: dict[str, Any] = {
        "config": {
            "commitizen": {"path": f"node_modules/{config.commitizen_adapter}"},
        },
        "scripts": dict(SCRIPTS),
    }
    if config.uses_customizable_adapter:
        patch["config"]["cz-customizable"] = {"config": COMMITIZEN_FILE}
    return patch


def merge_manifest(manifest: dict[str, Any], patch: dict[str, Any]) -> dict[str, Any]:
    """Merge *patch* into *manifest* one level deep.

    Object-valued top-level keys present on both sides are merged key by key
    (patch wins on collisions); everything else in the patch replaces the
    manifest value.  Unrelated manifest fields are kept as they are.
    """
    merged = dict(manifest)
    for key, value in patch.items():
        existing = merged.get(key)
        if isinstance(existing, dict) and isinstance(value, dict):
            merged[key] = {**existing, **value}
        else:
            merged[key] = value
    return merged


async def extend_manifest(manifest_path: Path, patch: dict[str, Any]) -> dict[str, Any]:
    """Read ``package.json``, merge *patch* into it and write it back.

    Raises:
        ManifestNotFoundError: If the manifest does not exist.
        ManifestParseError: If it is not a JSON object.
    """
    if not manifest_path.is_file():
        raise ManifestNotFoundError(str(manifest_path))
    try:
        manifest = await asyncio.to_thread(load_json, manifest_path)
    except json.JSONDecodeError as exc:
        raise ManifestParseError(str(manifest_path), str(exc)) from exc
    if not isinstance(manifest, dict):
        raise ManifestParseError(str(manifest_path), "expected a JSON object")

    merged = merge_manifest(manifest, patch)
    await save_json(merged, manifest_path)
    return merged


async def write_artifacts(
    config: ResolvedConfig,
    destination: Path,
    renderer: TemplateRenderer,
    manifest_filename: str = "package.json",
) -> list[Path]:
    """Write every generated file into *destination*.

    Files written before a failure stay on disk.

    Returns:
        The paths that were written, in order.
    """
    written: list[Path] = []
    template = select_commitlint_template(config)

    if config.uses_customizable_adapter:
        written.append(
            await renderer.copy_file(COMMITIZEN_FILE, destination / COMMITIZEN_FILE)
        )

    written.append(
        await renderer.render_to_file(
            template,
            destination / COMMITLINT_FILE,
            {"commitlint_config": config.commitlint_config},
        )
    )

    manifest_path = destination / manifest_filename
    await extend_manifest(manifest_path, build_manifest_patch(config))
    written.append(manifest_path)
    return written

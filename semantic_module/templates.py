"""Jinja2 template rendering for the generated configuration files.

Provides the TemplateRenderer class which loads templates from the
``semantic_module/templates/`` directory.  ``.j2`` files are rendered with the
resolved answers; other files are copied verbatim.
"""

from __future__ import annotations

import asyncio
import json
import shutil
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .errors import FileSystemError


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders and copies the generator's templates.

    Templates are addressed by their output name (``commitlint.config.js``);
    the renderer appends ``.j2`` when looking them up.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["js_literal"] = _js_literal_filter

    def template_path(self, name: str) -> Path:
        """Absolute path of a template file inside the template directory."""
        return self.template_dir / name

    # -- Single template rendering -----------------------------------------

    def render(self, template_name: str, context: dict[str, Any]) -> str:
        """Render ``<template_name>.j2`` with the provided context."""
        template = self.env.get_template(f"{template_name}.j2")
        return template.render(**context)

    # -- File-based operations (async) -------------------------------------

    async def render_to_file(
        self,
        template_name: str,
        output_path: str | Path,
        context: dict[str, Any],
    ) -> Path:
        """Render a template and write the result to *output_path*.

        Parent directories are created automatically.
        """
        content = self.render(template_name, context)
        out = Path(output_path)
        try:
            await asyncio.to_thread(_write_file, out, content)
        except OSError as exc:
            raise FileSystemError(f"Cannot write {out}: {exc}") from exc
        return out

    async def copy_file(self, template_name: str, output_path: str | Path) -> Path:
        """Copy a template to *output_path* without rendering it."""
        source = self.template_path(template_name)
        out = Path(output_path)
        try:
            await asyncio.to_thread(_copy_file, source, out)
        except OSError as exc:
            raise FileSystemError(f"Cannot copy {source} to {out}: {exc}") from exc
        return out


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------

def _js_literal_filter(value: Any) -> str:
    """Emit *value* as a JavaScript literal (``'name'``, ``false``, ``null``)."""
    if isinstance(value, str):
        return "'" + value.replace("\\", "\\\\").replace("'", "\\'") + "'"
    return json.dumps(value)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def _copy_file(source: Path, target: Path) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(source, target)

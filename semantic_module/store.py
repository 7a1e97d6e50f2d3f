"""Persisted answer store scoped to a destination directory.

Answers live in ``<destination>/.yo-rc.json`` under the generator's namespace,
so re-running the generator in the same module recalls earlier choices as
prompt defaults.  Other namespaces in the file are left untouched.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .config import GeneratorSettings, OptionKey
from .errors import InputError, ManifestParseError
from .utils import load_json, save_json_sync


class ConfigStore:
    """Key/value record of previous answers for one destination.

    Every mutation is written through to disk immediately.
    """

    def __init__(self, path: str | Path, namespace: str) -> None:
        self.path = Path(path)
        self.namespace = namespace
        self._values: dict[str, Any] = {}
        self.load()

    @classmethod
    def for_directory(
        cls, destination: str | Path, settings: GeneratorSettings | None = None
    ) -> "ConfigStore":
        """Open the store that belongs to *destination*."""
        settings = settings or GeneratorSettings()
        return cls(Path(destination) / settings.store_filename, settings.store_namespace)

    # -- Reading -----------------------------------------------------------

    def load(self) -> dict[str, Any]:
        """(Re)read the namespace from disk; a missing file means an empty store."""
        self._values = dict(self._read_namespace(self._read_document()))
        return self.get_all()

    def get(self, key: OptionKey | str, default: Any = None) -> Any:
        return self._values.get(_key(key), default)

    def get_all(self) -> dict[str, Any]:
        return dict(self._values)

    # -- Writing -----------------------------------------------------------

    def set(self, key: OptionKey | str | dict[str, Any], value: Any = None) -> None:
        """Set one key, or every key of a mapping, and persist."""
        if isinstance(key, dict):
            updates = {_key(k): v for k, v in key.items()}
        else:
            updates = {_key(key): value}
        self._values.update(updates)
        self._save()

    def defaults(self, values: dict[str, Any]) -> None:
        """Merge *values* in for keys the store does not hold yet."""
        missing = {
            _key(k): v for k, v in values.items() if _key(k) not in self._values
        }
        if missing:
            self._values.update(missing)
            self._save()

    # -- Internal helpers --------------------------------------------------

    def _read_document(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            document = load_json(self.path)
        except json.JSONDecodeError as exc:
            raise ManifestParseError(str(self.path), str(exc)) from exc
        if not isinstance(document, dict):
            raise ManifestParseError(str(self.path), "expected a JSON object")
        return document

    def _read_namespace(self, document: dict[str, Any]) -> dict[str, Any]:
        values = document.get(self.namespace, {})
        if not isinstance(values, dict):
            raise InputError(
                f"Stored answers under {self.namespace!r} in {self.path} are not an object"
            )
        return values

    def _save(self) -> None:
        document = self._read_document()
        document[self.namespace] = self._values
        save_json_sync(document, self.path)


def _key(key: OptionKey | str) -> str:
    return key.value if isinstance(key, OptionKey) else key

"""Exception types raised by create-semantic-module.

Nothing in the generator catches these; they surface at the process boundary
with the standard traceback.
"""

from __future__ import annotations


class SemanticModuleError(Exception):
    """Base class for all generator errors."""


class InputError(SemanticModuleError):
    """Raised when CLI input or persisted answers cannot be used."""


class FileSystemError(SemanticModuleError):
    """Raised when the destination or one of its files cannot be written or read."""


class ManifestNotFoundError(FileSystemError):
    """Raised when the destination has no ``package.json`` to patch."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Package manifest not found: {path}")


class ManifestParseError(SemanticModuleError):
    """Raised when a JSON file the generator owns or patches is malformed."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f"Cannot parse {path}: {reason}")


class ExternalProcessError(SemanticModuleError):
    """Raised when a package-manager command exits with a non-zero status."""

    def __init__(self, command: str, returncode: int, stderr: str = "") -> None:
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        message = f"Command failed with exit code {returncode}: {command}"
        if stderr:
            message = f"{message}\n{stderr}"
        super().__init__(message)

"""Shared pytest fixtures for the create-semantic-module test suite.

Provides reusable fixtures for:
- Temporary module directories with a ``package.json``
- A scripted prompter standing in for the terminal
- A recording command runner standing in for npm / yarn
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from semantic_module.installer import PackageInstaller
from semantic_module.prompting import (
    ADAPTER_MESSAGE,
    COMMITLINT_MESSAGE,
    CUSTOM_COMMITLINT_MESSAGE,
    PACKAGER_MESSAGE,
)
from semantic_module.store import ConfigStore


# ---------------------------------------------------------------------------
# Fakes
# ---------------------------------------------------------------------------

class FakePrompter:
    """Answers questions from a ``{message: answer}`` script.

    Every question is recorded as ``(message, choices, default)``; asking a
    question that is not scripted fails the test.
    """

    def __init__(self, answers: dict[str, str]) -> None:
        self.answers = dict(answers)
        self.asked: list[tuple[str, list[str] | None, str | None]] = []

    async def ask_choice(self, message: str, choices: list[str], default: str | None) -> str:
        self.asked.append((message, list(choices), default))
        return self._answer(message)

    async def ask_text(self, message: str, default: str | None) -> str:
        self.asked.append((message, None, default))
        return self._answer(message)

    def _answer(self, message: str) -> str:
        if message not in self.answers:
            raise AssertionError(f"Unexpected prompt: {message}")
        return self.answers[message]

    def messages(self) -> list[str]:
        return [message for message, _choices, _default in self.asked]

    def default_for(self, message: str) -> str | None:
        for asked_message, _choices, default in self.asked:
            if asked_message == message:
                return default
        raise AssertionError(f"Prompt was not shown: {message}")


class RecordingRunner:
    """Async stand-in for ``run_command`` that records each call."""

    def __init__(self, returncodes: list[int] | None = None, stderr: str = "") -> None:
        self.returncodes = list(returncodes or [])
        self.stderr = stderr
        self.calls: list[tuple[list[str], dict[str, Any]]] = []

    async def __call__(self, cmd: list[str], **kwargs: Any) -> tuple[int, str, str]:
        self.calls.append((list(cmd), kwargs))
        returncode = self.returncodes.pop(0) if self.returncodes else 0
        return (returncode, "", self.stderr if returncode else "")

    @property
    def commands(self) -> list[list[str]]:
        return [cmd for cmd, _kwargs in self.calls]


def make_answers(
    adapter: str = "@commitlint/prompt",
    commitlint: str = "@commitlint/config-conventional",
    packager: str | None = None,
    custom_name: str | None = None,
) -> dict[str, str]:
    """Build a prompter script for one run."""
    answers = {ADAPTER_MESSAGE: adapter, COMMITLINT_MESSAGE: commitlint}
    if packager is not None:
        answers[PACKAGER_MESSAGE] = packager
    if custom_name is not None:
        answers[CUSTOM_COMMITLINT_MESSAGE] = custom_name
    return answers


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

SAMPLE_MANIFEST: dict[str, Any] = {
    "name": "foo",
    "version": "1.0.0",
    "scripts": {"test": "jest", "commit": "echo old"},
    "config": {"unrelated": {"keep": True}},
    "devDependencies": {"jest": "^29.0.0"},
}


def write_manifest(directory: Path, manifest: dict[str, Any] | None = None) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / "package.json"
    path.write_text(json.dumps(manifest or SAMPLE_MANIFEST, indent=2) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def module_dir(tmp_path: Path) -> Path:
    """A ``foo`` module directory containing a ``package.json``."""
    directory = tmp_path / "foo"
    write_manifest(directory)
    yield directory


@pytest.fixture
def store(tmp_path: Path) -> ConfigStore:
    """An empty store in a fresh temporary directory."""
    return ConfigStore.for_directory(tmp_path)


@pytest.fixture
def runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture
def installer(runner: RecordingRunner) -> PackageInstaller:
    return PackageInstaller(runner=runner)


@pytest.fixture
def make_prompter():
    """Factory for scripted prompters.

    Usage:
        def test_run(make_prompter):
            prompter = make_prompter(adapter="cz-customizable", commitlint="none")
    """
    def factory(**kwargs: Any) -> FakePrompter:
        return FakePrompter(make_answers(**kwargs))

    return factory


@pytest.fixture
def manifest_writer():
    """Return the helper that writes a ``package.json`` into a directory."""
    return write_manifest


@pytest.fixture
def make_runner():
    """Factory for recording runners with scripted return codes."""
    return RecordingRunner

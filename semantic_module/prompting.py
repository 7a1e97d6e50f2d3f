"""Interactive collection of the generator's answers.

Questions are asked one at a time through a ``Prompter``.  ``RichPrompter``
renders them on the terminal with ``rich.prompt``; tests pass a scripted fake
with the same two coroutine methods.
"""

from __future__ import annotations

import asyncio
from enum import Enum
from typing import Any, Protocol

from rich.console import Console
from rich.prompt import Prompt

from .config import (
    COMMITIZEN_ADAPTERS,
    CUSTOM_CHOICE,
    KNOWN_COMMITLINT_CONFIGS,
    NONE_CHOICE,
    PACKAGERS,
    OptionKey,
)
from .store import ConfigStore
from .utils import console as shared_console

SEPARATOR = "---"

PACKAGER_MESSAGE = "Which packager do you use?"
ADAPTER_MESSAGE = "Which commitizen adapter do you prefer?"
COMMITLINT_MESSAGE = "Which commitlint configuration would you like to extend?"
CUSTOM_COMMITLINT_MESSAGE = "What is the package name of your custom commitlint config?"

COMMITLINT_CHOICES: list[str] = [
    *KNOWN_COMMITLINT_CONFIGS,
    SEPARATOR,
    CUSTOM_CHOICE,
    NONE_CHOICE,
]


class Prompter(Protocol):
    """Asks one question and waits for the answer."""

    async def ask_choice(self, message: str, choices: list[str], default: str | None) -> str:
        ...

    async def ask_text(self, message: str, default: str | None) -> str:
        ...


class RichPrompter:
    """Terminal prompter backed by ``rich.prompt.Prompt``.

    List questions are shown as a numbered menu; the user may answer with the
    number or the choice itself.  Blocking reads run in a worker thread.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or shared_console

    async def ask_choice(self, message: str, choices: list[str], default: str | None) -> str:
        return await asyncio.to_thread(self._ask_choice, message, choices, default)

    async def ask_text(self, message: str, default: str | None) -> str:
        return await asyncio.to_thread(self._ask_text, message, default)

    def _ask_choice(self, message: str, choices: list[str], default: str | None) -> str:
        selectable = [c for c in choices if c != SEPARATOR]
        self.console.print(f"[bold]?[/bold] {message}")
        number = 0
        for choice in choices:
            if choice == SEPARATOR:
                self.console.print("  [dim]──────────────[/dim]")
                continue
            number += 1
            marker = "[cyan]>[/cyan]" if choice == default else " "
            self.console.print(f" {marker} {number}) {choice}")

        numbers = [str(i) for i in range(1, len(selectable) + 1)]
        answer = Prompt.ask(
            "  Answer",
            console=self.console,
            choices=numbers + selectable,
            show_choices=False,
            default=default if default in selectable else selectable[0],
        )
        if answer in numbers:
            return selectable[int(answer) - 1]
        return answer

    def _ask_text(self, message: str, default: str | None) -> str:
        return Prompt.ask(f"[bold]?[/bold] {message}", console=self.console, default=default or "")


# ---------------------------------------------------------------------------
# Commitlint config question
# ---------------------------------------------------------------------------


class CollectionState(Enum):
    COLLECTING = "collecting"
    COLLECTING_CUSTOM_NAME = "collecting-custom-name"
    RESOLVED = "resolved"


def default_commitlint_choice(previous: Any) -> str:
    """Pick the list entry pre-selected for a previously stored value.

    A well-known config selects itself, any other non-empty value selects
    ``custom``, and nothing (or ``False``) selects ``none``.
    """
    if previous in KNOWN_COMMITLINT_CONFIGS:
        return previous
    if previous:
        return CUSTOM_CHOICE
    return NONE_CHOICE


class CommitlintQuestion:
    """Two-step question: pick from the list, then optionally name a package.

    ``COLLECTING`` moves to ``COLLECTING_CUSTOM_NAME`` on ``custom`` and to
    ``RESOLVED`` on anything else.  The follow-up is pre-filled with the
    previously stored value even when the list defaulted to ``custom``.
    """

    def __init__(self, previous: Any) -> None:
        self.previous = previous
        self.state = CollectionState.COLLECTING
        self.value: str | bool | None = None

    @property
    def default_choice(self) -> str:
        return default_commitlint_choice(self.previous)

    @property
    def custom_default(self) -> str | None:
        if isinstance(self.previous, str) and self.previous:
            return self.previous
        return None

    def advance(self, answer: str) -> CollectionState:
        if self.state is CollectionState.COLLECTING:
            if answer == CUSTOM_CHOICE:
                self.state = CollectionState.COLLECTING_CUSTOM_NAME
                return self.state
            self.value = False if answer == NONE_CHOICE else answer
        elif self.state is CollectionState.COLLECTING_CUSTOM_NAME:
            self.value = answer.strip() or False
        else:
            raise RuntimeError("Commitlint question is already resolved")
        self.state = CollectionState.RESOLVED
        return self.state

    async def ask(self, prompter: Prompter) -> str | bool:
        while self.state is not CollectionState.RESOLVED:
            if self.state is CollectionState.COLLECTING:
                answer = await prompter.ask_choice(
                    COMMITLINT_MESSAGE, COMMITLINT_CHOICES, self.default_choice
                )
            else:
                answer = await prompter.ask_text(CUSTOM_COMMITLINT_MESSAGE, self.custom_default)
            self.advance(answer)
        return self.value


# ---------------------------------------------------------------------------
# Full collection
# ---------------------------------------------------------------------------


async def collect_answers(
    prompter: Prompter,
    store: ConfigStore,
    prompt_packager: bool,
) -> dict[str, Any]:
    """Ask every question and persist the merged answers once.

    Returns:
        ``{optionKey: answer}`` for each question that was asked.
    """
    answers: dict[str, Any] = {}

    if prompt_packager:
        answers[OptionKey.PACKAGER.value] = await prompter.ask_choice(
            PACKAGER_MESSAGE, PACKAGERS, store.get(OptionKey.PACKAGER)
        )

    answers[OptionKey.COMMITIZEN_ADAPTER.value] = await prompter.ask_choice(
        ADAPTER_MESSAGE, COMMITIZEN_ADAPTERS, store.get(OptionKey.COMMITIZEN_ADAPTER)
    )

    question = CommitlintQuestion(store.get(OptionKey.COMMITLINT_CONFIG))
    answers[OptionKey.COMMITLINT_CONFIG.value] = await question.ask(prompter)

    store.set(answers)
    return answers

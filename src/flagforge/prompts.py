#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Answer sources for interactive runs.

Every question the engine asks goes through a ``Prompter``. The CLI uses
``ClickPrompter``; tests and replays use ``ScriptedPrompter`` with a list of
canned answers.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Sequence
from typing import Any, Protocol

import click
from provide.foundation.console import perr, pout

Validator = Callable[[str], "str | None"]


class Prompter(Protocol):
    """Blocking request/response exchange with the operator."""

    def select(self, message: str, choices: Sequence[str], default: str | None = None) -> str: ...

    def text(self, message: str, default: str | None = None) -> str: ...

    def confirm(self, message: str, default: bool = True) -> bool: ...

    def warn(self, message: str) -> None: ...


def ask_text(
    prompter: Prompter,
    message: str,
    validate: Validator | None = None,
    default: str | None = None,
) -> str:
    """Ask until the answer passes ``validate``; rejections are shown inline."""
    while True:
        answer = prompter.text(message, default=default).strip()
        error = validate(answer) if validate else None
        if error is None:
            return answer
        prompter.warn(error)


class ClickPrompter:
    """Prompter backed by click's terminal prompts."""

    def select(self, message: str, choices: Sequence[str], default: str | None = None) -> str:
        if not choices:
            raise ValueError("Nothing to select from")
        pout(f"\n{message}")
        for index, choice in enumerate(choices, start=1):
            pout(f"  {index:>2}) {choice}")
        default_index = choices.index(default) + 1 if default in choices else None
        picked = click.prompt(
            "Choice",
            type=click.IntRange(1, len(choices)),
            default=default_index,
            show_default=default_index is not None,
        )
        return choices[picked - 1]

    def text(self, message: str, default: str | None = None) -> str:
        value: str = click.prompt(message, default=default, show_default=default is not None)
        return value

    def confirm(self, message: str, default: bool = True) -> bool:
        return click.confirm(message, default=default)

    def warn(self, message: str) -> None:
        perr(f"⚠️  {message}")


class ScriptedPrompter:
    """Prompter that replays canned answers in order.

    Answers for ``select`` must be one of the offered choices. Running out of
    answers aborts the run the same way an interrupted terminal prompt does.
    """

    def __init__(self, answers: Iterable[Any]) -> None:
        self._answers: deque[Any] = deque(answers)
        self.transcript: list[tuple[str, str, tuple[str, ...]]] = []
        self.warnings: list[str] = []

    @property
    def remaining(self) -> int:
        return len(self._answers)

    def _next(self, kind: str, message: str, choices: Sequence[str] = ()) -> Any:
        self.transcript.append((kind, message, tuple(choices)))
        if not self._answers:
            raise click.Abort()
        return self._answers.popleft()

    def select(self, message: str, choices: Sequence[str], default: str | None = None) -> str:
        answer = self._next("select", message, choices)
        if answer is None and default is not None:
            return default
        if answer not in choices:
            raise ValueError(f"Scripted answer {answer!r} is not among the offered choices {list(choices)!r}")
        return str(answer)

    def text(self, message: str, default: str | None = None) -> str:
        answer = self._next("text", message)
        if answer is None:
            return default or ""
        return str(answer)

    def confirm(self, message: str, default: bool = True) -> bool:
        answer = self._next("confirm", message)
        return default if answer is None else bool(answer)

    def warn(self, message: str) -> None:
        self.warnings.append(message)


# 🚩🧩🔚

"""Validated terminal prompts built on :mod:`rich`."""

from __future__ import annotations

import re
from typing import Callable, Protocol, TextIO, runtime_checkable

from rich.console import Console
from rich.markup import escape

from .errors import PromptFailure

__all__ = ["ConsolePrompter", "Prompter", "YES_NO", "is_yes"]


YES_NO = re.compile(r"^(yes|no|y|n)$", re.IGNORECASE)


def is_yes(answer: str) -> bool:
    """Return ``True`` for ``yes``/``y`` in any case."""

    return answer.strip().lower() in {"yes", "y"}


@runtime_checkable
class Prompter(Protocol):
    """Something that can ask the user a question and return a valid answer."""

    def ask(self, message: str, validate: Callable[[str], bool], error_message: str) -> str:
        """Ask until *validate* accepts the answer."""

    def confirm(self, message: str) -> bool:
        """Ask a yes/no question."""


class ConsolePrompter:
    """Ask questions on a rich console, re-asking until the answer is valid.

    ``stream`` replaces standard input when given, which is how tests feed
    answers. End of input, an interrupt or an unusable terminal all surface as
    :class:`PromptFailure`.
    """

    def __init__(self, console: Console | None = None, stream: TextIO | None = None) -> None:
        self.console = console or Console()
        self.stream = stream

    def _read(self, message: str) -> str:
        try:
            answer = self.console.input(f"[cyan]{escape(message)}[/cyan] ", stream=self.stream)
        except (EOFError, KeyboardInterrupt, OSError) as exc:
            raise PromptFailure("no answer could be read from the terminal") from exc
        if self.stream is not None and not answer:
            raise PromptFailure("input ended before a valid answer was given")
        return answer.rstrip("\r\n")

    def ask(self, message: str, validate: Callable[[str], bool], error_message: str) -> str:
        while True:
            answer = self._read(message)
            if answer and validate(answer):
                return answer
            self.console.print(f"[red]{escape(error_message)}[/red]")

    def confirm(self, message: str) -> bool:
        answer = self.ask(
            message,
            lambda value: bool(YES_NO.fullmatch(value)),
            "Please answer Yes or No.",
        )
        return is_yes(answer)

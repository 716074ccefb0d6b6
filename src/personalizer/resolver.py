"""Decide which name the library is going to be called."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .naming import (
    DEFAULT_TEMPLATE_NAME,
    FALLBACK_NAME,
    is_valid_project_name,
    suggest_project_name,
)
from .prompts import Prompter

__all__ = ["NameResolver"]


LOGGER = logging.getLogger(__name__)

NAME_QUESTION = "What do you want the library to be called (kebab-case):"
NAME_MISMATCH = "Library name must be kebab-case: lowercase words separated by dashes, e.g. my-library."


@dataclass(slots=True)
class NameResolver:
    """Produce a valid project name from CI state, the directory name or the user.

    In an automated environment the fallback name is used without asking.
    Otherwise the directory name is offered as a suggestion, unless it is the
    template's own name or not usable as a library name, and the user is asked
    for a name when the suggestion is declined.
    """

    prompter: Prompter
    default_name: str = DEFAULT_TEMPLATE_NAME
    fallback_name: str = FALLBACK_NAME

    def resolve(self, root: Path, *, automated: bool) -> str:
        if automated:
            LOGGER.debug("automated environment detected, using %r", self.fallback_name)
            return self.fallback_name

        suggestion = suggest_project_name(Path(root).resolve().name)
        if self._should_offer(suggestion) and self.prompter.confirm(
            f'Would you like it to be called "{suggestion}"? [Yes/No]:'
        ):
            return suggestion

        return self.ask_name()

    def ask_name(self) -> str:
        return self.prompter.ask(NAME_QUESTION, is_valid_project_name, NAME_MISMATCH)

    def _should_offer(self, suggestion: str) -> bool:
        if suggestion == self.default_name:
            return False
        if not is_valid_project_name(suggestion):
            LOGGER.debug("directory based suggestion %r is not kebab-case", suggestion)
            return False
        return True

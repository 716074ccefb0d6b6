"""Project name derivation and validation."""

from __future__ import annotations

import re

from .errors import ValidationFailure

__all__ = [
    "DEFAULT_TEMPLATE_NAME",
    "FALLBACK_NAME",
    "KEBAB_CASE",
    "is_valid_project_name",
    "suggest_project_name",
    "validate_project_name",
]


DEFAULT_TEMPLATE_NAME = "typescript-library-starter"
FALLBACK_NAME = "test"

KEBAB_CASE = re.compile(r"^[a-z]+(-[a-z]+)*$")
_NON_WORD = re.compile(r"[^\w]|_", re.ASCII)


def suggest_project_name(directory_name: str) -> str:
    """Turn a directory name into a kebab-case suggestion.

    Every character that is not an ASCII letter, digit or underscore, and
    every underscore, becomes a dash. Leading and trailing dashes are dropped
    and the result is lowercased::

        >>> suggest_project_name("My_Cool Lib!!")
        'my-cool-lib'

    Runs of dashes are kept as they are, so the suggestion is not guaranteed to
    be a valid project name; check it with :func:`is_valid_project_name`.
    """

    dashed = _NON_WORD.sub("-", directory_name)
    return dashed.strip("-").lower()


def is_valid_project_name(name: str) -> bool:
    """Return ``True`` when *name* is lowercase kebab-case."""

    if not isinstance(name, str):
        return False
    return bool(KEBAB_CASE.fullmatch(name))


def validate_project_name(name: str) -> str:
    """Return *name* unchanged or raise :class:`ValidationFailure`."""

    if not is_valid_project_name(name):
        raise ValidationFailure(
            f"'{name}' is not a valid library name. Use kebab-case, e.g. my-library."
        )
    return name

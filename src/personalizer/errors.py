"""Exception types raised while personalizing a template checkout."""

from __future__ import annotations

from pathlib import Path


class PersonalizerError(RuntimeError):
    """Base class for every error raised by the personalizer."""


class PreconditionFailure(PersonalizerError):
    """Raised when a required external tool is not available."""

    def __init__(self, tool: str) -> None:
        super().__init__(f"Sorry, this script requires {tool}")
        self.tool = tool


class PromptFailure(PersonalizerError):
    """Raised when the interactive prompt layer cannot read an answer."""


class ValidationFailure(PersonalizerError, ValueError):
    """Raised when a value does not satisfy the expected format."""


class SubstitutionFailure(PersonalizerError):
    """Raised when placeholder replacement fails for a single file."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Could not update {path}: {reason}")
        self.path = path
        self.reason = reason


__all__ = [
    "PersonalizerError",
    "PreconditionFailure",
    "PromptFailure",
    "SubstitutionFailure",
    "ValidationFailure",
]

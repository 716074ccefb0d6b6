"""Thin wrappers around the ``git`` command line."""

from __future__ import annotations

import logging
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path

from .errors import PreconditionFailure

__all__ = ["GitIdentity", "git_init", "read_identity", "require_git"]


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GitIdentity:
    """Author details taken from the user's git configuration."""

    name: str = ""
    email: str = ""


def require_git() -> str:
    """Return the path of the ``git`` executable or raise :class:`PreconditionFailure`."""

    executable = shutil.which("git")
    if executable is None:
        raise PreconditionFailure("git")
    return executable


def _config_value(key: str, cwd: Path | None) -> str:
    try:
        result = subprocess.run(
            ["git", "config", key],
            cwd=cwd,
            capture_output=True,
            check=False,
            text=True,
        )
    except OSError as exc:
        LOGGER.debug("git config %s failed: %s", key, exc)
        return ""
    return result.stdout.strip()


def read_identity(cwd: Path | None = None) -> GitIdentity:
    """Read ``user.name`` and ``user.email``; unset values come back empty."""

    return GitIdentity(
        name=_config_value("user.name", cwd),
        email=_config_value("user.email", cwd),
    )


def git_init(directory: Path) -> str:
    """Initialise a fresh repository in *directory* and return git's message."""

    result = subprocess.run(
        ["git", "init", str(directory)],
        capture_output=True,
        check=True,
        text=True,
    )
    return " ".join(result.stdout.split())

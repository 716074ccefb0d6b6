"""Run configuration shared by the resolver, mutator and CLI."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

from .git import GitIdentity
from .manifest import DEFAULT_MANIFEST, FileManifest
from .naming import validate_project_name
from .placeholders import LIBRARY_NAME_TOKEN, USERMAIL_TOKEN, USERNAME_TOKEN

__all__ = ["AUTOMATED_ENV_VAR", "ProjectConfig", "is_automated"]


AUTOMATED_ENV_VAR = "CI"


def is_automated(env: Mapping[str, str] | None = None) -> bool:
    """Return ``True`` when running inside CI or another non-interactive runner."""

    environment: Mapping[str, str] = env if env is not None else os.environ
    return environment.get(AUTOMATED_ENV_VAR) is not None


@dataclass(frozen=True, slots=True)
class ProjectConfig:
    """Everything the mutation steps need, built once per run.

    Attributes
    ----------
    root:
        Directory of the template checkout. Manifest paths are relative to it.
    name:
        The kebab-case library name. Validated on construction.
    identity:
        Author name and email substituted into the template.
    manifest:
        The files to delete, rewrite and rename.
    """

    root: Path
    name: str
    identity: GitIdentity = field(default_factory=GitIdentity)
    manifest: FileManifest = DEFAULT_MANIFEST

    def __post_init__(self) -> None:
        validate_project_name(self.name)
        object.__setattr__(self, "root", Path(self.root))

    def replacements(self) -> Mapping[str, str]:
        """Map each placeholder token to its value for this project."""

        return {
            LIBRARY_NAME_TOKEN: self.name,
            USERNAME_TOKEN: self.identity.name,
            USERMAIL_TOKEN: self.identity.email,
        }

    def resolve(self, relative: str) -> Path:
        """Return *relative* anchored at the project root."""

        return self.root / relative

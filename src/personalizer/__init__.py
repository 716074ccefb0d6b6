"""Personalize a freshly cloned library template.

The package resolves a kebab-case library name (from CI state, the checkout's
directory name or an interactive prompt) and then rewrites the checkout:
template-only files are removed, placeholder tokens are filled in and
placeholder-named files are renamed.
"""

from __future__ import annotations

from .config import ProjectConfig, is_automated
from .errors import (
    PersonalizerError,
    PreconditionFailure,
    PromptFailure,
    SubstitutionFailure,
    ValidationFailure,
)
from .git import GitIdentity
from .manifest import DEFAULT_MANIFEST, FileManifest, RenamePair, StepReport
from .mutator import FileMutator
from .naming import is_valid_project_name, suggest_project_name, validate_project_name
from .orchestrator import Personalizer, RunResult, Stage
from .placeholders import PlaceholderReplacer
from .prompts import ConsolePrompter
from .resolver import NameResolver

__all__ = [
    "ConsolePrompter",
    "DEFAULT_MANIFEST",
    "FileManifest",
    "FileMutator",
    "GitIdentity",
    "NameResolver",
    "Personalizer",
    "PersonalizerError",
    "PlaceholderReplacer",
    "PreconditionFailure",
    "ProjectConfig",
    "PromptFailure",
    "RenamePair",
    "RunResult",
    "Stage",
    "StepReport",
    "SubstitutionFailure",
    "ValidationFailure",
    "is_automated",
    "is_valid_project_name",
    "suggest_project_name",
    "validate_project_name",
]

__version__ = "0.1.0"

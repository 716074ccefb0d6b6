"""Declarative description of the files touched while personalizing."""

from __future__ import annotations

from pathlib import Path
from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .placeholders import LIBRARY_NAME_TOKEN

__all__ = ["DEFAULT_MANIFEST", "FileManifest", "RenamePair", "StepReport"]


class RenamePair(BaseModel):
    """A file to move once the project name is known."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    source: str = Field(..., description="Path of the file to move, relative to the project root.")
    target_template: str = Field(
        ...,
        description="Destination path containing the library name token.",
    )

    @field_validator("target_template")
    @classmethod
    def _requires_token(cls, value: str) -> str:
        if LIBRARY_NAME_TOKEN not in value:
            raise ValueError(f"rename target must contain {LIBRARY_NAME_TOKEN!r}")
        return value

    def target_for(self, project_name: str) -> str:
        """Return the destination path for *project_name*."""

        return self.target_template.replace(LIBRARY_NAME_TOKEN, project_name)


class FileManifest(BaseModel):
    """Paths to delete, rewrite and rename, relative to the project root."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    delete: Tuple[str, ...] = Field(default=(), description="Template-only paths removed first.")
    substitute: Tuple[str, ...] = Field(
        default=(), description="Files whose placeholder tokens are replaced."
    )
    rename: Tuple[RenamePair, ...] = Field(
        default=(), description="Files moved to their project specific names last."
    )

    @classmethod
    def from_file(cls, path: str | Path) -> "FileManifest":
        """Load a manifest stored as JSON."""

        return cls.model_validate_json(Path(path).read_text(encoding="utf-8"))


class StepReport(BaseModel):
    """Outcome of a single mutation step."""

    model_config = ConfigDict(extra="forbid")

    step: str = Field(..., description="Name of the step that produced this report.")
    changed: List[str] = Field(default_factory=list, description="Paths the step modified.")
    skipped: List[str] = Field(default_factory=list, description="Paths the step left alone.")
    failures: List[str] = Field(default_factory=list, description="Human readable failure messages.")

    @property
    def ok(self) -> bool:
        return not self.failures


DEFAULT_MANIFEST = FileManifest(
    delete=(".git", ".all-contributorsrc", ".gitattributes", "tools/init.ts"),
    substitute=(
        "LICENSE",
        "package.json",
        "rollup.config.ts",
        "test/library.test.ts",
        "tools/gh-pages-publish.ts",
    ),
    rename=(
        RenamePair(source="src/library.ts", target_template=f"src/{LIBRARY_NAME_TOKEN}.ts"),
        RenamePair(
            source="test/library.test.ts",
            target_template=f"test/{LIBRARY_NAME_TOKEN}.test.ts",
        ),
    ),
)

"""Sequence name resolution and the file mutations for a single run."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from .config import ProjectConfig
from .errors import PersonalizerError, PromptFailure
from .git import GitIdentity
from .manifest import DEFAULT_MANIFEST, FileManifest, StepReport
from .mutator import FileMutator
from .resolver import NameResolver

__all__ = ["Personalizer", "RunResult", "Stage"]


LOGGER = logging.getLogger(__name__)


class Stage(str, Enum):
    """Lifecycle of a personalization run."""

    AWAITING_NAME = "awaiting_name"
    MUTATING = "mutating"
    DONE = "done"
    FAILED = "failed"


_TRANSITIONS: dict[Stage, frozenset[Stage]] = {
    Stage.AWAITING_NAME: frozenset({Stage.MUTATING, Stage.FAILED}),
    Stage.MUTATING: frozenset({Stage.DONE}),
    Stage.DONE: frozenset(),
    Stage.FAILED: frozenset(),
}


@dataclass(slots=True)
class RunResult:
    """What happened during :meth:`Personalizer.run`."""

    stage: Stage
    name: str | None = None
    reports: list[StepReport] = field(default_factory=list)

    @property
    def failures(self) -> list[str]:
        return [failure for report in self.reports for failure in report.failures]


class Personalizer:
    """Resolve the library name, then delete, substitute, rename and finalize."""

    def __init__(
        self,
        resolver: NameResolver,
        *,
        identity: GitIdentity | None = None,
        manifest: FileManifest = DEFAULT_MANIFEST,
        console: Console | None = None,
    ) -> None:
        self.resolver = resolver
        self.identity = identity or GitIdentity()
        self.manifest = manifest
        self.console = console or Console()
        self._stage = Stage.AWAITING_NAME

    @property
    def stage(self) -> Stage:
        return self._stage

    def _advance(self, stage: Stage) -> None:
        if stage not in _TRANSITIONS[self._stage]:
            raise PersonalizerError(f"cannot move from {self._stage.value} to {stage.value}")
        LOGGER.debug("stage %s -> %s", self._stage.value, stage.value)
        self._stage = stage

    def run(self, root: Path, *, automated: bool) -> RunResult:
        """Personalize the checkout at *root*.

        A :class:`PromptFailure` while asking for the name moves the run to
        ``FAILED`` and is re-raised. Problems during the mutation steps are
        reported but never stop the run from reaching ``DONE``.
        """

        if self._stage is not Stage.AWAITING_NAME:
            raise PersonalizerError("a personalizer can only run once")

        try:
            name = self.resolver.resolve(root, automated=automated)
        except PromptFailure:
            self._advance(Stage.FAILED)
            raise

        self.console.print(f"[green]The library is going to be called: {escape(name)}[/green]")
        self._advance(Stage.MUTATING)

        config = ProjectConfig(root=Path(root), name=name, identity=self.identity, manifest=self.manifest)
        mutator = FileMutator(config)
        reports = []
        for step in (mutator.delete, mutator.substitute, mutator.rename, mutator.finalize):
            report = step()
            self._show(report)
            reports.append(report)

        self._advance(Stage.DONE)
        self.console.print("[cyan]OK, you're all set. Happy coding!! ;)[/cyan]")
        return RunResult(stage=self._stage, name=name, reports=reports)

    def _show(self, report: StepReport) -> None:
        self.console.print(f"\n[underline]{report.step.capitalize()}[/underline]")
        for path in report.changed:
            self.console.print(f"[green]  ✓ {escape(path)}[/green]")
        for path in report.skipped:
            self.console.print(f"[dim]  - {escape(path)}[/dim]")

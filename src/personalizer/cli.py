"""Command line entry point for personalizing a template checkout."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Iterable, Mapping

from rich.console import Console
from rich.markup import escape
from rich.logging import RichHandler

from .config import is_automated
from .errors import PreconditionFailure, PromptFailure
from .git import read_identity, require_git
from .orchestrator import Personalizer
from .prompts import ConsolePrompter, Prompter
from .resolver import NameResolver

__all__ = ["build_parser", "main"]


LOGGER = logging.getLogger("personalizer")


def build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog="personalize-template",
        description=(
            "Personalize a freshly cloned library template: pick a name, remove "
            "template-only files, fill in placeholders and rename files. Set CI "
            "to run without prompts."
        ),
    )


def _configure_logging(console: Console) -> None:
    for existing in [h for h in LOGGER.handlers if isinstance(h, RichHandler)]:
        LOGGER.removeHandler(existing)
    handler = RichHandler(console=console, show_time=False, show_path=False)
    LOGGER.addHandler(handler)
    LOGGER.setLevel(logging.WARNING)


def main(
    argv: Iterable[str] | None = None,
    env: Mapping[str, str] | None = None,
    *,
    root: Path | None = None,
    console: Console | None = None,
    prompter: Prompter | None = None,
) -> int:
    build_parser().parse_args(list(argv) if argv is not None else None)
    environment: Mapping[str, str] = env if env is not None else os.environ
    project_root = Path(root) if root is not None else Path.cwd()
    console = console or Console()
    _configure_logging(console)

    try:
        require_git()
    except PreconditionFailure as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        return 1

    identity = read_identity(project_root)
    automated = is_automated(environment)

    console.clear()
    console.print("[cyan]Hi! You're almost ready to make the next great TypeScript library.[/cyan]")

    resolver = NameResolver(prompter or ConsolePrompter(console))
    personalizer = Personalizer(resolver, identity=identity, console=console)
    try:
        personalizer.run(project_root, automated=automated)
    except PromptFailure as exc:
        LOGGER.debug("prompt failed: %s", exc)
        console.print("[red]There was an error building the workspace :([/red]")
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())

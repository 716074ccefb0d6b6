"""Filesystem mutations that turn the template into the user's project."""

from __future__ import annotations

import json
import logging
import shutil
import subprocess
from dataclasses import dataclass, field
from pathlib import Path

from .config import ProjectConfig
from .errors import SubstitutionFailure
from .git import git_init
from .manifest import StepReport
from .placeholders import PlaceholderReplacer

__all__ = ["FileMutator"]


LOGGER = logging.getLogger(__name__)

POSTINSTALL_PACKAGE_FILE = "package.json"


def _remove(path: Path) -> bool:
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
        return True
    if path.exists() or path.is_symlink():
        path.unlink()
        return True
    return False


@dataclass(slots=True)
class FileMutator:
    """Apply a :class:`ProjectConfig` to the checkout it points at.

    The steps must run in order: delete, substitute, rename, finalize.
    Failures are logged and collected in the returned :class:`StepReport`
    objects; nothing is rolled back.
    """

    config: ProjectConfig
    replacer: PlaceholderReplacer = field(default_factory=PlaceholderReplacer)

    def delete(self) -> StepReport:
        """Remove template-only paths. Missing paths are skipped."""

        report = StepReport(step="delete")
        for relative in self.config.manifest.delete:
            path = self.config.resolve(relative)
            try:
                removed = _remove(path)
            except OSError as exc:
                LOGGER.error("Could not remove %s: %s", path, exc)
                report.failures.append(f"{relative}: {exc}")
                continue
            (report.changed if removed else report.skipped).append(relative)
        return report

    def substitute(self) -> StepReport:
        """Replace the placeholder tokens in every listed file."""

        report = StepReport(step="substitute")
        replacements = self.config.replacements()
        for relative in self.config.manifest.substitute:
            path = self.config.resolve(relative)
            if not path.is_file():
                LOGGER.warning("Skipping %s, file not found", relative)
                report.skipped.append(relative)
                continue
            try:
                self.replacer.render_file(path, replacements)
            except SubstitutionFailure as exc:
                LOGGER.error("%s", exc)
                report.failures.append(str(exc))
                continue
            report.changed.append(relative)
        return report

    def rename(self) -> StepReport:
        """Move each placeholder-named file to its project specific path."""

        report = StepReport(step="rename")
        for pair in self.config.manifest.rename:
            source = self.config.resolve(pair.source)
            target_relative = pair.target_for(self.config.name)
            target = self.config.resolve(target_relative)
            if target.is_dir():
                LOGGER.error("Could not rename %s, %s is a directory", pair.source, target_relative)
                report.failures.append(f"{pair.source}: {target_relative} is a directory")
                continue
            try:
                target.parent.mkdir(parents=True, exist_ok=True)
                shutil.move(str(source), str(target))
            except OSError as exc:
                LOGGER.error("Could not rename %s to %s: %s", pair.source, target_relative, exc)
                report.failures.append(f"{pair.source}: {exc}")
                continue
            report.changed.append(f"{pair.source} -> {target_relative}")
        return report

    def finalize(self) -> StepReport:
        """Start a fresh git history and drop the template's postinstall hook."""

        report = StepReport(step="finalize")
        try:
            message = git_init(self.config.root)
        except (OSError, subprocess.CalledProcessError) as exc:
            LOGGER.error("Could not initialise git repository: %s", exc)
            report.failures.append(f"git init: {exc}")
        else:
            LOGGER.info("%s", message)
            report.changed.append(".git")

        package_file = self.config.resolve(POSTINSTALL_PACKAGE_FILE)
        if not package_file.is_file():
            report.skipped.append(POSTINSTALL_PACKAGE_FILE)
            return report

        try:
            package = json.loads(package_file.read_text(encoding="utf-8"))
            scripts = package.get("scripts") if isinstance(package, dict) else None
            if isinstance(scripts, dict) and "postinstall" in scripts:
                del scripts["postinstall"]
                package_file.write_text(
                    json.dumps(package, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
                )
                report.changed.append(POSTINSTALL_PACKAGE_FILE)
            else:
                report.skipped.append(POSTINSTALL_PACKAGE_FILE)
        except (OSError, ValueError) as exc:
            LOGGER.error("Could not remove postinstall script: %s", exc)
            report.failures.append(f"{POSTINSTALL_PACKAGE_FILE}: {exc}")
        return report

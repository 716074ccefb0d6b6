from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from personalizer.config import ProjectConfig
from personalizer.git import GitIdentity
from personalizer.manifest import DEFAULT_MANIFEST, FileManifest, RenamePair
from personalizer.mutator import FileMutator

IDENTITY = GitIdentity(name="Ada Lovelace", email="ada@example.com")


@pytest.fixture()
def mutator(checkout: Path) -> FileMutator:
    return FileMutator(ProjectConfig(root=checkout, name="awesome-lib", identity=IDENTITY))


def test_delete_removes_files_and_directories(checkout: Path, mutator: FileMutator):
    report = mutator.delete()
    for relative in DEFAULT_MANIFEST.delete:
        assert not (checkout / relative).exists()
    assert sorted(report.changed) == sorted(DEFAULT_MANIFEST.delete)
    assert report.ok


def test_delete_is_idempotent_on_missing_paths(checkout: Path, mutator: FileMutator):
    mutator.delete()
    report = mutator.delete()
    assert report.changed == []
    assert sorted(report.skipped) == sorted(DEFAULT_MANIFEST.delete)
    assert report.ok


def test_substitute_replaces_tokens_in_listed_files(checkout: Path, mutator: FileMutator):
    report = mutator.substitute()
    assert report.ok
    for relative in DEFAULT_MANIFEST.substitute:
        text = (checkout / relative).read_text(encoding="utf-8")
        assert "--libraryname--" not in text
        assert "--username--" not in text
        assert "--usermail--" not in text
    assert (checkout / "LICENSE").read_text(encoding="utf-8") == (
        "Copyright (c) Ada Lovelace <ada@example.com>"
    )
    assert "'awesome-lib'" in (checkout / "rollup.config.ts").read_text(encoding="utf-8")


def test_substitute_leaves_other_files_untouched(checkout: Path, mutator: FileMutator):
    mutator.substitute()
    assert (checkout / "README.md").read_text(encoding="utf-8") == "# --libraryname--"


def test_substitute_skips_missing_files(checkout: Path, mutator: FileMutator):
    (checkout / "rollup.config.ts").unlink()
    report = mutator.substitute()
    assert report.skipped == ["rollup.config.ts"]
    assert "LICENSE" in report.changed


def test_substitute_failure_is_isolated(
    checkout: Path, mutator: FileMutator, caplog: pytest.LogCaptureFixture
):
    (checkout / "LICENSE").write_bytes(b"\xff\xfe --username--")
    with caplog.at_level(logging.ERROR, logger="personalizer.mutator"):
        report = mutator.substitute()
    assert len(report.failures) == 1
    assert "LICENSE" in report.failures[0]
    assert "LICENSE" in caplog.text
    assert "package.json" in report.changed
    assert "Ada Lovelace" in (checkout / "package.json").read_text(encoding="utf-8")


def test_rename_moves_files_to_project_names(checkout: Path, mutator: FileMutator):
    report = mutator.rename()
    assert report.ok
    assert not (checkout / "src" / "library.ts").exists()
    assert not (checkout / "test" / "library.test.ts").exists()
    assert (checkout / "src" / "awesome-lib.ts").is_file()
    assert (checkout / "test" / "awesome-lib.test.ts").is_file()


def test_rename_after_substitute_keeps_content(checkout: Path, mutator: FileMutator):
    mutator.substitute()
    mutator.rename()
    content = (checkout / "test" / "awesome-lib.test.ts").read_text(encoding="utf-8")
    assert content == "import Lib from '../src/awesome-lib'"


def test_rename_failure_is_logged_and_non_fatal(checkout: Path):
    manifest = FileManifest(
        rename=(
            RenamePair(source="missing.ts", target_template="--libraryname--.ts"),
            RenamePair(source="src/library.ts", target_template="lib/--libraryname--.ts"),
        )
    )
    mutator = FileMutator(ProjectConfig(root=checkout, name="awesome-lib", manifest=manifest))
    report = mutator.rename()
    assert len(report.failures) == 1
    assert report.failures[0].startswith("missing.ts")
    assert (checkout / "lib" / "awesome-lib.ts").is_file()


def test_finalize_reinitialises_git_and_drops_postinstall(
    checkout: Path, mutator: FileMutator, fake_git_init: list[Path]
):
    report = mutator.finalize()
    assert report.ok
    assert fake_git_init == [checkout]
    package = json.loads((checkout / "package.json").read_text(encoding="utf-8"))
    assert package["scripts"] == {"test": "jest"}
    assert "package.json" in report.changed


def test_finalize_without_postinstall(checkout: Path, mutator: FileMutator):
    (checkout / "package.json").write_text('{"scripts": {"test": "jest"}}', encoding="utf-8")
    report = mutator.finalize()
    assert report.skipped == ["package.json"]
    assert json.loads((checkout / "package.json").read_text(encoding="utf-8")) == {
        "scripts": {"test": "jest"}
    }


def test_finalize_reports_invalid_package_json(checkout: Path, mutator: FileMutator):
    (checkout / "package.json").write_text("{not json", encoding="utf-8")
    report = mutator.finalize()
    assert len(report.failures) == 1
    assert report.failures[0].startswith("package.json")


def test_finalize_reports_git_failure(
    checkout: Path, mutator: FileMutator, monkeypatch: pytest.MonkeyPatch
):
    def broken(directory: Path) -> str:
        raise FileNotFoundError("git")

    monkeypatch.setattr("personalizer.mutator.git_init", broken)
    report = mutator.finalize()
    assert report.failures[0].startswith("git init")
    assert "package.json" in report.changed


def test_finalize_keeps_non_ascii_author(checkout: Path):
    identity = GitIdentity(name="José Müller", email="jose@example.com")
    mutator = FileMutator(ProjectConfig(root=checkout, name="awesome-lib", identity=identity))
    mutator.substitute()
    mutator.finalize()
    text = (checkout / "package.json").read_text(encoding="utf-8")
    assert '"author": "José Müller <jose@example.com>"' in text
    assert text.endswith("}\n")
    assert "postinstall" not in text


def test_substitute_keeps_crlf_line_endings(checkout: Path, mutator: FileMutator):
    (checkout / "LICENSE").write_bytes(b"line one\r\nCopyright --username--\r\n")
    mutator.substitute()
    assert (checkout / "LICENSE").read_bytes() == b"line one\r\nCopyright Ada Lovelace\r\n"


def test_rename_onto_existing_directory_is_a_failure(checkout: Path, mutator: FileMutator):
    (checkout / "src" / "awesome-lib.ts").mkdir()
    report = mutator.rename()
    assert report.failures == ["src/library.ts: src/awesome-lib.ts is a directory"]
    assert (checkout / "src" / "library.ts").is_file()
    assert not (checkout / "src" / "awesome-lib.ts" / "library.ts").exists()
    assert (checkout / "test" / "awesome-lib.test.ts").is_file()

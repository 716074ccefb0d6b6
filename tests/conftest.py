from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, Iterable

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from personalizer.errors import PromptFailure  # noqa: E402
from personalizer.prompts import is_yes, YES_NO  # noqa: E402


TEMPLATE_FILES = {
    ".all-contributorsrc": "{}",
    ".gitattributes": "* text=auto",
    "tools/init.ts": "// init",
    ".git/HEAD": "ref: refs/heads/main",
    "LICENSE": "Copyright (c) --username-- <--usermail-->",
    "package.json": (
        '{\n  "name": "--libraryname--",\n'
        '  "author": "--username-- <--usermail-->",\n'
        '  "scripts": {\n    "test": "jest",\n    "postinstall": "ts-node tools/init"\n  }\n}'
    ),
    "rollup.config.ts": "const libraryName = '--libraryname--'",
    "test/library.test.ts": "import Lib from '../src/--libraryname--'",
    "tools/gh-pages-publish.ts": "git config user.email '--usermail--'",
    "src/library.ts": "export default class Lib {}",
    "README.md": "# --libraryname--",
}


class ScriptedPrompter:
    """Answer prompts from a fixed list and remember what was asked."""

    def __init__(self, answers: Iterable[str]) -> None:
        self.answers = list(answers)
        self.questions: list[str] = []
        self.rejections: list[str] = []

    def _next(self, message: str) -> str:
        self.questions.append(message)
        if not self.answers:
            raise PromptFailure("no scripted answers left")
        return self.answers.pop(0)

    def ask(self, message: str, validate: Callable[[str], bool], error_message: str) -> str:
        while True:
            answer = self._next(message)
            if validate(answer):
                return answer
            self.rejections.append(answer)

    def confirm(self, message: str) -> bool:
        answer = self.ask(message, lambda value: bool(YES_NO.fullmatch(value)), "yes or no")
        return is_yes(answer)


@pytest.fixture()
def prompter_factory() -> Callable[..., ScriptedPrompter]:
    return lambda *answers: ScriptedPrompter(answers)


def make_checkout(directory: Path) -> Path:
    for relative, content in TEMPLATE_FILES.items():
        path = directory / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return directory


@pytest.fixture()
def checkout(tmp_path: Path) -> Path:
    """A template checkout in a directory named ``awesome-lib``."""

    return make_checkout(tmp_path / "awesome-lib")


@pytest.fixture(autouse=True)
def fake_git_init(monkeypatch: pytest.MonkeyPatch) -> list[Path]:
    """Record ``git init`` calls instead of running git."""

    calls: list[Path] = []

    def _git_init(directory: Path) -> str:
        calls.append(Path(directory))
        (Path(directory) / ".git").mkdir(exist_ok=True)
        return f"Initialized empty Git repository in {directory}/.git/"

    monkeypatch.setattr("personalizer.mutator.git_init", _git_init)
    return calls

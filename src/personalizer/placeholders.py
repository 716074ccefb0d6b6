"""Literal placeholder replacement for template files."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from .errors import SubstitutionFailure

__all__ = [
    "LIBRARY_NAME_TOKEN",
    "PlaceholderReplacer",
    "USERMAIL_TOKEN",
    "USERNAME_TOKEN",
]


LIBRARY_NAME_TOKEN = "--libraryname--"
USERNAME_TOKEN = "--username--"
USERMAIL_TOKEN = "--usermail--"


@dataclass(slots=True)
class PlaceholderReplacer:
    """Replace every occurrence of fixed marker strings.

    Markers are matched literally, all at once, so a replacement value that
    happens to contain another marker is never expanded a second time.
    """

    encoding: str = "utf-8"

    def render_string(self, text: str, replacements: Mapping[str, str]) -> str:
        """Return *text* with each key of *replacements* swapped for its value."""

        tokens = [token for token in replacements if token]
        if not tokens:
            return text

        # Longest first so overlapping markers resolve to the most specific one.
        tokens.sort(key=len, reverse=True)
        pattern = re.compile("|".join(re.escape(token) for token in tokens))
        return pattern.sub(lambda match: replacements[match.group(0)], text)

    def render_file(
        self,
        path: str | Path,
        replacements: Mapping[str, str],
    ) -> bool:
        """Rewrite *path* in place, keeping its line endings as they are.

        Returns ``True`` when the content changed. Any read or write problem is
        re-raised as :class:`SubstitutionFailure`.
        """

        path = Path(path)
        try:
            with path.open(encoding=self.encoding, newline="") as handle:
                original = handle.read()
            rendered = self.render_string(original, replacements)
            if rendered != original:
                with path.open("w", encoding=self.encoding, newline="") as handle:
                    handle.write(rendered)
        except (OSError, UnicodeError) as exc:
            raise SubstitutionFailure(path, str(exc)) from exc

        return rendered != original

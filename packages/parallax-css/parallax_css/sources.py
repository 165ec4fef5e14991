"""Rule sources backed by CSS text and files."""
from __future__ import annotations

import os
from pathlib import Path

from parallax.errors import SourceAccessError
from parallax.rules import KeyframesRule

from parallax_css.stylesheet import parse_stylesheet


class StylesheetSource:
    """Keyframes from an in-memory style sheet. Parsed once, on first read."""

    def __init__(self, text: str, href: str | None = None) -> None:
        self.href = href if href is not None else "<inline>"
        self._text = text
        self._rules: list[KeyframesRule] | None = None

    def rules(self) -> list[KeyframesRule]:
        if self._rules is None:
            self._rules = parse_stylesheet(self._text)
        return list(self._rules)


class FileStylesheetSource:
    """Keyframes from a CSS file, re-read on every scan so edits show up."""

    def __init__(self, path: str | os.PathLike[str], encoding: str = "utf-8") -> None:
        self.path = Path(path)
        self.encoding = encoding

    @property
    def href(self) -> str:
        return str(self.path)

    def rules(self) -> list[KeyframesRule]:
        try:
            text = self.path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise SourceAccessError(self.href, f"Cannot read style sheet: {e}") from e
        return parse_stylesheet(text)


class RestrictedStylesheetSource:
    """A style sheet whose rules the host refuses to expose (cross-origin)."""

    def __init__(self, href: str) -> None:
        self.href = href

    def rules(self) -> list[KeyframesRule]:
        raise SourceAccessError(
            self.href, f"Cannot access rules of {self.href}", restricted=True
        )

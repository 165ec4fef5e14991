"""parallax-css - keyframes rule sources backed by CSS style sheets."""
from __future__ import annotations

from parallax_css.sources import (
    FileStylesheetSource,
    RestrictedStylesheetSource,
    StylesheetSource,
)
from parallax_css.stylesheet import parse_offset, parse_stylesheet, split_declarations

__all__ = [
    "FileStylesheetSource",
    "RestrictedStylesheetSource",
    "StylesheetSource",
    "parse_offset",
    "parse_stylesheet",
    "split_declarations",
]

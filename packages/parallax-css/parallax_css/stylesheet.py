"""Extract ``@keyframes`` at-rules from CSS text."""
from __future__ import annotations

import logging
import re

from parallax.rules import KeyframeBlock, KeyframesRule

logger = logging.getLogger(__name__)

_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)
_KEYFRAMES_RE = re.compile(
    r"@(?:-(?:webkit|moz|o)-)?keyframes\s+(\"[^\"]*\"|'[^']*'|[^\s{]+)\s*\{",
    re.IGNORECASE,
)
_BLOCK_RE = re.compile(r"([^{}]+)\{([^{}]*)\}")
_PERCENT_RE = re.compile(r"^([+-]?[0-9]*\.?[0-9]+)%$")


def parse_offset(selector: str) -> float:
    """``from`` -> 0.0, ``to`` -> 1.0, ``25%`` -> 0.25. Raises ValueError."""
    text = selector.strip().lower()
    if text == "from":
        return 0.0
    if text == "to":
        return 1.0
    match = _PERCENT_RE.match(text)
    if match is None:
        raise ValueError(f"Invalid keyframe selector {selector!r}")
    return float(match.group(1)) / 100


def split_declarations(text: str) -> list[tuple[str, str]]:
    """Split ``a: b; c: d`` into pairs, ignoring ``;`` inside parens or quotes."""
    pairs: list[tuple[str, str]] = []
    depth = 0
    quote: str | None = None
    start = 0
    pieces: list[str] = []
    for i, ch in enumerate(text):
        if quote is not None:
            if ch == quote:
                quote = None
        elif ch in "\"'":
            quote = ch
        elif ch == "(":
            depth += 1
        elif ch == ")":
            depth = max(0, depth - 1)
        elif ch == ";" and depth == 0:
            pieces.append(text[start:i])
            start = i + 1
    pieces.append(text[start:])

    for piece in pieces:
        name, sep, value = piece.partition(":")
        name = name.strip().lower()
        value = value.strip()
        if not sep or not name or not value:
            continue
        if value.lower().endswith("!important"):
            value = value[: -len("!important")].rstrip()
        pairs.append((name, value))
    return pairs


def _matching_brace(text: str, start: int) -> int:
    """Index of the ``}`` closing the block whose body starts at ``start``."""
    depth = 1
    for i in range(start, len(text)):
        if text[i] == "{":
            depth += 1
        elif text[i] == "}":
            depth -= 1
            if depth == 0:
                return i
    return len(text)


def _parse_body(name: str, body: str) -> KeyframesRule:
    blocks: list[KeyframeBlock] = []
    for match in _BLOCK_RE.finditer(body):
        selector_text, decl_text = match.group(1), match.group(2)
        try:
            offsets = tuple(parse_offset(s) for s in selector_text.split(","))
        except ValueError as e:
            logger.warning("Skipping keyframe block in @keyframes %s: %s", name, e)
            continue
        blocks.append(
            KeyframeBlock(offsets=offsets, declarations=tuple(split_declarations(decl_text)))
        )
    return KeyframesRule(name=name, blocks=tuple(blocks))


def parse_stylesheet(text: str) -> list[KeyframesRule]:
    """All keyframes rules in ``text``, in document order."""
    text = _COMMENT_RE.sub("", text)
    rules: list[KeyframesRule] = []
    pos = 0
    while True:
        match = _KEYFRAMES_RE.search(text, pos)
        if match is None:
            break
        end = _matching_brace(text, match.end())
        name = match.group(1).strip("\"'")
        if name:
            rules.append(_parse_body(name, text[match.end():end]))
        pos = end + 1
    return rules

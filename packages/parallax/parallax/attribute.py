"""Parser for the animation attribute grammar.

    NAME[:MODIFIER[:ARGS]]* (WHITESPACE NAME[...])*

``MODIFIER`` is ``reverse``, ``shift(<number>)`` or ``scale(<number>)``.
Arguments may also follow as separate segments (``shift:10``). Argument
lists are comma separated. Malformed modifiers are logged and dropped.
"""
from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass

from parallax.errors import AttributeSyntaxError, ModifierSyntaxError
from parallax.modifiers import MODIFIERS, Modifier

logger = logging.getLogger(__name__)

_MODIFIER_RE = re.compile(r"^\s*([A-Za-z_][\w-]*)\s*(?:\((.*)\))?\s*$")


@dataclass(frozen=True)
class AnimationSource:
    """One animation name from the attribute plus its modifiers."""

    name: str
    modifiers: tuple[Modifier, ...] = ()

    def __str__(self) -> str:
        return ":".join([self.name, *(str(m) for m in self.modifiers)])


def _as_number(text: str) -> float | None:
    """Finite float value of ``text``; ``nan``, ``inf`` and overflow count as non-numbers."""
    try:
        value = float(text)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def parse_modifier(keyword: str, args: list[str]) -> Modifier:
    """Validate one modifier. Raises ModifierSyntaxError."""
    if keyword not in MODIFIERS:
        raise ModifierSyntaxError(f"Unknown modifier {keyword!r}")
    arity, _ = MODIFIERS[keyword]
    if len(args) != arity:
        raise ModifierSyntaxError(
            f"Modifier {keyword!r} takes {arity} argument(s), got {len(args)}"
        )
    numbers: list[float] = []
    for arg in args:
        value = _as_number(arg)
        if value is None:
            raise ModifierSyntaxError(
                f"Modifier {keyword!r} argument {arg!r} is not a finite number"
            )
        numbers.append(value)
    return Modifier(keyword, tuple(numbers))


def parse_token(token: str, delimiter: str = ":") -> AnimationSource:
    segments = token.split(delimiter)
    name = segments[0].strip()
    if not name:
        raise AttributeSyntaxError(f"Empty animation name in {token!r}")

    modifiers: list[Modifier] = []
    i = 1
    while i < len(segments):
        segment = segments[i]
        i += 1
        match = _MODIFIER_RE.match(segment)
        if match is None:
            logger.warning("Ignoring modifier %r of animation %r: malformed", segment, name)
            continue
        keyword, arg_text = match.group(1), match.group(2)
        if arg_text is not None:
            args = [a.strip() for a in arg_text.split(",")] if arg_text.strip() else []
        else:
            # Colon form: consume following numeric segments as arguments.
            arity = MODIFIERS[keyword][0] if keyword in MODIFIERS else 0
            args = []
            while len(args) < arity and i < len(segments) and _as_number(segments[i]) is not None:
                args.append(segments[i].strip())
                i += 1
        try:
            modifiers.append(parse_modifier(keyword, args))
        except ModifierSyntaxError as e:
            logger.warning("Ignoring modifier of animation %r: %s", name, e)
    return AnimationSource(name=name, modifiers=tuple(modifiers))


def parse_attribute(text: str, delimiter: str = ":") -> list[AnimationSource]:
    """Tokenize on whitespace and parse each token. Raises AttributeSyntaxError."""
    tokens = text.split()
    if not tokens:
        raise AttributeSyntaxError("Animation attribute names no animation")
    return [parse_token(token, delimiter) for token in tokens]

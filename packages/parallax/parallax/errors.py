"""Error types for parallax animation bindings."""
from __future__ import annotations


class ParallaxError(Exception):
    """Base class for all parallax errors."""


class ParseError(ParallaxError):
    """Initialization of one element's animation failed.

    Returned (not raised) by ``AnimationDefinition.build`` and
    ``initialize`` so callers must handle the failure path explicitly.
    """


class ResolutionError(ParseError):
    """A named animation could not be found in any rule source."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f'Cannot find animation "{name}"')


class AttributeSyntaxError(ParseError):
    """The animation attribute names no animation."""


class SourceAccessError(ParallaxError):
    """A rule source could not be read. Non-fatal: the source is skipped."""

    def __init__(self, source: str, message: str, restricted: bool = False) -> None:
        self.source = source
        self.restricted = restricted
        super().__init__(message)


class ModifierSyntaxError(ParallaxError):
    """Unknown modifier keyword or malformed modifier arguments."""


class DegenerateGeometryError(ParallaxError):
    """The container's scroll span is zero, so progress is undefined."""


class ContainerNotFoundError(ParseError):
    """An explicit container selector matched nothing."""

    def __init__(self, selector: str) -> None:
        self.selector = selector
        super().__init__(f"Cannot find container {selector!r}")

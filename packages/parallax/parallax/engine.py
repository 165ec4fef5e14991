"""AnimationEngine - per-element progress and style computation."""
from __future__ import annotations

import logging
from enum import Enum

from parallax.attribute import parse_attribute
from parallax.config import ParallaxConfig
from parallax.definition import AnimationDefinition
from parallax.errors import (
    ContainerNotFoundError,
    DegenerateGeometryError,
    ParseError,
)
from parallax.host import ContainerLocator, ElementRef, StatusReport
from parallax.progress import ContainerGeometry, ProgressCalculator, ProgressState, ViewportState
from parallax.repository import AnimationRepository

logger = logging.getLogger(__name__)

# Emitted for properties whose timeline reports "no value"; hosts remove the inline value.
UNSET = ""


class EngineState(Enum):
    UNINITIALIZED = "uninitialized"
    READY = "ready"
    ERROR = "error"


class AnimationEngine:
    """Owns one element's AnimationDefinition and its latest ProgressState.

    ``step`` moves READY -> ERROR on degenerate geometry (the last good style
    is kept) and back to READY on the next successful step.
    """

    def __init__(
        self,
        element: ElementRef,
        container: ElementRef,
        definition: AnimationDefinition,
        config: ParallaxConfig | None = None,
    ) -> None:
        self.element = element
        self.container = container
        self.definition = definition
        self._config = config if config is not None else ParallaxConfig()
        self._calculator = ProgressCalculator(self._config.precision)
        self.state = EngineState.READY
        self.progress: ProgressState | None = None
        self.error: str | None = None
        self.style: dict[str, str] = {}
        self.steps = 0

    def step(self, geometry: ContainerGeometry, viewport: ViewportState) -> dict[str, str]:
        """Recompute progress and return the full property -> value mapping."""
        try:
            progress = self._calculator.calculate(geometry, viewport)
        except DegenerateGeometryError as e:
            logger.error("Parallax step failed for %r: %s", self.element, e)
            self.state = EngineState.ERROR
            self.error = str(e)
            return dict(self.style)

        self.state = EngineState.READY
        self.error = None
        self.progress = progress
        self.steps += 1

        values = self.definition.values_at(progress.real, unset_outside=self._config.unset_outside)
        self.style = {name: UNSET if value is None else value for name, value in values.items()}
        logger.debug("Parallax %r at %s: %s", self.element, progress.real, self.style)
        return dict(self.style)

    def status_report(self) -> StatusReport:
        if self.state is EngineState.ERROR:
            status = "error"
        elif self.progress is None:
            status = "ready"
        else:
            status = self.progress.status
        return StatusReport(
            progress=self.progress.normalized if self.progress else None,
            real_progress=self.progress.real if self.progress else None,
            status=status,
            error_message=self.error,
            progress_label=self.progress.label if self.progress else "",
            approx_label=self.progress.approx if self.progress else "",
        )


def initialize(
    element: ElementRef,
    attribute: str,
    container_selector: str | None,
    repository: AnimationRepository,
    locator: ContainerLocator,
    config: ParallaxConfig | None = None,
) -> AnimationEngine | ParseError:
    """Bind ``element`` to the animations named in ``attribute``.

    Returns the ParseError instead of raising it; no engine exists on failure.
    """
    config = config if config is not None else ParallaxConfig()

    container = locator.find_container(element, container_selector, config.container_role)
    if container is None:
        if container_selector is not None:
            return ContainerNotFoundError(container_selector)
        container = element

    try:
        sources = parse_attribute(attribute, config.modifier_delimiter)
    except ParseError as e:
        return e

    definition = AnimationDefinition.build(sources, repository, alpha_default=config.alpha_default)
    if isinstance(definition, ParseError):
        return definition
    return AnimationEngine(element, container, definition, config)

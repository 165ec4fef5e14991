"""ParallaxScheduler - recomputation passes over all bound elements."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

from parallax.config import ParallaxConfig
from parallax.engine import AnimationEngine, EngineState, initialize
from parallax.errors import ParseError
from parallax.host import (
    ContainerLocator,
    ElementRef,
    GeometryProvider,
    StatusReport,
    StatusSink,
    StyleSink,
    ViewportProvider,
)
from parallax.progress import ContainerGeometry, ViewportState
from parallax.repository import AnimationRepository

logger = logging.getLogger(__name__)


class PageHost(
    GeometryProvider, ViewportProvider, StyleSink, StatusSink, ContainerLocator, Protocol
):
    """Everything the scheduler needs from the host page."""


@dataclass
class Binding:
    """Runtime state of one bound element."""

    element: ElementRef
    attribute: str
    container_selector: str | None = None
    engine: AnimationEngine | None = None
    state: EngineState = EngineState.UNINITIALIZED
    error: str | None = None
    last_status: StatusReport | None = None


class ParallaxScheduler:
    """Runs run-to-completion passes over every binding.

    Triggers (scroll, resize) call ``notify``; the host calls ``frame`` once
    per animation-frame opportunity, so any number of triggers between two
    frames coalesce into one pass. A pass started while another is running
    is dropped, not queued.
    """

    def __init__(
        self,
        host: PageHost,
        repository: AnimationRepository,
        config: ParallaxConfig | None = None,
    ) -> None:
        self._host = host
        self._repository = repository
        self.config: ParallaxConfig = config if config is not None else ParallaxConfig()
        self._bindings: dict[ElementRef, Binding] = {}
        self._geometry_cache: dict[ElementRef, ContainerGeometry] = {}
        self._last_viewport: ViewportState | None = None
        self._busy = False
        self._dirty = False
        self._force = False
        self.passes = 0

    @property
    def busy(self) -> bool:
        return self._busy

    # --- Bindings ---

    def bind(
        self, element: ElementRef, attribute: str, container_selector: str | None = None
    ) -> Binding:
        """Register an element. Rebinding replaces the previous binding."""
        binding = Binding(element, attribute, container_selector)
        self._bindings[element] = binding
        self._dirty = True
        return binding

    def unbind(self, element: ElementRef) -> None:
        self._bindings.pop(element, None)

    def binding(self, element: ElementRef) -> Binding | None:
        return self._bindings.get(element)

    def bindings(self) -> list[Binding]:
        return list(self._bindings.values())

    def reinitialize(self, element: ElementRef) -> None:
        """Drop the engine so the next pass rebuilds it. Raises KeyError if unbound."""
        binding = self._bindings[element]
        binding.engine = None
        binding.state = EngineState.UNINITIALIZED
        binding.error = None
        self._dirty = True

    # --- Triggers ---

    def notify(self, force: bool = False) -> None:
        """Record a scroll/resize trigger; the next ``frame`` runs a pass."""
        self._dirty = True
        self._force = self._force or force

    def frame(self) -> bool:
        """Run at most one pass for all triggers since the previous frame."""
        if not self._dirty:
            return False
        force = self._force
        self._dirty = False
        self._force = False
        return self.run_pass(force=force)

    # --- Pass ---

    def run_pass(self, force: bool = False) -> bool:
        """Recompute every binding. Returns False if dropped or skipped."""
        if self._busy:
            logger.debug("Parallax pass already running; trigger dropped")
            return False
        self._busy = True
        try:
            self._geometry_cache.clear()
            viewport = self._host.viewport()
            pending = any(b.state is EngineState.UNINITIALIZED for b in self._bindings.values())
            if not force and not pending and viewport == self._last_viewport:
                logger.debug("Parallax pass skipped; viewport unchanged")
                return False

            previous = self._last_viewport
            direction = viewport.scroll_top - previous.scroll_top if previous else 0.0
            self._last_viewport = viewport

            for binding in list(self._bindings.values()):
                if self._is_settled(binding, direction):
                    continue
                try:
                    self._update(binding, viewport)
                except Exception as e:
                    # Host failures are scoped to one binding; the pass goes on.
                    logger.exception("Parallax update failed for %r", binding.element)
                    self._fail(binding, e)
            self.passes += 1
            return True
        finally:
            self._busy = False

    def container_geometry(self, container: ElementRef) -> ContainerGeometry:
        """Geometry of ``container``, read at most once per pass."""
        geometry = self._geometry_cache.get(container)
        if geometry is None:
            geometry = self._host.container_geometry(container)
            self._geometry_cache[container] = geometry
        return geometry

    def _is_settled(self, binding: Binding, direction: float) -> bool:
        if not self.config.skip_settled or binding.engine is None:
            return False
        status = binding.last_status
        if status is None or status.status != "off":
            return False
        if direction > 0:
            return status.progress == 1
        if direction < 0:
            return status.progress == 0
        return False

    def _update(self, binding: Binding, viewport: ViewportState) -> None:
        engine = binding.engine
        if engine is None:
            if binding.state is EngineState.ERROR:
                return  # waits for reinitialize()
            engine = self._initialize(binding)
            if engine is None:
                return

        style = engine.step(self.container_geometry(engine.container), viewport)
        self._host.apply_style(binding.element, style)
        binding.state = engine.state
        binding.error = engine.error
        self._report(binding, engine.status_report())

    def _initialize(self, binding: Binding) -> AnimationEngine | None:
        result = initialize(
            binding.element,
            binding.attribute,
            binding.container_selector,
            self._repository,
            self._host,
            self.config,
        )
        if isinstance(result, ParseError):
            logger.error("Parallax initialization failed for %r: %s", binding.element, result)
            binding.state = EngineState.ERROR
            binding.error = str(result)
            self._report(
                binding,
                StatusReport(progress=None, real_progress=None, status="error", error_message=str(result)),
            )
            return None
        binding.engine = result
        binding.state = EngineState.READY
        binding.error = None
        self._report(binding, result.status_report())
        return result

    def _fail(self, binding: Binding, error: Exception) -> None:
        """Mark a binding failed by a host error. A kept engine retries next pass."""
        binding.state = EngineState.ERROR
        binding.error = str(error) or type(error).__name__
        report = StatusReport(
            progress=None, real_progress=None, status="error", error_message=binding.error
        )
        try:
            self._report(binding, report)
        except Exception:
            binding.last_status = report
            logger.exception("Parallax status report failed for %r", binding.element)

    def _report(self, binding: Binding, report: StatusReport) -> None:
        binding.last_status = report
        self._host.report_status(binding.element, report)
        engine = binding.engine
        if engine is not None and engine.container != binding.element:
            self._host.report_status(engine.container, report)

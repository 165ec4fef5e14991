"""Host collaborator protocols and in-memory implementations.

The engine never touches a live document. Everything it needs from the
host page comes through these protocols: keyframes rules, container
geometry, viewport state, and the sinks for styles and status reports.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Hashable, Iterable, Mapping, Protocol, runtime_checkable

from parallax.errors import SourceAccessError
from parallax.progress import ContainerGeometry, ViewportState
from parallax.rules import KeyframesRule

ElementRef = Hashable


@dataclass(frozen=True)
class StatusReport:
    """Diagnostic state of one element. Never read back by the engine."""

    progress: float | None
    real_progress: float | None
    status: str  # ready | on | off | error
    error_message: str | None = None
    progress_label: str = ""
    approx_label: str = ""


@runtime_checkable
class RuleSource(Protocol):
    """A collection of keyframes rules, e.g. one loaded style sheet.

    ``rules()`` raises SourceAccessError when the source cannot be read.
    """

    def rules(self) -> Iterable[KeyframesRule]:
        ...


@runtime_checkable
class GeometryProvider(Protocol):
    def container_geometry(self, container: ElementRef) -> ContainerGeometry:
        ...


@runtime_checkable
class ViewportProvider(Protocol):
    def viewport(self) -> ViewportState:
        ...


@runtime_checkable
class StyleSink(Protocol):
    def apply_style(self, element: ElementRef, style: Mapping[str, str]) -> None:
        ...


@runtime_checkable
class StatusSink(Protocol):
    def report_status(self, element: ElementRef, report: StatusReport) -> None:
        ...


@runtime_checkable
class ContainerLocator(Protocol):
    def find_container(
        self, element: ElementRef, selector: str | None, role: str
    ) -> ElementRef | None:
        """Return the progress container, or None to use the element itself."""
        ...


class StaticRuleSource:
    """In-memory rule source. Set ``error`` to simulate an unreadable source."""

    def __init__(
        self,
        rules: Iterable[KeyframesRule] = (),
        href: str = "<memory>",
        error: SourceAccessError | None = None,
    ) -> None:
        self.href = href
        self._rules = list(rules)
        self._error = error
        self.reads = 0

    def add(self, rule: KeyframesRule) -> None:
        self._rules.append(rule)

    def rules(self) -> list[KeyframesRule]:
        self.reads += 1
        if self._error is not None:
            raise self._error
        return list(self._rules)


@dataclass
class _Node:
    parent: ElementRef | None
    roles: frozenset[str]


@dataclass
class StaticPage:
    """In-memory page: element tree, geometry table and recording sinks.

    Conforms to GeometryProvider, ViewportProvider, StyleSink, StatusSink
    and ContainerLocator. ``geometry_reads`` counts container lookups.
    """

    viewport_height: float = 800.0
    scroll_top: float = 0.0
    _nodes: dict[ElementRef, _Node] = field(default_factory=dict)
    _geometry: dict[ElementRef, ContainerGeometry] = field(default_factory=dict)
    styles: dict[ElementRef, dict[str, str]] = field(default_factory=dict)
    statuses: dict[ElementRef, StatusReport] = field(default_factory=dict)
    geometry_reads: int = 0

    def add_element(
        self,
        element: ElementRef,
        parent: ElementRef | None = None,
        roles: Iterable[str] = (),
        top: float = 0.0,
        height: float = 0.0,
    ) -> None:
        self._nodes[element] = _Node(parent=parent, roles=frozenset(roles))
        self._geometry[element] = ContainerGeometry(top=top, height=height)

    def set_geometry(self, element: ElementRef, top: float, height: float) -> None:
        self._geometry[element] = ContainerGeometry(top=top, height=height)

    def scroll_to(self, scroll_top: float) -> None:
        self.scroll_top = scroll_top

    # --- Protocol implementations ---

    def container_geometry(self, container: ElementRef) -> ContainerGeometry:
        self.geometry_reads += 1
        return self._geometry[container]

    def viewport(self) -> ViewportState:
        return ViewportState(height=self.viewport_height, scroll_top=self.scroll_top)

    def apply_style(self, element: ElementRef, style: Mapping[str, str]) -> None:
        current = self.styles.setdefault(element, {})
        for name, value in style.items():
            if value == "":
                current.pop(name, None)
            else:
                current[name] = value

    def report_status(self, element: ElementRef, report: StatusReport) -> None:
        self.statuses[element] = report

    def find_container(
        self, element: ElementRef, selector: str | None, role: str
    ) -> ElementRef | None:
        if selector is not None:
            return selector if selector in self._nodes else None
        node = self._nodes.get(element)
        while node is not None and node.parent is not None:
            parent = self._nodes.get(node.parent)
            if parent is None:
                break
            if role in parent.roles:
                return node.parent
            node = parent
        return None

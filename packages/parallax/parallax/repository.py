"""AnimationRepository - memoized name -> keyframes rule lookup over rule sources."""
from __future__ import annotations

import logging
from typing import Iterable

from parallax.errors import SourceAccessError
from parallax.host import RuleSource
from parallax.rules import KeyframesRule

logger = logging.getLogger(__name__)


class AnimationRepository:
    """Caches keyframes rules by name.

    A miss rescans every source, registering each rule it passes whose name
    is not cached yet, so sources loaded after an earlier scan become visible
    on the next miss. Cached entries are never replaced or invalidated
    automatically; use ``register`` or ``clear`` for that.
    """

    def __init__(self, sources: Iterable[RuleSource] = ()) -> None:
        self._sources: list[RuleSource] = list(sources)
        self._rules: dict[str, KeyframesRule] = {}
        self.scans = 0

    def add_source(self, source: RuleSource) -> None:
        self._sources.append(source)

    def register(self, name: str, rule: KeyframesRule) -> None:
        """Register a rule under ``name``. Overwrites if name exists."""
        self._rules[name] = rule

    def has(self, name: str) -> bool:
        return name in self._rules

    def names(self) -> list[str]:
        return list(self._rules)

    def clear(self) -> None:
        self._rules.clear()

    def lookup(self, name: str) -> KeyframesRule | None:
        rule = self._rules.get(name)
        if rule is not None:
            return rule
        return self._scan(name)

    def _scan(self, name: str) -> KeyframesRule | None:
        self.scans += 1
        for source in self._sources:
            try:
                rules = list(source.rules())
            except SourceAccessError as e:
                if e.restricted:
                    logger.warning(
                        "Cannot read rules of %s; serve it with crossorigin=\"anonymous\" "
                        "if it defines keyframes",
                        e.source,
                    )
                else:
                    logger.warning("Skipping unreadable rule source %s: %s", e.source, e)
                continue
            found = False
            for rule in rules:
                # Append-only: cached names keep their rule, first in document order wins.
                if rule.name not in self._rules:
                    self._rules[rule.name] = rule
                if rule.name == name:
                    found = True
            if found:
                return self._rules[name]
        return None

"""AnimationDefinition - merged per-property timelines for one element."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from parallax.attribute import AnimationSource
from parallax.errors import ResolutionError
from parallax.modifiers import apply_modifiers
from parallax.repository import AnimationRepository
from parallax.rules import KeyframesRule
from parallax.timeline import PropertyTimeline


@dataclass
class AnimationDefinition:
    """Property name -> timeline, in first-seen order.

    Sources are merged sequentially. A later source's value at an exact
    progress key replaces an earlier one for the same property; values at
    different keys coexist in one timeline and interpolate together.
    """

    properties: dict[str, PropertyTimeline] = field(default_factory=dict)
    sources: tuple[AnimationSource, ...] = ()
    rules: tuple[KeyframesRule, ...] = ()
    alpha_default: float = 1.0

    @classmethod
    def build(
        cls,
        sources: Sequence[AnimationSource],
        repository: AnimationRepository,
        alpha_default: float = 1.0,
    ) -> AnimationDefinition | ResolutionError:
        """Resolve and merge every source; a missing name fails the whole build."""
        definition = cls(sources=tuple(sources), alpha_default=alpha_default)
        rules: list[KeyframesRule] = []
        for source in sources:
            rule = repository.lookup(source.name)
            if rule is None:
                return ResolutionError(source.name)
            definition._merge(rule, source)
            rules.append(rule)
        definition.rules = tuple(rules)
        return definition

    def timeline(self, name: str) -> PropertyTimeline:
        """Get or create the timeline for ``name``."""
        timeline = self.properties.get(name)
        if timeline is None:
            timeline = PropertyTimeline(name, alpha_default=self.alpha_default)
            self.properties[name] = timeline
        return timeline

    def _merge(self, rule: KeyframesRule, source: AnimationSource) -> None:
        for block in rule.blocks:
            for offset in block.offsets:
                progress = apply_modifiers(offset, source.modifiers)
                for name, value in block.declarations:
                    self.timeline(name).add(progress, value)

    def values_at(self, progress: float, unset_outside: bool = False) -> dict[str, str | None]:
        return {
            name: timeline.value_at(progress, unset_outside=unset_outside)
            for name, timeline in self.properties.items()
        }

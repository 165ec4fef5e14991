"""PropertyTimeline - progress-keyed keyframes for a single property."""
from __future__ import annotations

import bisect
from typing import Callable

from parallax.values import ValueTemplate

# (property name, component index, alpha default) -> substitute or None
Fixup = Callable[[str, int, float], "float | None"]


def color_alpha_fixup(name: str, index: int, alpha_default: float) -> float | None:
    """``rgb(...)`` has an implicit alpha that ``rgba(...)`` spells out."""
    if index == 3 and name.lower().endswith("color"):
        return alpha_default
    return None


FIXUPS: dict[str, Fixup] = {
    "color_alpha": color_alpha_fixup,
}


class PropertyTimeline:
    """Ordered keyframes for one property.

    Entries are strictly increasing by progress. ``add`` with an existing
    progress key replaces that entry (last writer wins).
    """

    def __init__(self, name: str, alpha_default: float = 1.0) -> None:
        self.name = name
        self._alpha_default = alpha_default
        self._entries: list[ValueTemplate] = []
        self._keys: list[float] = []

    @property
    def entries(self) -> list[ValueTemplate]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def add(self, progress: float, raw_value: str) -> None:
        entry = ValueTemplate.parse(progress, raw_value)
        idx = bisect.bisect_left(self._keys, progress)
        if idx < len(self._keys) and self._keys[idx] == progress:
            self._entries[idx] = entry
            return
        self._keys.insert(idx, progress)
        self._entries.insert(idx, entry)

    def value_at(self, progress: float, unset_outside: bool = False) -> str | None:
        """Interpolated value at ``progress``.

        Returns ``None`` (unset) when ``unset_outside`` is set and progress
        lies outside [0, 1], or when the timeline is empty.
        """
        if unset_outside and (progress < 0 or progress > 1):
            return None

        before: ValueTemplate | None = None
        after: ValueTemplate | None = None
        for entry in self._entries:
            if entry.progress == progress:
                return entry.raw_value
            if entry.progress < progress:
                before = entry
            else:
                after = entry
                break

        if before is None:
            return after.raw_value if after is not None else None
        if after is None:
            return before.raw_value
        if before.is_constant:
            return before.raw_value

        ratio = (progress - before.progress) / (after.progress - before.progress)
        count = max(len(before.numbers), len(after.numbers))
        values: list[float] = []
        for i in range(count):
            start, end = self._component_pair(before, after, i)
            values.append(start + (end - start) * ratio)
        return before.render(values)

    def _component_pair(
        self, before: ValueTemplate, after: ValueTemplate, index: int
    ) -> tuple[float, float]:
        has_start = index < len(before.numbers)
        has_end = index < len(after.numbers)
        if has_start and has_end:
            return before.numbers[index], after.numbers[index]
        # One side lacks the component: fill it from a fixup, else mirror the other side.
        fixed = self._fixup(index)
        if has_start:
            start = before.numbers[index]
            return start, fixed if fixed is not None else start
        end = after.numbers[index]
        return (fixed if fixed is not None else end), end

    def _fixup(self, index: int) -> float | None:
        for fixup in FIXUPS.values():
            value = fixup(self.name, index, self._alpha_default)
            if value is not None:
                return value
        return None

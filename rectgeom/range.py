"""One dimensional interval used for each axis of a ``Rect``."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, Optional

from .config import get_geometry_config
from .scalar import S, float_max, float_min, half, partial_max, partial_min
from .types import Align, Edge


@dataclass(frozen=True)
class Range(Generic[S]):
    """Some start and end position along a single axis.

    ``start`` is not required to be less than ``end``; the direction of the
    range is preserved by shifting and alignment, and ``absolute`` gives the
    ascending form.
    """

    start: S
    end: S

    @classmethod
    def from_pos_and_len(cls, pos: S, length: S) -> "Range[S]":
        """Construct a range of ``length`` centered on ``pos``."""

        half_len = half(length)
        return cls(pos - half_len, pos + half_len)

    def magnitude(self) -> S:
        return self.end - self.start

    def length(self) -> S:
        """The absolute length of the range."""

        return abs(self.magnitude())

    def middle(self) -> S:
        return half(self.end + self.start)

    def invert(self) -> "Range[S]":
        return Range(self.end, self.start)

    def is_ascending(self) -> bool:
        return self.start <= self.end

    def absolute(self) -> "Range[S]":
        """The same range with ``start <= end``."""

        if self.is_ascending():
            return self
        return self.invert()

    def has_same_direction(self, other: "Range[S]") -> bool:
        return self.is_ascending() == other.is_ascending()

    def contains(self, value: S) -> bool:
        """Whether ``value`` lies within the range, edges included."""

        start, end = self.absolute()._ends()
        return start <= value <= end

    def overlap(self, other: "Range[S]") -> Optional["Range[S]"]:
        """The ascending range covered by both ranges, or ``None`` if they are disjoint.

        Ranges that only touch at an edge overlap with zero length.
        """

        start, end = self.absolute()._ends()
        other_start, other_end = other.absolute()._ends()
        start = partial_max(start, other_start)
        end = partial_min(end, other_end)
        if end < start:
            return None
        return Range(start, end)

    def max(self, other: "Range[S]") -> "Range[S]":
        """The ascending range spanning both ``self`` and ``other``."""

        start = float_min(float_min(self.start, self.end), float_min(other.start, other.end))
        end = float_max(float_max(self.start, self.end), float_max(other.start, other.end))
        return Range(start, end)

    def shift(self, amount: S) -> "Range[S]":
        return Range(self.start + amount, self.end + amount)

    def clamp_value(self, value: S) -> S:
        start, end = self.absolute()._ends()
        return partial_min(partial_max(value, start), end)

    def stretch_to_value(self, value: S) -> "Range[S]":
        """Extend whichever end is exceeded by ``value`` so that the range contains it."""

        start, end = self._ends()
        if start <= end:
            if value < start:
                return Range(value, end)
            if value > end:
                return Range(start, value)
        else:
            if value < end:
                return Range(start, value)
            if value > start:
                return Range(value, end)
        return self

    def pad_start(self, pad: S) -> "Range[S]":
        """Move the start edge towards the end by ``pad``."""

        if self.is_ascending():
            return Range(self.start + pad, self.end)
        return Range(self.start - pad, self.end)

    def pad_end(self, pad: S) -> "Range[S]":
        if self.is_ascending():
            return Range(self.start, self.end - pad)
        return Range(self.start, self.end + pad)

    def pad(self, pad: S) -> "Range[S]":
        return self.pad_start(pad).pad_end(pad)

    def pad_ends(self, start: S, end: S) -> "Range[S]":
        return self.pad_start(start).pad_end(end)

    def align_start_of(self, other: "Range[S]") -> "Range[S]":
        if self.has_same_direction(other):
            diff = other.start - self.start
        else:
            diff = other.start - self.end
        return self.shift(diff)

    def align_end_of(self, other: "Range[S]") -> "Range[S]":
        if self.has_same_direction(other):
            diff = other.end - self.end
        else:
            diff = other.end - self.start
        return self.shift(diff)

    def align_middle_of(self, other: "Range[S]") -> "Range[S]":
        return self.shift(other.middle() - self.middle())

    def align_before(self, other: "Range[S]") -> "Range[S]":
        """Shift so that ``self`` ends where ``other`` starts."""

        if self.has_same_direction(other):
            diff = other.start - self.end
        else:
            diff = other.start - self.start
        return self.shift(diff)

    def align_after(self, other: "Range[S]") -> "Range[S]":
        """Shift so that ``self`` starts where ``other`` ends."""

        if self.has_same_direction(other):
            diff = other.end - self.start
        else:
            diff = other.end - self.end
        return self.shift(diff)

    def align_to(self, align: Align, other: "Range[S]") -> "Range[S]":
        if align is Align.START:
            return self.align_start_of(other)
        if align is Align.MIDDLE:
            return self.align_middle_of(other)
        if align is Align.END:
            return self.align_end_of(other)
        raise ValueError(f"unknown alignment {align!r}")

    def closest_edge(self, value: S) -> Edge:
        """The edge nearest to ``value``; ties go to the start edge."""

        start_diff = abs(value - self.start)
        end_diff = abs(value - self.end)
        if start_diff <= end_diff:
            return Edge.START
        return Edge.END

    def approx_eq(self, other: "Range[S]", abs_tol: Optional[float] = None) -> bool:
        config = get_geometry_config()
        tol = config.abs_tol if abs_tol is None else abs_tol
        return math.isclose(self.start, other.start, rel_tol=config.rel_tol, abs_tol=tol) and math.isclose(
            self.end, other.end, rel_tol=config.rel_tol, abs_tol=tol
        )

    def _ends(self):
        return self.start, self.end


__all__ = ["Range"]

"""Perimeter parameterization of a stadium (pill) outline.

The border is flattened to a 1-D closed loop of length ``full_length``:

    0 ── top edge ──> L ── right cap ──> L+hc ── bottom edge ──> 2L+hc ── left cap ──> full

where ``L`` is the straight segment length and ``hc`` half the circumference
of the end caps. Position 0 is the left end of the top edge and the loop is
walked clockwise.

The lit window ``[tail, head]`` may run past ``full_length``; it is split
into at most two pieces and every piece is intersected with the ordered
segment table by a single overlap routine.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class SegmentKind(str, Enum):
    TOP = "top"
    RIGHT_ARC = "right_arc"
    BOTTOM = "bottom"
    LEFT_ARC = "left_arc"


@dataclass(frozen=True)
class Segment:
    kind: SegmentKind
    start: float
    end: float

    @property
    def length(self) -> float:
        return float(self.end - self.start)


@dataclass(frozen=True)
class LitSpan:
    """Part of the lit window that falls on one segment (perimeter coords)."""

    kind: SegmentKind
    start: float
    end: float
    segment_start: float

    @property
    def length(self) -> float:
        return float(self.end - self.start)

    @property
    def local_start(self) -> float:
        return float(self.start - self.segment_start)

    @property
    def local_end(self) -> float:
        return float(self.end - self.segment_start)


def wrap_progress(progress: float) -> float:
    """Bring any animation value into ``[0, 1)``; non-finite values map to 0."""
    try:
        a = float(progress)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(a):
        return 0.0
    a = a % 1.0
    # -1e-20 % 1.0 == 1.0 in floating point.
    return 0.0 if a >= 1.0 else a


@dataclass(frozen=True)
class Perimeter:
    ext_radius: float
    segment_length: float

    @property
    def half_circle_length(self) -> float:
        return math.pi * self.ext_radius

    @property
    def circle_length(self) -> float:
        return 2.0 * self.half_circle_length

    @property
    def full_length(self) -> float:
        return 2.0 * self.segment_length + self.circle_length

    def segments(self) -> Tuple[Segment, ...]:
        seg = self.segment_length
        hc = self.half_circle_length
        return (
            Segment(SegmentKind.TOP, 0.0, seg),
            Segment(SegmentKind.RIGHT_ARC, seg, seg + hc),
            Segment(SegmentKind.BOTTOM, seg + hc, 2.0 * seg + hc),
            Segment(SegmentKind.LEFT_ARC, 2.0 * seg + hc, self.full_length),
        )

    def window(self, progress: float, progression_percent: float) -> Tuple[Tuple[float, float], ...]:
        """Lit window as 1 or 2 pieces inside ``[0, full_length]``."""
        full = self.full_length
        if full <= 0.0 or progression_percent <= 0.0:
            return ()
        a = wrap_progress(progress)
        tail = a * full
        head = (a + progression_percent) * full
        if head <= full:
            return ((tail, head),)
        return ((tail, full), (0.0, min(head - full, full)))

    def lit_spans(self, progress: float, progression_percent: float) -> Tuple[LitSpan, ...]:
        spans = []
        segments = self.segments()
        for piece in self.window(progress, progression_percent):
            for seg in segments:
                span = overlap(piece, seg)
                if span is not None:
                    spans.append(span)
        return tuple(spans)


def overlap(piece: Tuple[float, float], seg: Segment) -> Optional[LitSpan]:
    """Clamp a window piece into ``seg``; None when the overlap is empty."""
    lo = max(piece[0], seg.start)
    hi = min(piece[1], seg.end)
    if hi - lo <= 0.0:
        return None
    return LitSpan(kind=seg.kind, start=float(lo), end=float(hi), segment_start=float(seg.start))

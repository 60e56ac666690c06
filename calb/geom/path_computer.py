"""PathComputer: border, progress and background paths of the loading button.

``compute(progress, geometry, style)`` is a pure function. It is called on
every animation tick, so it only builds small immutable tuples; renderers
own (and reuse) whatever native path objects they need.

Paint order expected by callers: border (neutral) -> progress (accent) ->
background (surface) -> foreground content.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from calb.core.models import ButtonGeometry, RadiusPolicy, StyleConfig, coerce_radius_policy
from calb.geom.commands import (
    EMPTY_PATH,
    ArcBandCommand,
    ArcCommand,
    PathCommand,
    RectCommand,
    VectorPath,
)
from calb.geom.perimeter import LitSpan, Perimeter, SegmentKind
from calb.utils.errors import CalbGeometryError

log = logging.getLogger(__name__)

# Sizes already reported as clamped (avoid one log line per frame).
# Cleared once it holds _CLAMP_SEEN_MAX sizes.
_CLAMP_SEEN: set[tuple[float, float]] = set()
_CLAMP_SEEN_MAX = 64


@dataclass(frozen=True)
class ButtonPaths:
    border: VectorPath = EMPTY_PATH
    progress: VectorPath = EMPTY_PATH
    background: VectorPath = EMPTY_PATH
    # One span per progress command, same order.
    lit: Tuple[LitSpan, ...] = ()

    @property
    def lit_length(self) -> float:
        return float(sum(s.length for s in self.lit))

    def is_empty(self) -> bool:
        return self.border.is_empty() and self.progress.is_empty() and self.background.is_empty()


EMPTY_PATHS = ButtonPaths()


@dataclass(frozen=True)
class _Box:
    """Effective stadium box: x in [0, width], y in [top, top + 2*radius]."""

    width: float
    top: float
    radius: float
    border_width: float

    @property
    def bottom(self) -> float:
        return self.top + 2.0 * self.radius


def _resolve_box(geometry: ButtonGeometry, style: StyleConfig, policy: RadiusPolicy) -> Optional[_Box]:
    if not geometry.is_laid_out:
        return None

    w = float(geometry.width)
    h = float(geometry.height)
    top = 0.0
    if w < h:
        if policy is RadiusPolicy.REJECT:
            raise CalbGeometryError(f"Botón más alto que ancho: {w:g}x{h:g} (se requiere W >= H)")
        # clamp: círculo de diámetro W centrado verticalmente
        key = (w, h)
        if key not in _CLAMP_SEEN:
            if len(_CLAMP_SEEN) >= _CLAMP_SEEN_MAX:
                _CLAMP_SEEN.clear()
            _CLAMP_SEEN.add(key)
            log.info("[geom] %gx%g: W < H, radio recortado a %g", w, h, w / 2.0)
        top = (h - w) / 2.0
        h = w

    radius = h / 2.0
    # El anillo no puede ser más grueso que el radio.
    bw = min(float(style.border_width), radius)
    return _Box(width=w, top=top, radius=radius, border_width=bw)


def compute(
    progress: float,
    geometry: ButtonGeometry,
    style: StyleConfig | None = None,
    *,
    policy: RadiusPolicy | str = RadiusPolicy.CLAMP,
) -> ButtonPaths:
    """Compute the three paths for one animation sample.

    Args:
        progress: animation value; wrapped into ``[0, 1)``.
        geometry: current button size in px. A size <= 0 (not laid out yet)
            yields empty paths.
        style: border width and lit fraction of the perimeter.
        policy: what to do when ``width < height``.

    Raises:
        CalbGeometryError: ``width < height`` with ``RadiusPolicy.REJECT``.
    """
    style = style or StyleConfig()
    box = _resolve_box(geometry, style, coerce_radius_policy(policy))
    if box is None:
        return EMPTY_PATHS

    perimeter = Perimeter(ext_radius=box.radius, segment_length=max(0.0, box.width - 2.0 * box.radius))
    lit = perimeter.lit_spans(progress, style.progression_percent)

    return ButtonPaths(
        border=_stadium(box, inset=0.0),
        progress=VectorPath(tuple(_progress_command(span, box, perimeter) for span in lit)),
        background=_stadium(box, inset=box.border_width),
        lit=lit,
    )


def _stadium(box: _Box, *, inset: float) -> VectorPath:
    w, r = box.width, box.radius
    top, bottom = box.top + inset, box.bottom - inset
    return VectorPath(
        (
            RectCommand(r, top, w - r, bottom),
            ArcCommand(w - 2.0 * r + inset, top, w - inset, bottom, -90.0, 180.0),
            ArcCommand(inset, top, 2.0 * r - inset, bottom, 90.0, 180.0),
        )
    )


def _progress_command(span: LitSpan, box: _Box, perimeter: Perimeter) -> PathCommand:
    w, r, bw = box.width, box.radius, box.border_width
    lo, hi = span.local_start, span.local_end

    if span.kind is SegmentKind.TOP:
        return RectCommand(r + lo, box.top, r + hi, box.top + bw)
    if span.kind is SegmentKind.BOTTOM:
        # right-to-left
        return RectCommand(w - r - hi, box.bottom - bw, w - r - lo, box.bottom)
    if span.kind is SegmentKind.RIGHT_ARC:
        return _arc_band(w - r, box.top + r, r, bw, -90.0, lo, hi, perimeter.half_circle_length)
    return _arc_band(r, box.top + r, r, bw, 90.0, lo, hi, perimeter.half_circle_length)


def _arc_band(
    cx: float,
    cy: float,
    radius: float,
    border_width: float,
    base_deg: float,
    lo: float,
    hi: float,
    half_circle_length: float,
) -> ArcBandCommand:
    if half_circle_length > 0.0:
        start = _clamp(180.0 * lo / half_circle_length, 0.0, 180.0)
        end = _clamp(180.0 * hi / half_circle_length, 0.0, 180.0)
    else:
        start = end = 0.0
    return ArcBandCommand(
        cx=cx,
        cy=cy,
        outer_radius=radius,
        inner_radius=radius - border_width,
        start_deg=base_deg + start,
        sweep_deg=max(0.0, end - start),
    )


def _clamp(v: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, v))

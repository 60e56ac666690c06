"""Geometry of the pill-shaped loading button.

This package is intentionally Qt-free: it produces platform-neutral path
commands that `calb.render.qpath_render` (or any other surface) rasterizes.
"""

from __future__ import annotations

from calb.geom.commands import ArcBandCommand, ArcCommand, RectCommand, VectorPath
from calb.geom.path_computer import ButtonPaths, compute
from calb.geom.perimeter import LitSpan, Perimeter, SegmentKind

__all__ = [
    "ArcBandCommand",
    "ArcCommand",
    "ButtonPaths",
    "LitSpan",
    "Perimeter",
    "RectCommand",
    "SegmentKind",
    "VectorPath",
    "compute",
]

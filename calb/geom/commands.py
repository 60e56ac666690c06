"""Platform-neutral path commands.

Angles follow the screen convention used by the button geometry: 0° points
to +x, positive sweeps go clockwise (y grows downwards). Renderers that use
the mathematical convention (Qt's ``QPainterPath.arcTo``) must negate them.

Every command describes one *closed* filled shape:
- ``RectCommand``: axis aligned rectangle.
- ``ArcCommand``: arc of the oval inscribed in a rect, closed by its chord
  (a half disc for the 180° caps of the stadium).
- ``ArcBandCommand``: annular sector (ring segment) between two radii.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple, Union


@dataclass(frozen=True)
class RectCommand:
    left: float
    top: float
    right: float
    bottom: float

    @property
    def width(self) -> float:
        return float(self.right - self.left)

    @property
    def height(self) -> float:
        return float(self.bottom - self.top)


@dataclass(frozen=True)
class ArcCommand:
    left: float
    top: float
    right: float
    bottom: float
    start_deg: float
    sweep_deg: float


@dataclass(frozen=True)
class ArcBandCommand:
    cx: float
    cy: float
    outer_radius: float
    inner_radius: float
    start_deg: float
    sweep_deg: float


PathCommand = Union[RectCommand, ArcCommand, ArcBandCommand]


@dataclass(frozen=True)
class VectorPath:
    """Immutable list of commands. Rebuilt on every compute, never appended to."""

    commands: Tuple[PathCommand, ...] = ()

    def __iter__(self) -> Iterator[PathCommand]:
        return iter(self.commands)

    def __len__(self) -> int:
        return len(self.commands)

    def is_empty(self) -> bool:
        return not self.commands


EMPTY_PATH = VectorPath()

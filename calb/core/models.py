# File: calb/core/models.py
# Project: CircularAnimatedLoadingButton (CALB)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Modelos de datos del botón: geometría, estilo, paleta y política de radio.
# Notes: Sin Qt. Validación en el borde (from_dict / __post_init__).
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any

from calb.core.version import (
    DEFAULT_BACKGROUND_RGB,
    DEFAULT_BORDER_RGB,
    DEFAULT_BORDER_WIDTH_PX,
    DEFAULT_PROGRESSION_PERCENT,
    DEFAULT_PROGRESS_RGB,
)
from calb.utils.errors import CalbValidationError

RGB = tuple[int, int, int]


class RadiusPolicy(str, Enum):
    """Qué hacer cuando el botón es más alto que ancho (W < H).

    - clamp: radio = min(W, H)/2, el pill se dibuja en un cuadro W x W centrado.
    - reject: CalbGeometryError.
    """

    CLAMP = "clamp"
    REJECT = "reject"


def coerce_radius_policy(v: object, default: RadiusPolicy = RadiusPolicy.CLAMP) -> RadiusPolicy:
    try:
        s = str(getattr(v, "value", v) or "").strip().lower()
        for m in RadiusPolicy:
            if m.value == s:
                return m
    except Exception:
        pass
    return default


@dataclass(frozen=True)
class ButtonGeometry:
    """Tamaño actual del botón en px. Puede ser 0 mientras no hay layout."""

    width: float
    height: float

    @property
    def is_laid_out(self) -> bool:
        w, h = self.width, self.height
        return math.isfinite(w) and math.isfinite(h) and w > 0 and h > 0

    @property
    def ext_radius(self) -> float:
        return self.height / 2.0

    @property
    def segment_length(self) -> float:
        return self.width - self.height


@dataclass(frozen=True)
class StyleConfig:
    border_width: float = DEFAULT_BORDER_WIDTH_PX
    progression_percent: float = DEFAULT_PROGRESSION_PERCENT

    def __post_init__(self) -> None:
        bw = _as_float(self.border_width, "border_width")
        pp = _as_float(self.progression_percent, "progression_percent")
        if bw < 0:
            raise CalbValidationError(f"border_width inválido: {bw!r} (debe ser >= 0)")
        if not (0.0 <= pp <= 1.0):
            raise CalbValidationError(f"progression_percent inválido: {pp!r} (rango 0..1)")
        # frozen: normalizamos via object.__setattr__
        object.__setattr__(self, "border_width", bw)
        object.__setattr__(self, "progression_percent", pp)

    def to_dict(self) -> dict[str, Any]:
        return {
            "border_width": float(self.border_width),
            "progression_percent": float(self.progression_percent),
        }

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "StyleConfig":
        if not isinstance(d, dict):
            raise CalbValidationError("Estilo inválido: se esperaba dict")
        return StyleConfig(
            border_width=d.get("border_width", DEFAULT_BORDER_WIDTH_PX),
            progression_percent=d.get("progression_percent", DEFAULT_PROGRESSION_PERCENT),
        )


@dataclass(frozen=True)
class ButtonPalette:
    """Colores de los tres paths (orden de pintado: border, progress, background)."""

    border: RGB = DEFAULT_BORDER_RGB
    progress: RGB = DEFAULT_PROGRESS_RGB
    background: RGB = DEFAULT_BACKGROUND_RGB


def _as_float(v: Any, field_name: str) -> float:
    if isinstance(v, bool):
        raise CalbValidationError(f"{field_name}: se esperaba número, no bool")
    try:
        f = float(v)
    except Exception as e:
        raise CalbValidationError(f"{field_name}: se esperaba número, recibido {v!r}") from e
    if not math.isfinite(f):
        raise CalbValidationError(f"{field_name}: valor no finito {v!r}")
    return f

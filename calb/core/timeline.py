# File: calb/core/timeline.py
# Project: CircularAnimatedLoadingButton (CALB)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Línea de tiempo lineal infinita (elapsed ms -> progreso en [0,1)).
# Notes: Es el mismo contrato que el QVariantAnimation del widget, pero sin Qt
#        (lo usan el harness de frames y los tests).
from __future__ import annotations

from typing import Iterator

from calb.core.version import DEFAULT_PERIOD_MS


class LinearTimeline:
    def __init__(self, period_ms: int = DEFAULT_PERIOD_MS) -> None:
        if period_ms <= 0:
            raise ValueError("period_ms must be positive")
        self._period_ms = int(period_ms)

    @property
    def period_ms(self) -> int:
        return self._period_ms

    def progress_at(self, elapsed_ms: float) -> float:
        """Progreso lineal que se repite cada período. Negativos también envuelven."""
        p = (float(elapsed_ms) % self._period_ms) / self._period_ms
        return 0.0 if p >= 1.0 else p

    def frames(self, count: int) -> Iterator[float]:
        """`count` muestras equiespaciadas de un período (la primera es 0.0)."""
        if count <= 0:
            return
        step = self._period_ms / count
        for i in range(count):
            yield self.progress_at(i * step)

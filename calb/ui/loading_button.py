# File: calb/ui/loading_button.py
# Project: CircularAnimatedLoadingButton (CALB)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Botón pill con borde de progreso animado (QLabel + QVariantAnimation).
# Notes:
#   - La geometría es de calb.geom (pura); acá solo hay reloj, tamaño y pintado.
#   - Orden de pintado: border -> progress -> background -> texto (QLabel).
from __future__ import annotations

import logging

from PySide6.QtCore import QEasingCurve, QSize, Qt, QVariantAnimation
from PySide6.QtGui import QPainter
from PySide6.QtWidgets import QLabel

from calb.core.models import ButtonGeometry, ButtonPalette, RadiusPolicy, StyleConfig, coerce_radius_policy
from calb.core.settings import period_from_env, radius_policy_from_env, style_from_env
from calb.geom.path_computer import EMPTY_PATHS, compute
from calb.render.qpath_render import QtButtonPaths, paint_button
from calb.utils.errors import CalbError

log = logging.getLogger(__name__)


class LoadingButton(QLabel):
    """Texto centrado sobre un pill cuyo borde recorre un tramo iluminado en loop.

    La animación no arranca sola: llamar `start()`.
    """

    def __init__(
        self,
        text: str = "",
        parent=None,
        *,
        style: StyleConfig | None = None,
        palette: ButtonPalette | None = None,
        period_ms: int | None = None,
        policy: RadiusPolicy | str | None = None,
    ) -> None:
        super().__init__(text, parent)
        self.setAlignment(Qt.AlignCenter)

        self._style = style or style_from_env()
        self._palette = palette or ButtonPalette()
        self._policy = coerce_radius_policy(policy) if policy is not None else radius_policy_from_env()
        self._progress = 0.0
        self._qpaths = QtButtonPaths()

        self._animator = QVariantAnimation(self)
        self._animator.setStartValue(0.0)
        self._animator.setEndValue(1.0)
        self._animator.setDuration(int(period_ms or period_from_env()))
        self._animator.setLoopCount(-1)  # infinito
        self._animator.setEasingCurve(QEasingCurve.Linear)
        self._animator.valueChanged.connect(self._on_tick)

    # ------------------------------
    # API
    # ------------------------------
    def start(self) -> None:
        self._animator.start()

    def progress(self) -> float:
        return self._progress

    def qpaths(self) -> QtButtonPaths:
        return self._qpaths

    def sizeHint(self) -> QSize:  # pragma: no cover (UI)
        hint = super().sizeHint()
        h = max(hint.height() + 2 * int(self._style.border_width) + 16, 48)
        return QSize(max(hint.width() + h, 3 * h), h)

    # ------------------------------
    # Animación / layout
    # ------------------------------
    def _on_tick(self, value) -> None:
        if self._recompute(value):
            self.update()

    def _recompute(self, progress) -> bool:
        try:
            self._progress = float(progress)
            paths = compute(
                self._progress,
                ButtonGeometry(float(self.width()), float(self.height())),
                self._style,
                policy=self._policy,
            )
        except CalbError as e:
            # REJECT con W < H: no se dibuja el borde, el texto sigue.
            log.debug("Frame descartado (%sx%s): %s", self.width(), self.height(), e)
            paths = EMPTY_PATHS
        except Exception:
            log.debug("Frame descartado", exc_info=True)
            return False
        self._qpaths.update(paths)
        return True

    def resizeEvent(self, event) -> None:  # pragma: no cover (UI)
        super().resizeEvent(event)
        self._recompute(self._progress)

    def paintEvent(self, event) -> None:  # pragma: no cover (UI)
        p = QPainter(self)
        try:
            paint_button(p, self._qpaths, self._palette)
        except Exception:
            # Nunca romper la UI por un frame.
            log.debug("paint_button fallo", exc_info=True)
        finally:
            p.end()
        super().paintEvent(event)

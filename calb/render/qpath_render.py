# File: calb/render/qpath_render.py
# Project: CircularAnimatedLoadingButton (CALB)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Comandos de path (calb.geom) -> QPainterPath + pintado en orden.
# Notes:
#   - calb.geom usa ángulos en sentido horario (pantalla, y hacia abajo);
#     QPainterPath.arcTo usa antihorario -> se niegan start/sweep.
#   - QtButtonPaths reutiliza sus 3 QPainterPath (clear + refill por frame).
from __future__ import annotations

from PySide6.QtCore import QRectF, Qt
from PySide6.QtGui import QColor, QPainter, QPainterPath, QPen

from calb.core.models import ButtonPalette
from calb.geom.commands import ArcBandCommand, ArcCommand, RectCommand, VectorPath
from calb.geom.path_computer import ButtonPaths


def add_vector_path(out: QPainterPath, vp: VectorPath) -> QPainterPath:
    """Agrega cada comando de `vp` como subpath cerrado de `out` (y lo devuelve)."""
    for cmd in vp:
        if isinstance(cmd, RectCommand):
            out.addRect(QRectF(cmd.left, cmd.top, cmd.width, cmd.height))
        elif isinstance(cmd, ArcCommand):
            rect = QRectF(cmd.left, cmd.top, cmd.right - cmd.left, cmd.bottom - cmd.top)
            out.arcMoveTo(rect, -cmd.start_deg)
            out.arcTo(rect, -cmd.start_deg, -cmd.sweep_deg)
            out.closeSubpath()
        elif isinstance(cmd, ArcBandCommand):
            _add_arc_band(out, cmd)
        else:
            raise TypeError(f"Comando de path no soportado: {type(cmd).__name__}")
    return out


def _add_arc_band(out: QPainterPath, cmd: ArcBandCommand) -> None:
    # Arco externo en sentido horario, vuelta por el interno en sentido inverso.
    ro, ri = cmd.outer_radius, max(0.0, cmd.inner_radius)
    outer = QRectF(cmd.cx - ro, cmd.cy - ro, 2.0 * ro, 2.0 * ro)
    inner = QRectF(cmd.cx - ri, cmd.cy - ri, 2.0 * ri, 2.0 * ri)
    out.arcMoveTo(outer, -cmd.start_deg)
    out.arcTo(outer, -cmd.start_deg, -cmd.sweep_deg)
    if ri > 0.0:
        out.arcTo(inner, -(cmd.start_deg + cmd.sweep_deg), cmd.sweep_deg)
    else:
        # Sin radio interno: sector (pie) cerrado en el centro.
        out.lineTo(cmd.cx, cmd.cy)
    out.closeSubpath()


def to_qpath(vp: VectorPath) -> QPainterPath:
    q = QPainterPath()
    q.setFillRule(Qt.WindingFill)
    return add_vector_path(q, vp)


class QtButtonPaths:
    """Buffers Qt de los tres paths del botón (propiedad del widget)."""

    def __init__(self) -> None:
        self.border = QPainterPath()
        self.progress = QPainterPath()
        self.background = QPainterPath()

    def update(self, paths: ButtonPaths) -> None:
        for q, vp in (
            (self.border, paths.border),
            (self.progress, paths.progress),
            (self.background, paths.background),
        ):
            q.clear()
            q.setFillRule(Qt.WindingFill)
            add_vector_path(q, vp)

    def is_empty(self) -> bool:
        return self.border.isEmpty() and self.progress.isEmpty() and self.background.isEmpty()


def paint_button(painter: QPainter, qpaths: QtButtonPaths, palette: ButtonPalette | None = None) -> None:
    """Pinta border -> progress -> background (relleno + trazo hairline)."""
    palette = palette or ButtonPalette()
    painter.save()
    try:
        painter.setRenderHint(QPainter.Antialiasing, True)
        for q, rgb in (
            (qpaths.border, palette.border),
            (qpaths.progress, palette.progress),
            (qpaths.background, palette.background),
        ):
            if q.isEmpty():
                continue
            color = QColor(*rgb)
            painter.setPen(QPen(color, 0))
            painter.setBrush(color)
            painter.drawPath(q)
    finally:
        painter.restore()

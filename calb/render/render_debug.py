# File: calb/render/render_debug.py
# Project: CircularAnimatedLoadingButton (CALB)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Harness CLI: renderiza N frames de un período a PNG + reporte JSON (sin UI).
# Notes:
# - Mismo pipeline que el widget: compute -> QtButtonPaths -> paint_button.
# - El reporte incluye los tramos iluminados por frame (largo total vs esperado).
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import argparse
import datetime
import json
import os
import sys
from typing import Any

from PySide6.QtCore import Qt
from PySide6.QtGui import QImage, QPainter

from calb.core.models import ButtonGeometry, ButtonPalette, RadiusPolicy, StyleConfig, coerce_radius_policy
from calb.core.settings import apply_project_settings, period_from_env, radius_policy_from_env, style_from_env
from calb.core.timeline import LinearTimeline
from calb.core.version import APP_VERSION
from calb.geom.path_computer import ButtonPaths, compute
from calb.geom.perimeter import Perimeter
from calb.render.qpath_render import QtButtonPaths, paint_button
from calb.utils.errors import CalbIOError
from calb.utils.log import get_logger, setup_logging

log = get_logger(__name__)


@dataclass(frozen=True)
class FrameResult:
    index: int
    progress: float
    out_png: Path | None
    lit_length: float
    spans: list[dict[str, Any]]


def _ensure_qt_app() -> None:
    """Crea una app Qt mínima si no existe (necesaria para algunos plugins)."""
    from PySide6.QtGui import QGuiApplication

    if QGuiApplication.instance() is None:
        QGuiApplication(sys.argv[:1] or ["calb-render-debug"])


def render_frame(paths: ButtonPaths, size: tuple[int, int], palette: ButtonPalette | None = None) -> QImage:
    """Rasteriza los tres paths en una imagen ARGB transparente de `size`."""
    w, h = max(1, int(size[0])), max(1, int(size[1]))
    img = QImage(w, h, QImage.Format_ARGB32_Premultiplied)
    img.fill(Qt.transparent)

    qpaths = QtButtonPaths()
    qpaths.update(paths)
    p = QPainter(img)
    try:
        paint_button(p, qpaths, palette)
    finally:
        p.end()
    return img


def expected_lit_length(geometry: ButtonGeometry, style: StyleConfig) -> float:
    if not geometry.is_laid_out:
        return 0.0
    r = min(geometry.width, geometry.height) / 2.0
    per = Perimeter(ext_radius=r, segment_length=max(0.0, geometry.width - 2.0 * r))
    return float(style.progression_percent * per.full_length)


def render_frames(
    geometry: ButtonGeometry,
    style: StyleConfig,
    *,
    frames: int,
    period_ms: int,
    out_dir: Path | None,
    policy: RadiusPolicy = RadiusPolicy.CLAMP,
    palette: ButtonPalette | None = None,
) -> list[FrameResult]:
    """Calcula (y opcionalmente guarda) `frames` muestras equiespaciadas de un período."""
    timeline = LinearTimeline(period_ms)
    results: list[FrameResult] = []
    if out_dir is not None:
        try:
            out_dir.mkdir(parents=True, exist_ok=True)
        except Exception as e:
            raise CalbIOError(f"No se pudo crear la carpeta de salida: {out_dir}") from e

    size = (int(round(geometry.width)), int(round(geometry.height)))
    for i, a in enumerate(timeline.frames(frames)):
        paths = compute(a, geometry, style, policy=policy)
        out_png = None
        if out_dir is not None:
            out_png = out_dir / f"frame_{i:03d}.png"
            img = render_frame(paths, size, palette)
            if not img.save(str(out_png)):
                raise CalbIOError(f"No se pudo guardar PNG: {out_png}")
        results.append(
            FrameResult(
                index=i,
                progress=float(a),
                out_png=out_png,
                lit_length=paths.lit_length,
                spans=[
                    {"kind": s.kind.value, "start": s.start, "end": s.end, "length": s.length}
                    for s in paths.lit
                ],
            )
        )
    return results


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        prog="calb-render-debug",
        description="Renderiza frames del LoadingButton a PNG + reporte JSON (sin UI).",
    )
    ap.add_argument("--width", type=int, default=int(os.environ.get("CALB_DBG_WIDTH", "300")), help="Ancho en px (default: 300)")
    ap.add_argument("--height", type=int, default=int(os.environ.get("CALB_DBG_HEIGHT", "100")), help="Alto en px (default: 100)")
    ap.add_argument("--frames", type=int, default=int(os.environ.get("CALB_DBG_FRAMES", "12")), help="Frames por período (default: 12)")
    ap.add_argument("--out", default=os.environ.get("CALB_DBG_OUT", "render_debug_out"), help="Carpeta de salida")
    ap.add_argument("--border-width", type=float, default=None, help="Override de CALB_BORDER_WIDTH")
    ap.add_argument("--progression", type=float, default=None, help="Override de CALB_PROGRESSION_PERCENT (0..1)")
    ap.add_argument("--policy", choices=[m.value for m in RadiusPolicy], default=None, help="Override de CALB_RADIUS_POLICY")
    ap.add_argument("--no-png", action="store_true", help="Solo reporte JSON (sin rasterizar)")
    args = ap.parse_args(argv)

    setup_logging()
    apply_project_settings(logger=log, prefer_env=True)

    base = style_from_env()
    style = StyleConfig(
        border_width=base.border_width if args.border_width is None else args.border_width,
        progression_percent=base.progression_percent if args.progression is None else args.progression,
    )
    policy = coerce_radius_policy(args.policy) if args.policy else radius_policy_from_env()
    period_ms = period_from_env()
    geometry = ButtonGeometry(float(args.width), float(args.height))
    out_dir = Path(args.out).expanduser()

    if not args.no_png:
        _ensure_qt_app()

    print(f"[CALB] render_debug (CALB {APP_VERSION}): {args.width}x{args.height}, {args.frames} frames → {out_dir}")
    results = render_frames(
        geometry,
        style,
        frames=int(args.frames),
        period_ms=period_ms,
        out_dir=None if args.no_png else out_dir,
        policy=policy,
    )

    expected = expected_lit_length(geometry, style)
    summary: dict[str, Any] = {
        "tool": "calb.render.render_debug",
        "when": datetime.datetime.now().isoformat(timespec="seconds"),
        "size_px": [int(args.width), int(args.height)],
        "style": style.to_dict(),
        "policy": policy.value,
        "period_ms": period_ms,
        "expected_lit_length": expected,
        "frames": [
            {
                "index": r.index,
                "progress": r.progress,
                "png": str(r.out_png) if r.out_png else None,
                "lit_length": r.lit_length,
                "spans": r.spans,
            }
            for r in results
        ],
    }

    summary_path = out_dir / "_summary.json"
    try:
        out_dir.mkdir(parents=True, exist_ok=True)
        summary_path.write_text(json.dumps(summary, indent=2, ensure_ascii=False), encoding="utf-8")
    except Exception as e:
        raise CalbIOError(f"No se pudo escribir el reporte: {summary_path}") from e

    drift = max((abs(r.lit_length - expected) for r in results), default=0.0)
    print(f"[CALB] OK — summary: {summary_path}")
    print(f"[CALB] Lit length esperado={expected:.3f}px, drift máx={drift:.6f}px")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

# File: calb/core/settings.py
# Project: CircularAnimatedLoadingButton (CALB)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Configuración del botón: calb_settings.json (repo-local) + variables CALB_*.
# Notes: Solo lectura. No depende de Qt. El JSON se vuelca a env vars y los
#        consumidores (widget / harness) leen las env vars.
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict

from calb.core.models import RadiusPolicy, StyleConfig, coerce_radius_policy
from calb.core.version import (
    DEFAULT_BORDER_WIDTH_PX,
    DEFAULT_PERIOD_MS,
    DEFAULT_PROGRESSION_PERCENT,
)

log = logging.getLogger(__name__)


# ------------------------------
# Project settings (repo-local)
# ------------------------------
# Archivo esperado: calb_settings.json en el CWD o en alguno de sus padres.
PROJECT_SETTINGS_FILENAME = "calb_settings.json"

ENV_BORDER_WIDTH = "CALB_BORDER_WIDTH"
ENV_PROGRESSION_PERCENT = "CALB_PROGRESSION_PERCENT"
ENV_PERIOD_MS = "CALB_PERIOD_MS"
ENV_RADIUS_POLICY = "CALB_RADIUS_POLICY"


def find_project_settings_path(start: Path | None = None) -> Path | None:
    """Busca calb_settings.json subiendo desde start (o CWD)."""
    start = (start or Path.cwd()).resolve()
    for p in (start, *start.parents):
        candidate = p / PROJECT_SETTINGS_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_project_settings(start: Path | None = None, *, logger: logging.Logger | None = None) -> Dict[str, Any]:
    """Carga el JSON de project settings. Devuelve {} si no existe o es inválido."""
    _log = logger or log
    p = find_project_settings_path(start)
    if not p:
        return {}
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
        return data if isinstance(data, dict) else {}
    except Exception as e:
        _log.warning("No se pudo leer %s: %s", p, e)
        return {}


def _deep_get(d: Dict[str, Any], path: str, default: Any = None) -> Any:
    cur: Any = d
    for part in path.split("."):
        if not isinstance(cur, dict) or part not in cur:
            return default
        cur = cur[part]
    return cur


def apply_project_settings(
    start: Path | None = None,
    *,
    logger: logging.Logger | None = None,
    prefer_env: bool = True,
) -> Dict[str, Any]:
    """Carga calb_settings.json (si existe) y lo aplica como variables de entorno.

    - Si `prefer_env=True`, una env var ya seteada NO se pisa.
    - Si `prefer_env=False`, el JSON pisa la env var.
    - Valores fuera de rango se ignoran.

    Devuelve un dict con los valores *aplicados desde JSON*.
    """
    _log = logger or log
    data = load_project_settings(start, logger=_log)
    if not data:
        return {}

    applied: Dict[str, Any] = {}

    def _set_env(key: str, value: Any) -> None:
        if prefer_env and os.environ.get(key):
            return
        os.environ[key] = str(value)

    bw = _deep_get(data, "button.border_width_px")
    if isinstance(bw, (int, float)) and not isinstance(bw, bool) and 0 <= bw <= 256:
        applied["button.border_width_px"] = float(bw)
        _set_env(ENV_BORDER_WIDTH, float(bw))

    pp = _deep_get(data, "button.progression_percent")
    if isinstance(pp, (int, float)) and not isinstance(pp, bool) and 0.0 <= pp <= 1.0:
        applied["button.progression_percent"] = float(pp)
        _set_env(ENV_PROGRESSION_PERCENT, float(pp))

    period = _deep_get(data, "animation.period_ms")
    if isinstance(period, int) and not isinstance(period, bool) and 100 <= period <= 60000:
        applied["animation.period_ms"] = period
        _set_env(ENV_PERIOD_MS, period)

    policy = _deep_get(data, "geometry.radius_policy")
    if isinstance(policy, str):
        policy = policy.strip().lower()
        if policy in tuple(m.value for m in RadiusPolicy):
            applied["geometry.radius_policy"] = policy
            _set_env(ENV_RADIUS_POLICY, policy)

    if applied:
        _log.info("Project settings aplicados desde %s: %s", find_project_settings_path(start), applied)
    return applied


def _env_float(name: str, default: float, *, min_value: float | None = None, max_value: float | None = None) -> float:
    try:
        raw = os.environ.get(name, "")
        v = float(str(raw).strip()) if raw != "" else float(default)
    except Exception:
        v = float(default)
    if v != v:  # NaN
        v = float(default)

    if min_value is not None:
        v = max(float(min_value), v)
    if max_value is not None:
        v = min(float(max_value), v)
    return v


def style_from_env() -> StyleConfig:
    return StyleConfig(
        border_width=_env_float(ENV_BORDER_WIDTH, DEFAULT_BORDER_WIDTH_PX, min_value=0.0, max_value=256.0),
        progression_percent=_env_float(ENV_PROGRESSION_PERCENT, DEFAULT_PROGRESSION_PERCENT, min_value=0.0, max_value=1.0),
    )


def period_from_env() -> int:
    return int(_env_float(ENV_PERIOD_MS, DEFAULT_PERIOD_MS, min_value=100, max_value=60000))


def radius_policy_from_env() -> RadiusPolicy:
    return coerce_radius_policy(os.environ.get(ENV_RADIUS_POLICY, ""))

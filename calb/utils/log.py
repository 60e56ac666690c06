# File: calb/utils/log.py
# Project: CircularAnimatedLoadingButton (CALB)
# Version: 0.1.1
# Status: stable
# Date: 2026-10-19
# Purpose: Logging centralizado (consola + logs/calb.log) con overrides CALB_LOG_*.
# Notes: Se configura una sola vez (app o harness); los módulos solo piden logger.
from __future__ import annotations

import logging
import os
from pathlib import Path

ENV_LOG_LEVEL = "CALB_LOG_LEVEL"
ENV_LOG_DIR = "CALB_LOG_DIR"
LOG_FILENAME = "calb.log"

_LOGGER_CONFIGURED = False


def resolve_log_level(default: int = logging.INFO) -> int:
    """Nivel desde CALB_LOG_LEVEL: nombre (debug/info/...) o número. Si es inválido, `default`."""
    raw = (os.environ.get(ENV_LOG_LEVEL, "") or "").strip()
    if not raw:
        return int(default)
    if raw.isdigit():
        return int(raw)
    lvl = logging.getLevelName(raw.upper())
    return lvl if isinstance(lvl, int) else int(default)


def setup_logging(log_dir: str | os.PathLike | None = None, level: int | None = None) -> None:
    """Configura logging en consola + archivo.

    - `log_dir`: default CALB_LOG_DIR o "logs".
    - `level`: default CALB_LOG_LEVEL o INFO. El frame loop loguea en DEBUG.
    - No lanza excepción si no puede escribir el archivo; cae a consola.
    """
    global _LOGGER_CONFIGURED
    if _LOGGER_CONFIGURED:
        return

    lvl = resolve_log_level() if level is None else int(level)
    d = Path(log_dir if log_dir is not None else (os.environ.get(ENV_LOG_DIR) or "logs"))

    root = logging.getLogger()
    root.setLevel(lvl)
    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    try:
        d.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(d / LOG_FILENAME, encoding="utf-8"))
    except Exception as e:
        logging.getLogger(__name__).warning("No se pudo abrir %s en %s: %s", LOG_FILENAME, d, e)

    for h in handlers:
        h.setLevel(lvl)
        h.setFormatter(fmt)
        root.addHandler(h)

    _LOGGER_CONFIGURED = True
    logging.getLogger(__name__).debug("Logging listo: nivel=%s dir=%s", logging.getLevelName(lvl), d)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)

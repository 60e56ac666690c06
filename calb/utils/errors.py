# File: calb/utils/errors.py
# Project: CircularAnimatedLoadingButton (CALB)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Errores tipados del proyecto.
# Notes: Un tamaño "sin layout" (W<=0/H<=0) NO es error; ver path_computer.
from __future__ import annotations


class CalbError(Exception):
    """Error base del proyecto."""


class CalbValidationError(CalbError):
    """Error de validación (estilo/config/estructura)."""


class CalbGeometryError(CalbValidationError):
    """Geometría inválida para un botón pill (p.ej. W < H con RadiusPolicy.REJECT)."""


class CalbIOError(CalbError):
    """Error de E/S (lectura/escritura de frames o reportes)."""

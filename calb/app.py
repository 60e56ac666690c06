# File: calb/app.py
# Project: CircularAnimatedLoadingButton (CALB)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-19
# Purpose: Entry-point demo: una ventana con un LoadingButton animado.
# Notes: calb_settings.json (si existe) se aplica antes de crear el widget.
from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication, QVBoxLayout, QWidget

from calb.core.settings import apply_project_settings
from calb.core.version import APP_NAME, APP_VERSION
from calb.ui.loading_button import LoadingButton
from calb.utils.log import get_logger, setup_logging

log = get_logger(__name__)


def main() -> int:
    setup_logging()
    apply_project_settings(logger=log, prefer_env=True)
    app = QApplication(sys.argv)

    w = QWidget()
    w.setWindowTitle(APP_NAME)
    root = QVBoxLayout(w)
    button = LoadingButton("Loading…", w)
    button.setMinimumSize(300, 100)
    root.addWidget(button)
    w.resize(360, 160)
    w.show()
    button.start()

    log.info("CALB iniciado (v%s)", APP_VERSION)
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())

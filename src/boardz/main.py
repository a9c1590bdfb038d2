# Rev 0.1.2

# src/boardz/main.py  (Rev 0.1.2)
from __future__ import annotations
import argparse
import logging
import os
import sys

from PySide6.QtCore import Qt, QCoreApplication
from PySide6.QtGui import QGuiApplication, QFont
from PySide6.QtWidgets import QApplication

from boardz.app_context import AppContext
from boardz.ui.main_window import MainWindow
from boardz.utils.config import load_settings
from boardz.utils.logging_setup import setup_logging


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="boardz", description="boardZ project dashboard")
    p.add_argument("--seed", help="JSON file with initial tasks/activities")
    # Qt consumes its own flags (-platform, -style, ...)
    args, _qt_args = p.parse_known_args(argv)
    return args


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    args = _parse_args(argv)

    QGuiApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )
    app = QApplication([sys.argv[0], *argv])
    QCoreApplication.setOrganizationName("boardz")
    QCoreApplication.setApplicationName("boardZ")

    logfile = setup_logging("boardZ")
    log = logging.getLogger("boardz.main")

    settings = load_settings()
    seed_file = args.seed or os.environ.get("BOARDZ_SEED") or settings["board"].get("seed_file")
    try:
        ctx = AppContext.create(seed_file)
    except (OSError, ValueError) as e:
        log.error("Cannot load seed %s: %s", seed_file, e)
        return 2

    win = MainWindow(ctx.dashboard, settings=settings, logfile=logfile)
    win.show()
    app.setProperty("mainWindow", win)
    app.setFont(QFont("Sans Serif", 10))

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())

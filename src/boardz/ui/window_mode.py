# Rev 0.1.0

# ui/window_mode.py
from __future__ import annotations
from typing import Any, Dict

from PySide6.QtCore import Qt, QRect
from PySide6.QtGui import QGuiApplication


def _available(win) -> QRect:
    screen = QGuiApplication.screenAt(win.frameGeometry().center()) or QGuiApplication.primaryScreen()
    return screen.availableGeometry()


def apply_window_settings(win, settings: Dict[str, Any]) -> None:
    """
    Size the main window from the "main_window" settings section, clamped
    to the available screen area (taskbar-safe).
    """
    section = settings.get("main_window", {})
    rect = _available(win)
    w = min(int(section.get("width", 1280)), rect.width())
    h = min(int(section.get("height", 800)), rect.height())
    win.resize(w, h)
    if section.get("is_maximized"):
        win.setWindowState(win.windowState() | Qt.WindowMaximized)


def collect_window_settings(win, settings: Dict[str, Any]) -> Dict[str, Any]:
    out = dict(settings)
    maximized = win.isMaximized()
    size = win.normalGeometry().size() if maximized else win.size()
    out["main_window"] = {"width": size.width(), "height": size.height(), "is_maximized": maximized}
    return out


def lock_dialog_fixed(win, *, width_ratio=0.35, height_ratio=0.4):
    """
    For modal dialogs: keep them *not* maximized, but non-resizable and sized
    as a fraction of the current screen.
    """
    rect = _available(win)
    w = int(rect.width() * width_ratio)
    h = int(rect.height() * height_ratio)
    win.setFixedSize(max(w, 360), max(h, 240))
    win.setWindowFlag(Qt.WindowMaximizeButtonHint, False)

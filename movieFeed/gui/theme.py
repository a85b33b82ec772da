"""
theme
~~~~~
Light / dark palette switching, persisted in the preferences kv table.
"""

from __future__ import annotations
from enum import IntEnum

from PySide6.QtCore    import Qt # type: ignore
from PySide6.QtGui     import QColor, QPalette # type: ignore
from PySide6.QtWidgets import QApplication # type: ignore

from movieFeed.settings import ACCENT_COLOR
from movieFeed.metadata.core.repo import PrefsRepo


class ThemeSetting(IntEnum):
    LIGHT = 0
    DARK  = 1


def apply_dark_palette(app: QApplication) -> None:
    """Apply a dark Fusion palette to the application."""
    palette = QPalette()
    palette.setColor(QPalette.Window,        QColor("#202124"))
    palette.setColor(QPalette.WindowText,    Qt.white)
    palette.setColor(QPalette.Base,          QColor("#2b2c2e"))
    palette.setColor(QPalette.AlternateBase, QColor("#323336"))
    palette.setColor(QPalette.Button,        QColor("#2d2e30"))
    palette.setColor(QPalette.ButtonText,    Qt.white)
    palette.setColor(QPalette.Text,          Qt.white)
    palette.setColor(QPalette.Link,          QColor(ACCENT_COLOR))
    palette.setColor(QPalette.Highlight,     QColor(ACCENT_COLOR))
    palette.setColor(QPalette.HighlightedText, Qt.white)
    app.setStyle("Fusion")
    app.setPalette(palette)


def apply_light_palette(app: QApplication) -> None:
    app.setStyle("Fusion")
    app.setPalette(app.style().standardPalette())


class ThemeManager:
    KEY = "selected_theme"

    def __init__(self, prefs: PrefsRepo) -> None:
        self.prefs = prefs

    def current(self) -> ThemeSetting:
        saved = self.prefs.get_kv(self.KEY)
        try:
            return ThemeSetting(int(saved))
        except (TypeError, ValueError):
            return ThemeSetting.LIGHT      # default if nothing (valid) saved

    def set(self, theme: ThemeSetting, app: QApplication | None = None) -> None:
        """Persist *theme* and apply it immediately when an app is given."""
        self.prefs.set_kv(self.KEY, str(int(theme)))
        self.apply(app)

    def toggle(self, app: QApplication | None = None) -> ThemeSetting:
        nxt = ThemeSetting.LIGHT if self.current() == ThemeSetting.DARK else ThemeSetting.DARK
        self.set(nxt, app)
        return nxt

    def apply(self, app: QApplication | None) -> None:
        if app is None:
            return
        if self.current() == ThemeSetting.DARK:
            apply_dark_palette(app)
        else:
            apply_light_palette(app)

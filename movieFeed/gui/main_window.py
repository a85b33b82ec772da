# gui/main_window.py
from __future__ import annotations

from PySide6.QtCore    import QTimer, Slot # type: ignore
from PySide6.QtGui     import QAction # type: ignore
from PySide6.QtWidgets import ( # type: ignore
    QApplication, QMainWindow, QTabWidget, QLineEdit
)

from movieFeed.settings import SEARCH_MIN_CHARS, SEARCH_DEBOUNCE_MS
from movieFeed.utils    import format_rating
from movieFeed.catalog  import CatalogController
from movieFeed.gui.theme import ThemeManager, ThemeSetting
from movieFeed.gui.movie_list_page import MovieListPage, show_all, only_favorites


class MainWindow(QMainWindow):
    def __init__(self, controller: CatalogController, theme: ThemeManager, app: QApplication):
        super().__init__()
        self.controller = controller
        self.theme = theme
        self.app = app
        self.setWindowTitle("Average rating: —")
        self.resize(520, 800)

        # ── pages ────────────────────────────────────────────────────────
        self.movies_page = MovieListPage(controller, show_all, prefetch=True)
        self.favorites_page = MovieListPage(
            controller, only_favorites, prefetch=False,
            empty_text="No favorites among the loaded movies.",
        )
        self.tabs = QTabWidget()
        self.tabs.addTab(self.movies_page, "Movies")
        self.tabs.addTab(self.favorites_page, "Favorites")
        self.setCentralWidget(self.tabs)

        # ── toolbar ─────────────────────────────────────────────────────
        tb = self.addToolBar("Main")
        act = QAction("Refresh", self)
        act.setShortcut("Ctrl+R")
        act.triggered.connect(self._on_refresh)
        tb.addAction(act)

        self.search_action = QAction("Search", self)
        self.search_action.setShortcut("Ctrl+F")
        self.search_action.setCheckable(True)
        self.search_action.toggled.connect(self._on_toggle_search)
        tb.addAction(self.search_action)

        self.theme_action = QAction(self._theme_label(), self)
        self.theme_action.triggered.connect(self._on_toggle_theme)
        tb.addAction(self.theme_action)

        # ── search box (hidden until toggled) ───────────────────────────
        self.search_box = QLineEdit()
        self.search_box.setPlaceholderText(
            f"Search movies (minimum {SEARCH_MIN_CHARS} symbols)"
        )
        self.search_box.setClearButtonEnabled(True)
        self._search_box_action = tb.addWidget(self.search_box)
        self._search_box_action.setVisible(False)

        self._debounce = QTimer(self)
        self._debounce.setSingleShot(True)
        self._debounce.setInterval(SEARCH_DEBOUNCE_MS)
        self._debounce.timeout.connect(self._run_search)
        self.search_box.textChanged.connect(self._on_search_text)
        self.search_box.returnPressed.connect(self._run_search)

        # ── MVVM: bind updates ──────────────────────────────────────────
        controller.on_update = self._on_catalog_updated

    # ───────────────────────────────────────────────────────────────────
    def start(self) -> None:
        """Initial load; call once the event loop is running."""
        self.statusBar().showMessage("Loading…")
        self.controller.fetch_initial()

    def _theme_label(self) -> str:
        return "Light" if self.theme.current() == ThemeSetting.DARK else "Dark"

    @Slot()
    def _on_catalog_updated(self) -> None:
        self.movies_page.refresh()
        self.favorites_page.refresh()
        self.setWindowTitle(format_rating(self.controller.average_rating()))
        if self.controller.is_batch_loading:
            self.statusBar().showMessage("Loading…")
        elif self.controller.is_stalled:
            self.statusBar().showMessage("Nothing new loaded; press Ctrl+R to retry")
        else:
            self.statusBar().showMessage(f"{self.controller.count} movies", 3000)

    @Slot()
    def _on_refresh(self) -> None:
        self.statusBar().showMessage("Refreshing…")
        if self.search_box.text().strip():
            self.search_box.blockSignals(True)
            self.search_box.clear()
            self.search_box.blockSignals(False)
        self.controller.refresh()

    @Slot()
    def _on_toggle_theme(self) -> None:
        self.theme.toggle(self.app)
        self.theme_action.setText(self._theme_label())

    @Slot(bool)
    def _on_toggle_search(self, visible: bool) -> None:
        self._search_box_action.setVisible(visible)
        if visible:
            self.search_box.setFocus()
        elif self.search_box.text():
            # hiding the bar cancels the search
            self.search_box.clear()

    @Slot(str)
    def _on_search_text(self, text: str) -> None:
        self._debounce.stop()
        text = text.strip()
        if len(text) >= SEARCH_MIN_CHARS:
            self._debounce.start()
        elif not text and self.controller.is_searching:
            self.controller.clear_search()

    @Slot()
    def _run_search(self) -> None:
        self._debounce.stop()
        text = self.search_box.text().strip()
        if len(text) >= SEARCH_MIN_CHARS:
            self.tabs.setCurrentWidget(self.movies_page)
            self.controller.search(text)

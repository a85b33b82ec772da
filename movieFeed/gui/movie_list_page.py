# gui/movie_list_page.py
from __future__ import annotations
from typing import Callable

from PySide6.QtCore    import Qt, QTimer, Slot # type: ignore
from PySide6.QtWidgets import ( # type: ignore
    QWidget, QVBoxLayout, QListWidget, QListWidgetItem, QMenu, QLabel
)

from movieFeed.catalog import CatalogController
from movieFeed.metadata.core.models import Movie
from movieFeed.gui.movie_card import MovieCard
from movieFeed.gui.detail_dialog import MovieDetailDialog

MoviePredicate = Callable[[Movie], bool]


def show_all(movie: Movie) -> bool:
    return True


def only_favorites(movie: Movie) -> bool:
    return movie.is_favorite


class MovieListPage(QWidget):
    """
    One scrolling list of `MovieCard`s over the shared controller.

    *predicate* filters the controller's items on every refresh; the
    "Movies" and "Favorites" tabs are the same page with different
    predicates. Only a *prefetch* page asks for more pages while scrolling.
    """

    def __init__(
        self,
        controller: CatalogController,
        predicate: MoviePredicate = show_all,
        prefetch: bool = True,
        empty_text: str = "Nothing here yet.",
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.controller = controller
        self.predicate  = predicate
        self.prefetch   = prefetch
        self._movies: list[Movie] = []

        root = QVBoxLayout(self)
        root.setContentsMargins(4, 4, 4, 4)

        self.empty_label = QLabel(empty_text, alignment=Qt.AlignCenter)
        root.addWidget(self.empty_label)

        self.list = QListWidget()
        self.list.setSpacing(4)
        self.list.setVerticalScrollMode(QListWidget.ScrollPerPixel)
        self.list.setContextMenuPolicy(Qt.CustomContextMenu)
        root.addWidget(self.list, 1)

        self.list.verticalScrollBar().valueChanged.connect(self._on_scrolled)
        self.list.customContextMenuRequested.connect(self._on_context_menu)
        self.list.itemDoubleClicked.connect(self._on_item_activated)

    # ───────────────────────────────────────────────────────────────────
    def current_movies(self) -> list[Movie]:
        return [m for m in self.controller.items if self.predicate(m)]

    def refresh(self) -> None:
        """Rebuild the list from the controller, keeping the scroll offset."""
        bar = self.list.verticalScrollBar()
        offset = bar.value()

        self._movies = self.current_movies()
        self.list.clear()
        for movie in self._movies:
            card = MovieCard(movie)
            item = QListWidgetItem()
            item.setData(Qt.UserRole, movie.id)
            item.setSizeHint(card.sizeHint())
            self.list.addItem(item)
            self.list.setItemWidget(item, card)

        self.empty_label.setVisible(not self._movies)
        bar.setValue(min(offset, bar.maximum()))
        # a short list never scrolls, so check once it is laid out
        QTimer.singleShot(0, self._check_prefetch)

    # ───────────────────────────────────────────────────────────────────
    def _last_visible_row(self) -> int:
        vp = self.list.viewport().rect()
        idx = self.list.indexAt(vp.bottomLeft())
        return idx.row() if idx.isValid() else self.list.count() - 1

    @Slot()
    def _check_prefetch(self) -> None:
        if not self.prefetch or self.controller.is_searching:
            return
        self.controller.load_more_if_needed(max(0, self._last_visible_row()))

    @Slot(int)
    def _on_scrolled(self, _value: int) -> None:
        self._check_prefetch()

    def _movie_at(self, row: int) -> Movie | None:
        return self._movies[row] if 0 <= row < len(self._movies) else None

    @Slot()
    def _on_context_menu(self, pos) -> None:
        movie = self._movie_at(self.list.indexAt(pos).row())
        if movie is None:
            return
        menu = QMenu(self)
        label = "Remove from Favorites" if movie.is_favorite else "Add to Favorites"
        act = menu.addAction(label)
        act.triggered.connect(lambda: self.controller.toggle_favorite(movie.id))
        menu.exec(self.list.viewport().mapToGlobal(pos))

    @Slot(QListWidgetItem)
    def _on_item_activated(self, item: QListWidgetItem) -> None:
        movie = self._movie_at(self.list.row(item))
        if movie is not None:
            MovieDetailDialog(movie, self).exec()

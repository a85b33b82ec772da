from __future__ import annotations
from PySide6.QtCore    import Qt # type: ignore
from PySide6.QtWidgets import ( # type: ignore
    QDialog, QDialogButtonBox, QLabel, QVBoxLayout, QWidget
)

from movieFeed.metadata.core.models import Movie


class MovieDetailDialog(QDialog):
    """Read-only details: title, release date, rating and overview."""

    def __init__(self, movie: Movie, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle(movie.title)
        self.setMinimumWidth(420)

        box = QVBoxLayout(self)

        title = QLabel(movie.title)
        title.setWordWrap(True)
        title.setStyleSheet("font-size:18px; font-weight:bold;")
        box.addWidget(title)

        meta = QLabel(f"Release: {movie.release_date or '—'}    ⭐ {movie.vote_average:.1f}")
        box.addWidget(meta)

        overview = QLabel(movie.overview or "No overview available.")
        overview.setWordWrap(True)
        overview.setAlignment(Qt.AlignTop | Qt.AlignLeft)
        box.addWidget(overview, 1)

        if url := movie.poster_url():
            poster = QLabel(f'<a href="{url}">Poster</a>')
            poster.setOpenExternalLinks(True)
            box.addWidget(poster)

        bb = QDialogButtonBox(QDialogButtonBox.Close)
        bb.rejected.connect(self.reject)
        box.addWidget(bb)

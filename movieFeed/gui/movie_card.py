from __future__ import annotations
from PySide6.QtCore    import Qt, QPropertyAnimation # type: ignore
from PySide6.QtWidgets import ( # type: ignore
    QFrame, QLabel, QVBoxLayout, QHBoxLayout, QGraphicsDropShadowEffect
)

from movieFeed.settings import ACCENT_COLOR, FAVORITE_COLOR
from movieFeed.metadata.core.models import Movie


def rating_colors(vote: float) -> tuple[str, str]:
    """(background, foreground) for a 0–10 TMDb vote."""
    if vote >= 8.0:
        return "#2ecc71", "#000000"
    if vote >= 6.5:
        return "#f1c40f", "#000000"
    return ACCENT_COLOR, "#ffffff"


class MovieCard(QFrame):
    """Mini-card with title, rating pill, release year and favorite star."""

    def __init__(self, movie: Movie, parent=None):
        super().__init__(parent)
        self.movie = movie
        self.setObjectName("MovieCardItem")
        self.setFrameShape(QFrame.StyledPanel)

        root = QVBoxLayout(self)
        root.setContentsMargins(8, 8, 8, 8)

        # ── title ────────────────────────────────────────────────────────
        title = QLabel(movie.title)
        title.setWordWrap(True)
        title.setStyleSheet("font-weight:bold;")
        root.addWidget(title)

        # ── footer row: rating | year | star ────────────────────────────
        footer = QHBoxLayout()

        bg, fg = rating_colors(movie.vote_average)
        pill = QLabel(f"{movie.vote_average:.1f}", alignment=Qt.AlignCenter)
        pill.setStyleSheet(
            f"background:{bg}; color:{fg}; border-radius:6px; padding:2px 8px;"
        )

        year_lbl = QLabel(movie.year or "—", alignment=Qt.AlignCenter)

        star = QLabel("★" if movie.is_favorite else "☆", alignment=Qt.AlignRight)
        if movie.is_favorite:
            star.setStyleSheet(f"color:{FAVORITE_COLOR};")

        footer.addWidget(pill,     0, Qt.AlignLeft)
        footer.addWidget(year_lbl, 0, Qt.AlignHCenter)
        footer.addWidget(star,     0, Qt.AlignRight)
        root.addLayout(footer)
        root.addStretch()

        # ── hover shadow effect ──────────────────────────────────────────
        self._shadow = QGraphicsDropShadowEffect(self)
        self._shadow.setBlurRadius(4)
        self._shadow.setOffset(0, 0)
        self.setGraphicsEffect(self._shadow)

    # ------------------------------------------------------------------
    # hover animation
    def enterEvent(self, event):
        super().enterEvent(event)
        self._animate_shadow(16)

    def leaveEvent(self, event):
        super().leaveEvent(event)
        self._animate_shadow(4)

    def _animate_shadow(self, radius: int) -> None:
        anim = QPropertyAnimation(self._shadow, b"blurRadius", self)
        anim.setDuration(200)
        anim.setEndValue(radius)
        anim.start(QPropertyAnimation.DeleteWhenStopped)

import asyncio
import sys

from PySide6 import QtAsyncio # type: ignore
from PySide6.QtWidgets import QApplication, QMessageBox # type: ignore

from movieFeed.settings import DATABASE_PATH, BATCH_SIZE, LOOKAHEAD_THRESHOLD
from movieFeed.utils    import log_debug
from movieFeed.catalog  import CatalogController
from movieFeed.metadata import LocalDB, PrefsRepo, FavoritesStore, TMDBClient
from movieFeed.gui      import MainWindow, ThemeManager


# ────────────────────────────────────────────────────────────────────────────
# Application entry – the composition root; nothing below is a singleton
# ────────────────────────────────────────────────────────────────────────────
def main() -> None:
    app = QApplication(sys.argv)

    db    = LocalDB(DATABASE_PATH)
    theme = ThemeManager(PrefsRepo(db))
    theme.apply(app)

    try:
        client = TMDBClient()
    except RuntimeError as e:
        QMessageBox.critical(None, "TMDb", f"{e}.\nSet TMDB_BEARER_TOKEN or TMDB_API_KEY in secret.env.")
        sys.exit(1)

    windows: list[MainWindow] = []   # keep the window alive past _start()

    async def _start() -> None:
        controller = CatalogController(
            client,
            FavoritesStore(db),
            batch_size=BATCH_SIZE,
            lookahead=LOOKAHEAD_THRESHOLD,
            loop=asyncio.get_running_loop(),
        )
        window = MainWindow(controller, theme, app)
        windows.append(window)
        window.show()
        window.start()

    log_debug("movieFeed starting")
    # -------- run the Qt event-loop as the asyncio loop ---------------
    QtAsyncio.run(_start(), keep_running=True, quit_qapp=True)
    db.close()


# Python entry-point guard
if __name__ == "__main__":
    main()

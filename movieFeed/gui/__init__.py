"""
gui
~~~
All Qt widgets and pages.

•  No HTTP or SQL here – pages talk to the `CatalogController` only.
•  Re-export the high-level symbols so the app can simply:

    from movieFeed.gui import MainWindow, ThemeManager
"""

from movieFeed.gui.main_window     import MainWindow
from movieFeed.gui.movie_list_page import MovieListPage, show_all, only_favorites
from movieFeed.gui.movie_card      import MovieCard
from movieFeed.gui.detail_dialog   import MovieDetailDialog
from movieFeed.gui.theme           import ThemeManager, ThemeSetting

__all__ = [
    "MainWindow", "MovieListPage", "show_all", "only_favorites",
    "MovieCard", "MovieDetailDialog",
    "ThemeManager", "ThemeSetting",
]

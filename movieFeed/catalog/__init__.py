"""
catalog
~~~~~~~
Paging view-model shared by the movie list pages.
"""

from movieFeed.catalog.pagination import CatalogController, CatalogSource

__all__ = ["CatalogController", "CatalogSource"]

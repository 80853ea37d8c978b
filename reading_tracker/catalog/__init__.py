"""Remote book catalog lookup."""

from reading_tracker.catalog.client import CatalogClient, CatalogResult
from reading_tracker.catalog.mapper import extract_year, pick_isbn, volume_to_book

__all__ = [
    "CatalogClient",
    "CatalogResult",
    "extract_year",
    "pick_isbn",
    "volume_to_book",
]

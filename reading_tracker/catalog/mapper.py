"""Mapping from catalog volume records to library books."""

from typing import Any

from reading_tracker.errors import CatalogNotFoundError
from reading_tracker.models import Book

UNKNOWN_AUTHOR = "Unknown"

# Preferred identifier types, best first
ISBN_PRIORITY: tuple[str, ...] = ("ISBN_13", "ISBN_10")


def pick_isbn(identifiers: list[dict[str, Any]] | None) -> str:
    """Choose ISBN-13 over ISBN-10; empty string when neither is listed."""
    by_type = {
        entry.get("type"): entry.get("identifier", "")
        for entry in identifiers or []
        if isinstance(entry, dict)
    }
    for id_type in ISBN_PRIORITY:
        if by_type.get(id_type):
            return str(by_type[id_type])
    return ""


def extract_year(published_date: str) -> str:
    """Best-effort year from a catalog date such as ``2004``, ``2004-05`` or ``2004-05-12``.

    Only a leading run of four digits is trusted; anything else yields an
    empty string rather than a guess.
    """
    candidate = published_date.strip()[:4]
    return candidate if len(candidate) == 4 and candidate.isdigit() else ""


def _join(values: list[str] | None) -> str:
    return ", ".join(str(v) for v in values or [] if v)


def volume_to_book(record: dict[str, Any]) -> Book:
    """Build a book from one volume record of the catalog API.

    Missing optional fields fall back to empty values; the result is ready to
    pass to ``Library.add_book``.

    Args:
        record: A volume resource, i.e. ``{"id": ..., "volumeInfo": {...}}``.

    Returns:
        An unsaved Book.

    Raises:
        CatalogNotFoundError: If the record has no ``volumeInfo``.
    """
    info = record.get("volumeInfo") if isinstance(record, dict) else None
    if not info:
        raise CatalogNotFoundError("Book details not found")

    published_date = str(info.get("publishedDate") or "")
    image_links = info.get("imageLinks") or {}

    return Book(
        title=str(info.get("title") or ""),
        author=_join(info.get("authors")) or UNKNOWN_AUTHOR,
        total_pages=max(0, int(info.get("pageCount") or 0)),
        cover_image=str(image_links.get("thumbnail") or ""),
        description=str(info.get("description") or ""),
        isbn=pick_isbn(info.get("industryIdentifiers")),
        publisher=str(info.get("publisher") or ""),
        published_date=published_date,
        published_year=extract_year(published_date),
        catalog_id=str(record.get("id") or ""),
        language=str(info.get("language") or ""),
        categories=_join(info.get("categories")),
    )

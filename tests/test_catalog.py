"""Tests for catalog record mapping and the async catalog client."""

from collections.abc import Callable
from typing import Any

import httpx
import pytest

from reading_tracker.catalog import (
    CatalogClient,
    extract_year,
    pick_isbn,
    volume_to_book,
)
from reading_tracker.catalog.client import (
    FETCH_FAILED_MESSAGE,
    NOT_FOUND_MESSAGE,
    SEARCH_FAILED_MESSAGE,
)
from reading_tracker.config import CatalogConfig
from reading_tracker.errors import CatalogNotFoundError

VOLUME: dict[str, Any] = {
    "id": "zyTCAlFPjgYC",
    "volumeInfo": {
        "title": "The Google Story",
        "authors": ["David A. Vise", "Mark Malseed"],
        "publisher": "Random House Digital, Inc.",
        "publishedDate": "2005-11-15",
        "description": "Here is the story behind one of the most remarkable companies.",
        "industryIdentifiers": [
            {"type": "ISBN_10", "identifier": "055380457X"},
            {"type": "ISBN_13", "identifier": "9780553804577"},
        ],
        "pageCount": 207,
        "categories": ["Browsers (Computer programs)", "Business"],
        "imageLinks": {"thumbnail": "http://books.google.com/books/content?id=zyTCAlFPjgYC"},
        "language": "en",
    },
}


# ── Mapping ──────────────────────────────────────────────────────────────────


class TestVolumeToBook:
    def test_full_record(self) -> None:
        book = volume_to_book(VOLUME)
        assert book.title == "The Google Story"
        assert book.author == "David A. Vise, Mark Malseed"
        assert book.total_pages == 207
        assert book.cover_image.startswith("http://books.google.com/")
        assert book.isbn == "9780553804577"
        assert book.publisher == "Random House Digital, Inc."
        assert book.published_date == "2005-11-15"
        assert book.published_year == "2005"
        assert book.catalog_id == "zyTCAlFPjgYC"
        assert book.language == "en"
        assert book.categories == "Browsers (Computer programs), Business"
        assert book.description.startswith("Here is the story")

    def test_minimal_record_uses_fallbacks(self) -> None:
        book = volume_to_book({"id": "abc", "volumeInfo": {"title": "Bare"}})
        assert book.author == "Unknown"
        assert book.total_pages == 0
        assert book.cover_image == ""
        assert book.isbn == ""
        assert book.publisher == ""
        assert book.published_year == ""
        assert book.categories == ""

    @pytest.mark.parametrize("record", [{}, {"id": "x"}, {"id": "x", "volumeInfo": None}])
    def test_missing_volume_info(self, record: dict[str, Any]) -> None:
        with pytest.raises(CatalogNotFoundError):
            volume_to_book(record)


class TestPickIsbn:
    def test_prefers_isbn_13(self) -> None:
        identifiers = [
            {"type": "ISBN_10", "identifier": "10"},
            {"type": "ISBN_13", "identifier": "13"},
        ]
        assert pick_isbn(identifiers) == "13"

    def test_falls_back_to_isbn_10(self) -> None:
        identifiers = [
            {"type": "OTHER", "identifier": "PKEY:123"},
            {"type": "ISBN_10", "identifier": "10"},
        ]
        assert pick_isbn(identifiers) == "10"

    def test_no_isbn(self) -> None:
        assert pick_isbn([{"type": "OTHER", "identifier": "x"}]) == ""
        assert pick_isbn(None) == ""


class TestExtractYear:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("2005-11-15", "2005"),
            ("1999", "1999"),
            ("2010-03", "2010"),
            ("", ""),
            ("c. 1850", ""),
            ("15/11/2005", ""),
        ],
    )
    def test_best_effort(self, value: str, expected: str) -> None:
        assert extract_year(value) == expected


# ── Client ───────────────────────────────────────────────────────────────────


Handler = Callable[[httpx.Request], httpx.Response]


def _client(handler: Handler, api_key: str | None = "secret") -> CatalogClient:
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    config = CatalogConfig(base_url="https://catalog.test/books/v1", api_key=api_key)
    return CatalogClient(config, http_client=http)


class TestSearch:
    @pytest.mark.asyncio
    async def test_maps_items(self) -> None:
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(
                200, json={"totalItems": 2, "items": [VOLUME, {"id": "broken"}]}
            )

        result = await _client(handler).search("google story")

        assert result.ok
        assert [b.title for b in result.books] == ["The Google Story"]
        assert requests[0].url.path == "/books/v1/volumes"
        assert requests[0].url.params["q"] == "google story"
        assert requests[0].url.params["key"] == "secret"
        assert requests[0].url.params["maxResults"] == "20"

    @pytest.mark.asyncio
    async def test_no_items(self) -> None:
        result = await _client(lambda r: httpx.Response(200, json={"totalItems": 0})).search(
            "nothing"
        )
        assert result.ok
        assert result.books == []

    @pytest.mark.asyncio
    async def test_blank_query_skips_request(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError("no request expected")

        result = await _client(handler).search("   ")
        assert result.ok
        assert result.books == []

    @pytest.mark.asyncio
    async def test_omits_key_when_unset(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={})

        await _client(handler, api_key=None).search("x")
        assert "key" not in seen[0].url.params

    @pytest.mark.asyncio
    async def test_api_error_envelope(self) -> None:
        body = {"error": {"code": 400, "message": "API key not valid"}}
        result = await _client(lambda r: httpx.Response(200, json=body)).search("x")
        assert not result.ok
        assert result.error == SEARCH_FAILED_MESSAGE

    @pytest.mark.asyncio
    async def test_http_error(self) -> None:
        result = await _client(lambda r: httpx.Response(503)).search("x")
        assert result.error == SEARCH_FAILED_MESSAGE

    @pytest.mark.asyncio
    async def test_network_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("unreachable", request=request)

        result = await _client(handler).search("x")
        assert result.error == SEARCH_FAILED_MESSAGE

    @pytest.mark.asyncio
    async def test_malformed_body(self) -> None:
        result = await _client(lambda r: httpx.Response(200, text="<html>")).search("x")
        assert result.error == SEARCH_FAILED_MESSAGE


class TestFetchVolume:
    @pytest.mark.asyncio
    async def test_returns_single_book(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/books/v1/volumes/zyTCAlFPjgYC"
            return httpx.Response(200, json=VOLUME)

        result = await _client(handler).fetch_volume("zyTCAlFPjgYC")
        assert result.ok
        assert len(result.books) == 1
        assert result.books[0].catalog_id == "zyTCAlFPjgYC"

    @pytest.mark.asyncio
    async def test_missing_volume_info(self) -> None:
        result = await _client(lambda r: httpx.Response(200, json={"id": "x"})).fetch_volume(
            "x"
        )
        assert result.error == NOT_FOUND_MESSAGE

    @pytest.mark.asyncio
    async def test_404(self) -> None:
        result = await _client(lambda r: httpx.Response(404)).fetch_volume("gone")
        assert result.error == NOT_FOUND_MESSAGE

    @pytest.mark.asyncio
    async def test_server_error(self) -> None:
        result = await _client(lambda r: httpx.Response(500)).fetch_volume("x")
        assert result.error == FETCH_FAILED_MESSAGE

"""Async client for the remote book catalog (Google Books volumes API)."""

import logging
from typing import Any

import httpx
from pydantic import BaseModel, Field

from reading_tracker.catalog.mapper import volume_to_book
from reading_tracker.config import CatalogConfig
from reading_tracker.errors import CatalogError, CatalogNotFoundError, CatalogRequestError
from reading_tracker.models import Book

logger = logging.getLogger(__name__)

SEARCH_FAILED_MESSAGE = "Could not search for books. Please try again."
NOT_FOUND_MESSAGE = "Book details not found."
FETCH_FAILED_MESSAGE = "Could not load the book details. Please try again."


class CatalogResult(BaseModel):
    """Outcome of a catalog call: books on success, a user-facing message on failure."""

    books: list[Book] = Field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class CatalogClient:
    """Looks books up in the remote catalog.

    Requests are made once: there is no retry, and with the default
    configuration no timeout. Failures come back as ``CatalogResult.error``
    instead of being raised.

    Args:
        config: Catalog endpoint, API key and limits.
        http_client: Client to send requests with. When omitted, a client is
            opened for each request.
    """

    def __init__(
        self, config: CatalogConfig, http_client: httpx.AsyncClient | None = None
    ) -> None:
        self._config = config
        self._http = http_client

    async def search(self, query: str) -> CatalogResult:
        """Search volumes by free text (title, author, ISBN, ...).

        Args:
            query: Search terms. Blank queries return an empty result
                without contacting the catalog.

        Returns:
            Books for every result carrying volume metadata.
        """
        if not query.strip():
            return CatalogResult()

        try:
            data = await self._get_json(
                "volumes", {"q": query, "maxResults": self._config.max_results}
            )
        except CatalogError:
            logger.exception("Catalog search failed for %r", query)
            return CatalogResult(error=SEARCH_FAILED_MESSAGE)

        books: list[Book] = []
        for item in data.get("items") or []:
            try:
                books.append(volume_to_book(item))
            except CatalogNotFoundError:
                logger.debug("Skipping search result without volume info: %r", item)
        logger.info("Catalog search %r returned %d books", query, len(books))
        return CatalogResult(books=books)

    async def fetch_volume(self, volume_id: str) -> CatalogResult:
        """Fetch a single volume by its catalog identifier.

        Returns:
            A result holding exactly one book, or an error message.
        """
        try:
            data = await self._get_json(f"volumes/{volume_id}", {})
            book = volume_to_book(data)
        except CatalogNotFoundError:
            logger.warning("Catalog volume %s not found", volume_id)
            return CatalogResult(error=NOT_FOUND_MESSAGE)
        except CatalogRequestError:
            logger.exception("Catalog lookup failed for volume %s", volume_id)
            return CatalogResult(error=FETCH_FAILED_MESSAGE)
        return CatalogResult(books=[book])

    async def _get_json(self, path: str, params: dict[str, Any]) -> dict[str, Any]:
        """GET ``path`` under the catalog base URL and decode the JSON envelope.

        Raises:
            CatalogNotFoundError: On HTTP 404.
            CatalogRequestError: On transport errors, other non-2xx statuses,
                undecodable bodies, or an ``error`` member in the envelope.
        """
        url = f"{self._config.base_url.rstrip('/')}/{path}"
        query = dict(params)
        if self._config.api_key:
            query["key"] = self._config.api_key

        try:
            if self._http is not None:
                response = await self._http.get(url, params=query)
            else:
                async with httpx.AsyncClient(timeout=self._config.timeout) as client:
                    response = await client.get(url, params=query)
            if response.status_code == 404:
                raise CatalogNotFoundError(f"No catalog entry at {path}")
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPError as exc:
            raise CatalogRequestError(f"Catalog request failed: {exc}") from exc
        except ValueError as exc:
            raise CatalogRequestError("Catalog returned a malformed response") from exc

        if not isinstance(data, dict):
            raise CatalogRequestError("Catalog returned a malformed response")
        if data.get("error"):
            error = data["error"]
            message = error.get("message") if isinstance(error, dict) else str(error)
            raise CatalogRequestError(f"Catalog error: {message}")
        return data

"""
Module: source.artic

Purpose:
    PaginatedSource backed by the Art Institute of Chicago collection API
    (or any API with the same {"data": [...], "pagination": {...}} shape).

Key Classes:
    - ArticSource: httpx-based page fetcher

Dependencies:
    - httpx: HTTP client
    - catalog_picker.core.models: Item, PageResult, PaginationMeta

Used By:
    - catalog_picker.gui.app: Default source for the app
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from catalog_picker.config import DEFAULT_BASE_URL
from catalog_picker.core.models import ITEM_FIELDS, Item, PageResult, PaginationMeta

from .base import PaginatedSource, SourceError

logger = logging.getLogger(__name__)

USER_AGENT = "catalog-picker/1.0"


class ArticSource(PaginatedSource):
    """
    Fetch catalog pages from ``{base_url}/artworks``.

    httpx.Client is thread-safe, so the same source can serve page
    navigation and a bulk selection running on separate worker threads.

    Example:
        >>> with ArticSource() as source:
        ...     page = source.fetch_page(1, 12)
        >>> len(page.items)
        12
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        timeout_s: Optional[float] = 20.0,
        connect_retries: int = 1,
        client: Optional[httpx.Client] = None,
    ) -> None:
        """
        Args:
            base_url: API root, e.g. "https://api.artic.edu/api/v1"
            timeout_s: Per-request timeout; None disables it
            connect_retries: Connect retries done by the httpx transport
            client: Pre-built client (tests pass one with a MockTransport)
        """
        self.base_url = base_url.rstrip("/")
        self._owns_client = client is None
        if client is None:
            client = httpx.Client(
                timeout=timeout_s,
                follow_redirects=True,
                headers={"User-Agent": USER_AGENT},
                transport=httpx.HTTPTransport(retries=connect_retries),
            )
        self._client = client

    def __enter__(self) -> "ArticSource":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def fetch_page(self, page: int, page_size: int) -> PageResult:
        if page < 1:
            raise ValueError(f"page must be >= 1: {page}")
        if page_size <= 0:
            raise ValueError(f"page_size must be positive: {page_size}")

        url = f"{self.base_url}/artworks"
        params = {"page": page, "limit": page_size, "fields": ",".join(ITEM_FIELDS)}
        logger.debug(f"GET {url} page={page} limit={page_size}")

        try:
            response = self._client.get(url, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise SourceError(f"HTTP {e.response.status_code} fetching page {page}") from e
        except httpx.HTTPError as e:
            raise SourceError(f"Request for page {page} failed: {type(e).__name__}: {e}") from e

        try:
            payload = response.json()
        except ValueError as e:
            raise SourceError(f"Page {page} response is not valid JSON") from e

        return parse_page(payload, page_size)


def parse_page(payload: Any, page_size: int) -> PageResult:
    """
    Convert an API response body into a PageResult.

    Args:
        payload: Decoded JSON body
        page_size: Page size used in the request (fallback for pagination.limit)

    Returns:
        PageResult; pagination is None if the body has no usable pagination

    Raises:
        SourceError: If "data" is missing or a record is malformed
    """
    if not isinstance(payload, dict):
        raise SourceError(f"Response body must be an object, got {type(payload).__name__}")

    records = payload.get("data")
    if not isinstance(records, list):
        raise SourceError("Response body has no 'data' list")

    try:
        items = tuple(Item.from_api(record) for record in records)
    except ValueError as e:
        raise SourceError(f"Malformed item record: {e}") from e

    return PageResult(items=items, pagination=_parse_pagination(payload.get("pagination"), page_size))


def _parse_pagination(raw: Any, page_size: int) -> Optional[PaginationMeta]:
    if not isinstance(raw, dict):
        return None
    try:
        total = int(raw.get("total") or 0)
        total_pages = int(raw.get("total_pages") or 0)
        limit = int(raw.get("limit") or page_size)
        return PaginationMeta(total=total, total_pages=total_pages, page_size=limit)
    except (TypeError, ValueError):
        logger.warning(f"Ignoring malformed pagination block: {raw!r}")
        return None

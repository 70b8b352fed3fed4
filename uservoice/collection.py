"""Lazy, memoizing view over paginated UserVoice list endpoints."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Any, Iterator, overload

from ._http import build_paged_path
from .config import PER_PAGE
from .exceptions import NotFound

if TYPE_CHECKING:
    from .client import UserVoiceClient

logger = logging.getLogger(__name__)

NOT_A_COLLECTION = "The resource you requested is not a collection."


class Collection:
    """Index-addressable sequence over a remote list resource.

    Pages are fetched on first access and cached for the lifetime of the
    collection; ``total_records`` from the first fetched page is never
    refreshed.

    Example:
        >>> tickets = client.get_collection("/api/v1/tickets?sort=newest", limit=250)
        >>> len(tickets)
        250
        >>> tickets[150]["id"]   # fetches page 2 only
    """

    def __init__(self, client: UserVoiceClient, path: str, limit: int | None = None) -> None:
        if limit is not None and limit < 0:
            raise ValueError(f"limit must be non-negative, got {limit}")

        self._client = client
        self.path = path
        self.limit = limit
        self.per_page = PER_PAGE if limit is None else max(1, min(limit, PER_PAGE))

        self._response_data: dict[str, Any] | None = None
        self._pages: dict[int, list[Any]] = {}
        self._lock = threading.Lock()

    @property
    def total_records(self) -> int | None:
        """Server-reported record count, or None before the first fetch."""
        if self._response_data is None:
            return None
        return self._response_data["total_records"]

    def size(self) -> int:
        """Number of items, capped by ``limit``. Fetches page 1 if nothing is loaded."""
        if self._response_data is None:
            self.load_page(1)
        total = self.total_records
        if self.limit is None:
            return total
        return min(total, self.limit)

    def is_empty(self) -> bool:
        return self.size() == 0

    def get(self, index: int) -> Any:
        """Return the item at ``index``, loading its page if needed.

        Raises:
            IndexError: Unless ``0 <= index < size()``.
        """
        if not 0 <= index < self.size():
            raise IndexError(f"collection index out of range: {index}")
        page = self.load_page(index // self.per_page + 1)
        return page[index % self.per_page]

    def load_page(self, page: int) -> list[Any]:
        """Fetch page number ``page`` (1-based) once and cache it.

        Thread-safe: concurrent callers for an uncached page wait for a
        single request instead of issuing their own.

        Raises:
            NotFound: If the response is not a collection envelope.
        """
        with self._lock:
            cached = self._pages.get(page)
            if cached is not None:
                return cached

            logger.debug("Loading page %d of %s", page, self.path)
            result = self._client.get(build_paged_path(self.path, self.per_page, page))
            response_data, items = _unwrap_page(result)

            if self._response_data is None:
                self._response_data = response_data
            self._pages[page] = items
            return items

    def to_list(self) -> list[Any]:
        """Eagerly load every item."""
        return [self.get(i) for i in range(self.size())]

    def __len__(self) -> int:
        return self.size()

    @overload
    def __getitem__(self, index: int) -> Any: ...

    @overload
    def __getitem__(self, index: slice) -> list[Any]: ...

    def __getitem__(self, index: int | slice) -> Any:
        if isinstance(index, slice):
            return [self.get(i) for i in range(*index.indices(self.size()))]
        if index < 0:
            index += self.size()
        return self.get(index)

    def __iter__(self) -> Iterator[Any]:
        for i in range(self.size()):
            yield self.get(i)

    def __repr__(self) -> str:
        return f"Collection(path={self.path!r}, limit={self.limit!r}, loaded_pages={sorted(self._pages)})"


def _unwrap_page(result: Any) -> tuple[dict[str, Any], list[Any]]:
    """Split a list envelope into its ``response_data`` and item array.

    The envelope has exactly two keys: ``response_data`` and one key, named
    after the resource, holding the items.
    """
    if not isinstance(result, dict) or len(result) != 2:
        raise NotFound(NOT_A_COLLECTION)

    response_data = result.get("response_data")
    if not isinstance(response_data, dict) or not isinstance(response_data.get("total_records"), int):
        raise NotFound(NOT_A_COLLECTION)

    (items,) = [value for key, value in result.items() if key != "response_data"]
    if not isinstance(items, list):
        raise NotFound(NOT_A_COLLECTION)

    return response_data, items

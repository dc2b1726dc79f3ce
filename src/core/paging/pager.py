"""
Token-based pager driving any paginated list operation.
"""

from collections.abc import Callable, Iterator
from enum import Enum
from typing import Generic, TypeVar

from aws_lambda_powertools import Logger

from core.models.errors import PagerConfigurationError, PagerExhaustedError
from core.models.pagination import ListOptions, PaginatedCollection

logger = Logger(utc=True)

OptionsT = TypeVar("OptionsT", bound=ListOptions)
ItemT = TypeVar("ItemT")


class PagerState(str, Enum):
    """Lifecycle of a pager."""

    READY = "ready"
    HAS_MORE = "has_more"
    EXHAUSTED = "exhausted"


class Pager(Generic[OptionsT, ItemT]):
    """
    Sequential page fetcher bound to a single list operation.

    The pager owns the `token` field of the options: every fetch sends a
    copy of the caller's options with `token` replaced by the token
    extracted from the previous page's `next` link.

    State transitions:
    - READY → HAS_MORE when a page carries a continuation token
    - READY / HAS_MORE → EXHAUSTED when a page carries none
    - Errors never change state, so a failed `get_next` can be retried

    Typical usage:
        pager = Pager(service.list_projects_page, ListProjectsOptions(limit=10))
        while pager.has_next():
            page = pager.get_next()

    Not safe for concurrent use from several threads.
    """

    def __init__(
        self,
        list_page: Callable[[OptionsT], PaginatedCollection],
        options: OptionsT,
    ) -> None:
        if options.token:
            raise PagerConfigurationError(
                message="The 'token' option must not be set when creating a pager",
                details={"token": options.token},
            )

        self._list_page = list_page
        self._options = options
        self._next_token: str | None = None
        self._state = PagerState.READY
        self._pages_fetched = 0

    @property
    def state(self) -> PagerState:
        return self._state

    @property
    def pages_fetched(self) -> int:
        return self._pages_fetched

    def has_next(self) -> bool:
        """Return True if there are potentially more results to retrieve."""
        return self._state is not PagerState.EXHAUSTED

    def get_next(self) -> list[ItemT]:
        """
        Fetch the next page of results.

        Returns:
            Items of the fetched page, in server order

        Raises:
            PagerExhaustedError: If the previous page was the last one
            LinkParseError: If the page's `next` link is malformed
            Exception: Any error raised by the bound list operation,
                propagated unchanged
        """
        if not self.has_next():
            raise PagerExhaustedError(details={"pages_fetched": self._pages_fetched})

        request_options = self._options.model_copy(update={"token": self._next_token})

        collection = self._list_page(request_options)
        next_token = collection.get_next_token()
        items: list[ItemT] = collection.page_items()

        self._pages_fetched += 1
        self._next_token = next_token

        if next_token is None:
            self._state = PagerState.EXHAUSTED
            logger.info(
                "Pagination exhausted",
                extra={"pages_fetched": self._pages_fetched, "page_size": len(items)},
            )
        else:
            self._state = PagerState.HAS_MORE
            logger.debug(
                "Page fetched",
                extra={"pages_fetched": self._pages_fetched, "page_size": len(items)},
            )

        return items

    def get_all(self) -> list[ItemT]:
        """
        Retrieve every remaining item by calling `get_next` until exhausted.

        If a fetch fails the error propagates with the items accumulated by
        this call attached as `partial_items`. Pages already consumed stay
        consumed, so a retry of `get_all` resumes from the failed page.

        Example:
            try:
                items = pager.get_all()
            except TransportError as exc:
                items = exc.partial_items + pager.get_all()
        """
        all_items: list[ItemT] = []
        try:
            while self.has_next():
                all_items.extend(self.get_next())
        except Exception as exc:
            exc.partial_items = all_items  # type: ignore[attr-defined]
            logger.warning(
                "Pagination interrupted",
                extra={
                    "pages_fetched": self._pages_fetched,
                    "partial_count": len(all_items),
                    "error_type": type(exc).__name__,
                },
            )
            raise
        return all_items

    def __iter__(self) -> Iterator[ItemT]:
        while self.has_next():
            yield from self.get_next()

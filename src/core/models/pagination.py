"""Pagination models shared by every list operation."""

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr

from core.models.options import OperationOptions
from core.paging.cursor import extract_token
from core.utils.constants import MAX_LIMIT, MIN_LIMIT


class PaginationLink(BaseModel):
    """A hyperlink returned by a list endpoint when more results may exist."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    href: StrictStr | None = Field(
        None,
        description="Absolute or relative URL of the page; carries the token query parameter",
    )


class PaginatedCollection(BaseModel):
    """Envelope of a single page returned by a list operation.

    Subclasses declare the name of the field holding the page's items
    in `ITEMS_FIELD`.
    """

    model_config = ConfigDict(extra="ignore")

    ITEMS_FIELD: ClassVar[str] = ""

    limit: StrictInt | None = Field(None, description="Page size used by the server")
    total_count: StrictInt | None = Field(None, description="Total number of items in the collection")

    first: PaginationLink | None = Field(None, description="Link to the first page")
    last: PaginationLink | None = Field(None, description="Link to the last page")
    previous: PaginationLink | None = Field(None, description="Link to the previous page")
    next: PaginationLink | None = Field(None, description="Link to the next page, absent on the last page")

    def page_items(self) -> list[Any]:
        """Return the items carried by this page, or an empty list."""
        items = getattr(self, self.ITEMS_FIELD, None) if self.ITEMS_FIELD else None
        return list(items or [])

    def get_next_token(self) -> str | None:
        """Retrieve the value to pass as `token` to fetch the next page."""
        return extract_token(self.next)


class ListOptions(OperationOptions):
    """Immutable options common to every paginated list operation.

    The pager replaces `token` between calls by producing a new value with
    `model_copy`, it never mutates an options instance in place.
    """

    token: StrictStr | None = Field(
        None,
        description="Continuation token of the page to fetch; None for the first page",
    )
    limit: StrictInt | None = Field(
        None,
        ge=MIN_LIMIT,
        le=MAX_LIMIT,
        description=f"Maximum number of items per page ({MIN_LIMIT}-{MAX_LIMIT})",
    )

    def query_params(self) -> dict[str, Any]:
        """Query string parameters for the pagination fields."""
        return {"token": self.token, "limit": self.limit}

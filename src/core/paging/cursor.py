"""
Continuation-token extraction from pagination links.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING
from urllib.parse import SplitResult, parse_qs, urlsplit

from core.models.errors import LinkParseError
from core.utils.constants import PAGE_TOKEN_QUERY_PARAM

if TYPE_CHECKING:
    from core.models.pagination import PaginationLink

# RFC 3986 authority: unreserved, sub-delims, ":", "@", IP-literal brackets, pct-encoded
_NETLOC_PATTERN = re.compile(r"[A-Za-z0-9\-._~!$&'()*+,;=:@\[\]%]*")
_BAD_PERCENT_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def _check_href(href: str, parts: SplitResult) -> None:
    """Raise ValueError for hrefs that urlsplit accepts but are not URLs."""
    for char in href:
        if char.isspace() or ord(char) < 0x20 or ord(char) == 0x7F:
            raise ValueError(f"Whitespace or control character {char!r} in URL")

    if not _NETLOC_PATTERN.fullmatch(parts.netloc):
        raise ValueError(f"Invalid character in host '{parts.netloc}'")

    if _BAD_PERCENT_ESCAPE.search(href):
        raise ValueError("'%' is not followed by two hex digits")

    # Port is validated lazily by urllib; force it here.
    _ = parts.port


def extract_token(link: PaginationLink | None) -> str | None:
    """
    Extract the continuation token from a pagination link.

    The token is read from the `token` query parameter of the link's href
    and returned verbatim after standard query decoding. Its shape is never
    validated: servers treat it as opaque and so do we.

    Args:
        link: The `next` link of a page, or None when the page has none

    Returns:
        The token, or None when the link, its href, its query string or the
        `token` parameter is absent (a blank `token=` counts as absent)

    Raises:
        LinkParseError: If the href cannot be parsed as a URL, or contains
            whitespace, control characters, an invalid host character or a
            malformed percent escape

    Example:
        extract_token(PaginationLink(href="ibm.com?token=abc-123"))
        → "abc-123"
    """
    if link is None or link.href is None:
        return None

    href = link.href

    try:
        parts = urlsplit(href)
        _check_href(href, parts)
    except ValueError as exc:
        raise LinkParseError(
            message="Pagination link is not a valid URL",
            details={"href": href, "reason": str(exc)},
        ) from exc

    if not parts.query:
        return None

    values = parse_qs(parts.query).get(PAGE_TOKEN_QUERY_PARAM)
    if not values:
        return None

    return values[0]

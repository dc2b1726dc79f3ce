"""
Response wrapper returned by every service operation.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

import requests
from pydantic import BaseModel, ConfigDict, Field

ResultT = TypeVar("ResultT")

JsonDict = dict[str, Any]


class DetailedResponse(BaseModel, Generic[ResultT]):
    """HTTP status, headers and parsed result of an operation."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    status_code: int = Field(..., description="HTTP status code")
    headers: dict[str, str] = Field(default_factory=dict, description="Response headers")
    result: ResultT | None = Field(None, description="Parsed response body, None when empty")

    def get_result(self) -> ResultT | None:
        return self.result


def extract_error_message(response: requests.Response) -> str:
    """Best-effort human-readable message from an error response.

    Looks at, in order:
    - errors[0].message
    - error
    - message
    - errorMessage
    and falls back to the HTTP reason phrase.
    """
    try:
        body: Any = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        errors = body.get("errors")
        if isinstance(errors, list) and errors:
            first = errors[0]
            if isinstance(first, dict) and isinstance(first.get("message"), str):
                return first["message"]

        for key in ("error", "message", "errorMessage"):
            value = body.get(key)
            if isinstance(value, str) and value:
                return value

    return response.reason or f"HTTP {response.status_code}"


def error_body(response: requests.Response) -> JsonDict | None:
    """Decoded JSON error body, or None when the body is not a JSON object."""
    try:
        body = response.json()
    except ValueError:
        return None
    return body if isinstance(body, dict) else None

"""Errors raised when a tweet endpoint answers with a failure."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


class TwitterError(Exception):
    """Base class of the errors reported by the tweet endpoints."""


class HTTPError(TwitterError):
    """A failed response whose body could not be decoded as a JSON error."""

    def __init__(self, status: str, status_code: int, url: str) -> None:
        self.status = status
        self.status_code = status_code
        self.url = url
        super().__init__(f"twitter [{url}] status: {status} code: {status_code}")


@dataclass
class TweetError:
    """One entry of the error list in a failed response."""

    parameters: Any = None
    message: str = ""


class TweetErrorResponse(TwitterError):
    """The JSON error document of a failed response."""

    def __init__(
        self,
        status_code: int = 0,
        errors: list[TweetError] | None = None,
        title: str = "",
        detail: str = "",
        type: str = "",
    ) -> None:
        self.status_code = status_code
        self.errors = list(errors or [])
        self.title = title
        self.detail = detail
        self.type = type
        super().__init__(f"status {status_code} {title}:{detail}")

    @classmethod
    def from_dict(cls, data: Any, status_code: int) -> TweetErrorResponse:
        """Build the error from a decoded JSON body and the response status."""
        if not isinstance(data, Mapping):
            raise TypeError(f"error response: expected a JSON object, got {type(data).__name__}")
        raw_errors = data.get("errors") or []
        if not isinstance(raw_errors, list):
            raise TypeError("error response: errors must be a JSON array")
        errors = []
        for entry in raw_errors:
            if not isinstance(entry, Mapping):
                raise TypeError("error response: each error must be a JSON object")
            errors.append(
                TweetError(parameters=entry.get("parameters"), message=entry.get("message") or "")
            )
        return cls(
            status_code=status_code,
            errors=errors,
            title=data.get("title") or "",
            detail=data.get("detail") or "",
            type=data.get("type") or "",
        )
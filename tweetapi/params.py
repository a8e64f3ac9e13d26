"""Query parameters of the tweet endpoints."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum
from typing import Sequence

from tweetapi.fields import join_fields

FieldName = "str | Enum"


def _rfc3339(moment: datetime) -> str:
    base = moment.strftime("%Y-%m-%dT%H:%M:%S")
    offset = moment.utcoffset()
    if offset is None or offset == timedelta(0):
        return base + "Z"
    total = int(offset.total_seconds())
    sign = "+" if total >= 0 else "-"
    hours, minutes = divmod(abs(total) // 60, 60)
    return f"{base}{sign}{hours:02d}:{minutes:02d}"


@dataclass
class TweetFieldOptions:
    """Expansions and fields to request with tweets."""

    expansions: Sequence[str | Enum] = field(default_factory=list)
    media_fields: Sequence[str | Enum] = field(default_factory=list)
    place_fields: Sequence[str | Enum] = field(default_factory=list)
    poll_fields: Sequence[str | Enum] = field(default_factory=list)
    tweet_fields: Sequence[str | Enum] = field(default_factory=list)
    user_fields: Sequence[str | Enum] = field(default_factory=list)

    def to_query(self) -> dict[str, str]:
        """Return the query parameters for the options that are set."""
        pairs = (
            ("expansions", self.expansions),
            ("media.fields", self.media_fields),
            ("place.fields", self.place_fields),
            ("poll.fields", self.poll_fields),
            ("tweet.fields", self.tweet_fields),
            ("user.fields", self.user_fields),
        )
        return {name: join_fields(values) for name, values in pairs if values}


@dataclass
class RecentSearchOptions:
    """Optional parameters of a recent search."""

    start_time: datetime | None = None
    end_time: datetime | None = None
    max_results: int = 0
    next_token: str = ""
    since_id: str = ""
    until_id: str = ""

    def to_query(self, query: str) -> dict[str, str]:
        """Return the query parameters for a search for ``query``."""
        params = {"query": query}
        if self.start_time is not None:
            params["start_time"] = _rfc3339(self.start_time)
        if self.end_time is not None:
            params["end_time"] = _rfc3339(self.end_time)
        if self.max_results >= 10:
            params["max_results"] = str(self.max_results)
        if self.next_token:
            params["next_token"] = self.next_token
        if self.since_id:
            params["since_id"] = self.since_id
        if self.until_id:
            params["until_id"] = self.until_id
        return params
"""Tweets resolved against the objects included in a response."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass, field
from typing import Any

from tweetapi.objects import Media, Place, Poll, Tweet


@dataclass
class TweetLookup:
    """A tweet together with the included objects that it refers to."""

    tweet: Tweet = field(default_factory=Tweet)
    media: Media | None = None
    place: Place | None = None
    poll: Poll | None = None
    user: dict[str, Any] | None = None
    in_reply_user: dict[str, Any] | None = None
    mentions: list[dict[str, Any]] = field(default_factory=list)
    attachment_polls: list[Poll] = field(default_factory=list)
    attachment_media: list[Media] = field(default_factory=list)
    referenced_tweets: list[TweetLookup] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return the lookup as plain dictionaries and lists."""
        return asdict(self)


@dataclass
class _Includes:
    users_by_id: dict[str, dict[str, Any]] = field(default_factory=dict)
    users_by_name: dict[str, dict[str, Any]] = field(default_factory=dict)
    places: dict[str, Place] = field(default_factory=dict)
    polls: dict[str, Poll] = field(default_factory=dict)
    media: dict[str, Media] = field(default_factory=dict)
    tweets: dict[str, Tweet] = field(default_factory=dict)


def _mapping(data: Any, what: str) -> Mapping[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise TypeError(f"{what}: expected a JSON object, got {type(data).__name__}")
    return data


def _array(data: Any, what: str) -> list[Any]:
    if data is None:
        return []
    if not isinstance(data, list):
        raise TypeError(f"{what}: expected a JSON array, got {type(data).__name__}")
    return data


def _index(raw: Any) -> _Includes:
    includes = _mapping(raw, "includes")
    index = _Includes()
    for item in _array(includes.get("users"), "users"):
        user = dict(_mapping(item, "user"))
        index.users_by_id[user.get("id") or ""] = user
        index.users_by_name[user.get("username") or ""] = user
    for item in _array(includes.get("places"), "places"):
        place = Place.from_dict(item)
        index.places[place.id] = place
    for item in _array(includes.get("polls"), "polls"):
        poll = Poll.from_dict(item)
        index.polls[poll.id] = poll
    for item in _array(includes.get("media"), "media"):
        media = Media.from_dict(item)
        index.media[media.key] = media
    for item in _array(includes.get("tweets"), "tweets"):
        tweet = Tweet.from_dict(item)
        index.tweets[tweet.id] = tweet
    return index


def _resolve(tweet: Tweet, index: _Includes) -> TweetLookup:
    return TweetLookup(
        tweet=tweet,
        user=index.users_by_id.get(tweet.author_id),
        in_reply_user=index.users_by_id.get(tweet.in_reply_to_user_id),
        place=index.places.get(tweet.geo.place_id),
        mentions=[
            index.users_by_name[m.username]
            for m in tweet.entities.mentions
            if m.username in index.users_by_name
        ],
        attachment_polls=[
            index.polls[i] for i in tweet.attachments.poll_ids if i in index.polls
        ],
        attachment_media=[
            index.media[k] for k in tweet.attachments.media_keys if k in index.media
        ],
        referenced_tweets=[
            _resolve(index.tweets[ref.id], index)
            for ref in tweet.referenced_tweets
            if ref.id in index.tweets
        ],
    )


def lookup_single(body: Any) -> dict[str, TweetLookup]:
    """Resolve a response whose ``data`` holds one tweet, keyed by tweet id."""
    try:
        document = _mapping(body, "response")
        tweet = Tweet.from_dict(document.get("data"))
        index = _index(document.get("includes"))
    except (TypeError, ValueError) as exc:
        raise ValueError(f"tweet lookup decode error {exc}") from exc
    return {tweet.id: _resolve(tweet, index)}


def lookup_many(body: Any) -> dict[str, TweetLookup]:
    """Resolve a response whose ``data`` holds a list of tweets, keyed by tweet id."""
    try:
        document = _mapping(body, "response")
        tweets = [Tweet.from_dict(item) for item in _array(document.get("data"), "data")]
        index = _index(document.get("includes"))
    except (TypeError, ValueError) as exc:
        raise ValueError(f"tweet lookup decode error {exc}") from exc
    return {tweet.id: _resolve(tweet, index) for tweet in tweets}


@dataclass
class RecentSearchMeta:
    """Paging details of a recent search."""

    newest_id: str = ""
    oldest_id: str = ""
    result_count: int = 0
    next_token: str = ""


@dataclass
class RecentSearch:
    """The tweets and paging details returned by a recent search."""

    lookups: dict[str, TweetLookup] = field(default_factory=dict)
    meta: RecentSearchMeta = field(default_factory=RecentSearchMeta)

    @classmethod
    def from_dict(cls, body: Any) -> RecentSearch:
        document = _mapping(body, "response")
        raw_meta = _mapping(document.get("meta"), "meta")
        meta = RecentSearchMeta(
            newest_id=raw_meta.get("newest_id") or "",
            oldest_id=raw_meta.get("oldest_id") or "",
            result_count=raw_meta.get("result_count") or 0,
            next_token=raw_meta.get("next_token") or "",
        )
        return cls(lookups=lookup_many(document), meta=meta)
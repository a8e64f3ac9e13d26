"""Objects returned by the tweet endpoints, built from decoded JSON."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


def _mapping(data: Any, what: str) -> Mapping[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise TypeError(f"{what}: expected a JSON object, got {type(data).__name__}")
    return data


def _value(data: Mapping[str, Any], key: str, default: Any) -> Any:
    value = data.get(key)
    return default if value is None else value


def _items(data: Mapping[str, Any], key: str) -> list[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise TypeError(f"{key}: expected a JSON array, got {type(value).__name__}")
    return value


@dataclass
class _EntitySpan:
    start: int = 0
    end: int = 0


@dataclass
class EntityAnnotation(_EntitySpan):
    """An annotation recognised in the text."""

    probability: float = 0.0
    type: str = ""
    normalized_text: str = ""


@dataclass
class EntityURL(_EntitySpan):
    """Text recognised as a URL."""

    url: str = ""
    expanded_url: str = ""
    display_url: str = ""
    status: int = 0
    title: str = ""
    description: str = ""
    unwound_url: str = ""


@dataclass
class EntityTag(_EntitySpan):
    """Text recognised as a hashtag or cashtag."""

    tag: str = ""


@dataclass
class EntityMention(_EntitySpan):
    """Text recognised as a user mention."""

    username: str = ""


def _annotation(data: Any) -> EntityAnnotation:
    d = _mapping(data, "annotation")
    return EntityAnnotation(
        start=_value(d, "start", 0),
        end=_value(d, "end", 0),
        probability=float(_value(d, "probability", 0.0)),
        type=_value(d, "type", ""),
        normalized_text=_value(d, "normalized_text", ""),
    )


def _url(data: Any) -> EntityURL:
    d = _mapping(data, "url")
    return EntityURL(
        start=_value(d, "start", 0),
        end=_value(d, "end", 0),
        url=_value(d, "url", ""),
        expanded_url=_value(d, "expanded_url", ""),
        display_url=_value(d, "display_url", ""),
        status=_value(d, "status", 0),
        title=_value(d, "title", ""),
        description=_value(d, "description", ""),
        unwound_url=_value(d, "unwound_url", ""),
    )


def _tag(data: Any) -> EntityTag:
    d = _mapping(data, "tag")
    return EntityTag(start=_value(d, "start", 0), end=_value(d, "end", 0), tag=_value(d, "tag", ""))


def _mention(data: Any) -> EntityMention:
    d = _mapping(data, "mention")
    return EntityMention(
        start=_value(d, "start", 0),
        end=_value(d, "end", 0),
        username=_value(d, "username", ""),
    )


@dataclass
class Entities:
    """Parts of a text that carry a special meaning."""

    annotations: list[EntityAnnotation] = field(default_factory=list)
    urls: list[EntityURL] = field(default_factory=list)
    hashtags: list[EntityTag] = field(default_factory=list)
    mentions: list[EntityMention] = field(default_factory=list)
    cashtags: list[EntityTag] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> Entities:
        d = _mapping(data, "entities")
        return cls(
            annotations=[_annotation(a) for a in _items(d, "annotations")],
            urls=[_url(u) for u in _items(d, "urls")],
            hashtags=[_tag(t) for t in _items(d, "hashtags")],
            mentions=[_mention(m) for m in _items(d, "mentions")],
            cashtags=[_tag(t) for t in _items(d, "cashtags")],
        )


@dataclass
class WithHeld:
    """Withholding details."""

    copyright: bool = False
    country_codes: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> WithHeld:
        d = _mapping(data, "withheld")
        return cls(
            copyright=bool(_value(d, "copyright", False)),
            country_codes=list(_items(d, "country_codes")),
        )


@dataclass
class PartialError:
    """One of the partial errors reported alongside a response."""

    title: str = ""
    detail: str = ""
    type: str = ""
    resource_type: str = ""
    value: str = ""
    parameter: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> PartialError:
        d = _mapping(data, "error")
        return cls(
            title=_value(d, "title", ""),
            detail=_value(d, "detail", ""),
            type=_value(d, "type", ""),
            resource_type=_value(d, "resource_type", ""),
            value=_value(d, "value", ""),
            parameter=_value(d, "parameter", ""),
        )


@dataclass
class MediaMetrics:
    """Engagement metrics for media content."""

    playback_0: int = 0
    playback_100: int = 0
    playback_25: int = 0
    playback_50: int = 0
    playback_75: int = 0
    views: int = 0


def _media_metrics(data: Any) -> MediaMetrics:
    d = _mapping(data, "media metrics")
    return MediaMetrics(
        playback_0=_value(d, "playback_0_count", 0),
        playback_100=_value(d, "playback_100_count", 0),
        playback_25=_value(d, "playback_25_count", 0),
        playback_50=_value(d, "playback_50_count", 0),
        playback_75=_value(d, "playback_75_count", 0),
        views=_value(d, "view_count", 0),
    )


@dataclass
class Media:
    """An image, GIF or video attached to a tweet."""

    key: str = ""
    type: str = ""
    url: str = ""
    duration_ms: int = 0
    height: int = 0
    non_public_metrics: MediaMetrics = field(default_factory=MediaMetrics)
    organic_metrics: MediaMetrics = field(default_factory=MediaMetrics)
    preview_image_url: str = ""
    promoted_metrics: MediaMetrics = field(default_factory=MediaMetrics)
    public_metrics: MediaMetrics = field(default_factory=MediaMetrics)
    width: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> Media:
        d = _mapping(data, "media")
        return cls(
            key=_value(d, "media_key", ""),
            type=_value(d, "type", ""),
            url=_value(d, "url", ""),
            duration_ms=_value(d, "duration_ms", 0),
            height=_value(d, "height", 0),
            non_public_metrics=_media_metrics(d.get("non_public_metrics")),
            organic_metrics=_media_metrics(d.get("organic_metrics")),
            preview_image_url=_value(d, "preview_image_url", ""),
            promoted_metrics=_media_metrics(d.get("promoted_metrics")),
            public_metrics=_media_metrics(d.get("public_metrics")),
            width=_value(d, "width", 0),
        )


@dataclass
class PlaceGeo:
    """Place details in GeoJSON form."""

    type: str = ""
    bbox: list[float] = field(default_factory=list)
    properties: dict[str, Any] = field(default_factory=dict)


def _place_geo(data: Any) -> PlaceGeo:
    d = _mapping(data, "place geo")
    return PlaceGeo(
        type=_value(d, "type", ""),
        bbox=[float(v) for v in _items(d, "bbox")],
        properties=dict(_mapping(d.get("properties"), "properties")),
    )


@dataclass
class Place:
    """A place tagged in a tweet."""

    full_name: str = ""
    id: str = ""
    contained_within: list[str] = field(default_factory=list)
    country: str = ""
    country_code: str = ""
    geo: PlaceGeo = field(default_factory=PlaceGeo)
    name: str = ""
    place_type: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> Place:
        d = _mapping(data, "place")
        return cls(
            full_name=_value(d, "full_name", ""),
            id=_value(d, "id", ""),
            contained_within=list(_items(d, "contained_within")),
            country=_value(d, "country", ""),
            country_code=_value(d, "country_code", ""),
            geo=_place_geo(d.get("geo")),
            name=_value(d, "name", ""),
            place_type=_value(d, "place_type", ""),
        )


@dataclass
class PollOption:
    """One choice in a poll."""

    position: int = 0
    label: str = ""
    votes: int = 0


@dataclass
class Poll:
    """A poll included in a tweet."""

    id: str = ""
    options: list[PollOption] = field(default_factory=list)
    duration_minutes: int = 0
    end_datetime: str = ""
    voting_status: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> Poll:
        d = _mapping(data, "poll")
        options = []
        for item in _items(d, "options"):
            o = _mapping(item, "poll option")
            options.append(
                PollOption(
                    position=_value(o, "position", 0),
                    label=_value(o, "label", ""),
                    votes=_value(o, "votes", 0),
                )
            )
        return cls(
            id=_value(d, "id", ""),
            options=options,
            duration_minutes=_value(d, "duration_minutes", 0),
            end_datetime=_value(d, "end_datetime", ""),
            voting_status=_value(d, "voting_status", ""),
        )


@dataclass
class TweetAttachments:
    """Keys of the media and polls attached to a tweet."""

    media_keys: list[str] = field(default_factory=list)
    poll_ids: list[str] = field(default_factory=list)


@dataclass
class TweetContext:
    """A domain or entity of a context annotation."""

    id: str = ""
    name: str = ""
    description: str = ""


@dataclass
class TweetContextAnnotation:
    """A context annotation of a tweet."""

    domain: TweetContext = field(default_factory=TweetContext)
    entity: TweetContext = field(default_factory=TweetContext)


@dataclass
class TweetGeoCoordinates:
    """Coordinates of the location tagged in a tweet."""

    type: str = ""
    coordinates: list[float] = field(default_factory=list)


@dataclass
class TweetGeo:
    """Location tagged in a tweet."""

    place_id: str = ""
    coordinates: TweetGeoCoordinates = field(default_factory=TweetGeoCoordinates)


@dataclass
class TweetMetrics:
    """Engagement metrics for a tweet."""

    impressions: int = 0
    url_link_clicks: int = 0
    user_profile_clicks: int = 0
    likes: int = 0
    replies: int = 0
    retweets: int = 0
    quotes: int = 0


@dataclass
class TweetReferencedTweet:
    """A tweet that this tweet refers to."""

    type: str = ""
    id: str = ""


def _context(data: Any) -> TweetContext:
    d = _mapping(data, "context")
    return TweetContext(
        id=_value(d, "id", ""),
        name=_value(d, "name", ""),
        description=_value(d, "description", ""),
    )


def _context_annotation(data: Any) -> TweetContextAnnotation:
    d = _mapping(data, "context annotation")
    return TweetContextAnnotation(domain=_context(d.get("domain")), entity=_context(d.get("entity")))


def _tweet_geo(data: Any) -> TweetGeo:
    d = _mapping(data, "geo")
    c = _mapping(d.get("coordinates"), "coordinates")
    return TweetGeo(
        place_id=_value(d, "place_id", ""),
        coordinates=TweetGeoCoordinates(
            type=_value(c, "type", ""),
            coordinates=[float(v) for v in _items(c, "coordinates")],
        ),
    )


def _tweet_metrics(data: Any) -> TweetMetrics:
    d = _mapping(data, "tweet metrics")
    return TweetMetrics(
        impressions=_value(d, "impression_count", 0),
        url_link_clicks=_value(d, "url_link_clicks", 0),
        user_profile_clicks=_value(d, "user_profile_clicks", 0),
        likes=_value(d, "like_count", 0),
        replies=_value(d, "reply_count", 0),
        retweets=_value(d, "retweet_count", 0),
        quotes=_value(d, "quote_count", 0),
    )


def _referenced(data: Any) -> TweetReferencedTweet:
    d = _mapping(data, "referenced tweet")
    return TweetReferencedTweet(type=_value(d, "type", ""), id=_value(d, "id", ""))


@dataclass
class Tweet:
    """The primary object of the tweet endpoints."""

    id: str = ""
    text: str = ""
    attachments: TweetAttachments = field(default_factory=TweetAttachments)
    author_id: str = ""
    context_annotations: list[TweetContextAnnotation] = field(default_factory=list)
    conversation_id: str = ""
    created_at: str = ""
    entities: Entities = field(default_factory=Entities)
    geo: TweetGeo = field(default_factory=TweetGeo)
    in_reply_to_user_id: str = ""
    language: str = ""
    non_public_metrics: TweetMetrics = field(default_factory=TweetMetrics)
    organic_metrics: TweetMetrics = field(default_factory=TweetMetrics)
    possibly_sensitive: bool = False
    promoted_metrics: TweetMetrics = field(default_factory=TweetMetrics)
    public_metrics: TweetMetrics = field(default_factory=TweetMetrics)
    referenced_tweets: list[TweetReferencedTweet] = field(default_factory=list)
    source: str = ""
    withheld: WithHeld = field(default_factory=WithHeld)

    @classmethod
    def from_dict(cls, data: Any) -> Tweet:
        d = _mapping(data, "tweet")
        attachments = _mapping(d.get("attachments"), "attachments")
        sensitive = d.get("possibly_sensitive", d.get("possiby_sensitive"))
        return cls(
            id=_value(d, "id", ""),
            text=_value(d, "text", ""),
            attachments=TweetAttachments(
                media_keys=list(_items(attachments, "media_keys")),
                poll_ids=list(_items(attachments, "poll_ids")),
            ),
            author_id=_value(d, "author_id", ""),
            context_annotations=[_context_annotation(c) for c in _items(d, "context_annotations")],
            conversation_id=_value(d, "conversation_id", ""),
            created_at=_value(d, "created_at", ""),
            entities=Entities.from_dict(d.get("entities")),
            geo=_tweet_geo(d.get("geo")),
            in_reply_to_user_id=_value(d, "in_reply_to_user_id", ""),
            language=_value(d, "lang", ""),
            non_public_metrics=_tweet_metrics(d.get("non_public_metrics")),
            organic_metrics=_tweet_metrics(d.get("organic_metrics")),
            possibly_sensitive=bool(sensitive) if sensitive is not None else False,
            promoted_metrics=_tweet_metrics(d.get("promoted_metrics")),
            public_metrics=_tweet_metrics(d.get("public_metrics")),
            referenced_tweets=[_referenced(r) for r in _items(d, "referenced_tweets")],
            source=_value(d, "source", ""),
            withheld=WithHeld.from_dict(d.get("withheld")),
        )
"""Names of expansions, excludes and fields that the tweet endpoints accept."""

from __future__ import annotations

from enum import Enum
from typing import Iterable


class _FieldEnum(str, Enum):
    """A string enum whose ``str()`` is its wire value."""

    def __str__(self) -> str:
        return self.value


class Expansion(_FieldEnum):
    """Objects referenced in a payload that can be expanded."""

    ATTACHMENTS_POLL_IDS = "attachments.poll_ids"
    ATTACHMENTS_MEDIA_KEYS = "attachments.media_keys"
    AUTHOR_ID = "author_id"
    ENTITIES_MENTIONS_USERNAME = "entities.mentions.username"
    GEO_PLACE_ID = "geo.place_id"
    IN_REPLY_TO_USER_ID = "in_reply_to_user_id"
    REFERENCED_TWEETS_ID = "referenced_tweets.id"
    REFERENCED_TWEETS_ID_AUTHOR_ID = "referenced_tweets.id.author_id"
    PINNED_TWEET_ID = "pinned_tweet_id"


class Exclude(_FieldEnum):
    """Kinds of tweets that a timeline can leave out."""

    RETWEETS = "retweets"
    REPLIES = "replies"


class MediaField(_FieldEnum):
    """Fields that can be requested on a media object."""

    DURATION_MS = "duration_ms"
    HEIGHT = "height"
    MEDIA_KEY = "media_key"
    PREVIEW_IMAGE_URL = "preview_image_url"
    TYPE = "type"
    URL = "url"
    WIDTH = "width"
    PUBLIC_METRICS = "public_metrics"
    NON_PUBLIC_METRICS = "non_public_metrics"
    ORGANIC_METRICS = "organic_metrics"
    PROMOTED_METRICS = "promoted_metrics"


class PlaceField(_FieldEnum):
    """Fields that can be requested on a place object."""

    CONTAINED_WITHIN = "contained_within"
    COUNTRY = "country"
    COUNTRY_CODE = "country_code"
    FULL_NAME = "full_name"
    GEO = "geo"
    ID = "id"
    NAME = "name"
    PLACE_TYPE = "place_type"


class PollField(_FieldEnum):
    """Fields that can be requested on a poll object."""

    DURATION_MINUTES = "duration_minutes"
    END_DATETIME = "end_datetime"
    ID = "id"
    OPTIONS = "options"
    VOTING_STATUS = "voting_status"


class TweetField(_FieldEnum):
    """Fields that can be requested on a tweet object."""

    ID = "id"
    TEXT = "text"
    ATTACHMENTS = "attachments"
    AUTHOR_ID = "author_id"
    CONTEXT_ANNOTATIONS = "context_annotations"
    CONVERSATION_ID = "conversation_id"
    CREATED_AT = "created_at"
    ENTITIES = "entities"
    GEO = "geo"
    IN_REPLY_TO_USER_ID = "in_reply_to_user_id"
    LANGUAGE = "lang"
    NON_PUBLIC_METRICS = "non_public_metrics"
    PUBLIC_METRICS = "public_metrics"
    ORGANIC_METRICS = "organic_metrics"
    PROMOTED_METRICS = "promoted_metrics"
    POSSIBLY_SENSITIVE = "possibly_sensitive"
    REFERENCED_TWEETS = "referenced_tweets"
    SOURCE = "source"
    WITHHELD = "withheld"


def join_fields(values: Iterable[str | Enum]) -> str:
    """Join field names into the comma separated form used in queries."""
    return ",".join(v.value if isinstance(v, Enum) else str(v) for v in values)
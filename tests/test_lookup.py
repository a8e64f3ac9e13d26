import pytest

from tweetapi.lookup import RecentSearch, TweetLookup, lookup_many, lookup_single


def _tweet_body():
    return {
        "id": "10",
        "text": "hello @alice",
        "author_id": "1",
        "in_reply_to_user_id": "2",
        "geo": {"place_id": "p1"},
        "entities": {"mentions": [{"start": 6, "end": 12, "username": "alice"},
                                  {"start": 0, "end": 1, "username": "nobody"}]},
        "attachments": {"poll_ids": ["poll1", "missing"], "media_keys": ["m1"]},
        "referenced_tweets": [{"type": "quoted", "id": "20"}, {"type": "replied_to", "id": "99"}],
    }


def _includes():
    return {
        "users": [
            {"id": "1", "username": "bob", "name": "Bob"},
            {"id": "2", "username": "alice", "name": "Alice"},
        ],
        "places": [{"id": "p1", "full_name": "Somewhere"}],
        "polls": [{"id": "poll1", "options": [{"position": 1, "label": "yes", "votes": 3}]}],
        "media": [{"media_key": "m1", "type": "photo"}],
        "tweets": [{"id": "20", "text": "quoted", "author_id": "2"}],
    }


def test_lookup_single_resolves_includes():
    result = lookup_single({"data": _tweet_body(), "includes": _includes()})
    assert list(result) == ["10"]
    lookup = result["10"]
    assert lookup.tweet.text == "hello @alice"
    assert lookup.user["username"] == "bob"
    assert lookup.in_reply_user["username"] == "alice"
    assert lookup.place.full_name == "Somewhere"
    assert [u["id"] for u in lookup.mentions] == ["2"]
    assert [p.id for p in lookup.attachment_polls] == ["poll1"]
    assert lookup.attachment_polls[0].options[0].votes == 3
    assert [m.key for m in lookup.attachment_media] == ["m1"]


def test_referenced_tweets_are_resolved_recursively():
    lookup = lookup_single({"data": _tweet_body(), "includes": _includes()})["10"]
    assert len(lookup.referenced_tweets) == 1
    quoted = lookup.referenced_tweets[0]
    assert quoted.tweet.id == "20"
    assert quoted.user["name"] == "Alice"


def test_lookup_without_includes_leaves_links_empty():
    lookup = lookup_single({"data": {"id": "1", "text": "hi"}})["1"]
    assert lookup.user is None
    assert lookup.place is None
    assert lookup.mentions == []
    assert lookup.referenced_tweets == []


def test_lookup_many_keys_every_tweet():
    body = {
        "data": [{"id": "1", "text": "a", "author_id": "7"}, {"id": "2", "text": "b"}],
        "includes": {"users": [{"id": "7", "username": "seven"}]},
    }
    result = lookup_many(body)
    assert sorted(result) == ["1", "2"]
    assert result["1"].user["username"] == "seven"
    assert result["2"].user is None


def test_lookup_many_rejects_object_data():
    with pytest.raises(ValueError, match="tweet lookup decode error"):
        lookup_many({"data": {"id": "1"}})


def test_lookup_single_rejects_array_data():
    with pytest.raises(ValueError, match="tweet lookup decode error"):
        lookup_single({"data": [{"id": "1"}]})


def test_to_dict_round_trip_of_values():
    lookup = lookup_single({"data": _tweet_body(), "includes": _includes()})["10"]
    as_dict = lookup.to_dict()
    assert as_dict["tweet"]["id"] == lookup.tweet.id
    assert as_dict["user"] == lookup.user
    assert as_dict["referenced_tweets"][0]["tweet"]["text"] == "quoted"


def test_recent_search_from_dict():
    body = {
        "data": [{"id": "1", "text": "a"}, {"id": "2", "text": "b"}],
        "meta": {"newest_id": "2", "oldest_id": "1", "result_count": 2, "next_token": "abc"},
    }
    search = RecentSearch.from_dict(body)
    assert sorted(search.lookups) == ["1", "2"]
    assert search.meta.result_count == 2
    assert search.meta.next_token == "abc"
    assert search.meta.newest_id == "2"
    assert isinstance(search.lookups["1"], TweetLookup) and search.lookups["1"].tweet.text == "a"
# tweetapi

A small client for the Twitter v2 tweet endpoints. It looks up tweets by id,
runs recent searches, manages filtered-stream rules, reads the filtered and
sampled streams, and hides or unhides replies. Responses are turned into
dataclasses, and the objects a response carries in `includes` (authors,
mentioned users, places, polls, media and referenced tweets) are joined onto
each tweet as a `TweetLookup`.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Using the library

`TweetClient` takes an authorizer, the API host and, optionally, an
`httpx.Client` to send requests with.

```python
from tweetapi.auth import BearerAuthorizer
from tweetapi.client import TweetClient
from tweetapi.errors import TweetErrorResponse
from tweetapi.fields import Expansion, TweetField
from tweetapi.params import TweetFieldOptions

client = TweetClient(BearerAuthorizer("token"), "https://api.example.com")

options = TweetFieldOptions(
    expansions=[Expansion.ENTITIES_MENTIONS_USERNAME, Expansion.AUTHOR_ID],
    tweet_fields=[TweetField.CREATED_AT, TweetField.CONVERSATION_ID],
)

try:
    lookups = client.lookup(["1261326399320715264"], options)
except TweetErrorResponse as err:
    print(err.status_code, err.title, err.detail)
else:
    for tweet_id, found in lookups.items():
        author = found.user["username"] if found.user else None
        print(tweet_id, found.tweet.text, author)
```

`lookup` returns a dict from tweet id to `TweetLookup`. It takes between 1 and
100 ids. `recent_search` takes a query of 1 to 512 characters and a
`RecentSearchOptions` whose `max_results`, when set, must be between 10 and
100; it returns a `RecentSearch` with `lookups` and paging `meta`.

Any object with an `add(request)` method that subclasses
`tweetapi.auth.Authorizer` can be used in place of `BearerAuthorizer`.

### Stream rules

```python
from tweetapi.rules import StreamAddRule, StreamRuleChange

change = StreamRuleChange(add=[StreamAddRule(value="cat has:images", tag="cats")])
rules = client.apply_filtered_stream_rules(change, validate=True)
print(rules.meta.summary.created)
```

`validate=True` asks the service for a dry run. `filtered_stream_rules(ids)`
returns the rules with the given ids.

### Streams and replies

`filtered_stream` and `sampled_stream` read the first tweet from their stream
and return it as a lookup dict. `filtered_streaming(options, stream)` puts
every non-empty line of the filtered stream, as bytes, on `stream.tweets` (a
`queue.Queue`) until the response ends or `stream.stop()` is called; it blocks,
so run it in a thread if you want to consume lines as they come.

`hide_replies(tweet_id, hidden)` hides or shows a reply and raises
`ValueError` if the service reports a different state.

### Errors

- `TweetErrorResponse` is raised when the service answers with a JSON error
  body; it carries the HTTP status code, title, detail, type and the
  individual `TweetError` entries.
- `HTTPError` is raised when the error body is not JSON, such as an HTML 404
  page.
- `TwitterError` (the base of both) is raised when a request cannot be sent.
- `ValueError` is raised for arguments that fail validation and for responses
  that cannot be decoded.

## Command line

The `tweetapi` command runs the same calls and prints the results as indented
JSON. `--token` and `--host` come before the subcommand; the host may instead
be given in the `TWEETAPI_HOST` environment variable.

```
tweetapi --token token --host https://api.example.com lookup --ids 1261326399320715264,1278347468690915330
tweetapi --token token --host https://api.example.com recent-search --query "from:TwitterDev"
tweetapi --token token --host https://api.example.com filtered-stream
tweetapi --token token --host https://api.example.com sampled-stream
tweetapi --token token --host https://api.example.com hide --id 1261326399320715264 --hide
```

If the service returns a JSON error, the command prints that error as JSON and
exits with status 1; any other error is printed as a message, also with
status 1.

## What it does not cover

Only the tweet endpoints are covered. There are no user endpoints (user
lookup, followers, following, timelines or mentions), and users found in
`includes` are kept as plain dicts of the JSON the service sent rather than as
typed objects.
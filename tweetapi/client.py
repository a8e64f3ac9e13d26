"""Client for the tweet endpoints."""

from __future__ import annotations

import json
import queue
import threading
from typing import Any, Sequence

import httpx

from tweetapi.auth import Authorizer
from tweetapi.errors import HTTPError, TweetErrorResponse, TwitterError
from tweetapi.lookup import RecentSearch, TweetLookup, lookup_many, lookup_single
from tweetapi.params import RecentSearchOptions, TweetFieldOptions
from tweetapi.rules import StreamRuleChange, StreamRules

LOOKUP_ENDPOINT = "2/tweets"
RECENT_SEARCH_ENDPOINT = "2/tweets/search/recent"
FILTERED_STREAM_RULES_ENDPOINT = "2/tweets/search/stream/rules"
FILTERED_STREAM_ENDPOINT = "2/tweets/search/stream"
SAMPLED_STREAM_ENDPOINT = "2/tweets/sample/stream"
HIDE_ENDPOINT = "2/tweets/{id}/hidden"
MAX_IDS = 100
MAX_QUERY_SIZE = 512

_JSON = "application/json"


def _compact(payload: Any) -> bytes:
    return json.dumps(payload, separators=(",", ":")).encode("utf-8")


class Stream:
    """Receives the raw lines of a streaming response until stopped."""

    def __init__(self, maxsize: int = 0) -> None:
        self.tweets: queue.Queue[bytes] = queue.Queue(maxsize)
        self._running = threading.Event()
        self._running.set()

    @property
    def running(self) -> bool:
        """Whether the stream still accepts lines."""
        return self._running.is_set()

    def stop(self) -> None:
        """Stop the stream; no further lines are delivered."""
        self._running.clear()


class TweetClient:
    """Calls the tweet endpoints of the API."""

    def __init__(
        self,
        authorizer: Authorizer,
        host: str,
        client: httpx.Client | None = None,
    ) -> None:
        self.authorizer = authorizer
        self.host = host.rstrip("/")
        self.client = client if client is not None else httpx.Client()

    # -- plumbing -----------------------------------------------------

    def _request(
        self,
        method: str,
        endpoint: str,
        params: dict[str, str] | None = None,
        body: bytes | None = None,
    ) -> httpx.Request:
        headers = {"Accept": _JSON}
        if body is not None:
            headers["Content-type"] = _JSON
        request = self.client.build_request(
            method,
            f"{self.host}/{endpoint}",
            params=params or None,
            headers=headers,
            content=body,
        )
        self.authorizer.add(request)
        return request

    @staticmethod
    def _failure(response: httpx.Response) -> TwitterError:
        try:
            return TweetErrorResponse.from_dict(json.loads(response.content), response.status_code)
        except (ValueError, TypeError):
            return HTTPError(
                status=f"{response.status_code} {response.reason_phrase}".strip(),
                status_code=response.status_code,
                url=str(response.request.url),
            )

    def _send(self, request: httpx.Request, ok: int, what: str) -> httpx.Response:
        try:
            response = self.client.send(request)
        except httpx.HTTPError as exc:
            raise TwitterError(f"{what} response: {exc}") from exc
        if response.status_code != ok:
            raise self._failure(response)
        return response

    def _open(self, request: httpx.Request, what: str) -> httpx.Response:
        try:
            return self.client.send(request, stream=True)
        except httpx.HTTPError as exc:
            raise TwitterError(f"{what} response: {exc}") from exc

    @staticmethod
    def _json(response: httpx.Response, what: str) -> Any:
        try:
            return json.loads(response.content)
        except ValueError as exc:
            raise ValueError(f"{what} {exc}") from exc

    def _first_lookup(self, endpoint: str, options: TweetFieldOptions | None) -> dict[str, TweetLookup]:
        options = options or TweetFieldOptions()
        request = self._request("GET", endpoint, params=options.to_query())
        response = self._open(request, "tweet lookup")
        try:
            if response.status_code != 200:
                response.read()
                raise self._failure(response)
            for line in response.iter_lines():
                if line.strip():
                    try:
                        document = json.loads(line)
                    except ValueError as exc:
                        raise ValueError(f"tweet lookup decode error {exc}") from exc
                    return lookup_single(document)
        finally:
            response.close()
        raise ValueError("tweet lookup decode error: empty response")

    # -- endpoints ----------------------------------------------------

    def lookup(
        self, ids: Sequence[str], options: TweetFieldOptions | None = None
    ) -> dict[str, TweetLookup]:
        """Look up one or more tweets by id."""
        ids = list(ids)
        if not ids:
            raise ValueError("tweet lookup an id is required")
        if len(ids) > MAX_IDS:
            raise ValueError(f"tweet lookup: ids {len(ids)} is greater than max {MAX_IDS}")
        options = options or TweetFieldOptions()
        endpoint = LOOKUP_ENDPOINT
        params = options.to_query()
        if len(ids) == 1:
            endpoint += f"/{ids[0]}"
        else:
            params["ids"] = ",".join(ids)
        response = self._send(self._request("GET", endpoint, params=params), 200, "tweet lookup")
        body = self._json(response, "tweet lookup decode error")
        return lookup_single(body) if len(ids) == 1 else lookup_many(body)

    def recent_search(
        self,
        query: str,
        search_options: RecentSearchOptions | None = None,
        field_options: TweetFieldOptions | None = None,
    ) -> RecentSearch:
        """Search the tweets of the last days."""
        search_options = search_options or RecentSearchOptions()
        field_options = field_options or TweetFieldOptions()
        if not query:
            raise ValueError("tweet recent search query must be present")
        if len(query) > MAX_QUERY_SIZE:
            raise ValueError(
                f"tweet recent search query size {len(query)} greater than max {MAX_QUERY_SIZE}"
            )
        max_results = search_options.max_results
        if max_results > 0 and not 10 <= max_results <= 100:
            raise ValueError(
                f"tweet recent search max result needs to be between 10 -100 ({max_results})"
            )
        params = search_options.to_query(query)
        params.update(field_options.to_query())
        request = self._request("GET", RECENT_SEARCH_ENDPOINT, params=params)
        response = self._send(request, 200, "tweet recent search")
        body = self._json(response, "tweet recent search response decode:")
        try:
            return RecentSearch.from_dict(body)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"tweet recent search response decode: {exc}") from exc

    def apply_filtered_stream_rules(
        self, rules: StreamRuleChange, validate: bool = False
    ) -> StreamRules:
        """Add and/or delete filtered stream rules; ``validate`` only checks them."""
        rules.validate()
        params = {"dry_run": "true"} if validate else None
        request = self._request(
            "POST", FILTERED_STREAM_RULES_ENDPOINT, params=params, body=_compact(rules.to_dict())
        )
        response = self._send(request, 201, "tweet search stream rules")
        return self._rules(response)

    def filtered_stream_rules(self, ids: Sequence[str]) -> StreamRules:
        """Return the filtered stream rules with the given ids."""
        ids = list(ids)
        if not ids:
            raise ValueError("tweet search stream rules: there must be ids")
        request = self._request("GET", FILTERED_STREAM_RULES_ENDPOINT, params={"ids": ",".join(ids)})
        response = self._send(request, 200, "tweet search stream rules")
        return self._rules(response)

    def _rules(self, response: httpx.Response) -> StreamRules:
        body = self._json(response, "tweet search stream rules response decode:")
        try:
            return StreamRules.from_dict(body)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"tweet search stream rules response decode: {exc}") from exc

    def filtered_stream(self, options: TweetFieldOptions | None = None) -> dict[str, TweetLookup]:
        """Return the first tweet of the filtered stream."""
        return self._first_lookup(FILTERED_STREAM_ENDPOINT, options)

    def filtered_streaming(
        self, options: TweetFieldOptions | None = None, stream: Stream | None = None
    ) -> Stream:
        """Deliver each non-empty line of the filtered stream to ``stream``."""
        options = options or TweetFieldOptions()
        stream = stream if stream is not None else Stream()
        request = self._request("GET", FILTERED_STREAM_ENDPOINT, params=options.to_query())
        response = self._open(request, "tweet lookup")
        try:
            if response.status_code != 200:
                raise HTTPError(
                    status=f"{response.status_code} {response.reason_phrase}".strip(),
                    status_code=response.status_code,
                    url=str(response.request.url),
                )
            for line in response.iter_lines():
                if not stream.running:
                    break
                if line:
                    stream.tweets.put(line.encode("utf-8"))
        finally:
            response.close()
        return stream

    def sampled_stream(self, options: TweetFieldOptions | None = None) -> dict[str, TweetLookup]:
        """Return the first tweet of the sampled stream."""
        return self._first_lookup(SAMPLED_STREAM_ENDPOINT, options)

    def hide_replies(self, tweet_id: str, hidden: bool) -> None:
        """Hide or unhide a reply."""
        if not tweet_id:
            raise ValueError("tweet hidden: id can not be empty")
        endpoint = HIDE_ENDPOINT.replace("{id}", tweet_id)
        request = self._request("PUT", endpoint, body=_compact({"hidden": hidden}))
        response = self._send(request, 200, "tweet lookup")
        body = self._json(response, "tweet hidden: response decode err")
        data = body.get("data") if isinstance(body, dict) else None
        answered = bool(data.get("hidden")) if isinstance(data, dict) else False
        if answered != hidden:
            raise ValueError(
                "tweet hidden: expected response "
                f"({str(answered).lower()}) does not match hidden ({str(hidden).lower()})"
            )
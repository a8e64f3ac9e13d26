"""Command line access to the tweet endpoints."""

from __future__ import annotations

import argparse
import json
import os
from dataclasses import asdict
from typing import Any, Callable, Sequence

import httpx

from tweetapi.auth import BearerAuthorizer
from tweetapi.client import TweetClient
from tweetapi.errors import TweetErrorResponse, TwitterError
from tweetapi.fields import Expansion, TweetField
from tweetapi.lookup import TweetLookup
from tweetapi.params import RecentSearchOptions, TweetFieldOptions

HOST_VARIABLE = "TWEETAPI_HOST"


def _lookup_options() -> TweetFieldOptions:
    return TweetFieldOptions(
        expansions=[Expansion.ENTITIES_MENTIONS_USERNAME, Expansion.AUTHOR_ID],
        tweet_fields=[TweetField.CREATED_AT, TweetField.CONVERSATION_ID, TweetField.ATTACHMENTS],
    )


def _print_json(document: Any) -> None:
    print(json.dumps(document, indent=4, ensure_ascii=False))


def _print_lookups(lookups: dict[str, TweetLookup]) -> None:
    for lookup in lookups.values():
        _print_json(lookup.to_dict())
        print()


def _error_dict(error: TweetErrorResponse) -> dict[str, Any]:
    return {
        "status_code": error.status_code,
        "errors": [asdict(entry) for entry in error.errors],
        "title": error.title,
        "detail": error.detail,
        "type": error.type,
    }


def _lookup(client: TweetClient, args: argparse.Namespace) -> None:
    _print_lookups(client.lookup(args.ids.split(","), _lookup_options()))


def _recent_search(client: TweetClient, args: argparse.Namespace) -> None:
    field_options = TweetFieldOptions(
        tweet_fields=[TweetField.CREATED_AT, TweetField.CONVERSATION_ID, TweetField.LANGUAGE],
    )
    result = client.recent_search(args.query, RecentSearchOptions(), field_options)
    for lookup in result.lookups.values():
        _print_json(lookup.to_dict())
    _print_json(asdict(result.meta))


def _filtered_stream(client: TweetClient, args: argparse.Namespace) -> None:
    _print_lookups(client.filtered_stream(_lookup_options()))


def _sampled_stream(client: TweetClient, args: argparse.Namespace) -> None:
    _print_lookups(client.sampled_stream(_lookup_options()))


def _hide(client: TweetClient, args: argparse.Namespace) -> None:
    client.hide_replies(args.id, args.hide)
    print(f"id {args.id} is hidden {str(args.hide).lower()}")


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tweetapi", description="Call the tweet endpoints.")
    parser.add_argument("--token", default="", help="API bearer token")
    parser.add_argument(
        "--host",
        default=os.environ.get(HOST_VARIABLE),
        help=f"API host (defaults to ${HOST_VARIABLE})",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    lookup = commands.add_parser("lookup", help="look up tweets by id")
    lookup.add_argument("--ids", default="", help="comma separated tweet ids")
    lookup.set_defaults(handler=_lookup)

    search = commands.add_parser("recent-search", help="search recent tweets")
    search.add_argument("--query", default="", help="search query")
    search.set_defaults(handler=_recent_search)

    filtered = commands.add_parser("filtered-stream", help="read the filtered stream")
    filtered.set_defaults(handler=_filtered_stream)

    sampled = commands.add_parser("sampled-stream", help="read the sampled stream")
    sampled.set_defaults(handler=_sampled_stream)

    hide = commands.add_parser("hide", help="hide or unhide a reply")
    hide.add_argument("--id", default="", help="tweet id")
    hide.add_argument("--hide", action="store_true", help="hide the reply")
    hide.set_defaults(handler=_hide)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run one command and print its result as JSON."""
    parser = _parser()
    args = parser.parse_args(argv)
    if not args.host:
        parser.error(f"--host is required (or set {HOST_VARIABLE})")
    handler: Callable[[TweetClient, argparse.Namespace], None] = args.handler
    http_client = httpx.Client()
    client = TweetClient(BearerAuthorizer(args.token), args.host, http_client)
    try:
        with http_client:
            handler(client, args)
    except TweetErrorResponse as exc:
        _print_json(_error_dict(exc))
        return 1
    except (TwitterError, ValueError) as exc:
        print(exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
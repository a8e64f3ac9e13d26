import httpx
import pytest

from tweetapi.auth import Authorizer, BearerAuthorizer


def test_bearer_authorizer_sets_header():
    request = httpx.Request("GET", "https://www.test.com/2/tweets")
    BearerAuthorizer("token").add(request)
    assert request.headers["Authorization"] == "Bearer token"


def test_bearer_authorizer_replaces_existing_header():
    request = httpx.Request("GET", "https://www.test.com/2/tweets", headers={"Authorization": "Basic token"})
    BearerAuthorizer("secret").add(request)
    assert request.headers.get_list("Authorization") == ["Bearer secret"]


def test_authorizer_is_abstract():
    with pytest.raises(TypeError):
        Authorizer()


def test_bearer_authorizer_keeps_other_headers():
    request = httpx.Request("GET", "https://www.test.com/", headers={"Accept": "application/json"})
    BearerAuthorizer("placeholder").add(request)
    assert request.headers["Accept"] == "application/json"
    assert request.headers["Authorization"] == "Bearer placeholder"
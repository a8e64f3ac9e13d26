import json

import httpx
import pytest

from tweetapi.cli import main

_RealClient = httpx.Client
HOST = "https://www.test.com"


def _install(monkeypatch, handler):
    requests = []

    def recording(request):
        requests.append(request)
        return handler(request)

    def factory(*args, **kwargs):
        return _RealClient(transport=httpx.MockTransport(recording))

    monkeypatch.setattr(httpx, "Client", factory)
    return requests


def _documents(text):
    decoder = json.JSONDecoder()
    docs = []
    index = 0
    text = text.strip()
    while index < len(text):
        doc, end = decoder.raw_decode(text, index)
        docs.append(doc)
        index = end
        while index < len(text) and text[index].isspace():
            index += 1
    return docs


def test_lookup_single_prints_tweet(monkeypatch, capsys):
    body = {"data": {"id": "1", "text": "hello", "author_id": "7"},
            "includes": {"users": [{"id": "7", "username": "TwitterDev"}]}}
    requests = _install(monkeypatch, lambda r: httpx.Response(200, json=body))
    code = main(["--token", "token", "--host", HOST, "lookup", "--ids", "1"])
    assert code == 0
    docs = _documents(capsys.readouterr().out)
    assert len(docs) == 1
    assert docs[0]["tweet"]["text"] == "hello"
    assert docs[0]["user"]["username"] == "TwitterDev"
    assert requests[0].url.path == "/2/tweets/1"
    assert requests[0].headers["Authorization"] == "Bearer token"
    assert requests[0].url.params["expansions"] == "entities.mentions.username,author_id"
    assert requests[0].url.params["tweet.fields"] == "created_at,conversation_id,attachments"


def test_lookup_many_sends_ids(monkeypatch, capsys):
    body = {"data": [{"id": "1", "text": "a"}, {"id": "2", "text": "b"}]}
    requests = _install(monkeypatch, lambda r: httpx.Response(200, json=body))
    assert main(["--host", HOST, "lookup", "--ids", "1,2"]) == 0
    docs = _documents(capsys.readouterr().out)
    assert [d["tweet"]["id"] for d in docs] == ["1", "2"]
    assert requests[0].url.path == "/2/tweets"
    assert requests[0].url.params["ids"] == "1,2"


def test_error_response_is_printed(monkeypatch, capsys):
    body = {
        "errors": [{"parameters": {"id": ["aassd"]},
                    "message": "The id query parameter value [aassd] does not match ^[0-9]{1,19}$"}],
        "title": "Invalid Request",
        "detail": "One or more parameters to your request was invalid.",
        "type": "https://api.twitter.com/2/problems/invalid-request",
    }
    _install(monkeypatch, lambda r: httpx.Response(400, json=body))
    assert main(["--host", HOST, "lookup", "--ids", "aassd"]) == 1
    docs = _documents(capsys.readouterr().out)
    assert docs[0]["status_code"] == 400
    assert docs[0]["title"] == "Invalid Request"
    assert docs[0]["errors"][0]["parameters"] == {"id": ["aassd"]}


def test_hide_prints_state(monkeypatch, capsys):
    requests = _install(monkeypatch, lambda r: httpx.Response(200, json={"data": {"hidden": True}}))
    assert main(["--host", HOST, "hide", "--id", "123", "--hide"]) == 0
    assert capsys.readouterr().out.strip() == "id 123 is hidden true"
    assert requests[0].method == "PUT"
    assert requests[0].url.path == "/2/tweets/123/hidden"
    assert json.loads(requests[0].content) == {"hidden": True}


def test_recent_search_prints_lookups_and_meta(monkeypatch, capsys):
    body = {"data": [{"id": "5", "text": "python"}],
            "meta": {"newest_id": "5", "oldest_id": "5", "result_count": 1}}
    requests = _install(monkeypatch, lambda r: httpx.Response(200, json=body))
    assert main(["--host", HOST, "recent-search", "--query", "python"]) == 0
    docs = _documents(capsys.readouterr().out)
    assert docs[0]["tweet"]["id"] == "5"
    assert docs[-1]["result_count"] == 1
    assert docs[-1]["newest_id"] == "5"
    assert requests[0].url.params["query"] == "python"


def test_recent_search_without_query_reports_error(monkeypatch, capsys):
    requests = _install(monkeypatch, lambda r: httpx.Response(200, json={}))
    assert main(["--host", HOST, "recent-search"]) == 1
    assert capsys.readouterr().out.strip() == "tweet recent search query must be present"
    assert requests == []


def test_sampled_stream_prints_first_tweet(monkeypatch, capsys):
    stream = b'{"data":{"id":"1","text":"hello"}}\r\n{"data":{"id":"2","text":"world"}}\r\n'
    requests = _install(monkeypatch, lambda r: httpx.Response(200, content=stream))
    assert main(["--host", HOST, "sampled-stream"]) == 0
    docs = _documents(capsys.readouterr().out)
    assert [d["tweet"]["id"] for d in docs] == ["1"]
    assert requests[0].url.path == "/2/tweets/sample/stream"


def test_filtered_stream_uses_its_endpoint(monkeypatch, capsys):
    stream = b'{"data":{"id":"3","text":"!!"}}\r\n'
    requests = _install(monkeypatch, lambda r: httpx.Response(200, content=stream))
    assert main(["--host", HOST, "filtered-stream"]) == 0
    docs = _documents(capsys.readouterr().out)
    assert docs[0]["tweet"]["text"] == "!!"
    assert requests[0].url.path == "/2/tweets/search/stream"


def test_missing_host_is_a_usage_error(monkeypatch):
    monkeypatch.delenv("TWEETAPI_HOST", raising=False)
    with pytest.raises(SystemExit) as info:
        main(["lookup", "--ids", "1"])
    assert info.value.code == 2


def test_host_from_environment(monkeypatch, capsys):
    monkeypatch.setenv("TWEETAPI_HOST", HOST)
    requests = _install(monkeypatch, lambda r: httpx.Response(200, json={"data": {"id": "9"}}))
    assert main(["lookup", "--ids", "9"]) == 0
    assert requests[0].url.host == "www.test.com"
    assert _documents(capsys.readouterr().out)[0]["tweet"]["id"] == "9"
import json

import httpx
import pytest

from smooth_operator.dispatcher import Dispatcher
from smooth_operator.errors import BaseUrlNotSetError, HttpStatusError, ResponseParseError
from smooth_operator import SmoothOperatorClient

from _utils import recording_transport


def _json_reply(payload, status=200):
    return lambda request: httpx.Response(status, json=payload)


def test_get_without_base_url_fails(event_loop):
    d = Dispatcher()
    with pytest.raises(BaseUrlNotSetError):
        event_loop.run_until_complete(d.get("/tools-api/ping"))


def test_post_without_base_url_fails(event_loop):
    calls = []
    client = SmoothOperatorClient(transport=recording_transport(_json_reply({}), calls))
    with pytest.raises(BaseUrlNotSetError):
        event_loop.run_until_complete(client.post("/tools-api/mouse/click", {"x": 1, "y": 2}))
    with pytest.raises(BaseUrlNotSetError):
        event_loop.run_until_complete(client.get("/tools-api/screenshot"))
    assert calls == []


def test_post_normalizes_reply_and_sends_payload_verbatim(event_loop):
    calls = []
    d = Dispatcher("http://localhost:8080", transport=recording_transport(_json_reply({"Success": True}), calls))

    result = event_loop.run_until_complete(d.post("/tools-api/mouse/click", {"x": 100, "y": 200}))

    assert result == {"success": True}
    assert len(calls) == 1
    method, path, body, headers = calls[0]
    assert method == "POST"
    assert path == "/tools-api/mouse/click"
    assert body == {"x": 100, "y": 200}
    assert headers["Content-Type"] == "application/json"


def test_get_error_status(event_loop):
    d = Dispatcher("http://localhost:8080", transport=recording_transport(_json_reply({"Error": "x"}, 500), []))
    with pytest.raises(HttpStatusError) as exc:
        event_loop.run_until_complete(d.get("/tools-api/screenshot"))
    assert exc.value.status_code == 500


@pytest.mark.parametrize("status", [300, 404, 503])
def test_status_outside_2xx_fails(event_loop, status):
    d = Dispatcher("http://localhost:8080", transport=recording_transport(_json_reply({}, status), []))
    with pytest.raises(HttpStatusError):
        event_loop.run_until_complete(d.post("/x"))


def test_2xx_other_than_200_is_success(event_loop):
    d = Dispatcher("http://localhost:8080", transport=recording_transport(_json_reply({"Ok": 1}, 201), []))
    assert event_loop.run_until_complete(d.post("/x")) == {"ok": 1}


def test_post_without_payload_sends_empty_object(event_loop):
    calls = []
    d = Dispatcher("http://localhost:8080", transport=recording_transport(_json_reply({}), calls))
    event_loop.run_until_complete(d.post("/tools-api/chrome/reload"))

    _, _, body, headers = calls[0]
    assert body == {}
    assert headers["Content-Length"] == str(len(b"{}"))


def test_content_length_matches_body(event_loop):
    seen = []

    def handler(request):
        seen.append((request.headers["Content-Length"], len(request.content)))
        return httpx.Response(200, json={})

    d = Dispatcher("http://localhost:8080", transport=httpx.MockTransport(handler))
    event_loop.run_until_complete(d.post("/x", {"text": "héllo wörld"}))
    assert seen == [(str(seen[0][1]), seen[0][1])]


def test_bearer_header_on_every_method(event_loop):
    calls = []
    d = Dispatcher("http://localhost:8080", api_key="secret", transport=recording_transport(_json_reply({}), calls))
    event_loop.run_until_complete(d.get("/a"))
    event_loop.run_until_complete(d.post("/b", {}))
    assert [c[3]["Authorization"] for c in calls] == ["Bearer secret", "Bearer secret"]


def test_no_auth_header_without_key(event_loop):
    calls = []
    d = Dispatcher("http://localhost:8080", transport=recording_transport(_json_reply({}), calls))
    event_loop.run_until_complete(d.get("/a"))
    assert "Authorization" not in calls[0][3]


def test_path_is_concatenated_verbatim(event_loop):
    urls = []

    def handler(request):
        urls.append(str(request.url))
        return httpx.Response(200, json={})

    d = Dispatcher("http://localhost:8080/base", transport=httpx.MockTransport(handler))
    event_loop.run_until_complete(d.get("/tools-api/ping"))
    assert urls == ["http://localhost:8080/base/tools-api/ping"]


def test_invalid_json_body(event_loop):
    d = Dispatcher(
        "http://localhost:8080",
        transport=httpx.MockTransport(lambda request: httpx.Response(200, content=b"<html>oops")),
    )
    with pytest.raises(ResponseParseError) as exc:
        event_loop.run_until_complete(d.get("/x"))
    assert exc.value.detail


def test_json_string_body(event_loop):
    d = Dispatcher("http://localhost:8080", transport=recording_transport(_json_reply("pong"), []))
    assert event_loop.run_until_complete(d.get("/tools-api/ping")) == "pong"


def test_transport_errors_propagate(event_loop):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    d = Dispatcher("http://localhost:1", transport=httpx.MockTransport(handler))
    with pytest.raises(httpx.ConnectError):
        event_loop.run_until_complete(d.get("/x"))


def test_client_uses_preset_base_url_and_key(event_loop):
    calls = []
    client = SmoothOperatorClient(
        "test-api-key",
        "http://localhost:8080",
        transport=recording_transport(_json_reply({"Data": [{"Name": "x"}]}), calls),
    )
    result = event_loop.run_until_complete(client.post("/test-endpoint", {"test": "data"}))
    assert result == {"data": [{"name": "x"}]}
    assert calls[0][3]["Authorization"] == "Bearer test-api-key"
    assert json.dumps(calls[0][2]) == json.dumps({"test": "data"})


def test_request_timeout_defaults_and_override(event_loop):
    seen = []

    def handler(request):
        seen.append(request.extensions["timeout"]["read"])
        return httpx.Response(200, json={})

    d = Dispatcher("http://localhost:8080", transport=httpx.MockTransport(handler))
    event_loop.run_until_complete(d.get("/a"))
    event_loop.run_until_complete(d.get("/a", timeout=1.5))
    event_loop.run_until_complete(d.post("/b"))
    assert seen == [5.0, 1.5, 5.0]

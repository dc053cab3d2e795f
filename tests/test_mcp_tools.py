import json

import httpx
import pytest

import smooth_operator.context as context
import smooth_operator.server.supervisor as supervisor_mod
from smooth_operator import SmoothOperatorClient
from smooth_operator import __main__ as server

from _utils import FakeLauncher, TerminateRecorder, recording_transport


@pytest.fixture(autouse=True)
def _fresh_context():
    context.reset_client()
    yield
    context.reset_client()


@pytest.fixture
def calls(monkeypatch):
    """Install a process-wide client that talks to a recording mock server."""
    log = []

    def handler(request):
        if request.url.path == "/tools-api/ping":
            return httpx.Response(200, json="pong")
        if request.url.path == "/tools-api/chrome/navigate":
            return httpx.Response(404, json={})
        return httpx.Response(200, json={"Success": True, "Message": "done"})

    client = SmoothOperatorClient(base_url="http://localhost:5000", transport=recording_transport(handler, log))
    monkeypatch.setattr(context, "_global_client", client)
    return log


def test_tools_registered(event_loop):
    tools = {t.name for t in event_loop.run_until_complete(server.mcp.list_tools())}
    assert "smooth_operator__start_server" in tools
    assert "smooth_operator__mouse_click" in tools
    assert all(name.startswith("smooth_operator__") for name in tools)


def test_tool_before_start_reports_not_started(event_loop):
    out = json.loads(event_loop.run_until_complete(server.smooth_operator__take_screenshot()))
    assert out["error"] == "server_not_started"


def test_mouse_click_tool(event_loop, calls):
    out = json.loads(event_loop.run_until_complete(server.smooth_operator__mouse_click(100, 200)))
    assert out["success"] is True
    assert out["message"] == "done"
    assert calls[-1][:3] == ("POST", "/tools-api/mouse/click", {"x": 100, "y": 200})


def test_mouse_click_variants(event_loop, calls):
    event_loop.run_until_complete(server.smooth_operator__mouse_click(1, 2, button="right"))
    event_loop.run_until_complete(server.smooth_operator__mouse_click(1, 2, double=True))
    assert [c[1] for c in calls] == ["/tools-api/mouse/rightclick", "/tools-api/mouse/doubleclick"]


def test_keyboard_type_tool_with_element(event_loop, calls):
    event_loop.run_until_complete(server.smooth_operator__keyboard_type("hi", element_description="search"))
    assert calls[-1][1:3] == ("/tools-api/keyboard/type-at-element", {"elementDescription": "search", "textToType": "hi"})


def test_http_error_becomes_error_payload(event_loop, calls):
    out = json.loads(event_loop.run_until_complete(server.smooth_operator__chrome_navigate("https://x")))
    assert out["ok"] is False
    assert out["error"]["status_code"] == 404


def test_start_server_tool_when_already_attached(event_loop, calls):
    out = json.loads(event_loop.run_until_complete(server.smooth_operator__start_server()))
    assert out == {"ok": True, "base_url": "http://localhost:5000", "already_running": True}


def test_start_and_stop_server_tools(event_loop, monkeypatch, tmp_path):
    monkeypatch.setattr(supervisor_mod, "launch_server_process", FakeLauncher(port=45678))
    terminator = TerminateRecorder()
    monkeypatch.setattr(supervisor_mod, "terminate_process", terminator)
    monkeypatch.setenv("SMOOTH_OPERATOR_INSTALL_DIR", str(tmp_path))
    client = SmoothOperatorClient.from_env(
        transport=httpx.MockTransport(lambda request: httpx.Response(200, json="pong")),
        poll_interval=0.01,
    )
    monkeypatch.setattr(context, "_global_client", client)

    out = json.loads(event_loop.run_until_complete(server.smooth_operator__start_server()))
    assert out == {"ok": True, "base_url": "http://localhost:45678"}

    assert json.loads(server.smooth_operator__stop_server()) == {"ok": True}
    assert len(terminator.calls) == 1
    assert context._global_client is None

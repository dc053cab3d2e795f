# tests/_utils.py
import json
from pathlib import Path

import httpx


class FakeProcess:
    """Stands in for subprocess.Popen; never touches the OS."""

    def __init__(self, pid=4242):
        self.pid = pid
        self.returncode = None

    def poll(self):
        return self.returncode

    def terminate(self):
        self.returncode = -15

    def wait(self, timeout=None):
        return self.returncode


def recording_transport(handler, calls):
    """MockTransport that appends (method, path, json_body, headers) to ``calls``."""
    def _record(request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content) if request.content else None
        calls.append((request.method, request.url.path, body, request.headers))
        return handler(request)
    return httpx.MockTransport(_record)


def pong_transport(calls=None):
    calls = [] if calls is None else calls
    return recording_transport(lambda request: httpx.Response(200, json="pong"), calls)


def port_file_arg(cmd):
    """Bare port-file name out of a server command line."""
    for arg in cmd:
        if arg.startswith("/portnrfile="):
            return arg.split("=", 1)[1]
    raise AssertionError(f"no /portnrfile= in {cmd}")


class FakeLauncher:
    """
    Replacement for launch_server_process.

    Records the command and, if ``port`` is given, writes the port file the
    way the real server would.
    """

    def __init__(self, port=None):
        self.port = port
        self.calls = []
        self.process = FakeProcess()

    def __call__(self, cmd, cwd):
        self.calls.append((list(cmd), Path(cwd)))
        if self.port is not None:
            (Path(cwd) / port_file_arg(cmd)).write_text(f"{self.port}\n")
        return self.process


class TerminateRecorder:
    def __init__(self):
        self.calls = []

    def __call__(self, proc, wait_secs):
        self.calls.append((proc, wait_secs))
        return None

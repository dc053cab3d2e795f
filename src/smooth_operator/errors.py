"""Exception taxonomy for the client.

Every failure the client surfaces derives from ``SmoothOperatorError`` so
callers can catch the whole family, while still telling "never started",
"timed out waiting for the server" and "server answered with an error"
apart.
"""

from typing import Optional


__all__ = [
    "SmoothOperatorError",
    "AlreadyConfiguredError",
    "StartInProgressError",
    "InstallationMissingError",
    "InstallationError",
    "SpawnError",
    "HandshakeTimeoutError",
    "ServerUnresponsiveError",
    "BaseUrlNotSetError",
    "HttpStatusError",
    "ResponseParseError",
    "PortFileError",
]


class SmoothOperatorError(Exception):
    """Base class for all client errors."""


class AlreadyConfiguredError(SmoothOperatorError):
    """start_server() called while a base URL is already known."""

    def __init__(self, base_url: str):
        super().__init__(f"Cannot start server when base URL has been already set ({base_url}).")
        self.base_url = base_url


class StartInProgressError(AlreadyConfiguredError):
    """start_server() called while an earlier start on the same client is still running."""

    def __init__(self, pid: Optional[int] = None):
        SmoothOperatorError.__init__(
            self, f"Cannot start server while a start is already in progress (pid={pid})."
        )
        self.base_url = None
        self.pid = pid


class InstallationMissingError(SmoothOperatorError, FileNotFoundError):
    """The server installation folder does not exist."""

    def __init__(self, path: str):
        super().__init__(
            f"Installation folder not found at {path}. "
            "Please ensure the server package was installed correctly."
        )
        self.path = path


class InstallationError(SmoothOperatorError):
    """The installer could not find or extract the packaged server."""


class SpawnError(SmoothOperatorError):
    """The server process could not be created."""


class HandshakeTimeoutError(SmoothOperatorError, TimeoutError):
    """The server never wrote its port file."""

    def __init__(self, timeout: float):
        super().__init__(f"Server failed to report port number within {timeout:g} seconds.")
        self.timeout = timeout


class ServerUnresponsiveError(SmoothOperatorError, TimeoutError):
    """The server never answered the health check."""

    def __init__(self, timeout: float, base_url: Optional[str] = None):
        where = f" at {base_url}" if base_url else ""
        super().__init__(f"Server{where} failed to become responsive within {timeout:g} seconds.")
        self.timeout = timeout
        self.base_url = base_url


class BaseUrlNotSetError(SmoothOperatorError):
    """A request was attempted before the client knows where the server is."""

    def __init__(self):
        super().__init__(
            "BaseUrl is not set. You must call start_server() first, "
            "or provide a base_url in the constructor."
        )


class HttpStatusError(SmoothOperatorError):
    """The server answered with a status outside [200, 300)."""

    def __init__(self, status_code: int, url: Optional[str] = None):
        super().__init__(f"Request failed with status code {status_code}")
        self.status_code = status_code
        self.url = url


class ResponseParseError(SmoothOperatorError):
    """The response body is not valid JSON."""

    def __init__(self, detail: str):
        super().__init__(f"Failed to parse response: {detail}")
        self.detail = detail


class PortFileError(SmoothOperatorError, ValueError):
    """The port file held something other than a port number."""

    def __init__(self, content: str):
        super().__init__(f"Server reported an invalid port number: {content!r}")
        self.content = content

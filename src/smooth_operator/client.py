"""Main client for the Smooth Operator Agent Tools server."""

import atexit
from pathlib import Path
from typing import Any, Optional

import httpx

from .api import AutomationApi, ChromeApi, CodeApi, KeyboardApi, MouseApi, ScreenshotApi, SystemApi
from .config.environment import get_env_config
from .dispatcher import Dispatcher
from .server.supervisor import ServerSupervisor
from .session import ClientSession

import logging
logger = logging.getLogger(__name__)


class SmoothOperatorClient:
    """
    Client for the Agent Tools server.

    Either call ``start_server()`` to launch the locally installed server,
    or pass ``base_url`` to talk to one that is already running. Requests
    made before a base URL is known fail with ``BaseUrlNotSetError``.

    Usage:
        async with SmoothOperatorClient() as client:
            await client.start_server()
            shot = await client.screenshot.take()

    Args:
        api_key: Bearer token for endpoints that need one (mostly the AI ones).
        base_url: Address of an already running server. start_server() is
            refused when this is given.
        transport: httpx transport, for tests or custom networking.
        install_dir: Installation folder override.
        startup_timeout: Budget for port discovery plus readiness, seconds.
        poll_interval: Pause between startup polls, seconds.
        stop_wait: How long teardown waits for the server to exit, seconds.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        install_dir: Optional[Path] = None,
        startup_timeout: Optional[float] = None,
        poll_interval: Optional[float] = None,
        stop_wait: Optional[float] = None,
    ):
        self.session = ClientSession(base_url=base_url or None, api_key=api_key or None)
        self._transport = transport
        self._supervisor = ServerSupervisor(
            self.session,
            transport=transport,
            install_dir=install_dir,
            startup_timeout=startup_timeout,
            poll_interval=poll_interval,
            stop_wait=stop_wait,
        )

        self.screenshot = ScreenshotApi(self)
        self.system = SystemApi(self)
        self.mouse = MouseApi(self)
        self.keyboard = KeyboardApi(self)
        self.chrome = ChromeApi(self)
        self.automation = AutomationApi(self)
        self.code = CodeApi(self)

    @classmethod
    def from_env(cls, **kwargs) -> "SmoothOperatorClient":
        """Build a client from SMOOTH_OPERATOR_* environment variables (and .env)."""
        cfg = get_env_config()
        kwargs.setdefault("install_dir", cfg["install_dir"])
        return cls(api_key=cfg["api_key"], base_url=cfg["base_url"], **kwargs)

    @property
    def base_url(self) -> Optional[str]:
        return self.session.base_url

    @property
    def disposed(self) -> bool:
        return self.session.disposed

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def start_server(self) -> str:
        """
        Launch the installed server and wait until it answers.

        Returns:
            The discovered base URL.

        Raises:
            AlreadyConfiguredError, StartInProgressError, InstallationMissingError, SpawnError,
            HandshakeTimeoutError, PortFileError, ServerUnresponsiveError
        """
        base_url = await self._supervisor.start()
        atexit.register(self.stop_server)
        return base_url

    def stop_server(self) -> None:
        """Stop the server if this client started it. Never raises, never blocks."""
        self._supervisor.stop()

    def dispose(self) -> None:
        """Release everything this client owns. Idempotent."""
        if self.session.disposed and not self.session.owns_process():
            return
        self.stop_server()
        atexit.unregister(self.stop_server)

    async def __aenter__(self) -> "SmoothOperatorClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.dispose()

    def __enter__(self) -> "SmoothOperatorClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.dispose()

    # ------------------------------------------------------------------
    # Requests
    # ------------------------------------------------------------------

    @property
    def dispatcher(self) -> Dispatcher:
        return Dispatcher(self.session.base_url, self.session.api_key, self._transport)

    async def get(self, path: str) -> Any:
        """GET ``path`` and return the JSON reply with camelCase keys."""
        return await self.dispatcher.get(path)

    async def post(self, path: str, payload: Any = None) -> Any:
        """POST ``payload`` (``{}`` when None) as JSON and return the camelCase reply."""
        return await self.dispatcher.post(path, payload)


__all__ = ["SmoothOperatorClient"]

"""Server lifecycle: launch, port handshake, readiness, teardown."""

import asyncio
import platform
from pathlib import Path
from typing import Optional

import httpx

from ..config.paths import installation_folder, port_file_name, port_file_path
from ..constants import LOCAL_HOST, POLL_INTERVAL_SECS, STARTUP_TIMEOUT_SECS, STOP_WAIT_SECS
from ..dispatcher import Dispatcher
from ..errors import (
    AlreadyConfiguredError,
    InstallationMissingError,
    ServerUnresponsiveError,
    StartInProgressError,
)
from ..session import ClientSession
from .handshake import make_handshake_token, clear_port_file, wait_for_port
from .launcher import build_server_command, launch_server_process
from .process import terminate_process
from .readiness import wait_until_ready

import logging
logger = logging.getLogger(__name__)


class ServerSupervisor:
    """
    Owns the server process of one ``ClientSession``.

    ``start()`` spawns the server, discovers its port and waits until it
    answers pings; only then does the session get a base URL. Port
    discovery and probing share one ``startup_timeout`` budget. If anything
    fails after the spawn, the process is stopped before the error
    propagates.
    """

    def __init__(
        self,
        session: ClientSession,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        install_dir: Optional[Path] = None,
        system: Optional[str] = None,
        startup_timeout: Optional[float] = None,
        poll_interval: Optional[float] = None,
        stop_wait: Optional[float] = None,
    ):
        self.session = session
        self._transport = transport
        self._install_dir = Path(install_dir) if install_dir else None
        self._system = system
        self.startup_timeout = STARTUP_TIMEOUT_SECS if startup_timeout is None else startup_timeout
        self.poll_interval = POLL_INTERVAL_SECS if poll_interval is None else poll_interval
        self.stop_wait = STOP_WAIT_SECS if stop_wait is None else stop_wait

    def resolve_install_dir(self) -> Path:
        if self._install_dir is not None:
            return self._install_dir
        return installation_folder(self._system or platform.system())

    async def start(self) -> str:
        """
        Launch the server and return its base URL.

        Raises:
            AlreadyConfiguredError: the session already has a base URL
            StartInProgressError: another start() on this session has not finished
            InstallationMissingError: installation folder does not exist
            SpawnError: the process could not be created
            HandshakeTimeoutError: no port file within the budget
            PortFileError: port file held garbage
            ServerUnresponsiveError: no "pong" within the budget
        """
        session = self.session
        if session.base_url is not None:
            raise AlreadyConfiguredError(session.base_url)
        if session.process is not None:
            # An earlier start() owns a process and is still polling.
            raise StartInProgressError(getattr(session.process, "pid", None))

        logger.info("Starting server...")
        install_dir = self.resolve_install_dir()
        if not install_dir.is_dir():
            raise InstallationMissingError(str(install_dir))
        logger.info(f"Using installation folder: {install_dir}")

        token = make_handshake_token()
        clear_port_file(port_file_path(install_dir, token))

        cmd = build_server_command(install_dir, port_file_name(token), self._system)
        proc = launch_server_process(cmd, install_dir)
        session.process = proc
        session.disposed = False
        logger.info(f"Server process started, pid={proc.pid}.")

        loop = asyncio.get_running_loop()
        deadline = loop.time() + self.startup_timeout
        try:
            port = await wait_for_port(
                install_dir,
                token,
                deadline=deadline,
                interval=self.poll_interval,
                timeout=self.startup_timeout,
            )
            base_url = f"http://{LOCAL_HOST}:{port}"
            logger.info(f"Server reported back it is running at port {port}.")

            probe = Dispatcher(base_url, session.api_key, self._transport)
            if not await wait_until_ready(probe, deadline=deadline, interval=self.poll_interval):
                raise ServerUnresponsiveError(self.startup_timeout, base_url)
        except BaseException:
            # Also covers cancellation; a failed start leaves no process behind.
            self.release()
            raise

        session.base_url = base_url
        logger.info("Server ping successful, server is running.")
        return base_url

    def release(self) -> None:
        """Terminate the owned process, if any. Never raises."""
        proc = self.session.process
        if proc is None:
            return
        self.session.process = None
        try:
            self.session.reaper = terminate_process(proc, self.stop_wait)
        except Exception as e:
            logger.debug(f"Stopping server pid={getattr(proc, 'pid', None)} failed: {e!r}")

    def stop(self) -> None:
        """
        Stop the owned server and mark the session disposed.

        Safe to call any number of times, with or without a running server.
        Returns immediately; the bounded wait for exit runs in the background.
        """
        if self.session.disposed and self.session.process is None:
            return
        self.release()
        self.session.disposed = True


__all__ = ["ServerSupervisor"]

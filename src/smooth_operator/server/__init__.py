"""Server process management: launch, port handshake, readiness, teardown."""

from .handshake import (
    make_handshake_token,
    clear_port_file,
    read_port_file,
    wait_for_port,
)
from .launcher import build_server_command, launch_server_process
from .process import terminate_process
from .readiness import ping, wait_until_ready
from .supervisor import ServerSupervisor

__all__ = [
    "make_handshake_token",
    "clear_port_file",
    "read_port_file",
    "wait_for_port",
    "build_server_command",
    "launch_server_process",
    "terminate_process",
    "ping",
    "wait_until_ready",
    "ServerSupervisor",
]

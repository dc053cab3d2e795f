"""
Per-client session state.

One ``ClientSession`` belongs to exactly one ``SmoothOperatorClient``.
Nothing here is shared between clients: two clients never hold the same
process handle, and each start attempt uses its own handshake token.

Thread Safety:
    Not thread-safe. A session is driven from a single event loop.
"""

import subprocess
import threading
from dataclasses import dataclass
from typing import Optional


@dataclass
class ClientSession:
    """
    Attributes:
        base_url: ``http://localhost:<port>`` once known, or a caller-supplied URL
        api_key: Bearer token attached to every request, if any
        process: Server process this session started and must stop
        reaper: Background thread waiting for a stopped server to exit
        disposed: Set by stop/dispose; further teardown calls are no-ops
    """

    base_url: Optional[str] = None
    api_key: Optional[str] = None
    process: Optional[subprocess.Popen] = None
    reaper: Optional[threading.Thread] = None
    disposed: bool = False

    def is_started(self) -> bool:
        """True when requests can be dispatched."""
        return self.base_url is not None

    def owns_process(self) -> bool:
        return self.process is not None


__all__ = ["ClientSession"]

"""
Global constants and configuration defaults.
No dependencies - safe to import from anywhere.
"""

import os

# ============================================================================
# Server Startup Configuration
# ============================================================================

STARTUP_TIMEOUT_SECS = float(os.getenv("SMOOTH_OPERATOR_STARTUP_TIMEOUT_SECS", "30"))
"""Shared budget for port discovery plus readiness probing, in seconds."""

POLL_INTERVAL_SECS = float(os.getenv("SMOOTH_OPERATOR_POLL_INTERVAL_SECS", "0.1"))
"""Pause between port-file checks and between ping attempts."""

STOP_WAIT_SECS = float(os.getenv("SMOOTH_OPERATOR_STOP_WAIT_SECS", "5"))
"""How long the background reaper waits for the server to exit after terminate."""


# ============================================================================
# Installation Layout
# ============================================================================

INSTALL_SUBDIR = ("SmoothOperator", "AgentToolsServer")
"""Path components appended to the platform application-data directory."""

SERVER_EXECUTABLE = "smooth-operator-server.exe"

VERSION_MARKER = "installedversion.txt"
"""Written by the installer after a successful extraction."""


# ============================================================================
# Handshake
# ============================================================================

HANDSHAKE_TOKEN_MIN = 1_000_000
HANDSHAKE_TOKEN_MAX = 100_000_000
"""Token range, upper bound exclusive."""

PLACEHOLDER_API_KEY = "no_api_key_provided"
"""Passed on the server command line; real credentials travel in request headers."""


# ============================================================================
# HTTP
# ============================================================================

PING_PATH = "/tools-api/ping"
PING_EXPECTED = "pong"
LOCAL_HOST = "localhost"

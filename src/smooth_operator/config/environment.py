"""Environment configuration."""

import os
from typing import Optional

from dotenv import load_dotenv

import logging
logger = logging.getLogger(__name__)

load_dotenv()


def _env(name: str) -> Optional[str]:
    return (os.getenv(name) or "").strip() or None


def get_env_config() -> dict:
    """
    Read client settings from the environment (and a .env file, if present).

    Optional:   SMOOTH_OPERATOR_API_KEY       bearer token sent with every request
                SMOOTH_OPERATOR_BASE_URL      attach to an already running server
                SMOOTH_OPERATOR_INSTALL_DIR   override the installation folder

    A base URL means the server is managed elsewhere; start_server() will
    refuse to run for a client built from such a config.
    """
    base_url = _env("SMOOTH_OPERATOR_BASE_URL")
    if base_url:
        base_url = base_url.rstrip("/")

    return {
        "api_key": _env("SMOOTH_OPERATOR_API_KEY"),
        "base_url": base_url,
        "install_dir": _env("SMOOTH_OPERATOR_INSTALL_DIR"),
    }

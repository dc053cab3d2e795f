"""Configuration management for the server client."""

from .environment import get_env_config

from .paths import (
    app_data_dir,
    installation_folder,
    server_executable_path,
    version_marker_path,
    port_file_name,
    port_file_path,
)

__all__ = [
    "get_env_config",
    "app_data_dir",
    "installation_folder",
    "server_executable_path",
    "version_marker_path",
    "port_file_name",
    "port_file_path",
]

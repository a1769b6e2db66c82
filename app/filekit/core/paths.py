"""XDG-compliant path management for filekit.

filekit itself keeps no state on disk. The only file it looks for is an
optional user configuration file following the XDG Base Directory
Specification:

- Config: ~/.config/filekit/config.toml
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "filekit"


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/filekit/ (or XDG_CONFIG_HOME/filekit/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_settings_path() -> Path:
    """Get the user settings file path.

    Returns:
        Path to ~/.config/filekit/config.toml.
    """
    return get_config_dir() / "config.toml"

from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Resolves the per-user data directory that holds the JSON configuration
file, uniformly across Windows and Unix-like systems.
"""

import os

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "SizeTree"
UNIX_APP_DIR_NAME = ".sizetree"

# Overrides the data directory (used by tests and sandboxed runs)
DATA_DIR_ENV = "SIZETREE_DATA_DIR"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Override: $SIZETREE_DATA_DIR
    - Windows: %LOCALAPPDATA%/SizeTree
    - Linux/Mac: ~/.sizetree

    Returns:
        str: Absolute path to the application data directory.
    """
    path = os.environ.get(DATA_DIR_ENV, "")

    if not path and os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    try:
        os.makedirs(path, exist_ok=True)
    except OSError:
        pass

    return os.path.abspath(path)


def get_config_path() -> str:
    """Absolute path of the persistent JSON configuration file."""
    return os.path.join(get_user_data_dir(), "config.json")

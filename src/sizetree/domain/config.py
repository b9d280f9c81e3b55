from __future__ import annotations

"""
Configuration Domain Management.

Handles the persistent JSON configuration of the analyzer and its
defaults. The stored file carries a version stamp and the last used
session settings.
"""

import json
import logging
import os
from typing import Any, Dict

from sizetree.domain.constants import (
    CURRENT_CONFIG_VERSION,
    DEFAULT_SIZE_THRESHOLD,
    DISK_CAPACITY,
    REQUIRED_FREE_SPACE,
)
from sizetree.infra.fs import get_config_path

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------

def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration of an analysis.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Input
        "input_path": "",

        # Queries
        "size_threshold": DEFAULT_SIZE_THRESHOLD,
        "disk_capacity": DISK_CAPACITY,
        "required_free_space": REQUIRED_FREE_SPACE,
        "use_size_cache": False,

        # Output
        "print_tree": False,

        # Diagnostics
        "log_level": "INFO",
        "log_file": "",
    }


def get_default_app_state() -> Dict[str, Any]:
    """Full structure of config.json."""
    return {
        "version": CURRENT_CONFIG_VERSION,
        "last_session": get_default_config(),
    }

# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------

def load_app_state(path: str = "") -> Dict[str, Any]:
    """
    Load application state from disk.

    A missing or unreadable file yields the default state; unknown keys in
    the stored session are kept so the validator can report them.

    Args:
        path: Config file to read, the per-user file when empty.
    """
    config_file = path or get_config_path()
    state = get_default_app_state()

    if not os.path.exists(config_file):
        logger.debug("Config file not found. Returning defaults.")
        return state

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config '{config_file}': {e}. Using defaults.")
        return state

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return state

    session = data.get("last_session")
    if isinstance(session, dict):
        state["last_session"].update(session)
    return state


def save_app_state(state: Dict[str, Any], path: str = "") -> None:
    """Persist application state to disk."""
    config_file = path or get_config_path()
    try:
        os.makedirs(os.path.dirname(os.path.abspath(config_file)), exist_ok=True)
        state["version"] = CURRENT_CONFIG_VERSION
        with open(config_file, "w", encoding="utf-8") as f:
            json.dump(state, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {config_file}")
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")

# -----------------------------------------------------------------------------
# Facade API
# -----------------------------------------------------------------------------

def load_config(path: str = "") -> Dict[str, Any]:
    """Retrieve the last session configuration merged over the defaults."""
    state = load_app_state(path)
    config = get_default_config()
    config.update(state.get("last_session", {}))
    return config


def save_config(config: Dict[str, Any], path: str = "") -> None:
    """Save the provided config as the last session."""
    state = load_app_state(path)
    state["last_session"] = config
    save_app_state(state, path)

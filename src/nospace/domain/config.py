from __future__ import annotations

"""
Configuration Domain Management.

Handles persistent storage of query preferences using JSON. The stored
file only needs to carry the keys a user wants to change; everything else
falls back to the defaults below.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from nospace.domain.constants import (
    CURRENT_CONFIG_VERSION,
    DISK_CAPACITY,
    REQUIRED_FREE_SPACE,
    SMALL_DIRECTORY_THRESHOLD,
)
from nospace.infra.fs import STDIN_MARKER, get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_ENV_VAR = "NOSPACE_CONFIG"
CONFIG_FILE_NAME = "config.json"


def get_config_path() -> str:
    """Resolve the config file location, honoring the NOSPACE_CONFIG override."""
    override = os.environ.get(CONFIG_ENV_VAR, "").strip()
    if override:
        return os.path.abspath(os.path.expanduser(override))
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Input
        "input_path": STDIN_MARKER,
        "parts": "all",

        # Query parameters
        "small_dir_threshold": SMALL_DIRECTORY_THRESHOLD,
        "disk_capacity": DISK_CAPACITY,
        "required_free_space": REQUIRED_FREE_SPACE,

        # Parsing behavior
        "strict_root": True,

        # Output
        "show_tree": False,
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the stored configuration merged over the defaults.

    Args:
        path: Optional explicit config file; defaults to get_config_path().

    Returns:
        Dict[str, Any]: The merged configuration, or defaults on failure.
    """
    config = get_default_config()
    config_path = path or get_config_path()

    if not os.path.exists(config_path):
        logger.debug("Config file not found. Returning defaults.")
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return config

    data.pop("version", None)
    config.update(data)
    return config


def save_config(config: Dict[str, Any], path: Optional[str] = None) -> bool:
    """
    Persist the configuration to disk.

    Args:
        config: The configuration dictionary to save.
        path: Optional explicit config file; defaults to get_config_path().

    Returns:
        bool: True if the file was written.
    """
    config_path = path or get_config_path()
    payload = dict(config)
    payload["version"] = CURRENT_CONFIG_VERSION
    try:
        os.makedirs(os.path.dirname(config_path), exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {config_path}")
        return True
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
        return False

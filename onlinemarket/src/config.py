"""
Configuration management for the Online Market collector.

Handles loading and saving configuration with defaults merged in.
"""

import json
import os
import logging
from typing import Dict, Any, Optional


# Collector root directory
APP_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
CONFIG_FILE = os.path.join(APP_DIR, "config.json")

BASE_URL = "https://onlinemarket.com/api"


# Default configuration
DEFAULT_CONFIG = {
    "_SITE_CONFIG": "# Online Market API",
    "base_url": BASE_URL,
    "timeout": None,  # seconds; None waits for the API indefinitely
    "user_agent": "",  # blank = default browser user agent

    "_USER_SETTINGS": "# Application Settings",
    "log_file": "",
}


def load_config(config_file: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from file, falling back to defaults.

    A missing file is created with the defaults only when its path was
    given explicitly; the implicit CONFIG_FILE is never written.

    Args:
        config_file: Path to config JSON (defaults to CONFIG_FILE)

    Returns:
        Configuration dictionary
    """
    explicit = bool(config_file)
    config_file = config_file or CONFIG_FILE

    if not os.path.exists(config_file):
        if explicit:
            logging.info(f"Config file not found, creating default: {config_file}")
            save_config(DEFAULT_CONFIG, config_file)
        return DEFAULT_CONFIG.copy()

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            config = json.load(f)

        # New keys from DEFAULT_CONFIG fill in anything the file lacks
        merged = DEFAULT_CONFIG.copy()
        merged.update(config)

        return merged

    except Exception as e:
        logging.error(f"Failed to load config: {e}")
        return DEFAULT_CONFIG.copy()


def save_config(config: Dict[str, Any], config_file: Optional[str] = None):
    """
    Save configuration to file.

    Args:
        config: Configuration dictionary
        config_file: Path to config JSON (defaults to CONFIG_FILE)
    """
    config_file = config_file or CONFIG_FILE
    try:
        config_dir = os.path.dirname(config_file)
        if config_dir:
            os.makedirs(config_dir, exist_ok=True)

        with open(config_file, "w", encoding="utf-8") as f:
            json.dump(config, f, indent=4, ensure_ascii=False)

    except Exception as e:
        logging.error(f"Failed to save config: {e}")

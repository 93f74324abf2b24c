"""
Configuration loading and logging setup for the catalog API
"""
from __future__ import annotations

import copy
import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parent.parent
DEFAULT_CONFIG_PATH = PROJECT_ROOT / "catalog_config.yaml"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

DEFAULTS: Dict[str, Any] = {
    "providers": {
        "comicvine": {
            "base_url": "https://comicvine.gamespot.com/api",
            "timeout": 20,
            "page_size": 100,
        },
        "getcomics": {
            "base_url": "https://getcomics.info",
            "timeout": 20,
            "page_size": 12,
            "fetch_details": True,
        },
    },
    "breaker": {
        "failure_threshold": 3,
        "reset_timeout": 300,
    },
    "logging": {
        "level": "INFO",
        "file": None,
        "max_bytes": 10485760,
        "backup_count": 5,
    },
}


def _merge(base: dict, override: dict) -> dict:
    merged = copy.deepcopy(base)
    for key, value in (override or {}).items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_path: Optional[str] = None) -> dict:
    """Load the YAML config on top of the built-in defaults.

    An explicit path (argument or VANQUISH_CONFIG) must exist; the default
    catalog_config.yaml is optional.
    """
    load_dotenv()

    explicit = config_path or os.getenv("VANQUISH_CONFIG")
    config_file = Path(explicit) if explicit else DEFAULT_CONFIG_PATH
    if not config_file.exists():
        if explicit:
            raise FileNotFoundError(f"Configuration file not found: {config_file}")
        return copy.deepcopy(DEFAULTS)

    with open(config_file, "r") as f:
        loaded = yaml.safe_load(f) or {}

    return _merge(DEFAULTS, loaded)


def merge_config(overrides: Optional[dict]) -> dict:
    """Defaults plus an in-memory override dict (used by tests and embedders)."""
    return _merge(DEFAULTS, overrides or {})


def configure_logging(config: dict) -> logging.Logger:
    """Attach console (and optional rotating file) handlers to the package logger."""
    log_config = config.get("logging", {})
    log_level = getattr(logging, str(log_config.get("level", "INFO")).upper(), logging.INFO)

    logger = logging.getLogger("vanquish")
    logger.setLevel(log_level)

    # create_app may run several times in one process (tests); keep one set of handlers
    for handler in list(logger.handlers):
        if getattr(handler, "_vanquish_handler", False):
            logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    console_handler._vanquish_handler = True
    logger.addHandler(console_handler)

    log_file = log_config.get("file")
    if log_file:
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=log_config.get("max_bytes", 10485760),
            backupCount=log_config.get("backup_count", 5),
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        file_handler._vanquish_handler = True
        logger.addHandler(file_handler)

    return logger

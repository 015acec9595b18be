"""Dial configuration module."""

from .dial_config import (
    DIAL_CONFIG,
    RENDER_STYLES,
    get_setting,
    load_config,
    merge_config,
    validate_config,
)

__all__ = [
    "DIAL_CONFIG",
    "RENDER_STYLES",
    "get_setting",
    "load_config",
    "merge_config",
    "validate_config",
]

"""
Dial Configuration
==================
All settings for the multiplication table, the rotary dial and the picker.
Single source of truth. Every component reads from here.

Usage:
    from octodial.config import DIAL_CONFIG, get_setting
    triples = DIAL_CONFIG['algebra']['triples']
    style = get_setting('display.style')          # 'ascii'

An optional YAML file can override any subset of keys:

    display:
      style: unicode
    keys:
      next: [ArrowRight, l]
"""

import copy
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

logger = logging.getLogger(__name__)


DIAL_CONFIG = {

    # =================================================================
    # Algebra: the seven visible triples, one per rule position
    # =================================================================
    'algebra': {
        'n_generators': 7,
        'triples': [
            [0, 1, 3],
            [1, 2, 4],
            [2, 3, 5],
            [3, 4, 6],
            [4, 5, 0],
            [5, 6, 1],
            [6, 0, 2],
        ],
    },

    # =================================================================
    # Rotary dial
    # =================================================================
    'rotary': {
        # |angle - canonical| below this counts as settled
        'tolerance': 1e-9,
    },

    # =================================================================
    # Display
    # =================================================================
    'display': {
        'style': 'ascii',        # 'ascii' → i_0 i_1 = i_3, 'unicode' → i₀i₁ = i₃
    },

    # =================================================================
    # Keyboard bindings (key names as reported by the input layer)
    # =================================================================
    'keys': {
        'next': ['ArrowRight', 'ArrowDown', ' '],
        'previous': ['ArrowLeft', 'ArrowUp'],
    },

    # =================================================================
    # Logging
    # =================================================================
    'logging': {
        'level': 'WARNING',
    },
}

RENDER_STYLES = ('ascii', 'unicode')


def get_setting(path: str, default=None, config: Optional[Dict[str, Any]] = None):
    """
    Get a config value by dot-separated path.

    Usage:
        get_setting('display.style')         → 'ascii'
        get_setting('rotary.tolerance')      → 1e-9
        get_setting('missing.key', 42)       → 42
    """
    keys = path.split('.')
    val = DIAL_CONFIG if config is None else config
    for key in keys:
        if isinstance(val, dict) and key in val:
            val = val[key]
        else:
            return default
    return val


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge override into base in place. Lists and scalars replace."""
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def merge_config(override: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Defaults with a partial config dict merged over them. The defaults
    themselves are never modified.
    """
    config = copy.deepcopy(DIAL_CONFIG)
    if override:
        _deep_merge(config, copy.deepcopy(override))
    return config


def load_config(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Defaults merged with an optional YAML override file.

    A missing file is not an error: the defaults are returned and a
    warning is logged. A file that cannot be parsed, or whose top level
    is not a mapping, raises ValueError.
    """
    config = copy.deepcopy(DIAL_CONFIG)
    if path is None:
        return config

    path = Path(path)
    if not path.exists():
        logger.warning(f"Config override not found at {path}, using defaults")
        return config

    import yaml

    try:
        with open(path) as f:
            override = yaml.safe_load(f)
    except OSError as e:
        raise ValueError(f"Could not read config override {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ValueError(f"Could not parse config override {path}: {e}") from e

    if override is None:
        return config
    if not isinstance(override, dict):
        raise ValueError(
            f"Config override {path} must be a mapping, got {type(override).__name__}"
        )

    logger.debug(f"Applying config override from {path}: {sorted(override)}")
    return merge_config(override)


def validate_config(config: Optional[Dict[str, Any]] = None) -> List[str]:
    """Check config for internal consistency. Returns a list of problems."""
    from octodial.algebra.table import TripleConfigurationError, verify_covering

    config = DIAL_CONFIG if config is None else config
    errors = []

    style = get_setting('display.style', config=config)
    if style not in RENDER_STYLES:
        errors.append(f"display.style must be one of {RENDER_STYLES}, got {style!r}")

    tolerance = get_setting('rotary.tolerance', config=config)
    if not isinstance(tolerance, (int, float)) or tolerance <= 0:
        errors.append(f"rotary.tolerance must be a positive number, got {tolerance!r}")

    next_keys = set(get_setting('keys.next', [], config=config))
    previous_keys = set(get_setting('keys.previous', [], config=config))
    both = next_keys & previous_keys
    if both:
        errors.append(f"keys bound to both next and previous: {sorted(both)}")

    n_generators = get_setting('algebra.n_generators', config=config)
    if n_generators != 7:
        errors.append(f"algebra.n_generators must be 7, got {n_generators!r}")

    triples = get_setting('algebra.triples', [], config=config)
    if not isinstance(triples, (list, tuple)) or not all(
        isinstance(t, (list, tuple)) and len(t) == 3 for t in triples
    ):
        errors.append(f"algebra.triples must be a list of 3-element lists, got {triples!r}")
        return errors

    try:
        verify_covering(triples)
    except TripleConfigurationError as e:
        errors.append(f"algebra.triples: {e}")

    return errors


if __name__ == '__main__':
    import json
    print(json.dumps(DIAL_CONFIG, indent=2))

    errors = validate_config()
    if errors:
        print("\nValidation errors:")
        for e in errors:
            print(f"  - {e}")
    else:
        print("\nConfig valid ✓")

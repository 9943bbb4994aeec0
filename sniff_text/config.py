"""
Runtime settings, read from SNIFF_TEXT_* environment variables.

A ``.env`` file in the working directory is loaded first (python-dotenv),
so ``SNIFF_TEXT_MAX_EXECUTION_MS=80`` there behaves like an exported var.
"""

import os
from typing import Any, Dict

from dotenv import load_dotenv

load_dotenv()

ENV_PREFIX = "SNIFF_TEXT_"

# key -> (type, default)
CONFIG_SCHEMA: Dict[str, tuple] = {
    "max_execution_time_ms":    (float, 50.0),
    "enable_early_termination": (bool,  True),
    "include_details":          (bool,  True),
    "min_word_count":           (int,   2),
    "language":                 (str,   "english"),
    "log_level":                (str,   "WARNING"),
}

# Environment names that differ from the upper-cased key.
_ENV_ALIASES = {
    "max_execution_time_ms": "MAX_EXECUTION_MS",
    "min_word_count": "MIN_WORDS",
}

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


def env_name(key: str) -> str:
    return ENV_PREFIX + _ENV_ALIASES.get(key, key.upper())


def _coerce(key: str, expected_type: type, raw: str) -> Any:
    if expected_type is bool:
        lowered = raw.strip().lower()
        if lowered in _TRUTHY:
            return True
        if lowered in _FALSY:
            return False
        raise ValueError(f"{env_name(key)} must be a boolean, got {raw!r}")
    try:
        return expected_type(raw)
    except ValueError:
        raise ValueError(
            f"{env_name(key)} must be {expected_type.__name__}, got {raw!r}"
        ) from None


def get(key: str) -> Any:
    """Return the effective value of *key* (environment beats default)."""
    if key not in CONFIG_SCHEMA:
        raise KeyError(f"Unknown config key: {key!r}")
    expected_type, default = CONFIG_SCHEMA[key]
    raw = os.environ.get(env_name(key))
    if raw is None or raw.strip() == "":
        return default
    return _coerce(key, expected_type, raw)


def as_dict() -> Dict[str, Any]:
    return {key: get(key) for key in CONFIG_SCHEMA}

"""Application configuration helpers.

Configuration is resolved in three layers, later layers winning:

  1. Built-in defaults (``DEFAULT_CONFIG``).
  2. The first JSON config file found in ``_FILE_PATHS``.
  3. ``TCXKIT_*`` environment variables (the CLI loads a ``.env`` file into
     the environment before reading config).

No config file is required; the defaults always produce a working setup.
"""

import copy
import json
import os
from pathlib import Path
from typing import Any

from .exceptions import ConfigError
from .moving_time import DEFAULT_MOVING_SPEED_THRESHOLD
from .retrieval import DEFAULT_HTTP_TIMEOUT

# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

DEFAULT_CONFIG: dict[str, Any] = {
    "home_timezone": "UTC",
    "debug": False,
    "moving_speed_threshold": DEFAULT_MOVING_SPEED_THRESHOLD,
    "strict_avg_speed": True,
    "http_timeout": DEFAULT_HTTP_TIMEOUT,
}

# Candidate JSON config file locations (searched in order)
_FILE_PATHS: list[Path] = [
    Path("tcxkit_config.json"),
    Path("../tcxkit_config.json"),
]

# Environment variable -> (config key, converter)
_ENV_OVERRIDES = {
    "TCXKIT_HOME_TIMEZONE": ("home_timezone", str),
    "TCXKIT_DEBUG": ("debug", lambda v: v.strip().lower() in ("1", "true", "yes", "y")),
    "TCXKIT_MOVING_SPEED_THRESHOLD": ("moving_speed_threshold", float),
    "TCXKIT_STRICT_AVG_SPEED": ("strict_avg_speed", lambda v: v.strip().lower() in ("1", "true", "yes", "y")),
    "TCXKIT_HTTP_TIMEOUT": ("http_timeout", float),
}


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _load_from_file() -> dict[str, Any] | None:
    """Try each candidate path; return parsed JSON or ``None``."""
    for path in _FILE_PATHS:
        if path.exists():
            with open(path) as f:
                return json.load(f)
    return None


def _load_from_env() -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    for env, (key, convert) in _ENV_OVERRIDES.items():
        value = os.environ.get(env)
        if value:
            try:
                overrides[key] = convert(value)
            except ValueError as e:
                raise ConfigError(f"Invalid value for {env}: {value!r}") from e
    return overrides


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_config() -> dict[str, Any]:
    """Return the effective configuration.

    Keys missing from the config file keep their default value. A config
    file that is not valid JSON raises ``json.JSONDecodeError``.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    config.update(_load_from_file() or {})
    config.update(_load_from_env())
    return config


def save_config(config: dict[str, Any], path: Path | None = None) -> Path:
    """Write ``config`` as JSON to ``path`` (default: the first candidate path).

    Returns:
        The path written to.
    """
    path = path or _FILE_PATHS[0]
    with open(path, "w") as f:
        json.dump(config, f, indent=4)
    return path

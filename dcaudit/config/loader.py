"""Layered TOML configuration.

``config/default.toml`` is the base layer and ``config/{DCAUDIT_ENV}.toml``
is merged over it. Both are optional: a library embedded in another
service may run entirely on model defaults and DCAUDIT_* variables.
"""

import os
import tomllib
from functools import reduce
from pathlib import Path
from typing import Any

CONFIG_DIR_ENV = "DCAUDIT_CONFIG_DIR"
ENVIRONMENT_ENV = "DCAUDIT_ENV"
DEFAULT_ENVIRONMENT = "development"


def get_config_dir() -> Path:
    """Return DCAUDIT_CONFIG_DIR, or ``config/`` under the working directory.

    Raises:
        FileNotFoundError: If DCAUDIT_CONFIG_DIR names a missing directory
    """
    explicit = os.environ.get(CONFIG_DIR_ENV)
    if explicit is None:
        return Path.cwd() / "config"

    path = Path(explicit)
    if not path.is_dir():
        raise FileNotFoundError(f"Config directory not found: {explicit}")
    return path


def get_environment() -> str:
    return os.environ.get(ENVIRONMENT_ENV, DEFAULT_ENVIRONMENT)


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge ``override`` into a copy of ``base``; nested tables merge key by key."""
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def config_layers(config_dir: Path, env: str) -> list[Path]:
    """Existing TOML layers for ``env``, lowest precedence first."""
    candidates = [config_dir / "default.toml", config_dir / f"{env}.toml"]
    return [path for path in candidates if path.is_file()]


def load_config() -> dict[str, Any]:
    """Load and merge the TOML layers for the current environment.

    Raises:
        tomllib.TOMLDecodeError: If a layer has invalid TOML syntax
    """
    layers = []
    for path in config_layers(get_config_dir(), get_environment()):
        with path.open("rb") as f:
            layers.append(tomllib.load(f))
    return reduce(deep_merge, layers, {})

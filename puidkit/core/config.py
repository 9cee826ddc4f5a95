"""TOML configuration for named generators.

Example ``puidkit.toml``::

    [generators.session]
    chars = "safe64"
    bits = 128

    [generators.order]
    chars = "crockford32"
    total = 1e7
    risk = 1e15
"""

from __future__ import annotations

import logging
import os
import tomllib
from typing import Any, cast

from puidkit.components.config import GeneratorConfig

logger = logging.getLogger(__name__)

CONFIG_ENV = "PUIDKIT_CONFIG"
CONFIG_NAME = "puidkit.toml"


def resolve_config_path(config_path: str | None = None) -> str:
    """Resolve configuration path from env, explicit path, or defaults."""
    env_config = os.environ.get(CONFIG_ENV)
    if env_config:
        return env_config
    if config_path:
        return config_path
    candidates = [
        CONFIG_NAME,
        os.path.expanduser(f"~/{CONFIG_NAME}"),
    ]
    for candidate in candidates:
        if os.path.exists(candidate):
            return candidate
    raise FileNotFoundError(
        f"Config file not found. Set {CONFIG_ENV} or create {CONFIG_NAME}"
    )


def load_config(config_path: str | None = None) -> dict[str, Any]:
    """Load the whole configuration file."""
    resolved_path = resolve_config_path(config_path)
    if not os.path.exists(resolved_path):
        raise FileNotFoundError(
            f"Config file not found at {resolved_path}. Set {CONFIG_ENV} or create {CONFIG_NAME}"
        )
    with open(resolved_path, "rb") as f:
        config = cast(dict[str, Any], tomllib.load(f))
    logger.debug("Loaded configuration from %s", resolved_path)
    return config


def load_generator_config(name: str, config_path: str | None = None) -> GeneratorConfig:
    """Load the ``[generators.<name>]`` table as a ``GeneratorConfig``.

    Raises:
        FileNotFoundError: If no configuration file can be found
        ValueError: If the generator is not configured
        pydantic.ValidationError: If the table has invalid fields
    """
    config = load_config(config_path)
    try:
        table = cast(dict[str, Any], config["generators"][name])
    except KeyError as e:
        raise ValueError(f"Generator '{name}' not configured") from e
    return GeneratorConfig(**table)

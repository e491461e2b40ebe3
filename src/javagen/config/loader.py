"""Style configuration loader.

Loads a JSON style file and returns a validated StyleConfig instance.
Uses module-level caching so each file is only parsed once per process.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from javagen.config.models import StyleConfig
from javagen.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)

# Module-level cache
_config_cache: dict[str, StyleConfig] = {}

# Default style path — lives next to this module
_DEFAULT_CONFIG_PATH = Path(__file__).parent / "default_style.json"


def load_config(path: Optional[Path] = None) -> StyleConfig:
    """Load and validate a style config from a JSON file.

    Parameters
    ----------
    path : Path | None
        Path to a custom JSON style file.
        If ``None``, the built-in ``default_style.json`` is used.

    Returns
    -------
    StyleConfig
        Validated configuration instance.

    Raises
    ------
    FileNotFoundError
        If the specified path does not exist.
    ConfigurationError
        If the file is not valid JSON or does not match the schema.
    """
    config_path = Path(path) if path is not None else _DEFAULT_CONFIG_PATH
    cache_key = str(config_path.resolve())

    if cache_key in _config_cache:
        return _config_cache[cache_key]

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
        config = StyleConfig.model_validate(raw)
    except (json.JSONDecodeError, ValidationError) as exc:
        raise ConfigurationError(f"Invalid style config {config_path}: {exc}") from exc

    logger.debug("Loaded style config from %s", config_path)
    _config_cache[cache_key] = config
    return config


def get_config() -> StyleConfig:
    """Get the default style configuration (cached).

    This is the style ``str()`` renders with.
    """
    return load_config()


def clear_cache() -> None:
    """Clear the config cache — useful for testing."""
    _config_cache.clear()

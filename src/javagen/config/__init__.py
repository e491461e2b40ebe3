"""Rendering style configuration package."""

from javagen.config.loader import clear_cache, get_config, load_config
from javagen.config.models import StyleConfig

__all__ = ["StyleConfig", "clear_cache", "get_config", "load_config"]

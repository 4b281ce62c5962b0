"""Configuration loading and validation for assetstash."""

from __future__ import annotations

from assetstash.config.loader import build_cache, load_config
from assetstash.config.model import StashConfig

__all__ = ["StashConfig", "build_cache", "load_config"]

"""Contemplate configuration system.

Usage:
    from contemplate.core.config import ConfigManager

    manager = ConfigManager("site/contemplate.yaml")
    config = manager.load_config()
    engine = manager.build_engine(config)
"""
from __future__ import annotations

from .manager import ConfigManager, build_engine, resolve_config_path

__all__ = ["ConfigManager", "build_engine", "resolve_config_path"]

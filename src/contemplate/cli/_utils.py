"""Shared CLI utility functions."""
from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional

from contemplate.core.config import ConfigManager
from contemplate.core.engine import Engine

from ._args import TYPE_ALIASES


def get_config_manager(args: argparse.Namespace) -> ConfigManager:
    """Return a config manager for ``--config`` or the current directory."""
    config = getattr(args, "config", None)
    if config:
        return ConfigManager(Path(config))
    return ConfigManager()


def get_engine(args: argparse.Namespace) -> Engine:
    """Build the engine described by the command's configuration."""
    return get_config_manager(args).build_engine()


def get_type_tag(args: argparse.Namespace) -> Optional[str]:
    """Map ``--type`` to a type tag, expanding the short aliases."""
    raw = getattr(args, "type_tag", None)
    if raw is None:
        return None
    return TYPE_ALIASES.get(raw.lower(), raw)


__all__ = ["get_config_manager", "get_engine", "get_type_tag"]

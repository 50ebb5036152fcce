"""I/O utilities for Contemplate.

Contemplate only reads files: configuration YAML and resolved scripts. The
core resolver never writes to the filesystem.
"""
from __future__ import annotations

from .yaml import (
    dump_yaml_string,
    iter_yaml_candidates,
    read_yaml,
)

__all__ = [
    "read_yaml",
    "dump_yaml_string",
    "iter_yaml_candidates",
]

"""Shared utilities (YAML I/O, merging, dynamic loading)."""

"""YAML I/O utilities."""
from __future__ import annotations

from pathlib import Path
from typing import Any, List

import yaml


def read_yaml(
    path: Path, default: Any = None, raise_on_error: bool = False
) -> Any:
    """Read YAML with error handling.

    Returns default if file is missing or invalid, unless raise_on_error is True.

    Args:
        path: YAML file path to read
        default: Value to return if file missing or invalid (default: None)
        raise_on_error: If True, propagate exceptions instead of returning default.

    Returns:
        Any: Parsed YAML data, or default if error

    Examples:
        >>> config = read_yaml(Path("contemplate.yaml"), default={})
        >>> assert isinstance(config, dict)
    """
    path = Path(path)
    if not path.exists():
        if raise_on_error:
            raise FileNotFoundError(f"File not found: {path}")
        return default

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return data if data is not None else default
    except (OSError, yaml.YAMLError):
        if raise_on_error:
            raise
        return default


def dump_yaml_string(data: Any, sort_keys: bool = True) -> str:
    """Dump data to YAML string.

    Args:
        data: Data to dump
        sort_keys: Whether to sort keys (default: True)

    Returns:
        YAML string
    """
    return yaml.safe_dump(
        data,
        default_flow_style=False,
        sort_keys=sort_keys,
        allow_unicode=True,
    )


def iter_yaml_candidates(base: Path) -> List[Path]:
    """Return the ``.yaml`` and ``.yml`` spellings of ``base``, ``.yaml`` first.

    ``base`` may be given with or without a YAML suffix.
    """
    p = Path(base)
    stem = p.with_suffix("") if p.suffix in {".yml", ".yaml"} else p
    return [stem.with_name(stem.name + ext) for ext in (".yaml", ".yml")]


__all__ = [
    "read_yaml",
    "dump_yaml_string",
    "iter_yaml_candidates",
]

"""Common CLI argument registration utilities."""
from __future__ import annotations

import argparse

from contemplate.core.templates.resolvable import (
    TYPE_CONTROLLER_DELEGATE,
    TYPE_CONTROLLER_GET,
    TYPE_CONTROLLER_POST,
    TYPE_TEMPLATE,
)

# Short spellings accepted by --type.
TYPE_ALIASES = {
    "template": TYPE_TEMPLATE,
    "get": TYPE_CONTROLLER_GET,
    "post": TYPE_CONTROLLER_POST,
    "delegate": TYPE_CONTROLLER_DELEGATE,
}


def add_json_flag(parser: argparse.ArgumentParser) -> None:
    """Add --json flag for JSON output mode."""
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )


def add_config_flag(parser: argparse.ArgumentParser) -> None:
    """Add --config flag for an explicit configuration file.

    Without it, ``contemplate.yaml`` (or ``.yml``) in the current directory
    is used when present.
    """
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        help="Path to contemplate.yaml (default: ./contemplate.yaml if present)",
    )


def add_name_arg(parser: argparse.ArgumentParser) -> None:
    """Add the resource NAME positional argument."""
    parser.add_argument("name", help="Resource name, optionally namespaced (ns::name)")


def add_type_arg(parser: argparse.ArgumentParser) -> None:
    """Add --type argument selecting the resource type tag."""
    parser.add_argument(
        "--type",
        "-t",
        dest="type_tag",
        default=None,
        help=(
            "Type tag of the resource: template, get, post, delegate, or any "
            "literal tag configured under extensions.types"
        ),
    )


def add_verbose_flag(parser: argparse.ArgumentParser) -> None:
    """Add --verbose flag."""
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )


def add_standard_flags(parser: argparse.ArgumentParser) -> None:
    """Add standard flags that most commands use.

    Adds: --json, --config
    """
    add_json_flag(parser)
    add_config_flag(parser)


__all__ = [
    "TYPE_ALIASES",
    "add_json_flag",
    "add_config_flag",
    "add_name_arg",
    "add_type_arg",
    "add_verbose_flag",
    "add_standard_flags",
]

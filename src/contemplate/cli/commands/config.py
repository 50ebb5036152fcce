"""
Contemplate config command.

SUMMARY: Show the merged configuration

Merges bundled defaults, the configuration file and CONTEMPLATE_*
environment overrides, validates the result and prints it.
"""

from __future__ import annotations

import argparse

from contemplate.cli import OutputFormatter, add_standard_flags, get_config_manager
from contemplate.core.exceptions import ContemplateError
from contemplate.core.utils.io import dump_yaml_string

SUMMARY = "Show the merged configuration"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))
    try:
        manager = get_config_manager(args)
        config = manager.load_config()
    except ContemplateError as e:
        formatter.error(e)
        return 1

    if formatter.json_mode:
        formatter.json_output(config)
    else:
        if manager.path is not None:
            formatter.text(f"# {manager.path}")
        formatter.text(dump_yaml_string(config, sort_keys=False).rstrip())
    return 0

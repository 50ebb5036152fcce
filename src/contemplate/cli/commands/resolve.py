"""
Contemplate resolve command.

SUMMARY: Print the file a resource name resolves to

On a miss, every tried path is reported and the command exits with 1.
"""

from __future__ import annotations

import argparse

from contemplate.cli import (
    OutputFormatter,
    add_name_arg,
    add_standard_flags,
    add_type_arg,
    get_engine,
    get_type_tag,
)
from contemplate.core.exceptions import ContemplateError

SUMMARY = "Print the file a resource name resolves to"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    add_name_arg(parser)
    add_type_arg(parser)
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))
    try:
        engine = get_engine(args)
        path = engine.path(args.name, get_type_tag(args))
    except ContemplateError as e:
        formatter.error(e)
        return 1

    formatter.success({"name": args.name, "path": str(path)}, str(path))
    return 0

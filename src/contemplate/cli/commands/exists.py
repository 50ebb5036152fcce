"""
Contemplate exists command.

SUMMARY: Check whether a resource name resolves

Exit code 0 when the name resolves to a file, 1 otherwise.
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

SUMMARY = "Check whether a resource name resolves"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    add_name_arg(parser)
    add_type_arg(parser)
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))
    try:
        engine = get_engine(args)
        found = engine.exists(args.name, get_type_tag(args))
    except ContemplateError as e:
        formatter.error(e)
        return 1

    formatter.success(
        {"name": args.name, "exists": found},
        f"{args.name}: {'found' if found else 'not found'}",
    )
    return 0 if found else 1

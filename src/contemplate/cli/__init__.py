"""
Contemplate CLI package.

Commands are auto-discovered from ``commands/``.

Framework utilities for building CLI commands:
- _output: Output formatting (JSON/text modes)
- _args: Common argument registration helpers
- _utils: Shared CLI utilities
"""
from ._output import OutputFormatter, print_error
from ._args import (
    TYPE_ALIASES,
    add_json_flag,
    add_config_flag,
    add_name_arg,
    add_type_arg,
    add_verbose_flag,
    add_standard_flags,
)
from ._utils import get_config_manager, get_engine, get_type_tag

__all__ = [
    # Output formatting
    "OutputFormatter",
    "print_error",
    # Argument helpers
    "TYPE_ALIASES",
    "add_json_flag",
    "add_config_flag",
    "add_name_arg",
    "add_type_arg",
    "add_verbose_flag",
    "add_standard_flags",
    # Utilities
    "get_config_manager",
    "get_engine",
    "get_type_tag",
]

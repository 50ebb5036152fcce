"""CLI output formatting utilities.

Commands print either human-readable text or JSON (``--json``).
"""
from __future__ import annotations

import json
import sys
from typing import Any, Dict, Optional

from contemplate.core.exceptions import ContemplateError


class OutputFormatter:
    """Output formatter for CLI commands."""

    def __init__(self, json_mode: bool = False, indent: int = 2):
        self.json_mode = json_mode
        self.indent = indent

    def success(
        self,
        data: Dict[str, Any],
        message: str,
        *,
        status: str = "success",
    ) -> None:
        """Output success result.

        Args:
            data: Result data dictionary
            message: Human-readable success message (used in text mode)
            status: Status string for JSON output
        """
        if self.json_mode:
            output = {"status": status, **data}
            print(json.dumps(output, indent=self.indent, default=str))
        else:
            print(message)

    def error(self, error: Exception, message: Optional[str] = None) -> None:
        """Output error result.

        In JSON mode, Contemplate errors are reported with their
        ``to_json_error()`` payload.
        """
        msg = message or str(error)
        if self.json_mode:
            if isinstance(error, ContemplateError):
                payload = error.to_json_error()
                if message:
                    payload["message"] = message
            else:
                payload = {"message": msg, "code": type(error).__name__, "context": {}}
            output = {"status": "error", **payload}
            print(json.dumps(output, indent=self.indent, default=str), file=sys.stderr)
        else:
            print_error(msg)

    def json_output(self, data: Any) -> None:
        print(json.dumps(data, indent=self.indent, default=str))

    def text(self, message: str) -> None:
        print(message)


def print_error(message: str) -> None:
    """Print error message to stderr."""
    print(f"Error: {message}", file=sys.stderr)


__all__ = [
    "OutputFormatter",
    "print_error",
]

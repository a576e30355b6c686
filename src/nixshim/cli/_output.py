"""Unified CLI output formatting utilities.

Supports both JSON and text output modes for nixshim commands.
"""
from __future__ import annotations

import json
import sys
from typing import Any, Dict, Optional

from nixshim.core.exceptions import NixShimError


class OutputFormatter:
    """Unified output formatter for CLI commands."""

    def __init__(self, json_mode: bool = False, indent: int = 2):
        """Initialize formatter.

        Args:
            json_mode: If True, output JSON; otherwise output text
            indent: JSON indentation level
        """
        self.json_mode = json_mode
        self.indent = indent

    def error(
        self,
        error: Exception,
        message: Optional[str] = None,
        *,
        error_code: str = "error",
    ) -> None:
        """Output error result to stderr.

        Notes and suggestions attached to the error are printed after the
        message in text mode and included in the payload in JSON mode.

        Args:
            error: The exception that occurred
            message: Optional human-readable message (defaults to str(error))
            error_code: Error code for JSON output
        """
        msg = message or str(error)
        note = getattr(error, "note", None)
        suggestion = getattr(error, "suggestion", None)
        if self.json_mode:
            output: Dict[str, Any] = {
                "error": error_code,
                "message": msg,
            }
            if isinstance(error, NixShimError):
                output["code"] = error.to_json_error()["code"]
                output["context"] = error.context
            if note:
                output["note"] = note
            if suggestion:
                output["suggestion"] = suggestion
            print(json.dumps(output, indent=self.indent, default=str), file=sys.stderr)
        else:
            print(f"Error: {msg}", file=sys.stderr)
            if note:
                print(f"Note: {note}", file=sys.stderr)
            if suggestion:
                print(f"Suggestion: {suggestion}", file=sys.stderr)

    def json_output(self, data: Any) -> None:
        """Output raw JSON data."""
        print(json.dumps(data, indent=self.indent, default=str))

    def text(self, message: str) -> None:
        """Output plain text message."""
        print(message)

    def text_kv(self, key: str, value: Any, prefix: str = "  ") -> None:
        """Output key-value pair in text mode.

        Args:
            key: Key name
            value: Value to display
            prefix: Line prefix (default: two spaces for indentation)
        """
        if not self.json_mode:
            print(f"{prefix}{key}: {value}")

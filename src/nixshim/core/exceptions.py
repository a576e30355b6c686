from __future__ import annotations

from typing import Any, Dict, Mapping


class NixShimError(Exception):
    """Base exception for nixshim."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class MalformedArgumentsError(NixShimError, ValueError):
    """Raised when a flag is followed by fewer values than it takes."""

    def __init__(self, flag: str, *, expected: int, available: int) -> None:
        self.flag = flag
        self.expected = expected
        self.available = available
        noun = "argument" if expected == 1 else "arguments"
        message = f"`{flag}` takes {expected} {noun} but {available} given"
        ctx = {"flag": flag, "expected": expected, "available": available}
        NixShimError.__init__(self, message, context=ctx)
        ValueError.__init__(self, message)


class ShellDetectionError(NixShimError, ValueError):
    """Raised when a shell cannot be identified from its path."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        NixShimError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


class UnsupportedShellError(NixShimError):
    """Raised when no shell integration exists for a shell."""

    def __init__(
        self,
        message: str,
        *,
        note: str | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(message, context=context)
        self.note = note


class ConfigError(NixShimError):
    """Raised for unreadable or invalid configuration."""


class LaunchError(NixShimError, OSError):
    """Raised when the wrapped program cannot be executed."""

    def __init__(
        self,
        message: str,
        *,
        program: str,
        suggestion: str | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        ctx = dict(context or {})
        ctx.setdefault("program", program)
        NixShimError.__init__(self, message, context=ctx)
        OSError.__init__(self, message)
        self.program = program
        self.suggestion = suggestion


__all__ = [
    "NixShimError",
    "MalformedArgumentsError",
    "ShellDetectionError",
    "UnsupportedShellError",
    "ConfigError",
    "LaunchError",
]

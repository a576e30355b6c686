"""
nixshim CLI package.

Provides the command-line interface with auto-discovery of commands from
the commands/ subfolder.

Framework utilities for building CLI commands:
- _output: Output formatting (JSON/text modes)
- _args: Common argument registration helpers
- _utils: Shared CLI utilities
"""
from ._output import OutputFormatter
from ._args import add_global_flags, add_json_flag, add_wrapped_args
from ._utils import get_config, get_shell, launch_for, use_nom, wrapped_argv

__all__ = [
    # Output formatting
    "OutputFormatter",
    # Argument helpers
    "add_global_flags",
    "add_json_flag",
    "add_wrapped_args",
    # Utilities
    "get_config",
    "get_shell",
    "launch_for",
    "use_nom",
    "wrapped_argv",
]

"""
nixshim - run your own shell from `nix develop`, `nix shell` and `nix-shell`

nixshim wraps the `nix` and `nix-shell` commands, rewriting their arguments
so the interactive shell they launch is the one you actually use.
"""

__version__ = "1.0.0"
__all__ = ["__version__"]

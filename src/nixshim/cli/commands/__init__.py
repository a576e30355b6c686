"""Top-level nixshim commands (auto-discovered by the dispatcher)."""

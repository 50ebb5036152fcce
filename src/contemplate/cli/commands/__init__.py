"""Top-level Contemplate commands (auto-discovered)."""

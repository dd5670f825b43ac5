"""
Error types for the Minesweeper engine.
"""


class ConfigError(ValueError):
    """Raised when a board cannot be built from the given parameters."""

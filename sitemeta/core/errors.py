"""Configuration errors surfaced to the operator."""

from __future__ import annotations


class ConfigurationError(ValueError):
    """
    Raised when an option has the wrong shape or cannot be compiled.

    Always fatal: callers must not recover from it silently.
    """

    def __init__(self, option: str, message: str) -> None:
        self.option = option
        super().__init__(f"Option `{option}` {message}")

"""Exception hierarchy for chain-follower configuration resolution."""

from __future__ import annotations


class CursorError(ValueError):
    """
    Base exception for every configuration resolution failure.

    Also used directly for failures that only need a message.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class ParseError(CursorError):
    """Raised when a textual config value does not follow its grammar."""


class DecodeError(CursorError):
    """Raised when a point hash cannot be decoded as hexadecimal."""


class ConfigError(CursorError):
    """Raised when configuration values are well-formed but unusable."""

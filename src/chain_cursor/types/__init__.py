"""Reusable type definitions for chain-follower configuration."""

from .base import StrictBaseModel
from .exceptions import ConfigError, CursorError, DecodeError, ParseError
from .uint import BaseUint, Uint32, Uint64

__all__ = [
    # Core types
    "BaseUint",
    "Uint32",
    "Uint64",
    "StrictBaseModel",
    # Exceptions
    "CursorError",
    "ParseError",
    "DecodeError",
    "ConfigError",
]

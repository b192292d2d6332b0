"""
Network Magic
=============

The network magic is the number exchanged during the protocol handshake to
make sure both ends of a connection talk about the same chain.

Configuration sources may name a network by keyword or give the raw number:

    mainnet      -> 764824073
    testnet      -> 1097911063
    "42"         -> 42
"""

from __future__ import annotations

import logging
from typing import Any, Final

from chain_cursor.types import ParseError, Uint64

logger = logging.getLogger(__name__)


class NetworkMagic(Uint64):
    """A 64-bit network identifier used at the protocol handshake."""

    @classmethod
    def _validate(cls, value: Any) -> NetworkMagic:
        """Accept both raw integers and the textual forms of `parse_magic`."""
        if isinstance(value, str):
            return parse_magic(value)
        return super()._validate(value)


MAINNET_MAGIC: Final = NetworkMagic(764824073)
"""Handshake magic of the public mainnet."""

TESTNET_MAGIC: Final = NetworkMagic(1097911063)
"""Handshake magic of the legacy public testnet."""

_KEYWORDS: Final[dict[str, NetworkMagic]] = {
    "mainnet": MAINNET_MAGIC,
    "testnet": TESTNET_MAGIC,
}


def parse_magic(text: str) -> NetworkMagic:
    """
    Resolve a network keyword or decimal number to a magic value.

    Keywords are matched case-sensitively.

    Raises:
        ParseError: If `text` is neither a keyword nor an unsigned 64-bit decimal.
    """
    if text in _KEYWORDS:
        return _KEYWORDS[text]

    try:
        magic = NetworkMagic.from_decimal(text)
    except (ValueError, OverflowError) as e:
        raise ParseError("can't parse magic value") from e

    logger.debug("Using custom network magic %d", magic)
    return magic


def default_magic() -> NetworkMagic:
    """Return the magic used when the configuration names no network."""
    return MAINNET_MAGIC

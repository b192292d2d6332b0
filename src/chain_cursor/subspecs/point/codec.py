"""Conversion between point arguments and protocol-level chain points."""

from __future__ import annotations

import logging
import re

from chain_cursor.types import DecodeError, Uint64

from .arg import OriginArg, SpecificArg
from .protocol import ChainPoint, OriginPoint, SpecificPoint

logger = logging.getLogger(__name__)

_HEX_RE = re.compile(r"(?:[0-9a-fA-F]{2})*")


def decode_hash(hash_hex: str) -> bytes:
    """
    Decode a block hash written as plain hexadecimal.

    The text must have an even number of hex digits and nothing else: no
    `0x` prefix and no whitespace. The empty string decodes to empty bytes.

    Raises:
        DecodeError: If `hash_hex` is not valid hexadecimal.
    """
    # bytes.fromhex() would also skip whitespace between byte pairs.
    if _HEX_RE.fullmatch(hash_hex) is None:
        raise DecodeError("can't decode point hash hex value")
    return bytes.fromhex(hash_hex)


def point_to_protocol(arg: OriginArg | SpecificArg) -> ChainPoint:
    """
    Convert a point argument into the protocol point used by the sync client.

    Raises:
        DecodeError: If the hash of a specific point is not valid hexadecimal.
    """
    match arg:
        case OriginArg():
            return OriginPoint()
        case SpecificArg(slot=slot, hash=hash_hex):
            point = SpecificPoint(slot=slot, hash=decode_hash(hash_hex))
            logger.debug("Resolved chain point at slot %d", slot)
            return point
        case _:
            raise TypeError(f"Expected a point argument, got {type(arg).__name__}")


def point_from_protocol(point: ChainPoint) -> OriginArg | SpecificArg:
    """Convert a protocol point back into its argument form (lowercase hex)."""
    match point:
        case OriginPoint():
            return OriginArg()
        case SpecificPoint(slot=slot, hash=raw_hash):
            return SpecificArg(slot=Uint64(slot), hash=raw_hash.hex())
        case _:
            raise TypeError(f"Expected a chain point, got {type(point).__name__}")

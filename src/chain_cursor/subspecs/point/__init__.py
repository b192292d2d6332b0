"""Chain points: textual, structured and protocol-level forms."""

from .arg import Cursor, OriginArg, PointArg, SpecificArg, format_point, parse_point
from .codec import decode_hash, point_from_protocol, point_to_protocol
from .protocol import ChainPoint, OriginPoint, SpecificPoint

__all__ = [
    # Protocol points
    "ChainPoint",
    "OriginPoint",
    "SpecificPoint",
    # Config arguments
    "Cursor",
    "OriginArg",
    "PointArg",
    "SpecificArg",
    # Codec
    "decode_hash",
    "format_point",
    "parse_point",
    "point_from_protocol",
    "point_to_protocol",
]

"""
Chain Point Arguments
=====================

The configuration-facing form of a chain point. The block hash is kept as the
hex text it was written in, and is only decoded when the point is handed to
the protocol layer (see `codec`).

Textual form:

    origin
    <slot>,<hex-hash>

Structured form:

    {"kind": "Origin"}
    {"kind": "Specific", "slot": 4492800, "hash": "aa83...e9de"}
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BeforeValidator

from chain_cursor.types import ParseError, StrictBaseModel, Uint64

ORIGIN_LITERAL = "origin"
"""Textual form of the origin point."""


class OriginArg(StrictBaseModel):
    """Start from genesis."""

    kind: Literal["Origin"] = "Origin"
    """Discriminator field for serialization."""

    def __str__(self) -> str:
        return format_point(self)


class SpecificArg(StrictBaseModel):
    """
    Start from an explicit (slot, hash) position.

    `hash` is stored verbatim and is not checked to be hexadecimal here.
    """

    kind: Literal["Specific"] = "Specific"
    """Discriminator field for serialization."""

    slot: Uint64
    """Slot of the block."""

    hash: str
    """Hex-encoded block header hash."""

    def __str__(self) -> str:
        return format_point(self)


def parse_point(text: str) -> OriginArg | SpecificArg:
    """
    Parse the textual form of a chain point.

    Text containing a comma is split on the first comma: the left part is the
    slot and the right part is taken verbatim as the hash.

    Raises:
        ParseError: If the slot is not an unsigned 64-bit decimal, or if the
            text is neither `origin` nor `slot,hash`.
    """
    if "," in text:
        slot_text, hash_text = text.split(",", 1)
        try:
            slot = Uint64.from_decimal(slot_text)
        except (ValueError, OverflowError) as e:
            raise ParseError("can't parse slot number") from e
        return SpecificArg(slot=slot, hash=hash_text)

    if text == ORIGIN_LITERAL:
        return OriginArg()

    raise ParseError("Can't parse chain point value, expecting slot,hex-hash format")


def format_point(arg: OriginArg | SpecificArg) -> str:
    """Render a chain point in its textual form."""
    match arg:
        case OriginArg():
            return ORIGIN_LITERAL
        case SpecificArg(slot=slot, hash=hash_hex):
            return f"{slot},{hash_hex}"
        case _:
            raise TypeError(f"Expected a point argument, got {type(arg).__name__}")


def _coerce_point_arg(value: Any) -> Any:
    """
    Normalise every accepted input shape into a point argument instance.

    Accepts the textual form, the structured form, the bare `Origin` tag and
    the externally tagged `{"Specific": [slot, hash]}` form.
    """
    match value:
        case OriginArg() | SpecificArg():
            return value
        case "Origin":
            return OriginArg()
        case str():
            return parse_point(value)
        case {"kind": "Origin"}:
            return OriginArg.model_validate(value)
        case {"kind": "Specific"}:
            return SpecificArg.model_validate(value)
        case {"Specific": [slot, hash_hex]}:
            return SpecificArg(slot=slot, hash=hash_hex)
        case _:
            raise ValueError(f"Can't interpret {value!r} as a chain point")


PointArg = Annotated[Union[OriginArg, SpecificArg], BeforeValidator(_coerce_point_arg)]
"""A serialization-friendly chain point using a hex-encoded hash."""

Cursor = Optional[PointArg]
"""Last confirmed processed position, or None before anything was processed."""

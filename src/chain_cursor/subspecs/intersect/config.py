"""
Intersect Configuration
=======================

How a sync session should find its starting position on the remote chain.

Structured form (a tagged record):

    {"type": "Tip"}
    {"type": "Origin"}
    {"type": "Point", "value": "4492800,aa83...e9de"}
    {"type": "Fallbacks", "value": ["4492800,aa83...e9de", "origin"]}

The strategy is only described here. Asking the remote node to intersect is
the job of the chain-sync client.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import Field, TypeAdapter, field_validator

from chain_cursor.subspecs.point import (
    ChainPoint,
    OriginPoint,
    PointArg,
    point_to_protocol,
)
from chain_cursor.types import StrictBaseModel


class TipIntersect(StrictBaseModel):
    """Begin at the current head of the remote chain."""

    type: Literal["Tip"] = "Tip"
    """Discriminator field for serialization."""


class OriginIntersect(StrictBaseModel):
    """Begin at genesis."""

    type: Literal["Origin"] = "Origin"
    """Discriminator field for serialization."""


class PointIntersect(StrictBaseModel):
    """Begin at one explicit position."""

    type: Literal["Point"] = "Point"
    """Discriminator field for serialization."""

    value: PointArg
    """The position to intersect at."""


class FallbacksIntersect(StrictBaseModel):
    """
    Offer candidate positions in order of preference.

    The sync client tries them in sequence until the remote node accepts one.
    """

    type: Literal["Fallbacks"] = "Fallbacks"
    """Discriminator field for serialization."""

    value: tuple[PointArg, ...]
    """Candidate positions, most preferred first."""

    @field_validator("value", mode="before")
    @classmethod
    def coerce_sequence(cls, v: Any) -> Any:
        """Accept any list-like sequence of points (YAML and JSON yield lists)."""
        if isinstance(v, list):
            return tuple(v)
        return v


IntersectConfig = Annotated[
    Union[TipIntersect, OriginIntersect, PointIntersect, FallbacksIntersect],
    Field(discriminator="type"),
]
"""Discriminated union of all sync-start strategies."""

_INTERSECT_ADAPTER: TypeAdapter[IntersectConfig] = TypeAdapter(IntersectConfig)


def parse_intersect(data: Any) -> IntersectConfig:
    """
    Validate a structured intersect record into one of the strategies.

    Raises:
        pydantic.ValidationError: If the record has an unknown `type` or a
            malformed `value`.
    """
    return _INTERSECT_ADAPTER.validate_python(data)


def intersect_points(config: IntersectConfig) -> tuple[ChainPoint, ...]:
    """
    Protocol points to offer the remote node, in order.

    `Tip` has no explicit candidate and yields nothing.

    Raises:
        DecodeError: If a candidate hash is not valid hexadecimal.
    """
    match config:
        case TipIntersect():
            return ()
        case OriginIntersect():
            return (OriginPoint(),)
        case PointIntersect(value=arg):
            return (point_to_protocol(arg),)
        case FallbacksIntersect(value=args):
            return tuple(point_to_protocol(arg) for arg in args)
        case _:
            raise TypeError(f"Expected an intersect config, got {type(config).__name__}")

"""Sync-start strategies."""

from .config import (
    FallbacksIntersect,
    IntersectConfig,
    OriginIntersect,
    PointIntersect,
    TipIntersect,
    intersect_points,
    parse_intersect,
)

__all__ = [
    "FallbacksIntersect",
    "IntersectConfig",
    "OriginIntersect",
    "PointIntersect",
    "TipIntersect",
    "intersect_points",
    "parse_intersect",
]

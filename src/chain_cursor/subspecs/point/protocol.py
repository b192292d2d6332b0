"""Protocol-level chain points, as exchanged with a chain-sync client."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from chain_cursor.types import Uint64


@dataclass(frozen=True, slots=True)
class OriginPoint:
    """The position before the first block of the chain."""


@dataclass(frozen=True, slots=True)
class SpecificPoint:
    """An exact block position: its slot and its raw header hash."""

    slot: Uint64
    """Slot of the block."""

    hash: bytes
    """Raw block header hash."""


ChainPoint = Union[OriginPoint, SpecificPoint]
"""An exact position in the chain: genesis or a (slot, hash) pair."""

"""
Chain Clock
===========

Slot-to-time conversion across the Byron and Shelley eras.

Each era is linear: a known (slot, time) anchor plus a fixed slot length.
The era boundary is the Shelley anchor slot. Slots before it follow Byron
parameters, slots from it onwards follow Shelley parameters.
"""

from __future__ import annotations

from dataclasses import dataclass
from time import time as wall_time
from typing import Callable

from chain_cursor.types import ConfigError, Uint64

from .config import ChainWellKnownInfo


def _linear_timestamp(known_slot: int, known_time: int, slot_length: int, slot: int) -> int:
    """Wall-clock time of `slot` in an era anchored at (`known_slot`, `known_time`)."""
    return known_time + (slot - known_slot) * slot_length


@dataclass(frozen=True, slots=True)
class ChainClock:
    """
    Converts between slots and wall-clock time for one network.

    All time values are in seconds (Unix timestamps).
    """

    info: ChainWellKnownInfo
    """Era anchors of the network."""

    time_fn: Callable[[], float] = wall_time
    """Time source function (injectable for testing)."""

    def __post_init__(self) -> None:
        info = self.info
        for name in (
            "byron_epoch_length",
            "byron_slot_length",
            "shelley_epoch_length",
            "shelley_slot_length",
        ):
            if getattr(info, name) == 0:
                raise ConfigError(f"{name} must be greater than zero")
        if info.shelley_known_slot < info.byron_known_slot:
            raise ConfigError("shelley_known_slot must not precede byron_known_slot")

    @property
    def shelley_start_epoch(self) -> int:
        """Epoch number of the first Shelley slot."""
        info = self.info
        byron_seconds = (info.shelley_known_slot - info.byron_known_slot) * info.byron_slot_length
        return byron_seconds // info.byron_epoch_length

    def slot_to_wallclock(self, slot: int) -> int:
        """Get the Unix timestamp at which `slot` starts."""
        info = self.info
        if slot < info.shelley_known_slot:
            return _linear_timestamp(
                info.byron_known_slot, info.byron_known_time, info.byron_slot_length, slot
            )
        return _linear_timestamp(
            info.shelley_known_slot, info.shelley_known_time, info.shelley_slot_length, slot
        )

    def absolute_slot_to_relative(self, slot: int) -> tuple[int, int]:
        """
        Split an absolute slot into (epoch, slot within epoch).

        Byron epochs count from zero at the Byron anchor.
        Shelley epochs continue from the last Byron epoch.
        """
        info = self.info
        if slot < info.shelley_known_slot:
            slots_per_epoch = info.byron_epoch_length // info.byron_slot_length
            era_slot = slot - info.byron_known_slot
            epoch, slot_in_epoch = divmod(era_slot, slots_per_epoch)
            return epoch, slot_in_epoch

        slots_per_epoch = info.shelley_epoch_length // info.shelley_slot_length
        era_slot = slot - info.shelley_known_slot
        epoch, slot_in_epoch = divmod(era_slot, slots_per_epoch)
        return self.shelley_start_epoch + epoch, slot_in_epoch

    def current_time(self) -> Uint64:
        """Get current wall-clock time as Uint64 (Unix timestamp in seconds)."""
        return Uint64(int(self.time_fn()))

    def current_slot(self) -> Uint64:
        """Get the current slot number (0 before the Byron anchor)."""
        info = self.info
        now = int(self.current_time())
        if now < info.byron_known_time:
            return Uint64(0)
        if now < info.shelley_known_time:
            elapsed = now - info.byron_known_time
            return Uint64(info.byron_known_slot + elapsed // info.byron_slot_length)
        elapsed = now - info.shelley_known_time
        return Uint64(info.shelley_known_slot + elapsed // info.shelley_slot_length)

"""
Shared pytest fixtures for all chain_cursor tests.

Provides the reference points used across multiple test modules.
"""

from __future__ import annotations

import pytest

from chain_cursor.subspecs.point import SpecificArg
from chain_cursor.types import Uint64

SHELLEY_START_HASH = "aa83acbf5904c0edfe4d79b3689d3d00fcfc553cf360fd2229b98d464c28e9de"
"""Hash of the first Shelley block on mainnet."""

SHELLEY_START_SLOT = 4492800
"""Slot of the first Shelley block on mainnet."""


@pytest.fixture
def shelley_start_arg() -> SpecificArg:
    """Point argument for the first Shelley block on mainnet."""
    return SpecificArg(slot=Uint64(SHELLEY_START_SLOT), hash=SHELLEY_START_HASH)


@pytest.fixture
def shelley_start_text() -> str:
    """Textual form of the first Shelley block on mainnet."""
    return f"{SHELLEY_START_SLOT},{SHELLEY_START_HASH}"

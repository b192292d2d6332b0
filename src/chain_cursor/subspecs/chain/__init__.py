"""Well-known chain constants and era time arithmetic."""

from .clock import ChainClock
from .config import MAINNET_CHAIN_INFO, TESTNET_CHAIN_INFO, ChainWellKnownInfo

__all__ = [
    "ChainClock",
    "ChainWellKnownInfo",
    "MAINNET_CHAIN_INFO",
    "TESTNET_CHAIN_INFO",
]

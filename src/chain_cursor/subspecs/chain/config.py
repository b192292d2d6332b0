"""
Well-Known Chain Information

Per-network constants that the rest of a chain follower depends on: the era
anchors used by slot-to-time arithmetic, the address prefix used by the
address encoding and the policy of the handle name-token.

Only the two public networks are known. A magic that matches neither has no
record; nothing is synthesised for it.
"""

from __future__ import annotations

import logging

from typing_extensions import Final

from chain_cursor.subspecs.magic import MAINNET_MAGIC, TESTNET_MAGIC, NetworkMagic
from chain_cursor.types import ConfigError, StrictBaseModel, Uint32, Uint64

logger = logging.getLogger(__name__)


class ChainWellKnownInfo(StrictBaseModel):
    """
    Well-known information about a blockchain network.

    Time calculation and bech32 address encoding both depend on the network
    being followed. This record groups all of those network-specific values.

    Epoch lengths are expressed in seconds and slot lengths in seconds per
    slot, so an era has `epoch_length // slot_length` slots per epoch.
    """

    magic: NetworkMagic
    """Handshake magic of the network."""

    # Byron era
    byron_epoch_length: Uint32
    byron_slot_length: Uint32
    byron_known_slot: Uint64
    byron_known_hash: str
    byron_known_time: Uint64

    # Shelley era
    shelley_epoch_length: Uint32
    shelley_slot_length: Uint32
    shelley_known_slot: Uint64
    """First slot of the Shelley era."""
    shelley_known_hash: str
    shelley_known_time: Uint64
    """Unix timestamp (seconds) of `shelley_known_slot`."""

    address_hrp: str
    """Human-readable prefix of bech32 payment addresses."""

    adahandle_policy: str
    """Hex policy id of the handle name-token."""

    @classmethod
    def mainnet(cls) -> ChainWellKnownInfo:
        """Hardcoded values for mainnet."""
        return MAINNET_CHAIN_INFO

    @classmethod
    def testnet(cls) -> ChainWellKnownInfo:
        """Hardcoded values for testnet."""
        return TESTNET_CHAIN_INFO

    @classmethod
    def default(cls) -> ChainWellKnownInfo:
        """Return the mainnet record."""
        return MAINNET_CHAIN_INFO

    @classmethod
    def try_from_magic(cls, magic: int) -> ChainWellKnownInfo:
        """
        Use the value of the magic to return the mainnet or testnet record.

        Raises:
            ConfigError: If `magic` is neither the mainnet nor the testnet magic.
        """
        if magic == MAINNET_MAGIC:
            info = MAINNET_CHAIN_INFO
        elif magic == TESTNET_MAGIC:
            info = TESTNET_CHAIN_INFO
        else:
            raise ConfigError("can't infer well-known chain info from specified magic")

        logger.debug("Resolved well-known chain info for magic %d (%s)", magic, info.address_hrp)
        return info


MAINNET_CHAIN_INFO: Final = ChainWellKnownInfo(
    magic=MAINNET_MAGIC,
    byron_epoch_length=Uint32(432000),
    byron_slot_length=Uint32(20),
    byron_known_slot=Uint64(0),
    byron_known_hash="f0f7892b5c333cffc4b3c4344de48af4cc63f55e44936196f365a9ef2244134f",
    byron_known_time=Uint64(1506203091),
    shelley_epoch_length=Uint32(432000),
    shelley_slot_length=Uint32(1),
    shelley_known_slot=Uint64(4492800),
    shelley_known_hash="aa83acbf5904c0edfe4d79b3689d3d00fcfc553cf360fd2229b98d464c28e9de",
    shelley_known_time=Uint64(1596059091),
    address_hrp="addr",
    adahandle_policy="f0ff48bbb7bbe9d59a40f1ce90e9e9d0ff5002ec48f232b49ca0fb9a",
)
"""The mainnet record."""

TESTNET_CHAIN_INFO: Final = ChainWellKnownInfo(
    magic=TESTNET_MAGIC,
    byron_epoch_length=Uint32(432000),
    byron_slot_length=Uint32(20),
    byron_known_slot=Uint64(0),
    byron_known_hash="8f8602837f7c6f8b8867dd1cbc1842cf51a27eaed2c70ef48325d00f8efb320f",
    byron_known_time=Uint64(1564010416),
    shelley_epoch_length=Uint32(432000),
    shelley_slot_length=Uint32(1),
    shelley_known_slot=Uint64(1598400),
    shelley_known_hash="02b1c561715da9e540411123a6135ee319b02f60b9a11a603d3305556c04329f",
    shelley_known_time=Uint64(1595967616),
    address_hrp="addr_test",
    adahandle_policy="8d18d786e92776c824607fd8e193ec535c79dc61ea2405ddf3b09fe3",
)
"""The legacy public testnet record."""

"""Network magic parsing and defaults."""

from .magic import MAINNET_MAGIC, TESTNET_MAGIC, NetworkMagic, default_magic, parse_magic

__all__ = [
    "MAINNET_MAGIC",
    "TESTNET_MAGIC",
    "NetworkMagic",
    "default_magic",
    "parse_magic",
]

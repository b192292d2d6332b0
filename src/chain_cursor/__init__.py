"""Configuration primitives for blockchain chain-followers."""

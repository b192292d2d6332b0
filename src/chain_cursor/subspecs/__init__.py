"""Subspecifications for the chain-follower configuration primitives."""

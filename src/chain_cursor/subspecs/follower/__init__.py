"""Chain follower configuration."""

from .config import FollowerConfig, load_yaml_mapping

__all__ = [
    "FollowerConfig",
    "load_yaml_mapping",
]

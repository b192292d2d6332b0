"""Chain follower configuration loader.

Bundles everything a chain follower resolves before it connects to a node.
Loads from YAML files shaped like:

    magic: testnet
    intersect:
      type: Fallbacks
      value:
      - 1598400,02b1c561715da9e540411123a6135ee319b02f60b9a11a603d3305556c04329f
      - origin
    cursor: null

`chain` may hold a full well-known chain info record. Without it the record
is inferred from `magic`.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, field_validator, model_validator

from chain_cursor.subspecs.chain import ChainWellKnownInfo
from chain_cursor.subspecs.intersect import (
    IntersectConfig,
    TipIntersect,
    intersect_points,
    parse_intersect,
)
from chain_cursor.subspecs.magic import MAINNET_MAGIC, NetworkMagic
from chain_cursor.subspecs.point import ChainPoint, Cursor, point_to_protocol
from chain_cursor.types import ConfigError, StrictBaseModel

logger = logging.getLogger(__name__)


def _as_mapping(data: Any) -> dict[str, Any]:
    """Top-level YAML document as a mapping; an empty document is `{}`."""
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"follower config must be a mapping, got {type(data).__name__}"
        )
    return data


def load_yaml_mapping(path: Path | str) -> dict[str, Any]:
    """
    Read a follower YAML file into a plain mapping.

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not valid UTF-8.
        yaml.YAMLError: If the file is not valid YAML.
        ConfigError: If the document is not a mapping.
    """
    with Path(path).open(encoding="utf-8") as f:
        data = yaml.safe_load(f)
    logger.debug("Loaded follower config from %s", path)
    return _as_mapping(data)


class FollowerConfig(StrictBaseModel):
    """
    Resolved configuration primitives of a chain follower.

    Every field has a default, so an empty document follows mainnet from
    the current tip.
    """

    magic: NetworkMagic = MAINNET_MAGIC
    """Network to talk to, as a keyword or a raw number."""

    chain: ChainWellKnownInfo | None = None
    """Explicit well-known chain info, overriding the record inferred from `magic`."""

    intersect: IntersectConfig = Field(default_factory=TipIntersect)
    """Where a fresh sync session starts."""

    cursor: Cursor = None
    """Last processed position, restored by the caller from its own storage."""

    @model_validator(mode="before")
    @classmethod
    def magic_from_chain(cls, data: Any) -> Any:
        """Take the magic from an explicit chain record when none is given."""
        if not isinstance(data, dict) or "magic" in data or data.get("chain") is None:
            return data
        chain = data["chain"]
        magic = chain.get("magic") if isinstance(chain, dict) else getattr(chain, "magic", None)
        if magic is None:
            return data
        return {**data, "magic": magic}

    @field_validator("chain", mode="before")
    @classmethod
    def parse_chain(cls, v: Any) -> Any:
        """Build the chain info record from a mapping."""
        if isinstance(v, dict):
            return ChainWellKnownInfo.model_validate(v)
        return v

    @field_validator("intersect", mode="before")
    @classmethod
    def parse_intersect_record(cls, v: Any) -> Any:
        """Build the intersect strategy from its tagged record."""
        if isinstance(v, dict):
            return parse_intersect(v)
        return v

    @model_validator(mode="after")
    def validate_chain_magic_consistency(self) -> FollowerConfig:
        """Verify an explicit chain record belongs to the configured network."""
        if self.chain is not None and self.chain.magic != self.magic:
            raise ValueError(
                f"chain info magic ({self.chain.magic}) does not match "
                f"configured magic ({self.magic})"
            )
        return self

    def well_known_info(self) -> ChainWellKnownInfo:
        """
        Return the chain info to use for time and address calculations.

        Raises:
            ConfigError: If no explicit record is configured and `magic`
                is not a well-known network.
        """
        if self.chain is not None:
            logger.debug("Using explicit chain info for magic %d", self.chain.magic)
            return self.chain
        return ChainWellKnownInfo.try_from_magic(self.magic)

    def start_points(self) -> tuple[ChainPoint, ...]:
        """
        Protocol points to intersect at, in order of preference.

        A stored cursor wins over the configured strategy, so a restarted
        follower resumes where it stopped.

        Raises:
            DecodeError: If a configured hash is not valid hexadecimal.
        """
        if self.cursor is not None:
            logger.debug("Resuming from cursor %s", self.cursor)
            return (point_to_protocol(self.cursor),)
        logger.debug("Starting from configured intersect %s", self.intersect.type)
        return intersect_points(self.intersect)

    @classmethod
    def from_yaml_file(cls, path: Path | str) -> FollowerConfig:
        """
        Load configuration from a YAML file.

        Raises:
            FileNotFoundError: If the file does not exist.
            yaml.YAMLError: If the file is not valid YAML.
            ConfigError: If the document is not a mapping.
            pydantic.ValidationError: If the data fails validation.
        """
        return cls.model_validate(load_yaml_mapping(path))

    @classmethod
    def from_yaml(cls, content: str) -> FollowerConfig:
        """
        Load configuration from a YAML string.

        Useful for testing or programmatic config generation.
        """
        return cls.model_validate(_as_mapping(yaml.safe_load(content)))

"""Reusable, strict base models for chain-follower configuration values."""

from pydantic import BaseModel, ConfigDict


class StrictBaseModel(BaseModel):
    """
    A strict, immutable pydantic base model.

    Field names are kept in snake_case on both input and output so that the
    structured form of a value matches its Python attribute names.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        strict=True,
        validate_default=True,
    )

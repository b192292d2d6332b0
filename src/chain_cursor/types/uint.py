"""Unsigned Integer Type Specification."""

from __future__ import annotations

from typing import Any, ClassVar, SupportsInt

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema
from typing_extensions import Self


class BaseUint(int):
    """A base class for custom unsigned integer types that inherits from `int`."""

    BITS: ClassVar[int]
    """The number of bits in the integer (overridden by subclasses)."""

    def __new__(cls, value: SupportsInt) -> Self:
        """
        Create and validate a new Uint instance.

        Raises:
            OverflowError: If `value` is outside the allowed range [0, 2**BITS - 1].
        """
        int_value = int(value)
        if not (0 <= int_value < (2**cls.BITS)):
            raise OverflowError(f"{int_value} is out of range for {cls.__name__}")
        return super().__new__(cls, int_value)

    @classmethod
    def max_value(cls) -> Self:
        """The largest value representable by this type."""
        return cls(2**cls.BITS - 1)

    @classmethod
    def from_decimal(cls, text: str) -> Self:
        """
        Parse unsigned decimal text.

        Only ASCII digits are accepted, with an optional leading `+`.
        Whitespace, signs other than `+`, underscores and non-ASCII digits
        are all rejected, unlike the built-in `int()`.

        Raises:
            ValueError: If `text` is not an unsigned decimal literal.
            OverflowError: If the value does not fit in `BITS` bits.
        """
        digits = text[1:] if text.startswith("+") else text
        if not digits or not digits.isascii() or not digits.isdigit():
            raise ValueError(f"invalid {cls.__name__} literal: {text!r}")
        return cls(int(digits))

    @classmethod
    def _validate(cls, value: Any) -> Self:
        """Coerce a raw config value into this type."""
        if isinstance(value, cls):
            return value
        # bool is an int subclass but never a meaningful counter.
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"{cls.__name__} expects an integer, got {type(value).__name__}")
        try:
            return cls(value)
        except OverflowError as e:
            raise ValueError(str(e)) from e

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Hook into Pydantic's validation system."""
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda instance: int(instance)
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, core_schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        """Hook into Pydantic's JSON Schema generation system."""
        return {
            "type": "integer",
            "minimum": 0,
            "maximum": 2**cls.BITS - 1,
            "format": f"uint{cls.BITS}",
        }

    def __repr__(self) -> str:
        """Return the official string representation of the object."""
        return f"{type(self).__name__}({int(self)})"

    def __str__(self) -> str:
        """Return the informal, user-friendly string representation."""
        return str(int(self))


class Uint32(BaseUint):
    """A type representing a 32-bit unsigned integer (uint32)."""

    BITS = 32


class Uint64(BaseUint):
    """A type representing a 64-bit unsigned integer (uint64)."""

    BITS = 64

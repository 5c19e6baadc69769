"""Basic type primitives used to define other types."""

from types import MappingProxyType
from typing import Any, ClassVar, Mapping, Type

from pydantic import GetCoreSchemaHandler
from pydantic_core.core_schema import (
    PlainValidatorFunctionSchema,
    no_info_plain_validator_function,
    to_string_ser_schema,
)

from .conversions import (
    BytesConvertible,
    NumberConvertible,
    to_bytes,
    to_number,
    to_quantity,
)


class ToStringSchema:
    """
    Type converter to add a simple pydantic schema that correctly
    parses and serializes the type.
    """

    @staticmethod
    def __get_pydantic_core_schema__(
        source_type: Any, handler: GetCoreSchemaHandler
    ) -> PlainValidatorFunctionSchema:
        """Call the class constructor without info and appends the serialization schema."""
        return no_info_plain_validator_function(
            source_type,
            serialization=to_string_ser_schema(),
        )


class Number(int, ToStringSchema):
    """A non-fixed-width integer parsed from ints, decimal or hex strings, or bytes."""

    def __new__(cls, input_number: NumberConvertible):
        """Create a new Number object."""
        return super().__new__(cls, to_number(input_number))

    def __str__(self) -> str:
        """Return the decimal representation of the number."""
        return str(int(self))

    def hex(self) -> str:
        """Return the number as a quantity, e.g. `0x2`."""
        return to_quantity(int(self))


WEI_UNITS: Mapping[str, int] = MappingProxyType(
    {
        **dict.fromkeys(("wei",), 1),
        **dict.fromkeys(("kwei", "babbage", "femtoether"), 10**3),
        **dict.fromkeys(("mwei", "lovelace", "picoether"), 10**6),
        **dict.fromkeys(("gwei", "shannon", "nanoether", "nano"), 10**9),
        **dict.fromkeys(("szabo", "microether", "micro"), 10**12),
        **dict.fromkeys(("finney", "milliether", "milli"), 10**15),
        **dict.fromkeys(("ether", "eth"), 10**18),
    }
)


class Wei(Number):
    """
    An amount of wei.

    Besides the `Number` inputs, accepts a value followed by a unit
    (`"1 gwei"`, `"2 ether"`) and powers (`"10**9"`).
    """

    def __new__(cls, input_number: NumberConvertible):
        """Create a new Wei object."""
        if not isinstance(input_number, str) or input_number.startswith("0x"):
            return super().__new__(cls, input_number)

        match input_number.split():
            case [value]:
                multiplier = 1
            case [value, unit]:
                if unit.lower() not in WEI_UNITS:
                    raise ValueError(f"Invalid unit {unit}")
                multiplier = WEI_UNITS[unit.lower()]
            case _:
                raise ValueError(f"Invalid wei value: {input_number!r}")

        amount: int | float
        if value.isdigit():
            amount = int(value)
        elif "**" in value:
            base, exponent = value.split("**")
            amount = float(base) ** int(exponent)
        else:
            amount = float(value)
        return super().__new__(cls, int(amount * multiplier))


class HexNumber(Number):
    """A number that renders as a quantity, e.g. `0x2`, when converted to a string."""

    def __str__(self) -> str:
        """Return the quantity representation of the number."""
        return self.hex()


class Bytes(bytes, ToStringSchema):
    """Class that helps represent bytes of variable length."""

    def __new__(cls, input_bytes: BytesConvertible = b""):
        """Create a new Bytes object."""
        if type(input_bytes) is cls:
            return input_bytes
        return super().__new__(cls, to_bytes(input_bytes))

    def __str__(self) -> str:
        """Return the hexadecimal representation of the bytes."""
        return self.hex()

    def hex(self, *args, **kwargs) -> str:
        """Return the `0x`-prefixed hexadecimal representation of the bytes."""
        return "0x" + super().hex(*args, **kwargs)


class FixedSizeBytes(Bytes):
    """Bytes of a fixed length, created with `FixedSizeBytes[length]`."""

    byte_length: ClassVar[int]

    def __class_getitem__(cls, length: int) -> Type["FixedSizeBytes"]:
        """Create a new FixedSizeBytes class with the given length."""
        return type(f"FixedSizeBytes{length}", (cls,), {"byte_length": length})

    def __new__(cls, input_bytes: BytesConvertible | int):
        """Create a new FixedSizeBytes object, left-padding integers."""
        if type(input_bytes) is cls:
            return input_bytes
        if isinstance(input_bytes, int):
            data = input_bytes.to_bytes(cls.byte_length, byteorder="big")
        else:
            data = to_bytes(input_bytes)
        if len(data) != cls.byte_length:
            raise ValueError(
                f"input has the wrong size for fixed size bytes: "
                f"{len(data)} != {cls.byte_length}"
            )
        return super().__new__(cls, data)


class Address(FixedSizeBytes[20]):  # type: ignore
    """Class that helps represent Ethereum addresses."""

    pass


class Hash(FixedSizeBytes[32]):  # type: ignore
    """Class that helps represent hashes and storage keys."""

    pass

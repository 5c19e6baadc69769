"""Common conversion methods."""

from re import sub
from typing import List, SupportsBytes, TypeAlias

BytesConvertible: TypeAlias = str | bytes | SupportsBytes | List[int]
NumberConvertible: TypeAlias = str | bytes | SupportsBytes | int


def to_bytes(input_bytes: BytesConvertible) -> bytes:
    """Convert multiple types into bytes."""
    if input_bytes is None:
        raise ValueError("Cannot convert `None` input to bytes")

    if (
        isinstance(input_bytes, SupportsBytes)
        or isinstance(input_bytes, bytes)
        or isinstance(input_bytes, list)
    ):
        return bytes(input_bytes)

    if isinstance(input_bytes, str):
        # We can have a hex representation of bytes with spaces for readability
        input_bytes = sub(r"\s+", "", input_bytes)
        if input_bytes.startswith("0x"):
            input_bytes = input_bytes[2:]
        if len(input_bytes) % 2 == 1:
            input_bytes = "0" + input_bytes
        return bytes.fromhex(input_bytes)

    raise ValueError(f"invalid type for `bytes`: {type(input_bytes)}")


def to_number(input_number: NumberConvertible) -> int:
    """Convert multiple types into a number."""
    if isinstance(input_number, int):
        return input_number
    if isinstance(input_number, str):
        return int(input_number, 0)
    if isinstance(input_number, bytes) or isinstance(input_number, SupportsBytes):
        return int.from_bytes(input_number, byteorder="big")
    raise ValueError(f"invalid type for `number`: {type(input_number)}")


def to_quantity(input_number: NumberConvertible) -> str:
    """
    Convert multiple types into a quantity hex string.

    Quantities are encoded without leading zeros, so zero is `0x0` and one is
    `0x1`, never `0x00` or `0x01`.
    """
    number = to_number(input_number)
    if number < 0:
        raise ValueError(f"quantities cannot be negative: {number}")
    return hex(number)

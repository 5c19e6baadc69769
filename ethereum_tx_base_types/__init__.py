"""
Common definitions and types.
"""

from .base_types import (
    Address,
    Bytes,
    FixedSizeBytes,
    Hash,
    HexNumber,
    Number,
    Wei,
)
from .composite_types import AccessList
from .conversions import to_bytes, to_number, to_quantity
from .json import to_json
from .pydantic import CamelModel, TxBaseModel

__all__ = (
    "AccessList",
    "Address",
    "Bytes",
    "CamelModel",
    "FixedSizeBytes",
    "Hash",
    "HexNumber",
    "Number",
    "TxBaseModel",
    "Wei",
    "to_bytes",
    "to_json",
    "to_number",
    "to_quantity",
)

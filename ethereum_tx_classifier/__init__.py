"""
Transaction envelope type detection.

Detects whether a transaction is a legacy, access list or dynamic fee
transaction from the fields it sets and the hardfork of its network, and
rejects transactions whose fields contradict their type.
"""

from .compatibility import incompatible_fields, validate_transaction_type_fields
from .detect import (
    default_transaction_type_parser,
    detect_raw_transaction_type,
    detect_transaction_type,
)
from .exceptions import IncompatibleFieldsError
from .rules import DETECTION_RULES, DetectionRule

__all__ = [
    "DETECTION_RULES",
    "DetectionRule",
    "IncompatibleFieldsError",
    "default_transaction_type_parser",
    "detect_raw_transaction_type",
    "detect_transaction_type",
    "incompatible_fields",
    "validate_transaction_type_fields",
]

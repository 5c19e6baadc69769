"""Detect the envelope type of unserialized and serialized transactions."""

from collections.abc import Mapping
from typing import Any

from ethereum_tx_base_types import Bytes, to_quantity
from ethereum_tx_base_types.conversions import BytesConvertible
from ethereum_tx_logging import get_logger
from ethereum_tx_types import (
    NetworkContext,
    TransactionFields,
    TransactionType,
    TransactionTypeParser,
)

from .rules import DETECTION_RULES

logger = get_logger(__name__)


def default_transaction_type_parser(
    transaction: TransactionFields, context: NetworkContext | None = None
) -> str | None:
    """
    Detect the type of a transaction from the fields it sets.

    Returns the canonical type tag (`0x0`, `0x1`, `0x2`, or an explicit unknown
    type as given), or None when the type cannot be determined and the caller
    has to decide on a default.

    Raises `IncompatibleFieldsError` if the transaction sets fields that its
    declared or detected type forbids.
    """
    for rule in DETECTION_RULES:
        if not rule.matches(transaction):
            continue
        result = rule.action(transaction, context)
        if rule.final:
            logger.verbose(f"Rule {rule.name} detected transaction type {result}")
            return result
    return None


def detect_transaction_type(
    transaction: TransactionFields | Mapping[str, Any],
    context: NetworkContext | None = None,
) -> str | None:
    """
    Detect the type of a transaction, using the context's parser if it has one.

    The transaction may be given as a JSON-RPC style mapping, which is parsed
    into `TransactionFields` first.
    """
    if not isinstance(transaction, TransactionFields):
        transaction = TransactionFields.model_validate(transaction)
    parser: TransactionTypeParser = default_transaction_type_parser
    if context is not None and context.transaction_type_parser is not None:
        parser = context.transaction_type_parser
    return parser(transaction, context)


def detect_raw_transaction_type(transaction: BytesConvertible) -> str:
    """
    Detect the type of a serialized transaction from its first byte.

    A first byte above 0x7f starts an RLP list, which is a legacy transaction.
    Any other first byte is the type of a typed transaction envelope.
    """
    first_byte = Bytes(transaction)[:1]
    if not first_byte:
        raise ValueError("Cannot detect the type of an empty transaction")
    if first_byte[0] > 0x7F:
        return TransactionType.LEGACY.hex()
    return to_quantity(first_byte[0])

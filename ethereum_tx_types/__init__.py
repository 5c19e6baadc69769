"""Transaction types and the network context used to classify them."""

from .transaction_types import (
    NetworkContext,
    TransactionFields,
    TransactionType,
    TransactionTypeParser,
)

__all__ = (
    "NetworkContext",
    "TransactionFields",
    "TransactionType",
    "TransactionTypeParser",
)

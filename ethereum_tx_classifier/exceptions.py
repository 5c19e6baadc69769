"""Exceptions raised while detecting the type of a transaction."""

from typing import Iterable, Tuple

from ethereum_tx_types import TransactionType


class IncompatibleFieldsError(ValueError):
    """
    The transaction sets fields that the transaction type does not allow,
    e.g. an access list on a legacy transaction.
    """

    fields: Tuple[str, ...]
    tx_type: TransactionType

    def __init__(self, fields: Iterable[str], tx_type: TransactionType):
        """Initialize the exception with the offending fields and the checked type."""
        self.fields = tuple(fields)
        self.tx_type = tx_type
        super().__init__(self.fields, tx_type)

    def __str__(self):
        """Print exception string."""
        return (
            f"Invalid properties for transaction type {self.tx_type.hex()}: "
            f"{', '.join(self.fields)}"
        )

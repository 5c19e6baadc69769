"""Fields each transaction type forbids, and the validator enforcing them."""

from typing import Tuple

from ethereum_tx_types import TransactionFields, TransactionType

from .exceptions import IncompatibleFieldsError


def incompatible_fields(tx_type: TransactionType) -> Tuple[str, ...]:
    """Return the fields that must be unset on a transaction of the given type."""
    match tx_type:
        case TransactionType.LEGACY:
            return ("access_list", "max_fee_per_gas", "max_priority_fee_per_gas")
        case TransactionType.ACCESS_LIST:
            return ("max_fee_per_gas", "max_priority_fee_per_gas")
        case TransactionType.DYNAMIC_FEE:
            return ("gas_price",)


def validate_transaction_type_fields(
    tx_type: TransactionType, transaction: TransactionFields
) -> None:
    """
    Raise `IncompatibleFieldsError` if the transaction sets any field the type
    forbids. The error names the fields as they appear in JSON-RPC requests.
    """
    violations = [
        TransactionFields.wire_name(field_name)
        for field_name in incompatible_fields(tx_type)
        if transaction.is_set(field_name)
    ]
    if violations:
        raise IncompatibleFieldsError(violations, tx_type)

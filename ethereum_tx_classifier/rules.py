"""
Ordered rules used to detect the type of an unserialized transaction.

Rules are evaluated in order and the first matching final rule decides the
result. Every rule that matches on fields validates the transaction against
the type it produces, so an incompatible transaction raises
`IncompatibleFieldsError` instead of falling through to a later rule.
"""

from dataclasses import dataclass
from typing import Callable, Tuple

from ethereum_tx_forks import Berlin, London, get_fork_rank
from ethereum_tx_logging import get_logger
from ethereum_tx_types import NetworkContext, TransactionFields, TransactionType

from .compatibility import validate_transaction_type_fields

logger = get_logger(__name__)


@dataclass(frozen=True, kw_only=True)
class DetectionRule:
    """
    A predicate on the transaction fields, paired with the action to run when it holds.

    A non-final rule runs its action for its checks only and lets evaluation
    continue with the next rule.
    """

    name: str
    matches: Callable[[TransactionFields], bool]
    action: Callable[[TransactionFields, NetworkContext | None], str | None]
    final: bool = True


def typed(tx_type: TransactionType) -> Callable[[TransactionFields, NetworkContext | None], str]:
    """Return an action that validates the transaction as `tx_type` and returns its tag."""

    def action(transaction: TransactionFields, context: NetworkContext | None = None) -> str:
        validate_transaction_type_fields(tx_type, transaction)
        return tx_type.hex()

    return action


def explicit_type(transaction: TransactionFields, context: NetworkContext | None = None) -> str:
    """
    Return the transaction's own type tag in canonical form.

    Known types are validated against their fields. Unknown types are passed
    through unchecked, since there is nothing to check them against.
    """
    assert transaction.ty is not None
    tx_type = TransactionType.from_tag(transaction.ty)
    if tx_type is not None:
        validate_transaction_type_fields(tx_type, transaction)
    else:
        logger.debug(f"Passing through unknown transaction type {transaction.ty.hex()}")
    return transaction.ty.hex()


def check_gas_price_only(
    transaction: TransactionFields, context: NetworkContext | None = None
) -> None:
    """
    Check a transaction that only sets `gasPrice` against the legacy type.

    It is not classified here, since `gasPrice` alone does not tell whether
    the network supports typed transactions at all.
    """
    validate_transaction_type_fields(TransactionType.LEGACY, transaction)
    return None


def resolve_hardfork(
    transaction: TransactionFields, context: NetworkContext | None = None
) -> str | None:
    """Return the hardfork named by the transaction, its chain configuration, or the context."""
    if transaction.hardfork is not None:
        return transaction.hardfork
    if transaction.common_hardfork is not None:
        return transaction.common_hardfork
    if context is not None:
        return context.common_hardfork
    return None


def detect_from_hardfork(
    transaction: TransactionFields, context: NetworkContext | None = None
) -> str | None:
    """
    Detect the type from the hardfork of the network.

    Returns None when the type cannot be determined: no hardfork is known, the
    hardfork name is not recognized, or the hardfork predates typed
    transactions. Any field the detected type forbids has already matched an
    earlier rule, so the fields are not validated again.
    """
    hardfork = resolve_hardfork(transaction, context)
    if hardfork is None:
        logger.debug("No hardfork available, transaction type is indeterminate")
        return None

    rank = get_fork_rank(hardfork)
    if rank is None:
        logger.debug(f"Unknown hardfork {hardfork!r}, transaction type is indeterminate")
        return None

    tx_type: TransactionType
    if rank >= London.rank():
        if transaction.is_set("gas_price"):
            tx_type = TransactionType.LEGACY
        else:
            tx_type = TransactionType.DYNAMIC_FEE
    elif rank == Berlin.rank():
        # Access lists exist at Berlin, but none was given.
        tx_type = TransactionType.LEGACY
    else:
        logger.debug(f"Hardfork {hardfork!r} predates typed transactions")
        return None

    return tx_type.hex()


DETECTION_RULES: Tuple[DetectionRule, ...] = (
    DetectionRule(
        name="explicit-type",
        matches=lambda tx: tx.is_set("ty"),
        action=explicit_type,
    ),
    DetectionRule(
        name="legacy-fees",
        matches=lambda tx: tx.is_set("gas") and tx.is_set("gas_price"),
        action=typed(TransactionType.LEGACY),
    ),
    DetectionRule(
        name="dynamic-fees",
        matches=lambda tx: tx.is_set("max_fee_per_gas") or tx.is_set("max_priority_fee_per_gas"),
        action=typed(TransactionType.DYNAMIC_FEE),
    ),
    DetectionRule(
        name="access-list",
        matches=lambda tx: tx.is_set("access_list"),
        action=typed(TransactionType.ACCESS_LIST),
    ),
    DetectionRule(
        name="gas-price-only",
        matches=lambda tx: tx.is_set("gas_price"),
        action=check_gas_price_only,
        final=False,
    ),
    DetectionRule(
        name="hardfork",
        matches=lambda tx: True,
        action=detect_from_hardfork,
    ),
)

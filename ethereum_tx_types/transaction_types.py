"""Transaction-related types used to detect the transaction envelope type."""

from collections.abc import Mapping
from enum import IntEnum
from typing import Annotated, Any, Callable, List, Protocol, TypeVar

from pydantic import (
    ConfigDict,
    Field,
    ValidationError,
    ValidatorFunctionWrapHandler,
    WrapValidator,
    model_validator,
)

from ethereum_tx_base_types import AccessList, CamelModel, HexNumber, Wei, to_quantity

T = TypeVar("T")


def keep_unparsed(value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
    """Return the parsed value, or the value as given if it does not parse."""
    try:
        return handler(value)
    except ValidationError:
        return value


# Only the presence of these fields matters for detection.
Lenient = Annotated[T, WrapValidator(keep_unparsed)]


class TransactionType(IntEnum):
    """Transaction envelope types known to the classifier."""

    LEGACY = 0
    ACCESS_LIST = 1
    DYNAMIC_FEE = 2

    def hex(self) -> str:
        """Return the canonical tag of the type, e.g. `0x2`."""
        return to_quantity(int(self))

    @classmethod
    def from_tag(cls, tag: Any) -> "TransactionType | None":
        """Return the known type for the given tag, or None for opaque tags."""
        try:
            return cls(int(HexNumber(tag)))
        except ValueError:
            return None


class TransactionFields(CamelModel):
    """
    The fields of an unserialized transaction that determine its envelope type.

    Unset and `None` fields are equivalent. Fields unrelated to the envelope
    type (`to`, `value`, `data`, ...) are accepted and ignored. Gas, fee and
    access list values that do not parse are kept as given and still count as
    set. Only `type` and the hardforks must be well formed.
    """

    ty: HexNumber | None = Field(None, alias="type")
    gas: Lenient[HexNumber | None] = None
    gas_price: Lenient[Wei | None] = None
    max_fee_per_gas: Lenient[Wei | None] = None
    max_priority_fee_per_gas: Lenient[Wei | None] = None
    access_list: Lenient[List[AccessList] | None] = None
    hardfork: str | None = None
    common_hardfork: str | None = None

    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def lift_common_hardfork(cls, data: Any) -> Any:
        """
        Take the hardfork from a nested `common` chain configuration when no
        `commonHardfork` is given explicitly.
        """
        if not isinstance(data, Mapping) or "common" not in data:
            return data
        data = dict(data)
        common = data.pop("common")
        if data.get("commonHardfork") is not None or data.get("common_hardfork") is not None:
            return data
        if isinstance(common, Mapping):
            hardfork = common.get("hardfork")
        else:
            hardfork = getattr(common, "hardfork", None)
        if hardfork is not None:
            data["commonHardfork"] = hardfork
        return data

    def is_set(self, field_name: str) -> bool:
        """Return whether the field is meaningfully set, i.e. not None."""
        return getattr(self, field_name) is not None

    @classmethod
    def wire_name(cls, field_name: str) -> str:
        """Return the camel case name the field has in JSON-RPC requests."""
        alias = cls.model_fields[field_name].alias
        return alias if alias is not None else field_name


class TransactionTypeParser(Protocol):
    """A protocol for callables that detect the type of a transaction."""

    def __call__(
        self, transaction: TransactionFields, context: "NetworkContext | None" = None
    ) -> str | None:
        """Return the type tag of the transaction, or None if it cannot be determined."""
        pass


class NetworkContext(CamelModel):
    """
    Network information available to the caller when detecting a transaction type.

    `common_hardfork` is the hardfork of the shared chain configuration, used
    when the transaction itself names none. `transaction_type_parser` replaces
    the default detection rules entirely.
    """

    common_hardfork: str | None = None
    transaction_type_parser: Callable[..., str | None] | None = Field(None, exclude=True)

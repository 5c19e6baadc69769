"""Base pydantic classes used to define the models for transactions."""

from typing import Any, Dict, Literal, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

Model = TypeVar("Model", bound=BaseModel)


class TxBaseModel(BaseModel):
    """
    Base model for all transaction models.

    Fields set to None are treated as absent, so they are left out of both the
    serialized model and its repr. Fields may hold values that did not parse as
    their type, which are dumped as they are.
    """

    def serialize(self, mode: Literal["json", "python"], by_alias: bool) -> Dict[str, Any]:
        """Dump the fields of the model that are not None."""
        return self.model_dump(mode=mode, by_alias=by_alias, exclude_none=True, warnings=False)

    def __repr_args__(self):
        """Yield the set fields, rendering the number and bytes types as strings."""
        for name in self.serialize(mode="python", by_alias=False):
            value = getattr(self, name)
            if isinstance(value, (list, dict, BaseModel)):
                yield name, value
            else:
                yield name, str(value)


class CopyValidateModel(TxBaseModel):
    """Model that supports copying with validation."""

    def copy(self: Model, **kwargs) -> Model:
        """Create a copy of the model with the updated fields that are validated."""
        return self.__class__(**(self.model_dump(exclude_unset=True, warnings=False) | kwargs))


class CamelModel(CopyValidateModel):
    """
    A base model that converts field names to camel case when serializing.

    For example, the field name `max_fee_per_gas` in a Python model will be represented
    as `maxFeePerGas` when it is serialized to json.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_default=True,
    )

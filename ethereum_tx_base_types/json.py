"""
JSON-RPC representation of transaction models.
"""

from typing import Any, Sequence

from .pydantic import TxBaseModel


def to_json(value: TxBaseModel | Sequence[TxBaseModel]) -> Any:
    """Return the JSON-RPC data of a model, or of each model in a list."""
    if isinstance(value, TxBaseModel):
        return value.serialize(mode="json", by_alias=True)
    return [to_json(item) for item in value]

"""Composite types built from the base type primitives."""

from typing import List

from pydantic import Field

from .base_types import Address, Hash
from .pydantic import CamelModel


class AccessList(CamelModel):
    """Access list entry for transactions."""

    address: Address
    storage_keys: List[Hash] = Field(default_factory=list)

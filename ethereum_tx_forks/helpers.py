"""Helper methods to resolve forks by name and compare them by rank."""

from types import MappingProxyType
from typing import Annotated, Any, Callable, List, Mapping, Type

from pydantic import PlainSerializer, PlainValidator

from .base_fork import BaseFork
from .forks import forks


class InvalidForkError(ValueError):
    """Invalid fork error raised when the fork specified is not found or incompatible."""

    def __init__(self, message):
        """Initialize the InvalidForkError exception."""
        super().__init__(message)


all_forks: List[Type[BaseFork]] = []
for fork_name in forks.__dict__:
    fork = forks.__dict__[fork_name]
    if not isinstance(fork, type):
        continue
    if issubclass(fork, BaseFork) and fork is not BaseFork:
        all_forks.append(fork)

# Lookup keys are lower case so that `London`, `london` and `LONDON` all resolve.
forks_by_name: Mapping[str, Type[BaseFork]] = MappingProxyType(
    {fork.network_name().lower(): fork for fork in all_forks}
)


def get_forks() -> List[Type[BaseFork]]:
    """
    Return list of all the fork classes implemented by
    `ethereum_tx_forks` ordered chronologically by deployment.
    """
    return list(all_forks)


def get_fork_by_name(fork_name: str) -> Type[BaseFork] | None:
    """Get a fork by its network name, ignoring case, or None if it is unknown."""
    return forks_by_name.get(fork_name.lower())


def get_fork_rank(fork_name: str) -> int | None:
    """
    Return the rank of the named fork, or None if the name is unknown.

    Rank 0 is a real rank (`chainstart`), so callers must compare the result
    against None rather than test its truthiness.
    """
    fork = get_fork_by_name(fork_name)
    if fork is None:
        return None
    return fork.rank()


def forks_from_until(
    fork_from: Type[BaseFork], fork_until: Type[BaseFork]
) -> List[Type[BaseFork]]:
    """
    Return specified fork and all forks after it until and including the
    second specified fork.
    """
    prev_fork = fork_until

    forks: List[Type[BaseFork]] = []

    while prev_fork != BaseFork and prev_fork != fork_from:
        forks.insert(0, prev_fork)

        prev_fork = prev_fork.__base__

    if prev_fork == BaseFork:
        return []

    forks.insert(0, fork_from)

    return forks


def forks_from(fork: Type[BaseFork]) -> List[Type[BaseFork]]:
    """Return specified fork and all forks after it."""
    return forks_from_until(fork, get_forks()[-1])


def fork_validator_generator(
    cls_name: str, forks: List[Type[BaseFork]]
) -> Callable[[Any], Type[BaseFork]]:
    """Generate a fork validator function."""
    forks_dict = {fork.network_name().lower(): fork for fork in forks}

    def fork_validator(obj: Any) -> Type[BaseFork]:
        """Get a fork by name or raise an error."""
        if obj is None:
            raise InvalidForkError("Fork cannot be None")
        if isinstance(obj, type) and issubclass(obj, BaseFork):
            return obj
        if isinstance(obj, str):
            if obj.lower() in forks_dict:
                return forks_dict[obj.lower()]
        raise InvalidForkError(f"Invalid {cls_name}: {obj} (type: {type(obj)})")

    return fork_validator


# Annotated Pydantic-Friendly Fork Type
Fork = Annotated[
    Type[BaseFork],
    PlainSerializer(lambda fork: fork.network_name()),
    PlainValidator(fork_validator_generator("Fork", all_forks)),
]

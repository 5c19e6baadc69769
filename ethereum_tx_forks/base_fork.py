"""Abstract base class for Ethereum forks."""

from abc import ABC, ABCMeta, abstractmethod
from typing import ClassVar, List, Optional


class BaseForkMeta(ABCMeta):
    """Metaclass for BaseFork."""

    @abstractmethod
    def name(cls) -> str:
        """Return the name of the fork (e.g., Berlin), must be implemented by subclasses."""
        pass

    def __repr__(cls) -> str:
        """Print the name of the fork, instead of the class."""
        return cls.name()

    def __gt__(cls, other: "BaseForkMeta") -> bool:
        """Compare if a fork is newer than some other fork (cls > other)."""
        return cls is not other and issubclass(cls, other)

    def __ge__(cls, other: "BaseForkMeta") -> bool:
        """Compare if a fork is newer than or equal to some other fork (cls >= other)."""
        return cls is other or issubclass(cls, other)

    def __lt__(cls, other: "BaseForkMeta") -> bool:
        """Compare if a fork is older than some other fork (cls < other)."""
        # "Older" means other is a subclass of cls, but not the same.
        return cls is not other and issubclass(other, cls)

    def __le__(cls, other: "BaseForkMeta") -> bool:
        """Compare if a fork is older than or equal to some other fork (cls <= other)."""
        return cls is other or issubclass(other, cls)


class BaseFork(ABC, metaclass=BaseForkMeta):
    """
    An abstract class representing an Ethereum fork.

    Forks form a single inheritance chain, oldest first, so that the position
    of a fork in the chain is its rank.
    """

    _network_name: ClassVar[Optional[str]] = None
    _ignore: ClassVar[bool] = False

    def __init_subclass__(
        cls,
        *,
        network_name: Optional[str] = None,
        ignore: bool = False,
    ) -> None:
        """Initialize new fork with values that don't carry over to subclass forks."""
        cls._network_name = network_name
        cls._ignore = ignore

    @classmethod
    @abstractmethod
    def tx_types(cls) -> List[int]:
        """Return list of the transaction types supported by the fork."""
        pass

    @classmethod
    @abstractmethod
    def typed_transactions_supported(cls) -> bool:
        """Return true if the fork accepts typed transaction envelopes."""
        pass

    @classmethod
    def name(cls) -> str:
        """Return name of the fork."""
        return cls.__name__

    @classmethod
    def network_name(cls) -> str:
        """
        Return the name used for the fork in chain configurations, e.g.
        `tangerineWhistle` for `TangerineWhistle`.
        """
        if cls._network_name is not None:
            return cls._network_name
        name = cls.name()
        return name[0].lower() + name[1:]

    @classmethod
    def rank(cls) -> int:
        """Return the position of the fork in the chronological fork chain."""
        return sum(1 for base in cls.__mro__ if issubclass(base, BaseFork)) - 2

    @classmethod
    def ignore(cls) -> bool:
        """Return whether the fork only delays the difficulty bomb and adds no features."""
        return cls._ignore

"""
Ethereum fork definitions, ordered chronologically.
"""

from .base_fork import BaseFork
from .forks.forks import (
    DAO,
    Altair,
    ArrowGlacier,
    Bellatrix,
    Berlin,
    Byzantium,
    Cancun,
    Capella,
    Chainstart,
    Constantinople,
    Frontier,
    GrayGlacier,
    Homestead,
    Istanbul,
    London,
    Merge,
    MuirGlacier,
    Petersburg,
    Prague,
    Shanghai,
    SpuriousDragon,
    TangerineWhistle,
)
from .helpers import (
    Fork,
    InvalidForkError,
    forks_from,
    forks_from_until,
    get_fork_by_name,
    get_fork_rank,
    get_forks,
)

__all__ = [
    "BaseFork",
    "Fork",
    "Altair",
    "ArrowGlacier",
    "Bellatrix",
    "Berlin",
    "Byzantium",
    "Cancun",
    "Capella",
    "Chainstart",
    "Constantinople",
    "DAO",
    "Frontier",
    "GrayGlacier",
    "Homestead",
    "InvalidForkError",
    "Istanbul",
    "London",
    "Merge",
    "MuirGlacier",
    "Petersburg",
    "Prague",
    "Shanghai",
    "SpuriousDragon",
    "TangerineWhistle",
    "forks_from",
    "forks_from_until",
    "get_fork_by_name",
    "get_fork_rank",
    "get_forks",
]

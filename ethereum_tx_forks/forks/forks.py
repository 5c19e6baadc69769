"""All Ethereum fork class definitions."""

from typing import List

from ..base_fork import BaseFork


# All forks must be listed here !!! in the order they were introduced !!!
class Chainstart(BaseFork):
    """Chainstart, the genesis rules of the network."""

    @classmethod
    def tx_types(cls) -> List[int]:
        """At genesis, only legacy transactions are allowed."""
        return [0]

    @classmethod
    def typed_transactions_supported(cls) -> bool:
        """At genesis, transactions are untyped RLP lists."""
        return False


class Frontier(Chainstart):
    """Frontier fork."""

    pass


class Homestead(Frontier):
    """Homestead fork."""

    pass


class DAO(Homestead, network_name="dao"):
    """DAO fork, an irregular state change with no transaction changes."""

    pass


class TangerineWhistle(DAO):
    """Tangerine Whistle fork."""

    pass


class SpuriousDragon(TangerineWhistle):
    """Spurious Dragon fork."""

    pass


class Byzantium(SpuriousDragon):
    """Byzantium fork."""

    pass


class Constantinople(Byzantium):
    """Constantinople fork."""

    pass


class Petersburg(Constantinople):
    """Petersburg fork, also known as ConstantinopleFix."""

    pass


class Istanbul(Petersburg):
    """Istanbul fork."""

    pass


class MuirGlacier(Istanbul, ignore=True):
    """Muir Glacier fork."""

    pass


class Berlin(MuirGlacier):
    """Berlin fork."""

    @classmethod
    def tx_types(cls) -> List[int]:
        """At Berlin, access list transactions are introduced."""
        return [1] + super(Berlin, cls).tx_types()

    @classmethod
    def typed_transactions_supported(cls) -> bool:
        """At Berlin, typed transaction envelopes are introduced."""
        return True


class London(Berlin):
    """London fork."""

    @classmethod
    def tx_types(cls) -> List[int]:
        """At London, dynamic fee transactions are introduced."""
        return [2] + super(London, cls).tx_types()


class Altair(London):
    """Altair, the first beacon chain upgrade, tracked alongside execution forks."""

    pass


class ArrowGlacier(Altair, ignore=True):
    """Arrow Glacier fork."""

    pass


class GrayGlacier(ArrowGlacier, ignore=True):
    """Gray Glacier fork."""

    pass


class Bellatrix(GrayGlacier):
    """Bellatrix, the beacon chain side of the merge."""

    pass


class Merge(Bellatrix):
    """Merge fork, also known as Paris."""

    pass


class Capella(Merge):
    """Capella, the beacon chain side of Shanghai."""

    pass


class Shanghai(Capella):
    """Shanghai fork."""

    pass


class Cancun(Shanghai):
    """Cancun fork."""

    @classmethod
    def tx_types(cls) -> List[int]:
        """At Cancun, blob transactions are introduced."""
        return [3] + super(Cancun, cls).tx_types()


class Prague(Cancun):
    """Prague fork."""

    @classmethod
    def tx_types(cls) -> List[int]:
        """At Prague, set-code transactions are introduced."""
        return [4] + super(Prague, cls).tx_types()

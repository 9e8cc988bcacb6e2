"""BSC hardforks and their activation points on the known networks."""

from __future__ import annotations

from enum import Enum
from functools import total_ordering

from bscnode.forks import ChainHardforks, EthereumHardfork, ForkCondition, SpecId

BSC_MAINNET_CHAIN_ID = 56
BSC_TESTNET_CHAIN_ID = 97


@total_ordering
class BscHardfork(Enum):
    """BSC hardforks, in activation order; a later fork compares greater."""

    FRONTIER = "Frontier"
    RAMANUJAN = "Ramanujan"
    NIELS = "Niels"
    MIRROR_SYNC = "MirrorSync"
    BRUNO = "Bruno"
    EULER = "Euler"
    NANO = "Nano"
    MORAN = "Moran"
    GIBBS = "Gibbs"
    PLANCK = "Planck"
    LUBAN = "Luban"
    PLATO = "Plato"
    HERTZ = "Hertz"
    HERTZ_FIX = "HertzFix"
    KEPLER = "Kepler"
    FEYNMAN = "Feynman"
    FEYNMAN_FIX = "FeynmanFix"
    HABER = "Haber"
    HABER_FIX = "HaberFix"
    BOHR = "Bohr"
    PASCAL = "Pascal"
    LORENTZ = "Lorentz"
    MAXWELL = "Maxwell"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, BscHardfork):
            return NotImplemented
        return _ORDER[self] < _ORDER[other]

    def __hash__(self) -> int:
        return hash(self._name_)

    def spec_id(self) -> SpecId:
        """The EVM specification this hardfork runs under."""
        return _SPEC_IDS[self]


_ORDER = {fork: index for index, fork in enumerate(BscHardfork)}

_B = BscHardfork
_E = EthereumHardfork

_SPEC_IDS = {
    **dict.fromkeys(
        (
            _B.FRONTIER, _B.RAMANUJAN, _B.NIELS, _B.MIRROR_SYNC, _B.BRUNO, _B.EULER,
            _B.GIBBS, _B.NANO, _B.MORAN, _B.PLANCK, _B.LUBAN, _B.PLATO,
        ),
        SpecId.MUIR_GLACIER,
    ),
    **dict.fromkeys((_B.HERTZ, _B.HERTZ_FIX), SpecId.LONDON),
    **dict.fromkeys((_B.KEPLER, _B.FEYNMAN, _B.FEYNMAN_FIX), SpecId.SHANGHAI),
    **dict.fromkeys(
        (_B.HABER, _B.HABER_FIX, _B.BOHR, _B.PASCAL, _B.LORENTZ, _B.MAXWELL),
        SpecId.CANCUN,
    ),
}

_GENESIS_ETHEREUM_FORKS = (
    _E.FRONTIER, _E.HOMESTEAD, _E.TANGERINE, _E.SPURIOUS_DRAGON, _E.BYZANTIUM,
    _E.CONSTANTINOPLE, _E.PETERSBURG, _E.ISTANBUL, _E.MUIR_GLACIER,
)

_MAINNET_BLOCKS = {
    **dict.fromkeys(_GENESIS_ETHEREUM_FORKS, 0),
    _E.BERLIN: 31302048,
    _E.LONDON: 31302048,
    _B.RAMANUJAN: 0,
    _B.NIELS: 0,
    _B.MIRROR_SYNC: 5184000,
    _B.BRUNO: 13082000,
    _B.EULER: 18907621,
    _B.NANO: 21962149,
    _B.MORAN: 22107423,
    _B.GIBBS: 23846001,
    _B.PLANCK: 27281024,
    _B.LUBAN: 29020050,
    _B.PLATO: 30720096,
    _B.HERTZ: 31302048,
    _B.HERTZ_FIX: 34140700,
}

_TESTNET_BLOCKS = {
    **dict.fromkeys(_GENESIS_ETHEREUM_FORKS, 0),
    _E.BERLIN: 31103030,
    _E.LONDON: 31103030,
    _B.RAMANUJAN: 1010000,
    _B.NIELS: 1014369,
    _B.MIRROR_SYNC: 5582500,
    _B.BRUNO: 13837000,
    _B.EULER: 19203503,
    _B.GIBBS: 22800220,
    _B.NANO: 23482428,
    _B.MORAN: 23603940,
    _B.PLANCK: 28196022,
    _B.LUBAN: 29295050,
    _B.PLATO: 29861024,
    _B.HERTZ: 31103030,
    _B.HERTZ_FIX: 35682300,
}

_MAINNET_TIMESTAMPS = {
    _E.SHANGHAI: 1705996800,
    _E.CANCUN: 1718863500,
    _B.KEPLER: 1705996800,
    _B.FEYNMAN: 1713419340,
    _B.FEYNMAN_FIX: 1713419340,
    _B.HABER: 1718863500,
}

_TESTNET_TIMESTAMPS = {
    _E.SHANGHAI: 1702972800,
    _E.CANCUN: 1713330442,
    _B.KEPLER: 1702972800,
    _B.FEYNMAN: 1710136800,
    _B.FEYNMAN_FIX: 1711342800,
    _B.HABER: 1716962820,
    _B.HABER_FIX: 1719986788,
}


def bsc_mainnet_activation_block(fork: Enum) -> int | None:
    """Activation block of ``fork`` on BSC mainnet, if it activates by block."""
    return _MAINNET_BLOCKS.get(fork)


def bsc_testnet_activation_block(fork: Enum) -> int | None:
    """Activation block of ``fork`` on BSC testnet, if it activates by block."""
    return _TESTNET_BLOCKS.get(fork)


def bsc_mainnet_activation_timestamp(fork: Enum) -> int | None:
    """Activation timestamp of ``fork`` on BSC mainnet, if known."""
    return _MAINNET_TIMESTAMPS.get(fork)


def bsc_testnet_activation_timestamp(fork: Enum) -> int | None:
    """Activation timestamp of ``fork`` on BSC testnet, if known."""
    return _TESTNET_TIMESTAMPS.get(fork)


def activation_block(fork: Enum, chain_id: int) -> int | None:
    """Activation block of ``fork`` on the chain with ``chain_id``."""
    if chain_id == BSC_MAINNET_CHAIN_ID:
        return bsc_mainnet_activation_block(fork)
    if chain_id == BSC_TESTNET_CHAIN_ID:
        return bsc_testnet_activation_block(fork)
    return None


def activation_timestamp(fork: Enum, chain_id: int) -> int | None:
    """Activation timestamp of ``fork`` on the chain with ``chain_id``."""
    if chain_id == BSC_MAINNET_CHAIN_ID:
        return bsc_mainnet_activation_timestamp(fork)
    if chain_id == BSC_TESTNET_CHAIN_ID:
        return bsc_testnet_activation_timestamp(fork)
    return None


def _genesis_forks() -> list[tuple[Enum, ForkCondition]]:
    return [(fork, ForkCondition.block(0)) for fork in _GENESIS_ETHEREUM_FORKS]


def bsc_mainnet_hardforks() -> ChainHardforks:
    """The ordered hardfork list of BSC mainnet."""
    block, ts = ForkCondition.block, ForkCondition.timestamp
    return ChainHardforks(
        _genesis_forks()
        + [
            (_B.RAMANUJAN, block(0)),
            (_B.NIELS, block(0)),
            (_B.MIRROR_SYNC, block(5184000)),
            (_B.BRUNO, block(13082000)),
            (_B.EULER, block(18907621)),
            (_B.NANO, block(21962149)),
            (_B.MORAN, block(22107423)),
            (_B.GIBBS, block(23846001)),
            (_B.PLANCK, block(27281024)),
            (_B.LUBAN, block(29020050)),
            (_B.PLATO, block(30720096)),
            (_E.BERLIN, block(31302048)),
            (_E.LONDON, block(31302048)),
            (_B.HERTZ, block(31302048)),
            (_B.HERTZ_FIX, block(34140700)),
            (_E.SHANGHAI, ts(1705996800)),  # 2024-01-23 08:00:00 UTC
            (_B.KEPLER, ts(1705996800)),
            (_B.FEYNMAN, ts(1713419340)),  # 2024-04-18 05:49:00 UTC
            (_B.FEYNMAN_FIX, ts(1713419340)),
            (_E.CANCUN, ts(1718863500)),  # 2024-06-20 06:05:00 UTC
            (_B.HABER, ts(1718863500)),
            (_B.HABER_FIX, ts(1727316120)),  # 2024-09-26 02:02:00 UTC
            (_B.BOHR, ts(1727317200)),  # 2024-09-26 02:20:00 UTC
            (_E.PRAGUE, ts(1742436600)),  # 2025-03-20 02:10:00 UTC
            (_B.PASCAL, ts(1742436600)),
            (_B.LORENTZ, ts(1745903100)),  # 2025-04-29 05:05:00 UTC
            (_B.MAXWELL, ts(1751250600)),  # 2025-06-30 02:30:00 UTC
        ]
    )


def bsc_testnet_hardforks() -> ChainHardforks:
    """The ordered hardfork list of BSC testnet (Chapel)."""
    block, ts = ForkCondition.block, ForkCondition.timestamp
    return ChainHardforks(
        _genesis_forks()
        + [
            (_B.RAMANUJAN, block(1010000)),
            (_B.NIELS, block(1014369)),
            (_B.MIRROR_SYNC, block(5582500)),
            (_B.BRUNO, block(13837000)),
            (_B.EULER, block(19203503)),
            (_B.GIBBS, block(22800220)),
            (_B.NANO, block(23482428)),
            (_B.MORAN, block(23603940)),
            (_B.PLANCK, block(28196022)),
            (_B.LUBAN, block(29295050)),
            (_B.PLATO, block(29861024)),
            (_E.BERLIN, block(31103030)),
            (_E.LONDON, block(31103030)),
            (_B.HERTZ, block(31103030)),
            (_B.HERTZ_FIX, block(35682300)),
            (_E.SHANGHAI, ts(1702972800)),
            (_B.KEPLER, ts(1702972800)),
            (_B.FEYNMAN, ts(1710136800)),
            (_B.FEYNMAN_FIX, ts(1711342800)),
            (_E.CANCUN, ts(1713330442)),
            (_B.HABER, ts(1716962820)),
            (_B.HABER_FIX, ts(1719986788)),
            (_B.BOHR, ts(1724116996)),
            (_E.PRAGUE, ts(1740452880)),
            (_B.PASCAL, ts(1740452880)),
            (_B.LORENTZ, ts(1744097580)),
            (_B.MAXWELL, ts(1748243100)),
        ]
    )


def bsc_qa_hardforks() -> ChainHardforks:
    """The ordered hardfork list of the BSC QA network."""
    block, ts = ForkCondition.block, ForkCondition.timestamp
    return ChainHardforks(
        _genesis_forks()
        + [
            (_B.RAMANUJAN, block(0)),
            (_B.NIELS, block(0)),
            (_B.MIRROR_SYNC, block(1)),
            (_B.BRUNO, block(1)),
            (_B.EULER, block(2)),
            (_B.NANO, block(3)),
            (_B.MORAN, block(3)),
            (_B.GIBBS, block(4)),
            (_B.PLANCK, block(5)),
            (_B.LUBAN, block(6)),
            (_B.PLATO, block(7)),
            (_E.BERLIN, block(8)),
            (_E.LONDON, block(8)),
            (_B.HERTZ, block(8)),
            (_B.HERTZ_FIX, block(8)),
            (_E.SHANGHAI, ts(1722442622)),
            (_B.KEPLER, ts(1722442622)),
            (_B.FEYNMAN, ts(1722442622)),
            (_B.FEYNMAN_FIX, ts(1722442622)),
            (_E.CANCUN, ts(1722442622)),
            (_B.HABER, ts(1722442622)),
            (_B.HABER_FIX, ts(1722442622)),
            (_B.BOHR, ts(1722444422)),
        ]
    )
"""Fork conditions, chain heads and ordered hardfork tables."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Iterable, Iterator


class EthereumHardfork(Enum):
    """Ethereum hardforks, in activation order."""

    FRONTIER = "Frontier"
    HOMESTEAD = "Homestead"
    DAO = "Dao"
    TANGERINE = "Tangerine"
    SPURIOUS_DRAGON = "SpuriousDragon"
    BYZANTIUM = "Byzantium"
    CONSTANTINOPLE = "Constantinople"
    PETERSBURG = "Petersburg"
    ISTANBUL = "Istanbul"
    MUIR_GLACIER = "MuirGlacier"
    BERLIN = "Berlin"
    LONDON = "London"
    ARROW_GLACIER = "ArrowGlacier"
    GRAY_GLACIER = "GrayGlacier"
    PARIS = "Paris"
    SHANGHAI = "Shanghai"
    CANCUN = "Cancun"
    PRAGUE = "Prague"
    OSAKA = "Osaka"


class SpecId(IntEnum):
    """EVM specification levels; a later level compares greater."""

    FRONTIER = 0
    FRONTIER_THAWING = 1
    HOMESTEAD = 2
    DAO_FORK = 3
    TANGERINE = 4
    SPURIOUS_DRAGON = 5
    BYZANTIUM = 6
    CONSTANTINOPLE = 7
    PETERSBURG = 8
    ISTANBUL = 9
    MUIR_GLACIER = 10
    BERLIN = 11
    LONDON = 12
    ARROW_GLACIER = 13
    GRAY_GLACIER = 14
    MERGE = 15
    SHANGHAI = 16
    CANCUN = 17
    PRAGUE = 18
    OSAKA = 19


@dataclass(frozen=True)
class Head:
    """The tip of a chain as seen by fork-id computations."""

    number: int = 0
    hash: bytes = bytes(32)
    difficulty: int = 0
    total_difficulty: int = 0
    timestamp: int = 0


@dataclass(frozen=True)
class ForkId:
    """An EIP-2124 fork identifier: a 4-byte checksum and the next fork point."""

    hash: bytes
    next: int = 0

    def __post_init__(self) -> None:
        if len(self.hash) != 4:
            raise ValueError("fork hash must be exactly 4 bytes")
        if self.next < 0:
            raise ValueError("next fork must not be negative")


@dataclass(frozen=True)
class ForkCondition:
    """When a hardfork activates: at a block, at a timestamp, or never."""

    at_block: int | None = None
    at_timestamp: int | None = None

    def __post_init__(self) -> None:
        if self.at_block is not None and self.at_timestamp is not None:
            raise ValueError("a fork activates by block or by timestamp, not both")
        for value in (self.at_block, self.at_timestamp):
            if value is not None and value < 0:
                raise ValueError("activation point must not be negative")

    @classmethod
    def block(cls, number: int) -> ForkCondition:
        return cls(at_block=number)

    @classmethod
    def timestamp(cls, value: int) -> ForkCondition:
        return cls(at_timestamp=value)

    @classmethod
    def never(cls) -> ForkCondition:
        return cls()

    def active_at_block(self, block_number: int) -> bool:
        return self.at_block is not None and block_number >= self.at_block

    def transitions_at_block(self, block_number: int) -> bool:
        return self.at_block is not None and block_number == self.at_block

    def active_at_timestamp(self, timestamp: int) -> bool:
        return self.at_timestamp is not None and timestamp >= self.at_timestamp

    def transitions_at_timestamp(self, timestamp: int, parent_timestamp: int) -> bool:
        return (
            self.at_timestamp is not None
            and parent_timestamp < self.at_timestamp <= timestamp
        )

    def active_at_head(self, head: Head) -> bool:
        return self.active_at_block(head.number) or self.active_at_timestamp(head.timestamp)


class ChainHardforks:
    """An ordered list of hardforks with their activation conditions."""

    def __init__(self, forks: Iterable[tuple[Enum, ForkCondition]] = ()) -> None:
        self._forks = list(forks)
        self._conditions = dict(self._forks)

    def fork(self, fork: Enum) -> ForkCondition:
        """Return the condition of ``fork``, or a never-active one if it is absent."""
        return self._conditions.get(fork, ForkCondition.never())

    def forks_iter(self) -> Iterator[tuple[Enum, ForkCondition]]:
        return iter(self._forks)

    def __iter__(self) -> Iterator[tuple[Enum, ForkCondition]]:
        return self.forks_iter()

    def __len__(self) -> int:
        return len(self._forks)

    def __contains__(self, fork: object) -> bool:
        return fork in self._conditions

    def __repr__(self) -> str:
        return f"ChainHardforks({self._forks!r})"
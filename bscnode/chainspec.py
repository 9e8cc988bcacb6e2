"""Chain specifications of BSC mainnet and testnet, and a parser for chain names."""

from __future__ import annotations

import zlib
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Iterator

from bscnode.activation import BscHardforks
from bscnode.forks import (
    ChainHardforks,
    EthereumHardfork,
    ForkCondition,
    ForkId,
    Head,
)
from bscnode.hardforks import (
    BSC_MAINNET_CHAIN_ID,
    BSC_TESTNET_CHAIN_ID,
    BscHardfork,
    bsc_mainnet_hardforks,
    bsc_testnet_hardforks,
)

MAINNET_GENESIS_HASH = bytes.fromhex(
    "0d21840abff46b96c84b2ac9e10e4f5cdaeb5693cb665db62a2f3b02d2d57b5b"
)
TESTNET_GENESIS_HASH = bytes.fromhex(
    "6d3c66c5357ec91d5c43af47e234a939b22557cbb552dc45bebbceeed90fbe34"
)
PRUNE_DELETE_LIMIT = 3500


class UnsupportedChainError(ValueError):
    """Raised when a chain name is not one of the supported chains."""


@dataclass(eq=False)
class BscChainSpec(BscHardforks):
    """A BSC chain: its id, genesis and ordered hardfork schedule."""

    chain_id: int
    genesis_hash: bytes
    hardforks: ChainHardforks = field(repr=False)
    genesis_timestamp: int = 0
    prune_delete_limit: int = PRUNE_DELETE_LIMIT
    base_fee_params: tuple[int, int] = (1, 1)

    def __post_init__(self) -> None:
        if len(self.genesis_hash) != 32:
            raise ValueError("genesis hash must be 32 bytes")

    def fork(self, fork: Enum) -> ForkCondition:
        """The activation condition of any hardfork in this chain's schedule."""
        return self.hardforks.fork(fork)

    def forks_iter(self) -> Iterator[tuple[Enum, ForkCondition]]:
        return self.hardforks.forks_iter()

    def bsc_fork_activation(self, fork: BscHardfork) -> ForkCondition:
        return self.fork(fork)

    def ethereum_fork_activation(self, fork: EthereumHardfork) -> ForkCondition:
        return self.fork(fork)

    def fork_id(self, head: Head) -> ForkId:
        """The EIP-2124 fork identifier at ``head``.

        Block forks are applied before timestamp forks; forks sharing an
        activation point are counted once.
        """
        checksum = zlib.crc32(self.genesis_hash)
        current = 0
        for _, condition in self.forks_iter():
            block = condition.at_block
            if block is None:
                continue
            if head.number < block:
                return ForkId(checksum.to_bytes(4, "big"), block)
            if block != current:
                checksum = zlib.crc32(block.to_bytes(8, "big"), checksum)
                current = block
        for _, condition in self.forks_iter():
            timestamp = condition.at_timestamp
            if timestamp is None or timestamp <= self.genesis_timestamp:
                continue
            if head.timestamp < timestamp:
                return ForkId(checksum.to_bytes(4, "big"), timestamp)
            if timestamp != current:
                checksum = zlib.crc32(timestamp.to_bytes(8, "big"), checksum)
                current = timestamp
        return ForkId(checksum.to_bytes(4, "big"), 0)

    def latest_fork_id(self) -> ForkId:
        """The fork identifier once every scheduled fork is active."""
        blocks = [c.at_block for _, c in self.forks_iter() if c.at_block is not None]
        stamps = [c.at_timestamp for _, c in self.forks_iter() if c.at_timestamp is not None]
        return self.fork_id(
            Head(number=max(blocks, default=0), timestamp=max(stamps, default=0))
        )

    def head(self) -> Head:
        """A known head of this chain; mainnet's for chains other than testnet."""
        if self.chain_id == BSC_TESTNET_CHAIN_ID:
            return testnet_head()
        return mainnet_head()


def bsc_mainnet() -> BscChainSpec:
    """The chain specification of BSC mainnet."""
    return BscChainSpec(
        chain_id=BSC_MAINNET_CHAIN_ID,
        genesis_hash=MAINNET_GENESIS_HASH,
        hardforks=bsc_mainnet_hardforks(),
    )


def bsc_testnet() -> BscChainSpec:
    """The chain specification of BSC testnet (Chapel)."""
    return BscChainSpec(
        chain_id=BSC_TESTNET_CHAIN_ID,
        genesis_hash=TESTNET_GENESIS_HASH,
        hardforks=bsc_testnet_hardforks(),
    )


def mainnet_head() -> Head:
    return Head(number=40_000_000, timestamp=1751250600)


def testnet_head() -> Head:
    return Head(
        number=57_638_970,
        hash=bytes.fromhex(
            "74e802362fb536395ef7d9d82a87631d5fffaa584a891999d5e77b91bda33754"
        ),
        difficulty=2,
        total_difficulty=115_030_996,
        timestamp=1752059605,
    )


_KNOWN_CHAINS = {"bsc": bsc_mainnet, "bsc-testnet": bsc_testnet}


def chain_value_parser(s: str) -> BscChainSpec:
    """Return the chain specification named ``s``."""
    try:
        factory = _KNOWN_CHAINS[s]
    except KeyError:
        raise UnsupportedChainError(f"Unsupported chain: {s}") from None
    return factory()


class BscChainSpecParser:
    """Parses chain names given on the command line."""

    SUPPORTED_CHAINS: ClassVar[tuple[str, ...]] = ("bsc", "bsc-testnet")

    def parse(self, s: str) -> BscChainSpec:
        return chain_value_parser(s)
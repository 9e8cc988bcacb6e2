"""Parlia consensus rules for choosing the canonical head."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar

ETH_TO_WEI = 10**18

SYSTEM_ADDRESS = bytes.fromhex("fffffffffffffffffffffffffffffffffffffffe")
SYSTEM_REWARD_PERCENT = 4
"""The reward percent given to the system."""
MAX_SYSTEM_REWARD = 100 * ETH_TO_WEI
"""The largest balance the system reward contract may hold."""


class BlockNumReader(Protocol):
    """What the consensus needs to know about the stored chain."""

    def best_block_number(self) -> int: ...

    def block_hash(self, number: int) -> bytes | None: ...


P = TypeVar("P", bound=BlockNumReader)


class ParliaConsensusError(Exception):
    """Base class of errors raised by the Parlia consensus."""


class HeadHashNotFoundError(ParliaConsensusError):
    """The hash of the current head block is not stored."""

    def __init__(self, message: str = "Head block hash not found") -> None:
        super().__init__(message)


@dataclass
class ParliaConsensus(Generic[P]):
    """Parlia consensus over a provider of block numbers and hashes."""

    provider: P

    def canonical_head(self, hash: bytes, number: int) -> tuple[bytes, bytes]:
        """Choose the head between a new block and the current head.

        The higher block wins; at equal height the lower hash wins. Returns the
        chosen head hash and the current head hash.
        """
        current_head = self.provider.best_block_number()
        current_hash = self.provider.block_hash(current_head)
        if current_hash is None:
            raise HeadHashNotFoundError()

        if number > current_head:
            return hash, current_hash
        if number == current_head:
            return min(hash, current_hash), current_hash
        return current_hash, current_hash
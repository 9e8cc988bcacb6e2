"""Precompile results and errors, including the BSC-specific ones."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PrecompileError(Exception):
    """A precompile failed; the message tells why."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PrecompileError):
            return NotImplemented
        return type(self) is type(other) and self.message == other.message

    def __hash__(self) -> int:
        return hash((type(self), self.message))


class PrecompileOutOfGas(PrecompileError):
    """The precompile needs more gas than it was given."""

    def __init__(self, message: str = "out of gas") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class PrecompileOutput:
    """A successful precompile run: the gas it used and the bytes it returned."""

    gas_used: int
    data: bytes = b""


class BscPrecompileErrorKind(Enum):
    COMETBFT_INVALID_INPUT = "invalid input"
    COMETBFT_APPLY_BLOCK_FAILED = "apply block failed"
    COMETBFT_ENCODE_CONSENSUS_STATE_FAILED = "encode consensus state failed"
    REVERTED = "reverted"


@dataclass(frozen=True)
class BscPrecompileError:
    """A BSC-specific precompile failure.

    A reverted precompile consumes only ``gas``, not all of the gas it was given.
    """

    kind: BscPrecompileErrorKind
    gas: int = 0

    def __post_init__(self) -> None:
        if self.gas < 0:
            raise ValueError("gas must not be negative")

    def to_precompile_error(self) -> PrecompileError:
        if self.kind is BscPrecompileErrorKind.REVERTED:
            return PrecompileError(f"Reverted({self.gas})")
        return PrecompileError(self.kind.value)
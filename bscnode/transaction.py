"""Transaction environments for EVM execution on BSC."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

ZERO_ADDRESS = bytes(20)
LEGACY_TX_TYPE = 0
EIP2930_TX_TYPE = 1

AccessList = list[tuple[bytes, list[bytes]]]


def _check_address(value: bytes, what: str) -> None:
    if len(value) != 20:
        raise ValueError(f"{what} must be a 20-byte address")


@dataclass(frozen=True)
class TxKind:
    """The target of a transaction: a call to ``to``, or a contract creation if ``to`` is None."""

    to: bytes | None

    def __post_init__(self) -> None:
        if self.to is not None:
            _check_address(self.to, "call target")

    @property
    def is_create(self) -> bool:
        return self.to is None


@dataclass
class TxEnv:
    """The transaction fields the EVM executes against."""

    tx_type: int = LEGACY_TX_TYPE
    caller: bytes = ZERO_ADDRESS
    gas_limit: int = 30_000_000
    gas_price: int = 0
    kind: TxKind = field(default_factory=lambda: TxKind(ZERO_ADDRESS))
    value: int = 0
    data: bytes = b""
    nonce: int = 0
    chain_id: int | None = 1
    access_list: AccessList = field(default_factory=list)
    gas_priority_fee: int | None = None
    blob_hashes: list[bytes] = field(default_factory=list)
    max_fee_per_blob_gas: int = 0
    authorization_list: list[Any] = field(default_factory=list)

    def __post_init__(self) -> None:
        _check_address(self.caller, "caller")

    @property
    def max_fee_per_gas(self) -> int:
        return self.gas_price

    @property
    def max_priority_fee_per_gas(self) -> int | None:
        return self.gas_priority_fee

    @property
    def authorization_list_len(self) -> int:
        return len(self.authorization_list)

    def effective_gas_price(self, base_fee: int) -> int:
        """The price per gas actually paid under ``base_fee``."""
        if self.tx_type in (LEGACY_TX_TYPE, EIP2930_TX_TYPE):
            return self.gas_price
        priority = self.max_priority_fee_per_gas
        if priority is None:
            return self.gas_price
        return min(self.gas_price, base_fee + priority)


def _delegate(name: str, writable: bool = False) -> property:
    def get(self: BscTxEnv) -> Any:
        return getattr(self.base, name)

    if not writable:
        return property(get)

    def set_(self: BscTxEnv, value: Any) -> None:
        setattr(self.base, name, value)

    return property(get, set_)


@dataclass
class BscTxEnv:
    """A transaction environment that can also mark BSC system transactions."""

    base: TxEnv = field(default_factory=TxEnv)
    is_system_transaction: bool = False

    @classmethod
    def from_base(cls, base: TxEnv) -> BscTxEnv:
        """Wrap ``base`` as an ordinary, non-system transaction."""
        return cls(base=base, is_system_transaction=False)

    tx_type = _delegate("tx_type")
    caller = _delegate("caller")
    gas_limit = _delegate("gas_limit", writable=True)
    value = _delegate("value")
    data = _delegate("data")
    nonce = _delegate("nonce", writable=True)
    kind = _delegate("kind")
    chain_id = _delegate("chain_id")
    gas_price = _delegate("gas_price")
    access_list = _delegate("access_list", writable=True)
    blob_hashes = _delegate("blob_hashes")
    max_fee_per_blob_gas = _delegate("max_fee_per_blob_gas")
    authorization_list = _delegate("authorization_list")
    authorization_list_len = _delegate("authorization_list_len")
    max_fee_per_gas = _delegate("max_fee_per_gas")
    max_priority_fee_per_gas = _delegate("max_priority_fee_per_gas")

    def effective_gas_price(self, base_fee: int) -> int:
        return self.base.effective_gas_price(base_fee)
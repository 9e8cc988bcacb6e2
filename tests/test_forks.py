import pytest

from bscnode.forks import (
    ChainHardforks,
    EthereumHardfork,
    ForkCondition,
    ForkId,
    Head,
)


def test_block_condition_activity():
    cond = ForkCondition.block(100)
    assert not cond.active_at_block(99)
    assert cond.active_at_block(100)
    assert cond.active_at_block(101)
    assert not cond.active_at_timestamp(10**12)


def test_block_condition_transition_only_at_block():
    cond = ForkCondition.block(100)
    assert cond.transitions_at_block(100)
    assert not cond.transitions_at_block(101)
    assert not cond.transitions_at_timestamp(100, 99)


def test_timestamp_condition_activity():
    cond = ForkCondition.timestamp(1705996800)
    assert cond.active_at_timestamp(1705996800)
    assert not cond.active_at_timestamp(1705996799)
    assert not cond.active_at_block(1705996800)


def test_timestamp_condition_transitions():
    cond = ForkCondition.timestamp(1000)
    assert cond.transitions_at_timestamp(1000, 999)
    assert cond.transitions_at_timestamp(1003, 997)
    assert not cond.transitions_at_timestamp(1003, 1000)
    assert not cond.transitions_at_timestamp(999, 990)


def test_never_condition_is_never_active():
    cond = ForkCondition.never()
    assert not cond.active_at_block(10**9)
    assert not cond.active_at_timestamp(10**12)
    assert not cond.transitions_at_block(0)
    assert not cond.active_at_head(Head(number=10**9, timestamp=10**12))


def test_active_at_head():
    head = Head(number=40_000_000, timestamp=1751250600)
    assert ForkCondition.block(40_000_000).active_at_head(head)
    assert not ForkCondition.block(40_000_001).active_at_head(head)
    assert ForkCondition.timestamp(1751250600).active_at_head(head)
    assert not ForkCondition.timestamp(1751250601).active_at_head(head)


def test_condition_rejects_invalid_values():
    with pytest.raises(ValueError):
        ForkCondition.block(-1)
    with pytest.raises(ValueError):
        ForkCondition(at_block=1, at_timestamp=2)


def test_conditions_compare_by_value():
    assert ForkCondition.block(5) == ForkCondition.block(5)
    assert ForkCondition.block(5) != ForkCondition.timestamp(5)


def test_head_defaults():
    head = Head()
    assert head.hash == bytes(32)
    assert head.number == 0


def test_fork_id_requires_four_bytes():
    assert ForkId(hash=b"\x09\x8d\x24\xac").hash == b"\x09\x8d\x24\xac"
    with pytest.raises(ValueError):
        ForkId(hash=b"\x00\x01")


def test_chain_hardforks_lookup_and_order():
    forks = [
        (EthereumHardfork.FRONTIER, ForkCondition.block(0)),
        (EthereumHardfork.LONDON, ForkCondition.block(7)),
        (EthereumHardfork.SHANGHAI, ForkCondition.timestamp(9)),
    ]
    table = ChainHardforks(forks)
    assert list(table.forks_iter()) == forks
    assert table.fork(EthereumHardfork.LONDON) == ForkCondition.block(7)
    assert table.fork(EthereumHardfork.PRAGUE) == ForkCondition.never()
    assert len(table) == len(forks)
    assert EthereumHardfork.SHANGHAI in table
    assert EthereumHardfork.CANCUN not in table
import pytest

from bscnode.activation import BscHardforks
from bscnode.forks import ChainHardforks, ForkCondition
from bscnode.hardforks import (
    BscHardfork,
    bsc_mainnet_hardforks,
    bsc_qa_hardforks,
    bsc_testnet_hardforks,
)


class _Table(BscHardforks):
    def __init__(self, hardforks: ChainHardforks) -> None:
        self.hardforks = hardforks

    def bsc_fork_activation(self, fork):
        return self.hardforks.fork(fork)


@pytest.fixture
def mainnet():
    return _Table(bsc_mainnet_hardforks())


@pytest.fixture
def chapel():
    return _Table(bsc_testnet_hardforks())


def test_abstract_base_cannot_be_instantiated():
    with pytest.raises(TypeError):
        BscHardforks()


def test_ramanujan_transition_on_testnet(chapel):
    assert chapel.is_on_ramanujan_at_block(1010000) is True
    assert chapel.is_on_ramanujan_at_block(1010001) is False
    assert chapel.is_ramanujan_active_at_block(1010001) is True
    assert chapel.is_ramanujan_active_at_block(1009999) is False


def test_genesis_forks_on_mainnet(mainnet):
    assert mainnet.is_on_ramanujan_at_block(0) is True
    assert mainnet.is_niels_active_at_block(0) is True
    assert mainnet.is_mirror_sync_active_at_block(5184000 - 1) is False
    assert mainnet.is_mirror_sync_active_at_block(5184000) is True


@pytest.mark.parametrize(
    "check, block",
    [
        ("is_bruno_active_at_block", 13082000),
        ("is_euler_active_at_block", 18907621),
        ("is_nano_active_at_block", 21962149),
        ("is_moran_active_at_block", 22107423),
        ("is_gibbs_active_at_block", 23846001),
        ("is_planck_active_at_block", 27281024),
        ("is_luban_active_at_block", 29020050),
        ("is_plato_active_at_block", 30720096),
        ("is_hertz_active_at_block", 31302048),
        ("is_hertz_fix_active_at_block", 34140700),
    ],
)
def test_block_forks_activate_at_their_block(mainnet, check, block):
    method = getattr(mainnet, check)
    assert method(block) is True
    assert method(block - 1) is False


@pytest.mark.parametrize(
    "check, block",
    [
        ("is_on_euler_at_block", 18907621),
        ("is_on_planck_at_block", 27281024),
        ("is_on_luban_at_block", 29020050),
        ("is_on_plato_at_block", 30720096),
    ],
)
def test_block_transitions_only_at_exact_block(mainnet, check, block):
    method = getattr(mainnet, check)
    assert method(block) is True
    assert method(block + 1) is False
    assert method(block - 1) is False


@pytest.mark.parametrize(
    "active, on, timestamp",
    [
        ("is_kepler_active_at_timestamp", "is_on_kepler_at_timestamp", 1705996800),
        ("is_feynman_active_at_timestamp", "is_on_feynman_at_timestamp", 1713419340),
        ("is_feynman_fix_active_at_timestamp", "is_on_feynman_fix_at_timestamp", 1713419340),
        ("is_haber_active_at_timestamp", "is_on_haber_at_timestamp", 1718863500),
        ("is_haber_fix_active_at_timestamp", "is_on_haber_fix_at_timestamp", 1727316120),
        ("is_bohr_active_at_timestamp", "is_on_bohr_at_timestamp", 1727317200),
    ],
)
def test_timestamp_forks_on_mainnet(mainnet, active, on, timestamp):
    assert getattr(mainnet, active)(timestamp) is True
    assert getattr(mainnet, active)(timestamp - 1) is False
    assert getattr(mainnet, on)(timestamp, timestamp - 3) is True
    assert getattr(mainnet, on)(timestamp + 3, timestamp) is False


@pytest.mark.parametrize(
    "check, timestamp",
    [
        ("is_pascal_active_at_timestamp", 1742436600),
        ("is_lorentz_active_at_timestamp", 1745903100),
        ("is_maxwell_active_at_timestamp", 1751250600),
    ],
)
def test_latest_forks_on_mainnet(mainnet, check, timestamp):
    assert getattr(mainnet, check)(timestamp) is True
    assert getattr(mainnet, check)(timestamp - 1) is False


def test_testnet_feynman_fix_differs_from_feynman(chapel):
    assert chapel.is_feynman_active_at_timestamp(1710136800) is True
    assert chapel.is_feynman_fix_active_at_timestamp(1710136800) is False
    assert chapel.is_feynman_fix_active_at_timestamp(1711342800) is True


def test_unscheduled_fork_is_never_active():
    qa = _Table(bsc_qa_hardforks())
    assert qa.is_pascal_active_at_timestamp(10**12) is False
    assert qa.is_maxwell_active_at_timestamp(10**12) is False
    assert qa.is_bohr_active_at_timestamp(1722444422) is True


def test_block_forks_are_not_timestamp_forks(mainnet):
    assert mainnet.is_kepler_active_at_timestamp(0) is False
    empty = _Table(ChainHardforks([(BscHardfork.KEPLER, ForkCondition.block(5))]))
    assert empty.is_kepler_active_at_timestamp(10**12) is False
"""Queries on when BSC hardforks activate, shared by anything holding a fork table."""

from __future__ import annotations

from abc import ABC, abstractmethod

from bscnode.forks import ForkCondition
from bscnode.hardforks import BscHardfork


class BscHardforks(ABC):
    """Activation checks for every BSC hardfork.

    Subclasses supply :meth:`bsc_fork_activation`; all other checks derive from it.
    """

    @abstractmethod
    def bsc_fork_activation(self, fork: BscHardfork) -> ForkCondition:
        """The activation condition of ``fork``; never-active if it is not scheduled."""

    def _active_at_block(self, fork: BscHardfork, block_number: int) -> bool:
        return self.bsc_fork_activation(fork).active_at_block(block_number)

    def _transitions_at_block(self, fork: BscHardfork, block_number: int) -> bool:
        return self.bsc_fork_activation(fork).transitions_at_block(block_number)

    def _active_at_timestamp(self, fork: BscHardfork, timestamp: int) -> bool:
        return self.bsc_fork_activation(fork).active_at_timestamp(timestamp)

    def _transitions_at_timestamp(
        self, fork: BscHardfork, timestamp: int, parent_timestamp: int
    ) -> bool:
        return self.bsc_fork_activation(fork).transitions_at_timestamp(
            timestamp, parent_timestamp
        )

    def is_on_ramanujan_at_block(self, block_number: int) -> bool:
        """Whether Ramanujan activates exactly at ``block_number``."""
        return self._transitions_at_block(BscHardfork.RAMANUJAN, block_number)

    def is_ramanujan_active_at_block(self, block_number: int) -> bool:
        return self._active_at_block(BscHardfork.RAMANUJAN, block_number)

    def is_niels_active_at_block(self, block_number: int) -> bool:
        return self._active_at_block(BscHardfork.NIELS, block_number)

    def is_mirror_sync_active_at_block(self, block_number: int) -> bool:
        return self._active_at_block(BscHardfork.MIRROR_SYNC, block_number)

    def is_bruno_active_at_block(self, block_number: int) -> bool:
        return self._active_at_block(BscHardfork.BRUNO, block_number)

    def is_on_euler_at_block(self, block_number: int) -> bool:
        """Whether Euler activates exactly at ``block_number``."""
        return self._transitions_at_block(BscHardfork.EULER, block_number)

    def is_euler_active_at_block(self, block_number: int) -> bool:
        return self._active_at_block(BscHardfork.EULER, block_number)

    def is_nano_active_at_block(self, block_number: int) -> bool:
        return self._active_at_block(BscHardfork.NANO, block_number)

    def is_moran_active_at_block(self, block_number: int) -> bool:
        return self._active_at_block(BscHardfork.MORAN, block_number)

    def is_gibbs_active_at_block(self, block_number: int) -> bool:
        return self._active_at_block(BscHardfork.GIBBS, block_number)

    def is_on_planck_at_block(self, block_number: int) -> bool:
        """Whether Planck activates exactly at ``block_number``."""
        return self._transitions_at_block(BscHardfork.PLANCK, block_number)

    def is_planck_active_at_block(self, block_number: int) -> bool:
        return self._active_at_block(BscHardfork.PLANCK, block_number)

    def is_on_luban_at_block(self, block_number: int) -> bool:
        """Whether Luban activates exactly at ``block_number``."""
        return self._transitions_at_block(BscHardfork.LUBAN, block_number)

    def is_luban_active_at_block(self, block_number: int) -> bool:
        return self._active_at_block(BscHardfork.LUBAN, block_number)

    def is_on_plato_at_block(self, block_number: int) -> bool:
        """Whether Plato activates exactly at ``block_number``."""
        return self._transitions_at_block(BscHardfork.PLATO, block_number)

    def is_plato_active_at_block(self, block_number: int) -> bool:
        return self._active_at_block(BscHardfork.PLATO, block_number)

    def is_hertz_active_at_block(self, block_number: int) -> bool:
        return self._active_at_block(BscHardfork.HERTZ, block_number)

    def is_hertz_fix_active_at_block(self, block_number: int) -> bool:
        return self._active_at_block(BscHardfork.HERTZ_FIX, block_number)

    def is_on_kepler_at_timestamp(self, timestamp: int, parent_timestamp: int) -> bool:
        """Whether Kepler activates between the parent block and this one."""
        return self._transitions_at_timestamp(BscHardfork.KEPLER, timestamp, parent_timestamp)

    def is_kepler_active_at_timestamp(self, timestamp: int) -> bool:
        return self._active_at_timestamp(BscHardfork.KEPLER, timestamp)

    def is_on_feynman_at_timestamp(self, timestamp: int, parent_timestamp: int) -> bool:
        """Whether Feynman activates between the parent block and this one."""
        return self._transitions_at_timestamp(BscHardfork.FEYNMAN, timestamp, parent_timestamp)

    def is_feynman_active_at_timestamp(self, timestamp: int) -> bool:
        return self._active_at_timestamp(BscHardfork.FEYNMAN, timestamp)

    def is_on_feynman_fix_at_timestamp(self, timestamp: int, parent_timestamp: int) -> bool:
        """Whether FeynmanFix activates between the parent block and this one."""
        return self._transitions_at_timestamp(
            BscHardfork.FEYNMAN_FIX, timestamp, parent_timestamp
        )

    def is_feynman_fix_active_at_timestamp(self, timestamp: int) -> bool:
        return self._active_at_timestamp(BscHardfork.FEYNMAN_FIX, timestamp)

    def is_on_haber_at_timestamp(self, timestamp: int, parent_timestamp: int) -> bool:
        """Whether Haber activates between the parent block and this one."""
        return self._transitions_at_timestamp(BscHardfork.HABER, timestamp, parent_timestamp)

    def is_haber_active_at_timestamp(self, timestamp: int) -> bool:
        return self._active_at_timestamp(BscHardfork.HABER, timestamp)

    def is_on_haber_fix_at_timestamp(self, timestamp: int, parent_timestamp: int) -> bool:
        """Whether HaberFix activates between the parent block and this one."""
        return self._transitions_at_timestamp(
            BscHardfork.HABER_FIX, timestamp, parent_timestamp
        )

    def is_haber_fix_active_at_timestamp(self, timestamp: int) -> bool:
        return self._active_at_timestamp(BscHardfork.HABER_FIX, timestamp)

    def is_on_bohr_at_timestamp(self, timestamp: int, parent_timestamp: int) -> bool:
        """Whether Bohr activates between the parent block and this one."""
        return self._transitions_at_timestamp(BscHardfork.BOHR, timestamp, parent_timestamp)

    def is_bohr_active_at_timestamp(self, timestamp: int) -> bool:
        return self._active_at_timestamp(BscHardfork.BOHR, timestamp)

    def is_pascal_active_at_timestamp(self, timestamp: int) -> bool:
        return self._active_at_timestamp(BscHardfork.PASCAL, timestamp)

    def is_lorentz_active_at_timestamp(self, timestamp: int) -> bool:
        return self._active_at_timestamp(BscHardfork.LORENTZ, timestamp)

    def is_maxwell_active_at_timestamp(self, timestamp: int) -> bool:
        return self._active_at_timestamp(BscHardfork.MAXWELL, timestamp)
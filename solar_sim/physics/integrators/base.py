"""Abstract base class for numerical integrators."""

from abc import ABC, abstractmethod
from typing import Tuple
import numpy as np


class Integrator(ABC):
    """Abstract interface for two-stage (drift, then kick) integrators."""

    @abstractmethod
    def step(
        self,
        positions: np.ndarray,
        velocities: np.ndarray,
        accelerations: np.ndarray,
        dt: float,
        free: np.ndarray,
    ) -> np.ndarray:
        """Advance positions using the accelerations at the start of the step.

        Args:
            positions: (n, 3) positions
            velocities: (n, 3) velocities
            accelerations: (n, 3) accelerations at ``positions``
            dt: Time step
            free: (n,) boolean mask; False rows are left untouched

        Returns:
            New (n, 3) positions
        """
        pass

    @abstractmethod
    def complete_step(
        self,
        velocities: np.ndarray,
        acc_old: np.ndarray,
        acc_new: np.ndarray,
        dt: float,
        damping: float,
        free: np.ndarray,
    ) -> np.ndarray:
        """Advance velocities once accelerations at the new positions are known.

        Returns:
            New (n, 3) velocities
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this integrator."""
        pass

    @property
    @abstractmethod
    def order(self) -> int:
        """Return the order of accuracy."""
        pass

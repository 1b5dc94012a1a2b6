"""Base class for preset scenarios."""

from abc import ABC, abstractmethod
from typing import List
from solar_sim.physics.body import Body
from solar_sim.physics.units import G0


class Preset(ABC):
    """Abstract base class for preset scenarios."""

    def __init__(self, g0: float = G0):
        """Initialize preset.

        Args:
            g0: Gravitational constant used for circular-orbit speeds. The
                engine's g_scale is applied later, not here.
        """
        self.g0 = g0

    @abstractmethod
    def generate(self) -> List[Body]:
        """Generate initial conditions.

        Returns:
            List of freshly built bodies
        """
        pass

    @property
    @abstractmethod
    def key(self) -> str:
        """Return the registry key of this preset."""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the display name of this preset."""
        pass

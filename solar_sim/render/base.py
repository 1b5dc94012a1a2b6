"""Base renderer interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence
import numpy as np
from solar_sim.physics.body import Body
from solar_sim.render.trails import TrailRecorder


class Renderer(ABC):
    """Abstract base class for renderers."""

    @abstractmethod
    def render(self, bodies: Sequence[Body], trails: Optional[TrailRecorder] = None, t_days: float = 0.0):
        """Render current frame.

        Args:
            bodies: Live bodies
            trails: Optional trail recorder to draw
            t_days: Simulation time for the overlay
        """
        pass

    @abstractmethod
    def capture_frame(self) -> np.ndarray:
        """Capture current frame as image array.

        Returns:
            Image array (H, W, 3) uint8
        """
        pass

    @abstractmethod
    def close(self):
        """Close the renderer."""
        pass

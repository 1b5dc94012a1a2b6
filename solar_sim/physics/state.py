"""Mutable simulation state owned by a single engine."""

from dataclasses import dataclass, field
from typing import List, Optional
from solar_sim.physics.body import Body


@dataclass
class SimulationState:
    """Bodies plus the tunable physical parameters.

    Attributes:
        bodies: Live bodies in insertion order
        t_days: Elapsed simulated time (days)
        paused: Caller-level gate; ``SimulationEngine.step`` ignores it
        dt: Fixed step size (days)
        time_scale: Steps requested per rendered frame
        g_scale: Multiplier applied to G0
        damping: Fraction of velocity removed every step
        softening: Additive term inside r^2 (AU^2)
        merge_on_collision: Merge overlapping bodies after each step
        collision_radius_scale: Multiplier on the summed radii threshold
    """

    bodies: List[Body] = field(default_factory=list)
    t_days: float = 0.0
    paused: bool = False
    dt: float = 0.01
    time_scale: float = 6.0
    g_scale: float = 1.0
    damping: float = 0.0005
    softening: float = 1e-5
    merge_on_collision: bool = True
    collision_radius_scale: float = 1.0

    def index_of(self, body_id: str) -> int:
        """Return the list index of a body, or -1 if it is not live."""
        for i, body in enumerate(self.bodies):
            if body.id == body_id:
                return i
        return -1

    def find(self, body_id: str) -> Optional[Body]:
        idx = self.index_of(body_id)
        return self.bodies[idx] if idx >= 0 else None

    def body_ids(self) -> List[str]:
        return [b.id for b in self.bodies]

    @property
    def n_bodies(self) -> int:
        return len(self.bodies)

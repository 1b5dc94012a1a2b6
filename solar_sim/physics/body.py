"""Point-mass body model."""

from dataclasses import dataclass
from typing import Sequence
import numpy as np


def _vec3(values) -> np.ndarray:
    return np.array(values, dtype=np.float64)


@dataclass
class Body:
    """A gravitating point mass.

    Positions are in AU, velocities in AU/day, masses in solar masses.
    ``radius_au`` only sets the collision threshold and visual size; gravity
    treats every body as a point.

    The position history (trail) is not kept here: it belongs to the
    rendering side, see ``solar_sim.render.trails``.
    """

    id: str
    name: str
    mass: float
    radius_au: float
    pos: np.ndarray
    vel: np.ndarray
    color: int = 0xFFFFFF
    fixed: bool = False
    kind: str = "body"

    def __post_init__(self):
        self.pos = _vec3(self.pos)
        self.vel = _vec3(self.vel)
        self.mass = float(self.mass)
        self.radius_au = float(self.radius_au)
        self.fixed = bool(self.fixed)

    def copy(self) -> "Body":
        """Deep copy; the returned vectors never alias this body's."""
        return Body(
            id=self.id,
            name=self.name,
            mass=self.mass,
            radius_au=self.radius_au,
            pos=self.pos.copy(),
            vel=self.vel.copy(),
            color=self.color,
            fixed=self.fixed,
            kind=self.kind,
        )

    def momentum(self) -> np.ndarray:
        return self.mass * self.vel

    def speed(self) -> float:
        return float(np.linalg.norm(self.vel))


def make_body(
    body_id: str,
    name: str,
    mass: float,
    radius_au: float,
    pos: Sequence[float],
    vel: Sequence[float],
    color: int = 0xFFFFFF,
    fixed: bool = False,
) -> Body:
    """Positional shorthand used by presets."""
    return Body(
        id=body_id,
        name=name,
        mass=mass,
        radius_au=radius_au,
        pos=pos,
        vel=vel,
        color=color,
        fixed=fixed,
    )


def stack_bodies(bodies: Sequence[Body]):
    """Gather parallel arrays from a body list.

    Returns:
        Tuple of (positions (n, 3), velocities (n, 3), masses (n,), free (n,) bool)
    """
    n = len(bodies)
    positions = np.empty((n, 3), dtype=np.float64)
    velocities = np.empty((n, 3), dtype=np.float64)
    masses = np.empty(n, dtype=np.float64)
    free = np.empty(n, dtype=bool)
    for k, body in enumerate(bodies):
        positions[k] = body.pos
        velocities[k] = body.vel
        masses[k] = body.mass
        free[k] = not body.fixed
    return positions, velocities, masses, free

"""Velocity Verlet integrator with per-step velocity damping."""

import numpy as np
from solar_sim.physics.integrators.base import Integrator


class VerletIntegrator(Integrator):
    """Velocity Verlet integrator - second-order, symplectic when undamped.

    1. x_new = x + v*dt + 0.5*a_old*dt^2
    2. (recompute accelerations at x_new to get a_new)
    3. v_new = (v + 0.5*(a_old + a_new)*dt) * (1 - damping)

    The damping factor scales the whole velocity each step, not just the
    increment. It is a deliberate energy sink that keeps large time-scale
    runs visually stable.
    """

    @property
    def name(self) -> str:
        return "verlet"

    @property
    def order(self) -> int:
        return 2

    def step(self, positions, velocities, accelerations, dt: float, free) -> np.ndarray:
        """First half: x_new = x + v*dt + 0.5*a_old*dt^2 on free rows."""
        new_positions = positions.copy()
        new_positions[free] = (
            positions[free]
            + velocities[free] * dt
            + 0.5 * accelerations[free] * dt * dt
        )
        return new_positions

    def complete_step(self, velocities, acc_old, acc_new, dt: float, damping: float, free) -> np.ndarray:
        """Second half: v_new = (v + 0.5*(a_old + a_new)*dt) * (1 - damping)."""
        damp = 1.0 - damping
        new_velocities = velocities.copy()
        new_velocities[free] = (
            velocities[free] + 0.5 * (acc_old[free] + acc_new[free]) * dt
        ) * damp
        return new_velocities

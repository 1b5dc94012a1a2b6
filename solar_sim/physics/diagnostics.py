"""Diagnostics for N-body simulations."""

from typing import NamedTuple, Sequence
import numpy as np
from solar_sim.physics.body import Body, stack_bodies
from solar_sim.physics.force_calculator import pair_indices


class EnergyBreakdown(NamedTuple):
    """Kinetic, potential and total energy (Msun * AU^2 / day^2)."""

    kinetic: float
    potential: float
    total: float


class Diagnostics:
    """Compute energy diagnostics consistent with the force law.

    The potential uses the same softened separation as the accelerations,
    so ``total`` is the quantity velocity Verlet nearly conserves.
    Diagnostics are advisory: they never raise and never feed back into
    the integration.
    """

    def __init__(self, G: float, softening: float):
        """Initialize diagnostics.

        Args:
            G: Effective gravitational constant (G0 * g_scale)
            softening: Additive r^2 term (AU^2), must match the force law
        """
        self.G = G
        self.softening = softening

    def compute_energies(self, positions, velocities, masses) -> EnergyBreakdown:
        """Compute kinetic, potential, and total energy.

        K = 0.5 * sum(m_i * |v_i|^2)
        U = -G * sum_{i<j} m_i * m_j / sqrt(r_ij^2 + softening)

        Args:
            positions: (n, 3) positions
            velocities: (n, 3) velocities
            masses: (n,) masses

        Returns:
            EnergyBreakdown(kinetic, potential, total)
        """
        positions = np.asarray(positions, dtype=np.float64)
        velocities = np.asarray(velocities, dtype=np.float64)
        masses = np.asarray(masses, dtype=np.float64).reshape(-1)
        n = masses.shape[0]
        if n == 0:
            return EnergyBreakdown(0.0, 0.0, 0.0)

        v_sq = np.sum(velocities ** 2, axis=1)
        K = 0.5 * np.sum(masses * v_sq)

        U = 0.0
        if n > 1:
            i, j = pair_indices(n)
            with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
                r_diff = positions[j] - positions[i]
                r = np.sqrt(np.sum(r_diff * r_diff, axis=1) + self.softening)
                U = -self.G * np.sum(masses[i] * masses[j] / r)

        return EnergyBreakdown(float(K), float(U), float(K + U))

    def compute_body_energies(self, bodies: Sequence[Body]) -> EnergyBreakdown:
        positions, velocities, masses, _ = stack_bodies(bodies)
        return self.compute_energies(positions, velocities, masses)


def total_momentum(bodies: Sequence[Body]) -> np.ndarray:
    """Total linear momentum sum(m_i * v_i)."""
    p = np.zeros(3)
    for body in bodies:
        p += body.mass * body.vel
    return p


def total_mass(bodies: Sequence[Body]) -> float:
    return float(sum(b.mass for b in bodies))


def center_of_mass(bodies: Sequence[Body]) -> np.ndarray:
    """Mass-weighted mean position; zeros for an empty or massless set."""
    m = total_mass(bodies)
    if m == 0:
        return np.zeros(3)
    com = np.zeros(3)
    for body in bodies:
        com += body.mass * body.pos
    return com / m


def angular_momentum(bodies: Sequence[Body]) -> np.ndarray:
    """Total angular momentum vector sum(m_i * r_i x v_i) about the origin."""
    L = np.zeros(3)
    for body in bodies:
        L += body.mass * np.cross(body.pos, body.vel)
    return L

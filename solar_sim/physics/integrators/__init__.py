"""Numerical integrators for N-body simulations."""

from solar_sim.physics.integrators.base import Integrator
from solar_sim.physics.integrators.verlet import VerletIntegrator

__all__ = ["Integrator", "VerletIntegrator"]

"""Physics engine for N-body simulations."""

from solar_sim.physics.body import Body, make_body
from solar_sim.physics.state import SimulationState
from solar_sim.physics.collisions import MergeEvent
from solar_sim.physics.diagnostics import Diagnostics, EnergyBreakdown
from solar_sim.physics.simulator import SimulationEngine
from solar_sim.physics.units import G0

__all__ = [
    "Body",
    "make_body",
    "SimulationState",
    "MergeEvent",
    "Diagnostics",
    "EnergyBreakdown",
    "SimulationEngine",
    "G0",
]

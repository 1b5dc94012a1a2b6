"""
Solar Sim - an interactive N-body gravity sandbox.

Features:
- Velocity Verlet integration in AU, days and solar masses
- Softened pairwise gravity, velocity damping, inelastic merging
- Energy and momentum diagnostics
- Solar-system and few-body presets
- Bounded orbit trails and a matplotlib 3D view
- Headless CLI
"""

__version__ = "0.1.0"

from solar_sim.physics.body import Body
from solar_sim.physics.simulator import SimulationEngine
from solar_sim.physics.state import SimulationState
from solar_sim.physics.units import G0
from solar_sim.presets import get_preset, list_presets

__all__ = [
    "Body",
    "SimulationEngine",
    "SimulationState",
    "G0",
    "get_preset",
    "list_presets",
]

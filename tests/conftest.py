"""Shared fixtures for engine tests."""

import pytest
from solar_sim.physics.body import make_body
from solar_sim.physics.simulator import SimulationEngine
from solar_sim.physics.state import SimulationState
from solar_sim.physics.units import G0


@pytest.fixture
def conservative_engine():
    """Engine with damping and merging off."""
    state = SimulationState(damping=0.0, merge_on_collision=False)
    return SimulationEngine(state)


@pytest.fixture
def sun_earth():
    """Fixed Sun at the origin and an Earth on a circular 1 AU orbit."""
    sun = make_body("sun", "Sun", 1.0, 0.00465047, [0, 0, 0], [0, 0, 0], fixed=True)
    earth = make_body("earth", "Earth", 3.003e-6, 4.2635e-5, [1.0, 0, 0], [0, 0, G0 ** 0.5])
    return [sun, earth]

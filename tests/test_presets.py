"""Tests for preset scenarios."""

import numpy as np
import pytest
from solar_sim.physics.diagnostics import total_momentum
from solar_sim.physics.simulator import SimulationEngine
from solar_sim.physics.units import G0
from solar_sim.presets import DEFAULT_PRESET, Preset, get_preset, list_presets, next_preset


@pytest.mark.parametrize("key", list_presets())
def test_preset_generates_valid_bodies(key):
    """Every preset passes strict validation."""
    preset = get_preset(key)
    assert isinstance(preset, Preset)
    assert preset.key == key
    bodies = preset.generate()
    assert len(bodies) >= 2
    ids = [b.id for b in bodies]
    assert len(set(ids)) == len(ids), f"Duplicate ids in {key}: {ids}"

    engine = SimulationEngine(validate=True)
    engine.set_bodies(bodies)
    engine.step(10)
    for body in engine.bodies:
        assert np.all(np.isfinite(body.pos))


@pytest.mark.parametrize("key", list_presets())
def test_generate_returns_fresh_bodies(key):
    preset = get_preset(key)
    first = preset.generate()
    second = preset.generate()
    first[0].pos[0] += 100.0
    assert second[0].pos[0] != first[0].pos[0]


def test_sun_earth_moon_layout():
    sun, earth, moon = get_preset("sunEarthMoon").generate()
    assert sun.fixed
    assert np.array_equal(earth.pos, [1.0, 0.0, 0.0])
    assert earth.vel[2] == pytest.approx(np.sqrt(G0))
    assert moon.pos[0] > earth.pos[0]
    assert moon.vel[2] > earth.vel[2]


@pytest.mark.parametrize("key", ["solarLite", "threeBody", "slingshot"])
def test_balanced_presets_have_zero_momentum(key):
    bodies = get_preset(key).generate()
    p = total_momentum(bodies)
    assert np.allclose(p, 0.0, atol=1e-15), f"{key} momentum: {p}"


def test_three_body_parameters():
    bodies = get_preset("threeBody", mass=0.5, radius=2.0).generate()
    assert all(b.mass == 0.5 for b in bodies)
    assert np.linalg.norm(bodies[0].pos) == pytest.approx(2.0)


def test_registry_helpers():
    assert DEFAULT_PRESET in list_presets()
    with pytest.raises(ValueError):
        get_preset("nope")
    keys = list_presets()
    assert next_preset(keys[0]) == keys[1]
    assert next_preset(keys[-1]) == keys[0]

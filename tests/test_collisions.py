"""Tests for inelastic collision merging."""

import numpy as np
import pytest
from solar_sim.physics.body import make_body
from solar_sim.physics.collisions import MergeEvent, find_and_merge, merge_pair
from solar_sim.physics.diagnostics import total_momentum
from solar_sim.physics.simulator import SimulationEngine
from solar_sim.physics.state import SimulationState


def test_merge_pair_conserves_mass_and_momentum():
    """Merged body carries summed mass, momentum and volume."""
    a = make_body("a", "Alpha", 2.0, 0.3, [0.0, 0.0, 0.0], [1.0, 0.0, 0.0])
    b = make_body("b", "Beta", 1.0, 0.4, [3.0, 0.0, 0.0], [-1.0, 0.5, 0.0])
    p0 = a.momentum() + b.momentum()

    merge_pair(a, b)

    assert a.mass == 3.0
    assert np.allclose(a.pos, [1.0, 0.0, 0.0])
    assert np.allclose(a.mass * a.vel, p0)
    assert a.radius_au == pytest.approx(np.cbrt(0.3 ** 3 + 0.4 ** 3))
    assert a.name == "Alpha + Beta"
    assert a.id == "a"


def test_overlapping_pair_merges_once():
    a = make_body("a", "A", 1.0, 0.1, [0.0, 0.0, 0.0], [0.0, 0.0, 0.0])
    b = make_body("b", "B", 1.0, 0.1, [0.15, 0.0, 0.0], [0.0, 0.0, 0.0])
    survivors, events = find_and_merge([a, b], t_days=4.0)

    assert [s.id for s in survivors] == ["a"]
    assert events == [MergeEvent("a", "b", "A + B", 2.0, 4.0)]
    assert "Merged b into a" in events[0].describe()


def test_no_merge_keeps_list_object():
    bodies = [
        make_body("a", "A", 1.0, 0.1, [0.0, 0.0, 0.0], [0.0, 0.0, 0.0]),
        make_body("b", "B", 1.0, 0.1, [1.0, 0.0, 0.0], [0.0, 0.0, 0.0]),
    ]
    survivors, events = find_and_merge(bodies)
    assert events == []
    assert survivors is bodies


def test_coincident_bodies_do_not_merge():
    """r == 0 is excluded from the merge test."""
    bodies = [
        make_body("a", "A", 1.0, 0.1, [0.5, 0.5, 0.5], [0.0, 0.0, 0.0]),
        make_body("b", "B", 1.0, 0.1, [0.5, 0.5, 0.5], [0.0, 0.0, 0.0]),
    ]
    survivors, events = find_and_merge(bodies)
    assert len(survivors) == 2
    assert events == []


def test_radius_scale_widens_threshold():
    bodies = [
        make_body("a", "A", 1.0, 0.1, [0.0, 0.0, 0.0], [0.0, 0.0, 0.0]),
        make_body("b", "B", 1.0, 0.1, [0.3, 0.0, 0.0], [0.0, 0.0, 0.0]),
    ]
    _, events = find_and_merge([b.copy() for b in bodies], radius_scale=1.0)
    assert events == []
    _, events = find_and_merge([b.copy() for b in bodies], radius_scale=2.0)
    assert len(events) == 1


def test_chain_merges_lowest_index_first():
    """Overlap left after one pass resolves on the next."""
    bodies = [
        make_body("a", "A", 1.0, 0.011, [0.0, 0.0, 0.0], [0.0, 0.0, 0.0]),
        make_body("b", "B", 1.0, 0.011, [0.03, 0.0, 0.0], [0.0, 0.0, 0.0]),
        make_body("c", "C", 1.0, 0.011, [0.015, 0.0, 0.0], [0.0, 0.0, 0.0]),
    ]
    survivors, events = find_and_merge(bodies)
    assert [(e.survivor_id, e.absorbed_id) for e in events] == [("a", "c")]
    assert [s.id for s in survivors] == ["a", "b"]

    survivors, events = find_and_merge(survivors)
    assert [(e.survivor_id, e.absorbed_id) for e in events] == [("a", "b")]
    assert len(survivors) == 1
    assert survivors[0].mass == 3.0
    assert survivors[0].name == "A + C + B"


def test_engine_merges_bodies_on_collision_course():
    """Two bodies on a collision course end as one, conserving mass and momentum."""
    state = SimulationState(damping=0.0, merge_on_collision=True)
    engine = SimulationEngine(state)
    engine.set_bodies([
        make_body("a", "A", 1e-3, 0.01, [-0.05, 0.0, 0.0], [0.01, 0.0, 0.0]),
        make_body("b", "B", 1e-3, 0.01, [0.05, 0.0, 0.0], [-0.01, 0.002, 0.0]),
    ])
    p0 = total_momentum(engine.bodies)

    recorded = []
    engine.on_merge_callback = lambda eng, events: recorded.extend(events)
    engine.step(1000)

    assert len(engine.bodies) == 1
    assert len(recorded) == 1, f"Expected one merge event, got {recorded}"
    assert engine.merge_count == 1
    assert recorded[0].t_days < 10.0

    merged = engine.bodies[0]
    assert merged.mass == pytest.approx(2e-3, rel=1e-15)
    assert merged.radius_au == pytest.approx(np.cbrt(2 * 0.01 ** 3))
    assert np.allclose(total_momentum(engine.bodies), p0, rtol=0, atol=1e-16)


def test_merging_disabled_lets_bodies_pass():
    state = SimulationState(damping=0.0, merge_on_collision=False, g_scale=0.0)
    engine = SimulationEngine(state)
    engine.set_bodies([
        make_body("a", "A", 1.0, 0.1, [-1.0, 0.0, 0.0], [0.1, 0.0, 0.0]),
        make_body("b", "B", 1.0, 0.1, [1.0, 0.0, 0.0], [-0.1, 0.0, 0.0]),
    ])
    engine.step(1500)
    assert len(engine.bodies) == 2
    assert engine.get_body("a").pos[0] > 0.0

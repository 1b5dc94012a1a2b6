"""Tests for pairwise gravitational accelerations."""

import numpy as np
import pytest
from solar_sim.physics.force_calculator import ForceCalculator, pair_indices
from solar_sim.physics.units import G0


def _random_system(n=6, seed=3):
    rng = np.random.default_rng(seed)
    positions = rng.uniform(-2.0, 2.0, size=(n, 3))
    masses = rng.uniform(0.1, 1.0, size=n)
    return positions, masses


def test_pair_indices_cover_each_pair_once():
    i, j = pair_indices(4)
    assert len(i) == 6
    assert np.all(i < j)


def test_vectorized_matches_pairwise():
    positions, masses = _random_system()
    fast = ForceCalculator("vectorized").compute_accelerations(positions, masses, G0, 1e-5)
    slow = ForceCalculator("pairwise").compute_accelerations(positions, masses, G0, 1e-5)
    assert np.allclose(fast, slow, rtol=1e-12, atol=1e-18)


def test_newtons_third_law():
    """sum(m_i * a_i) vanishes."""
    positions, masses = _random_system(n=8, seed=11)
    acc = ForceCalculator().compute_accelerations(positions, masses, G0, 1e-5)
    net = np.sum(masses[:, None] * acc, axis=0)
    scale = np.max(np.abs(masses[:, None] * acc))
    assert np.all(np.abs(net) < 1e-12 * scale)


def test_single_pair_closed_form():
    """a_i = G m_j d / (|d|^2 + softening)^1.5 toward j."""
    softening = 0.01
    positions = np.array([[0.0, 0.0, 0.0], [2.0, 0.0, 0.0]])
    masses = np.array([1.0, 0.25])
    acc = ForceCalculator().compute_accelerations(positions, masses, G0, softening)

    denom = (4.0 + softening) ** 1.5
    assert acc[0, 0] == pytest.approx(G0 * 0.25 * 2.0 / denom)
    assert acc[1, 0] == pytest.approx(-G0 * 1.0 * 2.0 / denom)
    assert np.allclose(acc[:, 1:], 0.0)


def test_fewer_than_two_bodies():
    calc = ForceCalculator()
    assert calc.compute_accelerations(np.zeros((0, 3)), np.zeros(0), G0, 1e-5).shape == (0, 3)
    assert np.array_equal(calc.compute_accelerations(np.ones((1, 3)), np.ones(1), G0, 1e-5), np.zeros((1, 3)))


def test_unknown_method():
    with pytest.raises(ValueError):
        ForceCalculator("barnes-hut")

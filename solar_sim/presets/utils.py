"""Physical constants and helpers for building presets."""

import math
from typing import Sequence
import numpy as np
from solar_sim.physics.body import Body
from solar_sim.physics.diagnostics import total_momentum

# Masses in Msun
M_SUN = 1.0
M_EARTH = 3.003e-6
M_MOON = 3.694e-8
M_MARS = 3.227e-7
M_JUPITER = 9.545e-4

# Radii in AU
R_SUN = 0.00465047
R_EARTH = 4.2635e-5
R_MOON = 1.1614e-5
R_MARS = 2.266e-5
R_JUPITER = 0.0004779

# Semi-major axes in AU
A_MOON = 0.00257  # ~384,400 km
A_MARS = 1.524
A_JUPITER = 5.204

# Display colors
COLOR_SUN = 0xFFF2B2
COLOR_EARTH = 0x6AA8FF
COLOR_MOON = 0xD9DEEA
COLOR_MARS = 0xFF8A6A
COLOR_JUPITER = 0xFFD29A
COLOR_PROBE = 0x58F0B3


def circular_speed(g0: float, central_mass: float, r: float) -> float:
    """v = sqrt(G*M/r) in AU/day."""
    return math.sqrt(g0 * central_mass / r)


def cancel_momentum_with(anchor: Body, bodies: Sequence[Body]):
    """Set ``anchor``'s velocity so the total momentum of ``bodies`` is zero.

    Only the anchor's velocity is changed; its own previous momentum is
    excluded from the balance.
    """
    anchor.vel[:] = 0.0
    p = total_momentum(bodies)
    anchor.vel[:] = -p / anchor.mass


def spread_momentum(bodies: Sequence[Body], axes: Sequence[int] = (0, 1, 2)):
    """Subtract the same velocity from every body so total momentum is zero.

    Only the listed axes are corrected.
    """
    p = total_momentum(bodies)
    total = sum(b.mass for b in bodies)
    correction = np.zeros(3)
    for axis in axes:
        correction[axis] = p[axis] / total
    for body in bodies:
        body.vel -= correction

"""Unit system: AU, days and solar masses."""

import math

DAYS_PER_YEAR = 365.25

# G in AU^3 / (Msun * day^2), chosen so that a 1 AU circular orbit around
# 1 Msun has a period of exactly one year.
G0 = (2 * math.pi) ** 2 / DAYS_PER_YEAR ** 2


def circular_velocity(central_mass: float, r: float, g_scale: float = 1.0) -> float:
    """Circular orbit speed around a point mass.

    v_circ = sqrt(G0 * g_scale * M / r)

    Args:
        central_mass: Central mass in Msun
        r: Orbital radius in AU
        g_scale: Multiplier applied to G0

    Returns:
        Orbital speed in AU/day
    """
    return math.sqrt(G0 * g_scale * central_mass / r)


def orbital_period(central_mass: float, r: float, g_scale: float = 1.0) -> float:
    """Period of a circular orbit in days: T = 2*pi*sqrt(r^3 / (G*M))."""
    return 2 * math.pi * math.sqrt(r ** 3 / (G0 * g_scale * central_mass))

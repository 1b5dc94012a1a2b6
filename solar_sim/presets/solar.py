"""Solar-system and few-body presets."""

import math
from typing import List
from solar_sim.physics.body import Body, make_body
from solar_sim.physics.units import G0
from solar_sim.presets.base import Preset
from solar_sim.presets.utils import (
    M_SUN, M_EARTH, M_MOON, M_MARS, M_JUPITER,
    R_SUN, R_EARTH, R_MOON, R_MARS, R_JUPITER,
    A_MOON, A_MARS, A_JUPITER,
    COLOR_SUN, COLOR_EARTH, COLOR_MOON, COLOR_MARS, COLOR_JUPITER, COLOR_PROBE,
    circular_speed, cancel_momentum_with, spread_momentum,
)


class SunEarthMoon(Preset):
    """Fixed Sun with Earth at 1 AU and the Moon on a circular orbit around it.

    Orbits lie in the x-z plane (y is up in the viewer).
    """

    @property
    def key(self) -> str:
        return "sunEarthMoon"

    @property
    def name(self) -> str:
        return "Sun-Earth-Moon"

    def generate(self) -> List[Body]:
        sun = make_body("sun", "Sun", M_SUN, R_SUN, [0, 0, 0], [0, 0, 0], COLOR_SUN, fixed=True)

        r_earth = 1.0
        v_earth = circular_speed(self.g0, M_SUN, r_earth)
        earth = make_body("earth", "Earth", M_EARTH, R_EARTH, [r_earth, 0, 0], [0, 0, v_earth], COLOR_EARTH)

        v_moon = circular_speed(self.g0, M_EARTH, A_MOON)
        moon = make_body(
            "moon", "Moon", M_MOON, R_MOON,
            [r_earth + A_MOON, 0, 0], [0, 0, v_earth + v_moon], COLOR_MOON,
        )
        return [sun, earth, moon]


class SolarLite(SunEarthMoon):
    """Sun, Earth, Moon, Mars and Jupiter.

    The Sun stays anchored but carries a compensating velocity so the
    reported total momentum is zero.
    """

    @property
    def key(self) -> str:
        return "solarLite"

    @property
    def name(self) -> str:
        return "Solar System (lite)"

    def generate(self) -> List[Body]:
        bodies = super().generate()
        sun = bodies[0]
        v_mars = circular_speed(self.g0, M_SUN, A_MARS)
        bodies.append(make_body("mars", "Mars", M_MARS, R_MARS, [A_MARS, 0, 0], [0, 0, v_mars], COLOR_MARS))
        v_jup = circular_speed(self.g0, M_SUN, A_JUPITER)
        bodies.append(make_body(
            "jupiter", "Jupiter", M_JUPITER, R_JUPITER, [A_JUPITER, 0, 0], [0, 0, v_jup], COLOR_JUPITER
        ))
        cancel_momentum_with(sun, bodies)
        return bodies


class ThreeBodyChaos(Preset):
    """Three equal masses on a perturbed triangle; chaotic and momentum-free."""

    def __init__(self, g0: float = G0, mass: float = 0.9, radius: float = 1.0):
        super().__init__(g0)
        self.mass = mass
        self.radius = radius

    @property
    def key(self) -> str:
        return "threeBody"

    @property
    def name(self) -> str:
        return "Three bodies (chaos)"

    def generate(self) -> List[Body]:
        m, r = self.mass, self.radius
        a = 2 * math.pi / 3
        bodies = [
            make_body("a", "A", m, 0.002, [r, 0, 0], [0, 0, 0.19], COLOR_EARTH),
            make_body("b", "B", m, 0.002, [r * math.cos(a), 0, r * math.sin(a)], [0.03, 0, -0.13], COLOR_MARS),
            make_body("c", "C", m, 0.002, [r * math.cos(-a), 0, r * math.sin(-a)], [-0.03, 0, -0.06], COLOR_SUN),
        ]
        spread_momentum(bodies, axes=(0, 2))
        return bodies


class Slingshot(Preset):
    """A light probe swinging past Jupiter for a gravity assist."""

    @property
    def key(self) -> str:
        return "slingshot"

    @property
    def name(self) -> str:
        return "Gravity slingshot"

    def generate(self) -> List[Body]:
        sun = make_body("sun", "Sun", M_SUN, R_SUN, [0, 0, 0], [0, 0, 0], COLOR_SUN, fixed=True)
        r_jup = 5.2
        v_jup = circular_speed(self.g0, M_SUN, r_jup)
        jupiter = make_body("jupiter", "Jupiter", M_JUPITER, R_JUPITER, [r_jup, 0, 0], [0, 0, v_jup], COLOR_JUPITER)
        probe = make_body("probe", "Probe", 1e-12, 8e-6, [-8.0, 0, 3.5], [0.045, 0, -0.02], COLOR_PROBE)
        bodies = [sun, jupiter, probe]
        cancel_momentum_with(sun, bodies)
        return bodies

"""Optional boundary validation for bodies and engine parameters.

The engine itself is permissive: degenerate input produces degenerate but
well-defined arithmetic. These checks run only when an engine is created
with ``validate=True``; they reject bad values and never adjust them.
"""

import math
from typing import Iterable, Optional, Set
import numpy as np
from solar_sim.errors import InvalidParameter
from solar_sim.physics.body import Body


def _check_vector(body: Body, attr: str):
    vec = getattr(body, attr)
    if np.shape(vec) != (3,):
        raise InvalidParameter(f"Body {body.id!r}: {attr} must be a 3-vector, got shape {np.shape(vec)}")
    if not np.all(np.isfinite(vec)):
        raise InvalidParameter(f"Body {body.id!r}: {attr} must be finite")


def validate_body(body: Body, existing_ids: Optional[Set[str]] = None):
    """Raise InvalidParameter if ``body`` breaks the body invariants."""
    if not body.id:
        raise InvalidParameter("Body id must be a non-empty string")
    if existing_ids is not None and body.id in existing_ids:
        raise InvalidParameter(f"Duplicate body id: {body.id!r}")
    if not (body.mass > 0) or not math.isfinite(body.mass):
        raise InvalidParameter(f"Body {body.id!r}: mass must be positive, got {body.mass}")
    if not (body.radius_au >= 0) or not math.isfinite(body.radius_au):
        raise InvalidParameter(f"Body {body.id!r}: radius must be >= 0, got {body.radius_au}")
    _check_vector(body, "pos")
    _check_vector(body, "vel")


def validate_bodies(bodies: Iterable[Body]):
    seen: Set[str] = set()
    for body in bodies:
        validate_body(body, seen)
        seen.add(body.id)


def _positive(name: str, value):
    if not (value > 0) or not math.isfinite(value):
        raise InvalidParameter(f"{name} must be positive, got {value}")


def validate_parameter(name: str, value):
    """Raise InvalidParameter if ``value`` is out of range for ``name``.

    Unknown names and boolean flags are accepted as-is.
    """
    if name in ("dt", "softening", "collision_radius_scale", "time_scale"):
        _positive(name, value)
    elif name == "g_scale":
        if not (value >= 0) or not math.isfinite(value):
            raise InvalidParameter(f"g_scale must be >= 0, got {value}")
    elif name == "damping":
        if not (0.0 <= value < 1.0):
            raise InvalidParameter(f"damping must be in [0, 1), got {value}")

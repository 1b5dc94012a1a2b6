"""Bounded position histories for drawing orbit trails.

Trails belong to the rendering side. The engine only produces positions;
a TrailRecorder samples them once per rendered frame and keeps at most
``max_points`` per body, evicting the oldest first.
"""

from collections import deque
from typing import Dict, Iterable, Optional
import numpy as np
from solar_sim.physics.body import Body


def _check_capacity(capacity) -> int:
    capacity = int(capacity)
    if capacity < 1:
        raise ValueError(f"Trail capacity must be at least 1, got {capacity}")
    return capacity


class Trail:
    """Fixed-capacity FIFO of 3D positions."""

    def __init__(self, capacity: int):
        self._points = deque(maxlen=_check_capacity(capacity))

    @property
    def capacity(self) -> int:
        return self._points.maxlen

    def append(self, position):
        self._points.append(np.array(position, dtype=np.float64))

    def clear(self):
        self._points.clear()

    def resize(self, capacity: int):
        """Change capacity, keeping the newest points."""
        self._points = deque(self._points, maxlen=_check_capacity(capacity))

    def as_array(self) -> np.ndarray:
        if not self._points:
            return np.empty((0, 3))
        return np.stack(self._points)

    def __len__(self):
        return len(self._points)


class TrailRecorder:
    """Per-body trails keyed by body id."""

    def __init__(self, max_points: int = 1400, enabled: bool = True):
        """Initialize recorder.

        Args:
            max_points: Capacity of each trail
            enabled: When False, ``record`` does nothing
        """
        self.max_points = _check_capacity(max_points)
        self.enabled = enabled
        self.trails: Dict[str, Trail] = {}

    def attach(self, engine):
        """Clear on engine reset and start inserted bodies with an empty trail.

        Callbacks already set on the engine's reset and insert slots are
        kept and called after the recorder's own handling.
        """
        previous_reset = engine.on_reset_callback
        previous_insert = engine.on_insert_callback

        def on_reset(eng):
            self.clear()
            if previous_reset:
                previous_reset(eng)

        def on_insert(eng, body):
            self.reset(body.id)
            if previous_insert:
                previous_insert(eng, body)

        engine.on_reset_callback = on_reset
        engine.on_insert_callback = on_insert

    def record(self, bodies: Iterable[Body]):
        """Append the current position of each live body.

        Trails of bodies that are no longer live (merged away) are dropped.
        """
        if not self.enabled:
            return
        live = set()
        for body in bodies:
            live.add(body.id)
            trail = self.trails.get(body.id)
            if trail is None:
                trail = self.trails[body.id] = Trail(self.max_points)
            trail.append(body.pos)
        for body_id in list(self.trails):
            if body_id not in live:
                del self.trails[body_id]

    def reset(self, body_id: str):
        self.trails[body_id] = Trail(self.max_points)

    def clear(self):
        self.trails.clear()

    def set_capacity(self, max_points: int):
        self.max_points = _check_capacity(max_points)
        for trail in self.trails.values():
            trail.resize(max_points)

    def get(self, body_id: str) -> Optional[np.ndarray]:
        """(k, 3) array of past positions, oldest first, or None."""
        trail = self.trails.get(body_id)
        return trail.as_array() if trail is not None else None

"""Rendering side: orbit trails and an optional matplotlib 3D view."""

from solar_sim.render.trails import Trail, TrailRecorder

__all__ = ["Trail", "TrailRecorder"]

"""Preset scenarios for the solar-system sandbox."""

from typing import Dict, List, Type
from solar_sim.presets.base import Preset
from solar_sim.presets.solar import SunEarthMoon, SolarLite, ThreeBodyChaos, Slingshot

PRESETS: Dict[str, Type[Preset]] = {
    "solarLite": SolarLite,
    "sunEarthMoon": SunEarthMoon,
    "threeBody": ThreeBodyChaos,
    "slingshot": Slingshot,
}

DEFAULT_PRESET = "solarLite"


def list_presets() -> List[str]:
    """Preset keys in display order."""
    return list(PRESETS.keys())


def get_preset(key: str, **kwargs) -> Preset:
    """Get preset by key.

    Raises:
        ValueError: If the key is unknown
    """
    preset_class = PRESETS.get(key)
    if preset_class is None:
        raise ValueError(f"Unknown preset: {key}. Available: {list_presets()}")
    return preset_class(**kwargs)


def next_preset(key: str) -> str:
    """Key that follows ``key`` in display order, wrapping around."""
    keys = list_presets()
    i = keys.index(key) if key in keys else -1
    return keys[(i + 1) % len(keys)]


__all__ = [
    "Preset",
    "SunEarthMoon",
    "SolarLite",
    "ThreeBodyChaos",
    "Slingshot",
    "PRESETS",
    "DEFAULT_PRESET",
    "list_presets",
    "get_preset",
    "next_preset",
]

"""Configuration management."""

import json
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Optional
from solar_sim.errors import InvalidParameter


@dataclass
class Config:
    """Simulation configuration."""
    # Engine parameters
    dt: float = 0.01
    time_scale: float = 6.0
    g_scale: float = 1.0
    damping: float = 0.0005
    softening: float = 1e-5
    merge_on_collision: bool = True
    collision_radius_scale: float = 1.0
    force_method: str = "vectorized"

    # Safety
    validate: bool = False
    on_instability: str = "ignore"
    max_steps_per_frame: Optional[int] = None

    # Run parameters
    preset: str = "solarLite"
    steps: int = 36525
    report_every: int = 3650

    # Rendering parameters
    render: bool = False
    render_every: int = 6
    trails: bool = True
    trail_length: int = 1400

    @classmethod
    def from_dict(cls, data: dict) -> "Config":
        """Build a Config, rejecting unknown keys.

        Values are coerced to the declared field types, so strings such as
        "1e-5" (which YAML 1.1 does not read as a float) are accepted.

        Raises:
            InvalidParameter: For unknown keys or values of the wrong type
        """
        types = {f.name: f.type for f in fields(cls)}
        unknown = sorted(set(data) - set(types))
        if unknown:
            raise InvalidParameter(f"Unknown config keys: {unknown}")
        return cls(**{name: _coerce(name, types[name], value) for name, value in data.items()})


_TRUE = ("true", "yes", "on", "1")
_FALSE = ("false", "no", "off", "0")


def _coerce(name: str, field_type, value):
    """Convert a raw config value to ``field_type``."""
    if field_type == Optional[int]:
        if value is None:
            return None
        field_type = int

    if field_type is bool:
        if isinstance(value, bool):
            return value
        text = str(value).strip().lower()
        if text in _TRUE:
            return True
        if text in _FALSE:
            return False
        raise InvalidParameter(f"Config key {name!r} expects a boolean, got {value!r}")

    if field_type is str:
        if not isinstance(value, str):
            raise InvalidParameter(f"Config key {name!r} expects a string, got {value!r}")
        return value

    if field_type in (int, float) and (value is None or isinstance(value, bool)):
        raise InvalidParameter(f"Config key {name!r} expects {field_type.__name__}, got {value!r}")

    try:
        if field_type is int:
            number = float(value)
            if not number.is_integer():
                raise ValueError(value)
            return int(number)
        return field_type(value)
    except (TypeError, ValueError, OverflowError):
        raise InvalidParameter(f"Config key {name!r} expects {field_type.__name__}, got {value!r}")


def _is_yaml(path: Path) -> bool:
    return path.suffix in (".yaml", ".yml")


def load_config(config_path: str) -> Config:
    """Load configuration from file.

    Args:
        config_path: Path to config file (.json or .yaml)

    Returns:
        Config object
    """
    config_path = Path(config_path)

    with open(config_path, "r") as f:
        if _is_yaml(config_path):
            try:
                import yaml
            except ImportError:
                raise ImportError("YAML support requires PyYAML. Install with: pip install pyyaml")
            data = yaml.safe_load(f) or {}
        else:
            data = json.load(f)

    return Config.from_dict(data)


def save_config(config: Config, output_path: str):
    """Save configuration to file.

    Args:
        config: Config object
        output_path: Output file path (.json or .yaml)
    """
    output_path = Path(output_path)
    data = asdict(config)

    with open(output_path, "w") as f:
        if _is_yaml(output_path):
            try:
                import yaml
            except ImportError:
                raise ImportError("YAML support requires PyYAML. Install with: pip install pyyaml")
            yaml.dump(data, f, default_flow_style=False)
        else:
            json.dump(data, f, indent=2)

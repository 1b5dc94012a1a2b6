"""CLI main entry point."""

import argparse
from typing import List, Optional
from solar_sim.errors import NumericalInstability
from solar_sim.physics.diagnostics import total_momentum
from solar_sim.physics.simulator import SimulationEngine, INSTABILITY_POLICIES
from solar_sim.presets import PRESETS, get_preset, list_presets
from solar_sim.render.trails import TrailRecorder
from solar_sim.utils.config import Config, load_config

# Options that override the matching Config field when given
_OVERRIDES = (
    "preset",
    "steps",
    "dt",
    "time_scale",
    "g_scale",
    "damping",
    "softening",
    "collision_radius_scale",
    "report_every",
    "on_instability",
    "render_every",
    "trail_length",
)


def build_config(args) -> Config:
    """Merge an optional config file with explicit command-line overrides."""
    config = load_config(args.config) if args.config else Config()
    for name in _OVERRIDES:
        value = getattr(args, name)
        if value is not None:
            setattr(config, name, value)
    if args.no_merge:
        config.merge_on_collision = False
    if args.validate:
        config.validate = True
    if args.render:
        config.render = True
    return config


def _print_row(step: int, engine: SimulationEngine, E0: float):
    K, U, E = engine.total_energy()
    dE = (E - E0) / abs(E0) * 100 if abs(E0) > 0 else 0.0
    print(f"{step:<8} {engine.t_days:<10.2f} {K:<14.6e} {U:<14.6e} {E:<14.6e} {dE:<10.4f}% {len(engine.bodies):<6}")


def run_simulation(config: Config) -> int:
    """Run a headless (optionally rendered) simulation and print diagnostics."""
    preset = get_preset(config.preset)
    engine = SimulationEngine.from_config(config, preset.generate())

    def report_merges(_engine, events):
        for event in events:
            print(f"  t={event.t_days:.2f} d: {event.describe()}")

    engine.on_merge_callback = report_merges

    renderer = None
    recorder = None
    if config.render:
        from solar_sim.render.renderer_3d import Renderer3D
        renderer = Renderer3D(show_trails=config.trails)
        recorder = TrailRecorder(max_points=config.trail_length, enabled=config.trails)
        recorder.attach(engine)

    print(f"Running preset: {preset.name} ({len(engine.bodies)} bodies)")
    print(
        f"dt: {config.dt} d, steps: {config.steps}, g_scale: {config.g_scale}, "
        f"damping: {config.damping}, softening: {config.softening}, merge: {config.merge_on_collision}"
    )

    E0 = engine.total_energy().total
    p0 = total_momentum(engine.bodies)
    print(f"{'Step':<8} {'Days':<10} {'K':<14} {'U':<14} {'E':<14} {'dE/E0':<11} {'Bodies':<6}")
    print("-" * 84)
    _print_row(0, engine, E0)

    report_every = max(1, config.report_every)
    render_every = max(1, config.render_every)
    try:
        for step in range(1, config.steps + 1):
            engine.step()
            if step % report_every == 0:
                _print_row(step, engine, E0)
            if renderer is not None and step % render_every == 0:
                recorder.record(engine.bodies)
                renderer.render(engine.bodies, recorder, engine.t_days)
    except NumericalInstability as exc:
        print(f"Numerical instability: {exc}")
        return 2
    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
    finally:
        if renderer is not None:
            renderer.close()

    dp = total_momentum(engine.bodies) - p0
    print(f"Merges: {engine.merge_count}, |dP|: {float((dp ** 2).sum() ** 0.5):.3e}")
    print("Simulation complete!")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Solar Sim - N-body gravity sandbox (AU, days, Msun)")

    # Simulation parameters
    parser.add_argument("--preset", type=str, default=None, choices=list(PRESETS),
                        help="Preset scenario (default: solarLite)")
    parser.add_argument("--steps", type=int, default=None,
                        help="Number of simulation steps")
    parser.add_argument("--dt", type=float, default=None,
                        help="Time step in days")
    parser.add_argument("--time-scale", type=float, default=None,
                        help="Steps per rendered frame")
    parser.add_argument("--g-scale", type=float, default=None,
                        help="Multiplier on the gravitational constant")
    parser.add_argument("--damping", type=float, default=None,
                        help="Fraction of velocity removed per step")
    parser.add_argument("--softening", type=float, default=None,
                        help="Softening term added to r^2 (AU^2)")
    parser.add_argument("--no-merge", action="store_true",
                        help="Disable collision merging")
    parser.add_argument("--collision-radius-scale", type=float, default=None,
                        help="Multiplier on summed radii for the merge threshold")
    parser.add_argument("--config", type=str, default=None,
                        help="JSON or YAML config file; explicit options override it")
    parser.add_argument("--report-every", type=int, default=None,
                        help="Print diagnostics every N steps")

    # Safety
    parser.add_argument("--validate", action="store_true",
                        help="Reject invalid bodies and parameters")
    parser.add_argument("--on-instability", type=str, default=None, choices=list(INSTABILITY_POLICIES),
                        help="What to do when positions or velocities become non-finite")

    # Rendering
    parser.add_argument("--render", action="store_true",
                        help="Show a matplotlib 3D view")
    parser.add_argument("--render-every", type=int, default=None,
                        help="Render every N steps")
    parser.add_argument("--trail-length", type=int, default=None,
                        help="Trail capacity in points")

    # Info
    parser.add_argument("--list-presets", action="store_true",
                        help="List available presets and exit")

    args = parser.parse_args(argv)

    if args.list_presets:
        print("Available presets:")
        for key in list_presets():
            print(f"  - {key}: {get_preset(key).name}")
        return 0

    try:
        config = build_config(args)
        return run_simulation(config)
    except (ValueError, OSError) as exc:
        print(f"Error: {exc}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())

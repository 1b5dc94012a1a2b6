"""Example with real-time rendering, frame stepping and a mid-run kick."""

from solar_sim import SimulationEngine, get_preset
from solar_sim.render.trails import TrailRecorder
from solar_sim.render.renderer_3d import Renderer3D

def main():
    """Run the solar-lite preset with trails."""
    engine = SimulationEngine()
    recorder = TrailRecorder(max_points=600)
    recorder.attach(engine)
    engine.set_bodies(get_preset("solarLite").generate())

    renderer = Renderer3D(view_radius=6.0)

    print("Running simulation with rendering...")
    print("Close the matplotlib window to stop.")

    try:
        for frame in range(3000):
            engine.advance_frame()
            if frame == 500:
                # Push Mars outward, as the "kick" gesture would
                engine.apply_impulse("mars", [0.002, 0.0, 0.0])
            recorder.record(engine.bodies)
            if frame % 5 == 0:
                renderer.render(engine.bodies, recorder, engine.t_days)
    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
    finally:
        renderer.close()
        print("Simulation complete!")

if __name__ == "__main__":
    main()

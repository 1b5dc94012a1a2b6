"""Basic example of using the solar-system engine."""

from solar_sim import SimulationEngine, get_preset

def main():
    """Run one year of the Sun-Earth-Moon preset."""
    engine = SimulationEngine()
    engine.set_parameters(damping=0.0)
    engine.set_bodies(get_preset("sunEarthMoon").generate())

    print("Running simulation...")
    print(f"Initial energy: {engine.total_energy().total:.6e}")

    for day in range(365):
        engine.step(100)  # dt = 0.01 d
        if day % 60 == 0:
            earth = engine.get_body("earth")
            print(f"Day {engine.t_days:7.2f}: Earth at {earth.pos.round(4)}, E={engine.total_energy().total:.6e}")

    print(f"Final energy: {engine.total_energy().total:.6e}")
    print("Simulation complete!")

if __name__ == "__main__":
    main()

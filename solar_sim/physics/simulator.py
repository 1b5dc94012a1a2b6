"""Main simulation engine."""

import math
import uuid
import warnings
from typing import Callable, Iterable, List, Optional, Sequence
import numpy as np
from solar_sim.errors import InvalidParameter, NumericalInstability, NumericalInstabilityWarning
from solar_sim.physics.body import Body, stack_bodies
from solar_sim.physics.collisions import MergeEvent, find_and_merge
from solar_sim.physics.diagnostics import Diagnostics, EnergyBreakdown
from solar_sim.physics.force_calculator import ForceCalculator
from solar_sim.physics.integrators.base import Integrator
from solar_sim.physics.integrators.verlet import VerletIntegrator
from solar_sim.physics.state import SimulationState
from solar_sim.physics.units import G0
from solar_sim.physics import validation

TUNABLE_PARAMETERS = (
    "dt",
    "time_scale",
    "g_scale",
    "damping",
    "softening",
    "merge_on_collision",
    "collision_radius_scale",
    "paused",
)

INSTABILITY_POLICIES = ("ignore", "warn", "raise")


def steps_for_frame(time_scale: float, max_steps: Optional[int] = None) -> int:
    """Number of fixed steps to run for one rendered frame.

    floor(time_scale) steps (at least one), plus one extra step when
    time_scale has a fractional part.
    """
    steps = max(1, int(math.floor(time_scale)))
    if time_scale - steps > 1e-6:
        steps += 1
    if max_steps is not None:
        steps = min(steps, max_steps)
    return steps


class SimulationEngine:
    """N-body engine in AU, days and solar masses.

    Owns a SimulationState and advances it with velocity Verlet, additive
    softening, per-step velocity damping and inelastic merging. The engine
    is synchronous: state is only observed between calls to ``step``.
    """

    G0 = G0

    def __init__(
        self,
        state: Optional[SimulationState] = None,
        integrator: Optional[Integrator] = None,
        force_method: str = "vectorized",
        validate: bool = False,
        on_instability: str = "ignore",
        max_steps_per_frame: Optional[int] = None,
    ):
        """Initialize engine.

        Args:
            state: Initial state (default: empty state with default parameters)
            integrator: Integrator to use (default: Verlet)
            force_method: "vectorized" or "pairwise" acceleration kernel
            validate: Reject invalid bodies/parameters with InvalidParameter
            on_instability: "ignore", "warn" or "raise" when pos/vel go non-finite
            max_steps_per_frame: Optional cap applied by ``advance_frame``
        """
        if on_instability not in INSTABILITY_POLICIES:
            raise InvalidParameter(
                f"Unknown instability policy: {on_instability}. Available: {list(INSTABILITY_POLICIES)}"
            )
        self.state = state if state is not None else SimulationState()
        self.integrator = integrator or VerletIntegrator()
        self.force_calculator = ForceCalculator(method=force_method)
        self.validate = validate
        self.on_instability = on_instability
        self.max_steps_per_frame = max_steps_per_frame
        self.step_count = 0
        self.merge_count = 0
        self._unstable_ids = set()

        # Callbacks
        self.on_step_callback: Optional[Callable] = None
        self.on_merge_callback: Optional[Callable] = None
        self.on_reset_callback: Optional[Callable] = None
        self.on_insert_callback: Optional[Callable] = None

        if self.validate:
            validation.validate_bodies(self.state.bodies)
            for name in TUNABLE_PARAMETERS:
                validation.validate_parameter(name, getattr(self.state, name))

    @classmethod
    def from_config(cls, config, bodies: Optional[Sequence[Body]] = None) -> "SimulationEngine":
        """Build an engine from a ``solar_sim.utils.config.Config``."""
        state = SimulationState(
            dt=config.dt,
            time_scale=config.time_scale,
            g_scale=config.g_scale,
            damping=config.damping,
            softening=config.softening,
            merge_on_collision=config.merge_on_collision,
            collision_radius_scale=config.collision_radius_scale,
        )
        engine = cls(
            state,
            force_method=config.force_method,
            validate=config.validate,
            on_instability=config.on_instability,
            max_steps_per_frame=config.max_steps_per_frame,
        )
        if bodies is not None:
            engine.set_bodies(bodies)
        return engine

    @property
    def bodies(self) -> List[Body]:
        return self.state.bodies

    @property
    def t_days(self) -> float:
        return self.state.t_days

    @property
    def G(self) -> float:
        """Effective gravitational constant G0 * g_scale."""
        return self.G0 * self.state.g_scale

    def set_bodies(self, bodies: Iterable[Body]):
        """Replace the live body set with deep copies and reset the clock.

        Args:
            bodies: New bodies; an empty iterable is a valid vacuum
        """
        new_bodies = [b.copy() for b in bodies]
        if self.validate:
            validation.validate_bodies(new_bodies)
        self.state.bodies = new_bodies
        self.state.t_days = 0.0
        self.step_count = 0
        self.merge_count = 0
        self._unstable_ids = set()
        if self.on_reset_callback:
            self.on_reset_callback(self)

    def step(self, n: int = 1):
        """Advance the simulation by ``n`` fixed steps of size dt.

        Steps run sequentially, each seeing the fully merged result of the
        previous one. n <= 0 does nothing. ``state.paused`` is not consulted.
        """
        for _ in range(n):
            self._single_step()

    def _single_step(self):
        state = self.state
        dt = state.dt
        bodies = state.bodies
        if bodies:
            positions, velocities, masses, free = stack_bodies(bodies)
            G = self.G

            # Degenerate input propagates inf/nan without raising
            with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
                acc0 = self.force_calculator.compute_accelerations(positions, masses, G, state.softening)
                new_positions = self.integrator.step(positions, velocities, acc0, dt, free)
                acc1 = self.force_calculator.compute_accelerations(new_positions, masses, G, state.softening)
                new_velocities = self.integrator.complete_step(
                    velocities, acc0, acc1, dt, state.damping, free
                )

            # Fixed bodies are never written back
            for k in np.flatnonzero(free):
                bodies[k].pos[:] = new_positions[k]
                bodies[k].vel[:] = new_velocities[k]

        state.t_days += dt
        self.step_count += 1

        if state.merge_on_collision and len(state.bodies) > 1:
            survivors, events = find_and_merge(
                state.bodies, state.collision_radius_scale, t_days=state.t_days
            )
            if events:
                state.bodies = survivors
                self.merge_count += len(events)
                if self.on_merge_callback:
                    self.on_merge_callback(self, events)

        if self.on_instability != "ignore":
            self._check_finite()

        if self.on_step_callback:
            self.on_step_callback(self)

    def _check_finite(self):
        """Report bodies whose position or velocity is no longer finite."""
        bad = [
            b.id for b in self.state.bodies
            if not (np.all(np.isfinite(b.pos)) and np.all(np.isfinite(b.vel)))
        ]
        if not bad:
            return
        message = (
            f"Non-finite state at t={self.state.t_days:.4f} d "
            f"(step {self.step_count}) for bodies: {', '.join(bad)}"
        )
        if self.on_instability == "raise":
            raise NumericalInstability(message, body_ids=bad, t_days=self.state.t_days)
        new_ids = set(bad) - self._unstable_ids
        if new_ids:
            self._unstable_ids.update(new_ids)
            warnings.warn(message, NumericalInstabilityWarning, stacklevel=4)

    def advance_frame(self) -> int:
        """Run the steps for one rendered frame.

        Returns:
            Number of steps taken (0 while paused)
        """
        if self.state.paused:
            return 0
        n = steps_for_frame(self.state.time_scale, self.max_steps_per_frame)
        self.step(n)
        return n

    def total_energy(self) -> EnergyBreakdown:
        """Kinetic, potential and total energy of the live bodies."""
        diagnostics = Diagnostics(G=self.G, softening=self.state.softening)
        return diagnostics.compute_body_energies(self.state.bodies)

    def get_body(self, body_id: str) -> Body:
        """Return the live body with ``body_id``.

        Raises:
            KeyError: If no live body has that id
        """
        body = self.state.find(body_id)
        if body is None:
            raise KeyError(body_id)
        return body

    def apply_impulse(self, body_id: str, dv) -> bool:
        """Add ``dv`` (AU/day) to a body's velocity.

        Fixed bodies are left untouched.

        Returns:
            True if the velocity was changed
        """
        body = self.get_body(body_id)
        dv = np.asarray(dv, dtype=np.float64)
        if self.validate and (dv.shape != (3,) or not np.all(np.isfinite(dv))):
            raise InvalidParameter(f"Impulse must be a finite 3-vector, got {dv!r}")
        if body.fixed:
            return False
        body.vel += dv
        return True

    def insert_body(self, body: Body) -> Body:
        """Append a copy of ``body`` to the live set; its trail starts empty.

        Returns:
            The live copy
        """
        new_body = body.copy()
        if self.validate:
            validation.validate_body(new_body, set(self.state.body_ids()))
        self.state.bodies.append(new_body)
        if self.on_insert_callback:
            self.on_insert_callback(self, new_body)
        return new_body

    def make_body_id(self) -> str:
        """Fresh id for a body added by a caller gesture."""
        taken = set(self.state.body_ids())
        while True:
            body_id = "x" + uuid.uuid4().hex[:8]
            if body_id not in taken:
                return body_id

    def pause(self):
        """Pause frame stepping."""
        self.state.paused = True

    def resume(self):
        """Resume frame stepping."""
        self.state.paused = False

    def toggle_pause(self) -> bool:
        self.state.paused = not self.state.paused
        return self.state.paused

    def set_timestep(self, dt: float):
        """Set time step.

        Args:
            dt: New time step in days
        """
        self.set_parameters(dt=dt)

    def set_parameters(self, **params):
        """Update tunable parameters by name.

        Raises:
            InvalidParameter: For unknown names, or invalid values when validating
        """
        for name in params:
            if name not in TUNABLE_PARAMETERS:
                raise InvalidParameter(f"Unknown parameter: {name}. Available: {list(TUNABLE_PARAMETERS)}")
        if self.validate:
            for name, value in params.items():
                validation.validate_parameter(name, value)
        for name, value in params.items():
            setattr(self.state, name, value)

    def get_state(self):
        """Get current simulation state.

        Returns:
            Tuple of (positions, velocities, masses, t_days, step_count)
        """
        positions, velocities, masses, _ = stack_bodies(self.state.bodies)
        return positions, velocities, masses, self.state.t_days, self.step_count

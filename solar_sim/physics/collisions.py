"""Perfectly inelastic collision merging.

Pairs are scanned in list order (i ascending, then j > i ascending). When
two live bodies overlap, j is folded into i and marked removed; i keeps
its merged state for the remainder of the scan. A body removed earlier in
the pass is never matched again, so three or more mutually overlapping
bodies resolve as a chain of pairwise merges and any leftover overlap is
picked up on the next step.
"""

from dataclasses import dataclass
from typing import List, Tuple
import numpy as np
from solar_sim.physics.body import Body


@dataclass(frozen=True)
class MergeEvent:
    """Record of one merge: ``absorbed_id`` was folded into ``survivor_id``."""

    survivor_id: str
    absorbed_id: str
    name: str
    mass: float
    t_days: float = 0.0

    def describe(self) -> str:
        return f"Merged {self.absorbed_id} into {self.survivor_id} -> {self.name} (m={self.mass:.6g})"


def merge_pair(survivor: Body, absorbed: Body) -> None:
    """Fold ``absorbed`` into ``survivor`` in place.

    Mass adds, position moves to the centre of mass, velocity conserves
    momentum and the radius combines by volume: R = cbrt(R1^3 + R2^3).
    """
    m = survivor.mass + absorbed.mass
    momentum = survivor.mass * survivor.vel + absorbed.mass * absorbed.vel
    survivor.pos = (survivor.mass * survivor.pos + absorbed.mass * absorbed.pos) / m
    survivor.vel = momentum / m
    survivor.mass = m
    survivor.radius_au = float(np.cbrt(survivor.radius_au ** 3 + absorbed.radius_au ** 3))
    survivor.name = f"{survivor.name} + {absorbed.name}"


def find_and_merge(
    bodies: List[Body],
    radius_scale: float = 1.0,
    t_days: float = 0.0,
) -> Tuple[List[Body], List[MergeEvent]]:
    """Run one merge pass over ``bodies``.

    Two bodies collide when 0 < r < (R_i + R_j) * radius_scale, with r the
    unsoftened centre distance. r == 0 never merges.

    Args:
        bodies: Live bodies in scan order (merged survivors are mutated)
        radius_scale: Multiplier on the summed radii
        t_days: Simulation time stamped on the events

    Returns:
        Tuple of (surviving bodies in input order, merge events)
    """
    n = len(bodies)
    keep = [True] * n
    events: List[MergeEvent] = []

    for i in range(n):
        if not keep[i]:
            continue
        for j in range(i + 1, n):
            if not keep[j]:
                continue
            bi, bj = bodies[i], bodies[j]
            r_diff = bj.pos - bi.pos
            r = float(np.sqrt(np.dot(r_diff, r_diff)))
            threshold = (bi.radius_au + bj.radius_au) * radius_scale
            if r > 0 and r < threshold:
                merge_pair(bi, bj)
                keep[j] = False
                events.append(MergeEvent(bi.id, bj.id, bi.name, bi.mass, t_days))

    if not events:
        return bodies, events
    return [b for b, k in zip(bodies, keep) if k], events

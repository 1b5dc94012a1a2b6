"""Pairwise gravitational accelerations with additive softening.

Every unordered pair (i, j) is evaluated exactly once and applied to both
accumulators with opposite sign, so the summed force is symmetric:

    r2 = |pos_j - pos_i|^2 + softening
    a_i += G * m_j * (pos_j - pos_i) / r^3
    a_j -= G * m_i * (pos_j - pos_i) / r^3
"""

from typing import Literal, Tuple
import numpy as np


def pair_indices(n: int) -> Tuple[np.ndarray, np.ndarray]:
    """Index arrays (i, j) of every unordered pair with i < j, in scan order."""
    return np.triu_indices(n, k=1)


class ForceCalculator:
    """Direct O(n^2) acceleration kernel.

    Two methods share the same force law:
    - "vectorized": numpy arrays over the upper-triangle pair list
    - "pairwise": explicit double loop, kept as a readable reference
    """

    def __init__(self, method: Literal["vectorized", "pairwise"] = "vectorized"):
        if method not in ("vectorized", "pairwise"):
            raise ValueError(f"Unknown force method: {method}")
        self.method = method

    def compute_accelerations(
        self,
        positions: np.ndarray,
        masses: np.ndarray,
        G: float,
        softening: float,
    ) -> np.ndarray:
        """Compute accelerations for all bodies.

        Fixed bodies receive values too; the integrator discards them.

        Args:
            positions: (n, 3) positions in AU
            masses: (n,) masses in Msun
            G: Effective gravitational constant (G0 * g_scale)
            softening: Additive r^2 term in AU^2

        Returns:
            (n, 3) accelerations in AU/day^2
        """
        n = positions.shape[0]
        acc = np.zeros((n, 3), dtype=np.float64)
        if n < 2:
            return acc
        # Degenerate input (zero softening, coincident bodies) yields inf/nan silently
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            if self.method == "pairwise":
                return self._accelerations_loop(positions, masses, G, softening, acc)
            return self._accelerations_vectorized(positions, masses, G, softening, acc)

    def _accelerations_vectorized(self, positions, masses, G, softening, acc):
        i, j = pair_indices(positions.shape[0])
        r_diff = positions[j] - positions[i]
        r2 = np.sum(r_diff * r_diff, axis=1) + softening
        r = np.sqrt(r2)
        s = G / (r2 * r)
        # Shared per-pair factor G * dr / r^3
        f = s[:, np.newaxis] * r_diff
        np.add.at(acc, i, f * masses[j][:, np.newaxis])
        np.subtract.at(acc, j, f * masses[i][:, np.newaxis])
        return acc

    def _accelerations_loop(self, positions, masses, G, softening, acc):
        n = positions.shape[0]
        for i in range(n):
            for j in range(i + 1, n):
                r_diff = positions[j] - positions[i]
                r2 = float(np.dot(r_diff, r_diff)) + softening
                r = np.sqrt(r2)
                f = (G / (r2 * r)) * r_diff
                acc[i] += f * masses[j]
                acc[j] -= f * masses[i]
        return acc

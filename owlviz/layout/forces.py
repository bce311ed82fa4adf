"""Force calculations for the layout simulation.

All functions take positions as ``(n, 2)`` numpy arrays and return force
arrays of the same shape; they never modify their inputs.
"""

import math
import zlib

import numpy as np


def tie_break_direction(first_id: str, second_id: str) -> np.ndarray:
    """Get a deterministic unit vector separating two coincident nodes.

    The direction applies to the lexicographically smaller id; the other
    node gets the opposite direction.
    """
    low, high = sorted((first_id, second_id))
    digest = zlib.crc32(f"{low}\x00{high}".encode("utf-8"))
    angle = digest / 2**32 * 2.0 * math.pi
    return np.array([math.cos(angle), math.sin(angle)])


def repulsion_forces(
    positions: np.ndarray, ids: list[str], strength: float, epsilon: float
) -> np.ndarray:
    """Calculate pairwise charge forces (Coulomb's law).

    For each unordered pair the magnitude is ``strength / max(d^2, epsilon)``
    directed along the connecting vector; a negative strength pushes the
    nodes apart.
    """
    count = len(positions)
    forces = np.zeros((count, 2))
    if count < 2:
        return forces

    delta = positions[:, np.newaxis, :] - positions[np.newaxis, :, :]
    distance_sq = np.einsum("ijk,ijk->ij", delta, delta)
    distance = np.sqrt(distance_sq)
    np.fill_diagonal(distance, 1.0)

    magnitude = -strength / np.maximum(distance_sq, epsilon)
    np.fill_diagonal(magnitude, 0.0)

    unit = delta / np.where(distance > 0.0, distance, 1.0)[:, :, np.newaxis]

    # Coincident pairs have no direction; derive one from the ids.
    for i, j in zip(*np.nonzero(np.triu(distance_sq == 0.0, k=1))):
        direction = tie_break_direction(ids[i], ids[j])
        if ids[i] > ids[j]:
            direction = -direction
        unit[i, j] = direction
        unit[j, i] = -direction

    return np.einsum("ij,ijk->ik", magnitude, unit)


def link_forces(
    positions: np.ndarray,
    sources: np.ndarray,
    targets: np.ndarray,
    rest_lengths: np.ndarray,
    strength: float,
) -> np.ndarray:
    """Calculate spring forces along links (Hooke's law).

    Each link pulls or pushes both endpoints towards its rest length with
    magnitude ``strength * (d - rest_length)``. Self-loops and links with
    coincident endpoints contribute nothing.
    """
    forces = np.zeros_like(positions, dtype=float)
    if len(sources) == 0:
        return forces

    delta = positions[targets] - positions[sources]
    distance = np.sqrt(np.einsum("ij,ij->i", delta, delta))
    active = (sources != targets) & (distance > 0.0)

    safe_distance = np.where(active, distance, 1.0)
    magnitude = np.where(active, strength * (distance - rest_lengths), 0.0)
    force = delta / safe_distance[:, np.newaxis] * magnitude[:, np.newaxis]

    np.add.at(forces, sources, force)
    np.add.at(forces, targets, -force)
    return forces


def center_forces(
    positions: np.ndarray, center: tuple[float, float], strength: float
) -> np.ndarray:
    """Calculate the pull of every node towards the center."""
    return (np.asarray(center, dtype=float) - positions) * strength

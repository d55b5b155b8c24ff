from __future__ import annotations

from typing import Iterable

import numpy as np

from ..models.point import Point, BOUND


class CollisionResolver:
    """
    Single-pass overlap nudging with bounds clamping.

    Algorithm
    ---------
    For each existing point, in the order supplied:
        d = |candidate - existing|
        if d < min_distance and d > 0:
            candidate += (candidate - existing) * (min_distance - d) / d

    Displacements accumulate across neighbours and earlier neighbours
    are never re-checked. Coincident points (d == 0) are left alone.
    The result is clamped per axis into [-5, 5] only after the pass.

    This is a cheap heuristic, not a solver: the output may still sit
    closer than `min_distance` to some neighbour, and permuting
    `existing` can change the result.
    """

    MIN_DISTANCE = 1.0

    def __init__(self, min_distance: float = MIN_DISTANCE, bound: float = BOUND) -> None:
        if min_distance <= 0:
            raise ValueError("min_distance must be > 0")
        if bound <= 0:
            raise ValueError("bound must be > 0")

        self.min_distance = float(min_distance)
        self.bound = float(bound)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def resolve(self, candidate: Point, existing: Iterable[Point]) -> Point:
        adjusted = self.displace(candidate, existing)
        x, y, z = np.clip(adjusted, -self.bound, self.bound)
        return Point(float(x), float(y), float(z))

    def displace(self, candidate: Point, existing: Iterable[Point]) -> np.ndarray:
        """
        Run the nudging pass without clamping.

        Returns the accumulated candidate as a length-3 array.
        """

        position = np.array(candidate.as_tuple(), dtype=float)

        for neighbour in existing:
            delta = position - np.array(neighbour.as_tuple(), dtype=float)
            distance = float(np.linalg.norm(delta))

            if distance >= self.min_distance:
                continue

            # The displacement vector is the separation itself, so its
            # length equals `distance`.
            if distance > 0:
                position = position + delta * ((self.min_distance - distance) / distance)

        return position

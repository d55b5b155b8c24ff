from dataclasses import dataclass
from typing import Any, Dict, Tuple
import math


BOUND = 5.0
"""Half-width of the placement cube. Valid coordinates lie in [-BOUND, BOUND]."""


@dataclass(frozen=True)
class Point:
    """
    Immutable position inside the placement cube.

    Points returned by the placement engine always satisfy
    -5 <= x, y, z <= 5. Intermediate candidates built by callers
    are not checked here; use `in_bounds` when it matters.
    """

    x: float
    y: float
    z: float

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    @classmethod
    def origin(cls) -> "Point":
        return cls(0.0, 0.0, 0.0)

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to another point."""
        dx = self.x - other.x
        dy = self.y - other.y
        dz = self.z - other.z
        return math.sqrt(dx * dx + dy * dy + dz * dz)

    @property
    def in_bounds(self) -> bool:
        return all(-BOUND <= v <= BOUND for v in self.as_tuple())

    # ------------------------------------------------------------------
    # Serialization Boundary
    # ------------------------------------------------------------------

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y, "z": self.z}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Point":
        return cls(float(data["x"]), float(data["y"]), float(data["z"]))

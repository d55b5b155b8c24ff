from dataclasses import dataclass
from typing import Any, Dict

from .point import Point


@dataclass(frozen=True)
class Node:
    """
    A placed network participant.

    Nodes are created and owned by the NodeStore. The placement
    pipeline only reads `position` of existing nodes.
    """

    id: str
    name: str
    ip: str
    position: Point

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to a JSON-safe dictionary.

        This is the wire shape used by the HTTP layer and the
        on-disk store.
        """
        return {
            "id": self.id,
            "name": self.name,
            "ip": self.ip,
            "position": self.position.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Node":
        return cls(
            id=data["id"],
            name=data["name"],
            ip=data["ip"],
            position=Point.from_dict(data["position"]),
        )

    def __repr__(self) -> str:
        return f"Node(id={self.id}, name='{self.name}', ip={self.ip})"

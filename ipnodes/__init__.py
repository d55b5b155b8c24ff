"""
ipnodes: place network participants inside a bounded 3D volume.

Every node is positioned from its IPv4 address:

    raw address → AddressValidator → AddressMapper → CollisionResolver

The placement pipeline is pure. Storage, HTTP and seeding live in
their own subpackages and call into it.
"""

from .models import Point, Node
from .placement import (
    AddressValidator,
    AddressMapper,
    CollisionResolver,
    PlacementEngine,
    Placement,
    AddressValidationError,
    InvalidFormat,
    UnsupportedFamily,
    NotGlobalUnicast,
)

__all__ = [
    "Point",
    "Node",
    "AddressValidator",
    "AddressMapper",
    "CollisionResolver",
    "PlacementEngine",
    "Placement",
    "AddressValidationError",
    "InvalidFormat",
    "UnsupportedFamily",
    "NotGlobalUnicast",
]

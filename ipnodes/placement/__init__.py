from .errors import (
    AddressValidationError,
    InvalidFormat,
    UnsupportedFamily,
    NotGlobalUnicast,
)
from .validator import AddressValidator
from .mapper import AddressMapper
from .resolver import CollisionResolver
from .engine import PlacementEngine, Placement

__all__ = [
    "AddressValidationError",
    "InvalidFormat",
    "UnsupportedFamily",
    "NotGlobalUnicast",
    "AddressValidator",
    "AddressMapper",
    "CollisionResolver",
    "PlacementEngine",
    "Placement",
]

from dataclasses import dataclass
from typing import Iterable, Optional

from ..models.point import Point
from .validator import AddressValidator
from .mapper import AddressMapper
from .resolver import CollisionResolver


@dataclass(frozen=True)
class Placement:
    """Validated address plus the final point assigned to it."""

    address: str
    point: Point


class PlacementEngine:
    """
    Stateless placement pipeline.

        raw address → validate → map → resolve → Placement

    The engine keeps no record of earlier placements. Callers pass
    the full set of existing points on every call and own the
    read/place/persist sequence around it.
    """

    def __init__(
        self,
        validator: Optional[AddressValidator] = None,
        mapper: Optional[AddressMapper] = None,
        resolver: Optional[CollisionResolver] = None,
    ) -> None:
        self.validator = validator or AddressValidator()
        self.mapper = mapper or AddressMapper()
        self.resolver = resolver or CollisionResolver()

    def place(self, raw_address: str, existing: Iterable[Point]) -> Placement:
        """
        Place a new address against `existing`, in the order given.

        AddressValidationError subclasses propagate unchanged.
        """

        address = self.validator.validate(raw_address)
        raw_point = self.mapper.map(address)
        point = self.resolver.resolve(raw_point, existing)

        return Placement(address=address, point=point)

import ipaddress

from ..models.point import Point, BOUND


class AddressMapper:
    """
    Deterministic IPv4 → Point mapping.

    The first three octets become x, y and z, each scaled from
    [0, 255] onto [-5, 5]. The fourth octet is ignored, so every
    address in a /24 maps to the same raw point.
    """

    OCTET_MAX = 255.0

    def map(self, address: str) -> Point:
        try:
            octets = ipaddress.IPv4Address(address).packed
        except ValueError:
            return Point.origin()

        x, y, z = (self.normalize(b) for b in octets[:3])
        return Point(x, y, z)

    @classmethod
    def normalize(cls, octet: int) -> float:
        return (octet / cls.OCTET_MAX) * (2 * BOUND) - BOUND

from __future__ import annotations

import ipaddress
from typing import Optional, Tuple

from .errors import InvalidFormat, UnsupportedFamily, NotGlobalUnicast


PRIVATE_NETWORKS: Tuple[ipaddress.IPv4Network, ...] = (
    ipaddress.IPv4Network("10.0.0.0/8"),
    ipaddress.IPv4Network("172.16.0.0/12"),
    ipaddress.IPv4Network("192.168.0.0/16"),
)

LIMITED_BROADCAST = ipaddress.IPv4Address("255.255.255.255")


class AddressValidator:
    """
    Parses and canonicalizes raw address strings.

    Accepted addresses are IPv4 and either private, loopback or
    global unicast. Anything after the first ':' is treated as a
    port and dropped.

    Global unicast here means "not unspecified, broadcast, loopback,
    multicast or link-local". Reserved ranges such as 240.0.0.0/4
    therefore pass, matching the service this replaces.
    """

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def validate(self, raw: str) -> str:
        """
        Return the canonical dotted-quad form of `raw`.

        Raises
        ------
        InvalidFormat
            Not an IP literal once the port suffix is removed.

        UnsupportedFamily
            A valid IP literal that is not IPv4.

        NotGlobalUnicast
            IPv4, but not private, loopback or global unicast.
        """

        if not isinstance(raw, str):
            raise InvalidFormat(str(raw))

        # Bare IPv6 literals would lose everything after their first
        # separator below, so the family is decided before stripping.
        literal = self._parse(raw)
        if literal is not None and literal.version != 4:
            raise UnsupportedFamily(raw)

        host = raw.split(":", 1)[0]

        address = self._parse(host)
        if address is None:
            raise InvalidFormat(raw)

        if address.version != 4:
            raise UnsupportedFamily(raw)

        if self.is_private(address) or address.is_loopback:
            return str(address)

        if not self.is_global_unicast(address):
            raise NotGlobalUnicast(raw)

        return str(address)

    # ------------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------------

    @staticmethod
    def is_private(address: ipaddress.IPv4Address) -> bool:
        return any(address in network for network in PRIVATE_NETWORKS)

    @staticmethod
    def is_global_unicast(address: ipaddress.IPv4Address) -> bool:
        return not (
            address == LIMITED_BROADCAST
            or address.is_unspecified
            or address.is_loopback
            or address.is_multicast
            or address.is_link_local
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _parse(text: str) -> Optional[ipaddress.IPv4Address | ipaddress.IPv6Address]:
        try:
            return ipaddress.ip_address(text)
        except ValueError:
            return None

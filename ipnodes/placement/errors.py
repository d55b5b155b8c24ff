from __future__ import annotations


class AddressValidationError(Exception):
    """
    Raised when a raw address cannot be accepted for placement.

    Every subclass carries a stable `tag` so callers can map
    failures to protocol responses without string matching.
    """

    tag = "AddressValidationError"
    message = "invalid IP address"

    def __init__(self, address: str = "", message: str | None = None) -> None:
        self.address = address
        super().__init__(message or self.message)


class InvalidFormat(AddressValidationError):
    """Input is not a parseable IP literal after port stripping."""

    tag = "InvalidFormat"
    message = "invalid IP address format"


class UnsupportedFamily(AddressValidationError):
    """Input parses but is not IPv4."""

    tag = "UnsupportedFamily"
    message = "only IPv4 addresses are supported"


class NotGlobalUnicast(AddressValidationError):
    """IPv4 address that is neither private, loopback nor global unicast."""

    tag = "NotGlobalUnicast"
    message = "IP address must be a valid public or private address"

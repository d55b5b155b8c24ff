"""
Address validation tests
"""

import pytest

from ipnodes.placement import (
    AddressValidationError,
    InvalidFormat,
    UnsupportedFamily,
    NotGlobalUnicast,
)


class TestAccepted:
    """Addresses that must be accepted."""

    @pytest.mark.parametrize("raw", ["192.168.1.5", "10.0.0.1", "172.16.5.4", "172.31.255.255"])
    def test_private(self, validator, raw):
        """Private ranges pass."""
        assert validator.validate(raw) == raw

    def test_loopback(self, validator):
        """Loopback passes."""
        assert validator.validate("127.0.0.1") == "127.0.0.1"

    def test_global_unicast(self, validator):
        """Public addresses pass."""
        assert validator.validate("8.8.8.8") == "8.8.8.8"

    def test_port_is_stripped(self, validator):
        """Anything after the first colon is dropped."""
        assert validator.validate("8.8.8.8:53") == "8.8.8.8"
        assert validator.validate("192.168.1.5:not-a-port") == "192.168.1.5"

    def test_reserved_class_e_passes(self, validator):
        """240.0.0.0/4 is not excluded from global unicast."""
        assert validator.validate("240.0.0.1") == "240.0.0.1"


class TestRejected:
    """Addresses that must be rejected, with their tags."""

    def test_broadcast(self, validator):
        with pytest.raises(NotGlobalUnicast):
            validator.validate("255.255.255.255")

    @pytest.mark.parametrize("raw", ["224.0.0.1", "239.255.255.250", "169.254.10.1", "0.0.0.0"])
    def test_not_global_unicast(self, validator, raw):
        with pytest.raises(NotGlobalUnicast):
            validator.validate(raw)

    @pytest.mark.parametrize("raw", ["::1", "2001:db8::1", "fe80::1"])
    def test_ipv6(self, validator, raw):
        """IPv6 literals are rejected by family, not format."""
        with pytest.raises(UnsupportedFamily):
            validator.validate(raw)

    @pytest.mark.parametrize("raw", ["not-an-ip", "", "1.2.3", "256.1.1.1", "[::1]:80", ":53"])
    def test_invalid_format(self, validator, raw):
        with pytest.raises(InvalidFormat):
            validator.validate(raw)

    def test_non_string(self, validator):
        with pytest.raises(InvalidFormat):
            validator.validate(None)


class TestErrors:
    """Error tags and messages."""

    def test_tags(self):
        assert InvalidFormat.tag == "InvalidFormat"
        assert UnsupportedFamily.tag == "UnsupportedFamily"
        assert NotGlobalUnicast.tag == "NotGlobalUnicast"

    def test_common_base(self, validator):
        with pytest.raises(AddressValidationError) as exc_info:
            validator.validate("not-an-ip")

        assert exc_info.value.address == "not-an-ip"
        assert str(exc_info.value) == "invalid IP address format"

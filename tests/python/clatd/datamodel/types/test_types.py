import ipaddress
from typing import Any

import pytest

from clatd.datamodel.types import Int16, InterfaceName, IPv4Address, IPv6Address
from clatd.utils.modeling.errors import ConfigFormatError


@pytest.mark.parametrize("value", [-32768, -1, 0, 1280, 32767])
def test_int16(value: int):
    obj = Int16(value)
    obj.validate()
    assert int(obj) == value


@pytest.mark.parametrize("value", [-32769, 32768, 99999, True, "1"])
def test_int16_invalid(value: Any):
    with pytest.raises(ConfigFormatError):
        Int16(value, "/mtu").validate()


@pytest.mark.parametrize("value", ["rmnet0", "wlan0", "v4-rmnet_data0", "a" * 15])
def test_interface_name(value: str):
    InterfaceName(value).validate()


@pytest.mark.parametrize("value", ["", "a" * 16, 42])
def test_interface_name_invalid(value: Any):
    with pytest.raises(ConfigFormatError):
        InterfaceName(value).validate()


def test_ipv4_address():
    addr = IPv4Address("192.0.0.4")
    assert addr.packed == bytes([192, 0, 0, 4])
    assert str(addr) == "192.0.0.4"
    assert addr.to_std() == ipaddress.IPv4Address("192.0.0.4")
    assert addr == IPv4Address(bytes([192, 0, 0, 4]))
    assert hash(addr) == hash(IPv4Address("192.0.0.4"))


@pytest.mark.parametrize("value", ["not-an-ip", "192.0.0", "256.0.0.1", "::1", b"\x01\x02", 3232235521])
def test_ipv4_address_invalid(value: Any):
    with pytest.raises(ConfigFormatError):
        IPv4Address(value, "/ipv4_local_subnet")


def test_ipv6_address_accessors():
    addr = IPv6Address("2001:db8:1:2:aabb:ccdd:eeff:1122")
    assert addr.prefix64 == bytes.fromhex("20010db800010002")
    assert addr.low64 == bytes.fromhex("aabbccddeeff1122")
    # bytes 11 and 12
    assert addr.middle16 == 0xDDEE
    assert not addr.is_unspecified()
    assert IPv6Address("::").is_unspecified()


def test_ipv6_address_with_low64():
    addr = IPv6Address("fe80::1").with_low64(bytes.fromhex("0000000012345678"))
    assert addr == IPv6Address("fe80::1234:5678")

    with pytest.raises(ValueError):
        IPv6Address("fe80::1").with_low64(b"\x00")


def test_ipv6_address_with_middle16():
    addr = IPv6Address("2001:db8::").with_middle16(0xABCD)
    assert addr == IPv6Address("2001:db8::ab:cd00:0")
    assert addr.middle16 == 0xABCD

    with pytest.raises(ValueError):
        addr.with_middle16(0x10000)


def test_ipv6_address_is_immutable():
    addr = IPv6Address("2001:db8::1")
    addr.with_low64(bytes(8))
    addr.with_middle16(0xFFFF)
    assert addr == IPv6Address("2001:db8::1")


@pytest.mark.parametrize(
    "a,b,equal",
    [
        ("2001:db8:1:2::1", "2001:db8:1:2::2", True),
        ("2001:db8:1:2::1", "2001:db8:1:3::1", False),
        ("fe80::1", "fe80::ffff:ffff:ffff:ffff", True),
    ],
)
def test_ipv6_prefix_equal(a: str, b: str, equal: bool):
    assert IPv6Address(a).prefix_equal(IPv6Address(b)) is equal


@pytest.mark.parametrize("value", ["not-an-ip", "192.0.0.4", "fe80::1%eth0", "2001:db8::/64", bytes(4), None])
def test_ipv6_address_invalid(value: Any):
    with pytest.raises(ConfigFormatError):
        IPv6Address(value)

import logging
from pathlib import Path
from typing import Optional

import pytest

from clatd.checksum import checksum_add, checksum_fold
from clatd.config.assembler import dump_config, load_config_tree, read_config
from clatd.datamodel.types import IPv4Address, IPv6Address
from clatd.utils.modeling.errors import (
    ConfigFileError,
    ConfigFormatError,
    ConfigResolutionError,
)

INTERFACE_IP = IPv6Address("2001:db8:1:2::1")
DNS64_PREFIX = IPv6Address("64:ff9b::")


def _interface_lookup(interface: str) -> Optional[IPv6Address]:
    return INTERFACE_IP if interface == "rmnet0" else None


def _no_query(hostname: str, net_id: int) -> Optional[IPv6Address]:
    raise AssertionError("no DNS query expected")


def _dns64_query(hostname: str, net_id: int) -> Optional[IPv6Address]:
    return DNS64_PREFIX


def _no_sleep(seconds: float) -> None:
    raise AssertionError("no sleep expected")


def _write(tmp_path: Path, text: str, name: str = "clatd.conf") -> Path:
    path = tmp_path / name
    path.write_text(text)
    return path


def test_read_config_static(tmp_path: Path):
    conf = _write(
        tmp_path,
        """
# static PLAT
mtu 1280
ipv4mtu 1260
ipv4_local_subnet 192.0.0.4
plat_from_dns64 no
plat_subnet 2001:db8:64::
""",
    )
    res = read_config(conf, "rmnet0", dns64_query=_no_query, sleep=_no_sleep, interface_lookup=_interface_lookup)
    assert res.is_ok()

    config = res.unwrap()
    assert config.uplink_interface_name == "rmnet0"
    assert config.mtu == 1280
    assert config.ipv4_mtu == 1260
    assert config.ipv4_local_subnet == IPv4Address("192.0.0.4")
    assert config.plat_subnet == IPv6Address("2001:db8:64::")
    assert config.plat_from_dns64_hostname is None
    assert config.ipv6_host_id.is_unspecified()
    assert config.ipv6_local_subnet.prefix_equal(INTERFACE_IP)

    c_ipv4 = checksum_fold(checksum_add(0, config.ipv4_local_subnet.packed))
    c_ipv6 = checksum_fold(checksum_add(0, config.plat_subnet.packed) + checksum_add(0, config.ipv6_local_subnet.packed))
    assert c_ipv4 % 0xFFFF == c_ipv6 % 0xFFFF


def test_read_config_defaults_and_dns64(tmp_path: Path):
    conf = _write(tmp_path, "ipv6_host_id ::1234:5678\n")
    res = read_config(conf, "rmnet0", net_id=42, dns64_query=_dns64_query, interface_lookup=_interface_lookup)
    assert res.is_ok()

    config = res.unwrap()
    assert config.mtu == -1
    assert config.ipv4_mtu == -1
    assert config.ipv4_local_subnet == IPv4Address("192.0.0.4")
    assert config.plat_subnet == DNS64_PREFIX
    assert config.plat_from_dns64_hostname == "ipv4only.arpa"
    assert config.ipv6_local_subnet == IPv6Address("2001:db8:1:2::1234:5678")


def test_read_config_override(tmp_path: Path):
    conf = _write(tmp_path, "plat_from_dns64 yes\nplat_subnet 2001:db8:64::\n")
    res = read_config(conf, "rmnet0", "2001:db8:46::", dns64_query=_no_query, interface_lookup=_interface_lookup)
    assert res.unwrap().plat_subnet == IPv6Address("2001:db8:46::")
    assert res.unwrap().plat_from_dns64_hostname is None


def test_read_config_yaml(tmp_path: Path):
    conf = _write(
        tmp_path,
        """
mtu: 1280
plat_from_dns64: no
plat_subnet: "64:ff9b::"
ipv6_host_id: "::1:2:3:4"
""",
        "clatd.yaml",
    )
    res = read_config(conf, "rmnet0", dns64_query=_no_query, interface_lookup=_interface_lookup)
    assert res.unwrap().mtu == 1280
    assert res.unwrap().ipv6_local_subnet == IPv6Address("2001:db8:1:2:1:2:3:4")


def test_read_config_static_missing_plat_subnet(tmp_path: Path):
    conf = _write(tmp_path, "plat_from_dns64 no\n")
    res = read_config(conf, "rmnet0", dns64_query=_no_query, sleep=_no_sleep, interface_lookup=_interface_lookup)
    assert res.is_err()
    assert isinstance(res.unwrap_err(), ConfigResolutionError)


@pytest.mark.parametrize(
    "text,error",
    [
        ("mtu abc\n", ConfigFormatError),
        ("ipv4mtu 99999\n", ConfigFormatError),
        ("mtu " + "9" * 5000 + "\n", ConfigFormatError),
        ("ipv4_local_subnet not-an-ip\n", ConfigFormatError),
        ("plat_from_dns64 no\nplat_subnet 64:ff9b::\nipv6_host_id bogus\n", ConfigFormatError),
    ],
)
def test_read_config_invalid_item(tmp_path: Path, text: str, error: type):
    conf = _write(tmp_path, text)
    res = read_config(conf, "rmnet0", dns64_query=_dns64_query, interface_lookup=_interface_lookup)
    assert res.is_err()
    assert isinstance(res.unwrap_err(), error)


def test_read_config_no_ipv6_on_interface(tmp_path: Path, caplog: pytest.LogCaptureFixture):
    conf = _write(tmp_path, "plat_from_dns64 no\nplat_subnet 64:ff9b::\n")
    with caplog.at_level(logging.CRITICAL):
        res = read_config(conf, "wlan0", interface_lookup=_interface_lookup)
    assert isinstance(res.unwrap_err(), ConfigResolutionError)
    assert "unable to find an ipv6 ip on interface wlan0" in caplog.text


@pytest.mark.parametrize("interface", ["", "interface-name-too-long"])
def test_read_config_invalid_interface(tmp_path: Path, interface: str):
    conf = _write(tmp_path, "mtu 1280\n")
    res = read_config(conf, interface, dns64_query=_no_query, interface_lookup=_interface_lookup)
    assert isinstance(res.unwrap_err(), ConfigFormatError)


def test_load_config_tree_missing_file(tmp_path: Path):
    res = load_config_tree(tmp_path / "absent.conf")
    assert isinstance(res.unwrap_err(), ConfigFileError)


@pytest.mark.parametrize("text", ["", "# only a comment\n\n"])
def test_load_config_tree_empty(tmp_path: Path, text: str):
    res = load_config_tree(_write(tmp_path, text))
    assert isinstance(res.unwrap_err(), ConfigFileError)
    assert "Could not read config file" in str(res.unwrap_err())


def test_load_config_tree_duplicates(tmp_path: Path):
    res = load_config_tree(_write(tmp_path, "mtu 1280\nmtu 1500\n"))
    assert isinstance(res.unwrap_err(), ConfigFileError)


def test_dump_config(tmp_path: Path, caplog: pytest.LogCaptureFixture):
    conf = _write(tmp_path, "plat_from_dns64 no\nplat_subnet 64:ff9b::\nipv6_host_id ::1\n")
    config = read_config(conf, "rmnet0", interface_lookup=_interface_lookup).unwrap()

    with caplog.at_level(logging.DEBUG):
        dump_config(config)

    assert "mtu = -1" in caplog.text
    assert "ipv6_local_subnet = 2001:db8:1:2::1" in caplog.text
    assert "plat_subnet = 64:ff9b::" in caplog.text
    assert "default_pdp_interface = rmnet0" in caplog.text

from __future__ import annotations

import secrets
from typing import Callable

from .checksum import checksum_add, checksum_adjust
from .datamodel.types import IPv4Address, IPv6Address
from .logging import get_logger

RandBytes = Callable[[int], bytes]

logger = get_logger(__name__)


def _swap16(value: int) -> int:
    return ((value & 0xFF) << 8) | (value >> 8)


def gen_random_iid(
    interface_ip: IPv6Address,
    ipv4_local_subnet: IPv4Address,
    plat_subnet: IPv6Address,
    randbytes: RandBytes = secrets.token_bytes,
) -> IPv6Address:
    """
    Replace the interface identifier of 'interface_ip' with random bits made checksum-neutral.

    Checksum-neutral means:
        checksum(Local IPv4 | Remote IPv4) = checksum(Local IPv6 | Remote IPv6)
    and because remote IPv6 = PLAT prefix | remote IPv4, that is:
        checksum(Local IPv4) = checksum(Local IPv6 | PLAT prefix)

    The two bytes in the middle of the interface identifier are adjusted to satisfy it.
    """

    myaddr = interface_ip.with_low64(randbytes(8))

    c1 = checksum_add(0, ipv4_local_subnet.packed)
    c2 = checksum_add(0, plat_subnet.packed) + checksum_add(0, myaddr.packed)

    # the field starts at an odd offset, so it enters the big-endian word sum byte-swapped
    adjusted = checksum_adjust(_swap16(myaddr.middle16), c1, c2)
    return myaddr.with_middle16(_swap16(adjusted))


def generate_local_ipv6_subnet(
    interface_ip: IPv6Address,
    ipv4_local_subnet: IPv4Address,
    plat_subnet: IPv6Address,
    ipv6_host_id: IPv6Address,
    randbytes: RandBytes = secrets.token_bytes,
) -> IPv6Address:
    """
    Build the local IPv6 address from the address found on the uplink interface.

    Uses the administrator supplied 'ipv6_host_id' as is, or generates a random
    checksum-neutral interface identifier when it is unspecified.
    """

    if ipv6_host_id.is_unspecified():
        logger.debug("Generating a random checksum-neutral interface identifier")
        return gen_random_iid(interface_ip, ipv4_local_subnet, plat_subnet, randbytes)

    logger.debug("Using the configured interface identifier from '%s'", ipv6_host_id)
    return interface_ip.with_low64(ipv6_host_id.low64)

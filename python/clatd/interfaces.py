from __future__ import annotations

import socket
from typing import Callable, List, Optional

import psutil

from .datamodel.types import IPv6Address
from .logging import get_logger
from .utils.modeling.errors import ConfigFormatError

InterfaceLookup = Callable[[str], Optional[IPv6Address]]

logger = get_logger(__name__)


def _interface_ipv6_addresses(interface: str) -> List[IPv6Address]:
    addresses: List[IPv6Address] = []
    for snic in psutil.net_if_addrs().get(interface, []):
        if snic.family != socket.AF_INET6:
            continue
        # strip the zone index of link-local addresses, e.g. 'fe80::1%eth0'
        text = snic.address.split("%", 1)[0]
        try:
            addresses.append(IPv6Address(text))
        except ConfigFormatError:
            logger.debug("Ignoring unparsable address '%s' on interface %s", snic.address, interface)
    return addresses


def getinterface_ipv6(interface: str) -> Optional[IPv6Address]:
    """
    Find an IPv6 address configured on the interface.

    Addresses with a global or unique-local scope are preferred over link-local ones.
    Returns None when the interface does not exist or has no IPv6 address.
    """

    addresses = _interface_ipv6_addresses(interface)
    for addr in addresses:
        if not addr.to_std().is_link_local:
            return addr
    if addresses:
        return addresses[0]
    return None

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from clatd.datamodel.types import IPv4Address, IPv6Address


@dataclass(frozen=True)
class ClatdConfig:
    """
    Configuration snapshot of the CLAT local endpoint.

    ---
    uplink_interface_name: Interface supplying IPv6 connectivity and the local address space.
    mtu: Tunnel MTU, -1 means auto.
    ipv4_mtu: IPv4-side MTU, -1 means auto.
    ipv4_local_subnet: Local IPv4 address of the host's stack.
    ipv6_local_subnet: Local IPv6 address, interface prefix plus a synthesized or copied interface identifier.
    plat_subnet: PLAT (NAT64 translator) prefix.
    ipv6_host_id: Administrator supplied interface identifier, '::' when generated randomly.
    plat_from_dns64_hostname: Hostname queried for PLAT discovery, None when not discovered via DNS64.
    """

    uplink_interface_name: str
    mtu: int
    ipv4_mtu: int
    ipv4_local_subnet: IPv4Address
    ipv6_local_subnet: IPv6Address
    plat_subnet: IPv6Address
    ipv6_host_id: IPv6Address
    plat_from_dns64_hostname: Optional[str] = None

    def serialize(self) -> Dict[str, Any]:
        return {
            "uplink_interface_name": self.uplink_interface_name,
            "mtu": self.mtu,
            "ipv4mtu": self.ipv4_mtu,
            "ipv4_local_subnet": self.ipv4_local_subnet.serialize(),
            "ipv6_local_subnet": self.ipv6_local_subnet.serialize(),
            "plat_subnet": self.plat_subnet.serialize(),
            "ipv6_host_id": self.ipv6_host_id.serialize(),
            "plat_from_dns64_hostname": self.plat_from_dns64_hostname,
        }

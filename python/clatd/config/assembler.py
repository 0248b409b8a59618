from __future__ import annotations

import secrets
import time
from pathlib import Path
from typing import Optional, Union

from clatd.constants import DEFAULT_IPV4_LOCAL_SUBNET, DEFAULT_IPV6_HOST_ID, DEFAULT_MTU, NETID_UNSET
from clatd.datamodel import ClatdConfig
from clatd.datamodel.types import InterfaceName
from clatd.dns64 import QueryFunc, SleepFunc, plat_prefix, resolve_plat_subnet
from clatd.interfaces import InterfaceLookup, getinterface_ipv6
from clatd.logging import get_logger
from clatd.synthesis import RandBytes, generate_local_ipv6_subnet
from clatd.utils.functional import Result
from clatd.utils.modeling import ConfigTree
from clatd.utils.modeling.errors import ConfigError, ConfigFileError, ConfigFormatError, ConfigResolutionError

from .reader import fatal, read_int16, read_ipv4, read_ipv6

logger = get_logger(__name__)


def load_config_tree(file: Union[str, Path]) -> Result[ConfigTree, ConfigError]:
    try:
        tree = ConfigTree.from_file(file)
    except ConfigFileError as e:
        return fatal(e)

    if tree.is_empty():
        return fatal(ConfigFileError(f"Could not read config file {file}", str(file)))
    return Result.ok(tree)


def read_config(
    file: Union[str, Path],
    uplink_interface: str,
    plat_prefix_override: Optional[str] = None,
    net_id: int = NETID_UNSET,
    *,
    dns64_query: QueryFunc = plat_prefix,
    sleep: SleepFunc = time.sleep,
    interface_lookup: InterfaceLookup = getinterface_ipv6,
    randbytes: RandBytes = secrets.token_bytes,
) -> Result[ClatdConfig, ConfigError]:
    """
    Read the configuration file and assemble the configuration snapshot.

    Stops at the first invalid item, a partially assembled configuration is never returned.

    Args:
        file: Path of the configuration file to parse.
        uplink_interface: Interface used to reach the internet, supplier of the IPv6 address space.
        plat_prefix_override: Optional PLAT prefix to use, otherwise follow the configuration file.
        net_id: Optional network identifier for DNS64 discovery, NETID_UNSET means the default network.
        dns64_query: Resolver used for DNS64 discovery.
        sleep: Function blocking between DNS64 discovery attempts.
        interface_lookup: Function finding an IPv6 address on an interface.
        randbytes: Source of random bytes for the interface identifier.

    Returns:
        Result with the snapshot, or with the error that stopped the assembly.

    """

    res = load_config_tree(file)
    if res.is_err():
        return res
    tree = res.unwrap()

    try:
        ifname = InterfaceName(uplink_interface, "/uplink_interface")
        ifname.validate()
    except ConfigFormatError as e:
        return fatal(e)

    mtu = read_int16(tree, "mtu", DEFAULT_MTU)
    if mtu.is_err():
        return mtu

    ipv4_mtu = read_int16(tree, "ipv4mtu", DEFAULT_MTU)
    if ipv4_mtu.is_err():
        return ipv4_mtu

    ipv4_local_subnet = read_ipv4(tree, "ipv4_local_subnet", DEFAULT_IPV4_LOCAL_SUBNET)
    if ipv4_local_subnet.is_err():
        return ipv4_local_subnet

    plat = resolve_plat_subnet(tree, plat_prefix_override, net_id, dns64_query, sleep)
    if plat.is_err():
        return plat

    ipv6_host_id = read_ipv6(tree, "ipv6_host_id", DEFAULT_IPV6_HOST_ID)
    if ipv6_host_id.is_err():
        return ipv6_host_id

    # TODO: check that the prefix length of the interface address is /64
    interface_ip = interface_lookup(str(ifname))
    if interface_ip is None:
        return fatal(
            ConfigResolutionError(f"unable to find an ipv6 ip on interface {ifname}", "/uplink_interface")
        )

    ipv6_local_subnet = generate_local_ipv6_subnet(
        interface_ip,
        ipv4_local_subnet.unwrap(),
        plat.unwrap().plat_subnet,
        ipv6_host_id.unwrap(),
        randbytes,
    )
    logger.info("Using %s on %s", ipv6_local_subnet, ifname)

    return Result.ok(
        ClatdConfig(
            uplink_interface_name=str(ifname),
            mtu=mtu.unwrap(),
            ipv4_mtu=ipv4_mtu.unwrap(),
            ipv4_local_subnet=ipv4_local_subnet.unwrap(),
            ipv6_local_subnet=ipv6_local_subnet,
            plat_subnet=plat.unwrap().plat_subnet,
            ipv6_host_id=ipv6_host_id.unwrap(),
            plat_from_dns64_hostname=plat.unwrap().plat_from_dns64_hostname,
        )
    )


def dump_config(config: ClatdConfig) -> None:
    logger.debug("mtu = %d", config.mtu)
    logger.debug("ipv4mtu = %d", config.ipv4_mtu)
    logger.debug("ipv6_local_subnet = %s", config.ipv6_local_subnet)
    logger.debug("ipv4_local_subnet = %s", config.ipv4_local_subnet)
    logger.debug("plat_subnet = %s", config.plat_subnet)
    logger.debug("default_pdp_interface = %s", config.uplink_interface_name)

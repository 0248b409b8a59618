"""
PLAT prefix resolution.

The prefix comes from the command line, from the static 'plat_subnet' item,
or is discovered by querying DNS64 for 'ipv4only.arpa' (RFC 7050).
"""

from __future__ import annotations

import ipaddress
import time
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Optional

import dns.exception
import dns.rdatatype
import dns.resolver

from .config.reader import fatal, read_ipv6, read_string
from .constants import (
    DEFAULT_DNS64_DETECTION_HOSTNAME,
    DNS64_BACKOFF_MAX,
    DNS64_BACKOFF_START,
    DNS64_WELL_KNOWN_ADDRESSES,
    NETID_UNSET,
)
from .datamodel.types import IPv6Address
from .errors import BaseClatdError
from .logging import get_logger
from .utils.functional import Result
from .utils.modeling import ConfigTree
from .utils.modeling.errors import ConfigError, ConfigFormatError, ConfigResolutionError

logger = get_logger(__name__)

QueryFunc = Callable[[str, int], Optional[IPv6Address]]
SleepFunc = Callable[[float], None]

_well_known_ipv4 = frozenset(ipaddress.IPv4Address(addr).packed for addr in DNS64_WELL_KNOWN_ADDRESSES)


class Dns64QueryError(BaseClatdError):
    """A single DNS64 discovery query failed."""


def prefix_from_addresses(addresses: Iterable[str]) -> Optional[IPv6Address]:
    """
    Find the /96 PLAT prefix in synthesized AAAA answers.

    An answer is usable when its last 32 bits hold one of the well-known IPv4 addresses.
    """

    for text in addresses:
        try:
            packed = ipaddress.IPv6Address(text).packed
        except ValueError:
            logger.debug("Ignoring malformed AAAA answer '%s'", text)
            continue
        if packed[12:] in _well_known_ipv4:
            return IPv6Address(packed[:12] + bytes(4))
        logger.debug("AAAA answer '%s' does not embed a well-known IPv4 address", text)
    return None


def plat_prefix(hostname: str, net_id: int = NETID_UNSET) -> Optional[IPv6Address]:
    """
    Query the system resolver for the AAAA records of 'hostname' and extract the PLAT prefix.

    Returns None when the answer contains no usable prefix.
    Raises Dns64QueryError when the query itself fails.
    """

    if net_id != NETID_UNSET:
        logger.debug("Network %d requested, querying through the system resolver", net_id)

    try:
        answer = dns.resolver.resolve(hostname, dns.rdatatype.AAAA, raise_on_no_answer=False)
    except dns.exception.DNSException as e:
        raise Dns64QueryError(f"AAAA query for '{hostname}' failed: {e}") from e

    if answer.rrset is None:
        return None
    return prefix_from_addresses(rdata.address for rdata in answer.rrset)


class Dns64Discovery:
    """
    DNS64 discovery loop.

    Queries until a prefix is found. After every failed attempt it sleeps
    for the current backoff, which starts at one second and doubles up to
    two minutes. There is no failure terminal state.
    """

    def __init__(
        self,
        hostname: str,
        net_id: int = NETID_UNSET,
        query: QueryFunc = plat_prefix,
        sleep: SleepFunc = time.sleep,
    ) -> None:
        self._hostname = hostname
        self._net_id = net_id
        self._query = query
        self._sleep = sleep
        self._backoff = DNS64_BACKOFF_START

    @property
    def backoff_seconds(self) -> int:
        return self._backoff

    @staticmethod
    def backoff_sequence() -> Iterator[int]:
        backoff = DNS64_BACKOFF_START
        while True:
            yield backoff
            backoff = min(backoff * 2, DNS64_BACKOFF_MAX)

    def attempt(self) -> Optional[IPv6Address]:
        """Run one query and on failure wait out the backoff."""

        try:
            prefix = self._query(self._hostname, self._net_id)
        except Dns64QueryError as e:
            logger.debug("%s", e)
            prefix = None

        if prefix is not None:
            logger.info("Discovered PLAT prefix %s via %s", prefix, self._hostname)
            return prefix

        logger.warning("dns64_detection -- error, sleeping for %d seconds", self._backoff)
        self._sleep(self._backoff)
        self._backoff = min(self._backoff * 2, DNS64_BACKOFF_MAX)
        return None

    def run(self) -> IPv6Address:
        while True:
            prefix = self.attempt()
            if prefix is not None:
                return prefix


@dataclass(frozen=True)
class PlatResolution:
    plat_subnet: IPv6Address
    plat_from_dns64_hostname: Optional[str] = None


def resolve_plat_subnet(
    tree: ConfigTree,
    plat_prefix_override: Optional[str] = None,
    net_id: int = NETID_UNSET,
    query: QueryFunc = plat_prefix,
    sleep: SleepFunc = time.sleep,
) -> Result[PlatResolution, ConfigError]:
    # plat subnet is coming from the command line
    if plat_prefix_override is not None:
        try:
            return Result.ok(PlatResolution(IPv6Address(plat_prefix_override, "/plat_prefix")))
        except ConfigFormatError as e:
            return fatal(e)

    res = read_string(tree, "plat_from_dns64", "yes")
    if res.is_err():
        return res

    if res.unwrap() == "no":
        subnet = read_ipv6(tree, "plat_subnet")
        if subnet.is_err():
            return fatal(
                ConfigResolutionError("plat_from_dns64 disabled, but no plat_subnet specified", tree.path("plat_subnet"))
            )
        return Result.ok(PlatResolution(subnet.unwrap()))

    hostname = read_string(tree, "plat_from_dns64_hostname", DEFAULT_DNS64_DETECTION_HOSTNAME)
    if hostname.is_err():
        return hostname

    discovery = Dns64Discovery(hostname.unwrap(), net_id, query, sleep)
    return Result.ok(PlatResolution(discovery.run(), hostname.unwrap()))

from .types import Int16, InterfaceName, IPv4Address, IPv6Address

__all__ = [
    "IPv4Address",
    "IPv6Address",
    "Int16",
    "InterfaceName",
]

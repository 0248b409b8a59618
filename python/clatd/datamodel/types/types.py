from __future__ import annotations

import ipaddress
from typing import Any

from clatd.constants import IFNAMSIZ
from clatd.utils.modeling.errors import ConfigFormatError
from clatd.utils.modeling.types import BaseIntegerRange, BaseStringLength, BaseType


class Int16(BaseIntegerRange):
    _min: int = -32_768
    _max: int = 32_767


class InterfaceName(BaseStringLength):
    """
    Network interface name.

    Must fit into a kernel interface name buffer together with the terminating NUL byte.
    """

    _min_bytes: int = 1
    _max_bytes: int = IFNAMSIZ - 1


class IPv4Address(BaseType):
    """Immutable 4-byte IPv4 address."""

    _value: ipaddress.IPv4Address

    def __init__(self, source_value: Any, tree_path: str = "/") -> None:
        if isinstance(source_value, ipaddress.IPv4Address):
            value = source_value
        elif isinstance(source_value, bytes):
            if len(source_value) != 4:
                raise ConfigFormatError(f"expected 4 bytes of IPv4 address, got {len(source_value)}", tree_path)
            value = ipaddress.IPv4Address(source_value)
        elif isinstance(source_value, str):
            try:
                value = ipaddress.IPv4Address(source_value)
            except ValueError as e:
                raise ConfigFormatError(f"invalid IPv4 address specified: {source_value}", tree_path) from e
        else:
            raise ConfigFormatError(
                "Unexpected value for a IPv4 address."
                f" Expected string, got '{source_value}' with type '{type(source_value)}'",
                tree_path,
            )
        super().__init__(value, tree_path)

    def validate(self) -> None:
        pass

    def to_std(self) -> ipaddress.IPv4Address:
        return self._value

    @property
    def packed(self) -> bytes:
        return self._value.packed

    def __int__(self) -> int:
        return int(self._value)

    def __str__(self) -> str:
        return str(self._value)

    def __eq__(self, o: object) -> bool:
        return isinstance(o, IPv4Address) and o._value == self._value

    def __hash__(self) -> int:
        return hash(self._value)

    def serialize(self) -> Any:
        return str(self._value)


class IPv6Address(BaseType):
    """
    Immutable 16-byte IPv6 address.

    The low 64 bits are the interface identifier of an address inside a /64 subnet.
    The middle 16 bits are bytes 11 and 12 of the address, the part of the interface
    identifier that is adjusted to make a generated address checksum-neutral.
    """

    _value: ipaddress.IPv6Address

    MIDDLE16_OFFSET = 11

    def __init__(self, source_value: Any, tree_path: str = "/") -> None:
        if isinstance(source_value, ipaddress.IPv6Address):
            value = source_value
        elif isinstance(source_value, bytes):
            if len(source_value) != 16:
                raise ConfigFormatError(f"expected 16 bytes of IPv6 address, got {len(source_value)}", tree_path)
            value = ipaddress.IPv6Address(source_value)
        elif isinstance(source_value, str):
            # scoped literals like 'fe80::1%eth0' are not plain addresses
            if "%" in source_value:
                raise ConfigFormatError(f"invalid IPv6 address specified: {source_value}", tree_path)
            try:
                value = ipaddress.IPv6Address(source_value)
            except ValueError as e:
                raise ConfigFormatError(f"invalid IPv6 address specified: {source_value}", tree_path) from e
        else:
            raise ConfigFormatError(
                "Unexpected value for a IPv6 address."
                f" Expected string, got '{source_value}' with type '{type(source_value)}'",
                tree_path,
            )
        super().__init__(value, tree_path)

    def validate(self) -> None:
        pass

    def to_std(self) -> ipaddress.IPv6Address:
        return self._value

    @property
    def packed(self) -> bytes:
        return self._value.packed

    @property
    def prefix64(self) -> bytes:
        return self.packed[:8]

    @property
    def low64(self) -> bytes:
        return self.packed[8:]

    @property
    def middle16(self) -> int:
        packed = self.packed
        return (packed[self.MIDDLE16_OFFSET] << 8) + packed[self.MIDDLE16_OFFSET + 1]

    def with_low64(self, low64: bytes) -> IPv6Address:
        if len(low64) != 8:
            raise ValueError(f"expected 8 bytes of interface identifier, got {len(low64)}")
        return IPv6Address(self.prefix64 + low64, self._tree_path)

    def with_middle16(self, value: int) -> IPv6Address:
        if not 0 <= value <= 0xFFFF:
            raise ValueError(f"expected a 16-bit value, got {value}")
        packed = bytearray(self.packed)
        packed[self.MIDDLE16_OFFSET] = value >> 8
        packed[self.MIDDLE16_OFFSET + 1] = value & 0xFF
        return IPv6Address(bytes(packed), self._tree_path)

    def is_unspecified(self) -> bool:
        return self._value.is_unspecified

    def prefix_equal(self, other: IPv6Address) -> bool:
        """Compare the /64 prefixes of two addresses."""
        return self.prefix64 == other.prefix64

    def __int__(self) -> int:
        return int(self._value)

    def __str__(self) -> str:
        return str(self._value)

    def __eq__(self, o: object) -> bool:
        return isinstance(o, IPv6Address) and o._value == self._value

    def __hash__(self) -> int:
        return hash(self._value)

    def serialize(self) -> Any:
        return str(self._value)


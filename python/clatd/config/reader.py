"""
Typed access to configuration items.

Every reader looks the item up in the parsed tree, falls back to the default
when the item is absent and converts the text to the requested type.
Failures are logged at the fatal level and returned as error results,
the caller decides whether to stop.
"""

from __future__ import annotations

import re
from typing import Optional

from clatd.datamodel.types import Int16, IPv4Address, IPv6Address
from clatd.logging import get_logger
from clatd.utils.functional import Result
from clatd.utils.modeling import ConfigTree
from clatd.utils.modeling.errors import ConfigError, ConfigFormatError, ConfigMissingError

logger = get_logger(__name__)

# the numeric prefix 'strtol()' would consume in base 10
_int_prefix_re = re.compile(r"^\s*[+-]?[0-9]+")


def fatal(error: ConfigError) -> Result[object, ConfigError]:
    logger.fatal("%s", error)
    return Result.err(error)


def _config_str(tree: ConfigTree, key: str, default: Optional[str]) -> Result[str, ConfigError]:
    value = tree.get(key, default)
    if value is None:
        return fatal(ConfigMissingError(f"{key} config item needed", tree.path(key)))
    return Result.ok(value)


def _parse_int(text: str, tree_path: str) -> int:
    if text == "":
        raise ConfigFormatError("config item is not numeric: empty value", tree_path)
    match = _int_prefix_re.match(text)
    if match is None:
        raise ConfigFormatError(f"config item is not numeric: {text}", tree_path)
    rest = text[match.end() :]
    if rest:
        raise ConfigFormatError(f"config item contains non-numeric characters: {rest}", tree_path)
    try:
        return int(match.group())
    except ValueError as e:
        # more digits than int() converts
        direction = "small" if match.group().lstrip().startswith("-") else "big"
        raise ConfigFormatError(f"config item is too {direction}: {len(match.group())} digits", tree_path) from e


def read_string(tree: ConfigTree, key: str, default: Optional[str] = None) -> Result[str, ConfigError]:
    return _config_str(tree, key, default)


def read_int16(tree: ConfigTree, key: str, default: Optional[str] = None) -> Result[int, ConfigError]:
    res = _config_str(tree, key, default)
    if res.is_err():
        return res

    tree_path = tree.path(key)
    try:
        value = Int16(_parse_int(res.unwrap(), tree_path), tree_path)
        value.validate()
    except ConfigFormatError as e:
        return fatal(e)
    return Result.ok(int(value))


def read_ipv4(tree: ConfigTree, key: str, default: Optional[str] = None) -> Result[IPv4Address, ConfigError]:
    res = _config_str(tree, key, default)
    if res.is_err():
        return res

    try:
        return Result.ok(IPv4Address(res.unwrap(), tree.path(key)))
    except ConfigFormatError as e:
        return fatal(e)


def read_ipv6(tree: ConfigTree, key: str, default: Optional[str] = None) -> Result[IPv6Address, ConfigError]:
    res = _config_str(tree, key, default)
    if res.is_err():
        return res

    try:
        return Result.ok(IPv6Address(res.unwrap(), tree.path(key)))
    except ConfigFormatError as e:
        return fatal(e)

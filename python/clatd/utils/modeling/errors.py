from __future__ import annotations

from clatd.errors import BaseClatdError


class ConfigError(BaseClatdError):
    """Base exception class for all configuration errors."""

    def __init__(self, msg: str, error_path: str = "") -> None:
        super().__init__()
        self._msg = f"[{error_path}] {msg}" if error_path else msg
        self._error_path = error_path

    def where(self) -> str:
        return self._error_path

    def __str__(self) -> str:
        return self._msg


class ConfigFileError(ConfigError):
    """The configuration file could not be read or contains no items."""

    def __init__(self, msg: str, error_path: str = "") -> None:
        msg = f"file error: {msg}"
        super().__init__(msg, error_path)


class DataParsingError(ConfigFileError):
    """Exception class for data parsing errors."""


class ConfigMissingError(ConfigError):
    """A required item has no value and no usable default."""


class ConfigFormatError(ConfigError):
    """A present value fails to parse as its declared type."""


class ConfigResolutionError(ConfigError):
    """
    A value could not be resolved from the environment.

    Used when the uplink interface has no usable IPv6 address
    or when static PLAT mode is selected without 'plat_subnet'.
    """

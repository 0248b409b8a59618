from __future__ import annotations

from clatd.utils.modeling.errors import ConfigFormatError

from .base_types import BaseType


class BaseString(BaseType):
    """Base class to work with string value."""

    def validate(self) -> None:
        if not isinstance(self._value, str):
            msg = (
                f"Unexpected value for '{type(self).__name__}'."
                f" Expected string, got '{self._value}' with type '{type(self._value)}'"
            )
            raise ConfigFormatError(msg, self._tree_path)


class BaseStringLength(BaseString):
    _min_bytes: int = 1
    _max_bytes: int

    def validate(self) -> None:
        super().validate()
        value_bytes = len(self._value.encode("utf-8"))
        if hasattr(self, "_min_bytes") and (value_bytes < self._min_bytes):
            msg = f"the string value '{self._value}' is shorter than the minimum {self._min_bytes} bytes"
            raise ConfigFormatError(msg, self._tree_path)
        if hasattr(self, "_max_bytes") and (value_bytes > self._max_bytes):
            msg = f"the string value '{self._value}' is longer than the maximum {self._max_bytes} bytes"
            raise ConfigFormatError(msg, self._tree_path)

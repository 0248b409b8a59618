from __future__ import annotations

from clatd.utils.modeling.errors import ConfigFormatError

from .base_types import BaseType


class BaseInteger(BaseType):
    """Base class to work with integer value."""

    def validate(self) -> None:
        if not isinstance(self._value, int) or isinstance(self._value, bool):
            msg = (
                f"Unexpected value for '{type(self).__name__}'."
                f" Expected integer, got '{self._value}' with type '{type(self._value)}'"
            )
            raise ConfigFormatError(msg, self._tree_path)

    def __int__(self) -> int:
        return int(self._value)


class BaseIntegerRange(BaseInteger):
    _min: int
    _max: int

    def validate(self) -> None:
        super().validate()
        if hasattr(self, "_min") and (self._value < self._min):
            msg = f"config item is too small: {self._value} is lower than the minimum {self._min}"
            raise ConfigFormatError(msg, self._tree_path)
        if hasattr(self, "_max") and (self._value > self._max):
            msg = f"config item is too big: {self._value} is higher than the maximum {self._max}"
            raise ConfigFormatError(msg, self._tree_path)

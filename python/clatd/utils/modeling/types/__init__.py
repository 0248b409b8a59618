from .base_integer_types import BaseInteger, BaseIntegerRange
from .base_string_types import BaseString, BaseStringLength
from .base_types import BaseType

__all__ = [
    "BaseInteger",
    "BaseIntegerRange",
    "BaseString",
    "BaseStringLength",
    "BaseType",
]

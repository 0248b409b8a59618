from typing import Any, Generic, TypeVar

T = TypeVar("T")

Succ = TypeVar("Succ")
Err = TypeVar("Err")


class Result(Generic[Succ, Err]):
    """
    Outcome of a fallible operation, either a success value or an error value.

    Callers are expected to check 'is_ok()' or 'is_err()' before unwrapping.
    """

    __slots__ = ("_ok", "_value")

    @staticmethod
    def ok(succ: T) -> "Result[T, Any]":
        return Result(True, succ)

    @staticmethod
    def err(err: T) -> "Result[Any, T]":
        return Result(False, err)

    def __init__(self, ok: bool, value: Any) -> None:
        self._ok = ok
        self._value = value

    def unwrap(self) -> Succ:
        assert self._ok, f"unwrap() called on {self!r}"
        return self._value

    def unwrap_err(self) -> Err:
        assert not self._ok, f"unwrap_err() called on {self!r}"
        return self._value

    def is_ok(self) -> bool:
        return self._ok

    def is_err(self) -> bool:
        return not self._ok

    def __repr__(self) -> str:
        return f"Result.{'ok' if self._ok else 'err'}({self._value!r})"

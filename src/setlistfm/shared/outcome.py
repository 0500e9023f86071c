"""
Summary: Discriminated success/failure result of one API call.
Why: Let callers branch on ``ok`` instead of catching exceptions at every call site.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Literal, NoReturn, TypeVar, Union

from .errors import SetlistFMError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    """Decoded response value."""

    value: T

    @property
    def ok(self) -> Literal[True]:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Failure:
    """Classified failure carrying a :class:`SetlistFMError`."""

    error: SetlistFMError

    @property
    def ok(self) -> Literal[False]:
        return False

    @property
    def code(self) -> int:
        return self.error.code

    @property
    def message(self) -> str | None:
        return self.error.message

    def unwrap(self) -> NoReturn:
        raise self.error

    @classmethod
    def of(cls, code: int, message: str | None = None) -> "Failure":
        return cls(SetlistFMError(code, message))


Outcome = Union[Success[T], Failure]


__all__ = ["Failure", "Outcome", "Success"]

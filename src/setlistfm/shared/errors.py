"""
Summary: Error type reported by every failed setlist.fm call.
Why: Give local validation, transport and decode failures one shape.
"""

from __future__ import annotations

from typing import ClassVar, final


@final
class SetlistFMError(Exception):
    """Numeric code plus optional human-readable message.

    ``code`` is the HTTP status when a response was received, ``-1`` when the
    transport produced none, and ``0`` when the endpoint could not be turned
    into a URL.
    """

    INVALID_ENDPOINT_CODE: ClassVar[int] = 0
    NO_RESPONSE_CODE: ClassVar[int] = -1
    INVALID_ENDPOINT_MESSAGE: ClassVar[str] = "Provided endpoint is not valid"

    def __init__(self, code: int, message: str | None = None) -> None:
        super().__init__(code, message)
        self.code: int = code
        self.message: str | None = message

    @classmethod
    def invalid_endpoint(cls) -> "SetlistFMError":
        return cls(cls.INVALID_ENDPOINT_CODE, cls.INVALID_ENDPOINT_MESSAGE)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SetlistFMError):
            return NotImplemented
        return (self.code, self.message) == (other.code, other.message)

    def __hash__(self) -> int:
        return hash((self.code, self.message))

    def __str__(self) -> str:
        if self.message:
            return f"[{self.code}] {self.message}"
        return f"[{self.code}]"

    def __repr__(self) -> str:
        return f"SetlistFMError(code={self.code!r}, message={self.message!r})"


__all__ = ["SetlistFMError"]

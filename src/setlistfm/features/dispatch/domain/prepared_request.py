"""
Summary: Fully-formed HTTP request handed to a transport.
Why: Keep URL and header assembly testable without any network I/O.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True, slots=True)
class PreparedRequest:
    """Method, absolute URL, and headers for one outbound call."""

    url: str
    headers: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    method: str = "GET"

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))


__all__ = ["PreparedRequest"]

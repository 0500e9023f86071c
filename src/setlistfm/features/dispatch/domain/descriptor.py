"""
Summary: Immutable description of one API call's path and query parameters.
Why: Separate per-endpoint argument mapping from URL assembly.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class EndpointDescriptor:
    """Path relative to the API base plus string-valued query parameters.

    Attributes:
        path: Resource path without a leading slash, identifiers already
            substituted, e.g. ``"artist/<mbid>/setlists"``.
        parameters: Query parameter values keyed by name. An empty string
            means "not supplied" and is dropped when the URL is built, so an
            empty value can never be sent on purpose. ``None`` means the
            endpoint takes no parameters.
    """

    path: str
    parameters: Mapping[str, str] | None = None

    def supplied_parameters(self) -> list[tuple[str, str]]:
        """Return ``(name, value)`` pairs whose value is non-empty, in mapping order."""

        if not self.parameters:
            return []
        return [(name, value) for name, value in self.parameters.items() if value != ""]


__all__ = ["EndpointDescriptor"]

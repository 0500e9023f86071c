"""Application services exposing the setlist.fm operations."""

from __future__ import annotations

from .client import AsyncSetlistFMClient, SetlistFMClient

__all__ = ["AsyncSetlistFMClient", "SetlistFMClient"]

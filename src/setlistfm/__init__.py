"""Typed client for the setlist.fm REST API.

Example::

    from setlistfm import AsyncSetlistFMClient, Language, Success

    with AsyncSetlistFMClient("my-api-key", Language.GERMAN) as client:
        outcome = await client.get_artist("b10bbbfc-cf9e-42e0-be17-e2c3e1d2600d")
        if isinstance(outcome, Success):
            print(outcome.value.name)
"""

from __future__ import annotations

from .application.services import AsyncSetlistFMClient, SetlistFMClient
from .config.config import Config, ConfigError
from .features.catalog import (
    Artist,
    ArtistsResult,
    CitiesResult,
    City,
    Coords,
    CountriesResult,
    Country,
    Setlist,
    SetlistsResult,
    Sets,
    Song,
    SongSet,
    SortType,
    Tour,
    User,
    Venue,
    VenuesResult,
)
from .features.dispatch import Dispatcher, EndpointDescriptor, Transport, TransportResponse, TransportTask
from .shared import Failure, Language, Outcome, SetlistFMError, Success

__all__ = [
    "Artist",
    "ArtistsResult",
    "AsyncSetlistFMClient",
    "CitiesResult",
    "City",
    "Config",
    "ConfigError",
    "Coords",
    "CountriesResult",
    "Country",
    "Dispatcher",
    "EndpointDescriptor",
    "Failure",
    "Language",
    "Outcome",
    "SetlistFMClient",
    "SetlistFMError",
    "Setlist",
    "SetlistsResult",
    "Sets",
    "Song",
    "SongSet",
    "SortType",
    "Success",
    "Tour",
    "Transport",
    "TransportResponse",
    "TransportTask",
    "User",
    "Venue",
    "VenuesResult",
]

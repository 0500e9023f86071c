# Path: `src/setlistfm/features/catalog/__init__.py`
# Summary: Export the setlist.fm endpoint catalog and its response records.
# Why: Provide a stable import surface for client facades and tests.

from .domain import (
    Artist,
    ArtistsResult,
    CitiesResult,
    City,
    Coords,
    CountriesResult,
    Country,
    PagedResult,
    Setlist,
    SetlistFMRecord,
    SetlistsResult,
    Sets,
    Song,
    SongSet,
    Tour,
    User,
    Venue,
    VenuesResult,
)
from .usecases import SortType, endpoints

__all__ = [
    "Artist",
    "ArtistsResult",
    "CitiesResult",
    "City",
    "Coords",
    "CountriesResult",
    "Country",
    "PagedResult",
    "SetlistFMRecord",
    "Setlist",
    "SetlistsResult",
    "Sets",
    "SortType",
    "Song",
    "SongSet",
    "Tour",
    "User",
    "Venue",
    "VenuesResult",
    "endpoints",
]

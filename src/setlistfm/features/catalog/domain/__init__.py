# Path: `src/setlistfm/features/catalog/domain/__init__.py`
# Summary: Export setlist.fm response records.
# Why: Provide a stable import surface for client facades and tests.

from .models import (
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
    "Song",
    "SongSet",
    "Tour",
    "User",
    "Venue",
    "VenuesResult",
]

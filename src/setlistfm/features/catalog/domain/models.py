"""
Summary: Typed records for setlist.fm API responses.
Why: Give decoded JSON attribute access while tolerating absent fields.
"""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class SetlistFMRecord(BaseModel):
    """Base for response records: immutable, camelCase keys, extra keys ignored.

    Every field is optional because the API omits keys freely. Attributes are
    snake_case and may be used when constructing records directly.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class PagedResult(SetlistFMRecord):
    """Paging metadata shared by every search/list envelope."""

    total: int | None = None
    """Total number of items matching the query."""

    page: int | None = None
    """Current page, starting at 1."""

    items_per_page: int | None = None


class Artist(SetlistFMRecord):
    """A performer, identified by its MusicBrainz MBID."""

    mbid: str | None = None
    tmid: int | None = None
    """Ticketmaster identifier, e.g. 735610."""
    name: str | None = None
    sort_name: str | None = None
    """E.g. ``"Beatles, The"``."""
    disambiguation: str | None = None
    url: str | None = None


class Country(SetlistFMRecord):
    code: str | None = None
    """ISO code, e.g. ``"ie"`` for Ireland."""
    name: str | None = None
    """Possibly localized, e.g. ``"Österreich"`` when German was requested."""


class Coords(SetlistFMRecord):
    lat: float | None = None
    long: float | None = None


class City(SetlistFMRecord):
    """A city, identified by its GeoNames id."""

    id: str | None = None
    name: str | None = None
    state_code: str | None = None
    """Only unique combined with the country, e.g. ``"US.CA"``."""
    state: str | None = None
    coords: Coords | None = None
    country: Country | None = None


class Venue(SetlistFMRecord):
    city: City | None = None
    url: str | None = None
    id: str | None = None
    name: str | None = None


class Tour(SetlistFMRecord):
    name: str | None = None


class Song(SetlistFMRecord):
    """One performed song."""

    name: str | None = None
    with_: Artist | None = Field(default=None, alias="with")
    """Guest artist who joined the stage for this song."""
    cover: Artist | None = None
    """Original artist when the song is a cover."""
    info: str | None = None
    tape: bool | None = None
    """Played from tape rather than performed live."""


class SongSet(SetlistFMRecord):
    """A set within a setlist (main set, acoustic set, encore...)."""

    name: str | None = None
    encore: int | None = None
    """Encore number starting at 1; absent for regular sets."""
    song: list[Song] | None = None


class Sets(SetlistFMRecord):
    set: list[SongSet] | None = None


class Setlist(SetlistFMRecord):
    artist: Artist | None = None
    venue: Venue | None = None
    tour: Tour | None = None
    sets: Sets | None = None
    info: str | None = None
    url: str | None = None
    """Attribution link required wherever the setlist data is shown."""
    id: str | None = None
    version_id: str | None = None
    last_fm_event_id: int | None = Field(
        default=None,
        validation_alias=AliasChoices("lastFmEventId", "lastFMEventId", "last_fm_event_id"),
    )
    event_date: str | None = None
    """``dd-MM-yyyy``."""
    last_updated: str | None = None


class User(SetlistFMRecord):
    user_id: str | None = None
    fullname: str | None = None
    last_fm: str | None = Field(
        default=None,
        validation_alias=AliasChoices("lastFm", "lastFM", "last_fm"),
    )
    my_space: str | None = None
    twitter: str | None = None
    flickr: str | None = None
    website: str | None = None
    about: str | None = None
    url: str | None = None


class ArtistsResult(PagedResult):
    artist: list[Artist] | None = None


class CitiesResult(PagedResult):
    cities: list[City] | None = None


class CountriesResult(PagedResult):
    country: list[Country] | None = None


class SetlistsResult(PagedResult):
    setlist: list[Setlist] | None = None


class VenuesResult(PagedResult):
    venue: list[Venue] | None = None


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

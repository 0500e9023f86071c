"""Endpoint descriptor factories for the setlist.fm REST API.

Where: src/setlistfm/features/catalog/usecases/endpoints.py
What: Map caller arguments of each API operation onto an ``EndpointDescriptor``.
Why: Keep path templates and parameter names out of the client facades.

Omitted optional arguments become ``""`` so the request builder drops them.
"""

from __future__ import annotations

from enum import Enum
from urllib.parse import quote

from setlistfm.features.dispatch.domain.descriptor import EndpointDescriptor


class SortType(str, Enum):
    """Sort order accepted by ``search/artists``."""

    SORT_NAME = "sortName"
    RELEVANCE = "relevance"


def _opt(value: str | int | None) -> str:
    return "" if value is None else str(value)


def _segment(identifier: str) -> str:
    # Identifiers are single path segments; "/" and friends must not split them.
    return quote(identifier, safe="")


def artist(mbid: str) -> EndpointDescriptor:
    return EndpointDescriptor(f"artist/{_segment(mbid)}")


def artist_setlists(mbid: str, page: int = 1) -> EndpointDescriptor:
    return EndpointDescriptor(f"artist/{_segment(mbid)}/setlists", {"p": str(page)})


def city(geo_id: str) -> EndpointDescriptor:
    return EndpointDescriptor(f"city/{_segment(geo_id)}")


def search_artists(
    artist_mbid: str | None = None,
    artist_name: str | None = None,
    artist_tmid: int | None = None,
    page: int = 1,
    sort: SortType = SortType.SORT_NAME,
) -> EndpointDescriptor:
    """At least one of mbid, name or tmid must be given for the API to answer."""

    return EndpointDescriptor(
        "search/artists",
        {
            "artistMbid": _opt(artist_mbid),
            "artistName": _opt(artist_name),
            "artistTmid": _opt(artist_tmid),
            "p": str(page),
            "sort": SortType(sort).value,
        },
    )


def search_cities(
    country: str | None = None,
    name: str | None = None,
    page: int = 1,
    state: str | None = None,
    state_code: str | None = None,
) -> EndpointDescriptor:
    """``country`` must be a country code; a full name yields a 404."""

    return EndpointDescriptor(
        "search/cities",
        {
            "country": _opt(country),
            "name": _opt(name),
            "p": str(page),
            "state": _opt(state),
            "stateCode": _opt(state_code),
        },
    )


def search_countries() -> EndpointDescriptor:
    return EndpointDescriptor("search/countries")


def search_setlists(
    artist_mbid: str | None = None,
    artist_name: str | None = None,
    artist_tmid: int | None = None,
    city_id: str | None = None,
    city_name: str | None = None,
    country_code: str | None = None,
    date: str | None = None,
    last_fm: str | None = None,
    last_updated: str | None = None,
    page: int = 1,
    state: str | None = None,
    state_code: str | None = None,
    tour_name: str | None = None,
    venue_id: str | None = None,
    venue_name: str | None = None,
    year: str | None = None,
) -> EndpointDescriptor:
    """Build the ``search/setlists`` query.

    Args:
        date: Event date as ``dd-MM-yyyy``.
        last_fm: Last.fm event id (deprecated by the API).
        last_updated: UTC timestamp ``yyyyMMddHHmmss``; matches setlists
            updated on or after it.
    """

    return EndpointDescriptor(
        "search/setlists",
        {
            "artistMbid": _opt(artist_mbid),
            "artistName": _opt(artist_name),
            "artistTmid": _opt(artist_tmid),
            "cityId": _opt(city_id),
            "cityName": _opt(city_name),
            "countryCode": _opt(country_code),
            "date": _opt(date),
            "lastFm": _opt(last_fm),
            "lastUpdated": _opt(last_updated),
            "p": str(page),
            "state": _opt(state),
            "stateCode": _opt(state_code),
            "tourName": _opt(tour_name),
            "venueId": _opt(venue_id),
            "venueName": _opt(venue_name),
            "year": _opt(year),
        },
    )


def search_venues(
    city_id: str | None = None,
    city_name: str | None = None,
    country: str | None = None,
    name: str | None = None,
    page: int = 1,
    state: str | None = None,
    state_code: str | None = None,
) -> EndpointDescriptor:
    return EndpointDescriptor(
        "search/venues",
        {
            "cityId": _opt(city_id),
            "cityName": _opt(city_name),
            "country": _opt(country),
            "name": _opt(name),
            "p": str(page),
            "state": _opt(state),
            "stateCode": _opt(state_code),
        },
    )


def setlist(setlist_id: str) -> EndpointDescriptor:
    return EndpointDescriptor(f"setlist/{_segment(setlist_id)}")


def setlist_version(version_id: str) -> EndpointDescriptor:
    return EndpointDescriptor(f"setlist/version/{_segment(version_id)}")


def user(user_id: str) -> EndpointDescriptor:
    return EndpointDescriptor(f"user/{_segment(user_id)}")


def user_attended(user_id: str, page: int = 1) -> EndpointDescriptor:
    return EndpointDescriptor(f"user/{_segment(user_id)}/attended", {"p": str(page)})


def user_edited(user_id: str, page: int = 1) -> EndpointDescriptor:
    return EndpointDescriptor(f"user/{_segment(user_id)}/edited", {"p": str(page)})


def venue(venue_id: str) -> EndpointDescriptor:
    return EndpointDescriptor(f"venue/{_segment(venue_id)}")


def venue_setlists(venue_id: str, page: int = 1) -> EndpointDescriptor:
    return EndpointDescriptor(f"venue/{_segment(venue_id)}/setlists", {"p": str(page)})


__all__ = [
    "SortType",
    "artist",
    "artist_setlists",
    "city",
    "search_artists",
    "search_cities",
    "search_countries",
    "search_setlists",
    "search_venues",
    "setlist",
    "setlist_version",
    "user",
    "user_attended",
    "user_edited",
    "venue",
    "venue_setlists",
]

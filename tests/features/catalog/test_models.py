"""Tests for decoding API bodies into response records."""

from __future__ import annotations

import pytest
from doubles import load_fixture
from pydantic import ValidationError

from setlistfm.features.catalog import (
    Artist,
    City,
    Coords,
    CountriesResult,
    Country,
    Setlist,
    SetlistsResult,
    Song,
    User,
)


def test_city_decodes_nested_records() -> None:
    city = City.model_validate_json(load_fixture("city"), strict=True)

    assert city == City(
        id="6446330",
        name="Saint-Leu-la-Forêt",
        state_code="A8",
        state="Île-de-France",
        coords=Coords(lat=49.01694, long=2.24639),
        country=Country(code="FR", name="France"),
    )


def test_setlists_result_decodes_paging_and_sets() -> None:
    result = SetlistsResult.model_validate_json(load_fixture("artist_setlists"), strict=True)

    assert (result.total, result.page, result.items_per_page) == (1145, 1, 20)
    assert result.setlist is not None
    first = result.setlist[0]
    assert first.version_id == "7be1aaa0"
    assert first.event_date == "23-08-1964"
    assert first.tour is not None and first.tour.name == "In Rainbows"
    assert first.venue is not None and first.venue.city is not None
    assert first.venue.city.coords == Coords(lat=37.3394, long=-121.895)

    assert first.sets is not None and first.sets.set is not None
    main_set, encore = first.sets.set
    assert main_set.encore is None
    assert main_set.song is not None
    assert [song.name for song in main_set.song] == ["15 Step", "Creep", "Nude"]
    assert main_set.song[1].tape is False
    assert main_set.song[2].cover == Artist(mbid="b10bbbfc-cf9e-42e0-be17-e2c3e1d2600d", name="The Beatles")
    assert encore.encore == 1
    assert encore.song is not None
    assert encore.song[0].with_ is not None
    assert encore.song[0].with_.name == "Muse"


def test_setlist_accepts_both_last_fm_event_id_spellings() -> None:
    assert Setlist.model_validate_json(b'{"lastFmEventId": 1}').last_fm_event_id == 1
    assert Setlist.model_validate_json(b'{"lastFMEventId": 2}').last_fm_event_id == 2


def test_missing_fields_decode_as_none() -> None:
    result = SetlistsResult.model_validate_json(load_fixture("artist_setlists"), strict=True)

    assert result.setlist is not None
    sparse = result.setlist[1]
    assert sparse.last_fm_event_id == 3892181
    assert sparse.venue is None
    assert sparse.sets is None
    assert sparse.artist is not None and sparse.artist.tmid is None


def test_countries_result_keeps_localized_names() -> None:
    result = CountriesResult.model_validate_json(load_fixture("countries"), strict=True)

    assert result.country == [Country(code="AT", name="Österreich"), Country(code="IE", name="Irland")]


def test_user_decodes_camel_case_keys() -> None:
    user = User.model_validate_json(load_fixture("user"), strict=True)

    assert user.user_id == "Adam-Jackson"
    assert user.last_fm == "adamjackson"
    assert user.my_space is None
    assert user.flickr is None
    assert user.website == "https://example.com"


def test_unknown_keys_are_ignored() -> None:
    artist = Artist.model_validate_json(b'{"name": "Muse", "genre": "rock"}', strict=True)

    assert artist == Artist(name="Muse")


def test_strict_decoding_rejects_mismatched_types() -> None:
    with pytest.raises(ValidationError):
        _ = Artist.model_validate_json(b'{"tmid": "763468"}', strict=True)


def test_song_guest_uses_with_key() -> None:
    song = Song.model_validate_json(b'{"name": "Karma Police", "with": {"name": "Muse"}}', strict=True)

    assert song.with_ == Artist(name="Muse")


def test_records_are_immutable() -> None:
    artist = Artist(name="Radiohead")

    with pytest.raises(ValidationError):
        artist.name = "Muse"  # type: ignore[misc]

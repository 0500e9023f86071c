"""Application facades for the setlist.fm API.

This layer centralizes construction of the request context, dispatcher and
default transport so that callback-style and ``async`` callers share the same
pipeline. Every operation builds one endpoint descriptor and hands it to the
dispatcher; no call is retried, cached or rate limited.

Generate an API key at https://www.setlist.fm/settings/api.
"""

from __future__ import annotations

from concurrent.futures import Future
from types import TracebackType
from typing import Self

from setlistfm.config.config import Config, ConfigError
from setlistfm.config.settings import DEFAULT_TIMEOUT_SECONDS
from setlistfm.features.catalog import (
    Artist,
    ArtistsResult,
    CitiesResult,
    City,
    CountriesResult,
    Setlist,
    SetlistsResult,
    SortType,
    User,
    Venue,
    VenuesResult,
    endpoints,
)
from setlistfm.features.dispatch import Dispatcher, OutcomeCallback, RequestContext, Transport
from setlistfm.platform.http import RequestsTransport
from setlistfm.platform.logging import logger, setup_logger
from setlistfm.shared.language import Language
from setlistfm.shared.outcome import Outcome


class _ClientBase:
    """Own the immutable request context shared by every call of a client."""

    def __init__(
        self,
        api_key: str,
        language: Language | str = Language.ENGLISH,
        *,
        transport: Transport | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        """Create a client.

        Args:
            api_key: Key generated from the caller's setlist.fm profile.
            language: Response language, as a ``Language`` or its wire code.
            transport: Custom network implementation. Defaults to a
                ``RequestsTransport`` owned (and closed) by this client.
            timeout: Per-request timeout for the default transport.
        """

        resolved_language = language if isinstance(language, Language) else Language.from_code(language)
        self._owned_transport: RequestsTransport | None = None
        if transport is None:
            self._owned_transport = RequestsTransport(timeout=timeout)
            transport = self._owned_transport

        self._dispatcher: Dispatcher = Dispatcher(
            RequestContext(api_key=api_key, language=resolved_language, transport=transport)
        )

    @classmethod
    def from_config(cls, config: Config | None = None, *, transport: Transport | None = None) -> Self:
        """Build a client from the TOML configuration and environment.

        Raises:
            ConfigError: If no API key is configured.
        """

        cfg = config or Config.load()
        api_key = cfg.resolved_api_key()
        if api_key is None:
            raise ConfigError(
                "No setlist.fm API key configured; set SETLISTFM_API_KEY or api_key in the config file"
            )
        if cfg.log_file is not None:
            _ = setup_logger(log_file=cfg.log_file, console=False)
        logger.debug("Creating %s (language=%s)", cls.__name__, cfg.language)
        return cls(
            api_key,
            cfg.resolved_language,
            transport=transport,
            timeout=cfg.timeout_seconds,
        )

    @property
    def language(self) -> Language:
        return self._dispatcher.context.language

    @property
    def dispatcher(self) -> Dispatcher:
        return self._dispatcher

    def close(self) -> None:
        """Shut down the default transport if this client created it."""

        if self._owned_transport is not None:
            self._owned_transport.close()
            self._owned_transport = None

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


class SetlistFMClient(_ClientBase):
    """Callback-style client.

    Each method starts the request immediately, invokes ``completion`` with
    the :data:`Outcome` once it resolves, and returns the underlying future.
    """

    def get_artist(self, mbid: str, *, completion: OutcomeCallback[Artist]) -> Future[Outcome[Artist]]:
        """Return an artist for a MusicBrainz MBID, e.g. ``0bfba3d3-6a04-4779-bb0a-df07df5b0558``."""
        return self._dispatcher.request(endpoints.artist(mbid), Artist, completion)

    def get_artist_setlists(
        self,
        mbid: str,
        page: int = 1,
        *,
        completion: OutcomeCallback[SetlistsResult],
    ) -> Future[Outcome[SetlistsResult]]:
        """Return one page of an artist's setlists."""
        return self._dispatcher.request(endpoints.artist_setlists(mbid, page), SetlistsResult, completion)

    def get_city(self, geo_id: str, *, completion: OutcomeCallback[City]) -> Future[Outcome[City]]:
        return self._dispatcher.request(endpoints.city(geo_id), City, completion)

    def search_artists(
        self,
        *,
        artist_mbid: str | None = None,
        artist_name: str | None = None,
        artist_tmid: int | None = None,
        page: int = 1,
        sort: SortType = SortType.SORT_NAME,
        completion: OutcomeCallback[ArtistsResult],
    ) -> Future[Outcome[ArtistsResult]]:
        """Search for artists.

        At least one of ``artist_mbid``, ``artist_name`` or ``artist_tmid``
        must be given for the call to succeed.
        """
        descriptor = endpoints.search_artists(artist_mbid, artist_name, artist_tmid, page, sort)
        return self._dispatcher.request(descriptor, ArtistsResult, completion)

    def search_cities(
        self,
        *,
        country: str | None = None,
        name: str | None = None,
        page: int = 1,
        state: str | None = None,
        state_code: str | None = None,
        completion: OutcomeCallback[CitiesResult],
    ) -> Future[Outcome[CitiesResult]]:
        """Search for cities; give at least one filter besides ``page``."""
        descriptor = endpoints.search_cities(country, name, page, state, state_code)
        return self._dispatcher.request(descriptor, CitiesResult, completion)

    def search_countries(self, *, completion: OutcomeCallback[CountriesResult]) -> Future[Outcome[CountriesResult]]:
        """Return every country supported by the API."""
        return self._dispatcher.request(endpoints.search_countries(), CountriesResult, completion)

    def search_setlists(
        self,
        *,
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
        completion: OutcomeCallback[SetlistsResult],
    ) -> Future[Outcome[SetlistsResult]]:
        """Search for setlists; give at least one filter besides ``page``.

        See :func:`setlistfm.features.catalog.usecases.endpoints.search_setlists`
        for the formats of ``date`` and ``last_updated``.
        """
        descriptor = endpoints.search_setlists(
            artist_mbid=artist_mbid,
            artist_name=artist_name,
            artist_tmid=artist_tmid,
            city_id=city_id,
            city_name=city_name,
            country_code=country_code,
            date=date,
            last_fm=last_fm,
            last_updated=last_updated,
            page=page,
            state=state,
            state_code=state_code,
            tour_name=tour_name,
            venue_id=venue_id,
            venue_name=venue_name,
            year=year,
        )
        return self._dispatcher.request(descriptor, SetlistsResult, completion)

    def search_venues(
        self,
        *,
        city_id: str | None = None,
        city_name: str | None = None,
        country: str | None = None,
        name: str | None = None,
        page: int = 1,
        state: str | None = None,
        state_code: str | None = None,
        completion: OutcomeCallback[VenuesResult],
    ) -> Future[Outcome[VenuesResult]]:
        descriptor = endpoints.search_venues(city_id, city_name, country, name, page, state, state_code)
        return self._dispatcher.request(descriptor, VenuesResult, completion)

    def get_setlist(self, setlist_id: str, *, completion: OutcomeCallback[Setlist]) -> Future[Outcome[Setlist]]:
        """Return the current version of a setlist, even if it was edited since."""
        return self._dispatcher.request(endpoints.setlist(setlist_id), Setlist, completion)

    def get_setlist_version(
        self,
        version_id: str,
        *,
        completion: OutcomeCallback[Setlist],
    ) -> Future[Outcome[Setlist]]:
        """Return the setlist exactly as it was at ``version_id``."""
        return self._dispatcher.request(endpoints.setlist_version(version_id), Setlist, completion)

    def get_user(self, user_id: str, *, completion: OutcomeCallback[User]) -> Future[Outcome[User]]:
        return self._dispatcher.request(endpoints.user(user_id), User, completion)

    def get_user_attended_setlists(
        self,
        user_id: str,
        page: int = 1,
        *,
        completion: OutcomeCallback[SetlistsResult],
    ) -> Future[Outcome[SetlistsResult]]:
        return self._dispatcher.request(endpoints.user_attended(user_id, page), SetlistsResult, completion)

    def get_user_edited_setlists(
        self,
        user_id: str,
        page: int = 1,
        *,
        completion: OutcomeCallback[SetlistsResult],
    ) -> Future[Outcome[SetlistsResult]]:
        """Setlists edited by a user; each entry is the current version, not the edited one."""
        return self._dispatcher.request(endpoints.user_edited(user_id, page), SetlistsResult, completion)

    def get_venue(self, venue_id: str, *, completion: OutcomeCallback[Venue]) -> Future[Outcome[Venue]]:
        return self._dispatcher.request(endpoints.venue(venue_id), Venue, completion)

    def get_venue_setlists(
        self,
        venue_id: str,
        page: int = 1,
        *,
        completion: OutcomeCallback[SetlistsResult],
    ) -> Future[Outcome[SetlistsResult]]:
        return self._dispatcher.request(endpoints.venue_setlists(venue_id, page), SetlistsResult, completion)


class AsyncSetlistFMClient(_ClientBase):
    """Awaitable client; each coroutine returns the call's :data:`Outcome`."""

    async def get_artist(self, mbid: str) -> Outcome[Artist]:
        """Return an artist for a MusicBrainz MBID."""
        return await self._dispatcher.fetch(endpoints.artist(mbid), Artist)

    async def get_artist_setlists(self, mbid: str, page: int = 1) -> Outcome[SetlistsResult]:
        return await self._dispatcher.fetch(endpoints.artist_setlists(mbid, page), SetlistsResult)

    async def get_city(self, geo_id: str) -> Outcome[City]:
        return await self._dispatcher.fetch(endpoints.city(geo_id), City)

    async def search_artists(
        self,
        *,
        artist_mbid: str | None = None,
        artist_name: str | None = None,
        artist_tmid: int | None = None,
        page: int = 1,
        sort: SortType = SortType.SORT_NAME,
    ) -> Outcome[ArtistsResult]:
        """Search for artists by MBID, name or Ticketmaster id."""
        descriptor = endpoints.search_artists(artist_mbid, artist_name, artist_tmid, page, sort)
        return await self._dispatcher.fetch(descriptor, ArtistsResult)

    async def search_cities(
        self,
        *,
        country: str | None = None,
        name: str | None = None,
        page: int = 1,
        state: str | None = None,
        state_code: str | None = None,
    ) -> Outcome[CitiesResult]:
        descriptor = endpoints.search_cities(country, name, page, state, state_code)
        return await self._dispatcher.fetch(descriptor, CitiesResult)

    async def search_countries(self) -> Outcome[CountriesResult]:
        return await self._dispatcher.fetch(endpoints.search_countries(), CountriesResult)

    async def search_setlists(
        self,
        *,
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
    ) -> Outcome[SetlistsResult]:
        descriptor = endpoints.search_setlists(
            artist_mbid=artist_mbid,
            artist_name=artist_name,
            artist_tmid=artist_tmid,
            city_id=city_id,
            city_name=city_name,
            country_code=country_code,
            date=date,
            last_fm=last_fm,
            last_updated=last_updated,
            page=page,
            state=state,
            state_code=state_code,
            tour_name=tour_name,
            venue_id=venue_id,
            venue_name=venue_name,
            year=year,
        )
        return await self._dispatcher.fetch(descriptor, SetlistsResult)

    async def search_venues(
        self,
        *,
        city_id: str | None = None,
        city_name: str | None = None,
        country: str | None = None,
        name: str | None = None,
        page: int = 1,
        state: str | None = None,
        state_code: str | None = None,
    ) -> Outcome[VenuesResult]:
        descriptor = endpoints.search_venues(city_id, city_name, country, name, page, state, state_code)
        return await self._dispatcher.fetch(descriptor, VenuesResult)

    async def get_setlist(self, setlist_id: str) -> Outcome[Setlist]:
        return await self._dispatcher.fetch(endpoints.setlist(setlist_id), Setlist)

    async def get_setlist_version(self, version_id: str) -> Outcome[Setlist]:
        return await self._dispatcher.fetch(endpoints.setlist_version(version_id), Setlist)

    async def get_user(self, user_id: str) -> Outcome[User]:
        return await self._dispatcher.fetch(endpoints.user(user_id), User)

    async def get_user_attended_setlists(self, user_id: str, page: int = 1) -> Outcome[SetlistsResult]:
        return await self._dispatcher.fetch(endpoints.user_attended(user_id, page), SetlistsResult)

    async def get_user_edited_setlists(self, user_id: str, page: int = 1) -> Outcome[SetlistsResult]:
        return await self._dispatcher.fetch(endpoints.user_edited(user_id, page), SetlistsResult)

    async def get_venue(self, venue_id: str) -> Outcome[Venue]:
        return await self._dispatcher.fetch(endpoints.venue(venue_id), Venue)

    async def get_venue_setlists(self, venue_id: str, page: int = 1) -> Outcome[SetlistsResult]:
        return await self._dispatcher.fetch(endpoints.venue_setlists(venue_id, page), SetlistsResult)


__all__ = ["AsyncSetlistFMClient", "SetlistFMClient"]

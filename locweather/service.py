import asyncio
from collections.abc import Sequence
from typing import Any, Self

import httpx
import structlog

from .cache import CacheStore
from .client import WeatherbitClient
from .exceptions import LocationWeatherError, MissingAPIKey
from .settings import DEFAULT_API_URL, Settings
from .storage import FileStorage
from .types import Cache
from .validation import validate_locations

logger = structlog.get_logger()


class LocationWeather:
    """
    Resolve the current weather for a batch of city names and postal codes.

    Locations that were observed less than an hour ago are served from the
    cache, the rest are fetched from Weatherbit and written back to the cache.
    Calls on the same instance are serialised, so concurrent callers never
    race on the cache.
    """

    def __init__(
        self,
        *,
        api_key: str | None,
        cache: CacheStore,
        api_url: str = DEFAULT_API_URL,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_key = api_key
        self.cache = cache
        self.api_url = api_url
        self.transport = transport
        self._lock: asyncio.Lock | None = None
        self._lock_loop: asyncio.AbstractEventLoop | None = None

    @classmethod
    def from_env(cls, settings: Settings | None = None) -> Self:
        if settings is None:
            settings = Settings.from_env()

        return cls(
            api_key=settings.api_key,
            cache=CacheStore(FileStorage(settings.cache_file)),
            api_url=settings.api_url,
        )

    async def get_weather_data(self, locations: Sequence[str | int | float]) -> Cache:
        """
        Get the weather for up to 10 locations, keyed by location.

        Raises LocationWeatherError if anything goes wrong, no partial results
        are ever returned.
        """

        try:
            return await self._get_weather_data(locations)
        except Exception as e:
            raise LocationWeatherError(str(e)) from e

    def _get_lock(self) -> asyncio.Lock:
        # A lock belongs to one event loop, create a new one when the service
        # is used from another loop, e.g. across asyncio.run calls
        loop = asyncio.get_running_loop()
        if self._lock is None or self._lock_loop is not loop:
            self._lock = asyncio.Lock()
            self._lock_loop = loop
        return self._lock

    async def _get_weather_data(self, locations: Any) -> Cache:
        if not self.api_key:
            raise MissingAPIKey()

        validate_locations(locations)

        async with self._get_lock():
            stale, fresh = self.cache.partition(locations)
            logger.debug("Partitioned locations", stale=stale, fresh=fresh)

            # Read cache hits first, writing the cache replaces what is kept
            # in memory
            cached = self.cache.read_fresh(fresh)

            fetched: Cache = {}
            if stale:
                async with WeatherbitClient(
                    api_key=self.api_key,
                    api_url=self.api_url,
                    transport=self.transport,
                ) as client:
                    fetched = await client.get_current_many(stale)
                self.cache.merge_and_persist(fetched)

        return {**cached, **fetched}


_default: LocationWeather | None = None


async def get_weather_data(locations: Sequence[str | int | float]) -> Cache:
    """
    Get the weather for a batch of locations using a service configured from
    the environment.
    """

    global _default
    if _default is None:
        _default = LocationWeather.from_env()

    return await _default.get_weather_data(locations)

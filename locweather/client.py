import asyncio
from collections.abc import Sequence
from typing import Any, Self

import httpx
import pydantic
import structlog

from .exceptions import NoWeatherData
from .settings import DEFAULT_API_URL
from .types import Cache, CurrentWeatherResponse, WeatherRecord
from .utils import is_postal_code, location_key, timed

logger = structlog.get_logger()


class WeatherbitClient:
    """
    A client for the Weatherbit current weather API.
    """

    def __init__(
        self,
        *,
        api_key: str,
        api_url: str = DEFAULT_API_URL,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_key = api_key
        self.api_url = api_url
        self.transport = transport
        self.client: httpx.AsyncClient | None = None

    async def close(self) -> None:
        if self.client:
            await self.client.aclose()
            self.client = None

    ###################
    # Context manager #
    ###################

    async def __aenter__(self) -> Self:
        if not self.client:
            self.client = httpx.AsyncClient(transport=self.transport)
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    ###################
    # Current weather #
    ###################

    async def get_current(self, location: str | int | float) -> WeatherRecord:
        """
        Get the current weather for a city name or postal code.

        Unknown locations, bad responses and network errors are all reported
        as NoWeatherData for the location.
        """

        if not self.client:
            self.client = httpx.AsyncClient(transport=self.transport)

        key = location_key(location)
        location_type = "postal_code" if is_postal_code(location) else "city"

        try:
            response = await self.client.get(
                self.api_url, params={location_type: key, "key": self.api_key}
            )
            response.raise_for_status()
            parsed = CurrentWeatherResponse.model_validate_json(response.text)
        except (httpx.HTTPError, pydantic.ValidationError) as e:
            logger.warning("No weather data", location=key, error=str(e))
            raise NoWeatherData(location) from e

        return parsed.data[0]

    async def get_current_many(self, locations: Sequence[str | int | float]) -> Cache:
        """
        Get the current weather for all locations concurrently.

        All requests are awaited before returning. If any of them failed the
        whole batch fails with the first error, in input order.
        """

        with timed("Fetched weather batch", count=len(locations)):
            results = await asyncio.gather(
                *(self.get_current(location) for location in locations),
                return_exceptions=True,
            )

        for result in results:
            if isinstance(result, BaseException):
                raise result

        return {
            location_key(location): record
            for location, record in zip(locations, results)
            if isinstance(record, WeatherRecord)
        }

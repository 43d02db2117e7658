from collections.abc import AsyncIterator, Callable
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import httpx
import pytest

from locweather import CacheStore, FileStorage, LocationWeather, WeatherbitClient
from locweather.types import WeatherDescription, WeatherRecord

UNKNOWN_LOCATIONS = {"kjkkssjkjkj", "obanikorosssss"}


def format_ob_time(dt: datetime) -> str:
    """Format a timestamp the way Weatherbit does in `ob_time`."""

    return dt.astimezone(UTC).strftime("%Y-%m-%d %H:%M")


def make_record(
    city_name: str = "New York", *, ob_time: str | None = None
) -> WeatherRecord:
    return WeatherRecord(
        timezone="America/New_York",
        ob_time=ob_time or format_ob_time(datetime.now(UTC)),
        city_name=city_name,
        datetime=datetime.now(UTC).strftime("%Y-%m-%d:%H"),
        weather=WeatherDescription(description="Clear sky"),
    )


def weather_payload(city_name: str, *, ob_time: str | None = None) -> dict[str, Any]:
    now = datetime.now(UTC)
    return {
        "count": 1,
        "data": [
            {
                "city_name": city_name,
                "timezone": "America/Chicago",
                "ob_time": ob_time or format_ob_time(now),
                "datetime": now.strftime("%Y-%m-%d:%H"),
                "temp": 21.5,
                "rh": 45,
                "weather": {"icon": "c01d", "code": 800, "description": "Clear sky"},
            }
        ],
    }


###########
# Caching #
###########


@pytest.fixture
def cache_file(tmp_path: Path) -> Path:
    return tmp_path / "cache" / "data.json"


@pytest.fixture
def cache_store(cache_file: Path) -> CacheStore:
    return CacheStore(FileStorage(cache_file))


###############
# Weather API #
###############


@pytest.fixture
def api_key() -> str:
    return "test-api-key"


@pytest.fixture
def requests() -> list[httpx.Request]:
    return []


@pytest.fixture
def handler(
    requests: list[httpx.Request],
) -> Callable[[httpx.Request], httpx.Response]:
    def _handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)

        params = request.url.params
        if "postal_code" in params:
            city_name = f"Postal {params['postal_code']}"
        else:
            city_name = params["city"]

        if city_name in UNKNOWN_LOCATIONS:
            # Weatherbit answers unknown locations with an empty body
            return httpx.Response(204)

        return httpx.Response(200, json=weather_payload(city_name))

    return _handler


@pytest.fixture
def transport(
    handler: Callable[[httpx.Request], httpx.Response],
) -> httpx.MockTransport:
    return httpx.MockTransport(handler)


@pytest.fixture
async def client(
    api_key: str, transport: httpx.MockTransport
) -> AsyncIterator[WeatherbitClient]:
    async with WeatherbitClient(api_key=api_key, transport=transport) as c:
        yield c


@pytest.fixture
def service(
    api_key: str, cache_store: CacheStore, transport: httpx.MockTransport
) -> LocationWeather:
    return LocationWeather(api_key=api_key, cache=cache_store, transport=transport)


@pytest.fixture
def record_factory() -> Callable[..., WeatherRecord]:
    return make_record


@pytest.fixture
def payload_factory() -> Callable[..., dict[str, Any]]:
    return weather_payload

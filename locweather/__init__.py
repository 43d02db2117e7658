"""Current weather for city names and postal codes, with a one hour cache."""

from .cache import CacheStore
from .client import WeatherbitClient
from .exceptions import (
    CacheWriteError,
    InvalidLocationCount,
    InvalidLocations,
    LocationWeatherError,
    MissingAPIKey,
    NoWeatherData,
    WeatherError,
)
from .log import configure_logging
from .service import LocationWeather, get_weather_data
from .settings import Settings
from .storage import BlobStorage, FileStorage
from .types import Cache, WeatherDescription, WeatherRecord

__all__ = [
    "BlobStorage",
    "Cache",
    "CacheStore",
    "CacheWriteError",
    "FileStorage",
    "InvalidLocationCount",
    "InvalidLocations",
    "LocationWeather",
    "LocationWeatherError",
    "MissingAPIKey",
    "NoWeatherData",
    "Settings",
    "WeatherDescription",
    "WeatherError",
    "WeatherRecord",
    "WeatherbitClient",
    "configure_logging",
    "get_weather_data",
]

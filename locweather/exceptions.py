"""Exception classes for the weather client."""


class WeatherError(Exception):
    """Base exception for all weather client errors."""

    pass


class LocationWeatherError(WeatherError):
    """
    The single error type raised by `LocationWeather.get_weather_data`.

    Every failure is re-raised as this type with the original message, the
    original exception is available as `__cause__`.
    """

    pass


class MissingAPIKey(WeatherError):
    """No API key has been configured."""

    def __init__(self, message: str = "please supply a valid api key") -> None:
        super().__init__(message)


class InvalidLocations(WeatherError, TypeError):
    """The location batch, or one of its elements, has the wrong type."""

    pass


class InvalidLocationCount(WeatherError, ValueError):
    """The location batch is empty or too large."""

    pass


class NoWeatherData(WeatherError, LookupError):
    """The weather API did not return usable data for a location."""

    def __init__(self, location: str | int | float) -> None:
        super().__init__(f"no weather data for {location}")
        self.location = location


class CacheWriteError(WeatherError, OSError):
    """The cache could not be written to durable storage."""

    pass

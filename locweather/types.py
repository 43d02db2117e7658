from pydantic import BaseModel, Field, TypeAdapter


class WeatherDescription(BaseModel):
    description: str


class WeatherRecord(BaseModel):
    """
    Current conditions for a single location. Only the fields listed here are
    kept from the API response, everything else is dropped.
    """

    timezone: str
    ob_time: str
    city_name: str
    datetime: str
    weather: WeatherDescription


class CurrentWeatherResponse(BaseModel):
    """Response body of the Weatherbit v2.0/current endpoint."""

    count: int | None = None
    data: list[WeatherRecord] = Field(min_length=1)


type Cache = dict[str, WeatherRecord]

CacheAdapter: TypeAdapter[dict[str, WeatherRecord]] = TypeAdapter(
    dict[str, WeatherRecord]
)

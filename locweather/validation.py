from collections.abc import Sequence
from typing import Any

from .exceptions import InvalidLocationCount, InvalidLocations

MAX_LOCATIONS = 10


def validate_locations(locations: Any) -> None:
    """
    Check that `locations` is a batch of 1-10 city names or postal codes.

    Nothing is transformed, this only raises if the batch is malformed.
    """

    if not isinstance(locations, Sequence) or isinstance(
        locations, (str, bytes, bytearray)
    ):
        raise InvalidLocations(
            "data set should be an array containing locations and postal codes"
        )
    elif not locations:
        raise InvalidLocationCount("data set should not be empty")
    elif len(locations) > MAX_LOCATIONS:
        raise InvalidLocationCount(
            f"data set should not contain more than {MAX_LOCATIONS} entries"
        )
    elif not all(_is_location(location) for location in locations):
        raise InvalidLocations(
            "each location should be a city(string) or zipcode(integer)"
        )


def _is_location(value: Any) -> bool:
    # bool is a subclass of int, but True is not a zip code
    if isinstance(value, bool):
        return False
    return isinstance(value, (str, int, float))

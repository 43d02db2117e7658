import re
import time
from contextlib import contextmanager
from datetime import UTC, datetime
from typing import Any, Iterator

import structlog

logger = structlog.get_logger()

POSTAL_CODE_RE = re.compile(r"\d+")


def location_key(location: str | int | float) -> str:
    """
    Return the cache key for a location. Postal codes given as numbers and as
    strings share a key, so 10005 and "10005" resolve to the same entry.
    """

    if isinstance(location, str):
        return location
    if isinstance(location, float) and location.is_integer():
        return str(int(location))
    return str(location)


def is_postal_code(location: str | int | float) -> bool:
    return POSTAL_CODE_RE.fullmatch(location_key(location).strip()) is not None


def parse_timestamp(value: str) -> datetime:
    """
    Parse a timestamp as returned by the weather API, e.g. "2017-08-28 16:45".
    Timestamps without a timezone are in UTC.
    """

    dt = datetime.fromisoformat(value)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt


@contextmanager
def timed(name: str, **kwargs: Any) -> Iterator[None]:
    t = time.monotonic()
    try:
        yield
    finally:
        elapsed_ms = round((time.monotonic() - t) * 1000, 2)
        logger.debug(name, elapsed_ms=elapsed_ms, **kwargs)

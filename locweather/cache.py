"""
In-memory weather cache backed by a single JSON blob.

Records are considered fresh for one hour after their observation time. The
durable blob is read back into memory once, before the first lookup.
"""

from collections.abc import Iterable
from datetime import UTC, datetime, timedelta

import pydantic
import structlog

from .exceptions import CacheWriteError
from .storage import BlobStorage
from .types import Cache, CacheAdapter
from .utils import location_key, parse_timestamp

FRESHNESS_WINDOW = timedelta(hours=1)

type Location = str | int | float

logger = structlog.get_logger()


class CacheStore:
    def __init__(self, storage: BlobStorage) -> None:
        self.storage = storage
        self._cache: Cache | None = None

    @property
    def cache(self) -> Cache:
        if self._cache is None:
            self._cache = self.load()
        return self._cache

    def load(self) -> Cache:
        """
        Read the cache from durable storage. A missing or unreadable blob
        results in an empty cache, so every location will be fetched again.
        """

        if not self.storage.exists():
            return {}

        try:
            cache = CacheAdapter.validate_json(self.storage.read())
        except (OSError, pydantic.ValidationError) as e:
            logger.warning(
                "Ignoring unreadable weather cache",
                storage=repr(self.storage),
                error=str(e),
            )
            return {}

        logger.debug("Loaded weather cache", entries=len(cache))
        return cache

    def is_fresh(self, location: Location, *, now: datetime | None = None) -> bool:
        if now is None:
            now = datetime.now(UTC)

        try:
            record = self.cache[location_key(location)]
            observed_at = parse_timestamp(record.ob_time)
            return observed_at + FRESHNESS_WINDOW > now
        except (KeyError, ValueError, TypeError, OverflowError):
            return False

    def partition(
        self, locations: Iterable[Location], *, now: datetime | None = None
    ) -> tuple[list[Location], list[Location]]:
        """
        Split locations into those that have to be fetched and those that can
        be served from the cache. Input order and duplicates are kept.
        """

        if now is None:
            now = datetime.now(UTC)

        stale: list[Location] = []
        fresh: list[Location] = []
        for location in locations:
            if self.is_fresh(location, now=now):
                fresh.append(location)
            else:
                stale.append(location)

        return stale, fresh

    def read_fresh(self, locations: Iterable[Location]) -> Cache:
        cache = self.cache
        return {
            key: cache[key]
            for key in (location_key(location) for location in locations)
            if key in cache
        }

    def merge_and_persist(self, records: Cache) -> Cache:
        """
        Write the current cache merged with `records` to durable storage,
        overwriting the whole blob.

        After a successful write only `records` are kept in memory, the full
        merged set only exists in storage.
        """

        merged = {**self.cache, **records}
        content = CacheAdapter.dump_json(merged)

        try:
            self.storage.write(content)
        except OSError as e:
            raise CacheWriteError(f"unable to write weather cache: {e}") from e

        logger.info("Persisted weather cache", written=len(records), total=len(merged))
        self._cache = dict(records)
        return records

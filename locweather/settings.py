"""
Environment configuration.

    API_KEY                 Weatherbit API key
    LOCWEATHER_CACHE_FILE   Path of the JSON cache file (default: ./data.json)
    LOCWEATHER_API_URL      Current weather endpoint
"""

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_API_URL = "https://api.weatherbit.io/v2.0/current"
DEFAULT_CACHE_FILE = "data.json"


@dataclass(frozen=True, kw_only=True)
class Settings:
    api_key: str | None
    cache_file: Path
    api_url: str

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            api_key=os.getenv("API_KEY") or None,
            cache_file=Path(os.getenv("LOCWEATHER_CACHE_FILE") or DEFAULT_CACHE_FILE),
            api_url=os.getenv("LOCWEATHER_API_URL") or DEFAULT_API_URL,
        )

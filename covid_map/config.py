"""
Configuration for the COVID-19 map.

Every setting can be overridden through an environment variable or a `.env`
file next to the app.
"""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()


@dataclass
class FeedConfig:
  """Where the three data feeds and the world outlines come from."""
  countries_url: str = field(
    default_factory=lambda: os.getenv(
      "COUNTRIES_URL", "https://restcountries.com/v2/all?fields=name,alpha3Code,borders"
    )
  )
  current_url: str = field(
    default_factory=lambda: os.getenv("CURRENT_URL", "https://covid2019-api.herokuapp.com/v2/current")
  )
  timeseries_url: str = field(
    default_factory=lambda: os.getenv("TIMESERIES_URL", "https://pomber.github.io/covid19/timeseries.json")
  )
  geojson_url: str = field(
    default_factory=lambda: os.getenv(
      "GEOJSON_URL",
      "https://raw.githubusercontent.com/johan/world.geo.json/master/countries.geo.json",
    )
  )
  retries: int = field(default_factory=lambda: int(os.getenv("FETCH_RETRIES", "3")))
  backoff: float = field(default_factory=lambda: float(os.getenv("FETCH_BACKOFF", "1.0")))
  timeout: float = field(default_factory=lambda: float(os.getenv("FETCH_TIMEOUT", "30")))
  cache_ttl: int = field(default_factory=lambda: int(os.getenv("CACHE_TTL", "3600")))


@dataclass
class MapConfig:
  tick_seconds: float = field(default_factory=lambda: float(os.getenv("TICK_SECONDS", "0.5")))
  log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())


@dataclass
class CovidMapConfig:
  feeds: FeedConfig = field(default_factory=FeedConfig)
  map: MapConfig = field(default_factory=MapConfig)


config = CovidMapConfig()


def get_config() -> CovidMapConfig:
  return config


def reload_config() -> CovidMapConfig:
  """Re-read the environment (and `.env`) into a fresh configuration."""
  global config
  load_dotenv(override=True)
  config = CovidMapConfig()
  return config

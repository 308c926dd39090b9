"""Fetching the JSON feeds the map is built from."""

import json
import time
from typing import Any, Optional
from urllib.request import urlopen

from .config import FeedConfig, get_config
from .logger import get_logger

logger = get_logger(__name__)


class FeedError(RuntimeError):
  """A feed could not be downloaded or has an unexpected shape."""

  def __init__(self, url: str, message: str):
    super().__init__(f"{url}: {message}")
    self.url = url


def fetch_json(url: str, settings: Optional[FeedConfig] = None) -> Any:
  """
  GET `url` and decode the JSON body.

  Failed attempts are retried with exponential backoff (`backoff`, then twice
  that, ...). When every attempt fails a FeedError chained to the last error
  is raised.
  """
  settings = settings or get_config().feeds
  attempts = max(1, settings.retries)
  last_error = None

  for attempt in range(1, attempts + 1):
    try:
      with urlopen(url, timeout=settings.timeout) as response:
        return json.load(response)
    except (OSError, ValueError) as exc:  # URLError is an OSError, bad JSON a ValueError
      last_error = exc
      logger.warning("Fetching %s failed (attempt %d/%d): %s", url, attempt, attempts, exc)
      if attempt < attempts:
        time.sleep(settings.backoff * 2 ** (attempt - 1))

  raise FeedError(url, f"giving up after {attempts} attempts") from last_error


def fetch_countries(settings: Optional[FeedConfig] = None) -> list:
  settings = settings or get_config().feeds
  payload = fetch_json(settings.countries_url, settings)
  if not isinstance(payload, list):
    raise FeedError(settings.countries_url, "expected a list of countries")
  return payload


def fetch_current(settings: Optional[FeedConfig] = None) -> dict:
  settings = settings or get_config().feeds
  payload = fetch_json(settings.current_url, settings)
  if not isinstance(payload, dict) or "dt" not in payload or "data" not in payload:
    raise FeedError(settings.current_url, "expected an object with 'dt' and 'data'")
  return payload


def fetch_timeseries(settings: Optional[FeedConfig] = None) -> dict:
  settings = settings or get_config().feeds
  payload = fetch_json(settings.timeseries_url, settings)
  if not isinstance(payload, dict):
    raise FeedError(settings.timeseries_url, "expected an object keyed by country")
  return payload


def fetch_geojson(settings: Optional[FeedConfig] = None) -> dict:
  settings = settings or get_config().feeds
  payload = fetch_json(settings.geojson_url, settings)
  if not isinstance(payload, dict) or "features" not in payload:
    raise FeedError(settings.geojson_url, "expected a GeoJSON FeatureCollection")
  return payload

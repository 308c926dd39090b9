"""
The session object tying the data and the controllers together.

CovidData is built once from the three feeds, in order: the code map first,
then everything that needs it. Dashboard owns the controllers and is the one
thing a host UI talks to.
"""

from dataclasses import dataclass
from datetime import date
from typing import Callable, List, Mapping, Optional

import pandas as pd

from .animation import TICK_SECONDS, AnimationController, Playback
from .codes import build_code_map, build_neighbour_map, country_options
from .config import FeedConfig, get_config
from .feeds import FeedError, fetch_countries, fetch_current, fetch_timeseries
from .logger import get_logger
from .normalize import country_history, normalize_current, normalize_timeseries, parse_feed_date
from .render import STATISTICS_LABEL, STATISTICS_PREFIX, MapRenderer, SituationRenderer, format_day
from .search import SearchController, SearchForm

logger = get_logger(__name__)


@dataclass(frozen=True, eq=False)
class CovidData:
  code_map: Mapping[str, str]
  neighbours: Mapping[str, tuple]
  current: pd.DataFrame
  timeseries: pd.DataFrame
  statistics_date: date

  @classmethod
  def from_feeds(cls, countries: list, current: dict, timeseries: dict) -> "CovidData":
    code_map = build_code_map(countries)
    try:
      statistics_date = parse_feed_date(current)
    except (KeyError, ValueError) as exc:
      raise FeedError("current", f"unreadable date {current.get('dt')!r}") from exc
    data = cls(
      code_map=code_map,
      neighbours=build_neighbour_map(countries),
      current=normalize_current(current['data'], code_map),
      timeseries=normalize_timeseries(timeseries, code_map),
      statistics_date=statistics_date,
    )
    logger.info(
      "Loaded %d names, %d countries with current data, %d time series rows",
      len(code_map), len(data.current), len(data.timeseries),
    )
    return data

  @property
  def options(self) -> List[str]:
    return country_options(self.code_map)


def load_data(settings: Optional[FeedConfig] = None) -> CovidData:
  settings = settings or get_config().feeds
  countries = fetch_countries(settings)
  current = fetch_current(settings)
  timeseries = fetch_timeseries(settings)
  return CovidData.from_feeds(countries, current, timeseries)


class Dashboard:
  def __init__(self, data: CovidData, renderer: MapRenderer,
               form: Optional[SearchForm] = None, interval: float = TICK_SECONDS,
               today: Callable[[], date] = date.today):
    self.data = data
    self.renderer = renderer
    self.playback = Playback()
    self.situation = SituationRenderer(data.current, renderer, today=today)
    self.animation = AnimationController(
      self.playback, data.timeseries, self.situation, renderer, interval=interval
    )
    self.search_controller = SearchController(
      data.code_map, data.neighbours, data.current, self.playback,
      self.situation, renderer, form=form,
    )

  def start(self) -> None:
    self.renderer.set_label(STATISTICS_LABEL, STATISTICS_PREFIX + format_day(self.data.statistics_date))
    self.situation.render()

  @property
  def toggle_text(self) -> str:
    return self.animation.toggle_text

  @property
  def playing(self) -> bool:
    return self.playback.is_playing

  def toggle_animation(self) -> bool:
    return self.animation.toggle()

  def search(self, name: Optional[str]) -> bool:
    if not name:
      return False
    return self.search_controller.search(name)

  @property
  def rows(self):
    return self.search_controller.rows

  def history(self) -> Optional[pd.DataFrame]:
    """Time series of the most recently searched country, if any."""
    code = self.search_controller.latest
    if code is None:
      return None
    return country_history(self.data.timeseries, code)

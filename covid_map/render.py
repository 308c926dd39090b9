"""The map renderer interface and the current-situation painter."""

from datetime import date
from typing import Callable, Mapping, Protocol

import pandas as pd

from .colors import HSL, color_batch, severity_color

DATE_LABEL = "date"
STATISTICS_LABEL = "statistics_date"
TOGGLE_LABEL = "timeseries"

IDLE_TOGGLE_TEXT = "Time series"
PLAYING_TOGGLE_TEXT = "Stop time series"
STATISTICS_PREFIX = "Statistics as of "


class MapRenderer(Protocol):
  """What the host UI has to offer for the core to draw on."""

  def paint_batch(self, colors: Mapping[str, HSL]) -> None:
    """Merge code -> colour into the current paint."""

  def reset_paint(self) -> None:
    """Return every country to the neutral fill."""

  def set_label(self, label_id: str, text: str) -> None:
    ...


def format_day(day: date) -> str:
  return f"{day:%d.%m.%Y}"


def format_today(day: date) -> str:
  return f"{day.day}.{day.month}.{day.year}"


class SituationRenderer:
  def __init__(self, current: pd.DataFrame, renderer: MapRenderer,
               today: Callable[[], date] = date.today):
    self.current = current
    self.renderer = renderer
    self._today = today

  def render(self) -> None:
    """Full repaint of the live data."""
    self.renderer.reset_paint()
    self.renderer.set_label(DATE_LABEL, format_today(self._today()))
    self.renderer.paint_batch(color_batch(self.current))

  def color_of(self, code: str) -> HSL:
    if code not in self.current.index:
      return severity_color(None, None)
    row = self.current.loc[code]
    return severity_color(row['confirmed'], row['deaths'])

  def paint_code(self, code: str) -> None:
    self.renderer.paint_batch({code: self.color_of(code)})

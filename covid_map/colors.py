"""
Severity colours for the choropleth.

Hue runs from blue (240, confirmed cases only) to red (360, deaths only).
Saturation is constant. Lightness goes from 95 (nothing reported) towards 0 as
the log of confirmed + 20 x deaths grows, so a death weighs twenty cases.
"""

import math
from typing import Dict, NamedTuple, Optional

import pandas as pd


class HSL(NamedTuple):
  hue: int
  saturation: int
  lightness: int

  def __str__(self) -> str:
    return f"hsl({self.hue}, {self.saturation}, {self.lightness})"


SATURATION = 100
MAX_LIGHTNESS = 95
DEATH_WEIGHT = 20


def severity_color(confirmed: Optional[float], deaths: Optional[float]) -> HSL:
  # missing numbers mean "no data" and paint the lightest blue
  confirmed = confirmed or 0
  deaths = deaths or 0

  denominator = confirmed + deaths or 1
  hue = math.floor(240 + 120 * deaths / denominator)

  magnitude = confirmed + DEATH_WEIGHT * deaths
  weight = math.floor(7 * math.log(magnitude)) if magnitude > 0 else 0
  if weight > 100:
    weight = 95

  lightness = max(0, MAX_LIGHTNESS - weight)
  return HSL(hue, SATURATION, lightness)


BASELINE = severity_color(0, 0)


def color_batch(metrics: pd.DataFrame) -> Dict[str, HSL]:
  """Colour every country of a metrics frame indexed by code (or with a `code` column)."""
  if 'code' in metrics.columns:
    metrics = metrics.set_index('code')
  return {
    code: severity_color(confirmed, deaths)
    for code, confirmed, deaths in zip(metrics.index, metrics['confirmed'], metrics['deaths'])
  }

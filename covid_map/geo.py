"""Turning the paint state into a filled GeoJSON layer for pydeck."""

import colorsys
import copy
from typing import Mapping, Optional

import numpy as np
import pandas as pd

from .colors import HSL

DEFAULT_FILL = "#EEEEEE"
FILL_ALPHA = 220


def hex_to_rgba(value: str, alpha: int = FILL_ALPHA) -> list:
  value = value.lstrip('#')
  return [int(value[i:i + 2], 16) for i in (0, 2, 4)] + [alpha]


def hsl_to_rgba(color: HSL, alpha: int = FILL_ALPHA) -> list:
  # colorsys wants hue, lightness, saturation as fractions
  red, green, blue = colorsys.hls_to_rgb(
    (color.hue % 360) / 360, color.lightness / 100, color.saturation / 100
  )
  rgb = np.round(np.array([red, green, blue]) * 255).astype(int)
  return rgb.tolist() + [alpha]


def paint_geojson(geojson: dict, fills: Mapping[str, HSL],
                  current: Optional[pd.DataFrame] = None,
                  default_fill: str = DEFAULT_FILL) -> dict:
  """
  Copy of `geojson` with a `fill_color` on every feature.

  Features are matched on their `id`, the ISO-3 code. Unpainted countries get
  the default fill. When `current` is given its numbers go into the feature
  properties for the tooltip.
  """
  painted = copy.deepcopy(geojson)
  default_rgba = hex_to_rgba(default_fill)
  stats = current.to_dict('index') if current is not None else {}

  for feature in painted['features']:
    code = feature.get('id')
    color = fills.get(code)
    feature['properties']['fill_color'] = hsl_to_rgba(color) if color is not None else default_rgba

    info = stats.get(code)
    if not info:
      feature['properties']['confirmed'] = None
      feature['properties']['deaths'] = None
      feature['properties']['recovered'] = None
      continue
    feature['properties']['confirmed'] = int(info['confirmed'])
    feature['properties']['deaths'] = int(info['deaths'])
    feature['properties']['recovered'] = int(info['recovered'])

  return painted

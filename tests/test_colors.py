"""Tests for the severity colour function."""

import pandas as pd

from covid_map.colors import BASELINE, HSL, color_batch, severity_color


class TestSeverityColor:
  def test_nothing_reported(self):
    assert severity_color(0, 0) == HSL(240, 100, 95)

  def test_missing_numbers_use_baseline(self):
    assert severity_color(None, None) == BASELINE == HSL(240, 100, 95)

  def test_confirmed_only(self):
    # floor(7 * ln 100) = 32
    assert severity_color(100, 0) == HSL(240, 100, 63)

  def test_mixed(self):
    # hue floor(240 + 120 * 100 / 1100) = 250, weight floor(7 * ln 3000) = 56
    assert severity_color(1000, 100) == HSL(250, 100, 39)

  def test_deaths_only_is_red(self):
    assert severity_color(0, 10).hue == 360

  def test_single_case(self):
    assert severity_color(1, 0) == HSL(240, 100, 95)

  def test_lightness_never_negative(self):
    # floor(7 * ln 1e6) = 96
    assert severity_color(1_000_000, 0).lightness == 0

  def test_heavy_weight_clamped(self):
    assert severity_color(2_000_000, 0) == HSL(240, 100, 0)

  def test_more_deaths_is_redder_and_not_lighter(self):
    colors = [severity_color(1000, deaths) for deaths in (0, 10, 100, 1000)]
    hues = [color.hue for color in colors]
    lightness = [color.lightness for color in colors]
    assert hues == sorted(set(hues))
    assert lightness == sorted(lightness, reverse=True)

  def test_css_string(self):
    assert str(severity_color(0, 0)) == "hsl(240, 100, 95)"


def test_color_batch_indexed_by_code():
  frame = pd.DataFrame(
    {"confirmed": [100, 0], "deaths": [0, 0]}, index=pd.Index(["FIN", "ISL"], name="code")
  )
  assert color_batch(frame) == {"FIN": HSL(240, 100, 63), "ISL": HSL(240, 100, 95)}


def test_color_batch_code_column():
  frame = pd.DataFrame({"code": ["SWE"], "confirmed": [1000], "deaths": [100]})
  assert color_batch(frame) == {"SWE": HSL(250, 100, 39)}


def test_color_batch_empty():
  assert color_batch(pd.DataFrame(columns=["code", "confirmed", "deaths"])) == {}

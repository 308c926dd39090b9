"""Shared fixtures for the covid_map tests."""

from datetime import date

import pytest

from covid_map.codes import build_code_map
from covid_map.dashboard import CovidData

TODAY = date(2020, 4, 20)

COUNTRIES = [
  {"name": "Finland", "alpha3Code": "FIN", "borders": ["NOR", "SWE", "RUS"]},
  {"name": "Sweden", "alpha3Code": "SWE", "borders": ["FIN", "NOR"]},
  {"name": "Norway", "alpha3Code": "NOR", "borders": ["FIN", "SWE", "RUS"]},
  {"name": "Russian Federation", "alpha3Code": "RUS", "borders": ["FIN", "NOR"]},
  {"name": "Bolivia (Plurinational State of)", "alpha3Code": "BOL", "borders": ["BRA"]},
  {"name": "Brazil", "alpha3Code": "BRA", "borders": ["BOL"]},
  {"name": "Canada", "alpha3Code": "CAN", "borders": ["USA"]},
  {"name": "United States of America", "alpha3Code": "USA", "borders": ["CAN"]},
  {"name": "Iceland", "alpha3Code": "ISL", "borders": []},
]

CURRENT = {
  "dt": "2020-04-18",
  "data": [
    {"location": "Finland", "confirmed": 3489, "deaths": 75, "recovered": 1700},
    {"location": "Sweden", "confirmed": 13216, "deaths": 1400, "recovered": 550},
    {"location": "US", "confirmed": 700000, "deaths": 37000, "recovered": 58000},
    {"location": "Bolivia", "confirmed": 520, "deaths": 32, "recovered": 17},
    {"location": "Diamond_Princess", "confirmed": 712, "deaths": 13, "recovered": 619},
    {"location": "Korea,_South", "confirmed": 10653, "deaths": 232, "recovered": 8042},
    {"location": "Iceland", "confirmed": 1754, "deaths": 9, "recovered": 1136},
  ],
}

DATES = ["2020-01-22", "2020-01-23", "2020-01-24"]


def series(*pairs):
  return [
    {"date": day, "confirmed": confirmed, "deaths": deaths}
    for day, (confirmed, deaths) in zip(DATES, pairs)
  ]


TIMESERIES = {
  "Finland": series((0, 0), (1, 0), (5, 1)),
  "Sweden": series((0, 0), (2, 0), (10, 0)),
  "Canada (Ontario)": series((1, 0), (3, 0), (6, 1)),
  "Canada (Quebec)": series((0, 0), (2, 1), (4, 2)),
  "Atlantis": series((99, 9), (99, 9), (99, 9)),
}


class RecordingRenderer:
  """Map renderer that remembers every call and the resulting paint state."""

  def __init__(self):
    self.calls = []
    self.fills = {}
    self.labels = {}

  def paint_batch(self, colors):
    self.calls.append(("paint", dict(colors)))
    self.fills.update(colors)

  def reset_paint(self):
    self.calls.append(("reset",))
    self.fills = {}

  def set_label(self, label_id, text):
    self.calls.append(("label", label_id, text))
    self.labels[label_id] = text

  def frame_labels(self, label_id):
    return [call[2] for call in self.calls if call[0] == "label" and call[1] == label_id]


class RecordingForm:
  def __init__(self):
    self.cleared = 0

  def clear(self):
    self.cleared += 1


@pytest.fixture
def countries():
  return [dict(country) for country in COUNTRIES]


@pytest.fixture
def code_map(countries):
  return build_code_map(countries)


@pytest.fixture
def data(countries):
  return CovidData.from_feeds(countries, CURRENT, TIMESERIES)


@pytest.fixture
def renderer():
  return RecordingRenderer()


@pytest.fixture
def form():
  return RecordingForm()

# Streamlit dashboard for the covid-19 world map

'''
  Where does COVID-19 stand today, and how did it get there?

  - Choropleth of the latest statistics: blue means confirmed cases,
    red means deaths, darker means worse.
  - Country lookup: the searched country and its neighbours are painted,
    and the country is added to the table (most recent search on top).
  - Time series: replays the outbreak one day per half second.

  The map and the search box are thin wrappers; the logic lives in covid_map.
'''
import asyncio

import altair as alt
import pandas as pd
import pydeck as pdk
import streamlit as st

from covid_map.config import get_config
from covid_map.dashboard import Dashboard, load_data
from covid_map.feeds import FeedError, fetch_geojson
from covid_map.geo import paint_geojson
from covid_map.logger import get_logger
from covid_map.render import DATE_LABEL, STATISTICS_LABEL


CONFIG = get_config()
logger = get_logger("covid_map.app")

PRIMARY_BLUE = "#1d4ed8"
DEATH_RED = "#ef4444"
SEARCH_KEY = "country"
TABLE_COLUMNS = ['Country', 'Confirmed', 'Deaths', 'Recovered']


@st.cache_resource(ttl=CONFIG.feeds.cache_ttl)
def get_data():
  return load_data(CONFIG.feeds)


@st.cache_data(ttl=CONFIG.feeds.cache_ttl)
def get_geojson() -> dict:
  return fetch_geojson(CONFIG.feeds)


def build_deck(geojson: dict) -> pdk.Deck:
  layer = pdk.Layer(
    "GeoJsonLayer",
    data=geojson,
    pickable=True,
    stroked=True,
    get_line_color=[255, 255, 255],
    get_fill_color='properties.fill_color',
  )
  return pdk.Deck(
    layers=[layer],
    initial_view_state=pdk.ViewState(latitude=20, longitude=0, zoom=0.8),
    map_style=None,
    tooltip={
      "html": "<b>{name}</b><br/>Confirmed: {confirmed}<br/>Deaths: {deaths}<br/>Recovered: {recovered}",
      "style": {"color": "white"},
    },
  )


class StreamlitMapRenderer:
  """
  Keeps the paint state across reruns and draws it into whatever
  placeholders the current run has bound. Between runs (widget callbacks)
  painting only updates the state.
  """

  def __init__(self, geojson: dict, current: pd.DataFrame):
    self.geojson = geojson
    self.current = current
    self.fills = {}
    self.labels = {}
    self._slots = {}

  def bind(self, **slots) -> None:
    self._slots = slots
    for label_id, text in self.labels.items():
      self._write_label(label_id, text)

  def unbind(self) -> None:
    self._slots = {}

  def reset_paint(self) -> None:
    self.fills = {}
    self.draw()

  def paint_batch(self, colors) -> None:
    self.fills.update(colors)
    self.draw()

  def set_label(self, label_id: str, text: str) -> None:
    self.labels[label_id] = text
    self._write_label(label_id, text)

  def draw(self) -> None:
    slot = self._slots.get('map')
    if slot is None:
      return
    slot.pydeck_chart(build_deck(paint_geojson(self.geojson, self.fills, self.current)))

  def _write_label(self, label_id: str, text: str) -> None:
    slot = self._slots.get(label_id)
    if slot is not None:
      slot.markdown(f"**{text}**")


class StreamlitSearchForm:
  def clear(self) -> None:
    st.session_state[SEARCH_KEY] = None


def _on_search():
  st.session_state.dashboard.search(st.session_state.get(SEARCH_KEY))


def _on_toggle():
  st.session_state.dashboard.toggle_animation()


def history_chart(history: pd.DataFrame) -> alt.Chart:
  long = history.melt('date', var_name='metric', value_name='count')
  return alt.Chart(long).mark_line(strokeWidth=2).encode(
    x=alt.X('date:T', title='Date'),
    y=alt.Y('count:Q', title='People'),
    color=alt.Color(
      'metric:N',
      scale=alt.Scale(domain=['confirmed', 'deaths'], range=[PRIMARY_BLUE, DEATH_RED]),
    ),
    tooltip=[
      alt.Tooltip('date:T', title='Date'),
      'metric:N',
      alt.Tooltip('count:Q', format=','),
    ],
  ).properties(height=300)


st.set_page_config(layout="wide")

try:
  DATA = get_data()
  GEOJSON = get_geojson()
except FeedError as exc:
  logger.error("Startup failed: %s", exc)
  st.error(f"Could not load the COVID-19 data. Try again later.\n\n{exc}")
  st.stop()

if 'dashboard' not in st.session_state:
  renderer = StreamlitMapRenderer(GEOJSON, DATA.current)
  dashboard = Dashboard(DATA, renderer, form=StreamlitSearchForm(), interval=CONFIG.map.tick_seconds)
  dashboard.start()
  st.session_state.renderer = renderer
  st.session_state.dashboard = dashboard

renderer = st.session_state.renderer
dashboard = st.session_state.dashboard

st.title("Covid-19 around the world")
statistics_slot = st.empty()
date_slot = st.empty()

search_col, toggle_col = st.columns((3, 1))
search_col.selectbox(
  "Search for a country",
  DATA.options,
  index=None,
  key=SEARCH_KEY,
  placeholder="Country",
  on_change=_on_search,
)
toggle_col.button(dashboard.toggle_text, on_click=_on_toggle, use_container_width=True)

map_slot = st.empty()

st.subheader("Searched countries")
rows = dashboard.rows
if rows:
  # counts and "-" placeholders share columns
  table = pd.DataFrame(rows, columns=TABLE_COLUMNS).astype(str)
  st.dataframe(table, hide_index=True, use_container_width=True)
else:
  st.info("Search for a country to add it to the table.")

history = dashboard.history()
if history is not None and not history.empty:
  st.subheader(f"History of {rows[0].country}")
  st.altair_chart(history_chart(history), use_container_width=True)

renderer.bind(map=map_slot, **{DATE_LABEL: date_slot, STATISTICS_LABEL: statistics_slot})
try:
  if dashboard.playing:
    asyncio.run(dashboard.animation.run())
    # refresh the toggle button text
    st.rerun()
  else:
    renderer.draw()
finally:
  renderer.unbind()

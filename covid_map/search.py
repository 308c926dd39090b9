"""
Country lookup and the table of searched countries.

The table keeps the most recent search on top. A country searched for the
first time is simply put on top. Searching a country again rebuilds the table
with that country first and every other searched country below it in
alphabetical order.
"""

from typing import List, Mapping, NamedTuple, Optional, Protocol, Union

import pandas as pd

from .animation import Playback
from .codes import name_for_code
from .logger import get_logger
from .render import MapRenderer, SituationRenderer

logger = get_logger(__name__)

PLACEHOLDER = "-"


class TableRow(NamedTuple):
  country: str
  confirmed: Union[int, str]
  deaths: Union[int, str]
  recovered: Union[int, str]


class SearchForm(Protocol):
  def clear(self) -> None:
    ...


def table_row(code: str, current: pd.DataFrame, code_map: Mapping[str, str]) -> Optional[TableRow]:
  if code in current.index:
    row = current.loc[code]
    return TableRow(row['country'], int(row['confirmed']), int(row['deaths']), int(row['recovered']))
  name = name_for_code(code_map, code)
  if name is None:
    return None
  return TableRow(name, PLACEHOLDER, PLACEHOLDER, PLACEHOLDER)


class SearchController:
  def __init__(self, code_map: Mapping[str, str], neighbours: Mapping[str, tuple],
               current: pd.DataFrame, playback: Playback,
               situation: SituationRenderer, renderer: MapRenderer,
               form: Optional[SearchForm] = None):
    self.code_map = code_map
    self.neighbours = neighbours
    self.current = current
    self.playback = playback
    self.situation = situation
    self.renderer = renderer
    self.form = form
    # dict keys double as an insertion-ordered set
    self._searched = {}
    self._rows: List[TableRow] = []
    self.latest: Optional[str] = None

  @property
  def searched(self) -> List[str]:
    return list(self._searched)

  @property
  def rows(self) -> List[TableRow]:
    return list(self._rows)

  def search(self, name: str) -> bool:
    if name not in self.code_map:
      return False
    code = self.code_map[name]

    if name not in self._searched:
      self._insert_top(code)
      self._searched[name] = None
    else:
      self._rows = []
      for other in sorted(self._searched, reverse=True):
        if other != name:
          self._insert_top(self.code_map[other])
      self._insert_top(code)
    self.latest = code

    if self.form is not None:
      self.form.clear()

    if self.playback.is_playing:
      logger.debug("Animation playing, %s not painted", code)
      return True

    self.renderer.reset_paint()
    self.situation.paint_code(code)
    for neighbour in self.neighbours.get(code, ()):
      self.situation.paint_code(neighbour)
    return True

  def _insert_top(self, code: str) -> None:
    row = table_row(code, self.current, self.code_map)
    if row is not None:
      self._rows.insert(0, row)

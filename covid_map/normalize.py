"""
Normalization of the COVID feeds onto ISO-3 country codes.

Both feeds name countries in free text. Names are resolved through the code
map; anything that does not resolve is dropped without complaint, since the
feeds and the metadata never cover exactly the same set of places.
"""

from datetime import date
from typing import Iterable, Mapping

import pandas as pd

from .codes import resolve_code
from .logger import get_logger

logger = get_logger(__name__)

CURRENT_COLUMNS = ['country', 'confirmed', 'deaths', 'recovered']
TIMESERIES_COLUMNS = ['date', 'code', 'confirmed', 'deaths']


def parse_feed_date(payload: dict) -> date:
  return pd.Timestamp(payload['dt']).date()


def normalize_current(records: Iterable[dict], code_map: Mapping[str, str]) -> pd.DataFrame:
  rows = []
  for record in records:
    name = record['location'].replace('_', ' ')
    code = resolve_code(code_map, name)
    if code is None:
      logger.debug("Dropping unmapped location %r", record['location'])
      continue
    rows.append({
      'code': code,
      'country': name,
      'confirmed': record.get('confirmed') or 0,
      'deaths': record.get('deaths') or 0,
      'recovered': record.get('recovered') or 0,
    })

  if not rows:
    return pd.DataFrame(columns=CURRENT_COLUMNS, index=pd.Index([], name='code'))

  df = pd.DataFrame(rows).drop_duplicates('code', keep='last').set_index('code')
  df[['confirmed', 'deaths', 'recovered']] = df[['confirmed', 'deaths', 'recovered']].astype(int)
  return df[CURRENT_COLUMNS]


def normalize_timeseries(feed: Mapping[str, list], code_map: Mapping[str, str]) -> pd.DataFrame:
  frames = []
  for name, records in feed.items():
    code = resolve_code(code_map, name)
    if code is None:
      logger.debug("Dropping unmapped time series %r", name)
      continue
    if not records:
      continue
    frame = pd.DataFrame(records, columns=['date', 'confirmed', 'deaths'])
    frame['code'] = code
    frames.append(frame)

  if not frames:
    return pd.DataFrame(columns=TIMESERIES_COLUMNS)

  df = pd.concat(frames, ignore_index=True)
  df['date'] = pd.to_datetime(df['date'])
  df['confirmed'] = pd.to_numeric(df['confirmed'], errors='coerce').fillna(0).astype(int)
  df['deaths'] = pd.to_numeric(df['deaths'], errors='coerce').fillna(0).astype(int)

  # sub-national rows share a (date, code) pair and add up
  summed = df.groupby(['date', 'code'], as_index=False)[['confirmed', 'deaths']].sum()
  return summed.sort_values(['date', 'code']).reset_index(drop=True)[TIMESERIES_COLUMNS]


def country_history(timeseries: pd.DataFrame, code: str) -> pd.DataFrame:
  history = timeseries[timeseries['code'] == code]
  return history[['date', 'confirmed', 'deaths']].reset_index(drop=True)

"""
Day-by-day playback of the historical time series.

Only one writer may paint the map at a time. The Playback guard is shared
between the animation and the search controller: while it reads PLAYING the
search controller leaves the map alone, and the animation loop keeps going
only as long as it stays PLAYING.
"""

import asyncio
import enum

import pandas as pd

from .colors import color_batch
from .logger import get_logger
from .render import (
  DATE_LABEL,
  IDLE_TOGGLE_TEXT,
  PLAYING_TOGGLE_TEXT,
  TOGGLE_LABEL,
  MapRenderer,
  SituationRenderer,
  format_day,
)

logger = get_logger(__name__)

TICK_SECONDS = 0.5


class PlaybackState(enum.Enum):
  IDLE = "idle"
  PLAYING = "playing"


class Playback:
  def __init__(self):
    self.state = PlaybackState.IDLE

  @property
  def is_playing(self) -> bool:
    return self.state is PlaybackState.PLAYING


class AnimationController:
  def __init__(self, playback: Playback, timeseries: pd.DataFrame,
               situation: SituationRenderer, renderer: MapRenderer,
               interval: float = TICK_SECONDS):
    self.playback = playback
    self.situation = situation
    self.renderer = renderer
    self.interval = interval
    self._frames = {day: frame for day, frame in timeseries.groupby('date', sort=True)}
    self._dates = sorted(self._frames)
    self._position = 0
    self._running = False

  @property
  def dates(self) -> list:
    return list(self._dates)

  @property
  def position(self) -> int:
    return self._position

  @property
  def toggle_text(self) -> str:
    return PLAYING_TOGGLE_TEXT if self.playback.is_playing else IDLE_TOGGLE_TEXT

  def start(self) -> bool:
    if self.playback.is_playing:
      return False
    self.playback.state = PlaybackState.PLAYING
    self._position = 0
    self.renderer.set_label(TOGGLE_LABEL, PLAYING_TOGGLE_TEXT)
    logger.info("Time series started (%d days)", len(self._dates))
    return True

  def stop(self) -> None:
    if not self.playback.is_playing:
      return
    self.playback.state = PlaybackState.IDLE
    # a live loop notices on its next tick and restores the view itself
    if not self._running:
      self._finish()

  def toggle(self) -> bool:
    """Start when idle, stop when playing. Returns whether playback is now on."""
    if self.playback.is_playing:
      self.stop()
    else:
      self.start()
    return self.playback.is_playing

  async def run(self) -> None:
    """
    Paint one day per tick until the range ends or playback is stopped.

    If the loop is interrupted by an exception the position is kept, so a
    later call picks up where this one left off.
    """
    if self._running or not self.playback.is_playing:
      return
    self._running = True
    try:
      while self.playback.is_playing and self._position < len(self._dates):
        day = self._dates[self._position]
        self._position += 1
        colors = color_batch(self._frames[day])
        self.renderer.set_label(DATE_LABEL, format_day(day))
        self.renderer.paint_batch(colors)
        await asyncio.sleep(self.interval)
    finally:
      self._running = False
    self._finish()

  def _finish(self) -> None:
    self.playback.state = PlaybackState.IDLE
    self._position = 0
    self.situation.render()
    self.renderer.set_label(TOGGLE_LABEL, IDLE_TOGGLE_TEXT)
    logger.info("Time series stopped")

"""Logging setup shared by every covid_map module."""

import logging
import sys
from typing import Optional, Union

from .config import get_config


def get_logger(name: str, level: Optional[Union[int, str]] = None) -> logging.Logger:
  """
  Return a logger writing to stdout.

  Args:
    name: usually `__name__` of the calling module
    level: optional level; loggers without one use the LOG_LEVEL setting
  """
  logger = logging.getLogger(name)

  if not logger.handlers:
    handler = logging.StreamHandler(sys.stdout)
    formatter = logging.Formatter(
      "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
      datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

  if level is not None:
    logger.setLevel(level)
  elif logger.level == logging.NOTSET:
    logger.setLevel(get_config().map.log_level)

  return logger

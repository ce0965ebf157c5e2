"""Logging helpers shared by the CLI and the services."""
from __future__ import annotations

import logging

from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError

LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'

UNPARSABLE_DSN = '<unparsable connection string>'


def sanitize_dsn(dsn: str) -> str:
  """Mask the password of a connection string before it is logged."""
  try:
    return make_url((dsn or '').strip()).render_as_string(hide_password=True)
  except (ArgumentError, ValueError, TypeError):
    return UNPARSABLE_DSN


def configure_logging(verbose: bool = False) -> None:
  logging.basicConfig(
    level=logging.DEBUG if verbose else logging.WARNING,
    format=LOG_FORMAT,
  )

"""Finds the configuration variable holding the connection string."""
from __future__ import annotations

from typing import Mapping, Optional, Tuple

from dburl.ports.output.config_store import ConnectionStringNotFoundError


def select_connection_string(config_vars: Mapping[str, str], key: str) -> Tuple[str, str]:
  """Return ``(name, value)`` of the variable whose name contains ``key``.

  When several names match, the last one in iteration order wins.
  """
  match: Optional[Tuple[str, str]] = None
  for name, value in config_vars.items():
    if key in name:
      match = (name, value)

  if match is None:
    raise ConnectionStringNotFoundError(f'No config var matching {key}')
  return match

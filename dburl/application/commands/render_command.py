"""Command object representing a render request."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

DEFAULT_CONFIG_KEY = 'DATABASE_URL'


@dataclass(frozen=True)
class RenderCommand:
  format_spec: str = 'psql'
  config_key: str = DEFAULT_CONFIG_KEY
  alias_name: Optional[str] = None
  alias_command: Optional[str] = None
  app: Optional[str] = None
  database_url: Optional[str] = None

  def __post_init__(self) -> None:
    if not self.config_key:
      raise ValueError('config_key is required')
    if self.database_url is not None and not self.database_url.strip():
      raise ValueError('database_url cannot be blank when provided')

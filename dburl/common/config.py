"""Application-level configuration utilities."""
from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

SOURCE_HEROKU = 'heroku'
SOURCE_ENV = 'env'


@dataclass(frozen=True)
class Settings:
  """Immutable application settings loaded from environment variables."""

  heroku_api_key: Optional[str] = None
  heroku_app: Optional[str] = None
  source: str = SOURCE_ENV
  bashfile: str = str(Path.home() / '.bash_profile')
  pgpass: str = str(Path.home() / '.pgpass')


@lru_cache(maxsize=1)
def get_settings() -> Settings:
  """Load settings from environment variables once per process."""
  env_path = Path.cwd() / '.env'
  if env_path.exists():
    load_dotenv(env_path)
  else:
    load_dotenv()

  from os import getenv

  heroku_api_key = getenv('HEROKU_API_KEY') or None
  source = getenv('DBURL_SOURCE') or (SOURCE_HEROKU if heroku_api_key else SOURCE_ENV)
  if source not in (SOURCE_HEROKU, SOURCE_ENV):
    raise ValueError(f'DBURL_SOURCE must be {SOURCE_HEROKU!r} or {SOURCE_ENV!r}, got {source!r}')

  defaults = Settings()
  return Settings(
    heroku_api_key=heroku_api_key,
    heroku_app=getenv('HEROKU_APP') or None,
    source=source,
    bashfile=getenv('DBURL_BASHFILE') or defaults.bashfile,
    pgpass=getenv('DBURL_PGPASS') or defaults.pgpass,
  )

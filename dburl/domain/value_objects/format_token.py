"""Closed set of output formats a connection can be rendered into."""
from __future__ import annotations

from enum import Enum
from typing import Optional


class FormatToken(str, Enum):
  PSQL = 'psql'
  PGPASS = 'pgpass'
  RAILS_YAML = 'rails_yaml'
  PG_DUMP = 'pg_dump'
  PG_RESTORE = 'pg_restore'
  ALIAS = 'alias'
  SQITCH = 'sqitch'

  @classmethod
  def resolve(cls, raw: Optional[str]) -> Optional['FormatToken']:
    """Map a raw token to a member, ``None`` for unknown tokens.

    An absent or blank token means the default, ``psql``.
    """
    if raw is None or not raw.strip():
      return cls.PSQL
    return cls._value2member_map_.get(raw.strip())

  @classmethod
  def known_values(cls) -> str:
    return ','.join(member.value for member in cls)


DEFAULT_FORMAT = FormatToken.PSQL

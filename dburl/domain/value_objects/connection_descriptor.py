"""Value object for a parsed database connection string."""
from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError

POSTGRES_SCHEME = 'postgres'
DEFAULT_PORT = 5432


class MalformedConnectionStringError(ValueError):
  """Raised when a connection string cannot be turned into a descriptor."""


@dataclass(frozen=True)
class ConnectionDescriptor:
  """Immutable representation of a connection string's parts."""

  scheme: str
  host: str
  port: int
  database: str
  user: str = ''
  password: str = ''

  @property
  def is_supported(self) -> bool:
    return self.scheme == POSTGRES_SCHEME

  @staticmethod
  def from_url(url: str) -> 'ConnectionDescriptor':
    if not url or not url.strip():
      raise MalformedConnectionStringError('Connection string is required')

    try:
      parsed = make_url(url.strip())
    except (ArgumentError, ValueError, TypeError) as exc:
      raise MalformedConnectionStringError(f'Could not parse connection string: {exc}') from exc

    if not parsed.host:
      raise MalformedConnectionStringError('Connection string has no host')

    return ConnectionDescriptor(
      scheme=parsed.drivername,
      host=parsed.host,
      port=parsed.port if parsed.port is not None else DEFAULT_PORT,
      database=parsed.database or '',
      user=parsed.username or '',
      password=parsed.password or '',
    )

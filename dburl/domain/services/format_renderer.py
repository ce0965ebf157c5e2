"""Renders a connection descriptor into the syntax of external database tools."""
from __future__ import annotations

from typing import Callable, Dict, Optional

from dburl.domain.value_objects.alias_spec import AliasSpec
from dburl.domain.value_objects.connection_descriptor import ConnectionDescriptor
from dburl.domain.value_objects.format_token import FormatToken

Template = Callable[[ConnectionDescriptor], str]


def psqlify(conn: ConnectionDescriptor) -> str:
  return f'psql -h {conn.host} -d {conn.database} -U {conn.user} -p {conn.port}'


def pgpassify(conn: ConnectionDescriptor) -> str:
  return f'{conn.host}:{conn.port}:{conn.database}:{conn.user}:{conn.password}'


def rails_yamlify(conn: ConnectionDescriptor) -> str:
  return '\n'.join([
    f'host: {conn.host}',
    f'database: {conn.database}',
    f'username: {conn.user}',
    f'password: {conn.password}',
    f'port: {conn.port}',
  ])


def pg_dumpify(conn: ConnectionDescriptor) -> str:
  return f'pg_dump {conn.database} -h {conn.host} -p {conn.port} -U {conn.user}'


def pg_restorify(conn: ConnectionDescriptor) -> str:
  return f'pg_restore -d {conn.database} -h {conn.host} -p {conn.port} -U {conn.user}'


def sqitchify(conn: ConnectionDescriptor) -> str:
  return f'sqitch -d {conn.database} -h {conn.host} -p {conn.port} -u {conn.user}'


TEMPLATES: Dict[FormatToken, Template] = {
  FormatToken.PSQL: psqlify,
  FormatToken.PGPASS: pgpassify,
  FormatToken.RAILS_YAML: rails_yamlify,
  FormatToken.PG_DUMP: pg_dumpify,
  FormatToken.PG_RESTORE: pg_restorify,
  FormatToken.SQITCH: sqitchify,
}


def unsupported_scheme_message(scheme: str) -> str:
  return f'{scheme} not supported yet'


def unknown_format_message(token: str) -> str:
  return f'{token} not known or supported. Please use one of |{FormatToken.known_values()}|'


def render(
  conn: ConnectionDescriptor,
  token: Optional[str] = None,
  alias_spec: Optional[AliasSpec] = None,
) -> str:
  """Render one format token for an already validated descriptor.

  Unknown tokens produce a diagnostic line instead of raising, so a batch
  can keep rendering the tokens that follow.
  """
  resolved = FormatToken.resolve(token)
  if resolved is None:
    return unknown_format_message(str(token))

  if resolved is FormatToken.ALIAS:
    spec = alias_spec or AliasSpec()
    inner = render(conn, spec.inner_token, spec)
    return f"alias {spec.alias_name}='{inner}'"

  return TEMPLATES[resolved](conn)

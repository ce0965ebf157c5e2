"""Renders a comma separated list of formats against one connection string."""
from __future__ import annotations

import logging
import re
from typing import Iterator, List, Optional, Sequence

from dburl.common.logging import sanitize_dsn
from dburl.domain.services.format_renderer import render, unsupported_scheme_message
from dburl.domain.value_objects.alias_spec import AliasSpec
from dburl.domain.value_objects.connection_descriptor import ConnectionDescriptor
from dburl.domain.value_objects.format_token import DEFAULT_FORMAT

logger = logging.getLogger(__name__)

FORMAT_SEPARATOR = re.compile(r'\s*,\s*')


def split_formats(format_spec: Optional[str]) -> List[str]:
  """Split a format spec into tokens, blank tokens becoming ``psql``."""
  if format_spec is None or not format_spec.strip():
    return [DEFAULT_FORMAT.value]
  return [token or DEFAULT_FORMAT.value for token in FORMAT_SEPARATOR.split(format_spec.strip())]


class RenderedBatch(Sequence[str]):
  """Lazy view over the rendered lines of a batch.

  Lines are rendered on access from the descriptor parsed at construction,
  so iterating twice renders twice without parsing again.
  """

  def __init__(self, conn: ConnectionDescriptor, tokens: Sequence[str], alias_spec: AliasSpec):
    self.descriptor = conn
    self.tokens = tuple(tokens)
    self.alias_spec = alias_spec

  @property
  def supported(self) -> bool:
    return self.descriptor.is_supported

  def __len__(self) -> int:
    return len(self.tokens) if self.supported else 1

  def __getitem__(self, index):
    if isinstance(index, slice):
      return [self[i] for i in range(*index.indices(len(self)))]
    if index < 0:
      index += len(self)
    if not 0 <= index < len(self):
      raise IndexError('rendered batch index out of range')
    if not self.supported:
      return unsupported_scheme_message(self.descriptor.scheme)
    return render(self.descriptor, self.tokens[index], self.alias_spec)

  def __iter__(self) -> Iterator[str]:
    if not self.supported:
      yield unsupported_scheme_message(self.descriptor.scheme)
      return
    for token in self.tokens:
      yield render(self.descriptor, token, self.alias_spec)

  def __repr__(self) -> str:
    return f'RenderedBatch(scheme={self.descriptor.scheme!r}, tokens={list(self.tokens)!r})'


def render_batch(
  connection_string: str,
  format_spec: Optional[str] = None,
  alias_name: Optional[str] = None,
  alias_command: Optional[str] = None,
) -> RenderedBatch:
  """Render every token of ``format_spec`` for ``connection_string``.

  Raises:
    MalformedConnectionStringError: if the connection string cannot be parsed.
      Nothing is rendered in that case.
  """
  conn = ConnectionDescriptor.from_url(connection_string)
  tokens = split_formats(format_spec)
  logger.debug('Rendering %s for %s', ','.join(tokens), sanitize_dsn(connection_string))
  if not conn.is_supported:
    logger.info('Scheme %s is not supported, skipping %d format(s)', conn.scheme, len(tokens))
  return RenderedBatch(conn, tokens, AliasSpec.from_options(alias_name, alias_command))

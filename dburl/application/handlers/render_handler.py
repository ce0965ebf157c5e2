"""Application handler that looks up a connection string and renders it."""
from __future__ import annotations

import logging
from typing import Optional, Tuple

from dburl.application.commands.render_command import RenderCommand
from dburl.application.handlers.connection_lookup import select_connection_string
from dburl.application.queries.render_result import RenderResult, RenderStatus
from dburl.domain.services.batch_dispatcher import render_batch
from dburl.domain.value_objects.connection_descriptor import MalformedConnectionStringError
from dburl.ports.output.config_store import ConfigStore, ConfigStoreError, ConnectionStringNotFoundError

logger = logging.getLogger(__name__)


class RenderHandler:
  """Coordinates connection string lookup and batch rendering."""

  def __init__(self, config_store: ConfigStore):
    self._config_store = config_store

  def handle(self, command: RenderCommand) -> RenderResult:
    try:
      name, connection_string = self._connection_string(command)
      batch = render_batch(
        connection_string,
        command.format_spec,
        alias_name=command.alias_name,
        alias_command=command.alias_command,
      )
    except (ConfigStoreError, ConnectionStringNotFoundError, MalformedConnectionStringError) as exc:
      logger.warning('Render failed: %s', exc)
      return RenderResult(status=RenderStatus.ERROR, error=str(exc))

    status = RenderStatus.SUCCESS if batch.supported else RenderStatus.UNSUPPORTED
    return RenderResult(status=status, lines=batch, name=name, descriptor=batch.descriptor)

  def _connection_string(self, command: RenderCommand) -> Tuple[Optional[str], str]:
    if command.database_url:
      return None, command.database_url
    config_vars = self._config_store.config_vars(command.app)
    name, value = select_connection_string(config_vars, command.config_key)
    logger.debug('Using config var %s', name)
    return name, value

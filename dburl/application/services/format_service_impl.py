"""Implementation of the format service port."""
from __future__ import annotations

from dburl.application.commands.append_command import AppendCommand
from dburl.application.commands.render_command import RenderCommand
from dburl.application.handlers.append_handler import AppendHandler
from dburl.application.handlers.render_handler import RenderHandler
from dburl.application.queries.render_result import RenderResult, RenderStatus
from dburl.ports.input.format_service import FormatService


class FormatServiceImpl(FormatService):
  """Concrete implementation that delegates to the appropriate handler."""

  def __init__(self, render_handler: RenderHandler, append_handler: AppendHandler) -> None:
    self._render_handler = render_handler
    self._append_handler = append_handler

  def render(self, command: RenderCommand) -> RenderResult:
    return self._render_handler.handle(command)

  def append(self, result: RenderResult, command: AppendCommand) -> RenderResult:
    # Only a successfully rendered postgres connection is written out.
    if result.status is not RenderStatus.SUCCESS or result.descriptor is None:
      return result
    result.messages.extend(self._append_handler.handle(result.descriptor, command))
    return result

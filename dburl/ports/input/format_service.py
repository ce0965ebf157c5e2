"""Input port defining the format service contract."""
from __future__ import annotations

from typing import Protocol

from dburl.application.commands.append_command import AppendCommand
from dburl.application.commands.render_command import RenderCommand
from dburl.application.queries.render_result import RenderResult


class FormatService(Protocol):
  def render(self, command: RenderCommand) -> RenderResult:
    ...

  def append(self, result: RenderResult, command: AppendCommand) -> RenderResult:
    ...

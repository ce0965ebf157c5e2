"""Plain text presenter, one rendered format per line."""
from __future__ import annotations

from dburl.application.queries.render_result import RenderResult
from dburl.ports.input.result_presenter import ResultPresenter


class TextPresenter(ResultPresenter):
  def present(self, result: RenderResult) -> str:
    if result.error:
      return self.present_error(result.error)
    return '\n'.join([*result.lines, *result.messages])

  def present_error(self, error) -> str:
    return f'Error: {error}'

"""JSON presenter implementation."""
from __future__ import annotations

import json

from dburl.application.queries.render_result import RenderResult
from dburl.ports.input.result_presenter import ResultPresenter


class JsonPresenter(ResultPresenter):
  def present(self, result: RenderResult) -> str:
    payload = {
      'status': result.status.value,
      'name': result.name,
      'lines': list(result.lines),
      'messages': result.messages,
      'error': result.error,
    }
    return json.dumps(payload, ensure_ascii=False, indent=2)

  def present_error(self, error: Exception) -> str:
    return json.dumps({'status': 'error', 'error': str(error)}, ensure_ascii=False, indent=2)

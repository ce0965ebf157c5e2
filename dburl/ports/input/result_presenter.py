"""Input port for formatting render results."""
from __future__ import annotations

from typing import Any, Protocol

from dburl.application.queries.render_result import RenderResult


class ResultPresenter(Protocol):
  def present(self, result: RenderResult) -> Any:
    ...

  def present_error(self, error: Exception) -> Any:
    ...

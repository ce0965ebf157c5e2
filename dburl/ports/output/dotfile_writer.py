"""Output port for appending rendered lines to local dotfiles."""
from __future__ import annotations

from typing import Protocol


class DotfileWriter(Protocol):
  def exists(self, path: str) -> bool:
    ...

  def append(self, path: str, text: str) -> None:
    """Append ``text`` as a new line of ``path``.

    Raises:
      DotfileError: If the file cannot be written
    """
    ...


class DotfileError(Exception):
  """Raised when a dotfile cannot be appended to."""

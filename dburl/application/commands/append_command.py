"""Command object describing which dotfiles to append rendered lines to."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class AppendCommand:
  bashfile: str
  pgpass: str
  alias: Optional[str] = None

  def __post_init__(self) -> None:
    if not self.bashfile:
      raise ValueError('bashfile is required')
    if not self.pgpass:
      raise ValueError('pgpass is required')

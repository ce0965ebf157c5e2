"""Application-level render result representation."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence

from dburl.domain.value_objects.connection_descriptor import ConnectionDescriptor


class RenderStatus(str, Enum):
  SUCCESS = 'success'
  UNSUPPORTED = 'unsupported'
  ERROR = 'error'


@dataclass
class RenderResult:
  status: RenderStatus
  lines: Sequence[str] = field(default_factory=list)
  name: Optional[str] = None
  descriptor: Optional[ConnectionDescriptor] = None
  messages: List[str] = field(default_factory=list)
  error: Optional[str] = None

  @property
  def ok(self) -> bool:
    return self.status is not RenderStatus.ERROR

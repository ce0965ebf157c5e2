"""Appends lines to files on the local filesystem."""
from __future__ import annotations

import logging
import os
from pathlib import Path

from dburl.ports.output.dotfile_writer import DotfileError, DotfileWriter

logger = logging.getLogger(__name__)


class LocalDotfileAppender(DotfileWriter):
  def exists(self, path: str) -> bool:
    return Path(path).expanduser().exists()

  def append(self, path: str, text: str) -> None:
    target = Path(path).expanduser()
    if not os.access(target, os.W_OK):
      raise DotfileError(f'unable to write to {path}')
    logger.debug('Appending %d characters to %s', len(text), target)
    with target.open('a', encoding='utf-8') as handle:
      handle.write(f'{text}\n')

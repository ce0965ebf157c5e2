"""Config store backed by the process environment."""
from __future__ import annotations

import os
from typing import Mapping, Optional

from dburl.ports.output.config_store import ConfigStore


class EnvironmentConfigStore(ConfigStore):
  def __init__(self, environ: Optional[Mapping[str, str]] = None):
    self._environ = environ

  def config_vars(self, app: Optional[str] = None) -> Mapping[str, str]:
    # The environment belongs to a single app, so ``app`` is ignored.
    return dict(self._environ if self._environ is not None else os.environ)

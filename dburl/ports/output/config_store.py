"""Output port for the store holding an application's configuration variables."""
from __future__ import annotations

from typing import Mapping, Optional, Protocol


class ConfigStore(Protocol):
  """Source of the configuration variables a connection string is looked up in."""

  def config_vars(self, app: Optional[str] = None) -> Mapping[str, str]:
    """Return every configuration variable of ``app``.

    Raises:
      ConfigStoreError: If the variables cannot be retrieved
    """
    ...


class ConfigStoreError(Exception):
  """Raised when configuration variables cannot be retrieved."""

  def __init__(self, message: str, status_code: Optional[int] = None):
    super().__init__(message)
    self.status_code = status_code


class ConnectionStringNotFoundError(LookupError):
  """Raised when no configuration variable matches the requested key."""

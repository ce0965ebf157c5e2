"""Requests-based Heroku config-vars store implementation."""
from __future__ import annotations

import logging
from typing import Dict, Mapping, Optional

import requests

from dburl.ports.output.config_store import ConfigStore, ConfigStoreError

logger = logging.getLogger(__name__)

HEROKU_API_URL = 'https://api.heroku.com'
HEROKU_ACCEPT = 'application/vnd.heroku+json; version=3'


class RequestsHerokuConfigStore(ConfigStore):
  """Reads an app's config vars through the Heroku Platform API."""

  def __init__(
    self,
    api_key: Optional[str],
    default_app: Optional[str] = None,
    base_url: str = HEROKU_API_URL,
    timeout: int = 30,
  ):
    self._api_key = api_key
    self._default_app = default_app
    self._base_url = base_url.rstrip('/')
    self._timeout = timeout

  def config_vars(self, app: Optional[str] = None) -> Mapping[str, str]:
    app_name = app or self._default_app
    if not app_name:
      raise ConfigStoreError('No Heroku app given, use --app or set HEROKU_APP')
    if not self._api_key:
      raise ConfigStoreError('HEROKU_API_KEY must be set in environment or .env file')

    url = f'{self._base_url}/apps/{app_name}/config-vars'
    logger.debug('Fetching config vars from %s', url)
    try:
      response = requests.get(url, headers=self._headers(), timeout=self._timeout)
      response.raise_for_status()
      payload = response.json()
    except requests.HTTPError as e:
      message = str(e)
      try:
        message = e.response.json().get('message', message)
      except (ValueError, AttributeError):
        pass
      status_code = e.response.status_code if e.response is not None else None
      raise ConfigStoreError(f'Config vars request failed: {message}', status_code=status_code) from e
    except requests.RequestException as e:
      raise ConfigStoreError(f'Network error during config vars request: {str(e)}') from e
    except ValueError as e:
      raise ConfigStoreError(f'Config vars response is not valid JSON: {str(e)}') from e

    if not isinstance(payload, dict):
      raise ConfigStoreError(f'Unexpected config vars response: {payload!r}')
    return {str(key): str(value) for key, value in payload.items() if value is not None}

  def _headers(self) -> Dict[str, str]:
    return {
      'Accept': HEROKU_ACCEPT,
      'Authorization': f'Bearer {self._api_key}',
    }

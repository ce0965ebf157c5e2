"""Unit tests for the config-var stores."""
from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest
import requests

from dburl.adapters.output.environment.env_config_store import EnvironmentConfigStore
from dburl.adapters.output.heroku.requests_config_store import HEROKU_ACCEPT, RequestsHerokuConfigStore
from dburl.ports.output.config_store import ConfigStoreError

GET = 'dburl.adapters.output.heroku.requests_config_store.requests.get'


def _response(payload=None, status_code: int = 200) -> MagicMock:
  response = MagicMock()
  response.status_code = status_code
  response.json.return_value = payload
  if status_code >= 400:
    error = requests.HTTPError(f'{status_code} Client Error')
    error.response = response
    response.raise_for_status.side_effect = error
  return response


class TestRequestsHerokuConfigStore:
  def test_fetches_config_vars(self, connection_string: str) -> None:
    store = RequestsHerokuConfigStore(api_key='token', default_app='my-app')
    with patch(GET, return_value=_response({'DATABASE_URL': connection_string})) as get:
      config_vars = store.config_vars()

    assert config_vars == {'DATABASE_URL': connection_string}
    url = get.call_args.args[0]
    headers = get.call_args.kwargs['headers']
    assert url == 'https://api.heroku.com/apps/my-app/config-vars'
    assert headers['Accept'] == HEROKU_ACCEPT
    assert headers['Authorization'] == 'Bearer token'
    assert get.call_args.kwargs['timeout'] == 30

  def test_explicit_app_overrides_default(self) -> None:
    store = RequestsHerokuConfigStore(api_key='token', default_app='my-app')
    with patch(GET, return_value=_response({})) as get:
      store.config_vars('other-app')

    assert get.call_args.args[0].endswith('/apps/other-app/config-vars')

  def test_null_values_are_dropped(self) -> None:
    store = RequestsHerokuConfigStore(api_key='token', default_app='my-app')
    with patch(GET, return_value=_response({'A': 'x', 'B': None})):
      assert store.config_vars() == {'A': 'x'}

  def test_requires_app(self) -> None:
    with pytest.raises(ConfigStoreError, match='HEROKU_APP'):
      RequestsHerokuConfigStore(api_key='token').config_vars()

  def test_requires_api_key(self) -> None:
    with pytest.raises(ConfigStoreError, match='HEROKU_API_KEY'):
      RequestsHerokuConfigStore(api_key=None, default_app='my-app').config_vars()

  def test_http_error_uses_api_message(self) -> None:
    store = RequestsHerokuConfigStore(api_key='token', default_app='my-app')
    with patch(GET, return_value=_response({'id': 'not_found', 'message': "Couldn't find that app."}, 404)):
      with pytest.raises(ConfigStoreError, match="Couldn't find that app.") as excinfo:
        store.config_vars()

    assert excinfo.value.status_code == 404

  def test_network_error(self) -> None:
    store = RequestsHerokuConfigStore(api_key='token', default_app='my-app')
    with patch(GET, side_effect=requests.ConnectionError('unreachable')):
      with pytest.raises(ConfigStoreError, match='Network error'):
        store.config_vars()

  def test_unexpected_payload(self) -> None:
    store = RequestsHerokuConfigStore(api_key='token', default_app='my-app')
    with patch(GET, return_value=_response(['not', 'a', 'dict'])):
      with pytest.raises(ConfigStoreError, match='Unexpected'):
        store.config_vars()


class TestEnvironmentConfigStore:
  def test_reads_given_mapping(self) -> None:
    assert EnvironmentConfigStore({'DATABASE_URL': 'x'}).config_vars('ignored') == {'DATABASE_URL': 'x'}

  def test_reads_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv('DBURL_TEST_URL', 'postgres://h/db')
    assert EnvironmentConfigStore().config_vars()['DBURL_TEST_URL'] == 'postgres://h/db'

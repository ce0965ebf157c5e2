"""Simple dependency wiring helpers."""
from __future__ import annotations

from typing import Dict

from dburl.adapters.input.cli.cli_adapter import CLIAdapter
from dburl.adapters.output.environment.env_config_store import EnvironmentConfigStore
from dburl.adapters.output.files.dotfile_appender import LocalDotfileAppender
from dburl.adapters.output.heroku.requests_config_store import RequestsHerokuConfigStore
from dburl.adapters.presentation.json_presenter import JsonPresenter
from dburl.adapters.presentation.text_presenter import TextPresenter
from dburl.application.handlers.append_handler import AppendHandler
from dburl.application.handlers.render_handler import RenderHandler
from dburl.application.services.format_service_impl import FormatServiceImpl
from dburl.common.config import SOURCE_HEROKU, Settings, get_settings
from dburl.ports.input.result_presenter import ResultPresenter
from dburl.ports.output.config_store import ConfigStore


def create_config_store(source: str, settings: Settings) -> ConfigStore:
  if source == SOURCE_HEROKU:
    return RequestsHerokuConfigStore(api_key=settings.heroku_api_key, default_app=settings.heroku_app)
  return EnvironmentConfigStore()


def create_format_service(source: str, settings: Settings) -> FormatServiceImpl:
  render_handler = RenderHandler(create_config_store(source, settings))
  append_handler = AppendHandler(LocalDotfileAppender())
  return FormatServiceImpl(render_handler, append_handler)


def create_presenters() -> Dict[str, ResultPresenter]:
  return {
    'text': TextPresenter(),
    'json': JsonPresenter(),
  }


def create_cli(settings: Settings) -> CLIAdapter:
  return CLIAdapter(
    service_factory=lambda source: create_format_service(source, settings),
    presenters=create_presenters(),
    settings=settings,
  )


def main() -> None:
  try:
    settings = get_settings()
  except ValueError as exc:
    raise SystemExit(f'Error: {exc}') from exc
  create_cli(settings).run()

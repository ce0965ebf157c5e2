"""CLI adapter for rendering connection strings."""
from __future__ import annotations

from typing import Callable, Mapping, Optional

import click

from dburl.application.commands.append_command import AppendCommand
from dburl.application.commands.render_command import DEFAULT_CONFIG_KEY, RenderCommand
from dburl.common.config import SOURCE_ENV, SOURCE_HEROKU, Settings
from dburl.common.logging import configure_logging
from dburl.domain.value_objects.format_token import FormatToken
from dburl.ports.input.format_service import FormatService
from dburl.ports.input.result_presenter import ResultPresenter
from dburl.ports.output.dotfile_writer import DotfileError

ServiceFactory = Callable[[str], FormatService]


class CLIAdapter:
  def __init__(
    self,
    service_factory: ServiceFactory,
    presenters: Mapping[str, ResultPresenter],
    settings: Settings,
  ):
    self._service_factory = service_factory
    self._presenters = presenters
    self._settings = settings

  def build(self) -> click.Command:
    settings = self._settings

    @click.command('dburl')
    @click.argument('config_key', required=False, default=DEFAULT_CONFIG_KEY, metavar='[DATABASE_URL]')
    @click.option('-f', '--format', 'format_spec', default=FormatToken.PSQL.value, show_default=True,
                  help=f'Comma separated output formats ({FormatToken.known_values()})')
    @click.option('--aliasname', default=None, help='Name of the alias used by the alias format')
    @click.option('--aliascommand', default=None, help='Format wrapped by the alias format, psql by default')
    @click.option('-a', '--app', default=settings.heroku_app, help='Heroku app holding the config vars')
    @click.option('--source', type=click.Choice([SOURCE_HEROKU, SOURCE_ENV]), default=settings.source,
                  show_default=True, help='Where config vars are read from')
    @click.option('--database-url', default=None, help='Connection string to render instead of a config var')
    @click.option('-o', '--output', type=click.Choice(sorted(self._presenters)), default='text', show_default=True)
    @click.option('--append', is_flag=True, help='Append the pgpass line (and alias) to dotfiles')
    @click.option('--alias', 'alias', default=None, help='Name of the psql alias appended to the bash file')
    @click.option('--bashfile', default=settings.bashfile, show_default=True, help='Bash file to append the alias to')
    @click.option('--pgpass', default=settings.pgpass, show_default=True, help='pgpass file to append to')
    @click.option('-v', '--verbose', is_flag=True, help='Log debug output to stderr')
    @click.pass_context
    def dburl(
      ctx: click.Context,
      config_key: str,
      format_spec: str,
      aliasname: Optional[str],
      aliascommand: Optional[str],
      app: Optional[str],
      source: str,
      database_url: Optional[str],
      output: str,
      append: bool,
      alias: Optional[str],
      bashfile: str,
      pgpass: str,
      verbose: bool,
    ) -> None:
      """Render a database connection string for psql, pgpass, rails_yaml, pg_dump, pg_restore, sqitch or a shell alias.

      CONFIG_KEY selects the config var holding the connection string; any
      var whose name contains it matches.

      Examples:

        dburl HEROKU_POSTGRESQL_NAVY --format=pgpass

        dburl --format psql,pg_dump

        dburl --format alias --aliasname pgtest --aliascommand pg_dump
      """
      configure_logging(verbose)
      presenter = self._presenters[output]
      try:
        command = RenderCommand(
          format_spec=format_spec,
          config_key=config_key,
          alias_name=aliasname,
          alias_command=aliascommand,
          app=app,
          database_url=database_url,
        )
      except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc

      service = self._service_factory(source)
      result = service.render(command)

      if result.ok and append:
        try:
          result = service.append(result, AppendCommand(bashfile=bashfile, pgpass=pgpass, alias=alias))
        except DotfileError as exc:
          raise click.ClickException(str(exc)) from exc

      if not result.ok:
        if output == 'text':
          raise click.ClickException(result.error or 'unknown error')
        click.echo(presenter.present(result))
        ctx.exit(1)

      click.echo(presenter.present(result))

    return dburl

  def run(self) -> None:
    self.build()()

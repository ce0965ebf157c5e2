"""Application handler that appends an alias and a pgpass line to dotfiles."""
from __future__ import annotations

from typing import List

from dburl.application.commands.append_command import AppendCommand
from dburl.domain.services.format_renderer import pgpassify, render
from dburl.domain.value_objects.alias_spec import AliasSpec
from dburl.domain.value_objects.connection_descriptor import ConnectionDescriptor
from dburl.domain.value_objects.format_token import FormatToken
from dburl.ports.output.dotfile_writer import DotfileWriter


class AppendHandler:
  def __init__(self, writer: DotfileWriter):
    self._writer = writer

  def handle(self, conn: ConnectionDescriptor, command: AppendCommand) -> List[str]:
    """Append to the dotfiles and return the messages to show the user.

    Nothing is written unless every file that would be touched exists.
    """
    if command.alias and not self._writer.exists(command.bashfile):
      return [f'File does not exists: {command.bashfile}']
    if not self._writer.exists(command.pgpass):
      return [f'File does not exists: {command.pgpass}']

    messages = []
    if command.alias:
      alias_text = render(conn, FormatToken.ALIAS.value, AliasSpec(alias_name=command.alias))
      messages.append(self._append(command.bashfile, alias_text))
    messages.append(self._append(command.pgpass, pgpassify(conn)))
    return messages

  def _append(self, path: str, text: str) -> str:
    self._writer.append(path, text)
    return f'Appending {text} to {path}'

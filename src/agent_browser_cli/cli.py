import json
import logging
import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .errors import AgentBrowserError
from .flags import Flags, split_args
from .sessions import state_file_for

console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def _flags_table(flags: Flags) -> Table:
    table = Table(title="Global Flags")
    table.add_column("Flag", style="cyan")
    table.add_column("Value")

    for name, value in flags.to_dict().items():
        table.add_row(name, "-" if value is None else escape(str(value)))

    return table


class RawArgsCommand(click.Command):
    """Command that hands its arguments over untouched.

    Global flags have their own grammar, so click must not parse, reorder or
    drop anything (including a literal ``--``).
    """

    def parse_args(self, ctx, args):
        ctx.params["args"] = tuple(args)
        return []


@click.command(cls=RawArgsCommand, context_settings={"help_option_names": []})
def cli(args):
    """Parse agent-browser global flags and show the remaining command."""
    parsed, command_args = split_args(list(args))

    if not parsed.ok:
        for message in parsed.errors:
            err_console.print(f"[red]Error:[/red] {escape(message)}", highlight=False, soft_wrap=True)
        sys.exit(1)

    flags = parsed.flags
    logging.basicConfig(level=logging.DEBUG if flags.debug else logging.WARNING)
    logger.debug(f"Global flags: {flags.to_dict()}")
    logger.debug(f"Command arguments: {command_args}")

    if flags.debug and flags.session_name:
        try:
            logger.debug(f"Session state file: {state_file_for(flags)}")
        except AgentBrowserError as e:
            logger.warning(f"No state file for this session: {e}")

    if flags.json:
        click.echo(json.dumps({"flags": flags.to_dict(), "args": command_args}))
        return

    console.print(_flags_table(flags))
    command = escape(" ".join(command_args)) if command_args else "(none)"
    console.print(f"Command: {command}", highlight=False, soft_wrap=True)


def main():
    cli()


if __name__ == "__main__":
    main()

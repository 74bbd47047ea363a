"""Bank list command."""

import click
from parchi.domain.entities import BANK_LIST


@click.command("banks")
def list_banks() -> None:
    """List the bank names accepted by --bank."""
    for bank in BANK_LIST:
        click.echo(bank)


def register_commands(cli: click.Group) -> None:
    """Register banks command with main CLI."""
    cli.add_command(list_banks)

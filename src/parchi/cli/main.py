"""Main CLI entry point."""

import click
from parchi.config import DB_PATH_ENV, configure_logging
from parchi.database.factories import create_sqlite_storage
from parchi.domain.store import EntryStore

# Import and register all commands at module level
from parchi.cli.commands import (
    entry,
    payment,
    view,
    dashboard,
    insights,
    banks,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help=f"Path to database file (overrides {DB_PATH_ENV} environment variable)",
    envvar=DB_PATH_ENV,
)
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr")
@click.pass_context
def cli(ctx, db_path: str | None, verbose: bool):
    """Parchi - cheque and long-term payables/receivables ledger.

    Record entries for cheques and long-term dues, apply payments against
    them and review balances per category.
    """
    ctx.ensure_object(dict)
    configure_logging(verbose)

    # Open storage only when actually running a command (not when showing help)
    if ctx.invoked_subcommand is not None and "store" not in ctx.obj:
        storage = create_sqlite_storage(database_path=db_path)
        storage.connect()
        storage.initialize_schema()
        ctx.call_on_close(storage.disconnect)
        ctx.obj["store"] = EntryStore(storage, confirm=click.confirm)


# Register all commands
entry.register_commands(cli)
payment.register_commands(cli)
view.register_commands(cli)
dashboard.register_commands(cli)
insights.register_commands(cli)
banks.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()

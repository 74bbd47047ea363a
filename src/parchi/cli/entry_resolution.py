"""CLI helpers for entry lookup and error handling."""

from __future__ import annotations

import click

from parchi.domain.entities import Entry
from parchi.domain.errors import entry_not_found
from parchi.domain.store import EntryStore


def require_entry_or_exit(ctx: click.Context, store: EntryStore, entry_id: str) -> Entry:
    """Return the entry with entry_id, or exit with a CLI error.

    The store ignores unknown IDs silently; commands report them instead.
    """
    entry = store.get_entry(entry_id)
    if entry is None:
        click.echo(f"Error: {entry_not_found(entry_id)}", err=True)
        ctx.exit(1)
    return entry

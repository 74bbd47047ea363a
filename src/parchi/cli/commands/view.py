"""Entry listing command."""

from datetime import date

import click
from parchi.cli.error_handling import handle_domain_error
from parchi.cli.formatting import format_amount, format_optional
from parchi.domain.entities import (
    EntryCategory,
    MonthFilter,
    SearchType,
    StatFilter,
    ViewState,
)
from parchi.domain.ledger import compute_balance, total_paid
from parchi.utils.date_parser import parse_date
from parchi.utils.view_resolver import resolve_view


@click.command("list")
@click.option(
    "--view",
    "view_name",
    default=EntryCategory.CHAQUE_RECEIVABLES.value,
    show_default=True,
    help="Category name or alias, or 'dashboard' for all categories",
)
@click.option(
    "--month",
    type=click.Choice([m.value for m in MonthFilter], case_sensitive=False),
    default=MonthFilter.ALL.value,
    show_default=True,
    help="Restrict to the current or previous calendar month",
)
@click.option("--search", default="", help="Case-insensitive search text")
@click.option(
    "--search-type",
    type=click.Choice([s.value for s in SearchType], case_sensitive=False),
    default=SearchType.PARTY.value,
    show_default=True,
    help="Field the search text is matched against",
)
@click.option(
    "--status",
    type=click.Choice([s.value for s in StatFilter], case_sensitive=False),
    default=StatFilter.ALL.value,
    show_default=True,
    help="Payment status filter",
)
@click.option("--as-of", help="Reference date for --month (defaults to today)")
@click.pass_context
def list_entries(
    ctx,
    view_name: str,
    month: str,
    search: str,
    search_type: str,
    status: str,
    as_of: str | None,
) -> None:
    """List entries of a view with optional filters.

    Filters apply in order: category, month, search, status.

    Examples:
        parchi list --view cp --status pending
        parchi list --view ltr --month last --search acme
        parchi list --view dashboard --search hbl --search-type bank
    """
    store = ctx.obj["store"]

    try:
        active_view = resolve_view(view_name)
    except ValueError as e:
        handle_domain_error(ctx, e)

    now = date.today()
    if as_of:
        try:
            now = parse_date(as_of)
        except ValueError as e:
            click.echo(f"Error: Invalid as-of date: {e}", err=True)
            ctx.exit(1)

    state = ViewState(
        active_view=active_view,
        month_filter=MonthFilter(month),
        search_query=search,
        search_type=SearchType(search_type),
        stat_filter=StatFilter(status),
    )
    entries = store.filtered(state, now)

    if not entries:
        click.echo("No entries found.")
        return

    # Aggregate views span categories; show which one each row belongs to
    show_category = state.is_aggregate
    width = 153 if show_category else 130

    click.echo(f"\nFound {len(entries)} entr{'y' if len(entries) == 1 else 'ies'}:")
    click.echo("-" * width)
    header = f"{'ID':<18} "
    if show_category:
        header += f"{'Category':<22} "
    click.echo(
        header
        + f"{'Date':<12} {'Party':<24} {'Bank':<14} {'Amount':<16} "
        f"{'Balance':<16} {'Due':<12} {'Status':<10}"
    )
    click.echo("-" * width)

    for entry in entries:
        category = f"{entry.category.value:<22} " if show_category else ""
        click.echo(
            f"{entry.id:<18} {category}{str(entry.date):<12} {entry.party_name[:24]:<24} "
            f"{format_optional(entry.bank_name)[:14]:<14} {format_amount(entry.total_amount):<16} "
            f"{format_amount(compute_balance(entry)):<16} {format_optional(entry.due_date):<12} "
            f"{entry.status.value:<10}"
        )

    total = sum(e.total_amount for e in entries)
    paid = sum(total_paid(e) for e in entries)
    click.echo("-" * width)
    click.echo(
        f"{'TOTAL':<18} Amount: {format_amount(total)} | Paid: {format_amount(paid)} | "
        f"Balance: {format_amount(total - paid)} | Count: {len(entries)}"
    )


def register_commands(cli: click.Group) -> None:
    """Register list command with main CLI."""
    cli.add_command(list_entries)

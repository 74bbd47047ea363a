"""Entry management commands."""

import click
from parchi.cli.entry_resolution import require_entry_or_exit
from parchi.cli.error_handling import handle_domain_error
from parchi.cli.formatting import echo_entry_details, format_amount
from parchi.domain.entities import BANK_LIST, EntryStatus
from parchi.utils.amount_parser import parse_amount
from parchi.utils.date_parser import parse_date
from parchi.utils.view_resolver import resolve_category

STATUS_CHOICES = [s.value for s in EntryStatus]


def _parse_date_or_exit(ctx, value: str | None, label: str = "date"):
    if value is None:
        return None
    try:
        return parse_date(value)
    except ValueError as e:
        click.echo(f"Error: Invalid {label} format: {e}", err=True)
        ctx.exit(1)


def _parse_amount_or_exit(ctx, value: str | None):
    if value is None:
        return None
    try:
        return parse_amount(value)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)


def _resolve_category_or_exit(ctx, value: str | None):
    if value is None:
        return None
    try:
        return resolve_category(value)
    except ValueError as e:
        handle_domain_error(ctx, e)


def entry_options(required: bool):
    """Shared options of the add and edit commands."""

    def decorator(func):
        options = [
            click.option(
                "--category",
                required=required,
                help="Category name or alias (cr, cp, ltp, ltr, unknown)",
            ),
            click.option(
                "--date",
                "entry_date",
                required=required,
                help="Entry date (YYYY-MM-DD or relative like 'today')",
            ),
            click.option("--party", required=required, help="Counterparty name"),
            click.option("--amount", required=required, help="Total amount (e.g., 25000 or 'Rs. 25,000')"),
            click.option("--ref", help="Reference number"),
            click.option("--desc", help="Description"),
            click.option("--transaction-date", help="Transaction date"),
            click.option(
                "--bank",
                type=click.Choice(BANK_LIST, case_sensitive=False),
                help="Bank name",
            ),
            click.option("--account-num", help="Bank account number"),
            click.option("--due-date", help="Due date"),
            click.option(
                "--status",
                type=click.Choice(STATUS_CHOICES, case_sensitive=False),
                help="Status (defaults to Pending for new entries)",
            ),
        ]
        for option in reversed(options):
            func = option(func)
        return func

    return decorator


@click.command("add")
@entry_options(required=True)
@click.pass_context
def add_entry(
    ctx,
    category: str,
    entry_date: str,
    party: str,
    amount: str,
    ref: str | None,
    desc: str | None,
    transaction_date: str | None,
    bank: str | None,
    account_num: str | None,
    due_date: str | None,
    status: str | None,
):
    """Add an entry.

    Examples:
        parchi add --category cr --date 2024-01-15 --party "Acme Traders" --amount 25000
        parchi add --category ltp --date today --party "Zed Co" --amount 90000 --due-date 2024-06-30
    """
    store = ctx.obj["store"]

    entry_category = _resolve_category_or_exit(ctx, category)
    parsed_date = _parse_date_or_exit(ctx, entry_date)
    parsed_amount = _parse_amount_or_exit(ctx, amount)
    parsed_transaction_date = _parse_date_or_exit(ctx, transaction_date, "transaction date")
    parsed_due_date = _parse_date_or_exit(ctx, due_date, "due date")

    try:
        entry = store.add_entry(
            category=entry_category,
            date=parsed_date,
            party_name=party,
            total_amount=parsed_amount,
            ref_no=ref or "",
            desc=desc or "",
            transaction_date=parsed_transaction_date,
            bank_name=bank,
            bank_account_num=account_num,
            due_date=parsed_due_date,
            status=EntryStatus(status) if status else EntryStatus.PENDING,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created entry {entry.id}")
    click.echo(f"  Category: {entry.category.value}")
    click.echo(f"  Party: {entry.party_name}")
    click.echo(f"  Amount: {format_amount(entry.total_amount)}")
    if entry.due_date:
        click.echo(f"  Due date: {entry.due_date}")


@click.command("edit")
@click.argument("entry_id")
@entry_options(required=False)
@click.pass_context
def edit_entry(
    ctx,
    entry_id: str,
    category: str | None,
    entry_date: str | None,
    party: str | None,
    amount: str | None,
    ref: str | None,
    desc: str | None,
    transaction_date: str | None,
    bank: str | None,
    account_num: str | None,
    due_date: str | None,
    status: str | None,
) -> None:
    """Update an entry.

    Updates only the fields that are provided.

    Examples:
        parchi edit 1718000000000000 --amount 30000
        parchi edit 1718000000000000 --status Overdue --due-date 2024-05-01
    """
    store = ctx.obj["store"]
    require_entry_or_exit(ctx, store, entry_id)

    fields = {}
    if category is not None:
        fields["category"] = _resolve_category_or_exit(ctx, category)
    if entry_date is not None:
        fields["date"] = _parse_date_or_exit(ctx, entry_date)
    if party is not None:
        fields["party_name"] = party
    if amount is not None:
        fields["total_amount"] = _parse_amount_or_exit(ctx, amount)
    if ref is not None:
        fields["ref_no"] = ref
    if desc is not None:
        fields["desc"] = desc
    if transaction_date is not None:
        fields["transaction_date"] = _parse_date_or_exit(ctx, transaction_date, "transaction date")
    if bank is not None:
        fields["bank_name"] = bank
    if account_num is not None:
        fields["bank_account_num"] = account_num
    if due_date is not None:
        fields["due_date"] = _parse_date_or_exit(ctx, due_date, "due date")
    if status is not None:
        fields["status"] = EntryStatus(status)

    if not fields:
        click.echo("Error: Nothing to update. Pass at least one field option.", err=True)
        ctx.exit(1)

    try:
        store.edit_entry(entry_id, **fields)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Updated entry {entry_id}")


@click.command("delete")
@click.argument("entry_id")
@click.pass_context
def delete_entry(ctx, entry_id: str) -> None:
    """Delete an entry after confirmation.

    Examples:
        parchi delete 1718000000000000
    """
    store = ctx.obj["store"]
    entry = require_entry_or_exit(ctx, store, entry_id)

    click.echo(f"{entry.party_name}: {format_amount(entry.total_amount)} ({entry.category.value})")
    if not store.delete_entry(entry_id):
        click.echo("Deletion cancelled.")
        return
    click.echo(f"Deleted entry {entry_id}")


@click.command("confirm")
@click.argument("entry_id")
@click.option("--customer", required=True, help="Customer the unknown payment belongs to")
@click.option("--confirmed-by", required=True, help="Person confirming the customer")
@click.pass_context
def confirm_entry(ctx, entry_id: str, customer: str, confirmed_by: str) -> None:
    """Confirm the customer of an unknown online entry.

    Examples:
        parchi confirm 1718000000000000 --customer "Acme Traders" --confirmed-by Sana
    """
    store = ctx.obj["store"]
    require_entry_or_exit(ctx, store, entry_id)

    store.confirm_unknown(entry_id, customer_name=customer, confirmed_by=confirmed_by)
    click.echo(f"Confirmed entry {entry_id} for {customer} (by {confirmed_by})")


@click.command("show")
@click.argument("entry_id")
@click.pass_context
def show_entry(ctx, entry_id: str) -> None:
    """Show all fields of an entry."""
    store = ctx.obj["store"]
    entry = require_entry_or_exit(ctx, store, entry_id)
    echo_entry_details(click.echo, entry)


def register_commands(cli: click.Group) -> None:
    """Register entry commands with main CLI."""
    cli.add_command(add_entry)
    cli.add_command(edit_entry)
    cli.add_command(delete_entry)
    cli.add_command(confirm_entry)
    cli.add_command(show_entry)

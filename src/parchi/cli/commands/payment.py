"""Payment commands."""

from datetime import date

import click
from parchi.cli.entry_resolution import require_entry_or_exit
from parchi.cli.formatting import format_amount
from parchi.domain.entities import Payment
from parchi.domain.ledger import compute_balance
from parchi.utils.amount_parser import parse_amount
from parchi.utils.date_parser import parse_date


@click.command("pay")
@click.argument("entry_id")
@click.option("--amount", required=True, help="Payment amount")
@click.option("--date", "payment_date", help="Payment date (defaults to today)")
@click.option("--cheque", default="", help="Cheque number")
@click.option("--voucher", default="", help="Voucher number")
@click.pass_context
def record_payment(
    ctx, entry_id: str, amount: str, payment_date: str | None, cheque: str, voucher: str
) -> None:
    """Record a payment against an entry.

    The entry becomes Paid once its payments cover the total amount.

    Examples:
        parchi pay 1718000000000000 --amount 5000 --cheque 004512
    """
    store = ctx.obj["store"]
    require_entry_or_exit(ctx, store, entry_id)

    try:
        paid_on = parse_date(payment_date) if payment_date else date.today()
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    try:
        paid_amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    payment = Payment(
        id=store.new_id(),
        date=paid_on,
        amount=paid_amount,
        cheque_no=cheque,
        voucher_no=voucher,
    )
    entry = store.record_payment(entry_id, payment)

    click.echo(f"Recorded payment of {format_amount(paid_amount)} on entry {entry_id}")
    click.echo(f"  Balance: {format_amount(compute_balance(entry))}")
    click.echo(f"  Status: {entry.status.value}")


@click.command("history")
@click.argument("entry_id")
@click.pass_context
def payment_history(ctx, entry_id: str) -> None:
    """Show payments recorded against an entry with the running balance."""
    store = ctx.obj["store"]
    entry = require_entry_or_exit(ctx, store, entry_id)

    click.echo(f"{entry.party_name} - {entry.category.value}")
    click.echo(f"Total amount: {format_amount(entry.total_amount)}")

    if not entry.payments:
        click.echo("No payments recorded.")
        return

    click.echo("-" * 80)
    click.echo(f"{'Date':<12} {'Amount':<18} {'Cheque':<12} {'Voucher':<12} {'Balance':<18}")
    click.echo("-" * 80)

    running = entry.total_amount
    for payment in entry.payments:
        running -= payment.amount
        click.echo(
            f"{str(payment.date):<12} {format_amount(payment.amount):<18} "
            f"{payment.cheque_no:<12} {payment.voucher_no:<12} {format_amount(running):<18}"
        )

    click.echo("-" * 80)
    click.echo(f"Outstanding: {format_amount(compute_balance(entry))} | Status: {entry.status.value}")


def register_commands(cli: click.Group) -> None:
    """Register payment commands with main CLI."""
    cli.add_command(record_payment)
    cli.add_command(payment_history)

"""Dashboard command."""

import click
from parchi.cli.formatting import format_amount
from parchi.domain.summary import SummaryService


@click.command("dashboard")
@click.pass_context
def show_dashboard(ctx) -> None:
    """Show totals per category over all entries.

    Pending and overdue columns are outstanding balances. An Active entry
    with a balance appears in both.
    """
    store = ctx.obj["store"]
    service = SummaryService()

    summaries = service.by_category(store.entries)
    overall = service.summarize(store.entries)

    click.echo("Executive Dashboard")
    click.echo("-" * 110)
    click.echo(
        f"{'Category':<24} {'Count':>6} {'Total':>18} {'Paid':>18} {'Pending':>18} {'Overdue':>18}"
    )
    click.echo("-" * 110)
    for category, summary in summaries.items():
        click.echo(
            f"{category.value:<24} {summary.count:>6} {format_amount(summary.total):>18} "
            f"{format_amount(summary.paid):>18} {format_amount(summary.pending):>18} "
            f"{format_amount(summary.overdue):>18}"
        )
    click.echo("-" * 110)
    click.echo(
        f"{'TOTAL':<24} {overall.count:>6} {format_amount(overall.total):>18} "
        f"{format_amount(overall.paid):>18} {format_amount(overall.pending):>18} "
        f"{format_amount(overall.overdue):>18}"
    )


def register_commands(cli: click.Group) -> None:
    """Register dashboard command with main CLI."""
    cli.add_command(show_dashboard)

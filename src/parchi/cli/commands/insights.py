"""AI insights command."""

import click
import requests
from parchi.cli.error_handling import handle_domain_error
from parchi.config import insights_settings
from parchi.domain.insights import GeminiInsightsClient, InsightsService


@click.command("insights")
@click.pass_context
def show_insights(ctx) -> None:
    """Ask the AI endpoint for insights on all entries.

    Requires GEMINI_API_KEY. PARCHI_INSIGHTS_MODEL, PARCHI_INSIGHTS_URL and
    PARCHI_INSIGHTS_TIMEOUT override the endpoint defaults.
    """
    store = ctx.obj["store"]

    if not store.entries:
        click.echo("No entries to analyse.")
        return

    try:
        client = GeminiInsightsClient(**insights_settings())
    except ValueError as e:
        handle_domain_error(ctx, e)

    service = InsightsService(client)
    try:
        text = service.get_insights(store.entries)
    except requests.RequestException as e:
        click.echo(f"Error: Insights request failed: {e}", err=True)
        ctx.exit(1)

    click.echo("AI Smart Insights")
    click.echo("-" * 80)
    click.echo(text or "No insights returned.")


def register_commands(cli: click.Group) -> None:
    """Register insights command with main CLI."""
    cli.add_command(show_insights)

"""Invoice statistics command."""

import click
from invoicekit.domain.calculator import format_money
from invoicekit.domain.stats import StatsService


@click.command("stats")
@click.pass_context
def show_stats(ctx):
    """Show invoice counts and billed, paid and outstanding totals.

    Amounts are summed without currency conversion.
    """
    stats = StatsService(ctx.obj["db"]).build_stats()

    if stats.invoice_count == 0:
        click.echo("No invoices found.")
        return

    click.echo("\nInvoice statistics")
    click.echo("-" * 40)
    click.echo(f"{'Invoices:':20s} {stats.invoice_count:>19d}")
    for status, count in stats.status_counts.items():
        if count:
            click.echo(f"{'  ' + status.value.title() + ':':20s} {count:>19d}")
    click.echo(f"{'Total billed:':20s} {format_money(stats.total_billed):>19s}")
    click.echo(f"{'Paid:':20s} {format_money(stats.total_paid):>19s}")
    click.echo(f"{'Outstanding:':20s} {format_money(stats.total_outstanding):>19s}")


def register_commands(cli):
    """Register stats command with main CLI."""
    cli.add_command(show_stats)

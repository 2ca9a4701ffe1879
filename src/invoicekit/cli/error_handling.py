"""CLI error handling helpers."""

import logging

import click

from invoicekit.domain.errors import DependencyError, DomainError

logger = logging.getLogger(__name__)


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Report a failed command on stderr and exit with status 1.

    The failing command and traceback are logged at DEBUG, so ``--verbose``
    shows where the error came from. Blocked deletes get a second line
    pointing at the invoices that hold them.
    """
    logger.debug("'%s' failed: %s", ctx.command_path, error, exc_info=error)
    click.echo(f"Error: {error}", err=True)
    if isinstance(error, DependencyError):
        click.echo("Hint: see 'invoice list' for the invoices involved.", err=True)
    ctx.exit(1)

"""CLI entry point for the executive assistant."""

import logging

import click
from dotenv import load_dotenv

from exec_assistant.config import Settings

logger = logging.getLogger(__name__)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log at INFO instead of WARNING.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Executive assistant — summarise and prioritise emails with Claude."""
    load_dotenv()
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)-8s %(name)s — %(message)s",
    )
    ctx.obj = Settings.from_env()


# Import and register commands after cli is defined to avoid circular imports.
from exec_assistant.cli.commands import analyze, serve  # noqa: E402

cli.add_command(serve)
cli.add_command(analyze)

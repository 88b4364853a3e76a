"""objtasks CLI entry point: Click group with subcommands."""

import logging

import click

from objtasks import __version__
from objtasks.config import ObjtasksConfig


@click.group()
@click.version_option(version=__version__, prog_name="objtasks")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """objtasks - object tasks and a fluent CSS selector builder."""
    config = ObjtasksConfig(log_level="DEBUG") if verbose else ObjtasksConfig()
    logging.basicConfig(level=config.log_level)
    ctx.obj = config


# Import and register subcommands
from objtasks.cli.rectangle import rectangle  # noqa: E402
from objtasks.cli.selector import selector  # noqa: E402

cli.add_command(rectangle)
cli.add_command(selector)

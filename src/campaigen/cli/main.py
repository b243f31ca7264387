#!/usr/bin/env python3
"""
Main CLI Entry Point for Campaigen

Provides the unified command-line interface for recording marketing
campaign data.
"""

import logging
import os

import click

from ..core.config import get_config, reload_config
from .context import build_influencer_service, build_spend_service, get_cli_config, report_errors


@click.group()
@click.option(
    "--config-env",
    type=click.Choice(["development", "test", "production"]),
    help="Override environment configuration",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config_env: str | None, verbose: bool, debug: bool) -> None:
    """
    Campaigen - Marketing Campaign Data

    Record marketing spend and influencer profiles in a local database.
    """
    ctx.ensure_object(dict)

    if config_env:
        os.environ["CAMPAIGEN_ENV"] = config_env

    if debug:
        os.environ["LOG_LEVEL"] = "DEBUG"

    try:
        config = reload_config() if (config_env or debug) else get_config()
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    if debug:
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger("campaigen").setLevel(logging.DEBUG)

    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    ctx.obj["config"] = config

    if verbose:
        click.echo(f"Environment: {config.environment.value}")
        click.echo(f"Database: {config.database.safe_url()}")

    if debug:
        click.echo("Debug logging enabled")


@main.command()
def version() -> None:
    """Show version information."""
    from campaigen import __version__

    click.echo(f"Campaigen v{__version__}")


@main.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show current configuration."""
    config_obj = get_cli_config(ctx)

    click.echo("Current Configuration:")
    click.echo(f"  Environment: {config_obj.environment.value}")
    click.echo(f"  Data Directory: {config_obj.data_dir}")
    click.echo(f"  Database: {config_obj.database.safe_url()}")
    click.echo(f"  Debug Mode: {config_obj.debug}")
    click.echo(f"  Log Level: {config_obj.log_level}")


@main.command()
@click.pass_context
def status(ctx: click.Context) -> None:
    """Show how many records each store holds."""
    with report_errors("reading status"):
        spend_store = build_spend_service(ctx).store
        influencer_store = build_influencer_service(ctx).store
        lines = [
            f"  Spend records: {spend_store.summary_text()}",
            f"  Influencers: {influencer_store.summary_text()}",
        ]

    click.echo("Data Status:")
    for line in lines:
        click.echo(line)


# Import resource command groups
from .influencer import influencer  # noqa: E402
from .spend import spend  # noqa: E402

main.add_command(spend)
main.add_command(influencer)


if __name__ == "__main__":
    main()

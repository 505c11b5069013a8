#!/usr/bin/env python3
"""
Main CLI Entry Point for the Cash Deposit Extractor

Provides the command-line interface for extracting deposits from alert
emails and exporting them as booking CSV files.
"""

import json
import logging
import os

import click

from ..core.config import get_config


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
    Cash Deposit Extractor

    Reads cash deposit alert emails, extracts amount, currency and client
    account code for each deposit, and writes booking CSV files.
    """
    ctx.ensure_object(dict)

    if config_env:
        os.environ["CASHDEPOSIT_ENV"] = config_env

    if debug:
        os.environ["LOG_LEVEL"] = "DEBUG"
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger("cashdeposit").setLevel(logging.DEBUG)

    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    ctx.obj["config"] = get_config()

    if verbose:
        click.echo(f"Environment: {ctx.obj['config'].environment.value}")
        click.echo(f"Data directory: {ctx.obj['config'].data_dir}")

    if debug:
        click.echo("Debug logging enabled")


@main.command()
def version() -> None:
    """Show version information."""
    from cashdeposit import __version__

    click.echo(f"Cash Deposit Extractor v{__version__}")


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Print configuration as JSON")
@click.pass_context
def config(ctx: click.Context, as_json: bool) -> None:
    """Show current configuration."""
    config_obj = ctx.obj["config"]

    if as_json:
        click.echo(json.dumps(config_obj.to_dict(), indent=2))
        return

    click.echo("Current Configuration:")
    click.echo(f"  Environment: {config_obj.environment.value}")
    click.echo(f"  Data Directory: {config_obj.data_dir}")
    click.echo(f"  Output Directory: {config_obj.output_dir}")
    click.echo(f"  Lookup CSV: {config_obj.lookup.csv_path}")
    click.echo(f"  Amount Mode: {config_obj.extraction.mode}")
    click.echo(f"  Require Account Code: {config_obj.extraction.require_account_code}")
    click.echo(f"  Debug Mode: {config_obj.debug}")
    click.echo(f"  Log Level: {config_obj.log_level}")


from .extract import export, extract  # noqa: E402

main.add_command(extract)
main.add_command(export)


if __name__ == "__main__":
    main()

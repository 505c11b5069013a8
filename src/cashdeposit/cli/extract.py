#!/usr/bin/env python3
"""
Extraction CLI - Deposit Alert Commands

Commands:
- extract: parse alert emails and print what was found
- export: parse alert emails and write one booking CSV per deposit
"""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import click

from ..alerts import (
    NO_TRANSACTIONS_MESSAGE,
    DepositEntry,
    ExtractionResult,
    ExtractionSettings,
    load_alert_email,
    process_email,
)
from ..core.config import AMOUNT_MODES, Config
from ..core.dates import ValueDate
from ..export import export_entries
from ..lookup import LookupCache


def alert_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Options shared by extract and export."""
    decorators = [
        click.argument(
            "email_files",
            nargs=-1,
            required=True,
            type=click.Path(exists=True, dir_okay=False, path_type=Path),
        ),
        click.option(
            "--mode",
            type=click.Choice(AMOUNT_MODES),
            help="Amount extraction strategy (defaults to configuration)",
        ),
        click.option(
            "--require-account-code/--no-require-account-code",
            default=None,
            help="Treat deposits without an account code as invalid",
        ),
        click.option(
            "--lookup",
            "lookup_path",
            type=click.Path(dir_okay=False, path_type=Path),
            help="Lookup CSV (defaults to configuration)",
        ),
        click.option("--no-lookup", is_flag=True, help="Skip the lookup join"),
        click.option("--value-date", help="Value date (YYYY-MM-DD); defaults to each email's received date"),
    ]
    for decorator in reversed(decorators):
        func = decorator(func)
    return func


def _run_extraction(
    ctx: click.Context,
    email_files: tuple[Path, ...],
    mode: str | None,
    require_account_code: bool | None,
    lookup_path: Path | None,
    no_lookup: bool,
    value_date: str | None,
) -> list[ExtractionResult]:
    config: Config = ctx.obj["config"]
    verbose = ctx.obj.get("verbose", False)

    settings = ExtractionSettings.from_config(
        mode or config.extraction.mode,
        config.extraction.require_account_code if require_account_code is None else require_account_code,
    )

    fixed_date = None
    if value_date:
        try:
            fixed_date = ValueDate.from_string(value_date)
        except ValueError as e:
            raise click.BadParameter(f"expected YYYY-MM-DD, got '{value_date}'", param_hint="--value-date") from e

    lookup_cache = None if no_lookup else LookupCache(lookup_path or config.lookup.csv_path)

    if verbose:
        click.echo(f"Amount mode: {settings.mode.value}")
        click.echo(f"Require account code: {settings.require_account_code}")
        click.echo(f"Lookup: {'disabled' if lookup_cache is None else lookup_cache.csv_path}")
        click.echo()

    results = []
    for path in email_files:
        try:
            alert = load_alert_email(path)
        except ValueError as e:
            raise click.ClickException(str(e)) from e

        result = process_email(alert, lookup_cache=lookup_cache, settings=settings, value_date=fixed_date)
        if verbose:
            click.echo(
                f"{path.name}: {result.block_count} block(s), "
                f"{len(result.entries)} valid, {result.discarded_count} discarded"
            )
        results.append(result)

    return results


def _all_entries(results: list[ExtractionResult]) -> list[DepositEntry]:
    entries = [entry for result in results for entry in result.entries]
    if not entries:
        raise click.ClickException(f"❌ {NO_TRANSACTIONS_MESSAGE}")
    return entries


@click.command()
@alert_options
@click.pass_context
def extract(ctx: click.Context, **options: Any) -> None:
    """
    Extract deposits from alert emails and show a summary.

    Examples:
      cashdeposit extract alert.eml
      cashdeposit extract --mode strict --no-lookup body.html
    """
    results = _run_extraction(ctx, **options)
    entries = _all_entries(results)

    summary = ExtractionResult(entries=entries).summary()
    missing = sum(1 for entry in entries if not entry.lookup_found)

    click.echo(f"=== Parsed {len(entries)} transaction(s) ===")
    click.echo(json.dumps(summary, indent=2))
    if missing:
        click.echo("\n⚠️ Some transactions missing lookup: those CSVs will have blank lookup fields.")
    else:
        click.echo("\n✅ All transactions have lookup data. Ready to export.")


@click.command()
@alert_options
@click.option("--output-dir", type=click.Path(file_okay=False, path_type=Path), help="Override output directory")
@click.pass_context
def export(ctx: click.Context, output_dir: Path | None, **options: Any) -> None:
    """
    Extract deposits from alert emails and write one CSV file per deposit.

    Examples:
      cashdeposit export alert.eml
      cashdeposit export alert.eml --output-dir ./out
    """
    config: Config = ctx.obj["config"]

    results = _run_extraction(ctx, **options)
    entries = _all_entries(results)

    output_path = output_dir or config.output_dir
    written = export_entries(entries, output_path)

    if ctx.obj.get("verbose", False):
        for path in written:
            click.echo(f"  {path}")

    note = " (Some with blank lookup fields)" if any(not entry.lookup_found for entry in entries) else ""
    click.echo(f"Exported {len(written)} CSV file(s).{note}")

"""
Root Typer application for the jobspine CLI.

``jobspine keys myapp.models:Base`` prints the partition keys the job engine
would derive for a declarative base, using the ``JOB_STORAGE_*`` settings of
the current environment.
"""

from __future__ import annotations

import importlib
import json
from typing import Any

import typer
from rich.console import Console
from rich.table import Table

from jobspine.core.errors import JobSpineError
from jobspine.core.logging import configure_logging
from jobspine.core.settings import JobStorageSettings
from jobspine.partitioning.provider import PartitionKeyProvider
from jobspine.partitioning.types import PartitionKey

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(
    name="jobspine",
    help="jobspine - partition keys for job trigger / instance hierarchies.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    if value:
        from jobspine import __version__

        typer.echo(f"jobspine {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(  # noqa: UP007
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """jobspine CLI - inspect derived partition keys."""


def _load_target(target: str) -> Any:
    """Import ``module:attribute``."""
    module_name, _, attr = target.partition(":")
    if not module_name or not attr:
        raise typer.BadParameter("expected MODULE:ATTRIBUTE", param_hint="TARGET")
    try:
        return getattr(importlib.import_module(module_name), attr)
    except (ImportError, AttributeError) as exc:
        raise typer.BadParameter(f"cannot import {target}: {exc}", param_hint="TARGET") from exc


def _key_to_dict(key: PartitionKey, alias: str) -> dict[str, Any]:
    return {
        "name": key.name,
        "category": key.category.value,
        "id_attribute": key.id_attribute,
        "schedule_attribute": key.schedule_attribute,
        "last_execution_attribute": key.last_execution_attribute,
        "partition_attribute": key.partition_attribute,
        "state_attribute": key.state_attribute,
        "covered_types": list(key.covered_types),
        "predicate": key.partition_predicate(alias),
    }


@app.command("keys")
def show_keys(
    target: str = typer.Argument(..., help="Declarative base or registry as MODULE:ATTRIBUTE"),
    as_json: bool = typer.Option(False, "--json", help="Print keys as JSON"),
    alias: str = typer.Option("e", "--alias", help="Query alias used to render predicates"),
) -> None:
    """Show the trigger and instance partition keys derived for TARGET."""
    from jobspine.core.orm import SQLAlchemyTypeCatalog

    settings = JobStorageSettings()
    # JSON output owns stdout
    configure_logging(
        level="WARNING" if as_json else settings.log_level,
        service="jobspine-cli",
        cache_loggers=False,
    )

    try:
        catalog = SQLAlchemyTypeCatalog.from_settings(_load_target(target), settings)
        provider = PartitionKeyProvider.from_settings(catalog, settings)
    except JobSpineError as exc:
        err_console.print(f"[bold red]Error[/bold red] ({exc.category.value}): {exc.message}")
        raise typer.Exit(code=1) from exc

    keys = provider.trigger_partition_keys + provider.instance_partition_keys

    if as_json:
        console.print_json(json.dumps([_key_to_dict(key, alias) for key in keys]))
        return

    table = Table(title="Partition keys")
    table.add_column("Name", style="cyan")
    table.add_column("Category")
    table.add_column("Covers")
    table.add_column("Predicate")
    for key in keys:
        table.add_row(
            key.name,
            key.category.value,
            ", ".join(key.covered_types),
            key.partition_predicate(alias) or "-",
        )
    console.print(table)

#!/usr/bin/env python3
"""Middleware Alert Sync - CLI Entry Point."""
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

import click
import yaml
from rich.console import Console
from rich.table import Table

from __version__ import __version__

console = Console()


def _init_components(config_path=None, verbose=False):
    """Lazy initialization of all components."""
    from utils.logger import setup_logging
    from config import load_config
    from alerts.registry import MetricsRegistry
    from alerts.synchronizer import AlertManager
    from backend.manager import MiddlewareManager

    config = load_config(config_path)
    setup_logging("DEBUG" if verbose else config["logging"].get("level", "INFO"),
                  config["logging"].get("file"))

    registry = MetricsRegistry.load(config["alerts"].get("live_metrics_path"))
    ems = MiddlewareManager.from_config(config)
    manager = AlertManager(ems, registry=registry)

    return {
        "config": config,
        "registry": registry,
        "ems": ems,
        "manager": manager,
    }


def _load_alert(path):
    from models.alerts import AlertDefinition
    with open(path) as f:
        raw = yaml.safe_load(f) or {}
    return AlertDefinition.from_dict(raw)


def _conditions_table(conditions):
    table = Table(title="Firing Conditions", show_header=True)
    table.add_column("#", style="dim")
    table.add_column("Type", no_wrap=True)
    table.add_column("Data")
    table.add_column("Operator", no_wrap=True)
    table.add_column("Threshold / Multiplier")
    for i, c in enumerate(conditions, 1):
        d = c.to_dict()
        data = d["dataId"] if "data2Id" not in d else f"{d['dataId']} vs {d['data2Id']}"
        value = d.get("threshold", d.get("data2Multiplier"))
        table.add_row(str(i), d["type"], data, d["operator"] or "-", str(value))
    return table


@click.group()
@click.option("--config", "config_path", default=None, help="Path to config YAML")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.version_option(__version__, prog_name="mwalerts")
@click.pass_context
def cli(ctx, config_path, verbose):
    """Middleware Alert Sync - push alert definitions to the alerting backend."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj["verbose"] = verbose


def _get_components(ctx):
    if "_components" not in ctx.obj:
        ctx.obj["_components"] = _init_components(ctx.obj.get("config_path"), ctx.obj.get("verbose"))
    return ctx.obj["_components"]


# ──────────────────────────────────────────────────────
# SYNC
# ──────────────────────────────────────────────────────
@cli.command()
@click.argument("operation", type=click.Choice(["new", "update", "delete"]))
@click.argument("alert_file", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def sync(ctx, operation, alert_file):
    """Create, update or delete the group trigger for an alert definition."""
    from alerts.errors import AlertSyncError
    from utils.http_client import APIError
    from models.enums import IdFormat

    c = _get_components(ctx)
    alert = _load_alert(alert_file)
    try:
        result = c["manager"].process_alert(operation, alert)
    except AlertSyncError as e:
        console.print(f"[red]✗[/red] {e}")
        sys.exit(2)
    except APIError as e:
        console.print(f"[red]✗[/red] Backend error: {e}")
        sys.exit(1)

    console.print(f"[green]✓[/green] {result.operation.value}: {result.trigger_id}")
    if result.id_format == IdFormat.LEGACY:
        console.print("[yellow]  using legacy trigger id[/yellow]")
    if result.conditions:
        console.print(_conditions_table(result.conditions))


# ──────────────────────────────────────────────────────
# PREVIEW
# ──────────────────────────────────────────────────────
@cli.command()
@click.argument("alert_file", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def conditions(ctx, alert_file):
    """Show the trigger and conditions an alert would produce, without calling the backend."""
    from alerts.errors import AlertSyncError
    from models.enums import Operation

    c = _get_components(ctx)
    alert = _load_alert(alert_file)
    try:
        trigger = c["manager"].build_group_trigger(Operation.NEW, alert)
        built = c["manager"].build_group_conditions(alert)
    except AlertSyncError as e:
        console.print(f"[red]✗[/red] {e}")
        sys.exit(2)

    table = Table(title="Group Trigger", show_header=False, box=None)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    for key, value in trigger.to_dict().items():
        table.add_row(key, str(value))
    console.print(table)
    console.print(_conditions_table(built))


@cli.command("resolve-id")
@click.argument("alert_id")
@click.pass_context
def resolve_id(ctx, alert_id):
    """Show which trigger id the backend knows an alert by."""
    from utils.http_client import APIError

    c = _get_components(ctx)
    try:
        resolved = c["manager"].resolve_trigger_id({"id": alert_id})
    except APIError as e:
        console.print(f"[red]✗[/red] Backend error: {e}")
        sys.exit(1)
    console.print(f"{resolved.trigger_id} ({resolved.id_format.value})")


@cli.command()
@click.pass_context
def metrics(ctx):
    """List the configured metric mappings."""
    c = _get_components(ctx)
    table = Table(title="Supported Metrics", show_header=True)
    table.add_column("Column", style="dim")
    table.add_column("Backend metric")
    for name, data_id in c["registry"].items():
        table.add_row(name, data_id)
    console.print(table)


if __name__ == "__main__":
    cli()

#!/usr/bin/env python3
# this_file: src/toneterminal_presets/__main__.py
from __future__ import annotations

import json
import logging
from dataclasses import replace
from pathlib import Path

import click
import yaml
from rich.console import Console
from rich.table import Table

from .constants import DEFAULT_OUTPUT_FORMAT, LOG_DATE_FORMAT, LOG_FORMAT, SUPPORTED_OUTPUT_FORMATS
from .daws import DAWS
from .exceptions import PresetError
from .registry import DEFAULT_REGISTRY
from .serialization import ChainSerializer


@click.group()
@click.option("--verbose", is_flag=True, help="Enable verbose logging.")
def cli(verbose: bool):
    """Export plugin chains as DAW preset files."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    if verbose:
        Console(stderr=True).print("[bold yellow]Verbose mode enabled[/bold yellow]")


@cli.command()
@click.argument("chain_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--daw", help="Override the DAW named in the chain file.")
@click.option(
    "--output",
    "-o",
    "output_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("."),
    show_default=True,
    help="Directory to write the preset into.",
)
@click.option("--dry-run", is_flag=True, help="Serialize without writing the file.")
def export(chain_file: Path, daw: str | None, output_dir: Path, dry_run: bool):
    """Serialize CHAIN_FILE (JSON or YAML) into a preset."""
    console = Console()
    try:
        chain = ChainSerializer.load_chain(chain_file)
        if daw:
            chain = replace(chain, daw=daw, daw_id=None)
        preset = DEFAULT_REGISTRY.serialize(chain)
    except PresetError as e:
        raise click.ClickException(str(e)) from e

    if not chain.plugins:
        console.print("[yellow]Chain has no plugins; the preset will be empty.[/yellow]")

    kind = "native" if preset.is_native else "manual setup"
    if dry_run:
        console.print(
            f"[cyan]{preset.filename}[/cyan] ({preset.label}, {kind}, {len(preset.data)} bytes) not written"
        )
        return

    output_dir.mkdir(parents=True, exist_ok=True)
    target = output_dir / preset.filename
    target.write_bytes(preset.data)
    console.print(f"[green]Wrote {target}[/green] ({preset.label}, {kind}, {len(preset.data)} bytes)")


@cli.command()
@click.argument("daw")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json"], case_sensitive=False),
    default=DEFAULT_OUTPUT_FORMAT,
    help="Output format (default: table).",
)
def coverage(daw: str, output_format: str):
    """Show whether DAW has a native exporter."""
    result = DEFAULT_REGISTRY.get_exporter_coverage(daw)
    if output_format == "json":
        click.echo(json.dumps(result, indent=2))
        return

    table = Table(title=f"Export coverage: {daw}")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")
    for key, value in result.items():
        table.add_row(key, str(value))
    Console().print(table)


@cli.command("daws")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(SUPPORTED_OUTPUT_FORMATS, case_sensitive=False),
    default=DEFAULT_OUTPUT_FORMAT,
    help="Output format (default: table).",
)
def list_daws(output_format: str):
    """List known DAWs and their export support."""
    rows = []
    for daw_id, info in DAWS.items():
        result = DEFAULT_REGISTRY.get_exporter_coverage(daw_id)
        rows.append({
            "id": daw_id,
            "label": info.label,
            "formats": list(info.formats),
            "os": list(info.os),
            "status": result["status"],
            "nativeFormat": result.get("nativeFormat"),
        })

    if output_format == "json":
        click.echo(json.dumps(rows, indent=2))
    elif output_format == "yaml":
        click.echo(yaml.dump(rows, default_flow_style=False, sort_keys=False))
    else:
        table = Table(title="Supported DAWs")
        table.add_column("ID", style="cyan")
        table.add_column("Label", style="magenta")
        table.add_column("Plugin formats", style="dim")
        table.add_column("Export", style="green")
        for row in rows:
            export_label = row["nativeFormat"] if row["status"] == "native" else "manual (zip)"
            table.add_row(row["id"], row["label"], ", ".join(row["formats"]), export_label)
        Console().print(table)


@cli.command()
def formats():
    """List registered serializers in dispatch order."""
    table = Table(title="Serializers")
    table.add_column("#", style="dim")
    table.add_column("ID", style="cyan")
    table.add_column("Label", style="magenta")
    table.add_column("DAW ids", style="green")
    table.add_column("Extension")
    for position, serializer in enumerate(DEFAULT_REGISTRY.serializers, start=1):
        table.add_row(
            str(position),
            serializer.id,
            serializer.label,
            ", ".join(serializer.daw_ids),
            serializer.file_extension,
        )
    fallback = DEFAULT_REGISTRY.fallback
    table.add_row("-", fallback.id, fallback.label, "any (fallback)", fallback.file_extension)
    Console().print(table)


if __name__ == "__main__":
    cli()

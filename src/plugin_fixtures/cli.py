"""Command-line interface for Plugin Fixtures."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from plugin_fixtures.constants import ReturnCode
from plugin_fixtures.errors import PluginError
from plugin_fixtures.plugins import Plugin, candidate_paths, detect_layout, resolve_path
from plugin_fixtures.plugins.discovery import available_plugins, suggest_names
from plugin_fixtures.plugins.layout import effective_base
from plugin_fixtures.settings import FixtureSettings

console = Console()


def _base_dir(ctx: click.Context) -> Path:
    return ctx.obj["settings"].base_dir


@click.group()
@click.option("--base-dir", "-d", type=click.Path(file_okay=False), help="Directory the plugin search starts from")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.pass_context
def cli(ctx: click.Context, base_dir: str | None, verbose: bool) -> None:
    """Plugin Fixtures - locate, load and inspect mail server plugins."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)

    settings = FixtureSettings.from_env()
    if base_dir:
        settings.base_dir = Path(base_dir).resolve()

    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["settings"] = settings


@cli.command()
@click.argument("name")
@click.pass_context
def resolve(ctx: click.Context, name: str) -> None:
    """Show where plugin NAME would be loaded from."""
    base = _base_dir(ctx)
    resolution = resolve_path(name, base)

    console.print(Panel.fit(f"Plugin: {name}"))

    table = Table(title="Candidates")
    table.add_column("#", style="dim")
    table.add_column("Path", style="cyan")
    table.add_column("Exists", style="green")

    for i, path in enumerate(candidate_paths(name, base), 1):
        table.add_row(str(i), str(path), "yes" if path.exists() else "no")

    console.print(table)
    console.print(f"Layout: {detect_layout(base).value} (base {effective_base(base)})")

    if resolution is None:
        console.print(f"[red]✗ could not find path to plugin '{name}'[/red]")
        suggestions = suggest_names(name, base)
        if suggestions:
            console.print(f"[yellow]Did you mean: {', '.join(suggestions)}?[/yellow]")
        sys.exit(1)

    console.print(f"[green]✓ {resolution.path}[/green] ({resolution.style.value})")


@cli.command()
@click.argument("name")
@click.option("--inherit", "parents", multiple=True, help="Parent plugin to inherit from")
@click.pass_context
def load(ctx: click.Context, name: str, parents: tuple[str, ...]) -> None:
    """Load plugin NAME and list its exported surface."""
    settings = ctx.obj["settings"]

    try:
        plugin = Plugin(name, settings=settings)
        for parent in parents:
            plugin.inherits(parent)
    except PluginError as e:
        console.print(f"[red]✗ {e}[/red]")
        sys.exit(1)

    console.print(f"[green]Loaded:[/green] {plugin.plugin_path} ({plugin.style.value})")

    table = Table(title="Exported Surface")
    table.add_column("Name", style="cyan")
    table.add_column("Type", style="white")
    table.add_column("Source", style="yellow")

    for member_name, member in sorted(plugin.exported.items()):
        source = next(
            (p for p, parent in plugin.parents.items() if parent.exported.get(member_name) is member),
            plugin.name,
        )
        table.add_row(member_name, type(member).__name__, source)

    console.print(table)


@cli.command(name="list")
@click.pass_context
def list_plugins(ctx: click.Context) -> None:
    """List plugins reachable from the base directory."""
    base = _base_dir(ctx)
    names = available_plugins(base)

    if not names:
        console.print("[yellow]No plugins found.[/yellow]")
        return

    table = Table(title=f"Plugins ({detect_layout(base).value} layout)")
    table.add_column("Name", style="cyan")
    table.add_column("Style", style="green")

    for name in names:
        resolution = resolve_path(name, base)
        table.add_row(name, resolution.style.value if resolution else "-")

    console.print(table)


@cli.command()
def constants() -> None:
    """Show the protocol return codes available to plugins."""
    table = Table(title="Return Codes")
    table.add_column("Name", style="cyan")
    table.add_column("Value", style="green")

    for code in ReturnCode:
        table.add_row(code.name, str(int(code)))

    console.print(table)


def main() -> None:
    """Entry point."""
    cli()


if __name__ == "__main__":
    main()

"""Command-line interface for clockface."""

import json
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer
from rich import print as rprint
from rich.console import Console
from rich.table import Table

from clockface.config import get_settings
from clockface.logging import configure_logging

app = typer.Typer(
    name="clockface",
    help="clockface - analog clock face renderer",
    add_completion=False,
)

console = Console()


@app.callback()
def main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Enable debug mode"),
) -> None:
    """clockface CLI."""
    settings = get_settings()
    if debug or settings.debug:
        configure_logging(log_level="DEBUG", log_file=settings.log_file)
    else:
        configure_logging(log_level=settings.log_level, log_file=settings.log_file)


# Config commands
config_app = typer.Typer(help="Configuration management")
app.add_typer(config_app, name="config")


@config_app.command("show")
def config_show(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show current configuration."""
    settings = get_settings()

    if json_output:
        typer.echo(json.dumps(settings.model_dump(mode="json"), indent=2))
    else:
        table = Table(title="clockface Configuration", show_header=True)
        table.add_column("Setting", style="cyan")
        table.add_column("Value", style="green")

        for field_name in type(settings).model_fields:
            table.add_row(field_name, str(getattr(settings, field_name)))

        console.print(table)


# Clock commands
clock_app = typer.Typer(help="Clock face rendering")
app.add_typer(clock_app, name="clock")


def _parse_time(value: Optional[str]):
    from clockface.clock import ClockTime

    if value is None:
        return ClockTime.from_datetime(datetime.now())
    try:
        return ClockTime.parse(value)
    except ValueError:
        rprint(f"[red]Invalid time: {value}. Use HH:MM or HH:MM:SS[/red]")
        raise typer.Exit(1)


@clock_app.command("render")
def clock_render(
    at: Optional[str] = typer.Option(None, "--time", "-t", help="Time (HH:MM[:SS]), defaults to now"),
    width: Optional[int] = typer.Option(None, "--width", min=0, help="Viewport width"),
    height: Optional[int] = typer.Option(None, "--height", min=0, help="Viewport height"),
    padding: Optional[int] = typer.Option(None, "--padding", min=0, help="Face padding"),
    json_output: bool = typer.Option(False, "--json", help="Output primitives as JSON"),
    svg_path: Optional[Path] = typer.Option(None, "--svg", help="Write an SVG file instead"),
) -> None:
    """Render one frame of the clock face."""
    from clockface.clock import ClockFaceRenderer, ClockStyle, ViewportGeometry
    from clockface.clock.primitives import dump_primitives
    from clockface.clock.svg import SvgSurface

    settings = get_settings()
    clock_time = _parse_time(at)
    viewport = ViewportGeometry(
        width=width if width is not None else settings.width,
        height=height if height is not None else settings.height,
        padding=padding if padding is not None else settings.padding,
    )

    renderer = ClockFaceRenderer(style=ClockStyle.from_settings(settings))
    primitives = renderer.render(viewport, clock_time)

    if svg_path:
        svg_path.parent.mkdir(parents=True, exist_ok=True)
        svg_path.write_text(SvgSurface(viewport.width, viewport.height).draw(primitives), encoding="utf-8")
        rprint(f"[green]✓ Clock written to[/green] {svg_path}")
        return

    if json_output:
        typer.echo(json.dumps(dump_primitives(primitives), indent=2))
        return

    if not primitives:
        rprint(f"[yellow]Nothing to draw: padding {viewport.padding} leaves no room for a face[/yellow]")
        return

    table = Table(title=f"Clock face at {clock_time}", show_header=True)
    table.add_column("#", style="cyan", width=3)
    table.add_column("Kind", style="green")
    table.add_column("Detail", style="yellow")
    table.add_column("Geometry", style="white")

    for i, p in enumerate(primitives):
        if p.kind == "circle":
            detail, geometry = "face", f"({p.cx:.1f}, {p.cy:.1f}) r={p.radius:.1f}"
        elif p.kind == "numeral":
            detail, geometry = p.text, f"({p.x:.1f}, {p.y:.1f})"
        elif p.kind == "tick":
            detail = f"{p.index} large" if p.large else str(p.index)
            geometry = f"({p.x1:.1f}, {p.y1:.1f}) -> ({p.x2:.1f}, {p.y2:.1f})"
        else:
            detail = f"{p.hand.value} {p.angle:g}°"
            geometry = f"({p.x1:.1f}, {p.y1:.1f}) -> ({p.x2:.1f}, {p.y2:.1f})"
        table.add_row(str(i), p.kind, detail, geometry)

    console.print(table)


@clock_app.command("angles")
def clock_angles(
    at: Optional[str] = typer.Option(None, "--time", "-t", help="Time (HH:MM[:SS]), defaults to now"),
) -> None:
    """Show hand angles in degrees clockwise from 12 o'clock."""
    clock_time = _parse_time(at)
    rprint(f"[cyan]Time:[/cyan] {clock_time}")
    rprint(f"[cyan]Hour:[/cyan] {clock_time.hour_angle:g}")
    rprint(f"[cyan]Minute:[/cyan] {clock_time.minute_angle:g}")
    rprint(f"[cyan]Second:[/cyan] {clock_time.second_angle:g}")


@clock_app.command("run")
def clock_run() -> None:
    """Run clock display service."""
    from clockface.clock.service import ClockService

    service = ClockService()
    rprint(f"[cyan]Writing clock to[/cyan] {service.output_path} [dim](Ctrl+C to stop)[/dim]")
    service.run_daemon()


if __name__ == "__main__":
    app()

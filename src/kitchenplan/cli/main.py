"""Typer CLI for kitchen placement and surface generation."""

import json
from pathlib import Path
from typing import Annotated

import typer

from kitchenplan.application import (
    PlacementOutput,
    ServiceFactory,
    SurfaceOutput,
    UnknownObjectError,
)
from kitchenplan.application.config import ConfigError
from kitchenplan.cli.commands import display_load_error, validate_command
from kitchenplan.domain.value_objects import Vector3
from kitchenplan.infrastructure.exporters import ExporterRegistry

app = typer.Typer(
    name="kitchenplan",
    help="Place kitchen cabinets and generate worktops and plinths from a scene file.",
)

# Register validate command
app.command(name="validate")(validate_command)


def _load_factory(config_file: Path) -> ServiceFactory:
    try:
        return ServiceFactory.from_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)


def _parse_formats(formats_str: str) -> list[str]:
    """Parse a comma-separated format list (or "all") and check each name."""
    available = ExporterRegistry.available_formats()
    if formats_str.strip().lower() == "all":
        return available

    formats = [f.strip().lower() for f in formats_str.split(",") if f.strip()]
    invalid = [f for f in formats if f not in available]
    if invalid:
        typer.echo(f"Unknown formats: {', '.join(invalid)}", err=True)
        typer.echo(f"Available formats: {', '.join(available)}", err=True)
        raise typer.Exit(code=1)
    return formats


@app.command()
def place(
    config_file: Annotated[Path, typer.Argument(help="Path to the JSON scene file")],
    object_id: Annotated[str, typer.Argument(help="Id of the object to move")],
    x: Annotated[float, typer.Argument(help="Proposed world X in metres")],
    z: Annotated[float, typer.Argument(help="Proposed world Z in metres")],
    y: Annotated[
        float | None,
        typer.Option("--y", help="Proposed world Y in metres (wall cabinets only)"),
    ] = None,
    as_json: Annotated[
        bool, typer.Option("--json", help="Print the result as JSON")
    ] = False,
) -> None:
    """Drag an object to a point and print where it lands.

    Runs the full placement pipeline (snapping, collision fallback, room
    clamp) exactly as an interactive drag would. Put ``--`` before the
    coordinates when they are negative.

    Example:
        kitchenplan place kitchen.json cab-2 -- 1.9 -1.4
    """
    factory = _load_factory(config_file)
    session = factory.create_session()
    try:
        obj = session.begin_drag(object_id)
    except UnknownObjectError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    proposed = Vector3(x, obj.position.y if y is None else y, z)
    result = session.drag_to(proposed)
    session.end_drag()

    output = PlacementOutput.from_result(object_id, result, obj.rotation.yaw)
    if as_json:
        typer.echo(json.dumps(output.to_dict(), indent=2))
        return

    px, py, pz = output.position
    typer.echo(f"Object:   {object_id}")
    typer.echo(f"Position: x={px:.4f} y={py:.4f} z={pz:.4f}")
    typer.echo(f"Yaw:      {output.yaw:.1f}{' (forced)' if output.rotation_forced else ''}")
    typer.echo(f"Step:     {output.step}")
    for fb in output.feedback:
        typer.echo(f"Snap:     {fb['axis']} -> {fb['reference']} ({fb['source']})")
    if output.collided:
        typer.echo("Every snap collided; kept the last valid position.")


@app.command()
def surfaces(
    config_file: Annotated[Path, typer.Argument(help="Path to the JSON scene file")],
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", "-o", help="Directory for exported files"),
    ] = None,
    formats: Annotated[
        str | None,
        typer.Option(
            "--formats",
            "-f",
            help="Comma-separated export formats (json,stl,dxf) or 'all'",
        ),
    ] = None,
) -> None:
    """Generate the worktop and plinth for a scene and export them.

    Without --formats the formats listed in the scene's output section are
    used. Files are named ``{scene}_{format}.{ext}``.

    Example:
        kitchenplan surfaces kitchen.json --output-dir out --formats json,stl
    """
    factory = _load_factory(config_file)
    format_list = _parse_formats(
        formats if formats is not None else ",".join(factory.config.output.formats)
    )

    session = factory.create_session()
    worktop, plinth = session.regenerate_surfaces()
    generated = [mesh for mesh in (worktop, plinth) if mesh is not None]

    for mesh in generated:
        summary = SurfaceOutput.from_mesh(mesh).to_dict()
        typer.echo(
            f"{summary['kind'].capitalize()}: {summary['outline_count']} outline(s), "
            f"{summary['hole_count']} hole(s), elevation {summary['elevation']:.3f}, "
            f"thickness {summary['thickness']:.3f}"
        )
    if not generated:
        typer.echo("No surfaces generated (no eligible base cabinets).")
        return

    if not format_list:
        return

    manager = factory.create_export_manager(output_dir)
    try:
        paths = manager.export_all(format_list, generated, project_name=config_file.stem)
    except OSError as e:
        typer.echo(f"Error: export failed: {e}", err=True)
        raise typer.Exit(code=1)
    for format_name, path in paths.items():
        typer.echo(f"Exported {format_name}: {path}")


if __name__ == "__main__":
    app()

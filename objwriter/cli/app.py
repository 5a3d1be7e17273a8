"""Command-line interface for writing scene documents to OBJ files."""
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape
from rich.panel import Panel

from objwriter.core.mesh import MeshError
from objwriter.exceptions import SceneError
from objwriter.export.config import ObjExportConfig, ConfigManager
from objwriter.export.obj import export_meshes_to_obj
from objwriter.export.offsets import IndexOffsets
from objwriter.utils.scene import load_scene
from objwriter.cli.ui import console, print_rich_table, print_error, print_success, print_info, print_warning

# Set up logging
logger = logging.getLogger(__name__)


def export_command(
    scene_file: Path = typer.Argument(..., help="JSON scene document", exists=True, dir_okay=False),
    output_file: Path = typer.Argument(..., help="Output OBJ file"),
    uv: Optional[bool] = typer.Option(None, "--uv/--no-uv", help="Write texture coordinates"),
    normals: Optional[bool] = typer.Option(None, "--normals/--no-normals", help="Write quantized face normals"),
    config_file: Optional[Path] = typer.Option(None, "--config", help="JSON export configuration", exists=True, dir_okay=False),
    tool_name: Optional[str] = typer.Option(None, help="Tool name written in the header comment"),
):
    """Export the meshes of a scene document to one OBJ file."""
    try:
        config = ConfigManager.load_config(str(config_file)) if config_file else ObjExportConfig()
        overrides = {
            key: value for key, value in (
                ('export_uv', uv), ('export_normals', normals), ('tool_name', tool_name)
            ) if value is not None
        }
        config = ConfigManager.create_config(config, **overrides)
        meshes = load_scene(scene_file)
    except (IOError, ValueError, SceneError) as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if not meshes:
        print_warning(f"{scene_file} contains no meshes, writing header only")

    try:
        result = export_meshes_to_obj(meshes, str(output_file), config)
    except MeshError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if result is None:
        print_error(f"Could not create {output_file}")
        raise typer.Exit(code=1)

    print_success(f"Wrote {len(meshes)} objects to [filename]{escape(str(result))}[/filename]")


def info_command(
    scene_file: Path = typer.Argument(..., help="JSON scene document", exists=True, dir_okay=False),
):
    """Show the objects of a scene document and the offsets each would receive."""
    try:
        meshes = load_scene(scene_file)
    except SceneError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if not meshes:
        print_warning(f"{scene_file} contains no meshes")
        return

    rows = []
    offsets = IndexOffsets()
    for mesh in meshes:
        rows.append({
            "Object": mesh.name,
            "Vertices": mesh.vertex_count,
            "UVs": mesh.uv_count,
            "Polygons": mesh.polygon_count,
            "Offsets (v/vt/vn)": "/".join(str(n) for n in offsets.as_tuple()),
        })
        offsets = offsets.advance(mesh)

    print_rich_table(rows, title=f"Scene: {scene_file.name}", columns=[
        ("Object", "cyan"),
        ("Vertices", "green"),
        ("UVs", "green"),
        ("Polygons", "green"),
        ("Offsets (v/vt/vn)", "magenta"),
    ])
    print_info(f"Totals: {offsets.vertex} vertices, {offsets.uv} uvs, {offsets.normal} polygons")


def config_template_command(
    config_file: Path = typer.Argument(..., help="Where to write the default configuration"),
):
    """Write the default export configuration as JSON."""
    try:
        ConfigManager.save_config(ConfigManager.get_default_config(), str(config_file))
    except IOError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    print_success(f"Saved default configuration to [filename]{escape(str(config_file))}[/filename]")


def version_command():
    """Display objwriter version information."""
    from objwriter import __version__

    console.print(Panel.fit(
        f"[bold]objwriter[/bold]\n\n"
        f"Version: {__version__}\n"
    ))


def create_app() -> typer.Typer:
    """Create the objwriter command-line application."""
    app = typer.Typer(
        help="objwriter - write polygon meshes to Wavefront OBJ files",
        add_completion=False
    )

    app.command(name="export", help="Export a scene document to OBJ")(export_command)
    app.command(name="info", help="Show scene document contents")(info_command)
    app.command(name="config-template", help="Write the default export configuration")(config_template_command)
    app.command(name="version", help="Show objwriter version")(version_command)

    return app


app = create_app()

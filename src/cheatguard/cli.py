from __future__ import annotations

from pathlib import Path

import typer

app = typer.Typer(name="cheatguard", help="Inspect cheat-guard catalogs")


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output to terminal"
    ),
    log_file: str | None = typer.Option(None, help="Append debug output to this file"),
):
    """Configure logging for all commands."""
    from cheatguard.verbose import setup_logger

    setup_logger(Path(log_file) if log_file else None, verbose=verbose)


def _load(catalog: str):
    import yaml

    from cheatguard.catalog import load_catalog

    catalog_path = Path(catalog)
    if not catalog_path.exists():
        typer.echo(f"Error: catalog file not found: {catalog}", err=True)
        raise typer.Exit(1)

    try:
        return load_catalog(catalog_path)
    except (OSError, ValueError, yaml.YAMLError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command()
def validate(
    catalog: str = typer.Argument(help="Path to guard catalog YAML"),
):
    """Validate a guard catalog."""
    guard_catalog = _load(catalog)
    typer.echo(f"{catalog}: {len(guard_catalog.guards)} guard(s) OK")


@app.command()
def show(
    catalog: str = typer.Argument(help="Path to guard catalog YAML"),
    guard: str = typer.Argument(help="Name of the guard to render"),
    message: str = typer.Option(
        "<error message>", "--message", "-m", help="Error message to embed"
    ),
):
    """Print the report a failing guard would produce."""
    from cheatguard.formatting import render_report

    guard_catalog = _load(catalog)
    try:
        metadata = guard_catalog.get(guard)
    except KeyError as e:
        typer.echo(f"Error: {e.args[0]}", err=True)
        raise typer.Exit(1)

    typer.echo(render_report(message, metadata), nl=False)


@app.command()
def schema(
    out: str = typer.Option(
        "schemas/cheatguard.schema.json", help="Output path for JSON Schema"
    ),
):
    """Generate JSON Schema for the guard catalog format."""
    from cheatguard.schema import write_json_schema

    out_path = Path(out)
    write_json_schema(out_path)
    typer.echo(f"Wrote schema: {out_path}")

"""CLI entry point for postrecord."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer
import yaml
from rich import print as rprint
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from postrecord.collection import FileResult, PostValidator
from postrecord.config import PostRecordConfig, load_config
from postrecord.config.loader import DEFAULT_CONFIG_TEMPLATE
from postrecord.frontmatter import load_post
from postrecord.logging_setup import configure_logging
from postrecord.record.errors import PostRecordError

app = typer.Typer(
    name="postrecord",
    help="Validate blog post front matter before the site build.",
)

config_app = typer.Typer(help="Manage postrecord configuration.")
app.add_typer(config_app, name="config")

# Global state
_config: PostRecordConfig | None = None


def _get_config() -> PostRecordConfig:
    if _config is None:
        return load_config()
    return _config


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to postrecord.yaml")
    ] = None,
) -> None:
    """Global options."""
    global _config
    try:
        _config = load_config(config)
    except ValueError as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    configure_logging(_config.log_level, _config.log_format)


def _display_results(results: list[FileResult]) -> None:
    table = Table(title=f"Validation Results ({len(results)} posts)")
    table.add_column("Path", style="cyan")
    table.add_column("Status", justify="center")
    table.add_column("Errors", justify="right", style="red")
    table.add_column("Warnings", justify="right", style="yellow")

    for r in results:
        status = "[green]PASS[/green]" if r.valid else "[red]FAIL[/red]"
        table.add_row(r.path, status, str(len(r.errors)), str(len(r.warnings)))
    rprint(table)

    # Show details for posts with issues
    for r in results:
        if r.errors or r.warnings:
            rprint(f"\n[bold]{r.path}[/bold]")
            for err in r.errors:
                rprint(f"  [red]error:[/red] {escape(err)}")
            for warn in r.warnings:
                rprint(f"  [yellow]warn:[/yellow] {escape(warn)}")


@app.command()
def validate(
    path: Annotated[
        str | None, typer.Argument(help="Post file or directory (default: content.directory)")
    ] = None,
    format: Annotated[
        str, typer.Option("--format", "-f", help="Output format: table or json")
    ] = "table",
) -> None:
    """Validate post front matter."""
    cfg = _get_config()
    target = Path(path or cfg.content.directory)

    if format not in ("table", "json"):
        rprint(f"[red]Error:[/red] Invalid format '{format}'. Choose table or json.")
        raise typer.Exit(1)

    validator = PostValidator(
        mode=cfg.validation.mode,
        unique_permalinks=cfg.validation.unique_permalinks,
    )
    if target.is_file():
        results = [validator.validate_file(target)]
    else:
        results = validator.validate_directory(target, pattern=cfg.content.pattern)

    if not results:
        rprint(f"[yellow]No posts matching '{cfg.content.pattern}' found in {target}.[/yellow]")
        raise typer.Exit(0)

    if format == "json":
        typer.echo(json.dumps([r.model_dump(mode="json", exclude={"record"}) for r in results], indent=2))
    else:
        _display_results(results)

    if any(not r.valid for r in results):
        raise typer.Exit(1)


@app.command()
def show(
    file: str = typer.Argument(..., help="Post file to display"),
) -> None:
    """Show the validated record for one post."""
    try:
        record = load_post(file)
    except FileNotFoundError:
        rprint(f"[red]Error:[/red] File not found: {file}")
        raise typer.Exit(1)
    except (OSError, UnicodeDecodeError) as e:
        rprint(f"[red]Error:[/red] Could not read {escape(file)}: {escape(str(e))}")
        raise typer.Exit(1)
    except PostRecordError as e:
        rprint(f"[red]Invalid post:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    fm = yaml.safe_dump(record.front_matter(), default_flow_style=False, sort_keys=False)
    rprint(Syntax(fm, "yaml"))
    rprint(
        Panel(
            f"[dim]Permalink:[/dim]  {record.permalink}\n"
            f"[dim]Modified:[/dim]   {record.last_modified_at.isoformat()}\n"
            f"[dim]Body:[/dim]       {len(record.body)} chars",
            title=record.title,
            border_style="green",
        )
    )


@config_app.command("show")
def config_show() -> None:
    """Show current resolved configuration."""
    cfg = _get_config()
    rprint(Syntax(yaml.dump(cfg.model_dump(), default_flow_style=False), "yaml"))


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Create default postrecord.yaml in current directory."""
    target = Path("postrecord.yaml")
    if target.exists() and not force:
        rprint("[yellow]postrecord.yaml already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE)
    rprint(f"[green]Created[/green] {target}")


if __name__ == "__main__":
    app()

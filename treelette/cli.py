from __future__ import annotations

"""treelette Command Line Interface."""

from pathlib import Path
from typing import Callable, TypeVar

import typer
import yaml
from jsonschema import ValidationError
from rich.markup import escape

from treelette.demo import run_purchase, run_views
from treelette.errors import TreeDefinitionError
from treelette.utils.logging import console, get
from treelette.yaml_loader import load_collection, load_view

app = typer.Typer(
    name="treelette",
    help="CLI for treelette: composite trees with a uniform perform().",
    add_completion=False,
)

T = TypeVar("T")


@app.callback()
def main(
    log_level: str = typer.Option("warning", "--log-level", help="Log level (debug, info, warning, error)."),
):
    """Configure logging before any command runs."""
    get(log_level)


def _load(loader: Callable[[Path], T], path: Path) -> T:
    """Run *loader* on *path*, turning definition errors into exit code 1."""
    try:
        return loader(path)
    except ValidationError as e:
        console.print(f"[bold red]Error: {escape(str(path))} is not a valid tree definition: {escape(e.message)}[/]", soft_wrap=True)
    except (TreeDefinitionError, yaml.YAMLError, UnicodeDecodeError, OSError) as e:
        console.print(f"[bold red]Error loading {escape(str(path))}: {escape(str(e))}[/]", soft_wrap=True)
    raise typer.Exit(code=1)


@app.command()
def views():
    """Run the view demo: leaves, composites and a decorating composite."""
    run_views()


@app.command()
def purchase(
    as_json: bool = typer.Option(False, "--json", help="Dump the structure as JSON instead of a tree."),
):
    """Run the purchase demo: nested collections and their total price."""
    run_purchase(as_json=as_json)


@app.command()
def draw(
    tree_file: Path = typer.Argument(..., help="YAML file describing a view tree.", exists=True, file_okay=True, dir_okay=False, readable=True),
):
    """Load a view tree and perform it."""
    root = _load(load_view, tree_file)
    root.perform()


@app.command()
def price(
    tree_file: Path = typer.Argument(..., help="YAML file describing a priced tree.", exists=True, file_okay=True, dir_okay=False, readable=True),
    as_json: bool = typer.Option(False, "--json", help="Dump the structure as JSON instead of a tree."),
):
    """Load a priced tree, dump its structure and print the total."""
    root = _load(load_collection, tree_file)
    run_purchase(root, as_json=as_json)


if __name__ == "__main__":
    app()

"""CLI command: stylesnap render -- print a JSON tree with its styles."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from stylesnap.config import SerializerOptions
from stylesnap.css import CssParseError, split_rules
from stylesnap.errors import StyleSnapError
from stylesnap.model import load_tree
from stylesnap.printer import pretty_format
from stylesnap.registry import StyleRegistry
from stylesnap.replace import default_class_name_replacer
from stylesnap.serializer import create_serializer


@click.command()
@click.argument("treefile", type=click.Path(exists=True))
@click.option(
    "--sheet",
    "sheets",
    nargs=2,
    multiple=True,
    type=(str, click.Path(exists=True)),
    metavar="KEY CSSFILE",
    help="Register the rules of CSSFILE under registry KEY. Repeatable.",
)
@click.option(
    "--stable-names/--raw-names",
    default=False,
    help="Rename generated class names to emotion-<n>.",
)
@click.option("--dom/--no-dom", default=True, help="Also serialize markup nodes.")
@click.option("--indent", default=2, show_default=True, type=click.IntRange(min=0))
def render(
    treefile: str,
    sheets: tuple[tuple[str, str], ...],
    stable_names: bool,
    dom: bool,
    indent: int,
) -> None:
    """Print the tree in TREEFILE (JSON) as a snapshot.

    Nodes are objects with ``type``, ``props`` and ``children`` keys; ``kind``
    is one of ``rendered`` (default), ``element`` or ``markup``.
    """
    registry = StyleRegistry()
    for key, css_path in sheets:
        try:
            registry.insert_all(key, split_rules(Path(css_path).read_text(encoding="utf-8")))
        except CssParseError as exc:
            click.echo(f"CSS parse error in {css_path}: {exc}", err=True)
            sys.exit(1)

    try:
        tree = load_tree(json.loads(Path(treefile).read_text(encoding="utf-8")))
    except (json.JSONDecodeError, StyleSnapError) as exc:
        click.echo(f"Invalid tree: {exc}", err=True)
        sys.exit(1)

    options = SerializerOptions(
        class_name_replacer=default_class_name_replacer if stable_names else None,
        dom_elements=dom,
    )
    serializer = create_serializer(options, registry=registry)
    try:
        click.echo(pretty_format(tree, plugins=[serializer], indent=" " * indent))
    except StyleSnapError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

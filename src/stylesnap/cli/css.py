"""CLI command: stylesnap css -- pretty-print a style sheet."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from stylesnap.css import CssParseError, prettify


@click.command()
@click.argument("cssfile", type=click.Path(exists=True))
@click.option("--indent", default=2, show_default=True, type=click.IntRange(min=0))
def css(cssfile: str, indent: int) -> None:
    """Pretty-print the style sheet in CSSFILE."""
    try:
        output = prettify(Path(cssfile).read_text(encoding="utf-8"), " " * indent)
    except CssParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)
    click.echo(output)

"""Render command - print bytes as shortened hex."""

import sys

import click
from rich.console import Console

from ..wrappers import HexFmt, HexList

console = Console()


@click.command()
@click.argument("files", nargs=-1, type=click.File("rb"))
@click.option("--text", "-t", "texts", multiple=True, help="Render a UTF-8 string instead of a file (repeatable)")
@click.option("--precision", "-p", type=click.IntRange(min=0), default=None,
              help="Maximum length of each rendering (default: 10)")
@click.option("--upper", "-U", is_flag=True, help="Upper-case hex digits")
@click.option("--list", "-l", "as_list", is_flag=True, help="Render all inputs as one list")
def render(files, texts, precision, upper, as_list):
    """Print FILES (or --text values) as hex, shortened from the middle.

    Use '-' to read from stdin. Without --list each input is printed on its
    own line.
    """
    inputs = [f.read() for f in files]
    inputs.extend(t.encode("utf-8") for t in texts)

    if not inputs:
        console.print("[red]Error:[/red] No input given. Pass FILES or --text.")
        sys.exit(1)

    views = [HexList(inputs)] if as_list else [HexFmt(data) for data in inputs]
    for view in views:
        click.echo(view.upper_hex(precision) if upper else view.lower_hex(precision))

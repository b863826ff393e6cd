"""hexfmt CLI entry point."""

import click

from .commands import render, version


@click.group()
def main():
    """hexfmt - shortened hexadecimal formatting of byte sequences.

    Prints bytes as hex, eliding from the middle when the rendering would
    exceed the precision: 090a..0e0f
    """


main.add_command(render)
main.add_command(version)


if __name__ == "__main__":
    main()

"""Command for turning @typedef comments back into JSON schemas."""

import json
from pathlib import Path

import click

from ..schema import deserialize, registry_to_json
from .typedef import configure_logging, write_output


@click.command("typedef-parse")
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output to a file instead of STDOUT.",
)
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr.")
def parse_cmd(source, output, verbose):
    """Read @typedef comments and output their schemas as JSON.

    SOURCE is a file of comments produced by typedef (default: STDIN).
    String subtypes come back as plain "string" types because their
    regular expressions are not part of the comments.
    """
    configure_logging(verbose)

    registry = deserialize(source.read())
    if not registry:
        raise click.ClickException("No @typedef comments found")

    write_output(json.dumps(registry_to_json(registry), indent=2), output)

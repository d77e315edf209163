"""Command for generating @typedef comments from a JSON payload."""

import json
import logging
from pathlib import Path
from typing import Optional

import click

from ..errors import TypedefError
from ..loaders import (
    DEFAULT_DESCRIPTION,
    build_registry,
    load_extra_file,
    load_payload,
    parse_extra_types,
    to_json_document,
)
from ..schema import HydrationCache, serialize

logger = logging.getLogger(__name__)


@click.command("typedef", context_settings={"auto_envvar_prefix": "TYPEDEF"})
@click.option("--name", "-n", required=True, help="The name of the type.")
@click.option(
    "--file",
    "-f",
    "file_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Read from a file instead of STDIN.",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output to a file instead of STDOUT.",
)
@click.option(
    "--description",
    "-d",
    default=DEFAULT_DESCRIPTION,
    help="A description of the type.",
)
@click.option(
    "--json",
    "output_json",
    is_flag=True,
    help="Output a JSON representation of the type.",
)
@click.option(
    "--extra",
    "-x",
    multiple=True,
    help="A JSON object of named subtype definitions. Can be repeated.",
)
@click.option(
    "--extra-file",
    multiple=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="A JSON file of named subtype definitions. Can be repeated.",
)
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr.")
def typedef_cmd(
    name, file_path, output, description, output_json, extra, extra_file, verbose
):
    """Generate JSDoc @typedef comments from a JSON payload.

    Each --extra definition maps type names to either a string subtype
    ({"description": ..., "match": <regex>}) or a structural subtype
    ({"description": ..., "schema": <schema>}). Values matching a subtype are
    reported by name, and every subtype gets its own comment.

    Examples:

    \b
      # Document a payload read from STDIN
      cat pull_request.json | typedef -n PullRequest >> types.js

    \b
      # Report URLs as URI
      typedef -n PullRequest -f pr.json \\
        -x '{"URI": {"description": "A URL", "match": "^https?://"}}'
    """
    configure_logging(verbose)

    try:
        payload = load_payload(file_path)
        fragments = [parse_extra_types(fragment) for fragment in extra]
        fragments.extend(load_extra_file(path) for path in extra_file)
        registry = build_registry(fragments)

        cache = HydrationCache()
        if output_json:
            text = json.dumps(
                to_json_document(name, description, payload, registry, cache)
            )
        else:
            text = serialize(name, description, payload, registry, cache)
    except TypedefError as e:
        raise click.ClickException(str(e))

    write_output(text, output)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def write_output(text: str, output: Optional[Path] = None) -> None:
    """Write to a file, or to STDOUT when no file is given."""
    if output is None:
        click.echo(text)
        return

    output.write_text(text, encoding="utf-8")
    logger.debug("Wrote %d characters to %s", len(text), output)

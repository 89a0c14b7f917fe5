"""
Command-line interface for morph.

Maps JSON records through a declarative schema document and reports the
structural issues found along the way.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click

from . import __version__
from .errors import SchemaError
from .loader import load_schema, validate_document


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def main(verbose: bool) -> None:
    """
    morph - declarative record reshaping.

    Rename, nest and translate keys of JSON records using a schema document.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@main.command("map")
@click.argument(
    "paths",
    metavar="[SCHEMA] INPUT",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, path_type=Path),
)
@click.option(
    "--schema",
    "schema_option",
    envvar="MORPH_SCHEMA",
    type=click.Path(exists=True, path_type=Path),
    help="Schema document (or set MORPH_SCHEMA)",
)
@click.option(
    "-o", "--output", type=click.Path(path_type=Path), help="Write to file instead of stdout"
)
@click.option("--compact", is_flag=True, help="Output compact JSON (no indentation)")
def map_command(
    paths: tuple[Path, ...], schema_option: Optional[Path], output: Optional[Path], compact: bool
) -> None:
    """Map the JSON record in INPUT through a schema document.

    SCHEMA may be given as the first argument, with --schema, or through
    the MORPH_SCHEMA environment variable.

    Example:

        morph map schema.json payload.json

        morph map --schema schema.json payload.json
    """
    if len(paths) > 2:
        raise click.UsageError("Expected at most two arguments: [SCHEMA] INPUT")
    if len(paths) == 2:
        schema_path, input_file = paths
    else:
        schema_path, input_file = schema_option, paths[0]
    if schema_path is None:
        raise click.UsageError("No schema given. Pass SCHEMA, --schema or set MORPH_SCHEMA")

    try:
        schema = load_schema(schema_path)
    except SchemaError as e:
        click.echo(click.style(f"Error loading schema: {e}", fg="red"), err=True)
        sys.exit(1)

    try:
        with open(input_file) as f:
            source = json.load(f)
    except json.JSONDecodeError as e:
        click.echo(click.style(f"Error parsing input: {e}", fg="red"), err=True)
        sys.exit(1)

    result = schema.safe_map(source)
    if result.is_err():
        issues = result.error.issues
        click.echo(click.style(f"Mapping failed with {len(issues)} issue(s):", fg="red"), err=True)
        for issue in issues:
            click.echo(click.style(f"  - {issue.location}: {issue.details}", fg="red"), err=True)
        sys.exit(1)

    text = result.to_json(indent=None if compact else 2)
    if output is None:
        click.echo(text)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    with open(output, "w") as f:
        f.write(text + "\n")
    click.echo(f"Wrote: {output}", err=True)


@main.command()
@click.argument("schema_file", metavar="SCHEMA", type=click.Path(exists=True, path_type=Path))
def check(schema_file: Path) -> None:
    """Validate a schema document."""
    try:
        with open(schema_file) as f:
            document = json.load(f)
    except json.JSONDecodeError as e:
        click.echo(f"✗ Not valid JSON: {e}", err=True)
        sys.exit(1)

    errors = validate_document(document)
    if not errors:
        # Catches what JSON Schema cannot express, like enum length mismatches
        try:
            load_schema(schema_file)
        except SchemaError as e:
            errors = [str(e)]

    if errors:
        click.echo(f"✗ Invalid schema document: {schema_file}", err=True)
        for error in errors:
            click.echo(f"  - {error}", err=True)
        sys.exit(1)

    click.echo(f"✓ Valid schema document: {schema_file}")


if __name__ == "__main__":
    main()

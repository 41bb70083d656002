"""CLI commands for shortguid."""

import logging
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from shortguid import (
    ShortGuidError,
    ShortGuidGenerator,
    ShortGuidSettings,
    ShortGuidValidator,
    decode,
    encode,
    parse_short_guid,
)
from shortguid.sql import render_drop_functions, render_postgres_functions

logger = logging.getLogger(__name__)


def _resolve_strict(ctx: click.Context, strict: bool, lenient: bool) -> bool:
    if strict and lenient:
        click.echo("Error: --strict and --lenient are mutually exclusive", err=True)
        sys.exit(1)
    if strict or lenient:
        return strict
    return ctx.obj.strict


def strictness_options(func):
    """Add --strict/--lenient flags; without either the configured default applies."""
    func = click.option(
        "--lenient", is_flag=True, help="Accept non-canonical (aliased) encodings"
    )(func)
    func = click.option(
        "--strict", is_flag=True, help="Only accept the canonical encoding"
    )(func)
    return func


@click.group()
@click.version_option(package_name="shortguid")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to shortguid.toml (default: search from the current directory)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, verbose: bool) -> None:
    """shortguid - URL-safe 22 character encoding for UUIDs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if config_path is not None:
            settings = ShortGuidSettings.from_toml(config_path)
        else:
            settings = ShortGuidSettings.discover()
    except (ValidationError, ValueError) as e:
        click.echo(f"Error: invalid configuration: {e}", err=True)
        sys.exit(1)

    if not verbose:
        logging.getLogger().setLevel(settings.log_level)

    ctx.obj = settings


@cli.command("encode")
@click.argument("uuid")
def encode_command(uuid: str) -> None:
    """Encode a canonical UUID as a ShortGuid."""
    try:
        click.echo(encode(uuid))
    except ShortGuidError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@cli.command("decode")
@click.argument("short_guid")
@strictness_options
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
@click.pass_context
def decode_command(
    ctx: click.Context, short_guid: str, strict: bool, lenient: bool, output_json: bool
) -> None:
    """Decode a ShortGuid into a canonical UUID."""
    strict = _resolve_strict(ctx, strict, lenient)

    try:
        value = decode(short_guid, strict=strict)
    except ShortGuidError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if output_json:
        import json

        click.echo(json.dumps({"short_guid": encode(value), "uuid": str(value)}, indent=2))
    else:
        click.echo(str(value))


@cli.command("parse")
@click.argument("text")
@strictness_options
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
@click.pass_context
def parse_command(
    ctx: click.Context, text: str, strict: bool, lenient: bool, output_json: bool
) -> None:
    """Parse either a ShortGuid or a canonical UUID and show both forms."""
    strict = _resolve_strict(ctx, strict, lenient)

    try:
        short_guid = parse_short_guid(text, strict=strict)
    except ShortGuidError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if output_json:
        import json

        click.echo(
            json.dumps({"short_guid": short_guid.value, "uuid": str(short_guid.uuid)}, indent=2)
        )
    else:
        click.echo(f"ShortGuid: {short_guid.value}")
        click.echo(f"UUID:      {short_guid.uuid}")


@cli.command("validate")
@click.argument("short_guid")
@strictness_options
@click.option("--quiet", "-q", is_flag=True, help="Only output result (0=valid, 1=invalid)")
@click.pass_context
def validate_command(
    ctx: click.Context, short_guid: str, strict: bool, lenient: bool, quiet: bool
) -> None:
    """Validate ShortGuid format."""
    validator = ShortGuidValidator(strict=_resolve_strict(ctx, strict, lenient))

    result = validator.validate(short_guid)

    if quiet:
        sys.exit(0 if result.valid else 1)

    if result.valid:
        click.echo(f"✓ Valid ShortGuid: {short_guid}")
        for warning in result.warnings:
            click.echo(f"  warning: {warning}")
        sys.exit(0)
    else:
        click.echo(f"✗ Invalid ShortGuid: {result.error}", err=True)
        sys.exit(1)


@cli.command("generate")
@click.option("--count", type=int, default=1, show_default=True, help="Number of ShortGuids")
@click.option(
    "--uuid-version",
    type=click.Choice(["1", "4"]),
    help="UUID version (default: from configuration)",
)
@click.option("--long", "long_form", is_flag=True, help="Also print the canonical UUID")
@click.pass_context
def generate_command(
    ctx: click.Context, count: int, uuid_version: str | None, long_form: bool
) -> None:
    """Generate new ShortGuids."""
    version = int(uuid_version) if uuid_version else ctx.obj.uuid_version

    try:
        generator = ShortGuidGenerator(version=version)
        short_guids = generator.generate_batch(count)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    for short_guid in short_guids:
        if long_form:
            click.echo(f"{short_guid.value} {short_guid.uuid}")
        else:
            click.echo(short_guid.value)


@cli.command("sql")
@click.option("--schema", help="Schema for the functions (default: from configuration)")
@click.option("--drop", is_flag=True, help="Output DROP statements instead")
@click.pass_context
def sql_command(ctx: click.Context, schema: str | None, drop: bool) -> None:
    """Print PostgreSQL encode_short_guid/decode_short_guid functions."""
    schema = schema or ctx.obj.sql_schema

    try:
        script = render_drop_functions(schema) if drop else render_postgres_functions(schema)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    logger.info(f"Rendered SQL functions for schema {schema}")
    click.echo(script, nl=False)


if __name__ == "__main__":
    cli()

"""Command-line interface for the geodms library."""

import json
import logging
from typing import Any

import typer

from . import __version__, decoders, encoders
from .exceptions import DmsException
from .types import Kind, parse_component, parse_kind

logger = logging.getLogger(__name__)

app = typer.Typer(help="Convert between DMS text and decimal degrees")

# Let negative angles such as -20.5 through as arguments
ANGLE_CONTEXT = {"ignore_unknown_options": True}


@app.callback()
def configure(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr"),
):
    """Convert between DMS text and decimal degrees."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command(context_settings=ANGLE_CONTEXT)
def decode(
    dms: str = typer.Argument(..., help="DMS text to decode, e.g. 20d30'40.5\"S"),
    as_json: bool = typer.Option(False, "--json", help="Output JSON instead of text"),
    pretty: bool = typer.Option(False, "--pretty", help="Pretty-print JSON output"),
):
    """Decode DMS text into decimal degrees and report the hemisphere kind."""
    try:
        value, kind = decoders.decode(dms)
        logger.debug("Decoded %r as %r (%s)", dms, value, kind.name)
        if as_json:
            payload = _with_meta({"dms": dms, "value": value, "kind": _kind_label(kind)})
            typer.echo(json.dumps(payload, indent=2 if pretty else None))
            return
        typer.echo(f"Value: {value}")
        typer.echo(f"Kind: {_kind_label(kind)}")
    except DmsException as e:
        typer.echo(f"Parse error: {e}", err=True)
        raise typer.Exit(1)


@app.command(context_settings=ANGLE_CONTEXT)
def encode(
    angle: str = typer.Argument(..., help="Angle in decimal degrees (DMS text is accepted too)"),
    trailing: str | None = typer.Option(
        None,
        "--trailing",
        "-t",
        help="Trailing unit: degree, minute or second. Without it --precision is relative to 1 degree.",
    ),
    precision: int = typer.Option(4, "--precision", "-p", help="Decimals on the trailing unit"),
    kind: str = typer.Option("none", "--kind", "-k", help="none, latitude, longitude, azimuth or number"),
    separator: str | None = typer.Option(None, "--separator", "-s", help="Separator instead of d, ' and \""),
):
    """Format an angle as DMS text."""
    try:
        value = decoders.decode_angle(angle)
        output_kind = parse_kind(kind)
        if trailing is None:
            text = encoders.encode_precision(value, precision, output_kind, separator)
        else:
            text = encoders.encode(value, parse_component(trailing), precision, output_kind, separator)
        logger.debug("Encoded %r as %r", value, text)
        typer.echo(text)
    except DmsException as e:
        typer.echo(f"Parse error: {e}", err=True)
        raise typer.Exit(1)
    except ValueError as e:
        typer.echo(f"Option error: {e}", err=True)
        raise typer.Exit(1)


@app.command(name="latlon", context_settings=ANGLE_CONTEXT)
def lat_lon(
    dms_a: str = typer.Argument(..., help="First coordinate (latitude unless it has E/W)"),
    dms_b: str = typer.Argument(..., help="Second coordinate (longitude unless it has N/S)"),
    swap: bool = typer.Option(False, "--swap", help="Read longitude first when there are no hemisphere letters"),
    as_json: bool = typer.Option(False, "--json", help="Output JSON instead of text"),
    pretty: bool = typer.Option(False, "--pretty", help="Pretty-print JSON output"),
):
    """Decode a latitude/longitude pair."""
    try:
        latitude, longitude = decoders.decode_lat_lon(dms_a, dms_b, swap_default=swap)
        logger.debug("Decoded %r, %r as lat=%r lon=%r", dms_a, dms_b, latitude, longitude)
        if as_json:
            payload = _with_meta({"lat": latitude, "lon": longitude})
            typer.echo(json.dumps(payload, indent=2 if pretty else None))
            return
        typer.echo(f"Latitude: {latitude}")
        typer.echo(f"Longitude: {longitude}")
    except DmsException as e:
        typer.echo(f"Parse error: {e}", err=True)
        raise typer.Exit(1)


@app.command(context_settings=ANGLE_CONTEXT)
def angle(dms: str = typer.Argument(..., help="Arc angle without a hemisphere letter")):
    """Decode an arc angle."""
    try:
        typer.echo(f"{decoders.decode_angle(dms)}")
    except DmsException as e:
        typer.echo(f"Parse error: {e}", err=True)
        raise typer.Exit(1)


@app.command(context_settings=ANGLE_CONTEXT)
def azimuth(dms: str = typer.Argument(..., help="Azimuth, optionally with E or W")):
    """Decode an azimuth, reduced to [-180, 180)."""
    try:
        typer.echo(f"{decoders.decode_azimuth(dms)}")
    except DmsException as e:
        typer.echo(f"Parse error: {e}", err=True)
        raise typer.Exit(1)


@app.command(context_settings=ANGLE_CONTEXT)
def convert(
    dms: str = typer.Argument(..., help="DMS text to normalize"),
    precision: int = typer.Option(4, "--precision", "-p", help="Precision relative to 1 degree"),
    separator: str | None = typer.Option(None, "--separator", "-s", help="Separator instead of d, ' and \""),
):
    """Decode DMS text and write it back in canonical form, keeping its hemisphere kind."""
    try:
        value, kind = decoders.decode(dms)
        text = encoders.encode_precision(value, precision, kind, separator)
        logger.debug("Converted %r to %r", dms, text)
        typer.echo(text)
    except DmsException as e:
        typer.echo(f"Convert error: {e}", err=True)
        raise typer.Exit(1)


def main():
    """Entry point for the CLI."""
    app()


def _kind_label(kind: Kind) -> str:
    return kind.name.lower()


def _with_meta(payload: dict[str, Any]) -> dict[str, Any]:
    meta = {
        "generator": {
            "name": "geodms",
            "version": __version__,
        }
    }
    combined = dict(payload)
    combined["_meta"] = meta
    return combined


if __name__ == "__main__":
    main()

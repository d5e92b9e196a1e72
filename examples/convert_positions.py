# /// script
# requires-python = ">=3.11"
# dependencies = ["typer>=0.9.0", "skyframes"]
#
# [tool.uv.sources]
# skyframes = { path = ".." }
# ///
"""Convert sky positions between the galactic, ICRS and ecliptic frames.

Positions are given as longitude/latitude pairs in decimal degrees, or as
sexagesimal strings with ``--sexagesimal``.  In sexagesimal mode the
longitude is read as hours when converting from ICRS, and a leading minus
sign on the latitude applies to the whole angle.

Negative coordinates are accepted as they are.  A ``--`` before the
coordinates also works and stops any further option parsing.

Requires skyframes to be installed (``uv pip install -e .`` from the repo root).

Usage:
    uv run examples/convert_positions.py NAME LON LAT [OPTIONS]

Examples:
    # Galactic centre from ICRS to galactic
    uv run examples/convert_positions.py ICRS2GAL 266.40499 -28.93617

    # Same position in sexagesimal notation
    uv run examples/convert_positions.py icrs2gal 17:45:37.2 -28:56:10.2 --sexagesimal

    # Options first, then the coordinates after --
    uv run examples/convert_positions.py --check ICRS2GAL -- 266.40499 -28.93617

    # Galactic to ecliptic
    uv run examples/convert_positions.py GAL2ECL 0 0
"""

from typing import Annotated

import typer

from skyframes import (
    SkyframesError,
    Transformation,
    apply_transformation,
    parse_dms_to_degrees,
    parse_hms_to_degrees,
    parse_signed_dms_to_degrees,
    spherical_distance_degrees,
)
from skyframes.frames import Frame

app = typer.Typer(add_completion=False)


# negative coordinates such as -28.9 look like short options to click
@app.command(context_settings={"ignore_unknown_options": True})
def main(
    name: Annotated[str, typer.Argument(help="Transformation name, e.g. ICRS2GAL")],
    lon: Annotated[str, typer.Argument(help="Longitude-like coordinate")],
    lat: Annotated[str, typer.Argument(help="Latitude-like coordinate")],
    sexagesimal: Annotated[
        bool, typer.Option(help="Parse coordinates as dd:mm:ss (RA as hh:mm:ss)")
    ] = False,
    check: Annotated[
        bool, typer.Option(help="Transform back and report the round-trip error")
    ] = False,
) -> None:
    try:
        transformation = Transformation.from_name(name)
        if sexagesimal:
            if transformation.source is Frame.ICRS:
                lon_deg = parse_hms_to_degrees(lon)
            else:
                lon_deg = parse_dms_to_degrees(lon)
            lat_deg = parse_signed_dms_to_degrees(lat)
        else:
            lon_deg = float(lon)
            lat_deg = float(lat)
    except (SkyframesError, ValueError) as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    a, b = apply_transformation(transformation, lon_deg, lat_deg)
    typer.echo(
        f"{transformation.source} ({lon_deg:.6f}, {lat_deg:.6f}) -> "
        f"{transformation.target} ({float(a):.6f}, {float(b):.6f})"
    )

    if check:
        lon_back, lat_back = transformation.inverse.apply(a, b)
        err = spherical_distance_degrees(lon_deg, lat_deg, lon_back, lat_back)
        typer.echo(f"round-trip error: {float(err) * 3600.0:.3e} arcsec")


if __name__ == "__main__":
    app()

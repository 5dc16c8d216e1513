# /// script
# requires-python = ">=3.10"
# dependencies = ["typer>=0.9.0", "skyframes"]
#
# [tool.uv.sources]
# skyframes = { path = ".." }
# ///
"""Sweep ICRS longitudes through an ICRS -> galactic -> ICRS round trip.

Transforms a ring of points at constant ICRS latitude into galactic
coordinates and back, printing each intermediate position and the angular
error of the recovered point.  All points are transformed in one vectorised
call.

Requires skyframes to be installed (``uv pip install -e .`` from the repo root).

Usage:
    uv run examples/galactic_roundtrip.py [OPTIONS]

Examples:
    # One point per degree along the celestial equator
    uv run examples/galactic_roundtrip.py

    # Coarser sweep at +45 deg declination, show only the summary
    uv run examples/galactic_roundtrip.py --step 15 --lat 45 --quiet
"""

from typing import Annotated

import jax.numpy as jnp
import typer

from skyframes import spherical_distance, transform


def main(
    step: Annotated[float, typer.Option(help="Longitude step in degrees")] = 1.0,
    lat: Annotated[float, typer.Option(help="ICRS latitude of the ring in degrees")] = 0.0,
    quiet: Annotated[bool, typer.Option(help="Print only the summary")] = False,
) -> None:
    """Print the ICRS -> galactic -> ICRS round trip for a ring of points."""
    lon = jnp.arange(-180.0, 180.0, step)
    lat_arr = jnp.full_like(lon, lat)

    gal = transform("ICRS2GAL", lon, lat_arr)
    back = transform("GAL2ICRS", gal[0], gal[1])
    err = spherical_distance(lon, lat_arr, back[0], back[1])

    if not quiet:
        for i in range(lon.shape[0]):
            print(
                f"ICRS({float(lon[i]):9.4f}, {lat:8.4f}) "
                f"-> GAL({float(gal[0, i]):9.4f}, {float(gal[1, i]):8.4f}) "
                f"-> ICRS({float(back[0, i]):9.4f}, {float(back[1, i]):8.4f})"
            )

    print(f"Points: {lon.shape[0]}")
    print(f"Max round-trip error: {float(jnp.max(err)) * 3600.0:.3e} arcsec")


if __name__ == "__main__":
    typer.run(main)

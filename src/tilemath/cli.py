"""Command-line interface for tilemath.

Small helpers for looking up tile addresses and extents from the shell,
built with Typer.
"""
import logging
from typing import Optional

import typer

from . import config
from .projection import Location
from .tile import InvalidTileError, Tile, tiles_covering

logger = logging.getLogger(__name__)

app = typer.Typer(help="Web Mercator tile arithmetic.")


@app.callback()
def main(env: str = typer.Option("DEFAULT", help="Settings environment."),
         verbose: bool = typer.Option(False, "--verbose", "-v",
                                      help="Enable debug logging.")):
    """Select the settings environment and logging level."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)
    if env != "DEFAULT":
        config.change_env(env)


def _zoom(zoom: Optional[int]) -> int:
    return config.default_zoom() if zoom is None else zoom


@app.command()
def tile(lon: float = typer.Argument(..., min=-180, max=180),
         lat: float = typer.Argument(..., min=-90, max=90),
         zoom: Optional[int] = typer.Option(None, "--zoom", "-z", min=0, max=30)):
    """Print the z/x/y tile containing a lon/lat location."""
    result = Tile.from_location(_zoom(zoom), Location(lon, lat))
    typer.echo(str(result))


@app.command()
def bounds(address: str,
           lnglat: bool = typer.Option(False, "--lnglat",
                                       help="Print degrees instead of metres.")):
    """Print the bounds of a z/x/y tile."""
    try:
        result = Tile.from_string(address)
    except InvalidTileError as err:
        typer.echo(f"Error: {err}", err=True)
        raise typer.Exit(code=1)
    values = result.lnglat_bounds() if lnglat else result.merc_bounds()
    typer.echo(" ".join(f"{value:.6f}" for value in values))


@app.command()
def cover(xmin: float, ymin: float, xmax: float, ymax: float,
          zoom: Optional[int] = typer.Option(None, "--zoom", "-z", min=0, max=30)):
    """Print every tile intersecting a Web Mercator box, one per line."""
    tiles = tiles_covering(_zoom(zoom), xmin, ymin, xmax, ymax)
    logger.debug("%d tiles", len(tiles))
    for item in tiles:
        typer.echo(str(item))


if __name__ == "__main__":
    app()

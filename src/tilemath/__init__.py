"""Slippy-map tile arithmetic for the Web Mercator projection."""

from . import config, checks, projection, tile
from .projection import (MAX_COORDINATE_EPSG3857, MERCATOR_MAX_LAT,
                         Coordinates, Location, lonlat_to_mercator,
                         mercator_to_lonlat)
from .tile import (MAX_ZOOM, InvalidTileError, Tile, clamp, mercx_to_tilex,
                   mercy_to_tiley, num_tiles_in_zoom, tile_extent_in_zoom,
                   tiles_covering, tiles_for_points)

__version__ = "0.1.0"

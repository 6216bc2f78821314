"""Tile coordinate arithmetic for the Web Mercator slippy-map scheme.

Tiles are numbered from the top left corner of the square EPSG:3857 extent:
columns grow to the east, rows grow to the south. At zoom level ``z`` there
are ``2**z`` tiles along each axis.

Projected coordinates outside the extent are never rejected. The index
functions saturate them to the nearest valid tile so that a caller always
gets a usable tile address back.
"""
import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

import mercantile
import numpy as np

from . import checks
from .projection import (MAX_COORDINATE_EPSG3857, Coordinates, Location,
                         lonlat_to_mercator)

logger = logging.getLogger(__name__)

MAX_ZOOM = 30


class InvalidTileError(ValueError):
    """Raised when text cannot be parsed into a valid tile address."""


def clamp(value, low, high):
    """Constrain ``value`` to ``[low, high]``, saturating at the bounds."""
    if value < low:
        return low
    if high < value:
        return high
    return value


def num_tiles_in_zoom(zoom: int) -> int:
    """Return the number of tiles in each direction for a zoom level."""
    return 1 << zoom


def tile_extent_in_zoom(zoom: int) -> float:
    """Return the width (and height) of one tile in Web Mercator metres."""
    return MAX_COORDINATE_EPSG3857 * 2 / num_tiles_in_zoom(zoom)


def mercx_to_tilex(zoom: int, x: float) -> int:
    """Get the tile column for a Web Mercator x coordinate.

    Tiles are numbered from left to right. Coordinates west or east of the
    extent, infinities included, are clamped to the first or last column.
    """
    index = (x + MAX_COORDINATE_EPSG3857) / tile_extent_in_zoom(zoom)
    return int(clamp(index, 0, num_tiles_in_zoom(zoom) - 1))


def mercy_to_tiley(zoom: int, y: float) -> int:
    """Get the tile row for a Web Mercator y coordinate.

    Tiles are numbered from top to bottom, so the row index decreases as
    ``y`` grows. Coordinates outside the extent are clamped.
    """
    index = (MAX_COORDINATE_EPSG3857 - y) / tile_extent_in_zoom(zoom)
    return int(clamp(index, 0, num_tiles_in_zoom(zoom) - 1))


def tiles_for_points(zoom: int, xs, ys) -> Tuple[np.ndarray, np.ndarray]:
    """Vectorised ``mercx_to_tilex``/``mercy_to_tiley`` for coordinate arrays.

    Parameters
    ----------
    zoom : int
        Zoom level.
    xs, ys : array_like
        Web Mercator coordinates in metres.

    Returns
    -------
    tuple of numpy.ndarray
        Integer (column, row) arrays with the same shape as the input.
    """
    extent = tile_extent_in_zoom(zoom)
    last = num_tiles_in_zoom(zoom) - 1
    xs = np.asarray(xs, dtype=np.float64)
    ys = np.asarray(ys, dtype=np.float64)
    tx = np.clip(np.trunc((xs + MAX_COORDINATE_EPSG3857) / extent), 0, last)
    ty = np.clip(np.trunc((MAX_COORDINATE_EPSG3857 - ys) / extent), 0, last)
    return tx.astype(np.int64), ty.astype(np.int64)


@dataclass(frozen=True, order=True)
class Tile:
    """A tile in the usual Mercator projection.

    Tiles compare equal when zoom, column and row all match. The ordering
    sorts by zoom, then column, then row. It is arbitrary but deterministic,
    which makes tiles usable as keys of sorted containers; it says nothing
    about spatial locality.

    The constructors do not validate their input. Their preconditions are
    only asserted by :mod:`tilemath.checks` in debug runs; use
    :meth:`valid` to test a tile explicitly.

    Parameters
    ----------
    z : int
        Zoom level, ``0 <= z <= 30``.
    x : int
        Column, ``x < 2**z``.
    y : int
        Row, ``y < 2**z``.
    """

    z: int
    x: int
    y: int

    max_zoom = MAX_ZOOM

    def __post_init__(self):
        if __debug__ and checks.enabled():
            assert 0 <= self.z <= MAX_ZOOM, f"zoom {self.z} out of range"
            count = num_tiles_in_zoom(self.z)
            assert 0 <= self.x < count, f"x {self.x} out of range for zoom {self.z}"
            assert 0 <= self.y < count, f"y {self.y} out of range for zoom {self.z}"

    @classmethod
    def from_location(cls, zoom: int, location: Location) -> "Tile":
        """Create the tile at ``zoom`` that contains a geographic location."""
        if __debug__ and checks.enabled():
            assert 0 <= zoom <= MAX_ZOOM, f"zoom {zoom} out of range"
            assert location.valid(), f"invalid location {location}"
        coordinates = lonlat_to_mercator(location)
        return cls(zoom, mercx_to_tilex(zoom, coordinates.x),
                   mercy_to_tiley(zoom, coordinates.y))

    @classmethod
    def from_coordinates(cls, zoom: int, coordinates: Coordinates) -> "Tile":
        """Create the tile at ``zoom`` that contains Web Mercator coordinates."""
        if __debug__ and checks.enabled():
            assert 0 <= zoom <= MAX_ZOOM, f"zoom {zoom} out of range"
            assert coordinates.valid(), f"invalid coordinates {coordinates}"
        return cls(zoom, mercx_to_tilex(zoom, coordinates.x),
                   mercy_to_tiley(zoom, coordinates.y))

    @classmethod
    def from_string(cls, text: str) -> "Tile":
        """Parse a ``"z/x/y"`` tile address.

        Raises
        ------
        InvalidTileError
            If the text is not three slash separated integers or does not
            name a valid tile.
        """
        parts = text.strip().split("/")
        if len(parts) != 3:
            raise InvalidTileError(f"expected z/x/y, got {text!r}")
        try:
            z, x, y = (int(part) for part in parts)
        except ValueError as err:
            raise InvalidTileError(f"non-integer tile address {text!r}") from err
        if not (0 <= z <= MAX_ZOOM and 0 <= x < num_tiles_in_zoom(z)
                and 0 <= y < num_tiles_in_zoom(z)):
            raise InvalidTileError(f"tile {text!r} does not exist")
        return cls(z, x, y)

    @classmethod
    def from_mercantile(cls, tile: mercantile.Tile) -> "Tile":
        return cls(tile.z, tile.x, tile.y)

    def valid(self) -> bool:
        """Check whether zoom is at most 30 and both indices fit the zoom."""
        if not 0 <= self.z <= MAX_ZOOM:
            return False
        count = num_tiles_in_zoom(self.z)
        return 0 <= self.x < count and 0 <= self.y < count

    def to_mercantile(self) -> mercantile.Tile:
        return mercantile.Tile(self.x, self.y, self.z)

    def merc_bounds(self) -> Tuple[float, float, float, float]:
        """Return (xmin, ymin, xmax, ymax) of the tile in Web Mercator metres."""
        extent = tile_extent_in_zoom(self.z)
        xmin = self.x * extent - MAX_COORDINATE_EPSG3857
        ymax = MAX_COORDINATE_EPSG3857 - self.y * extent
        return xmin, ymax - extent, xmin + extent, ymax

    def lnglat_bounds(self) -> mercantile.LngLatBbox:
        """Return the (west, south, east, north) bounds in degrees."""
        return mercantile.bounds(self.to_mercantile())

    def parent(self) -> Optional["Tile"]:
        """Return the tile one zoom level up, or None at zoom 0."""
        if self.z == 0:
            return None
        return Tile.from_mercantile(mercantile.parent(self.to_mercantile()))

    def children(self) -> List["Tile"]:
        """Return the four tiles one zoom level down, sorted."""
        return sorted(Tile.from_mercantile(child)
                      for child in mercantile.children(self.to_mercantile()))

    def __str__(self):
        return f"{self.z}/{self.x}/{self.y}"


def tiles_covering(zoom: int, xmin: float, ymin: float,
                   xmax: float, ymax: float) -> List[Tile]:
    """List the tiles at ``zoom`` that intersect a Web Mercator box.

    The box corners go through the clamped index functions, so a box that
    reaches beyond the extent covers the tiles along its edge.

    Parameters
    ----------
    zoom : int
        Zoom level.
    xmin, ymin, xmax, ymax : float
        Box in Web Mercator metres.

    Returns
    -------
    list of Tile
        Tiles in sort order.
    """
    checks.require(0 <= zoom <= MAX_ZOOM, "zoom out of range")
    if xmin > xmax:
        xmin, xmax = xmax, xmin
    if ymin > ymax:
        ymin, ymax = ymax, ymin
    x1, x2 = mercx_to_tilex(zoom, xmin), mercx_to_tilex(zoom, xmax)
    y1, y2 = mercy_to_tiley(zoom, ymax), mercy_to_tiley(zoom, ymin)
    logger.debug("Zoom %d box covers columns %d-%d, rows %d-%d",
                 zoom, x1, x2, y1, y2)
    return [Tile(zoom, x, y)
            for x in range(x1, x2 + 1)
            for y in range(y1, y2 + 1)]

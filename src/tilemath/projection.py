"""Web Mercator (EPSG:3857) projection helpers.

Provides the projected extent constant, the ``Location`` and ``Coordinates``
value types and the lon/lat to Mercator transform that the tile arithmetic
is built on.
"""
import math
from typing import NamedTuple, Tuple

import numpy as np
from pyproj import Transformer

# Half the side length of the square EPSG:3857 extent, in metres.
MAX_COORDINATE_EPSG3857 = 20037508.34

# Latitude at which the square extent ends.
MERCATOR_MAX_LAT = 85.0511288

_transformer_to_webmerc = Transformer.from_crs(
    "EPSG:4326", "EPSG:3857", always_xy=True
)
_transformer_from_webmerc = Transformer.from_crs(
    "EPSG:3857", "EPSG:4326", always_xy=True
)


class Location(NamedTuple):
    """A geographic position in degrees."""

    lon: float
    lat: float

    def valid(self) -> bool:
        """Return True when both components lie within the WGS84 range."""
        return -180.0 <= self.lon <= 180.0 and -90.0 <= self.lat <= 90.0


class Coordinates(NamedTuple):
    """A position in Web Mercator metres. Invalid until both parts are set."""

    x: float = math.nan
    y: float = math.nan

    def valid(self) -> bool:
        """Return True when neither part is NaN.

        Infinite values count as valid; the tile functions clamp them to
        the edge of the extent.
        """
        return not (math.isnan(self.x) or math.isnan(self.y))


def lonlat_to_mercator(location: Location) -> Coordinates:
    """Project a location to Web Mercator.

    Latitudes beyond ``MERCATOR_MAX_LAT`` are clamped so the poles map to
    the edge of the extent instead of to infinity.

    Parameters
    ----------
    location : Location
        Longitude/latitude in degrees.

    Returns
    -------
    Coordinates
        (x, y) in Web Mercator metres.
    """
    lat = min(max(location.lat, -MERCATOR_MAX_LAT), MERCATOR_MAX_LAT)
    x, y = _transformer_to_webmerc.transform(location.lon, lat)
    return Coordinates(float(x), float(y))


def lonlat_to_webmercator(lons: np.ndarray, lats: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """Transform longitude/latitude arrays to Web Mercator coordinates.

    Parameters
    ----------
    lons : numpy.ndarray
        Longitude values in degrees.
    lats : numpy.ndarray
        Latitude values in degrees, clamped to ``MERCATOR_MAX_LAT``.

    Returns
    -------
    tuple of numpy.ndarray
        (x, y) coordinates in Web Mercator meters.
    """
    lons = np.asarray(lons, dtype=np.float64)
    lats = np.clip(np.asarray(lats, dtype=np.float64),
                   -MERCATOR_MAX_LAT, MERCATOR_MAX_LAT)
    x, y = _transformer_to_webmerc.transform(lons, lats)
    return np.asarray(x, dtype=np.float64), np.asarray(y, dtype=np.float64)


def mercator_to_lonlat(coordinates: Coordinates) -> Location:
    """Inverse of ``lonlat_to_mercator``."""
    lon, lat = _transformer_from_webmerc.transform(coordinates.x, coordinates.y)
    return Location(float(lon), float(lat))

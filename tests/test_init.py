"""Tests for the tilemath package __init__ module."""

import tilemath


class TestPackageExports:
    """Tests for package-level exports."""

    def test_modules_are_accessible(self):
        """Submodules should be reachable from the package."""
        for name in ("config", "checks", "projection", "tile"):
            assert hasattr(tilemath, name)

    def test_tile_api_is_exported(self):
        for name in ("Tile", "num_tiles_in_zoom", "tile_extent_in_zoom",
                     "mercx_to_tilex", "mercy_to_tiley", "clamp",
                     "tiles_covering", "tiles_for_points"):
            assert hasattr(tilemath, name)

    def test_projection_api_is_exported(self):
        for name in ("Location", "Coordinates", "lonlat_to_mercator",
                     "MAX_COORDINATE_EPSG3857"):
            assert hasattr(tilemath, name)

    def test_invalid_tile_error(self):
        """InvalidTileError should be a ValueError subclass."""
        assert issubclass(tilemath.InvalidTileError, ValueError)

    def test_version(self):
        assert isinstance(tilemath.__version__, str)

"""Tests for WKT geometry materialization."""

from __future__ import annotations

from unittest.mock import patch

import geopandas as gpd
import pandas as pd
import pytest
from pyproj import CRS
from shapely.geometry import MultiPolygon, Polygon

from pydopa.errors import GeometryError, ValidationError
from pydopa.geometry import parse_crs, to_geometries
from pydopa.tables import normalize_records


@pytest.fixture
def table(wkt_table: list[dict[str, object]]) -> pd.DataFrame:
    return normalize_records(wkt_table)


class TestToGeometries:
    """Conversion of a valid WKT table."""

    def test_returns_geodataframe(self, table: pd.DataFrame) -> None:
        result = to_geometries(table, "wkt")
        assert isinstance(result, gpd.GeoDataFrame)

    def test_one_geometry_per_row(self, table: pd.DataFrame) -> None:
        assert len(to_geometries(table, "wkt")) == 3

    def test_fid_in_row_order(self, table: pd.DataFrame) -> None:
        result = to_geometries(table, "wkt")
        assert result["FID"].tolist() == [1, 2, 3]
        assert result.index.tolist() == [1, 2, 3]

    def test_attributes_follow_rows(self, table: pd.DataFrame) -> None:
        result = to_geometries(table, "wkt")
        assert result["name"].tolist() == ["Pian Upe", "Queen Elizabeth", "Kidepo Valley"]
        assert pd.isna(result.loc[2, "area"])

    def test_schema(self, table: pd.DataFrame) -> None:
        result = to_geometries(table, "wkt")
        assert list(result.columns) == ["wdpaid", "name", "iucn_cat", "area", "FID", "geometry"]
        assert "wkt" not in result.columns

    def test_geometry_types(self, table: pd.DataFrame) -> None:
        result = to_geometries(table, "wkt")
        assert isinstance(result.geometry.iloc[0], MultiPolygon)
        assert isinstance(result.geometry.iloc[1], Polygon)

    def test_default_crs(self, table: pd.DataFrame) -> None:
        result = to_geometries(table, "wkt")
        assert result.crs.to_epsg() == 4326

    def test_custom_crs(self, table: pd.DataFrame) -> None:
        result = to_geometries(table, "wkt", crs="EPSG:3067")
        assert result.crs.to_epsg() == 3067

    def test_geometry_coordinates(self, table: pd.DataFrame) -> None:
        result = to_geometries(table, "wkt")
        minx, miny, maxx, maxy = result.geometry.iloc[0].bounds
        assert (minx, miny, maxx, maxy) == pytest.approx((34.2, 1.5, 34.8, 2.2))

    def test_input_table_unchanged(self, table: pd.DataFrame) -> None:
        before = table.copy()
        to_geometries(table, "wkt")
        pd.testing.assert_frame_equal(table, before)

    def test_empty_table(self) -> None:
        empty = pd.DataFrame({"name": [], "wkt": []})
        result = to_geometries(empty, "wkt")
        assert len(result) == 0
        assert list(result.columns) == ["name", "FID", "geometry"]
        assert result.crs.to_epsg() == 4326


class TestToGeometriesErrors:
    """Failures are all-or-nothing."""

    def test_missing_column(self, table: pd.DataFrame) -> None:
        with pytest.raises(ValidationError, match="geom"):
            to_geometries(table, "geom")

    def test_missing_column_checked_before_parsing(self, table: pd.DataFrame) -> None:
        with patch("pydopa.geometry.wkt.loads") as mock_loads:
            with pytest.raises(ValidationError):
                to_geometries(table, "geom")
            mock_loads.assert_not_called()

    def test_malformed_row(self, wkt_table: list[dict[str, object]]) -> None:
        wkt_table[1]["wkt"] = "POLYGON((0 0, 1 0, 1 1"
        table = normalize_records(wkt_table)
        with pytest.raises(GeometryError, match="Row 2") as exc_info:
            to_geometries(table, "wkt")
        assert exc_info.value.row == 2

    def test_missing_wkt_value(self, wkt_table: list[dict[str, object]]) -> None:
        wkt_table[2]["wkt"] = None
        table = normalize_records(wkt_table)
        with pytest.raises(GeometryError) as exc_info:
            to_geometries(table, "wkt")
        assert exc_info.value.row == 3

    def test_non_polygon_rejected(self, wkt_table: list[dict[str, object]]) -> None:
        wkt_table[0]["wkt"] = "POINT(34.5 1.8)"
        table = normalize_records(wkt_table)
        with pytest.raises(GeometryError, match="POINT|Point") as exc_info:
            to_geometries(table, "wkt")
        assert exc_info.value.row == 1

    def test_invalid_crs(self, table: pd.DataFrame) -> None:
        with pytest.raises(ValidationError, match="coordinate reference system"):
            to_geometries(table, "wkt", crs="not-a-crs")

    def test_reserved_column_name(self, table: pd.DataFrame) -> None:
        clashing = table.assign(FID=0)
        with pytest.raises(ValidationError):
            to_geometries(clashing, "wkt")


class TestParseCrs:
    """CRS argument handling."""

    def test_legacy_init_string(self) -> None:
        assert parse_crs("+init=epsg:4326").to_epsg() == 4326

    def test_authority_string(self) -> None:
        assert parse_crs("EPSG:3035").to_epsg() == 3035

    def test_crs_instance_passthrough(self) -> None:
        crs = CRS.from_epsg(4326)
        assert parse_crs(crs) is crs

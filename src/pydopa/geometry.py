"""
WKT geometry materialization.

Several DOPA endpoints return protected-area outlines as WKT ``MULTIPOLYGON``
text in one column.  :func:`to_geometries` parses that column with shapely
and returns a ``geopandas.GeoDataFrame`` with one polygon entity per row.
"""

from __future__ import annotations

import logging
import re

import geopandas as gpd
import pandas as pd
from pyproj import CRS
from pyproj.exceptions import CRSError
from shapely import wkt
from shapely.errors import ShapelyError
from shapely.geometry import MultiPolygon, Polygon
from shapely.geometry.base import BaseGeometry

from pydopa.errors import GeometryError, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_CRS = "+init=epsg:4326"
FID_COLUMN = "FID"
GEOMETRY_COLUMN = "geometry"

_LEGACY_INIT = re.compile(r"^\s*\+init=(epsg:\d+)\s*$", re.IGNORECASE)


def parse_crs(crs: str | CRS) -> CRS:
    """Build a pyproj CRS, accepting legacy ``+init=epsg:NNNN`` strings."""
    if isinstance(crs, CRS):
        return crs
    match = _LEGACY_INIT.match(crs)
    if match:
        crs = match.group(1).upper()
    try:
        return CRS.from_user_input(crs)
    except CRSError as exc:
        msg = f"{crs!r} is not a valid coordinate reference system"
        raise ValidationError(msg) from exc


def _parse_polygon(text: object, row: int) -> BaseGeometry:
    """Parse one row's WKT text; ``row`` is the 1-based position used in errors."""
    if not isinstance(text, str) or not text.strip():
        msg = f"Row {row}: WKT value is missing or not text ({text!r})"
        raise GeometryError(msg, row=row)
    try:
        geom = wkt.loads(text)
    except ShapelyError as exc:
        msg = f"Row {row}: malformed WKT ({exc})"
        raise GeometryError(msg, row=row) from exc
    if not isinstance(geom, Polygon | MultiPolygon):
        msg = f"Row {row}: expected POLYGON or MULTIPOLYGON, got {geom.geom_type}"
        raise GeometryError(msg, row=row)
    return geom


def to_geometries(
    table: pd.DataFrame,
    wkt_column: str,
    crs: str | CRS = DEFAULT_CRS,
) -> gpd.GeoDataFrame:
    """
    Convert a table with a WKT column into a GeoDataFrame.

    Every row becomes one feature.  Its attributes are all columns except
    ``wkt_column``, plus ``FID``, the row's 1-based position, which is also
    used as the index.  Rows keep their input order.

    Args:
        table: Normalized response table.
        wkt_column: Name of the column holding WKT polygon text.
        crs: Coordinate reference system of the WKT coordinates.

    Returns:
        GeoDataFrame with as many features as ``table`` has rows.

    Raises:
        ValidationError: ``wkt_column`` is not a column of ``table``, or
            ``crs`` can't be parsed.
        GeometryError: A row's WKT is missing, malformed or not a polygon.
            Nothing is returned in that case.
    """
    if wkt_column not in table.columns:
        msg = f"{wkt_column!r} is not a valid column name"
        raise ValidationError(msg)

    attributes = table.drop(columns=[wkt_column])
    if GEOMETRY_COLUMN in attributes.columns or FID_COLUMN in attributes.columns:
        msg = f"Table already has a {GEOMETRY_COLUMN!r} or {FID_COLUMN!r} column"
        raise ValidationError(msg)
    crs = parse_crs(crs)

    fids = list(range(1, len(table) + 1))
    geometries = [
        _parse_polygon(text, row)
        for row, text in zip(fids, table[wkt_column].tolist(), strict=True)
    ]
    logger.debug("Parsed %d WKT geometries from column %r", len(geometries), wkt_column)

    index = pd.Index(fids, dtype="int64")
    attributes = attributes.set_axis(index, axis=0)
    attributes.insert(len(attributes.columns), FID_COLUMN, fids)
    attributes[FID_COLUMN] = attributes[FID_COLUMN].astype("int64")

    return gpd.GeoDataFrame(
        attributes,
        geometry=gpd.GeoSeries(geometries, index=index, crs=crs),
    )

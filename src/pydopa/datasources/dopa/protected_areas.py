"""Protected-area endpoints."""

from __future__ import annotations

import geopandas as gpd
import pandas as pd

from pydopa.datasources.dopa import client
from pydopa.geometry import DEFAULT_CRS, to_geometries
from pydopa.reference.iucn import pa_categories
from pydopa.resolve import CountryIdentifier, resolve_country
from pydopa.tables import normalize_records

#: Column holding the protected-area outline as WKT MULTIPOLYGON text.
PA_WKT_COLUMN = "wkt"

__all__ = ["PA_WKT_COLUMN", "pa_categories", "pa_country_stats"]


def pa_country_stats(
    country: CountryIdentifier,
    *,
    geometries: bool = False,
    crs: str = DEFAULT_CRS,
    cache: bool = True,
) -> pd.DataFrame | gpd.GeoDataFrame:
    """
    Statistics for every protected area of a country.

    Each row is one protected area (WDPA id, IUCN category, name, extent,
    area and habitat indicators).

    Args:
        country: Country name or ISO 3166-1 numeric code.
        geometries: Return a GeoDataFrame built from the ``wkt`` column.
        crs: CRS of the WKT coordinates, used when ``geometries`` is set.
        cache: Use the on-disk response cache.
    """
    params = {"country_id": resolve_country(country)}
    table = normalize_records(client.get_records(client.PA_COUNTRY_STATS, params, cache=cache))
    if geometries:
        return to_geometries(table, PA_WKT_COLUMN, crs=crs)
    return table

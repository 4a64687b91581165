"""Country-level species endpoints: country list, species counts and lists."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import pandas as pd

from pydopa.datasources.dopa import client
from pydopa.errors import ResponseError
from pydopa.resolve import CountryIdentifier, resolve_country
from pydopa.tables import normalize_records
from pydopa.validation import validate_statuses


def _country_params(
    country: CountryIdentifier,
    status: Sequence[str] | str | None = None,
) -> dict[str, Any]:
    params: dict[str, Any] = {"country_id": resolve_country(country)}
    if status is not None:
        params["rlstatus"] = ",".join(validate_statuses(status))
    return params


def country_list(*, cache: bool = True) -> pd.DataFrame:
    """All countries known to DOPA, with their ISO codes and summary figures."""
    return normalize_records(client.get_records(client.COUNTRY_LIST, cache=cache))


def country_species_count(
    country: CountryIdentifier,
    status: Sequence[str] | str | None = None,
    *,
    cache: bool = True,
) -> int:
    """
    Number of species whose range intersects a country.

    Args:
        country: Country name or ISO 3166-1 numeric code.
        status: IUCN status code(s) to restrict the count to. All statuses
            when None.
        cache: Use the on-disk response cache.

    Returns:
        Species count, summed over the requested statuses.
    """
    params = _country_params(country, status)
    records = client.get_records(client.COUNTRY_SPECIES_COUNT, params, cache=cache)
    table = normalize_records(records)
    if "count" not in table.columns:
        msg = f"Species count response for country {params['country_id']} has no 'count' field"
        raise ResponseError(msg)
    counts = pd.to_numeric(table["count"], errors="coerce")
    return int(counts.fillna(0).sum())


def country_species_list(
    country: CountryIdentifier,
    status: Sequence[str] | str | None = None,
    *,
    cache: bool = True,
) -> pd.DataFrame:
    """
    Species whose range intersects a country.

    One row per species with IUCN id, taxonomy, Red List status and common
    name, plus the country's id and name.
    """
    params = _country_params(country, status)
    return normalize_records(
        client.get_records(client.COUNTRY_SPECIES_LIST, params, cache=cache)
    )


def country_stats(country: CountryIdentifier, *, cache: bool = True) -> pd.DataFrame:
    """Species counts of a country broken down by IUCN status and taxonomic class."""
    params = _country_params(country)
    return normalize_records(client.get_records(client.COUNTRY_STATS, params, cache=cache))

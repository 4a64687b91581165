"""DOPA (Digital Observatory for Protected Areas) data source.

Public API:
  - client: URLs, record fetching with on-disk cache
  - species: country_list, country_species_count, country_species_list, country_stats
  - protected_areas: pa_country_stats, pa_categories
"""

from pydopa.datasources.dopa.protected_areas import pa_categories, pa_country_stats
from pydopa.datasources.dopa.species import (
    country_list,
    country_species_count,
    country_species_list,
    country_stats,
)

__all__ = [
    "country_list",
    "country_species_count",
    "country_species_list",
    "country_stats",
    "pa_categories",
    "pa_country_stats",
]

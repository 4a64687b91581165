"""Static reference data.

Vocabularies that don't change with API calls: IUCN Red List status codes,
IUCN protected-area management categories, and the ISO 3166-1 country table.
"""

from pydopa.reference.countries import DEFAULT_COUNTRY_TABLE as DEFAULT_COUNTRY_TABLE
from pydopa.reference.countries import CountryTable as CountryTable
from pydopa.reference.iucn import PA_CATEGORIES as PA_CATEGORIES
from pydopa.reference.iucn import IUCNStatus as IUCNStatus
from pydopa.reference.iucn import pa_categories as pa_categories

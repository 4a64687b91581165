"""pydopa - Python client for the DOPA (Digital Observatory for Protected Areas) services.

Architecture::

    datasources/dopa/  Endpoint wrappers (country list, species, protected areas)
    store.py           On-disk response cache with TTL
    services/          Shared HTTP client with retry
    reference/         IUCN vocabularies and the ISO 3166-1 country table
    validation.py      IUCN status code checking
    resolve.py         Country name / numeric code resolution
    tables.py          JSON records -> pandas DataFrame
    geometry.py        WKT column -> geopandas GeoDataFrame

Data flow: arguments → validation/resolve → client (cache, HTTP) → tables → geometry
"""

__version__ = "0.1.0"

from pydopa.config import Settings, get_settings
from pydopa.errors import DopaError, GeometryError, ResolutionError, ResponseError, ValidationError
from pydopa.geometry import to_geometries
from pydopa.reference.iucn import IUCNStatus, pa_categories
from pydopa.resolve import resolve_country
from pydopa.tables import MISSING, normalize_records
from pydopa.validation import InvalidStatusWarning, validate_statuses

__all__ = [
    "MISSING",
    "DopaError",
    "GeometryError",
    "IUCNStatus",
    "InvalidStatusWarning",
    "ResolutionError",
    "ResponseError",
    "Settings",
    "ValidationError",
    "__version__",
    "get_settings",
    "normalize_records",
    "pa_categories",
    "resolve_country",
    "to_geometries",
    "validate_statuses",
]

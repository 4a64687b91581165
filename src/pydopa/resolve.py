"""Country identity resolution.

A country can be given as an ISO 3166-1 numeric code (``246``), as a
numeric-looking string (``"246"``) or as a name (``"Finland"``).  Everything
is resolved against a :class:`~pydopa.reference.countries.CountryTable`.

Examples::

    resolve_country("Finland")                # 246
    resolve_country(156)                      # 156
    resolve_country(156, full_name=True)      # "China"
    resolve_country("finland", full_name=True)  # "Finland"
"""

from __future__ import annotations

import math
from numbers import Real

from pydopa.errors import ResolutionError
from pydopa.reference.countries import DEFAULT_COUNTRY_TABLE, CountryTable

CountryIdentifier = int | float | str


def _as_number(value: str) -> float | None:
    """Parse a string as a finite number, or return None."""
    try:
        number = float(value)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def resolve_country(
    country: CountryIdentifier,
    full_name: bool = False,
    *,
    table: CountryTable | None = None,
) -> int | str:
    """
    Resolve a country name or numeric code.

    Args:
        country: Country name or ISO 3166-1 numeric code.
        full_name: Return the canonical country name instead of the code.
        table: Reference table (defaults to the pycountry-backed table).

    Returns:
        The numeric code as ``int``, or the canonical name if ``full_name``.

    Raises:
        ResolutionError: Name not matched, or code not in ISO 3166-1.
        TypeError: ``country`` is neither a string nor a number.
    """
    if table is None:
        table = DEFAULT_COUNTRY_TABLE

    if isinstance(country, str):
        number = _as_number(country)
        if number is not None:
            country = number

    if isinstance(country, str):
        code = table.code_for_name(country)
        if code is None:
            msg = f"Country name {country!r} was not matched to an ISO code"
            raise ResolutionError(msg)
        if full_name:
            return table.name_for_code(code)  # type: ignore[return-value]
        return code

    if isinstance(country, Real) and not isinstance(country, bool) and math.isfinite(country):
        if country != int(country) or not table.is_valid_code(int(country)):
            msg = f"Country code {country} is not a valid ISO 3166-1 code"
            raise ResolutionError(msg)
        code = int(country)
        if full_name:
            return table.name_for_code(code)  # type: ignore[return-value]
        return code

    msg = (
        "country must be either a string country name or a numeric ISO 3166-1 "
        f"country code, got {country!r}"
    )
    raise TypeError(msg)

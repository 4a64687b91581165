"""ISO 3166-1 country reference table.

Wraps ``pycountry`` in a read-only lookup with the three operations the
resolver needs: name -> numeric code, numeric code -> name, and a membership
test on numeric codes.  Names are matched case-insensitively against the
ISO short name, official name, common name, alpha-2/alpha-3 codes and a small
catalogue of everyday aliases that ISO spells differently.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

import pycountry

# Everyday names that differ from every ISO spelling, keyed to numeric code.
COMMON_ALIASES: dict[str, int] = {
    "vietnam": 704,
    "russia": 643,
    "south korea": 410,
    "korea": 410,
    "north korea": 408,
    "iran": 364,
    "syria": 760,
    "laos": 418,
    "bolivia": 68,
    "venezuela": 862,
    "tanzania": 834,
    "moldova": 498,
    "czech republic": 203,
    "ivory coast": 384,
    "macedonia": 807,
    "swaziland": 748,
    "burma": 104,
    "cape verde": 132,
    "east timor": 626,
    "united states of america": 840,
    "usa": 840,
    "uk": 826,
    "great britain": 826,
    "holland": 528,
    "the netherlands": 528,
    "vatican": 336,
    "brunei": 96,
    "micronesia": 583,
    "palestine": 275,
}


def _key(name: str) -> str:
    return " ".join(name.casefold().split())


@dataclass(frozen=True)
class CountryEntry:
    """One row of the reference table."""

    code: int
    name: str
    aliases: tuple[str, ...] = field(default_factory=tuple)


class CountryTable:
    """Read-only ISO 3166-1 numeric code / name lookup."""

    def __init__(
        self,
        entries: Iterable[CountryEntry],
        aliases: Mapping[str, int] | None = None,
    ) -> None:
        self._names: dict[int, str] = {}
        self._codes_by_key: dict[str, int] = {}
        for entry in entries:
            self._names[entry.code] = entry.name
            for alias in (entry.name, *entry.aliases):
                self._codes_by_key.setdefault(_key(alias), entry.code)
        for alias, code in (aliases or {}).items():
            if code in self._names:
                self._codes_by_key.setdefault(_key(alias), code)

    @classmethod
    def from_pycountry(cls) -> CountryTable:
        """Build the table from the ISO 3166-1 database shipped with pycountry."""
        entries = []
        for country in pycountry.countries:
            short_name = getattr(country, "common_name", None) or country.name
            aliases = tuple(
                value
                for value in (
                    country.name,
                    getattr(country, "official_name", None),
                    country.alpha_2,
                    country.alpha_3,
                )
                if value
            )
            entries.append(CountryEntry(code=int(country.numeric), name=short_name, aliases=aliases))
        return cls(entries, aliases=COMMON_ALIASES)

    def __len__(self) -> int:
        return len(self._names)

    def code_for_name(self, name: str) -> int | None:
        """Numeric code for a country name, or None if unmatched."""
        return self._codes_by_key.get(_key(name))

    def name_for_code(self, code: int) -> str | None:
        """Canonical short name for a numeric code, or None if unknown."""
        return self._names.get(code)

    def canonical_name(self, name: str) -> str | None:
        """Normalize spelling and casing of a country name (name -> name)."""
        code = self.code_for_name(name)
        return None if code is None else self._names[code]

    def is_valid_code(self, code: int) -> bool:
        return code in self._names

    @property
    def codes(self) -> frozenset[int]:
        return frozenset(self._names)


DEFAULT_COUNTRY_TABLE = CountryTable.from_pycountry()

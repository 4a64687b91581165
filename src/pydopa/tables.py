"""
Normalization of DOPA responses into tables.

DOPA answers with a list of records, each a flat JSON object whose values may
be ``null``.  Records of one response don't always carry the same keys.
:func:`normalize_records` turns that into a rectangular ``pandas.DataFrame``:

* columns are the union of all record keys, in first-seen order;
* one row per record, in input order, with a fresh ``RangeIndex``;
* nulls and absent keys become :data:`MISSING` (``pandas.NA``).

An empty record list gives an empty frame with no rows and no columns.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from typing import Any

import pandas as pd

#: Marker used for null or absent field values.
MISSING = pd.NA

RawRecord = Mapping[str, Any]


def _is_null(value: Any) -> bool:
    if value is None or value is MISSING:
        return True
    return isinstance(value, float) and math.isnan(value)


def _present(value: Any) -> Any:
    return MISSING if _is_null(value) else value


def union_columns(records: Sequence[RawRecord]) -> list[str]:
    """Return every key seen across ``records``, in first-seen order."""
    columns: dict[str, None] = {}
    for record in records:
        for key in record:
            columns.setdefault(key, None)
    return list(columns)


def normalize_records(
    records: Sequence[RawRecord],
    *,
    infer_types: bool = True,
    categorical_strings: bool = False,
) -> pd.DataFrame:
    """
    Bind a list of records into a single table.

    Args:
        records: Parsed JSON records (mappings of field name to scalar/None).
        infer_types: Convert columns to pandas nullable dtypes so numbers
            stay numeric and missing values stay ``pd.NA``.
        categorical_strings: Store string columns as ``category`` dtype.

    Returns:
        DataFrame with one row per record.
    """
    if not records:
        return pd.DataFrame()

    columns = union_columns(records)
    rows = [[_present(record.get(col)) for col in columns] for record in records]
    table = pd.DataFrame(rows, columns=columns, dtype=object)

    if infer_types:
        table = table.convert_dtypes()
    if categorical_strings:
        for col in table.columns:
            if pd.api.types.is_string_dtype(table[col]) and not table[col].isna().all():
                table[col] = table[col].astype("category")

    return table.reset_index(drop=True)

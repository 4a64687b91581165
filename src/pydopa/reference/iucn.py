"""IUCN vocabularies: Red List statuses and protected-area categories."""

from __future__ import annotations

from enum import StrEnum

import pandas as pd


class IUCNStatus(StrEnum):
    """IUCN Red List conservation status codes."""

    CR = "CR"
    EN = "EN"
    VU = "VU"
    NT = "NT"
    LC = "LC"
    EX = "EX"
    EW = "EW"
    DD = "DD"

    @property
    def description(self) -> str:
        return STATUS_DESCRIPTIONS[self]


STATUS_DESCRIPTIONS: dict[IUCNStatus, str] = {
    IUCNStatus.CR: "Critically Endangered",
    IUCNStatus.EN: "Endangered",
    IUCNStatus.VU: "Vulnerable",
    IUCNStatus.NT: "Near Threatened",
    IUCNStatus.LC: "Least Concern",
    IUCNStatus.EX: "Extinct",
    IUCNStatus.EW: "Extinct in the Wild",
    IUCNStatus.DD: "Data Deficient",
}

VALID_STATUS_CODES: frozenset[str] = frozenset(s.value for s in IUCNStatus)

# (iucn_cat, desc); the category code is the row position.
PA_CATEGORIES: tuple[tuple[str, str], ...] = (
    ("0", "Unknown"),
    ("Ia", "Strict Nature Reserve"),
    ("Ib", "Wilderness Area"),
    ("II", "National park"),
    ("III", "Natural Monument or Feature"),
    ("IV", "Habitat/Species Management Area"),
    ("V", "Protected Landscape/ Seascape"),
    ("VI", "Protected area with sustainable use of natural resources"),
    ("Not Reported", ""),
    ("Not Applicable", ""),
)


def pa_categories() -> pd.DataFrame:
    """Return the IUCN protected-area categories as a table.

    Columns are ``iucn_cat``, ``desc`` and ``category`` (0-9, matching row
    position). A new frame is built on every call.
    """
    return pd.DataFrame(
        {
            "iucn_cat": [cat for cat, _ in PA_CATEGORIES],
            "desc": [desc for _, desc in PA_CATEGORIES],
            "category": list(range(len(PA_CATEGORIES))),
        }
    )

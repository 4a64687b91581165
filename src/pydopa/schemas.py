"""
Response models for the DOPA REST services.

The services wrap their payload in a JSON object with a ``records`` array and
an optional ``metadata`` object.  Only the envelope is validated here; the
record contents vary per endpoint and are normalized by :mod:`pydopa.tables`.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class DopaResponse(BaseModel):
    """Envelope returned by every DOPA endpoint."""

    model_config = {"extra": "allow"}

    records: list[dict[str, Any]] = Field(..., description="One object per result row")
    metadata: dict[str, Any] | None = None

"""Shared fixtures: isolate settings and the response cache per test."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from pydopa.config import get_settings
from pydopa.datasources.dopa import client
from pydopa.services import http


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point the cache at a temp dir and rebuild settings from the environment."""
    cache_dir = tmp_path / "cache"
    monkeypatch.setenv("PYDOPA_CACHE_DIR", str(cache_dir))
    monkeypatch.setenv("PYDOPA_API_BASE", "https://dopa.test/services")
    get_settings.cache_clear()
    client.get_cache.cache_clear()
    http.get_session.cache_clear()
    yield cache_dir
    get_settings.cache_clear()
    client.get_cache.cache_clear()
    http.get_session.cache_clear()


@pytest.fixture
def wkt_table() -> list[dict[str, object]]:
    """Three protected areas with polygon outlines, as DOPA returns them."""
    return [
        {
            "wdpaid": 1435,
            "name": "Pian Upe",
            "iucn_cat": "III",
            "area": 2154,
            "wkt": "MULTIPOLYGON(((34.2 1.5,34.8 1.5,34.8 2.2,34.2 2.2,34.2 1.5)))",
        },
        {
            "wdpaid": 1436,
            "name": "Queen Elizabeth",
            "iucn_cat": "II",
            "area": None,
            "wkt": "POLYGON((29.6 -0.4,30.2 -0.4,30.2 0.2,29.6 0.2,29.6 -0.4))",
        },
        {
            "wdpaid": 1437,
            "name": "Kidepo Valley",
            "iucn_cat": "II",
            "area": 1442,
            "wkt": "POLYGON((33.6 3.6,34.1 3.6,34.1 4.1,33.6 4.1,33.6 3.6))",
        },
    ]

"""
DOPA REST client.

Low-level helper shared by all endpoint wrappers: builds the URL, consults
the response cache, performs the GET and validates the ``records`` envelope.

API root: https://dopa-services.jrc.ec.europa.eu/services
"""

from __future__ import annotations

import logging
from datetime import timedelta
from functools import lru_cache
from typing import Any

import requests
from pydantic import ValidationError as PydanticValidationError

from pydopa.config import get_settings
from pydopa.errors import ResponseError
from pydopa.schemas import DopaResponse
from pydopa.services.http import get_session
from pydopa.store import ResponseCache, cache_key

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Endpoints (relative to settings.api_base)
# ---------------------------------------------------------------------------
COUNTRY_LIST = "especies/get_country_list"
COUNTRY_SPECIES_COUNT = "especies/get_country_species_count"
COUNTRY_SPECIES_LIST = "especies/get_country_species_list"
COUNTRY_STATS = "especies/get_country_stats"
PA_COUNTRY_STATS = "especies/get_pa_country_stats"


@lru_cache
def get_cache() -> ResponseCache:
    """Response cache configured from settings."""
    settings = get_settings()
    return ResponseCache(settings.cache_dir, ttl=timedelta(hours=settings.cache_ttl_hours))


def build_url(endpoint: str) -> str:
    return f"{get_settings().api_base.rstrip('/')}/{endpoint.lstrip('/')}"


def _get(url: str, params: dict[str, Any]) -> list[dict[str, Any]]:
    """GET a DOPA endpoint and return its ``records`` array."""
    resp = get_session().get(url, params=params)
    resp.raise_for_status()
    try:
        payload = resp.json()
    except requests.JSONDecodeError as exc:
        msg = f"Response from {url} is not valid JSON"
        raise ResponseError(msg, url=url) from exc
    try:
        envelope = DopaResponse.model_validate(payload)
    except PydanticValidationError as exc:
        msg = f"Response from {url} has no 'records' array"
        raise ResponseError(msg, url=url) from exc
    return envelope.records


def get_records(
    endpoint: str,
    params: dict[str, Any] | None = None,
    *,
    cache: bool = True,
) -> list[dict[str, Any]]:
    """
    Fetch the records of one DOPA endpoint.

    Args:
        endpoint: Path relative to the API root (e.g. ``COUNTRY_LIST``).
        params: Query parameters.
        cache: Read from and write to the response cache.

    Returns:
        List of raw record dicts, in service order.
    """
    params = params or {}
    url = build_url(endpoint)
    key = cache_key(endpoint, params)
    store = get_cache()

    if cache and store.is_fresh(key):
        logger.info("Loading cached response for %s %s", endpoint, params)
        cached: list[dict[str, Any]] = store.read(key) or []
        return cached

    logger.debug("GET %s %s", url, params)
    records = _get(url, params)
    logger.info("Fetched %d records from %s", len(records), endpoint)
    if cache:
        store.write(key, records, source=url, params=params)
    return records

"""On-disk cache for DOPA responses.

Each response is stored as one JSON file under the cache directory, wrapped
in a metadata envelope with ``valid_until`` so repeated calls can skip the
network while the entry is still fresh.  File names are derived from the
endpoint path and its sorted query parameters.
"""

from __future__ import annotations

import hashlib
import json
import logging
import tempfile
from datetime import UTC, datetime, timedelta
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def cache_key(endpoint: str, params: dict[str, Any] | None = None) -> Path:
    """Relative cache path for an endpoint + query parameters."""
    query = json.dumps(params or {}, sort_keys=True, default=str)
    digest = hashlib.sha1(f"{endpoint}?{query}".encode(), usedforsecurity=False).hexdigest()
    name = endpoint.strip("/").replace("/", "_")
    return Path(f"{name}-{digest[:16]}.json")


class ResponseCache:
    """Reads and writes cached responses with a TTL."""

    def __init__(self, base_dir: Path, ttl: timedelta = timedelta(hours=24)) -> None:
        self.base = base_dir
        self.ttl = ttl

    def read(self, path: Path) -> Any | None:
        """Return the cached ``data`` payload, or None if the file doesn't exist."""
        envelope = self.read_raw(path)
        if envelope is None:
            return None
        return envelope.get("data")

    def read_raw(self, path: Path) -> dict[str, Any] | None:
        """Read the full envelope (meta + data)."""
        full = self._resolve(path)
        if not full.exists():
            return None
        with full.open(encoding="utf-8") as f:
            result: dict[str, Any] = json.load(f)
        return result

    def write(
        self,
        path: Path,
        data: Any,
        source: str,
        valid_until: datetime | None = None,
        **params: Any,
    ) -> Path:
        """Write data wrapped in a metadata envelope.

        Args:
            path: Relative path under the cache directory.
            data: Payload to store under the ``data`` key.
            source: URL the payload was fetched from.
            valid_until: Expiry timestamp; defaults to now + ``ttl``.
            **params: Extra metadata fields (query params, etc.).

        Returns:
            Absolute path of the written file.
        """
        full = self._resolve(path)
        full.parent.mkdir(parents=True, exist_ok=True)

        now = datetime.now(UTC)
        meta: dict[str, Any] = {
            "source": source,
            "fetched_at": now.isoformat(),
            "valid_until": (valid_until or now + self.ttl).isoformat(),
        }
        if params:
            meta.update(params)

        # Write beside the target and rename, so readers never see a partial file.
        f = tempfile.NamedTemporaryFile(
            "w", encoding="utf-8", dir=full.parent, prefix=f".{full.name}.", suffix=".tmp", delete=False
        )
        tmp = Path(f.name)
        try:
            with f:
                json.dump({"meta": meta, "data": data}, f, indent=2, default=str)
            tmp.replace(full)
        except BaseException:
            tmp.unlink(missing_ok=True)
            raise
        return full

    def is_fresh(self, path: Path) -> bool:
        """True if the file exists, parses, and its ``valid_until`` is in the future."""
        try:
            envelope = self.read_raw(path)
        except json.JSONDecodeError:
            logger.warning("Ignoring unreadable cache entry %s", path)
            return False
        if envelope is None:
            return False

        valid_until = envelope.get("meta", {}).get("valid_until")
        if valid_until is None:
            return False

        expiry = datetime.fromisoformat(valid_until)
        if expiry.tzinfo is None:
            expiry = expiry.replace(tzinfo=UTC)
        return datetime.now(UTC) < expiry

    def clear(self) -> int:
        """Delete every cached response; returns the number of files removed."""
        if not self.base.exists():
            return 0
        removed = 0
        for file in self.base.glob("*.json"):
            file.unlink()
            removed += 1
        return removed

    def _resolve(self, path: Path) -> Path:
        full = self.base / path if not path.is_absolute() else path
        try:
            full.resolve().relative_to(self.base.resolve())
        except ValueError:
            msg = f"Path escapes cache directory: {path}"
            raise ValueError(msg) from None
        return full

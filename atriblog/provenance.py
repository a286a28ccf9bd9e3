"""Provenance metadata describing whether data came from the API or the local store."""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any

from atriblog.selectors import unwrap_single_key_array


@dataclass
class DataProvenance:
    """Where data came from and, for local data, when it was last synced."""

    source: str
    synced_at: datetime | None = None
    reason: str = ""
    resource_type: str = ""
    freshness: Any = None


def _as_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def _rfc3339(moment: datetime) -> str:
    return _as_utc(moment).strftime("%Y-%m-%dT%H:%M:%SZ")


def wrap_with_provenance(data: Any, provenance: DataProvenance) -> dict[str, Any]:
    """Build ``{"results": ..., "meta": {...}}`` around a response.

    Raw ``bytes``/``str`` bodies are decoded as JSON when valid and kept as text
    otherwise; other values are taken as already decoded.
    """
    meta: dict[str, Any] = {"source": provenance.source}
    if provenance.synced_at is not None:
        meta["synced_at"] = _rfc3339(provenance.synced_at)
    if provenance.reason:
        meta["reason"] = provenance.reason
    if provenance.resource_type:
        meta["resource_type"] = provenance.resource_type
    if provenance.freshness is not None:
        meta["freshness"] = provenance.freshness

    if isinstance(data, (bytes, bytearray, str)):
        text = data.decode("utf-8", errors="replace") if isinstance(data, (bytes, bytearray)) else data
        try:
            results: Any = unwrap_single_key_array(json.loads(text))
        except ValueError:
            results = text
    else:
        results = unwrap_single_key_array(data)
    return {"results": results, "meta": meta}


def describe_provenance(
    count: int, provenance: DataProvenance, now: datetime | None = None
) -> str:
    """The one-line summary shown to terminal users about where results came from."""
    if provenance.source == "live":
        return f"{count} results (live)"
    age = "unknown"
    if provenance.synced_at is not None:
        current = _as_utc(now) if now is not None else datetime.now(timezone.utc)
        elapsed = current - _as_utc(provenance.synced_at)
        hours = elapsed.total_seconds() / 3600
        if elapsed < timedelta(minutes=1):
            age = "just now"
        elif elapsed < timedelta(hours=1):
            age = f"{int(elapsed.total_seconds() / 60)} minutes ago"
        elif elapsed < timedelta(hours=24):
            age = f"{int(hours)} hours ago"
        else:
            age = f"{int(hours / 24)} days ago"
    prefix = "API unreachable. " if provenance.reason == "api_unreachable" else ""
    return f"{prefix}{count} results (cached, synced {age})"


def default_db_path(name: str) -> Path:
    """Canonical location of the local SQLite database for the named tool."""
    return Path.home() / ".local" / "share" / name / "data.db"
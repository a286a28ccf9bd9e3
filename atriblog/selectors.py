"""Field selection, compaction and envelope unwrapping for decoded JSON values."""

from __future__ import annotations

from typing import Any

_COMPACT_VERBOSE_FIELDS = frozenset(
    {"description", "body", "content", "comments", "attachments", "html", "markdown"}
)

_COMPACT_KEEP_FIELDS = frozenset(
    {
        # Identity
        "id", "name", "title", "identifier", "code", "slug", "key",
        # Categorization
        "status", "state", "type", "kind", "priority",
        # Communication
        "url", "email",
        # Monetary
        "price", "amount", "cost", "fare", "rate", "currency",
        # Metrics
        "rating", "score", "count",
        # Locale / geo
        "language", "locale", "country", "region", "city", "domain",
        # Temporal
        "created_at", "updated_at", "createdAt", "updatedAt", "date",
        # Versioning
        "version",
    }
)

_SUCCESS_STATUSES = frozenset({"success", "ok", "OK", "Success"})

_COLLECTION_KEYS = frozenset({"results", "data", "items", "nodes", "entries", "records"})


def camel_to_kebab(name: str) -> str:
    """Convert ``orderDate`` to ``order-date`` by splitting on lower-to-upper boundaries."""
    out: list[str] = []
    previous = ""
    for ch in name:
        if previous and ch.isupper() and previous.islower():
            out.append("-")
        out.append(ch.lower())
        previous = ch
    return "".join(out)


def _match_segment(
    field_name: str, keep_whole: set[str], sub_paths: dict[str, list[list[str]]]
) -> str:
    lower = field_name.lower()
    if lower in keep_whole or lower in sub_paths:
        return lower
    kebab = camel_to_kebab(field_name)
    if kebab != lower and (kebab in keep_whole or kebab in sub_paths):
        return kebab
    return ""


def _filter_rec(data: Any, paths: list[list[str]]) -> Any:
    if isinstance(data, list):
        return [_filter_rec(element, paths) for element in data]
    if not isinstance(data, dict):
        return data

    keep_whole: set[str] = set()
    sub_paths: dict[str, list[list[str]]] = {}
    for path in paths:
        if not path:
            continue
        head, *rest = path
        if rest:
            sub_paths.setdefault(head, []).append(rest)
        else:
            keep_whole.add(head)

    filtered: dict[str, Any] = {}
    matched_any = False
    for key, value in data.items():
        matched = _match_segment(key, keep_whole, sub_paths)
        if not matched:
            continue
        matched_any = True
        if matched in keep_whole:
            filtered[key] = value
        elif matched in sub_paths:
            filtered[key] = _filter_rec(value, sub_paths[matched])

    if not matched_any:
        # Treat the object as a list envelope when it holds at least one array.
        if any(isinstance(value, list) for value in data.values()):
            filtered = {
                key: _filter_rec(value, paths) if isinstance(value, list) else value
                for key, value in data.items()
            }
    return filtered


def filter_fields(data: Any, fields: str) -> Any:
    """Keep only the comma-separated fields, descending dotted paths and arrays."""
    paths = [
        [part.lower() for part in field.split(".")]
        for field in (f.strip() for f in fields.split(","))
        if field
    ]
    if not paths:
        return data
    return _filter_rec(data, paths)


def extract_response_data(data: Any) -> Any:
    """Unwrap ``{"status": "success", "data": ...}`` envelopes; leave anything else."""
    if not isinstance(data, dict):
        return data
    status = data.get("status")
    if status is not None and not isinstance(status, str):
        return data
    if "data" not in data or not status:
        return data
    if status in _SUCCESS_STATUSES:
        return data["data"]
    return data


def is_compact_scalar(value: Any) -> bool:
    """True for null, booleans, numbers and strings; False for containers."""
    return value is None or isinstance(value, (bool, int, float, str))


def _compact_list(items: list[dict[str, Any] | None]) -> list[Any]:
    keep = set(_COMPACT_KEEP_FIELDS)
    rows = [item for item in items if item is not None]
    if items:
        counts: dict[str, int] = {}
        for item in rows:
            for key, value in item.items():
                if key in _COMPACT_VERBOSE_FIELDS or not is_compact_scalar(value):
                    continue
                counts[key] = counts.get(key, 0) + 1
        total = len(items)
        threshold = (total * 4 + 4) // 5
        if total >= 2:
            threshold = min(threshold, total - 1)
        keep.update(key for key, count in counts.items() if count >= threshold)

    result: list[Any] = []
    for item in items:
        if item is None:
            result.append(None)
            continue
        compact = {key: value for key, value in item.items() if key in keep}
        result.append(compact or item)
    return result


def compact_fields(data: Any) -> Any:
    """Reduce data to its high-value fields for agent consumption.

    Arrays of objects keep an allow-list plus keys present in most rows;
    single objects drop known verbose fields.
    """
    if isinstance(data, list) and all(item is None or isinstance(item, dict) for item in data):
        return _compact_list(data)
    if isinstance(data, dict):
        return {k: v for k, v in data.items() if k not in _COMPACT_VERBOSE_FIELDS}
    return data


def unwrap_single_key_array(data: Any) -> Any:
    """Flatten ``{"results": [...]}``-style single-key collection envelopes."""
    if not isinstance(data, dict) or len(data) != 1:
        return data
    ((key, value),) = data.items()
    if key in _COLLECTION_KEYS and isinstance(value, list):
        return value
    return data
"""Terminal colouring and cell formatting for human-readable output."""

from __future__ import annotations

import json
import math
import os
import sys
from dataclasses import dataclass
from typing import Any, Mapping, TextIO

_ISO_PREFIX_LEN = 19
_CELL_WIDTH = 60
_SUMMARY_WIDTH = 80
_NUM_TIERS = 5

_EXACT_TIERS = {
    "id": 0, "name": 0, "title": 0, "slug": 0, "key": 0,
    "date": 1, "created": 1, "updated": 1, "createdat": 1, "updatedat": 1,
    "status": 2, "state": 2, "statuscode": 2,
    "summary": 3, "description": 3, "price": 3, "amount": 3, "total": 3,
    "cost": 3, "points": 3, "score": 3,
    "type": 4, "kind": 4, "category": 4, "email": 4, "phone": 4, "url": 4,
}

_SUFFIX_TIERS = {
    "id": 0, "name": 0, "title": 0,
    "date": 1, "time": 1,
    "status": 2, "state": 2, "code": 2,
    "price": 3, "amount": 3, "total": 3, "cost": 3,
    "summary": 3, "description": 3, "points": 3, "score": 3,
    "type": 4, "kind": 4, "category": 4, "method": 4,
}


def _is_terminal(stream: Any) -> bool:
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except (OSError, ValueError):
        return False


@dataclass(frozen=True)
class Palette:
    """ANSI styling that is either switched on or passes text through untouched."""

    enabled: bool = False

    @classmethod
    def detect(
        cls,
        stream: TextIO | None = None,
        *,
        no_color: bool = False,
        human_friendly: bool = False,
        environ: Mapping[str, str] | None = None,
    ) -> Palette:
        """Colour only for human-friendly output to a terminal that allows it."""
        env = os.environ if environ is None else environ
        if no_color or not human_friendly:
            return cls(False)
        if env.get("NO_COLOR") or env.get("TERM") == "dumb":
            return cls(False)
        return cls(_is_terminal(sys.stdout if stream is None else stream))

    def _wrap(self, code: str, text: str) -> str:
        if not self.enabled:
            return text
        return f"\033[{code}m{text}\033[0m"

    def bold(self, text: str) -> str:
        return self._wrap("1", text)

    def green(self, text: str) -> str:
        return self._wrap("32", text)

    def red(self, text: str) -> str:
        return self._wrap("31", text)

    def yellow(self, text: str) -> str:
        return self._wrap("33", text)


def truncate(text: str, limit: int) -> str:
    """Shorten ``text`` to ``limit`` characters, ending with an ellipsis when cut."""
    if len(text) <= limit:
        return text
    if limit <= 3:
        return text[:limit]
    return text[: limit - 3] + "..."


def _normalise_numbers(value: Any) -> Any:
    if isinstance(value, bool):
        return value
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return int(value)
    if isinstance(value, list):
        return [_normalise_numbers(v) for v in value]
    if isinstance(value, dict):
        return {k: _normalise_numbers(v) for k, v in value.items()}
    return value


def json_text(value: Any) -> str:
    """Compact JSON text with integral numbers written without a fraction."""
    return json.dumps(_normalise_numbers(value), separators=(",", ":"), ensure_ascii=False)


def _find_field(obj: Mapping[str, Any], *names: str) -> str:
    for name in names:
        for key, value in obj.items():
            if key.casefold() == name.casefold():
                return format_cell_value(value)
    return ""


def _format_object_summary(obj: Mapping[str, Any]) -> str:
    parts: list[str] = []

    qty = _find_field(obj, "qty", "count", "quantity")
    if qty and qty not in ("1", "0"):
        parts.append(qty + "x")
    elif qty == "1":
        parts.append("1x")

    name = _find_field(obj, "name", "title", "label", "description")
    if not name:
        for key in ("Side1", "side1", "Item", "item", "Product", "product"):
            nested = obj.get(key)
            if isinstance(nested, dict):
                name = _find_field(nested, "name", "title", "label")
                if name:
                    break
    if name:
        parts.append(name)

    size = _find_field(obj, "sizename", "size_name") or _find_field(
        obj, "catname", "cat_name", "category"
    )
    if size:
        parts.extend(["—", size])

    price = _find_field(obj, "extprice", "price", "amount", "total")
    if price and price != "0":
        parts.append(f"(${price})")

    if not parts:
        return truncate(json_text(obj), _SUMMARY_WIDTH)
    return "    " + " ".join(parts)


def _format_object_array(items: list[Any]) -> str:
    lines = [_format_object_summary(obj) for obj in items if isinstance(obj, dict)]
    if not lines:
        return ""
    return "\n" + "\n".join(lines)


def _format_single_object(obj: Mapping[str, Any]) -> str:
    return _find_field(obj, "name", "title", "label", "description") or _find_field(
        obj, "id", "key", "code"
    )


def format_cell_value(value: Any) -> str:
    """Render one decoded JSON value as a short table or card cell."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        if (
            len(value) >= _ISO_PREFIX_LEN
            and value[4] == "-"
            and value[7] == "-"
            and value[10] == "T"
        ):
            return value[:10]
        return truncate(value, _CELL_WIDTH)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer():
            return str(int(value))
        return f"{value:.2f}"
    if isinstance(value, list):
        if not value:
            return ""
        if isinstance(value[0], dict):
            return _format_object_array(value)
        parts = [item if isinstance(item, str) else json_text(item) for item in value]
        return truncate(", ".join(parts), _CELL_WIDTH)
    if isinstance(value, dict):
        return _format_single_object(value)
    return truncate(json_text(value), _CELL_WIDTH)


def split_camel_case(text: str) -> list[str]:
    """Split ``OrderDate``, ``statusCode`` or ``page_size`` into lowercase words."""
    segments: list[str] = []
    current: list[str] = []
    previous = ""
    for ch in text:
        if ch in "_-":
            if current:
                segments.append("".join(current))
                current = []
            previous = ch
            continue
        if previous and ch.isupper() and previous.islower() and current:
            segments.append("".join(current))
            current = []
        current.append(ch.lower())
        previous = ch
    if current:
        segments.append("".join(current))
    return segments


def _tier(key: str) -> int:
    lower = key.lower()
    if lower in _EXACT_TIERS:
        return _EXACT_TIERS[lower]
    segments = split_camel_case(lower)
    if segments and segments[-1] in _SUFFIX_TIERS:
        tier = _SUFFIX_TIERS[segments[-1]]
        # A prefix dilutes the signal of the suffix, so compound names drop a tier.
        return tier + 1 if len(segments) > 1 else tier
    return _NUM_TIERS


def prioritize_fields(item: Mapping[str, Any], include_complex: bool = False) -> list[str]:
    """Order field names by importance: identity, time, status, amounts, kind, rest.

    Without ``include_complex`` arrays and objects are left out; with it, fields
    whose value would render empty are left out instead.
    """
    scored: list[tuple[int, int, str]] = []
    for key, value in item.items():
        if include_complex:
            if format_cell_value(value) == "":
                continue
        elif isinstance(value, (list, dict)):
            continue
        tier = _tier(key)
        if isinstance(value, bool) and tier >= _NUM_TIERS:
            tier = _NUM_TIERS + 1
        scored.append((tier, len(scored), key))
    scored.sort()
    return [key for _, _, key in scored]
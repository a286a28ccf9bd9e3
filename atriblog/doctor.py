"""Health-check helpers: bot-wall detection, fail-on thresholds and report rendering."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from atriblog.formatting import Palette

_INTERSTITIAL_SCAN_LIMIT = 8192

_CHECK_KEYS = (
    ("config", "Config"),
    ("auth", "Auth"),
    ("env_vars", "Env Vars"),
    ("api", "API"),
    ("credentials", "Credentials"),
)
_INFO_KEYS = ("config_path", "base_url", "auth_source", "version")
_ERROR_MARKERS = ("error", "unreachable", "invalid", "missing")


def looks_like_interstitial(body: bytes | str) -> str:
    """The vendor name when ``body`` is a known bot-challenge page, else ``""``.

    Markers are anchored to the page title or vendor-specific strings so that
    ordinary content mentioning the same words does not match.
    """
    if not body:
        return ""
    if isinstance(body, (bytes, bytearray)):
        prefix = bytes(body[:_INTERSTITIAL_SCAN_LIMIT]).decode("utf-8", errors="replace")
    else:
        prefix = body.encode("utf-8")[:_INTERSTITIAL_SCAN_LIMIT].decode(
            "utf-8", errors="replace"
        )
    prefix = prefix.lower()
    if "<title" not in prefix:
        # Every recognised interstitial sets a title; bare API bodies do not.
        return ""

    def has(text: str) -> bool:
        return text in prefix

    if (
        has("<title>just a moment")
        or has("challenges.cloudflare.com")
        or (has("attention required") and has("cloudflare"))
    ):
        return "Cloudflare"
    if has("akamai") and (has("request unsuccessful") or has("access denied")):
        return "Akamai"
    if (
        has("x-vercel-mitigated")
        or has("x-vercel-challenge-token")
        or (has("vercel") and has("challenge"))
    ):
        return "Vercel"
    if has("request blocked") and has("aws waf"):
        return "AWS WAF"
    if has("datadome") and (has("blocked") or has("captcha") or has("challenge")):
        return "DataDome"
    if has("perimeterx") or has("px-captcha"):
        return "PerimeterX"
    return ""


def doctor_exit_for_fail_on(fail_on: str, report: Mapping[str, Any]) -> None:
    """Raise when the report's worst status meets the ``fail_on`` threshold.

    ``"error"`` trips on any error; ``"stale"`` also trips on a stale section.
    An empty threshold never fails. Unknown thresholds raise ValueError; a
    tripped threshold raises RuntimeError.
    """
    if not fail_on:
        return None
    worst_error = False
    worst_stale = False
    for value in report.values():
        if isinstance(value, str) and any(marker in value for marker in _ERROR_MARKERS):
            worst_error = True
        if isinstance(value, Mapping):
            status = value.get("status")
            if status == "error":
                worst_error = True
            elif status == "stale":
                worst_stale = True
    if fail_on == "error":
        if worst_error:
            raise RuntimeError("doctor: --fail-on=error triggered")
    elif fail_on == "stale":
        if worst_error or worst_stale:
            raise RuntimeError("doctor: --fail-on=stale triggered")
    else:
        raise ValueError(f"doctor: unknown --fail-on value {fail_on!r} (valid: stale, error)")
    return None


def check_indicator(value: Any, palette: Palette | None = None) -> str:
    """The OK/INFO/WARN/FAIL marker for one health-check value."""
    palette = palette or Palette()
    s = str(value)
    if s.startswith("INFO"):
        return palette.yellow("INFO")
    if s.startswith("ERROR"):
        return palette.red("FAIL")
    if s.startswith("optional"):
        return palette.yellow("INFO")
    if "scope-limited" in s:
        return palette.yellow("WARN")
    if (
        "error" in s
        or "not configured" in s
        or "unreachable" in s
        or "invalid" in s
        or "missing" in s
    ):
        return palette.red("FAIL")
    if s == "not required":
        return palette.green("OK")
    if "not " in s or "skipped" in s or "inferred" in s:
        return palette.yellow("WARN")
    return palette.green("OK")


def render_checks(report: Mapping[str, Any], palette: Palette | None = None) -> str:
    """Human-readable lines for the health checks followed by the info fields."""
    palette = palette or Palette()
    lines: list[str] = []
    for key, label in _CHECK_KEYS:
        if key not in report:
            continue
        value = report[key]
        lines.append(f"  {check_indicator(value, palette)} {label}: {value}")
    for key in _INFO_KEYS:
        if key in report:
            lines.append(f"  {key}: {report[key]}")
    return "".join(line + "\n" for line in lines)


def render_cache_report(report: Mapping[str, Any], palette: Palette | None = None) -> str:
    """Human-readable lines describing the local cache section of the report."""
    palette = palette or Palette()
    status = report.get("status")
    status = status if isinstance(status, str) else ""
    if status == "stale":
        indicator = palette.yellow("WARN")
    elif status == "error":
        indicator = palette.red("FAIL")
    elif status == "unknown":
        indicator = palette.yellow("INFO")
    else:
        indicator = palette.green("OK")
    lines = [f"  {indicator} Cache: {status}"]
    for key in ("db_path", "schema_version", "db_bytes", "stale_after", "oldest_age"):
        if key in report:
            lines.append(f"    {key}: {report[key]}")
    resources = report.get("resources")
    if isinstance(resources, list) and resources:
        lines.append("    resources:")
        for resource in resources:
            rtype = resource.get("type")
            staleness = resource.get("staleness")
            lines.append(
                f"      - {rtype if isinstance(rtype, str) else ''}: "
                f"{resource.get('rows')} rows, "
                f"{staleness if isinstance(staleness, str) else ''}"
            )
    if "hint" in report:
        lines.append(f"    hint: {report['hint']}")
    return "".join(line + "\n" for line in lines)
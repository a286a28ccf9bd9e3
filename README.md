# atriblog

Helpers for command-line and agent tooling around the atrib transparency
log, an append-only Merkle log of signed agent action records. It covers
response caching, shaping decoded JSON for output, browsing a tree of
annotated commands, provenance envelopes and health-report rendering.

The package uses only the standard library and needs Python 3.10 or later.

## Modules

| Module | Contents |
| --- | --- |
| `atriblog.cache` | `Store(directory, ttl)`: a cache that keeps one JSON file per key. `get(key)` returns the stored bytes, or `None` when the entry is missing or older than `ttl`. `set(key, value)` writes the entry. `clear()` removes the whole directory. `ttl` is given in seconds or as a `timedelta`. |
| `atriblog.discovery` | `CommandNode` with `add`, `command_path` and `walk`. It also has `api_interface_name`, `api_method_name`, `collect_api_interfaces` and `collect_api_methods`, which group commands by their `pp:endpoint` annotation. |
| `atriblog.selectors` | Shaping of decoded JSON: `filter_fields`, `compact_fields`, `extract_response_data`, `unwrap_single_key_array`, `camel_to_kebab` and `is_compact_scalar`. |
| `atriblog.provenance` | `DataProvenance`, `wrap_with_provenance`, `describe_provenance` and `default_db_path`. |
| `atriblog.formatting` | `Palette` with `bold`, `green`, `red` and `yellow`. `Palette.detect` decides whether colour is on. The module also has `truncate`, `format_cell_value`, `split_camel_case`, `prioritize_fields` and `json_text`. |
| `atriblog.doctor` | `looks_like_interstitial`, `doctor_exit_for_fail_on`, `check_indicator`, `render_checks` and `render_cache_report`. |

## Examples

Cache a response for an hour:

```python
from datetime import timedelta
from atriblog.cache import Store

cache = Store("/tmp/atrib-cache", timedelta(hours=1))
cache.set("/v1/stats", b'{"tree_size": 12}')
cache.get("/v1/stats")   # b'{"tree_size": 12}'
cache.get("/v1/other")   # None
```

Select fields from decoded JSON. Field names are comma-separated and
matched without regard to case. Dotted paths descend into nested objects,
and arrays are filtered element by element:

```python
from atriblog.selectors import filter_fields, extract_response_data

entries = [{"id": 1, "tool_name": "search", "signature": "..."}]
filter_fields(entries, "id,tool_name")   # [{"id": 1, "tool_name": "search"}]

extract_response_data({"status": "ok", "data": [1, 2]})   # [1, 2]
```

`compact_fields` keeps the identifying fields of a list of objects. These
are the fields on a fixed allow-list, plus scalar keys that appear in most
rows. For a single object it drops verbose fields such as `description`
and `body`.

Wrap results with their provenance:

```python
from atriblog.provenance import DataProvenance, wrap_with_provenance, describe_provenance

prov = DataProvenance(source="live")
wrap_with_provenance({"results": [1, 2]}, prov)
# {"results": [1, 2], "meta": {"source": "live"}}
describe_provenance(2, prov)   # "2 results (live)"
```

Browse a command tree by endpoint:

```python
from atriblog.discovery import CommandNode, collect_api_interfaces, collect_api_methods

root = CommandNode("atrib-log")
root.add(CommandNode("stats", short="Tree statistics",
                     annotations={"pp:endpoint": "stats.get"}))
collect_api_interfaces(root)   # [{"name": "stats", "short": "Tree statistics"}]
collect_api_methods(root, "stats")
# ([{"name": "get", "short": "Tree statistics", "command": "stats"}], "Tree statistics")
```

Render health checks:

```python
from atriblog.doctor import looks_like_interstitial, render_checks, doctor_exit_for_fail_on

looks_like_interstitial(b"<html><title>Just a moment...</title></html>")   # "Cloudflare"
print(render_checks({"config": "ok", "api": "unreachable: timeout"}), end="")
#   OK Config: ok
#   FAIL API: unreachable: timeout
doctor_exit_for_fail_on("error", {"api": "unreachable: timeout"})   # raises RuntimeError
```

`doctor_exit_for_fail_on` does nothing when the threshold is empty. It
raises `ValueError` when the threshold is not `stale` or `error`.

## Colour

`Palette()` passes text through unchanged. `Palette(True)` adds ANSI codes.
`Palette.detect(stream, no_color=..., human_friendly=..., environ=...)`
turns colour on only when all of these hold:

- `human_friendly` is set and `no_color` is not.
- `NO_COLOR` is unset or empty.
- `TERM` is not `dumb`.
- The stream is a terminal.

## What this package does not do

- It has no command-line program and installs no commands.
- It makes no HTTP requests and does not talk to the log.
- It does not create or sync a local database. `default_db_path` only
  returns `~/.local/share/<name>/data.db`.
- `render_cache_report` renders a cache report that the caller supplies.
  The package does not build that report.
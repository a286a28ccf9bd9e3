"""File-based response cache keyed by request and bounded by a time-to-live."""

from __future__ import annotations

import contextlib
import hashlib
import shutil
import time
from datetime import timedelta
from pathlib import Path


class Store:
    """A key-value cache that keeps each value as a JSON file in one directory."""

    def __init__(self, directory: str | Path, ttl: float | timedelta) -> None:
        self.directory = Path(directory)
        if isinstance(ttl, timedelta):
            ttl = ttl.total_seconds()
        self.ttl = float(ttl)

    def _path(self, key: str) -> Path:
        digest = hashlib.sha256(key.encode("utf-8")).digest()
        return self.directory / f"{digest[:8].hex()}.json"

    def get(self, key: str) -> bytes | None:
        """Return the cached bytes for ``key``, or None if missing or expired."""
        path = self._path(key)
        try:
            age = time.time() - path.stat().st_mtime
            if age > self.ttl:
                return None
            return path.read_bytes()
        except OSError:
            return None

    def set(self, key: str, value: bytes | str) -> None:
        """Store ``value`` under ``key``; failures to write are ignored."""
        data = value.encode("utf-8") if isinstance(value, str) else bytes(value)
        with contextlib.suppress(OSError):
            self.directory.mkdir(parents=True, exist_ok=True)
            self._path(key).write_bytes(data)

    def clear(self) -> None:
        """Remove every cached entry along with the cache directory."""
        with contextlib.suppress(FileNotFoundError):
            shutil.rmtree(self.directory)
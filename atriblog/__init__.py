"""Response caching, JSON output shaping, command discovery, provenance and health-report helpers for atrib log tooling."""

__version__ = "0.1.0"
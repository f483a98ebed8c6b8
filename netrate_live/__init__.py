"""Live link-level traffic monitor: per-flow byte/packet counters, 2s/10s/40s
rate estimates and a periodically refreshed dashboard (console and HTTP)."""

__version__ = "0.1.0"

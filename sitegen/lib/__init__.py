"""Shared helpers for sitegen (logging, environment lookups)."""

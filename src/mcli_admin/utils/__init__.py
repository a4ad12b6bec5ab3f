"""Logging setup and per-invocation settings, shared by every layer."""

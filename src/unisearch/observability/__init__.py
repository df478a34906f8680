"""Logging and per-request diagnostics."""

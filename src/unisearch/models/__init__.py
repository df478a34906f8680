"""Data models for requests, results and per-provider outcomes."""

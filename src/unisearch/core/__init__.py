"""Core aggregation engine."""

"""HTTP transport used by the adapters."""

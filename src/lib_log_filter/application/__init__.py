"""Application layer contracts consumed by the adapters."""

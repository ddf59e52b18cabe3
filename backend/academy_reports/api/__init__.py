"""HTTP API for the reporting service."""

"""Logging, telemetry and error types."""

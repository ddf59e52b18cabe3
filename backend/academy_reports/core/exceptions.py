"""Error types raised by the reporting core."""

from __future__ import annotations


class InvalidPeriod(ValueError):
    """A report type or period index outside the supported calendar."""


class UpstreamDataError(RuntimeError):
    """A source reader failed; callers get no partial report."""


__all__ = ["InvalidPeriod", "UpstreamDataError"]

"""Period-based financial reporting and strategic target rollup for a training academy."""

__version__ = "0.1.0"

"""Reporting core: period resolution, aggregation and target rollup."""

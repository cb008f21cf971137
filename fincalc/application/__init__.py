"""Application layer: ports and use cases around the aggregation engine."""

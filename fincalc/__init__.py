"""Financial planning aggregation service."""

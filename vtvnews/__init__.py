"""Vietnamese news aggregation: fetch, rank, translate and localize articles."""

__version__ = "1.0.0"

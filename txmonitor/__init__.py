"""Batch transaction monitoring: heuristic flags for analyst review."""

__version__ = "0.1.0"

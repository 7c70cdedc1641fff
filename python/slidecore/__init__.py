"""Sliding-tile puzzle model and IDA* solver."""

__version__ = "0.1.0"

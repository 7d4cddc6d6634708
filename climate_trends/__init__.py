"""Climate trends from a multi-decade series of daily temperatures."""

__version__ = "1.0.0"

"""Portfolio gap analysis and rebalancing advisor."""

__version__ = "0.1.0"

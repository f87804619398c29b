"""Read-only JSON API over the warehouse and retail sales dataset."""

__version__ = "1.0.0"

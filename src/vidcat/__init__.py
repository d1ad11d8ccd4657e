"""vidcat: paginated, filterable video catalog API."""

__version__ = "0.1.0"

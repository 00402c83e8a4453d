"""Sales records from a CSV file: loading, statistics, queries and editing."""

__version__ = "0.1.0"
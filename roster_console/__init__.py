"""Pagination, filtering and sorting core of the student and order admin console."""

__version__ = "0.1.0"

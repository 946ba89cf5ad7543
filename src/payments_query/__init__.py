"""payments-query - read-only analytical queries over in-memory payments."""

__version__ = "0.1.0"

"""Building blocks for HTTP clients and servers: messages, filters, query helpers, JWT data and file routes."""

__version__ = "0.1.0"
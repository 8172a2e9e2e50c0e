"""flipboard — share short messages as URL-encoded flip boards."""

__version__ = "0.1.0"

"""Category application module."""

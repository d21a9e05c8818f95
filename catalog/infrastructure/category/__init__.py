"""Category infrastructure module."""

"""Catalog core: self-validating entities, identifiers and repository contracts."""

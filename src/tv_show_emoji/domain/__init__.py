"""Catalog, prompt building, response parsing and input validation."""

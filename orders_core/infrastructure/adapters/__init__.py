"""Concrete adapters for application ports."""

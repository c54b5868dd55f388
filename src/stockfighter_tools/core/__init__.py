"""Shared infrastructure: configuration loading."""

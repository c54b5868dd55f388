"""Typed async client and command-line tools for the Stockfighter API."""

__version__ = "0.1.0"

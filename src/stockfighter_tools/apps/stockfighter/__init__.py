"""Stockfighter command-line app."""

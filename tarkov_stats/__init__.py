"""Tarkov player statistics client."""

__version__ = "0.1.0"

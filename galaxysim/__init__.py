"""Gravitational N-body galaxy simulation with a pygame view."""

__version__ = "0.1.0"
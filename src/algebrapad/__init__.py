"""Structured editor for fractions and other nested expressions."""
__version__ = "0.1.0"

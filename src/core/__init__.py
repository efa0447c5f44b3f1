"""Tuples, colors, matrices and rays plus configuration and error types."""

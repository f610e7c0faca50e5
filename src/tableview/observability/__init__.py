"""Observability – structured logging for the viewer core."""

"""Utility packages: events, logging and UI helpers."""

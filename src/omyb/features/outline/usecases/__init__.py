"""Outline use cases."""

"""Outline value objects."""

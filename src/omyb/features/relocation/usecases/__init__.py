"""Relocation use cases."""

"""Relocation value objects."""

"""Infrastructure adapters for the outline feature."""

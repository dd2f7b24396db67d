"""Infrastructure adapters for the relocation feature."""

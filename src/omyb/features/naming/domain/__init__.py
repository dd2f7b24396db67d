"""Pure naming and ordering rules."""

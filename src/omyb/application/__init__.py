"""Application layer wiring adapters into feature use cases."""

"""Local filesystem adapter for the relocation feature."""

from .local import LocalFileSystemGateway

__all__ = ["LocalFileSystemGateway"]

"""Public surface for the outline feature."""

from .domain.models import OutlineDocument, OutlineLine, ProjectionOptions
from .usecases.projector import TreeProjector

__all__ = ["OutlineDocument", "OutlineLine", "ProjectionOptions", "TreeProjector"]

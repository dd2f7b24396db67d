"""Public surface for the relocation feature."""

from .domain.models import RelocationPlan, RelocationRequest, RelocationResult, RenameStep
from .usecases.reorderer import Reorderer

__all__ = [
    "RelocationPlan",
    "RelocationRequest",
    "RelocationResult",
    "RenameStep",
    "Reorderer",
]

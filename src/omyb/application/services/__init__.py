"""Application services exposed to the CLI."""

from .outline_service import OutlineResult, OutlineService, OutlineServiceRequest
from .relocate_service import RelocateOutcome, RelocateService, RelocateServiceRequest

__all__ = [
    "OutlineResult",
    "OutlineService",
    "OutlineServiceRequest",
    "RelocateOutcome",
    "RelocateService",
    "RelocateServiceRequest",
]

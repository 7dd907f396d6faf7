"""Application layer - use cases and orchestration."""

from .commands import EditCourtCommand, GenerateCourtCommand
from .dtos import CourtInput, CourtOutput, EditOutcome, EditRequest

__all__ = [
    "CourtInput",
    "CourtOutput",
    "EditCourtCommand",
    "EditOutcome",
    "EditRequest",
    "GenerateCourtCommand",
]

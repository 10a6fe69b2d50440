"""Domain layer: errors and schemas."""

from .errors import ArchiveError, ErrorCodes
from .schemas import (
    ArchiveRequest,
    CandidateFile,
    JobStatus,
    OperationResult,
    StatusClass,
)

__all__ = [
    "ArchiveError",
    "ErrorCodes",
    "ArchiveRequest",
    "CandidateFile",
    "JobStatus",
    "OperationResult",
    "StatusClass",
]

"""
Core data models for the log sync service.
"""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from .config import LogTypeRule


@dataclass(frozen=True)
class Candidate:
    """A local file eligible for upload under one matched rule."""
    relative_path: str
    absolute_path: str
    matched_rule: LogTypeRule


@dataclass(frozen=True)
class RemoteObjectMeta:
    """Result of a point query against the object store."""
    exists: bool
    size_bytes: Optional[int] = None

    @classmethod
    def missing(cls) -> 'RemoteObjectMeta':
        return cls(exists=False)


class SyncDecision(Enum):
    """Outcome of the existence/size check for one candidate."""
    NEEDS_UPLOAD = 'needs_upload'
    ALREADY_SYNCED = 'already_synced'


@dataclass
class SyncReport:
    """Statistics for a single sync run."""
    start_time: datetime
    end_time: Optional[datetime] = None
    files_scanned: int = 0
    candidates: int = 0
    uploaded: int = 0
    skipped: int = 0
    total_bytes_uploaded: int = 0
    uploaded_keys: List[str] = field(default_factory=list)

    @property
    def duration(self) -> float:
        if self.end_time is None:
            return 0.0
        return (self.end_time - self.start_time).total_seconds()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging."""
        return {
            'start_time': self.start_time.isoformat(),
            'end_time': self.end_time.isoformat() if self.end_time else None,
            'duration': self.duration,
            'files_scanned': self.files_scanned,
            'candidates': self.candidates,
            'uploaded': self.uploaded,
            'skipped': self.skipped,
            'total_bytes_uploaded': self.total_bytes_uploaded,
            'uploaded_keys': list(self.uploaded_keys)
        }

"""
Log Sync - ships today's local log files to an S3 bucket, skipping files already uploaded.
"""

from .services.sync_service import SyncService
from .clients.s3_manager import S3Manager
from .models.config import SyncConfig, LogTypeRule
from .models.data_models import Candidate, RemoteObjectMeta, SyncDecision, SyncReport

__version__ = "1.0.0"
__all__ = [
    "SyncService",
    "S3Manager",
    "SyncConfig",
    "LogTypeRule",
    "Candidate",
    "RemoteObjectMeta",
    "SyncDecision",
    "SyncReport"
]

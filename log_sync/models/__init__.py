"""
Models package for the log sync service.
"""
from .data_models import Candidate, RemoteObjectMeta, SyncDecision, SyncReport
from .config import LogTypeRule, SyncConfig

__all__ = [
    'Candidate',
    'RemoteObjectMeta',
    'SyncDecision',
    'SyncReport',
    'LogTypeRule',
    'SyncConfig'
]

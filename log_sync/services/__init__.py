# Services package
from .directory_scanner import list_files
from .candidate_filter import CandidateFilter
from .key_builder import build_remote_key, resolve_hostname, today_string
from .change_detector import ChangeDetector
from .uploader import Uploader
from .sync_service import SyncService

__all__ = [
    'list_files',
    'CandidateFilter',
    'build_remote_key',
    'resolve_hostname',
    'today_string',
    'ChangeDetector',
    'Uploader',
    'SyncService'
]

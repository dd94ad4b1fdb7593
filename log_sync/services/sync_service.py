"""
Main sync orchestrator for shipping today's log files to the object store.
"""
from datetime import date, datetime
from typing import Optional

from loguru import logger

from ..exceptions import LogSyncError
from ..models.config import SyncConfig
from ..models.data_models import Candidate, SyncDecision, SyncReport
from .candidate_filter import CandidateFilter
from .change_detector import ChangeDetector
from .directory_scanner import list_files
from .key_builder import build_remote_key, resolve_hostname, today_string
from .uploader import Uploader, local_file_size


class SyncService:
    """
    One-way, idempotent sync of today's log files to a bucket.

    A run scans the log directory, selects candidates, and for each one
    checks the store and uploads when the object is missing or differs in
    size. Candidates are handled one at a time; the first error aborts the
    run and is raised to the caller. Re-running is always safe because
    every decision is made against the store's current state.
    """

    def __init__(self, config: SyncConfig, store, today: Optional[date] = None,
                 hostname: Optional[str] = None, verbose: Optional[bool] = None):
        """
        Initialize sync service.

        Args:
            config: Loaded SyncConfig
            store: Object store capability (head_object / upload_stream), e.g. S3Manager
            today: Date the run is for, defaults to the current local date
            hostname: Host segment for keys, resolved from the system when omitted
            verbose: Log scanned paths and candidate lists, defaults to config.debug_enabled

        Raises:
            HostnameUnavailableError: If hostname is omitted and cannot be resolved
        """
        self.config = config
        self.today = today or date.today()
        self.hostname = hostname or resolve_hostname()
        self.verbose = config.debug_enabled if verbose is None else verbose

        self.candidate_filter = CandidateFilter(config.log_type_rules, self.today, verbose=self.verbose)
        self.change_detector = ChangeDetector(store)
        self.uploader = Uploader(store)

        logger.info(f"SyncService initialized - host: {self.hostname}, date: {today_string(self.today)}")

    def key_for(self, candidate: Candidate) -> str:
        """Remote key for a candidate in this run."""
        return build_remote_key(
            candidate.matched_rule.directory_name,
            self.today,
            self.hostname,
            candidate.relative_path
        )

    def run(self) -> SyncReport:
        """
        Perform one synchronization pass.

        Returns:
            SyncReport with counters and the keys that were uploaded

        Raises:
            LogSyncError: Any failure; nothing after the failing candidate is processed
        """
        report = SyncReport(start_time=datetime.now())
        bucket = self.config.remote_bucket

        logger.info(f"Starting log sync of {self.config.log_directory} to bucket {bucket}")

        try:
            files = list_files(self.config.log_directory, verbose=self.verbose)
            report.files_scanned = len(files)

            candidates = self.candidate_filter.select(self.config.log_directory, files)
            report.candidates = len(candidates)

            for candidate in candidates:
                self._process_candidate(bucket, candidate, report)

        except LogSyncError as e:
            report.end_time = datetime.now()
            logger.error(f"Log sync aborted after {report.uploaded} uploads, "
                         f"{report.skipped} skipped: {e}")
            raise

        report.end_time = datetime.now()
        logger.info(f"Log sync completed - Scanned: {report.files_scanned}, "
                    f"Candidates: {report.candidates}, "
                    f"Uploaded: {report.uploaded}, "
                    f"Skipped: {report.skipped}, "
                    f"Duration: {report.duration:.2f} seconds")
        return report

    def _process_candidate(self, bucket: str, candidate: Candidate, report: SyncReport) -> None:
        key = self.key_for(candidate)
        size = local_file_size(candidate.absolute_path)

        logger.debug(f"Checking {candidate.relative_path} -> {key} ({size} bytes)")
        decision = self.change_detector.check(bucket, key, size)

        if decision is SyncDecision.ALREADY_SYNCED:
            report.skipped += 1
            return

        self.uploader.upload(bucket, key, candidate.absolute_path)
        report.uploaded += 1
        report.total_bytes_uploaded += size
        report.uploaded_keys.append(key)

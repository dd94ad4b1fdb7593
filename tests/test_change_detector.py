"""
Tests for the existence/size check and the uploader.
"""
import pytest
from unittest.mock import Mock

from log_sync.exceptions import LocalFileUnreadableError, RemoteServiceError, UploadFailedError
from log_sync.models.data_models import RemoteObjectMeta, SyncDecision
from log_sync.services.change_detector import ChangeDetector, decide
from log_sync.services.uploader import Uploader, local_file_size


class TestDecide:
    """Test cases for the size comparison."""

    def test_missing_object_needs_upload(self):
        assert decide(RemoteObjectMeta.missing(), 150) is SyncDecision.NEEDS_UPLOAD

    def test_size_mismatch_needs_upload(self):
        """Test that a stored size of 100 against a local size of 150 re-uploads."""
        assert decide(RemoteObjectMeta(exists=True, size_bytes=100), 150) is SyncDecision.NEEDS_UPLOAD

    def test_size_match_already_synced(self):
        assert decide(RemoteObjectMeta(exists=True, size_bytes=150), 150) is SyncDecision.ALREADY_SYNCED


class TestChangeDetector:
    """Test cases for ChangeDetector."""

    def test_check_queries_store(self, fake_store):
        fake_store.put('my-bucket', 'k', 150)
        detector = ChangeDetector(fake_store)

        assert detector.check('my-bucket', 'k', 150) is SyncDecision.ALREADY_SYNCED
        assert detector.check('my-bucket', 'k', 151) is SyncDecision.NEEDS_UPLOAD
        assert detector.check('my-bucket', 'other', 150) is SyncDecision.NEEDS_UPLOAD
        assert len(fake_store.head_calls) == 3

    def test_remote_error_propagates(self, fake_store):
        """Test that a service error is raised, not treated as 'needs upload'."""
        fake_store.failing_keys.add('k')
        detector = ChangeDetector(fake_store)

        with pytest.raises(RemoteServiceError):
            detector.check('my-bucket', 'k', 1)


class TestUploader:
    """Test cases for Uploader."""

    def test_upload_streams_whole_file(self, log_dir, write_log, fake_store):
        path = write_log(log_dir, 'app-2024-06-10.csv', 42)

        location = Uploader(fake_store).upload('my-bucket', 'app-logs/key.csv', str(path))

        assert fake_store.upload_calls == [('my-bucket', 'app-logs/key.csv', 42)]
        assert location == 'https://s3.test/my-bucket/app-logs/key.csv'

    def test_missing_local_file(self, log_dir, fake_store):
        """Test that a file removed after the scan raises LocalFileUnreadableError."""
        with pytest.raises(LocalFileUnreadableError):
            Uploader(fake_store).upload('my-bucket', 'k', str(log_dir / 'gone.csv'))

        assert fake_store.upload_calls == []

    def test_file_closed_when_upload_fails(self, log_dir, write_log):
        """Test that the local file handle is released even if the upload fails."""
        path = write_log(log_dir, 'app.csv', 10)
        seen = []

        def failing_upload(bucket, key, stream):
            seen.append(stream)
            raise UploadFailedError('network down')

        store = Mock()
        store.upload_stream.side_effect = failing_upload

        with pytest.raises(UploadFailedError):
            Uploader(store).upload('my-bucket', 'k', str(path))

        assert seen[0].closed

    def test_local_file_size(self, log_dir, write_log):
        path = write_log(log_dir, 'a.csv', 7)

        assert local_file_size(str(path)) == 7
        with pytest.raises(LocalFileUnreadableError):
            local_file_size(str(log_dir / 'missing.csv'))

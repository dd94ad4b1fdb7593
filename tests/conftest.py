"""
Pytest configuration and fixtures for the log sync tests.
"""
from datetime import date
from types import MappingProxyType

import pytest

from log_sync.exceptions import RemoteServiceError
from log_sync.models.config import LogTypeRule, SyncConfig
from log_sync.models.data_models import RemoteObjectMeta


class FakeObjectStore:
    """In-memory stand-in for S3Manager, recording every call."""

    def __init__(self):
        self.objects = {}
        self.head_calls = []
        self.upload_calls = []
        self.failing_keys = set()

    def put(self, bucket, key, size):
        self.objects[(bucket, key)] = size

    def head_object(self, bucket, key):
        self.head_calls.append((bucket, key))
        if key in self.failing_keys:
            raise RemoteServiceError(f"Simulated service error for {key}")
        if (bucket, key) not in self.objects:
            return RemoteObjectMeta.missing()
        return RemoteObjectMeta(exists=True, size_bytes=self.objects[(bucket, key)])

    def upload_stream(self, bucket, key, stream):
        data = stream.read()
        self.upload_calls.append((bucket, key, len(data)))
        self.objects[(bucket, key)] = len(data)
        return f"https://s3.test/{bucket}/{key}"


@pytest.fixture
def fake_store():
    """Pytest fixture for the in-memory object store."""
    return FakeObjectStore()


@pytest.fixture
def today():
    return date(2024, 6, 10)


@pytest.fixture
def log_dir(tmp_path):
    """Empty log directory under pytest's tmp_path."""
    path = tmp_path / "logs"
    path.mkdir()
    return path


def write_file(root, relative_path, size):
    """Create a file of exactly size bytes below root."""
    path = root.joinpath(*relative_path.split('/'))
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b'x' * size)
    return path


def make_config(log_directory, rules=None, bucket='my-bucket', debug=False):
    rules = rules or {}
    return SyncConfig(
        remote_bucket=bucket,
        log_directory=str(log_directory),
        region='us-east-1',
        debug_enabled=debug,
        log_type_rules=MappingProxyType({
            name: LogTypeRule(name=name, log_prefix=prefix, directory_name=directory)
            for name, (prefix, directory) in rules.items()
        })
    )


@pytest.fixture
def app_config(log_dir):
    """Config with a single 'app-' rule shipping to 'app-logs'."""
    return make_config(log_dir, {'app': ('app-', 'app-logs')})


@pytest.fixture
def write_log():
    """Fixture returning write_file, for creating sized log files."""
    return write_file


@pytest.fixture
def config_factory():
    """Fixture returning make_config, for building configs in tests."""
    return make_config

#!/usr/bin/env python3
"""
Demo of a log sync run without AWS access.

This script demonstrates:
- Generating a sample log tree for today
- Running a sync against an in-memory object store
- A second run skipping everything already shipped
"""
import sys
import tempfile
from pathlib import Path
from types import MappingProxyType

# Add the project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))
sys.path.insert(0, str(project_root / "test-data"))

from generate_test_data import LogTreeGenerator
from log_sync.models.config import LogTypeRule, SyncConfig
from log_sync.models.data_models import RemoteObjectMeta
from log_sync.services.sync_service import SyncService
from loguru import logger


class InMemoryStore:
    """Object store keeping sizes in a dict."""

    def __init__(self):
        self.objects = {}

    def head_object(self, bucket, key):
        if (bucket, key) not in self.objects:
            return RemoteObjectMeta.missing()
        return RemoteObjectMeta(exists=True, size_bytes=self.objects[(bucket, key)])

    def upload_stream(self, bucket, key, stream):
        self.objects[(bucket, key)] = len(stream.read())
        return f"memory://{bucket}/{key}"


def main():
    """Run log sync demo."""
    logger.remove()
    logger.add(sys.stderr, format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> - <level>{message}</level>", level="INFO")

    logger.info("🚀 Log Sync Demo")

    with tempfile.TemporaryDirectory() as tmp_dir:
        LogTreeGenerator(tmp_dir).generate_log_tree()

        config = SyncConfig(
            remote_bucket='demo-bucket',
            log_directory=tmp_dir,
            log_type_rules=MappingProxyType({
                'app': LogTypeRule('app', 'app-', 'app-logs'),
                'audit': LogTypeRule('audit', 'audit-', 'audit-logs'),
                'archive': LogTypeRule('archive', 'archive/', 'archive-logs')
            })
        )
        store = InMemoryStore()

        logger.info("Running first sync...")
        first = SyncService(config, store).run()
        for key in first.uploaded_keys:
            logger.info(f"  uploaded: {key}")

        logger.info("Running second sync...")
        second = SyncService(config, store).run()
        logger.info(f"Second run uploaded {second.uploaded}, skipped {second.skipped}")

    logger.info("✅ Demo completed")


if __name__ == "__main__":
    main()

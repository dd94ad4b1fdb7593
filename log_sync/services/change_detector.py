"""
Existence and size check against the object store.
"""
from loguru import logger

from ..models.data_models import RemoteObjectMeta, SyncDecision


def decide(meta: RemoteObjectMeta, local_size: int) -> SyncDecision:
    """Size-only comparison: no object, or a different size, means upload."""
    if not meta.exists:
        return SyncDecision.NEEDS_UPLOAD
    if meta.size_bytes != local_size:
        return SyncDecision.NEEDS_UPLOAD
    return SyncDecision.ALREADY_SYNCED


class ChangeDetector:
    """
    Queries the store for each candidate key and compares sizes.

    Nothing is cached between candidates or runs; the store is the only
    record of what was already shipped.
    """

    def __init__(self, store):
        """
        Args:
            store: Object exposing head_object(bucket, key) -> RemoteObjectMeta
        """
        self.store = store

    def check(self, bucket: str, key: str, local_size: int) -> SyncDecision:
        """
        Decide whether the object at key must be (re)uploaded.

        Raises:
            RemoteServiceError: Propagated from the store for anything but 'not found'
        """
        meta = self.store.head_object(bucket, key)
        decision = decide(meta, local_size)

        if meta.exists and decision is SyncDecision.NEEDS_UPLOAD:
            logger.info(f"Size mismatch for {key} (local: {local_size}, remote: {meta.size_bytes}), re-uploading")
        elif decision is SyncDecision.ALREADY_SYNCED:
            logger.info(f"Already synced, skipping: {key} ({local_size} bytes)")
        else:
            logger.debug(f"Not in bucket yet: {key}")

        return decision

"""
Streaming upload of local log files.
"""
import os

from loguru import logger

from ..exceptions import LocalFileUnreadableError


def local_file_size(path: str) -> int:
    """
    Return the size of a local file in bytes.

    Raises:
        LocalFileUnreadableError: If the file is gone or cannot be stat'ed
    """
    try:
        return os.path.getsize(path)
    except OSError as e:
        raise LocalFileUnreadableError(f"Cannot read local file {path}: {e}") from e


class Uploader:
    """Streams a local file to the object store under a given key."""

    def __init__(self, store):
        """
        Args:
            store: Object exposing upload_stream(bucket, key, stream) -> location
        """
        self.store = store

    def upload(self, bucket: str, key: str, path: str) -> str:
        """
        Upload the full contents of path to bucket/key.

        The file handle is closed on every exit path, including a failed upload.

        Returns:
            str: Location of the uploaded object

        Raises:
            LocalFileUnreadableError: If the file cannot be opened or read
            UploadFailedError: Propagated from the store
        """
        try:
            f = open(path, 'rb')
        except OSError as e:
            raise LocalFileUnreadableError(f"Cannot open local file {path}: {e}") from e

        with f:
            try:
                location = self.store.upload_stream(bucket, key, f)
            except OSError as e:
                raise LocalFileUnreadableError(f"Failed reading {path} during upload: {e}") from e

        logger.info(f"File uploaded to {location}")
        return location

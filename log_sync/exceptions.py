"""
Exception hierarchy for the log sync service.

Every error here is fatal to a run. Components raise, the command line
entry point logs the message and exits non-zero.
"""


class LogSyncError(Exception):
    """Base class for all log sync errors."""
    pass


class ConfigMissingError(LogSyncError):
    """The configuration file does not exist."""
    pass


class ConfigInvalidError(LogSyncError):
    """The configuration file could not be read or parsed, or is incomplete."""
    pass


class DirectoryUnreadableError(LogSyncError):
    """The log directory does not exist or cannot be traversed."""
    pass


class HostnameUnavailableError(LogSyncError):
    """The local hostname could not be resolved."""
    pass


class RemoteServiceError(LogSyncError):
    """The object store returned an error other than 'not found'."""
    pass


class LocalFileUnreadableError(LogSyncError):
    """A candidate file vanished or could not be opened after the scan."""
    pass


class UploadFailedError(LogSyncError):
    """Streaming a file to the object store failed."""
    pass

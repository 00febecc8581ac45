class DirectoryBrowserError(Exception):
    """Base exception for all directory_browser errors"""
    pass

class ConfigError(DirectoryBrowserError):
    """Invalid or inconsistent directory.json"""
    pass

class LoadFailure(DirectoryBrowserError):
    """
    Record source unreachable or payload malformed.
    Surfaced to the UI as a session-level error, never retried.
    """
    pass

class InvalidArgument(DirectoryBrowserError, ValueError):
    """Page size <= 0 or unknown sort key passed to the coordinator/pipeline"""
    pass

class RecordStoreError(DirectoryBrowserError):
    """Record store was loaded more than once"""
    pass

class StorageError(Exception):
    """Raised when an upload cannot be written to the object store."""


class StorageNetworkError(StorageError):
    """Raised when a remote object store cannot be reached or rejects the write."""

from abc import ABC, abstractmethod

from wedexpense.upload.staging import StagedFile


class BaseObjectStore(ABC):
    """Contract for all object storage adapters."""

    @abstractmethod
    def put(self, staged: StagedFile, key: str) -> str:
        """Persist the staged upload under ``key``.

        Args:
            staged: The upload, written to a scratch file.
            key: Object key, e.g. ``receipts/1700000000000_bill.jpg``.

        Returns:
            URL under which the stored object can be fetched.

        Raises:
            StorageError: if the object cannot be stored.
        """

from collections.abc import Callable
from pathlib import Path

from wedexpense.config.settings import Settings
from wedexpense.storage.base import BaseObjectStore
from wedexpense.storage.http_store import HttpObjectStore
from wedexpense.storage.local_store import LocalObjectStore


def _local_store(settings: Settings) -> BaseObjectStore:
    return LocalObjectStore(
        root=Path(settings.storage_root),
        bucket=settings.storage_bucket,
        public_base_url=settings.storage_public_base_url,
    )


def _http_store(settings: Settings) -> BaseObjectStore:
    return HttpObjectStore(
        base_url=settings.storage_base_url,
        bucket=settings.storage_bucket,
        timeout_seconds=settings.storage_timeout_seconds,
        public_base_url=settings.storage_public_base_url,
    )


class ObjectStoreFactory:
    """Creates the object storage adapter named by settings."""

    BUILDERS: dict[str, Callable[[Settings], BaseObjectStore]] = {
        "local": _local_store,
        "http": _http_store,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseObjectStore:
        backend = settings.storage_backend.lower()
        builder = cls.BUILDERS.get(backend)
        if builder is None:
            raise ValueError(
                f"Unknown storage backend '{backend}'. Choose from: {list(cls.BUILDERS)}"
            )
        return builder(settings)

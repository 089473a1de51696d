import shutil
from pathlib import Path

from wedexpense.storage.base import BaseObjectStore
from wedexpense.storage.exceptions import StorageError
from wedexpense.upload.staging import StagedFile


class LocalObjectStore(BaseObjectStore):
    """Stores objects as files under ``{root}/{bucket}/{key}``."""

    def __init__(self, root: Path, bucket: str, public_base_url: str = "") -> None:
        self._root = root
        self._bucket = bucket
        self._public_base_url = public_base_url.rstrip("/")

    def put(self, staged: StagedFile, key: str) -> str:
        target = self._resolve_path(key)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(staged.path, target)
        except OSError as exc:
            raise StorageError(f"Failed to store object '{key}': {exc}") from exc
        if self._public_base_url:
            return f"{self._public_base_url}/{self._bucket}/{key}"
        return target.resolve().as_uri()

    def _resolve_path(self, key: str) -> Path:
        bucket_dir = (self._root / self._bucket).resolve()
        target = (bucket_dir / key).resolve()
        if not target.is_relative_to(bucket_dir):
            raise StorageError(f"Object key escapes bucket: {key}")
        return target

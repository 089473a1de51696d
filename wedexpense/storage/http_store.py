import httpx

from wedexpense.storage.base import BaseObjectStore
from wedexpense.storage.exceptions import StorageError, StorageNetworkError
from wedexpense.upload.staging import StagedFile


class HttpObjectStore(BaseObjectStore):
    """Writes objects with ``PUT {base_url}/{bucket}/{key}``.

    The service may answer with JSON ``{"url": ...}``; otherwise the object
    URL is built from ``public_base_url`` (or ``base_url``).
    """

    def __init__(
        self,
        *,
        base_url: str,
        bucket: str,
        timeout_seconds: int,
        public_base_url: str = "",
        client: httpx.Client | None = None,
    ) -> None:
        if not base_url.strip():
            raise ValueError("storage_base_url is required for storage_backend=http")
        self._base_url = base_url.rstrip("/")
        self._bucket = bucket
        self._public_base_url = (public_base_url or base_url).rstrip("/")
        self._client = client if client is not None else httpx.Client(timeout=timeout_seconds)

    def put(self, staged: StagedFile, key: str) -> str:
        try:
            response = self._client.put(
                f"{self._base_url}/{self._bucket}/{key}",
                content=staged.read_bytes(),
                headers={"Content-Type": staged.media_type},
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise StorageNetworkError(
                f"Object store returned HTTP {exc.response.status_code} for '{key}'"
            ) from exc
        except httpx.HTTPError as exc:
            raise StorageNetworkError(f"Object store network error: {exc}") from exc
        except OSError as exc:
            raise StorageError(f"Failed to read staged upload: {exc}") from exc
        return self._object_url(response, key)

    def _object_url(self, response: httpx.Response, key: str) -> str:
        try:
            payload = response.json()
        except ValueError:
            payload = None
        if isinstance(payload, dict) and isinstance(payload.get("url"), str):
            return payload["url"]
        return f"{self._public_base_url}/{self._bucket}/{key}"

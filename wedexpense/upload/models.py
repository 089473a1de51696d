from dataclasses import dataclass

DEFAULT_MEDIA_TYPE = "application/octet-stream"


@dataclass(frozen=True)
class UploadedPart:
    """One decoded section of a multipart upload body."""

    name: str
    content: bytes
    file_name: str | None = None
    media_type: str = DEFAULT_MEDIA_TYPE

    @property
    def is_file(self) -> bool:
        return self.file_name is not None

import re
import shutil
import tempfile
from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

_UNSAFE_CHARS_RE = re.compile(r"[^a-zA-Z0-9._-]")


def sanitize_file_name(file_name: str) -> str:
    """Replace every character outside ``[A-Za-z0-9._-]`` with ``_``.

    Empty and dot-only names (``.``, ``..``) become ``upload``.
    """
    sanitized = _UNSAFE_CHARS_RE.sub("_", file_name)
    if not sanitized.strip("."):
        return "upload"
    return sanitized


@dataclass(frozen=True)
class StagedFile:
    """Upload bytes written to a scratch file for the storage and OCR calls."""

    path: Path
    file_name: str
    media_type: str

    def read_bytes(self) -> bytes:
        return self.path.read_bytes()


@contextmanager
def staged_upload(
    content: bytes,
    file_name: str,
    media_type: str,
) -> Generator[StagedFile, None, None]:
    """Write ``content`` to a scratch directory that is removed on exit."""
    scratch_dir = Path(tempfile.mkdtemp(prefix="wedexpense_"))
    try:
        path = scratch_dir / sanitize_file_name(file_name)
        path.write_bytes(content)
        yield StagedFile(path=path, file_name=file_name, media_type=media_type)
    finally:
        shutil.rmtree(scratch_dir, ignore_errors=True)

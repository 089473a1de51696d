"""Byte-exact multipart body decoder.

The body is scanned as bytes for ``--<boundary>`` delimiters. Only the header
block of each part is decoded as text; part content is sliced out of the
original buffer untouched, so binary uploads survive unchanged.

Scanner states:
    PREAMBLE -> bytes before the first delimiter, discarded.
    PART     -> bytes up to the next delimiter form one part.
    DONE     -> a closing delimiter (``--<boundary>--``) was seen.
"""

import re
from enum import Enum, auto
from typing import ClassVar

from wedexpense.logging.logger import Log
from wedexpense.upload.models import DEFAULT_MEDIA_TYPE, UploadedPart

_BOUNDARY_RE = re.compile(r"boundary=([^;]*)", re.IGNORECASE)


class _State(Enum):
    PREAMBLE = auto()
    PART = auto()
    DONE = auto()


def boundary_from_content_type(content_type: str | None) -> bytes | None:
    """Return the ``boundary=`` parameter of a content-type header, or None."""
    if not content_type:
        return None
    match = _BOUNDARY_RE.search(content_type)
    if match is None:
        return None
    token = match.group(1).strip().strip('"')
    if not token:
        return None
    return token.encode("utf-8")


class MultipartDecoder:
    """Splits a multipart body into UploadedPart records. Never raises."""

    _NAME_RE: ClassVar[re.Pattern[str]] = re.compile(r'\bname="([^"]*)"', re.IGNORECASE)
    _FILENAME_RE: ClassVar[re.Pattern[str]] = re.compile(
        r'\bfilename="([^"]*)"', re.IGNORECASE
    )
    _CONTENT_TYPE_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"^Content-Type:[ \t]*(.+)$", re.IGNORECASE | re.MULTILINE
    )

    def __init__(self, boundary: bytes) -> None:
        self._delimiter = b"--" + boundary if boundary else b""

    def decode(self, body: bytes) -> list[UploadedPart]:
        """Return every part found in ``body``, in order of appearance."""
        if not self._delimiter:
            return []

        parts: list[UploadedPart] = []
        state = _State.PREAMBLE
        pos = 0
        part_start = 0

        while state is not _State.DONE:
            idx = body.find(self._delimiter, pos)
            if idx == -1:
                break
            if state is _State.PART:
                part = self._parse_part(body[part_start:idx])
                if part is not None:
                    parts.append(part)
            pos = idx + len(self._delimiter)
            if body.startswith(b"--", pos):
                state = _State.DONE
                continue
            pos = self._skip_line_break(body, pos)
            part_start = pos
            state = _State.PART

        Log.debug(f"Decoded {len(parts)} multipart parts from {len(body)} bytes")
        return parts

    def _parse_part(self, raw: bytes) -> UploadedPart | None:
        header_end, separator_len = self._find_header_end(raw)
        if header_end == -1:
            Log.debug("Skipping multipart part without header separator")
            return None

        headers = raw[:header_end].decode("utf-8", errors="replace")
        content = self._strip_trailing_line_break(raw[header_end + separator_len :])

        name_match = self._NAME_RE.search(headers)
        filename_match = self._FILENAME_RE.search(headers)
        type_match = self._CONTENT_TYPE_RE.search(headers)
        media_type = type_match.group(1).strip() if type_match else ""

        return UploadedPart(
            name=name_match.group(1) if name_match else "",
            content=content,
            file_name=filename_match.group(1) if filename_match else None,
            media_type=media_type or DEFAULT_MEDIA_TYPE,
        )

    @staticmethod
    def _find_header_end(raw: bytes) -> tuple[int, int]:
        # A part with no headers starts directly with the blank line.
        if raw.startswith(b"\r\n"):
            return 0, 2
        if raw.startswith(b"\n"):
            return 0, 1
        idx = raw.find(b"\r\n\r\n")
        if idx != -1:
            return idx, 4
        idx = raw.find(b"\n\n")
        if idx != -1:
            return idx, 2
        return -1, 0

    @staticmethod
    def _skip_line_break(body: bytes, pos: int) -> int:
        if body.startswith(b"\r\n", pos):
            return pos + 2
        if body.startswith(b"\n", pos):
            return pos + 1
        return pos

    @staticmethod
    def _strip_trailing_line_break(content: bytes) -> bytes:
        if content.endswith(b"\r\n"):
            return content[:-2]
        if content.endswith(b"\n"):
            return content[:-1]
        return content


def decode_upload(body: bytes, content_type: str | None) -> list[UploadedPart]:
    """Decode a request body using the boundary from its content-type header.

    Returns an empty list when the header carries no usable boundary; callers
    then treat the whole body as one anonymous attachment.
    """
    boundary = boundary_from_content_type(content_type)
    if boundary is None:
        return []
    return MultipartDecoder(boundary).decode(body)


def first_file_part(parts: list[UploadedPart]) -> UploadedPart | None:
    """Return the first part carrying a ``filename`` attribute."""
    return next((part for part in parts if part.is_file), None)

import io

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from tests.multipart import RECEIPT_TEXT


def _pdf(pages: list[list[str]]) -> bytes:
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    for lines in pages:
        y = 720
        for line in lines:
            c.drawString(72, y, line)
            y -= 20
        c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def receipt_pdf_bytes() -> bytes:
    """Single-page PDF carrying the Royal Caterers receipt text."""
    return _pdf([RECEIPT_TEXT.splitlines()])


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    return _pdf([["Page one content"], ["Page two content"]])


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    return _pdf([[]])


@pytest.fixture()
def binary_payload() -> bytes:
    """Bytes that are not valid UTF-8 and contain CR/LF sequences and dashes."""
    return bytes(range(256)) + b"\r\n--not-a-boundary\r\n\xff\xfe\x00\x89PNG"

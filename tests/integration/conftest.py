from collections.abc import Generator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from wedexpense.api.app import create_app
from wedexpense.categorization.categorizer import Categorizer
from wedexpense.categorization.taxonomy import WEDDING_TAXONOMY
from wedexpense.extraction.extractor import FieldExtractor
from wedexpense.ingestion.orchestrator import IngestionOrchestrator
from wedexpense.recognition.pdfplumber_adapter import PdfPlumberRecognizer
from wedexpense.storage.local_store import LocalObjectStore

PUBLIC_BASE_URL = "http://files.test"
BUCKET = "wedexpense-receipts"


@pytest.fixture()
def files_root(tmp_path: Path) -> Path:
    root = tmp_path / "files"
    root.mkdir()
    return root


@pytest.fixture()
def pdf_orchestrator(files_root: Path) -> IngestionOrchestrator:
    """Orchestrator wired to real pdfplumber recognition and local storage."""
    return IngestionOrchestrator(
        object_store=LocalObjectStore(files_root, BUCKET, public_base_url=PUBLIC_BASE_URL),
        recognizer=PdfPlumberRecognizer(),
        extractor=FieldExtractor(),
        categorizer=Categorizer(WEDDING_TAXONOMY),
    )


@pytest.fixture()
def client(pdf_orchestrator: IngestionOrchestrator) -> Generator[TestClient, None, None]:
    with TestClient(create_app(pdf_orchestrator)) as test_client:
        yield test_client

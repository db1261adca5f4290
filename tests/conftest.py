"""Shared test fixtures."""

from datetime import date
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from papersmith.adapters.storage import FilesystemAdapter
from papersmith.domain.models import ExtractionResult
from papersmith.ports.llm import LLMPort

SETTINGS_ENV_VARS = (
    "OPENAI_API_KEY",
    "PAPERSMITH_API_KEY",
    "PAPERSMITH_GLOB_PATTERN",
    "PAPERSMITH_LLM_MODEL",
    "PAPERSMITH_LLM_BASE_URL",
    "PAPERSMITH_LLM_TIMEOUT",
    "PAPERSMITH_NAMING_FALLBACK_DATE",
    "PAPERSMITH_NAMING_FALLBACK_LABEL",
    "PAPERSMITH_NAMING_MAX_SLUG_LENGTH",
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep the developer's environment, .env and config file out of tests."""
    for var in SETTINGS_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(
        "papersmith.config.CONFIG_PATH", tmp_path / "no-such-config.toml"
    )


@pytest.fixture
def sample_extraction() -> ExtractionResult:
    """Sample extraction result for testing."""
    return ExtractionResult(
        date=date(2024, 9, 16),
        category="invoice",
        title="bunnings",
    )


@pytest.fixture
def mock_llm(sample_extraction: ExtractionResult) -> MagicMock:
    """Mock LLM port."""
    mock = MagicMock(spec=LLMPort)
    mock.analyze.return_value = sample_extraction
    return mock


@pytest.fixture
def storage() -> FilesystemAdapter:
    return FilesystemAdapter()


@pytest.fixture
def scans(tmp_path: Path) -> Path:
    """Directory with a couple of scanned PDFs."""
    scan_dir = tmp_path / "scans"
    scan_dir.mkdir()
    (scan_dir / "Scanned Document 1.pdf").write_bytes(b"%PDF-1.4 first")
    (scan_dir / "Scanned Document 2.pdf").write_bytes(b"%PDF-1.4 second")
    return scan_dir

"""Unit tests for canonical filename rules."""

from datetime import date

import pytest

from papersmith.domain.models import ExtractionResult
from papersmith.domain.naming import (
    CANONICAL_PATTERN,
    is_canonical,
    slugify,
    target_filename,
)


class TestIsCanonical:
    """Tests for is_canonical."""

    @pytest.mark.parametrize(
        "name",
        [
            "20240916-bunnings-invoice.pdf",
            "20211231-document-unknown.pdf",
            "12345678.pdf",
            "20240916 anything goes.pdf",
        ],
    )
    def test_canonical_names(self, name: str) -> None:
        assert is_canonical(name) is True

    @pytest.mark.parametrize(
        "name",
        [
            "Scanned Document 1.pdf",
            "2024-09-16-invoice.pdf",
            "1234567-short.pdf",
            "20240916-bunnings-invoice.PDF",
            "20240916-bunnings-invoice.pdf.bak",
            "x20240916.pdf",
        ],
    )
    def test_non_canonical_names(self, name: str) -> None:
        assert is_canonical(name) is False


class TestSlugify:
    """Tests for slugify."""

    def test_lowercases_and_hyphenates(self) -> None:
        assert slugify("Dan Murphys") == "dan-murphys"

    def test_collapses_invalid_characters(self) -> None:
        assert slugify("Tax   Invoice #123 / Q3") == "tax-invoice-123-q3"

    def test_strips_leading_trailing_hyphens(self) -> None:
        assert slugify("  --Receipt--  ") == "receipt"

    def test_transliterates_accents(self) -> None:
        assert slugify("Rechnung für März") == "rechnung-fur-marz"

    def test_no_path_separators_survive(self) -> None:
        assert slugify("../../etc/passwd") == "etc-passwd"

    def test_empty_uses_fallback(self) -> None:
        assert slugify("") == "unknown"
        assert slugify("!!!") == "unknown"
        assert slugify("日本語", fallback="misc") == "misc"

    def test_truncates_at_hyphen_boundary(self) -> None:
        result = slugify("very " * 30, max_length=20)
        assert len(result) <= 20
        assert not result.endswith("-")
        assert result == "very-very-very-very"

    def test_truncates_single_long_word(self) -> None:
        assert slugify("a" * 100, max_length=10) == "a" * 10


class TestTargetFilename:
    """Tests for target_filename."""

    def test_scanned_invoice(self, sample_extraction: ExtractionResult) -> None:
        assert target_filename(sample_extraction) == "20240916-bunnings-invoice.pdf"

    def test_fallback_values(self) -> None:
        result = ExtractionResult(
            date=date(2021, 12, 31), category="unknown", title="document"
        )
        assert target_filename(result) == "20211231-document-unknown.pdf"

    def test_normalizes_title_and_category(self) -> None:
        result = ExtractionResult(
            date=date(2020, 12, 24), category="Tax Invoice", title="Dan Murphy's"
        )
        assert target_filename(result) == "20201224-dan-murphy-s-tax-invoice.pdf"

    def test_blank_fields_use_fallback_label(self) -> None:
        result = ExtractionResult(date=date(2024, 1, 2), category="  ", title="?")
        assert target_filename(result, fallback_label="na") == "20240102-na-na.pdf"

    def test_always_canonical(self) -> None:
        odd = [
            ExtractionResult(date=date(1, 1, 1), category="", title=""),
            ExtractionResult(date=date(999, 5, 6), category="x" * 500, title="../"),
            ExtractionResult(date=date(9999, 12, 31), category="ÄÖÜ", title="\x00"),
        ]
        for result in odd:
            name = target_filename(result)
            assert CANONICAL_PATTERN.match(name), name
            assert "/" not in name

    def test_pads_small_years(self) -> None:
        result = ExtractionResult(date=date(999, 5, 6), category="a", title="b")
        assert target_filename(result).startswith("09990506-")

    def test_deterministic(self, sample_extraction: ExtractionResult) -> None:
        copy = ExtractionResult(
            date=sample_extraction.date,
            category=sample_extraction.category,
            title=sample_extraction.title,
        )
        assert target_filename(sample_extraction) == target_filename(copy)

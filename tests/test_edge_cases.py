"""Edge-case and regression tests for clause segmentation and matching."""

from __future__ import annotations

import pytest

from hukuk_analyzer.extractors import ClauseExtractor, EntityExtractor, split_paragraphs

# ---------------------------------------------------------------------------
# ClauseExtractor edge cases
# ---------------------------------------------------------------------------


class TestClauseExtractorEdgeCases:
    """Edge-case tests for ClauseExtractor."""

    @pytest.fixture
    def extractor(self) -> ClauseExtractor:
        return ClauseExtractor()

    def test_whitespace_only(self, extractor: ClauseExtractor) -> None:
        assert extractor.extract("   \n\n\t  \n") == []

    def test_only_unmatched_text(self, extractor: ClauseExtractor) -> None:
        assert extractor.extract("Hava bugün güzel.\n\nYarın yağmur bekleniyor.") == []

    def test_windows_line_endings(self, extractor: ClauseExtractor) -> None:
        text = "Taraflar arasında iş sözleşmesi akdedilmiştir.\r\n\r\nSınırsız sorumluluk kabul edilmiştir."
        clauses = extractor.extract(text)
        assert [c.type for c in clauses] == ["taraf_tanimlama", "sorumluluk_sinirsiz"]
        assert [c.line_number for c in clauses] == [1, 3]
        for clause in clauses:
            assert text[clause.start_char:clause.end_char] == clause.content

    def test_uppercase_turkish_paragraph(self, extractor: ClauseExtractor) -> None:
        text = "TARAFLAR ARASINDA İŞ SÖZLEŞMESİ AKDEDİLMİŞTİR."
        clauses = extractor.extract(text)
        assert len(clauses) == 1
        assert clauses[0].type == "taraf_tanimlama"
        assert clauses[0].content == text

    def test_single_newlines_do_not_split(self) -> None:
        paragraphs = split_paragraphs("Birinci satır\nikinci satır\n\nÜçüncü")
        assert [p.text for p in paragraphs] == ["Birinci satır\nikinci satır", "Üçüncü"]

    def test_leading_blank_lines(self) -> None:
        paragraphs = split_paragraphs("\n\n\n  Madde metni")
        assert len(paragraphs) == 1
        assert paragraphs[0].line_number == 4
        assert paragraphs[0].start_char == 5

    def test_unmatched_paragraphs_between_clauses(self, extractor: ClauseExtractor) -> None:
        text = (
            "Taraflar arasında iş sözleşmesi akdedilmiştir.\n\n"
            "Hava bugün güzel.\n\n"
            "Sınırsız sorumluluk kabul edilmiştir."
        )
        clauses = extractor.extract(text)
        assert [c.line_number for c in clauses] == [1, 5]


# ---------------------------------------------------------------------------
# EntityExtractor edge cases
# ---------------------------------------------------------------------------


class TestEntityExtractorEdgeCases:
    @pytest.fixture
    def extractor(self) -> EntityExtractor:
        return EntityExtractor()

    def test_whitespace_only(self, extractor: EntityExtractor) -> None:
        assert extractor.extract("   \n\t") == []

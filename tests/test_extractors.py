"""Tests for entity, obligation and right extraction and clause segmentation."""

from __future__ import annotations

import pytest

from hukuk_analyzer.catalog import PatternCatalog
from hukuk_analyzer.extractors import (
    CLAUSE_MATCH_CONFIDENCE,
    DEFAULT_OBLIGEE,
    UNSPECIFIED_PARTY,
    ClauseExtractor,
    EntityExtractor,
    ObligationExtractor,
    link_related_clauses,
    normalize_amount,
    normalize_percentage,
    split_paragraphs,
)
from hukuk_analyzer.ids import SequentialIdGenerator
from hukuk_analyzer.models import ClauseCategory, EntityType, ExtractedClause, Severity


def _of_type(entities, entity_type: EntityType) -> list:
    return [e for e in entities if e.type == entity_type]


# ---------------------------------------------------------------------------
# EntityExtractor tests
# ---------------------------------------------------------------------------


class TestEntityExtractor:
    """Tests for the EntityExtractor."""

    @pytest.fixture
    def extractor(self) -> EntityExtractor:
        return EntityExtractor()

    def test_percentage_and_duration(self, extractor: EntityExtractor) -> None:
        entities = extractor.extract("Gecikme halinde %25 ceza ve 180 gün süre")
        assert [e.type for e in entities] == [EntityType.PERCENTAGE, EntityType.DURATION]
        assert entities[0].normalized == "25"
        assert entities[1].normalized == ("180", "gün")
        assert entities[1].text == "180 gün"

    def test_amount_with_turkish_separators(self, extractor: EntityExtractor) -> None:
        amounts = _of_type(extractor.extract("Toplam 45.000,50 TL ödenir."), EntityType.AMOUNT)
        assert len(amounts) == 1
        assert amounts[0].text == "45.000,50 TL"
        assert amounts[0].normalized == "45000.50"
        assert amounts[0].confidence == pytest.approx(0.95)

    def test_amount_with_lira_sign_prefix(self, extractor: EntityExtractor) -> None:
        amounts = _of_type(extractor.extract("Depozito ₺1.500 olarak alınır."), EntityType.AMOUNT)
        assert [a.normalized for a in amounts] == ["1500"]

    def test_numeric_date(self, extractor: EntityExtractor) -> None:
        dates = _of_type(extractor.extract("Sözleşme 15.03.2024 tarihinde imzalanmıştır."), EntityType.DATE)
        assert [d.normalized for d in dates] == ["2024-03-15"]

    def test_iso_date(self, extractor: EntityExtractor) -> None:
        dates = _of_type(extractor.extract("Teslim 2024-12-31 tarihinde yapılır."), EntityType.DATE)
        assert [d.normalized for d in dates] == ["2024-12-31"]

    def test_named_month_date(self, extractor: EntityExtractor) -> None:
        dates = _of_type(extractor.extract("1 Mart 2024 tarihinde başlar."), EntityType.DATE)
        assert [d.normalized for d in dates] == ["2024-03-01"]
        assert dates[0].text == "1 Mart 2024"

    def test_impossible_date_is_kept_without_normalization(self, extractor: EntityExtractor) -> None:
        dates = _of_type(extractor.extract("Son gün 31.02.2024 olarak belirlenmiştir."), EntityType.DATE)
        assert len(dates) == 1
        assert dates[0].normalized is None

    def test_duration_with_spelled_number_and_business_days(self, extractor: EntityExtractor) -> None:
        durations = _of_type(
            extractor.extract("30 (otuz) gün önceden bildirilir ve 5 iş günü içinde cevap verilir."),
            EntityType.DURATION,
        )
        assert [d.normalized for d in durations] == [("30", "gün"), ("5", "iş günü")]

    def test_references(self, extractor: EntityExtractor) -> None:
        text = "4857 sayılı İş Kanunu ve TBK m. 49 hükümleri uygulanır."
        references = _of_type(extractor.extract(text), EntityType.REFERENCE)
        assert [r.normalized for r in references] == ["4857 sayılı İş Kanunu", "TBK m. 49"]

    def test_party(self, extractor: EntityExtractor) -> None:
        parties = _of_type(
            extractor.extract("Anadolu Yazılım Teknolojileri A.Ş. işveren sıfatıyla imzalar."),
            EntityType.PARTY,
        )
        assert [p.normalized for p in parties] == ["Anadolu Yazılım Teknolojileri A.Ş."]

    def test_location(self, extractor: EntityExtractor) -> None:
        locations = _of_type(
            extractor.extract("İstanbul Mahkemeleri ve İcra Daireleri yetkilidir."), EntityType.LOCATION
        )
        assert [loc.normalized for loc in locations] == ["İstanbul"]

    def test_offset_is_applied(self, extractor: EntityExtractor) -> None:
        entity = extractor.extract("%10", offset=100)[0]
        assert (entity.start_char, entity.end_char) == (100, 103)

    def test_sorted_by_start(self, extractor: EntityExtractor) -> None:
        entities = extractor.extract("180 gün içinde %25 oranında 1.000 TL ödenir.")
        starts = [e.start_char for e in entities]
        assert starts == sorted(starts)

    def test_custom_confidence(self) -> None:
        extractor = EntityExtractor(confidence={EntityType.PERCENTAGE: 0.5})
        assert extractor.extract("%10")[0].confidence == 0.5

    def test_empty_text(self, extractor: EntityExtractor) -> None:
        assert extractor.extract("") == []

    def test_no_entities(self, extractor: EntityExtractor) -> None:
        assert extractor.extract("taraflar iyi niyetle davranır") == []


class TestNormalizers:
    @pytest.mark.parametrize(
        "raw, expected",
        [("45.000,50", "45000.50"), ("1.500", "1500"), ("250", "250"), ("12,5", "12.5")],
    )
    def test_normalize_amount(self, raw: str, expected: str) -> None:
        assert normalize_amount(raw) == expected

    @pytest.mark.parametrize("raw, expected", [("%25", "25"), ("yüzde 10", "10"), ("7,5 %", "7,5")])
    def test_normalize_percentage(self, raw: str, expected: str) -> None:
        assert normalize_percentage(raw) == expected


# ---------------------------------------------------------------------------
# ObligationExtractor tests
# ---------------------------------------------------------------------------


class TestObligations:
    @pytest.fixture
    def extractor(self) -> ObligationExtractor:
        return ObligationExtractor()

    def test_affirmative_periodic(self, extractor: ObligationExtractor) -> None:
        obligations = extractor.extract_obligations("Kiracı kira bedelini her ay ödeyecektir.")
        assert len(obligations) == 1
        obligation = obligations[0]
        assert obligation.obligor == "Kiracı"
        assert obligation.obligee == DEFAULT_OBLIGEE
        assert obligation.action.startswith("Kiracı kira bedelini")
        assert obligation.is_periodic is True
        assert obligation.is_conditional is False
        assert obligation.condition is None

    def test_conditional_with_deadline(self, extractor: ObligationExtractor) -> None:
        obligations = extractor.extract_obligations(
            "Ödemenin gecikmesi halinde Alıcı 7 gün içinde faizi ödeyecektir."
        )
        assert len(obligations) == 1
        obligation = obligations[0]
        assert obligation.obligor == "Alıcı"
        assert obligation.is_conditional is True
        assert obligation.condition == "Ödemenin gecikmesi halinde"
        assert obligation.deadline == "7 gün içinde"

    def test_prohibition(self, extractor: ObligationExtractor) -> None:
        obligations = extractor.extract_obligations("Müşteri gizli bilgileri açıklayamaz.")
        assert [o.obligor for o in obligations] == ["Müşteri"]
        assert obligations[0].action == "Müşteri gizli bilgileri açıklayamaz"

    def test_mandatory_language(self, extractor: ObligationExtractor) -> None:
        obligations = extractor.extract_obligations("Yüklenici teslim tarihine uymakla yükümlüdür.")
        assert len(obligations) == 1
        assert obligations[0].obligor == "Yüklenici"
        assert obligations[0].action == "Yüklenici teslim tarihine uymakla yükümlüdür."

    def test_mandatory_without_party(self, extractor: ObligationExtractor) -> None:
        obligations = extractor.extract_obligations("Bedelin peşin ödenmesi mecburdur.")
        assert [o.obligor for o in obligations] == [UNSPECIFIED_PARTY]

    def test_none(self, extractor: ObligationExtractor) -> None:
        assert extractor.extract_obligations("Bu sözleşme iki nüsha olarak düzenlenmiştir.") == []


class TestRights:
    @pytest.fixture
    def extractor(self) -> ObligationExtractor:
        return ObligationExtractor()

    def test_exclusive_non_transferable(self, extractor: ObligationExtractor) -> None:
        rights = extractor.extract_rights(
            "Lisans alan bakımından münhasır kullanım hakkı vardır. Bu hak devredilemez."
        )
        assert len(rights) == 1
        right = rights[0]
        assert right.holder == "Lisans alan"
        assert right.right == "hakkı vardır"
        assert right.is_exclusive is True
        assert right.is_transferable is False
        assert right.scope == "Lisans alan bakımından münhasır kullanım hakkı vardır."

    def test_limitations(self, extractor: ObligationExtractor) -> None:
        text = "Kiracı depozitonun iadesini talep edebilir, ancak hasar bedeli düşülür."
        rights = extractor.extract_rights(text)
        assert [r.right for r in rights] == ["talep edebilir"]
        assert rights[0].holder == "Kiracı"
        assert rights[0].is_transferable is True
        assert rights[0].limitations == (text,)

    def test_authority_phrasing(self, extractor: ObligationExtractor) -> None:
        rights = extractor.extract_rights("Şirket bu konuda yetkilidir.")
        assert [(r.holder, r.right) for r in rights] == [("Şirket", "yetkilidir")]

    def test_none(self, extractor: ObligationExtractor) -> None:
        assert extractor.extract_rights("Bedel peşin ödenir.") == []


# ---------------------------------------------------------------------------
# Paragraph segmentation
# ---------------------------------------------------------------------------


class TestSplitParagraphs:
    TEXT = "Birinci paragraf.\n\n  İkinci\nsatır.  \n\n\n   \n\nÜçüncü."

    def test_texts(self) -> None:
        assert [p.text for p in split_paragraphs(self.TEXT)] == [
            "Birinci paragraf.",
            "İkinci\nsatır.",
            "Üçüncü.",
        ]

    def test_offsets_slice_original(self) -> None:
        for paragraph in split_paragraphs(self.TEXT):
            assert self.TEXT[paragraph.start_char : paragraph.end_char] == paragraph.text

    def test_line_numbers(self) -> None:
        assert [p.line_number for p in split_paragraphs(self.TEXT)] == [1, 3, 9]

    def test_blank(self) -> None:
        assert split_paragraphs("") == []
        assert split_paragraphs(" \n\n \t\n") == []

    def test_single_paragraph(self) -> None:
        paragraphs = split_paragraphs("  Tek satır.  ")
        assert len(paragraphs) == 1
        assert paragraphs[0].start_char == 2


# ---------------------------------------------------------------------------
# ClauseExtractor tests
# ---------------------------------------------------------------------------


class TestClauseExtractor:
    TEXT = (
        "KİRA SÖZLEŞMESİ\n\n"
        "Taraflar arasında işbu sözleşme imzalanmıştır.\n\n"
        "Yüklenici her türlü zarardan sınırsız olarak sorumludur."
    )

    @pytest.fixture
    def extractor(self, catalog: PatternCatalog) -> ClauseExtractor:
        return ClauseExtractor(catalog, id_generator=SequentialIdGenerator())

    def test_unmatched_paragraphs_are_skipped(self, extractor: ClauseExtractor) -> None:
        clauses = extractor.extract(self.TEXT)
        assert [c.type for c in clauses] == ["taraf_tanimlama", "sorumluluk_sinirsiz"]
        assert [c.id for c in clauses] == ["clause_1", "clause_2"]

    def test_clause_fields(self, extractor: ClauseExtractor) -> None:
        clause = extractor.extract(self.TEXT)[0]
        assert clause.category == ClauseCategory.PARTY_INFO
        assert clause.title == "Taraf Tanımlaması"
        assert clause.line_number == 3
        assert clause.start_char == self.TEXT.index("Taraflar")
        assert clause.confidence == CLAUSE_MATCH_CONFIDENCE
        assert clause.inherent_severity is None

    def test_clause_risk_flags(self, extractor: ClauseExtractor) -> None:
        clause = extractor.extract(self.TEXT)[1]
        assert clause.inherent_severity == Severity.CRITICAL
        assert [f.rule_id for f in clause.risk_flags] == ["sinirsiz_sorumluluk", "her_turlu_zarar"]
        assert [f.id for f in clause.risk_flags] == ["flag_1", "flag_2"]
        assert all(f.clause_id == clause.id for f in clause.risk_flags)
        assert clause.is_risky is True

    def test_entity_offsets_are_document_level(self, extractor: ClauseExtractor) -> None:
        text = "Giriş.\n\nAylık kira bedeli 25.000 TL olarak belirlenmiştir."
        clause = extractor.extract(text)[0]
        amount = _of_type(clause.entities, EntityType.AMOUNT)[0]
        assert text[amount.start_char : amount.end_char] == "25.000 TL"

    def test_empty(self, extractor: ClauseExtractor) -> None:
        assert extractor.extract("") == []

    def test_default_catalog(self) -> None:
        assert ClauseExtractor().catalog is PatternCatalog.default()


class TestLinkRelatedClauses:
    @staticmethod
    def _clause(clause_id: str, title: str, content: str) -> ExtractedClause:
        return ExtractedClause(
            id=clause_id,
            type=clause_id,
            category=ClauseCategory.GENERAL,
            title=title,
            content=content,
            start_char=0,
            end_char=len(content),
            line_number=1,
            confidence=CLAUSE_MATCH_CONFIDENCE,
        )

    def test_symmetric_links(self) -> None:
        clauses = [
            self._clause("a", "Mücbir Sebep", "Mücbir sebep halinde depozito iade edilir."),
            self._clause("b", "Depozito", "Depozito 10.000 TL'dir."),
            self._clause("c", "Tebligat", "Adresler geçerlidir."),
        ]
        linked = link_related_clauses(clauses)
        assert linked[0].related_clauses == ("b",)
        assert linked[1].related_clauses == ("a",)
        assert linked[2].related_clauses == ()

    def test_input_is_not_modified(self) -> None:
        clauses = [
            self._clause("a", "Mücbir Sebep", "Depozito iade edilir."),
            self._clause("b", "Depozito", "Tutar sabittir."),
        ]
        link_related_clauses(clauses)
        assert clauses[0].related_clauses == ()

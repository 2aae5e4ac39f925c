"""Extraction engines for Turkish contract text.

Provides entity extraction, obligation/right extraction and clause
segmentation using regex and keyword patterns. Every extractor is a pure
function of its input: results are fresh immutable values and nothing is
shared between calls.

All matching runs on text folded with Turkish case rules (``text.fold``);
folding preserves length, so match offsets are used to slice the original
text and raw spans keep their original casing.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, replace
from datetime import date
from typing import Optional

from .catalog import PatternCatalog
from .ids import IdGenerator, SequentialIdGenerator
from .models import (
    EntityType,
    ExtractedClause,
    ExtractedEntity,
    ExtractedObligation,
    ExtractedRight,
)
from .risk import RiskFlagDetector
from .text import fold, split_sentences

logger = logging.getLogger(__name__)

# Fixed match confidence for catalog hits.
CLAUSE_MATCH_CONFIDENCE = 0.85

# ---------------------------------------------------------------------------
# Entity Extractor
# ---------------------------------------------------------------------------

_NUMBER = r"\d+(?:[.,]\d+)*"

_MONTHS = {
    "ocak": 1,
    "şubat": 2,
    "mart": 3,
    "nisan": 4,
    "mayıs": 5,
    "haziran": 6,
    "temmuz": 7,
    "ağustos": 8,
    "eylül": 9,
    "ekim": 10,
    "kasım": 11,
    "aralık": 12,
}

_DAY = r"(0?[1-9]|[12]\d|3[01])"
_MONTH = r"(0?[1-9]|1[0-2])"
_MONTH_NAME = "(" + "|".join(_MONTHS) + ")"

# Patterns run on folded text unless noted.
_AMOUNT_PATTERNS = [
    re.compile(rf"(?<![\d.,])({_NUMBER})\s*(tl|usd|eur|dolar|euro|türk\s+lirası|₺)(?![a-zçğıöşü])"),
    re.compile(rf"(₺)\s*({_NUMBER})"),
]

_PERCENTAGE_PATTERN = re.compile(
    r"yüzde\s*\d+(?:[.,]\d+)?|%\s?\d+(?:[.,]\d+)?|(?<![\d.,])\d+(?:[.,]\d+)?\s?%"
)

_DATE_NUMERIC = re.compile(r"(?<![\d.])" + _DAY + r"[./-]" + _MONTH + r"[./-](\d{4}|\d{2})(?![\d.]\d)(?!\d)")
_DATE_ISO = re.compile(r"(?<![\d.])(\d{4})-" + _MONTH + "-" + _DAY + r"(?!\d)")
_DATE_NAMED = re.compile(r"(?<!\d)" + _DAY + r"\s+" + _MONTH_NAME + r"\s+(\d{4})(?!\d)")

_DURATION_PATTERN = re.compile(
    r"(?<![\d.,])(\d+)\s*(?:\([a-zçğıöşü]+\)\s*)?(iş\s*günü|gün|hafta|ay|yıl|saat)"
)

_REFERENCE_PATTERNS = [
    re.compile(
        r"\b\d{3,5}\s+sayılı\s+(?:[^\s,.;]+\s+){0,5}?"
        r"(?:kanunu|kanun|yönetmeliği|yönetmelik|kanun\s+hükmünde\s+kararname)"
    ),
    re.compile(r"\b(?:tbk|tmk|ttk|hmk|iik|tck|kvkk)\s*(?:m\.|md\.|madde)\s*\d+(?:/\d+)?"),
    re.compile(r"\b(?:yargıtay|danıştay)\s+\d+\.\s*(?:hukuk|ceza)\s+dairesi"),
]

# Case-sensitive; run on the original text.
_PARTY_PATTERN = re.compile(
    r"(?:[A-ZÇĞİÖŞÜ][\w&\-]*\s+){1,6}"
    r"(?:A\.\s?Ş\.|Ltd\.\s?Şti\.|Limited\s+Şirketi|Anonim\s+Şirketi)"
)
_LOCATION_PATTERN = re.compile(
    r"((?:[A-ZÇĞİÖŞÜ][\w]+\s+){1,3})"
    r"(?:Mahkemeleri|Mahkemesi|İcra\s+Daireleri|İcra\s+Müdürlükleri)"
)

ENTITY_CONFIDENCE: dict[EntityType, float] = {
    EntityType.AMOUNT: 0.95,
    EntityType.PERCENTAGE: 0.9,
    EntityType.DATE: 0.85,
    EntityType.DURATION: 0.9,
    EntityType.REFERENCE: 0.8,
    EntityType.PARTY: 0.75,
    EntityType.LOCATION: 0.7,
}


def normalize_amount(number: str) -> str:
    """Strip thousands separators and convert a comma decimal to a dot.

    ``"45.000,50"`` becomes ``"45000.50"``.
    """
    return number.replace(".", "").replace(",", ".")


def normalize_percentage(raw: str) -> str:
    """Keep only digits and decimal separators: ``"%25"`` becomes ``"25"``."""
    return re.sub(r"[^0-9.,]", "", raw)


def _iso_date(year: int, month: int, day: int) -> Optional[str]:
    try:
        return date(year, month, day).isoformat()
    except ValueError:
        return None


class EntityExtractor:
    """Extract typed, normalised entities from a text span.

    Each entity regex is applied independently and exhaustively. Matches of
    different types may overlap (a date inside an amount-like number, for
    instance); overlaps across types are kept as is. The result is sorted by
    start offset.

    Example::

        extractor = EntityExtractor()
        for entity in extractor.extract("Gecikme halinde %25 ceza ve 180 gün süre"):
            print(entity.type.value, entity.normalized)
    """

    def __init__(self, confidence: dict[EntityType, float] | None = None) -> None:
        self._confidence = {**ENTITY_CONFIDENCE, **(confidence or {})}

    def extract(self, text: str, offset: int = 0) -> list[ExtractedEntity]:
        """Extract every entity from *text*.

        Args:
            text: The text span to scan.
            offset: Added to every character offset, so entities found in a
                paragraph carry document-level positions.

        Returns:
            Entities ordered by start offset; an empty list if nothing matched.
        """
        if not text:
            return []
        folded = fold(text)
        found: list[ExtractedEntity] = []
        found.extend(self._amounts(text, folded, offset))
        found.extend(self._percentages(text, folded, offset))
        found.extend(self._dates(text, folded, offset))
        found.extend(self._durations(text, folded, offset))
        found.extend(self._references(text, folded, offset))
        found.extend(self._parties(text, offset))
        found.extend(self._locations(text, offset))
        found.sort(key=lambda e: (e.start_char, e.end_char))
        return found

    # ------------------------------------------------------------------
    # Per-type scanners
    # ------------------------------------------------------------------

    def _entity(
        self,
        entity_type: EntityType,
        text: str,
        match: re.Match,
        offset: int,
        normalized,
    ) -> ExtractedEntity:
        return ExtractedEntity(
            type=entity_type,
            text=text[match.start() : match.end()],
            normalized=normalized,
            start_char=offset + match.start(),
            end_char=offset + match.end(),
            confidence=self._confidence[entity_type],
        )

    def _amounts(self, text: str, folded: str, offset: int) -> list[ExtractedEntity]:
        entities = []
        suffixed, prefixed = _AMOUNT_PATTERNS
        for match in suffixed.finditer(folded):
            entities.append(
                self._entity(EntityType.AMOUNT, text, match, offset, normalize_amount(match.group(1)))
            )
        for match in prefixed.finditer(folded):
            entities.append(
                self._entity(EntityType.AMOUNT, text, match, offset, normalize_amount(match.group(2)))
            )
        return entities

    def _percentages(self, text: str, folded: str, offset: int) -> list[ExtractedEntity]:
        return [
            self._entity(
                EntityType.PERCENTAGE, text, m, offset, normalize_percentage(m.group())
            )
            for m in _PERCENTAGE_PATTERN.finditer(folded)
        ]

    def _dates(self, text: str, folded: str, offset: int) -> list[ExtractedEntity]:
        entities = []
        for match in _DATE_NUMERIC.finditer(folded):
            day, month, year = match.groups()
            full_year = int(year) + 2000 if len(year) == 2 else int(year)
            iso = _iso_date(full_year, int(month), int(day))
            entities.append(self._entity(EntityType.DATE, text, match, offset, iso))
        for match in _DATE_ISO.finditer(folded):
            year, month, day = match.groups()
            iso = _iso_date(int(year), int(month), int(day))
            entities.append(self._entity(EntityType.DATE, text, match, offset, iso))
        for match in _DATE_NAMED.finditer(folded):
            day, month_name, year = match.groups()
            iso = _iso_date(int(year), _MONTHS[month_name], int(day))
            entities.append(self._entity(EntityType.DATE, text, match, offset, iso))
        return entities

    def _durations(self, text: str, folded: str, offset: int) -> list[ExtractedEntity]:
        entities = []
        for match in _DURATION_PATTERN.finditer(folded):
            count, unit = match.groups()
            normalized = (count, " ".join(unit.split()))
            entities.append(self._entity(EntityType.DURATION, text, match, offset, normalized))
        return entities

    def _references(self, text: str, folded: str, offset: int) -> list[ExtractedEntity]:
        entities = []
        for pattern in _REFERENCE_PATTERNS:
            for match in pattern.finditer(folded):
                raw = text[match.start() : match.end()]
                entities.append(
                    self._entity(EntityType.REFERENCE, text, match, offset, " ".join(raw.split()))
                )
        return entities

    def _parties(self, text: str, offset: int) -> list[ExtractedEntity]:
        return [
            self._entity(EntityType.PARTY, text, m, offset, " ".join(m.group().split()))
            for m in _PARTY_PATTERN.finditer(text)
        ]

    def _locations(self, text: str, offset: int) -> list[ExtractedEntity]:
        return [
            self._entity(EntityType.LOCATION, text, m, offset, m.group(1).strip())
            for m in _LOCATION_PATTERN.finditer(text)
        ]


# ---------------------------------------------------------------------------
# Obligation / Right Extractor
# ---------------------------------------------------------------------------

UNSPECIFIED_PARTY = "Belirtilmemiş"
DEFAULT_OBLIGEE = "Karşı taraf"

# Nominative party nouns; longer alternatives first.
_PARTY_NOUN = (
    r"(?:kiraya\s+veren|lisans\s+veren|lisans\s+alan|hizmet\s+sağlayıcı|hizmet\s+alan|"
    r"işveren|işçi|kiracı|yüklenici|müşteri|satıcı|alıcı|şirket|taraflar|taraf)"
)

_AFFIRMATIVE_PATTERN = re.compile(
    rf"\b(?P<obligor>{_PARTY_NOUN})(?=[\s,])[^.;\n]{{0,150}}?"
    r"(?:yapacak|edecek|verecek|sağlayacak|ödeyecek|teslim\s+edecek)[a-zçğıöşü]*"
)
_PROHIBITION_PATTERN = re.compile(
    rf"\b(?P<obligor>{_PARTY_NOUN})(?=[\s,])[^.;\n]{{0,150}}?"
    r"(?:yapamaz|edemez|veremez|kullanamaz|açıklayamaz|yasaktır)\b"
)
_MANDATORY_PATTERN = re.compile(r"(?:yükümlüdür|mecburdur|zorundadır|borçludur)")
_PARTY_NOUN_PATTERN = re.compile(rf"\b{_PARTY_NOUN}(?=[\s,])")

CONDITIONAL_MARKERS = ("şartıyla", "halinde", "takdirde", "durumunda", "koşuluyla")
PERIODIC_MARKERS = ("her ay", "her yıl", "her hafta", "periyodik", "düzenli olarak")
_CONDITIONAL_PATTERN = re.compile("|".join(CONDITIONAL_MARKERS))

_DEADLINE_PATTERN = re.compile(
    r"\d+\s*(?:\([a-zçğıöşü]+\)\s*)?(?:iş\s+günü|gün|hafta|ay|yıl)\s+içinde"
)

_RIGHT_PATTERNS = [
    re.compile(r"hakkı?\s+(?:saklıdır|vardır|bulunmaktadır|bulunur)"),
    re.compile(r"(?:yetkili|muktedir|ehil)d[iı]r"),
    re.compile(r"talep\s+(?:edebilir|hakkı)"),
    re.compile(r"fesih\s+hakkı"),
]
EXCLUSIVITY_MARKERS = ("münhasır",)
NON_TRANSFERABLE_MARKERS = ("devredilemez", "devredemez", "temlik edilemez")
LIMITATION_MARKERS = ("ancak", "sadece", "yalnızca", "ile sınırlı", "hariç", "kaydıyla")


@dataclass(frozen=True)
class _Span:
    start: int
    end: int


class ObligationExtractor:
    """Find obligation and right phrasings inside a clause.

    Obligations come from three independent phrasing families: affirmative
    action verbs, prohibition verbs and mandatory-language markers. A clause
    may yield any number of obligations and the families are not
    deduplicated against each other.
    """

    def extract_obligations(self, text: str) -> list[ExtractedObligation]:
        """Return every obligation phrasing found in *text*."""
        folded = fold(text)
        is_conditional = any(m in folded for m in CONDITIONAL_MARKERS)
        is_periodic = any(m in folded for m in PERIODIC_MARKERS)

        spans: list[tuple[str, _Span]] = []
        for pattern in (_AFFIRMATIVE_PATTERN, _PROHIBITION_PATTERN):
            for match in pattern.finditer(folded):
                obligor = text[match.start("obligor") : match.end("obligor")]
                spans.append((obligor, _Span(match.start(), match.end())))
        for match in _MANDATORY_PATTERN.finditer(folded):
            sentence_start, sentence_end = self._sentence_bounds(text, match.start())
            party = _PARTY_NOUN_PATTERN.search(folded, sentence_start, sentence_end)
            obligor = text[party.start() : party.end()] if party else UNSPECIFIED_PARTY
            spans.append((obligor, _Span(sentence_start, sentence_end)))

        obligations = []
        for obligor, span in spans:
            sentence_start, sentence_end = self._sentence_bounds(text, span.start)
            obligations.append(
                ExtractedObligation(
                    obligor=" ".join(obligor.split()),
                    obligee=DEFAULT_OBLIGEE,
                    action=" ".join(text[span.start : span.end].split()),
                    condition=self._condition(text, folded, sentence_start, sentence_end)
                    if is_conditional
                    else None,
                    deadline=self._deadline(text, folded, sentence_start, sentence_end),
                    is_conditional=is_conditional,
                    is_periodic=is_periodic,
                )
            )
        return obligations

    def extract_rights(self, text: str) -> list[ExtractedRight]:
        """Return every right phrasing found in *text*."""
        folded = fold(text)
        is_exclusive = any(m in folded for m in EXCLUSIVITY_MARKERS)
        is_transferable = not any(m in folded for m in NON_TRANSFERABLE_MARKERS)
        limitations = tuple(
            " ".join(text[start:end].split())
            for start, end in split_sentences(text)
            if any(m in folded[start:end] for m in LIMITATION_MARKERS)
        )

        rights = []
        for pattern in _RIGHT_PATTERNS:
            for match in pattern.finditer(folded):
                sentence_start, sentence_end = self._sentence_bounds(text, match.start())
                party = _PARTY_NOUN_PATTERN.search(folded, sentence_start, sentence_end)
                holder = text[party.start() : party.end()] if party else UNSPECIFIED_PARTY
                rights.append(
                    ExtractedRight(
                        holder=" ".join(holder.split()),
                        right=text[match.start() : match.end()],
                        is_exclusive=is_exclusive,
                        is_transferable=is_transferable,
                        scope=" ".join(text[sentence_start:sentence_end].split()),
                        limitations=limitations,
                    )
                )
        return rights

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _sentence_bounds(text: str, offset: int) -> tuple[int, int]:
        for start, end in split_sentences(text):
            if start <= offset < end:
                return start, end
        return 0, len(text)

    @staticmethod
    def _condition(text: str, folded: str, start: int, end: int) -> Optional[str]:
        """Text from the sentence start up to the end of the first conditional marker.

        The obligation's own sentence is searched first, then the whole clause.
        """
        match = _CONDITIONAL_PATTERN.search(folded, start, end) or _CONDITIONAL_PATTERN.search(folded)
        if match is None:
            return None
        sentence_start = ObligationExtractor._sentence_bounds(text, match.start())[0]
        return " ".join(text[sentence_start : match.end()].split())

    @staticmethod
    def _deadline(text: str, folded: str, start: int, end: int) -> Optional[str]:
        match = _DEADLINE_PATTERN.search(folded, start, end) or _DEADLINE_PATTERN.search(folded)
        if match is None:
            return None
        return " ".join(text[match.start() : match.end()].split())


# ---------------------------------------------------------------------------
# Clause Segmenter & Matcher
# ---------------------------------------------------------------------------

# A paragraph is a maximal run of characters that does not start a blank line.
_PARAGRAPH_PATTERN = re.compile(r"(?:(?!\n\s*\n).)+", re.DOTALL)


@dataclass(frozen=True)
class Paragraph:
    """A non-blank paragraph with document-level position."""

    text: str
    start_char: int
    end_char: int
    line_number: int


def split_paragraphs(text: str) -> list[Paragraph]:
    """Split *text* on blank-line boundaries, tracking offsets and line numbers.

    Leading and trailing whitespace is trimmed from every paragraph and
    whitespace-only paragraphs are dropped.
    """
    paragraphs = []
    for match in _PARAGRAPH_PATTERN.finditer(text):
        raw = match.group()
        stripped = raw.strip()
        if not stripped:
            continue
        start = match.start() + (len(raw) - len(raw.lstrip()))
        paragraphs.append(
            Paragraph(
                text=stripped,
                start_char=start,
                end_char=start + len(stripped),
                line_number=text.count("\n", 0, start) + 1,
            )
        )
    return paragraphs


class ClauseExtractor:
    """Segment a document into paragraphs and classify them as clauses.

    Each paragraph is matched against the catalog in priority order and the
    **first** matching clause type wins. Matched paragraphs are enriched with
    entities, obligations, rights and clause-level risk flags; unmatched
    paragraphs are skipped. A final pass links clauses that mention each
    other's titles.

    Args:
        catalog: Pattern catalog to match against.
        entity_extractor: Custom EntityExtractor instance (optional).
        obligation_extractor: Custom ObligationExtractor instance (optional).
        risk_detector: Custom RiskFlagDetector instance (optional).
        id_generator: Clause and flag id source (optional, sequential by default).
    """

    def __init__(
        self,
        catalog: PatternCatalog | None = None,
        entity_extractor: EntityExtractor | None = None,
        obligation_extractor: ObligationExtractor | None = None,
        risk_detector: RiskFlagDetector | None = None,
        id_generator: IdGenerator | None = None,
    ) -> None:
        self._catalog = catalog or PatternCatalog.default()
        self._ids = id_generator or SequentialIdGenerator()
        self._entity_extractor = entity_extractor or EntityExtractor()
        self._obligation_extractor = obligation_extractor or ObligationExtractor()
        self._risk_detector = risk_detector or RiskFlagDetector(self._catalog, self._ids)

    @property
    def catalog(self) -> PatternCatalog:
        return self._catalog

    def extract(self, text: str) -> list[ExtractedClause]:
        """Extract clauses from *text*.

        Returns:
            One clause per matched paragraph, in document order.
        """
        clauses = []
        for paragraph in split_paragraphs(text):
            clause = self.match_paragraph(paragraph)
            if clause is not None:
                clauses.append(clause)
        return link_related_clauses(clauses)

    def match_paragraph(self, paragraph: Paragraph) -> Optional[ExtractedClause]:
        """Classify one paragraph, or return ``None`` if no clause type matches."""
        definition = self._catalog.first_match(paragraph.text)
        if definition is None:
            logger.debug("Line %d: no clause type matched", paragraph.line_number)
            return None
        logger.debug(
            "Line %d: matched %s (priority %d)",
            paragraph.line_number,
            definition.type,
            definition.priority,
        )

        clause = ExtractedClause(
            id=self._ids("clause"),
            type=definition.type,
            category=definition.category,
            title=definition.title,
            content=paragraph.text,
            start_char=paragraph.start_char,
            end_char=paragraph.end_char,
            line_number=paragraph.line_number,
            confidence=CLAUSE_MATCH_CONFIDENCE,
            entities=tuple(self._entity_extractor.extract(paragraph.text, offset=paragraph.start_char)),
            obligations=tuple(self._obligation_extractor.extract_obligations(paragraph.text)),
            rights=tuple(self._obligation_extractor.extract_rights(paragraph.text)),
            inherent_severity=definition.severity,
        )
        flags = self._risk_detector.detect_clause_flags(clause)
        return replace(clause, risk_flags=tuple(flags))


def link_related_clauses(clauses: list[ExtractedClause]) -> list[ExtractedClause]:
    """Return new clauses whose ``related_clauses`` hold cross-referencing ids.

    Clause A relates to clause B when A's content contains B's title or B's
    content contains A's title (case-insensitive). The relation is symmetric
    and each clause stores its own id list.
    """
    folded = [(fold(c.title), fold(c.content)) for c in clauses]
    linked = []
    for i, clause in enumerate(clauses):
        title_i, content_i = folded[i]
        related = tuple(
            other.id
            for j, other in enumerate(clauses)
            if j != i and (folded[j][0] in content_i or title_i in folded[j][1])
        )
        linked.append(replace(clause, related_clauses=related) if related else clause)
    return linked

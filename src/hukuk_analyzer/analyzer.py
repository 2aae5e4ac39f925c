"""Document-level aggregation of clause extraction and risk detection.

The ``ClauseAnalyzer`` class is the primary entry point for callers. It
takes contract text and a document type, runs clause extraction (which
enriches every clause with entities, obligations, rights and content risk
flags), adds missing-clause flags, scores the document and returns an
immutable ``ExtractionResult``.
"""

from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from typing import Callable, Optional

from .catalog import PatternCatalog
from .config import Settings
from .extractors import ClauseExtractor
from .ids import IdGenerator, SequentialIdGenerator
from .models import (
    ClauseCategory,
    ExtractedClause,
    ExtractionResult,
    ExtractionSummary,
    RiskFlag,
    RiskFlagType,
    Severity,
)
from .risk import RiskFlagDetector
from .scoring import level_for_flags

logger = logging.getLogger(__name__)

DEFAULT_DOCUMENT_NAME = "Belge"

CRITICAL_RISK_ADVICE = "Kritik risk içeren maddeleri avukatınızla görüşün"
OBLIGATION_BALANCE_ADVICE = "Yükümlülük/hak dengesi kontrol edilmelidir"


class ClauseAnalyzer:
    """Turn Turkish contract text into a scored clause inventory.

    Example::

        analyzer = ClauseAnalyzer()
        result = analyzer.analyze(text, document_type="is_sozlesmesi")

        print(result.summary.risk_score, result.summary.risk_level.value)
        for clause in result.high_risk_clauses:
            print(clause.title)

    Args:
        catalog: Pattern catalog (optional, the bundled catalog by default).
        settings: Analyzer settings (optional, defaults when omitted).
        clause_extractor: Custom ClauseExtractor instance (optional).
        risk_detector: Custom RiskFlagDetector instance (optional).
        id_generator: Id source shared by clauses, flags and results.
        clock: Returns the extraction timestamp (optional, UTC now).
    """

    def __init__(
        self,
        catalog: PatternCatalog | None = None,
        settings: Settings | None = None,
        clause_extractor: ClauseExtractor | None = None,
        risk_detector: RiskFlagDetector | None = None,
        id_generator: IdGenerator | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        if catalog is None:
            catalog = clause_extractor.catalog if clause_extractor else PatternCatalog.default()
        self._catalog = catalog
        self._settings = settings or Settings()
        self._ids = id_generator or SequentialIdGenerator()
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._risk_detector = risk_detector or RiskFlagDetector(catalog, self._ids)
        self._clause_extractor = clause_extractor or ClauseExtractor(
            catalog,
            risk_detector=self._risk_detector,
            id_generator=self._ids,
        )

    @property
    def catalog(self) -> PatternCatalog:
        return self._catalog

    @property
    def settings(self) -> Settings:
        return self._settings

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def analyze(
        self,
        text: str,
        document_type: Optional[str] = None,
        document_name: str = DEFAULT_DOCUMENT_NAME,
    ) -> ExtractionResult:
        """Analyze contract text.

        Empty or whitespace-only text yields an empty result whose
        ``missing_clauses`` still lists every required clause of the
        document type (no flags are raised for them).

        Args:
            text: Plain contract text.
            document_type: Document type key such as ``"is_sozlesmesi"``.
                Unknown types fall back to the generic type.
            document_name: Label carried into the result and reports.

        Returns:
            The complete, immutable ExtractionResult.
        """
        started = time.perf_counter()
        doc_type = self._catalog.resolve_document_type(document_type or self._settings.default_document_type)

        truncated = len(text) > self._settings.max_document_chars
        if truncated:
            logger.warning(
                "%s: %d characters exceeds the limit of %d, truncating",
                document_name,
                len(text),
                self._settings.max_document_chars,
            )
            text = text[: self._settings.max_document_chars]

        if text.strip():
            clauses = self._clause_extractor.extract(text)
            observed = {c.type for c in clauses}
            missing_flags = self._risk_detector.missing_clause_flags(observed, doc_type)
        else:
            clauses = []
            observed = set()
            missing_flags = []

        missing_titles = tuple(
            self._catalog.title_for(t) for t in self._risk_detector.missing_clause_types(observed, doc_type)
        )
        flags = [f for c in clauses for f in c.risk_flags] + missing_flags
        logger.debug(
            "%s: %d clause(s), %d flag(s), %d missing",
            document_name,
            len(clauses),
            len(flags),
            len(missing_titles),
        )

        summary = self._summarize(clauses, flags, missing_titles)
        return ExtractionResult(
            id=self._ids("extraction"),
            document_name=document_name,
            document_type=doc_type,
            clauses=tuple(clauses),
            entities=tuple(e for c in clauses for e in c.entities),
            obligations=tuple(o for c in clauses for o in c.obligations),
            rights=tuple(r for c in clauses for r in c.rights),
            risk_flags=tuple(flags),
            summary=summary,
            extracted_at=self._clock(),
            processing_time_ms=(time.perf_counter() - started) * 1000,
            truncated=truncated,
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _summarize(
        self,
        clauses: list[ExtractedClause],
        flags: list[RiskFlag],
        missing_titles: tuple[str, ...],
    ) -> ExtractionSummary:
        by_category = {category: 0 for category in ClauseCategory}
        for clause in clauses:
            by_category[clause.category] += 1

        score, level = level_for_flags(flags)
        obligations = sum(len(c.obligations) for c in clauses)
        rights = sum(len(c.rights) for c in clauses)
        critical = sum(1 for f in flags if f.severity == Severity.CRITICAL)

        return ExtractionSummary(
            total_clauses=len(clauses),
            clauses_by_category=by_category,
            total_entities=sum(len(c.entities) for c in clauses),
            total_obligations=obligations,
            total_rights=rights,
            risk_score=score,
            risk_level=level,
            critical_risks=critical,
            high_risks=sum(1 for f in flags if f.severity == Severity.HIGH),
            missing_clauses=missing_titles,
            recommendations=tuple(
                build_recommendations(flags, critical, _missing_count(flags), obligations, rights)
            ),
        )


def build_recommendations(
    flags: list[RiskFlag],
    critical_count: int,
    missing_count: int,
    obligation_count: int,
    right_count: int,
) -> list[str]:
    """Document-wide advice followed by each flag's recommendation, deduplicated.

    Example::

        build_recommendations([], 0, 2, 0, 0)
        # ["2 eksik madde tamamlanmalıdır"]
    """
    advice = []
    if critical_count > 0:
        advice.append(CRITICAL_RISK_ADVICE)
    if missing_count > 0:
        advice.append(f"{missing_count} eksik madde tamamlanmalıdır")
    if obligation_count > right_count * 2:
        advice.append(OBLIGATION_BALANCE_ADVICE)
    advice.extend(f.recommendation for f in flags)
    return list(dict.fromkeys(advice))


def _missing_count(flags: list[RiskFlag]) -> int:
    return sum(1 for f in flags if f.type == RiskFlagType.MISSING)

"""Risk flag detection.

Two independent sources of flags:

* content flags, raised by testing each clause against the catalog's risk
  patterns (a clause may collect several), and
* missing-clause flags, raised at document level for every clause type the
  document type requires but the document does not contain.
"""

from __future__ import annotations

import logging
from typing import Iterable

from .catalog import PatternCatalog
from .ids import IdGenerator, SequentialIdGenerator
from .models import ExtractedClause, RiskFlag, RiskFlagType, Severity
from .text import fold

logger = logging.getLogger(__name__)

MISSING_CLAUSE_SEVERITY = Severity.MEDIUM


class RiskFlagDetector:
    """Raise severity-tagged risk flags on clauses and documents.

    Args:
        catalog: Pattern catalog providing risk patterns and required clauses.
        id_generator: Flag id source (optional, sequential by default).
    """

    def __init__(
        self,
        catalog: PatternCatalog | None = None,
        id_generator: IdGenerator | None = None,
    ) -> None:
        self._catalog = catalog or PatternCatalog.default()
        self._ids = id_generator or SequentialIdGenerator()

    def detect_clause_flags(self, clause: ExtractedClause) -> list[RiskFlag]:
        """Test a clause's content against every risk pattern.

        Returns:
            One flag per matching pattern, in catalog order.
        """
        folded = fold(clause.content)
        flags = [
            RiskFlag(
                id=self._ids("flag"),
                type=pattern.type,
                severity=pattern.severity,
                description=pattern.description,
                recommendation=pattern.recommendation,
                clause_id=clause.id,
                rule_id=pattern.id,
            )
            for pattern in self._catalog.risk_patterns
            if pattern.matches(folded)
        ]
        if flags:
            logger.debug("%s: %d risk flag(s)", clause.id, len(flags))
        return flags

    def missing_clause_types(self, observed: Iterable[str], document_type: str | None) -> list[str]:
        """Required clause types for *document_type* that are absent from *observed*."""
        present = set(observed)
        return [t for t in self._catalog.required_clause_types(document_type) if t not in present]

    def missing_clause_flags(self, observed: Iterable[str], document_type: str | None) -> list[RiskFlag]:
        """Emit one document-level ``missing`` flag per absent required clause type."""
        flags = []
        for clause_type in self.missing_clause_types(observed, document_type):
            title = self._catalog.title_for(clause_type)
            flags.append(
                RiskFlag(
                    id=self._ids("flag"),
                    type=RiskFlagType.MISSING,
                    severity=MISSING_CLAUSE_SEVERITY,
                    description=f"Eksik madde: {title}",
                    recommendation=f'"{title}" maddesi eklenmesi önerilir',
                    clause_id="",
                    rule_id=clause_type,
                )
            )
        return flags

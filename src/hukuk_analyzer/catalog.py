"""Validated, read-only pattern catalog.

``PatternCatalog`` compiles the rule tables in ``catalog_data`` into frozen
records and checks them before any analysis runs. A malformed entry aborts
construction with ``CatalogValidationError``; no rule is ever skipped.

The catalog is passed explicitly to every pipeline component, so tests can
substitute a minimal catalog built with ``PatternCatalog.from_tables``.
"""

from __future__ import annotations

import functools
import logging
import re
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Sequence

from . import catalog_data
from .models import ClauseCategory, RiskFlagType, Severity
from .text import fold

logger = logging.getLogger(__name__)

GENERIC_DOCUMENT_TYPE = "genel"

_REGEX_FLAGS = re.DOTALL


class HukukAnalyzerError(Exception):
    """Base class for errors raised by this package."""


class CatalogValidationError(HukukAnalyzerError, ValueError):
    """Raised when a rule table entry is malformed.

    Attributes:
        entry_id: Identifier of the offending clause type, risk pattern or
            document type.
    """

    def __init__(self, entry_id: str, message: str) -> None:
        self.entry_id = entry_id
        super().__init__(f"{entry_id}: {message}")


# ---------------------------------------------------------------------------
# Rule records
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ClauseTypeDefinition:
    """A catalog clause type with its compiled match rules.

    A definition matches a paragraph when ANY regex pattern finds a match or
    ANY keyword is a substring of the folded paragraph text.
    """

    type: str
    category: ClauseCategory
    title: str
    patterns: tuple[re.Pattern, ...]
    keywords: tuple[str, ...]
    severity: Optional[Severity] = None
    priority: int = 0

    def matches(self, folded_text: str) -> bool:
        """Test already-folded text against this definition's rules."""
        if any(p.search(folded_text) for p in self.patterns):
            return True
        return any(k in folded_text for k in self.keywords)


@dataclass(frozen=True)
class RiskPattern:
    """A severity-tagged risk rule, independent of clause types."""

    id: str
    type: RiskFlagType
    severity: Severity
    patterns: tuple[re.Pattern, ...]
    description: str
    recommendation: str

    def matches(self, folded_text: str) -> bool:
        return any(p.search(folded_text) for p in self.patterns)


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------


class PatternCatalog:
    """Ordered clause types, risk patterns and required-clause checklists.

    The order of ``clause_types`` is the match priority used by
    ``first_match``: earlier entries win.

    Example::

        catalog = PatternCatalog.default()
        definition = catalog.first_match("Taraflar arasında işbu sözleşme imzalanmıştır.")
        print(definition.type)  # "taraf_tanimlama"

    Args:
        clause_types: Validated clause type definitions in priority order.
        risk_patterns: Validated risk patterns.
        required_clauses: Document type -> ordered required clause types.
        category_names: Category -> Turkish display name.
        document_type_names: Document type -> Turkish display name.
        version: Version tag of the rule tables.
    """

    def __init__(
        self,
        clause_types: Sequence[ClauseTypeDefinition],
        risk_patterns: Sequence[RiskPattern],
        required_clauses: Mapping[str, Sequence[str]],
        category_names: Mapping[ClauseCategory, str] | None = None,
        document_type_names: Mapping[str, str] | None = None,
        version: str = "custom",
    ) -> None:
        self._clause_types = tuple(clause_types)
        self._risk_patterns = tuple(risk_patterns)
        self._by_type = {d.type: d for d in self._clause_types}
        self._required = {k: tuple(v) for k, v in required_clauses.items()}
        self._required.setdefault(GENERIC_DOCUMENT_TYPE, ())
        self._category_names = dict(category_names or {c: c.value for c in ClauseCategory})
        self._document_type_names = dict(document_type_names or {})
        self.version = version
        self._validate()

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_tables(
        cls,
        clause_types: Iterable[Mapping],
        risk_patterns: Iterable[Mapping] = (),
        required_clauses: Mapping[str, Sequence[str]] | None = None,
        category_names: Mapping[str, str] | None = None,
        document_type_names: Mapping[str, str] | None = None,
        version: str = "custom",
    ) -> PatternCatalog:
        """Build a catalog from plain rule tables (see ``catalog_data``).

        Raises:
            CatalogValidationError: If any entry is malformed.
        """
        definitions = [
            _build_clause_type(entry, priority) for priority, entry in enumerate(clause_types)
        ]
        risks = [_build_risk_pattern(entry) for entry in risk_patterns]
        names: dict[ClauseCategory, str] | None = None
        if category_names is not None:
            names = {}
            for key, name in category_names.items():
                names[_parse_enum(ClauseCategory, key, key, "category")] = name
        catalog = cls(
            definitions,
            risks,
            required_clauses or {},
            category_names=names,
            document_type_names=document_type_names,
            version=version,
        )
        logger.debug(
            "Loaded catalog %s: %d clause types, %d risk patterns",
            version,
            len(definitions),
            len(risks),
        )
        return catalog

    @classmethod
    def default(cls) -> PatternCatalog:
        """Return the built-in catalog, loaded and validated once per process."""
        return _default_catalog()

    def _validate(self) -> None:
        seen: set[str] = set()
        for definition in self._clause_types:
            if definition.type in seen:
                raise CatalogValidationError(definition.type, "duplicate clause type")
            seen.add(definition.type)
            if not definition.patterns and not definition.keywords:
                raise CatalogValidationError(definition.type, "empty rule list")

        risk_ids: set[str] = set()
        for risk in self._risk_patterns:
            if risk.id in risk_ids:
                raise CatalogValidationError(risk.id, "duplicate risk pattern")
            risk_ids.add(risk.id)
            if not risk.patterns:
                raise CatalogValidationError(risk.id, "empty rule list")

        for doc_type, required in self._required.items():
            for clause_type in required:
                if clause_type not in self._by_type:
                    raise CatalogValidationError(
                        doc_type, f"required clause type {clause_type!r} is not in the catalog"
                    )

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    @property
    def clause_types(self) -> tuple[ClauseTypeDefinition, ...]:
        return self._clause_types

    @property
    def risk_patterns(self) -> tuple[RiskPattern, ...]:
        return self._risk_patterns

    @property
    def document_types(self) -> tuple[str, ...]:
        return tuple(self._required)

    def get(self, clause_type: str) -> Optional[ClauseTypeDefinition]:
        return self._by_type.get(clause_type)

    def first_match(self, text: str) -> Optional[ClauseTypeDefinition]:
        """Return the first clause type, in priority order, whose rules match *text*."""
        folded = fold(text)
        for definition in self._clause_types:
            if definition.matches(folded):
                return definition
        return None

    def resolve_document_type(self, document_type: str | None) -> str:
        """Map unknown or empty document types to the generic type."""
        if document_type and document_type in self._required:
            return document_type
        return GENERIC_DOCUMENT_TYPE

    def required_clause_types(self, document_type: str | None) -> tuple[str, ...]:
        return self._required[self.resolve_document_type(document_type)]

    def required_clause_titles(self, document_type: str | None) -> tuple[str, ...]:
        return tuple(self.title_for(t) for t in self.required_clause_types(document_type))

    def title_for(self, clause_type: str) -> str:
        definition = self._by_type.get(clause_type)
        return definition.title if definition else clause_type

    def category_name(self, category: ClauseCategory) -> str:
        return self._category_names.get(category, category.value)

    def document_type_name(self, document_type: str) -> str:
        return self._document_type_names.get(document_type, document_type)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def clause_type_info(self, clause_type: str) -> Optional[dict]:
        """Describe a clause type, or return ``None`` if it is unknown."""
        definition = self._by_type.get(clause_type)
        if definition is None:
            return None
        return {
            "type": definition.type,
            "title": definition.title,
            "category": definition.category.value,
            "category_name": self.category_name(definition.category),
            "severity": definition.severity.value if definition.severity else None,
            "priority": definition.priority,
        }

    def categories(self) -> list[dict]:
        """List every main category with its display name and clause-type count."""
        counts = {c: 0 for c in ClauseCategory}
        for definition in self._clause_types:
            counts[definition.category] += 1
        return [
            {"id": c.value, "name": self.category_name(c), "count": counts[c]}
            for c in ClauseCategory
        ]

    def __len__(self) -> int:
        return len(self._clause_types)

    def __repr__(self) -> str:
        return (
            f"PatternCatalog(version={self.version!r}, clause_types={len(self._clause_types)}, "
            f"risk_patterns={len(self._risk_patterns)})"
        )


# ---------------------------------------------------------------------------
# Table parsing helpers
# ---------------------------------------------------------------------------


def _parse_enum(enum_cls, value, entry_id: str, field_name: str):
    try:
        return enum_cls(value)
    except ValueError:
        raise CatalogValidationError(entry_id, f"unknown {field_name} {value!r}") from None


def _compile(patterns: Iterable[str], entry_id: str) -> tuple[re.Pattern, ...]:
    compiled = []
    for pattern in patterns:
        try:
            compiled.append(re.compile(pattern, _REGEX_FLAGS))
        except re.error as exc:
            raise CatalogValidationError(entry_id, f"invalid regex {pattern!r}: {exc}") from exc
    return tuple(compiled)


def _build_clause_type(entry: Mapping, priority: int) -> ClauseTypeDefinition:
    clause_type = entry.get("type") or f"<entry {priority}>"
    if not entry.get("type"):
        raise CatalogValidationError(clause_type, "missing clause type id")
    if not entry.get("title"):
        raise CatalogValidationError(clause_type, "missing title")
    category = _parse_enum(ClauseCategory, entry.get("category"), clause_type, "category")
    severity = None
    if entry.get("severity") is not None:
        severity = _parse_enum(Severity, entry["severity"], clause_type, "severity")
    keywords = tuple(fold(k) for k in entry.get("keywords", ()) if k.strip())
    return ClauseTypeDefinition(
        type=clause_type,
        category=category,
        title=entry["title"],
        patterns=_compile(entry.get("patterns", ()), clause_type),
        keywords=keywords,
        severity=severity,
        priority=priority,
    )


def _build_risk_pattern(entry: Mapping) -> RiskPattern:
    risk_id = entry.get("id")
    if not risk_id:
        raise CatalogValidationError("<risk>", "missing risk pattern id")
    return RiskPattern(
        id=risk_id,
        type=_parse_enum(RiskFlagType, entry.get("type"), risk_id, "flag type"),
        severity=_parse_enum(Severity, entry.get("severity"), risk_id, "severity"),
        patterns=_compile(entry.get("patterns", ()), risk_id),
        description=entry.get("description", ""),
        recommendation=entry.get("recommendation", ""),
    )


@functools.lru_cache(maxsize=1)
def _default_catalog() -> PatternCatalog:
    return PatternCatalog.from_tables(
        catalog_data.CLAUSE_TYPES,
        catalog_data.RISK_PATTERNS,
        catalog_data.REQUIRED_CLAUSES,
        category_names=catalog_data.CATEGORY_NAMES,
        document_type_names=catalog_data.DOCUMENT_TYPES,
        version=catalog_data.CATALOG_VERSION,
    )

"""Explainable legal reasoning.

``ReasoningEngine.explain`` turns a legal question, its context and the
supporting evidence into an ``ExplainableResult``: an ordered reasoning
chain, counter-arguments, uncertainty factors and a confidence score whose
composition is spelled out in ``confidence_justification``.

This is rule-based scaffolding around the evidence a user supplies. It
does not interpret law.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Optional, Sequence

from .ids import IdGenerator, SequentialIdGenerator
from .models import (
    ConfidenceLevel,
    CounterArgument,
    Evidence,
    EvidenceType,
    ExplainableResult,
    Impact,
    ReasoningContext,
    ReasoningStep,
    ReasoningType,
    UncertaintyFactor,
)
from .scoring import confidence_breakdown, reliability_level, round_half_up, step_confidence
from .text import fold

MODEL_VERSION = "1.0.0-xai"
AUDIT_EXPORT_VERSION = "1.0"
UNKNOWN_JURISDICTION = "belirsiz"
MIN_KEY_FACTS = 3

CONFIDENCE_LABELS: dict[ConfidenceLevel, str] = {
    ConfidenceLevel.VERY_HIGH: "Çok Yüksek",
    ConfidenceLevel.HIGH: "Yüksek",
    ConfidenceLevel.MEDIUM: "Orta",
    ConfidenceLevel.LOW: "Düşük",
    ConfidenceLevel.VERY_LOW: "Çok Düşük",
}

CONFIDENCE_DESCRIPTIONS: dict[ConfidenceLevel, str] = {
    ConfidenceLevel.VERY_HIGH: "Güçlü kanıtlarla desteklenen, emsal kararlarla uyumlu sonuç",
    ConfidenceLevel.HIGH: "Sağlam hukuki dayanakları olan, genel kabul gören yorum",
    ConfidenceLevel.MEDIUM: "Makul gerekçelere dayanan ancak alternatif yorumları olan sonuç",
    ConfidenceLevel.LOW: "Sınırlı kanıtlara dayanan, belirsizlik içeren değerlendirme",
    ConfidenceLevel.VERY_LOW: "Spekülatif, yeterli hukuki dayanaktan yoksun değerlendirme",
}


@dataclass(frozen=True)
class LegalPrinciple:
    id: str
    name: str
    description: str
    application: str


@dataclass(frozen=True)
class InterpretationMethod:
    id: str
    name: str
    description: str
    priority: int


LEGAL_PRINCIPLES: tuple[LegalPrinciple, ...] = (
    LegalPrinciple(
        "kanun_oncelik",
        "Kanunların Önceliği",
        "Normlar hiyerarşisinde kanunlar yönetmeliklerden üstündür",
        "Çelişki durumunda kanun hükmü uygulanır",
    ),
    LegalPrinciple(
        "ozel_genel",
        "Özel Kanun - Genel Kanun",
        "Özel kanun genel kanuna göre öncelikli uygulanır",
        "Lex specialis derogat legi generali",
    ),
    LegalPrinciple(
        "sonraki_onceki",
        "Sonraki Kanun Önceliği",
        "Sonraki tarihli kanun öncekini zımnen ilga eder",
        "Lex posterior derogat legi priori",
    ),
    LegalPrinciple(
        "lehte_yorum",
        "Şüpheden Sanık Yararlanır",
        "Ceza hukukunda şüphe sanık lehine yorumlanır",
        "In dubio pro reo",
    ),
    LegalPrinciple(
        "ahde_vefa",
        "Ahde Vefa",
        "Sözleşmelere bağlılık ilkesi",
        "Pacta sunt servanda",
    ),
    LegalPrinciple(
        "iyi_niyet",
        "Dürüstlük Kuralı",
        "Herkes haklarını kullanırken dürüstlük kurallarına uymalıdır",
        "TMK m.2",
    ),
)

INTERPRETATION_METHODS: tuple[InterpretationMethod, ...] = (
    InterpretationMethod("lafzi", "Lafzi (Sözel) Yorum", "Kanun metninin kelime anlamına göre yorumu", 1),
    InterpretationMethod(
        "sistematik", "Sistematik Yorum", "Hükmün kanun sistematiği içindeki yerine göre yorumu", 2
    ),
    InterpretationMethod("tarihi", "Tarihi Yorum", "Kanun koyucunun iradesine göre yorum", 3),
    InterpretationMethod("amaci", "Amaçsal (Teleolojik) Yorum", "Hükmün amacına göre yorum", 4),
)

# Application words shorter than this never trigger a principle on their own.
_MIN_APPLICATION_WORD = 4


@dataclass(frozen=True)
class _CounterTrigger:
    pattern: re.Pattern
    argument: str
    basis: str
    strength: ConfidenceLevel


_COUNTER_TRIGGERS: tuple[_CounterTrigger, ...] = (
    _CounterTrigger(
        re.compile(r"tazminat|zarar|kusur"),
        "Müterafik kusur savunması ileri sürülebilir",
        "TBK m.52 - Zarar görenin de kusuru varsa tazminat indirilebilir",
        ConfidenceLevel.MEDIUM,
    ),
    _CounterTrigger(
        re.compile(r"fesih|sözleşme.{0,80}?son"),
        "Haklı neden veya mücbir sebep savunması yapılabilir",
        "TBK m.136, m.138 - İfa imkânsızlığı ve aşırı ifa güçlüğü",
        ConfidenceLevel.MEDIUM,
    ),
    _CounterTrigger(
        re.compile(r"alacak|borç|ödeme"),
        "Zamanaşımı def'i ileri sürülebilir",
        "TBK m.146 vd. - Genel zamanaşımı süreleri",
        ConfidenceLevel.HIGH,
    ),
    _CounterTrigger(
        re.compile(r"tahliye|kira"),
        "Kiracının korunması hükümleri uygulanabilir",
        "TBK m.347 vd. - Konut ve çatılı işyeri kiraları",
        ConfidenceLevel.HIGH,
    ),
    _CounterTrigger(
        re.compile(r"işe iade|fesih.{0,80}?iş"),
        "İşverenin yönetim hakkı savunması yapılabilir",
        "4857 s.K. m.18 - Feshin son çare olması ilkesi",
        ConfidenceLevel.MEDIUM,
    ),
    _CounterTrigger(
        re.compile(r"kvkk|kişisel veri"),
        "Meşru menfaat veya kanuni yükümlülük istisnası ileri sürülebilir",
        "KVKK m.5/2 - Açık rıza gerektirmeyen haller",
        ConfidenceLevel.HIGH,
    ),
)

_PROCEDURAL_COUNTER = (
    "Usuli itirazlar (görev, yetki, husumet) ileri sürülebilir",
    "HMK m.114 vd. - Dava şartları",
    ConfidenceLevel.MEDIUM,
)

NO_CONCLUSION = "Yeterli veri olmadan kesin bir sonuca ulaşmak mümkün değildir."

STANDARD_ASSUMPTIONS = (
    "Sunulan bilgilerin doğru ve eksiksiz olduğu varsayılmıştır.",
    "Mevzuatın analiz tarihi itibarıyla güncel olduğu kabul edilmiştir.",
    "Tarafların ehliyetlerinin tam olduğu varsayılmıştır.",
)

STANDARD_LIMITATIONS = (
    "Bu analiz hukuki mütalaa yerine geçmez.",
    "Somut olayın tüm koşulları bilinmeden kesin değerlendirme yapılamaz.",
    "Mahkeme kararları her zaman farklı olabilir.",
    "Mevzuat değişikliklerinden etkilenebilir.",
)

STANDARD_NEXT_STEPS = (
    "Avukatınıza danışarak detaylı hukuki değerlendirme alınız.",
    "İlgili belgelerin aslını temin ediniz.",
    "Zamanaşımı ve hak düşürücü süreleri kontrol ediniz.",
)


def confidence_label(level: ConfidenceLevel) -> str:
    """Turkish label of a confidence level (e.g. ``"Yüksek"``)."""
    return CONFIDENCE_LABELS[level]


def confidence_description(level: ConfidenceLevel) -> str:
    return f"{CONFIDENCE_LABELS[level]} - {CONFIDENCE_DESCRIPTIONS[level]}"


class ReasoningEngine:
    """Build explainable reasoning results from context and evidence.

    Example::

        engine = ReasoningEngine()
        statute = engine.create_evidence(
            EvidenceType.STATUTE, "Türk Borçlar Kanunu", "TBK m.344", is_verified=True
        )
        context = ReasoningContext(legal_area="kira", jurisdiction="İstanbul",
                                   key_facts=("Kira artışı", "Konut", "5 yıllık kira"))
        result = engine.explain("Kira artış oranı sınırı nedir?", context, [statute])
        print(result.confidence_level.value)

    Args:
        id_generator: Id source for evidence, steps and results (optional).
        clock: Returns the current time (optional, UTC now by default).
    """

    def __init__(
        self,
        id_generator: IdGenerator | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._ids = id_generator or SequentialIdGenerator()
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    # ------------------------------------------------------------------
    # Builders
    # ------------------------------------------------------------------

    def create_evidence(
        self,
        evidence_type: EvidenceType,
        source: str,
        citation: str,
        content: str = "",
        relevance: float = 0.8,
        is_verified: bool = False,
    ) -> Evidence:
        """Create an evidence record; *relevance* is clamped to [0, 1]."""
        if not citation:
            raise ValueError("citation must not be empty")
        return Evidence(
            id=self._ids("evidence"),
            type=evidence_type,
            source=source,
            citation=citation,
            content=content,
            relevance_score=max(0.0, min(1.0, relevance)),
            reliability=reliability_level(evidence_type),
            is_verified=is_verified,
        )

    def create_step(
        self,
        order: int,
        reasoning_type: ReasoningType,
        premise: str,
        inference: str,
        conclusion: str,
        evidences: Sequence[Evidence] = (),
        alternative_interpretations: Sequence[str] = (),
        potential_weaknesses: Sequence[str] = (),
    ) -> ReasoningStep:
        """Create a reasoning step whose confidence derives from its evidence."""
        if order < 1:
            raise ValueError(f"order must be >= 1, got {order}")
        return ReasoningStep(
            id=self._ids("step"),
            order=order,
            type=reasoning_type,
            premise=premise,
            inference=inference,
            conclusion=conclusion,
            evidences=tuple(evidences),
            confidence=step_confidence(evidences),
            alternative_interpretations=tuple(alternative_interpretations),
            potential_weaknesses=tuple(potential_weaknesses),
        )

    # ------------------------------------------------------------------
    # Analysis stages
    # ------------------------------------------------------------------

    @staticmethod
    def applicable_principles(query: str, context: ReasoningContext) -> list[LegalPrinciple]:
        """Principles named in the query or facts, or whose application wording the query uses."""
        folded_query = fold(query)
        folded_facts = fold(" ".join(context.key_facts))
        applicable = []
        for principle in LEGAL_PRINCIPLES:
            name = fold(principle.name)
            words = [w for w in fold(principle.application).split() if len(w) >= _MIN_APPLICATION_WORD]
            if name in folded_query or name in folded_facts or any(w in folded_query for w in words):
                applicable.append(principle)
        return applicable

    def counter_arguments(self, conclusion: str, context: ReasoningContext) -> list[CounterArgument]:
        """Standard counter-arguments triggered by the conclusion or the key facts."""
        folded_conclusion = fold(conclusion)
        folded_facts = [fold(f) for f in context.key_facts]
        counters = []
        for trigger in _COUNTER_TRIGGERS:
            if trigger.pattern.search(folded_conclusion) or any(
                trigger.pattern.search(f) for f in folded_facts
            ):
                counters.append(
                    CounterArgument(
                        id=self._ids("counter"),
                        argument=trigger.argument,
                        basis=trigger.basis,
                        strength=trigger.strength,
                    )
                )
        if context.case_type:
            argument, basis, strength = _PROCEDURAL_COUNTER
            counters.append(
                CounterArgument(id=self._ids("counter"), argument=argument, basis=basis, strength=strength)
            )
        return counters

    @staticmethod
    def uncertainty_factors(
        context: ReasoningContext, evidences: Sequence[Evidence]
    ) -> list[UncertaintyFactor]:
        """Identify what limits the reliability of the analysis."""
        factors = []
        verified = sum(1 for e in evidences if e.is_verified)
        if evidences and verified < len(evidences) * 0.5:
            unverified_pct = round_half_up((1 - verified / len(evidences)) * 100)
            factors.append(
                UncertaintyFactor(
                    factor="Doğrulanmamış Kaynaklar",
                    description=f"Kullanılan kaynakların %{unverified_pct}'i henüz doğrulanmamış",
                    impact=Impact.MEDIUM,
                    mitigation_suggestion="Resmi mevzuat ve içtihat kaynaklarından teyit alınması önerilir",
                )
            )

        factors.append(
            UncertaintyFactor(
                factor="Mevzuat Güncelliği",
                description="Son 6 ay içinde ilgili mevzuatta değişiklik olup olmadığı kontrol edilmelidir",
                impact=Impact.MEDIUM,
                mitigation_suggestion="Resmi Gazete ve kurum duyurularını kontrol edin",
            )
        )

        jurisdiction = fold(context.jurisdiction.strip()) if context.jurisdiction else ""
        if not jurisdiction or jurisdiction == UNKNOWN_JURISDICTION:
            factors.append(
                UncertaintyFactor(
                    factor="Yetki Belirsizliği",
                    description="Hangi mahkemenin yetkili olduğu netleştirilmeli",
                    impact=Impact.HIGH,
                    mitigation_suggestion="Yetki kurallarına göre yetkili mahkemeyi belirleyin",
                )
            )

        if len(context.key_facts) < MIN_KEY_FACTS:
            factors.append(
                UncertaintyFactor(
                    factor="Yetersiz Olay Bilgisi",
                    description="Değerlendirme için yeterli olay bilgisi mevcut değil",
                    impact=Impact.HIGH,
                    mitigation_suggestion="Ek bilgi ve belge toplanması önerilir",
                )
            )

        if len({e.type for e in evidences}) == 1:
            factors.append(
                UncertaintyFactor(
                    factor="Tek Tip Kaynak",
                    description="Analiz sadece tek tip kaynağa dayanmaktadır",
                    impact=Impact.LOW,
                    mitigation_suggestion="Farklı kaynak türlerinden (içtihat, doktrin) destekleyici bilgi ekleyin",
                )
            )
        return factors

    def reasoning_chain(
        self, query: str, context: ReasoningContext, evidences: Sequence[Evidence]
    ) -> list[ReasoningStep]:
        """Build up to four steps: principles, statutes, precedents, analogy."""
        steps = []
        statutes = [e for e in evidences if e.type is EvidenceType.STATUTE]
        precedents = [e for e in evidences if e.type is EvidenceType.CASE_LAW]

        principles = self.applicable_principles(query, context)
        if principles:
            steps.append(
                self.create_step(
                    1,
                    ReasoningType.DEDUCTIVE,
                    f"Uygulanabilir hukuki ilkeler: {', '.join(p.name for p in principles)}",
                    "Bu ilkeler somut olaya tatbik edildiğinde sonuç bu ilkelerle uyumlu olmalıdır.",
                    f"{principles[0].application} ilkesi gereği değerlendirme yapılmalıdır.",
                    statutes,
                    potential_weaknesses=["Farklı ilkelerin öncelikli uygulanması tartışılabilir"],
                )
            )

        if statutes:
            steps.append(
                self.create_step(
                    2,
                    ReasoningType.STATUTORY,
                    f"İlgili kanun hükümleri: {', '.join(e.citation for e in statutes)}",
                    "Lafzi yorum metoduyla kanun metninin açık anlamı değerlendirilmiştir.",
                    "Kanun hükmünün lafzından çıkan sonuç uygulanmalıdır.",
                    statutes,
                    ["Amaçsal yorum farklı sonuç doğurabilir", "Tarihi yorum farklı anlam verebilir"],
                    ["Kanun metni birden fazla yoruma açık olabilir"],
                )
            )

        if precedents:
            steps.append(
                self.create_step(
                    3,
                    ReasoningType.PRECEDENTIAL,
                    f"Emsal kararlar incelenmiştir: {len(precedents)} adet içtihat",
                    "Yargıtay ve Danıştay içtihatları benzer olaylarda istikrarlı görüş ortaya koymaktadır.",
                    "Yerleşik içtihat yönünde karar verilmesi muhtemeldir.",
                    precedents,
                    ["İçtihat değişikliği olabilir", "Somut olay farklılıkları etkili olabilir"],
                    ["İçtihat henüz tam olarak yerleşmemiş olabilir"],
                )
            )

        if context.case_type:
            steps.append(
                self.create_step(
                    4,
                    ReasoningType.ANALOGICAL,
                    f"Benzer {context.case_type} davalarında uygulanan çözümler değerlendirilmiştir.",
                    "Kıyas yoluyla benzer olaylardaki çözümler somut olaya uygulanabilir.",
                    "Benzer davalardaki çözümler yol gösterici niteliktedir.",
                    (),
                    ["Her dava kendine özgü koşullar içerir"],
                    ["Kıyas yasakları (özellikle ceza hukukunda) gözetilmelidir"],
                )
            )
        return steps

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def explain(
        self,
        query: str,
        context: ReasoningContext,
        evidences: Sequence[Evidence] = (),
    ) -> ExplainableResult:
        """Produce a confidence-scored, explainable answer skeleton for *query*.

        Args:
            query: The legal question.
            context: Facts and setting of the question.
            evidences: Supporting sources supplied by the caller.

        Returns:
            An immutable ExplainableResult.
        """
        evidences = tuple(evidences)
        steps = self.reasoning_chain(query, context, evidences)
        counters = self.counter_arguments(query, context)
        factors = self.uncertainty_factors(context, evidences)
        breakdown = confidence_breakdown(evidences, steps, counters, factors)

        conclusion = " ".join(s.conclusion for s in steps) if steps else NO_CONCLUSION

        next_steps = list(STANDARD_NEXT_STEPS)
        if counters:
            next_steps.append("Karşı argümanları değerlendirerek savunma stratejisi belirleyiniz.")
        if any(f.impact is Impact.HIGH for f in factors):
            next_steps.append("Belirsizlik faktörlerini gidermek için ek bilgi toplayınız.")

        return ExplainableResult(
            id=self._ids("xai"),
            query=query,
            conclusion=conclusion,
            confidence_score=breakdown.score,
            confidence_level=breakdown.level,
            confidence_justification=breakdown.justification(),
            reasoning_chain=tuple(steps),
            evidences=evidences,
            counter_arguments=tuple(counters),
            uncertainty_factors=tuple(factors),
            limitations=STANDARD_LIMITATIONS,
            assumptions=STANDARD_ASSUMPTIONS,
            suggested_next_steps=tuple(next_steps),
            generated_at=self._clock(),
            model_version=MODEL_VERSION,
        )


# ---------------------------------------------------------------------------
# Chain validation and audit export
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ChainValidation:
    is_valid: bool
    issues: tuple[str, ...] = ()


def validate_reasoning_chain(steps: Sequence[ReasoningStep]) -> ChainValidation:
    """Check a reasoning chain for ordering, evidence support and weak steps."""
    issues = []
    orders = [s.order for s in steps]
    if any(later <= earlier for earlier, later in zip(orders, orders[1:])):
        issues.append("Muhakeme adımları sıralı değil")

    unsupported = sum(1 for s in steps if not s.evidences)
    if unsupported > len(steps) * 0.5:
        issues.append("Adımların çoğunluğu kanıtla desteklenmiyor")

    weak = sum(1 for s in steps if s.confidence < 0.3)
    if weak:
        issues.append(f"{weak} adım düşük güvenilirlikte")

    return ChainValidation(is_valid=not issues, issues=tuple(issues))


def export_for_audit(result: ExplainableResult, exported_at: Optional[datetime] = None) -> str:
    """Serialise a result to indented JSON for an audit trail."""
    payload = result.to_dict()
    payload["exported_at"] = (exported_at or datetime.now(timezone.utc)).isoformat()
    payload["export_version"] = AUDIT_EXPORT_VERSION
    return json.dumps(payload, ensure_ascii=False, indent=2)

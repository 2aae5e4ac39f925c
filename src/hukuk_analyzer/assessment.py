"""Weighted-factor risk assessments for cases, contracts and compliance.

Each assessment builds a fixed table of ``RiskFactor`` values from its
input, then scores them with ``scoring.weighted_risk_score`` (weights are
renormalised by their sum) and ``scoring.category_breakdown``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Optional, Sequence

from .ids import IdGenerator, SequentialIdGenerator
from .models import (
    AssessmentType,
    ClauseCategory,
    ExtractionResult,
    RiskAssessment,
    RiskCategory,
    RiskFactor,
    RiskLevel,
)
from .scoring import category_breakdown, risk_level, weighted_risk_score

MAX_RECOMMENDATIONS = 5
HIGH_FACTOR_SCORE = 60

RISK_LEVEL_NAMES: dict[RiskLevel, str] = {
    RiskLevel.CRITICAL: "Kritik",
    RiskLevel.HIGH: "Yüksek",
    RiskLevel.MEDIUM: "Orta",
    RiskLevel.LOW: "Düşük",
    RiskLevel.MINIMAL: "Minimal",
}

RISK_CATEGORY_NAMES: dict[RiskCategory, str] = {
    RiskCategory.LEGAL: "Hukuki Risk",
    RiskCategory.FINANCIAL: "Mali Risk",
    RiskCategory.OPERATIONAL: "Operasyonel Risk",
    RiskCategory.COMPLIANCE: "Uyumluluk Riski",
    RiskCategory.REPUTATIONAL: "İtibar Riski",
    RiskCategory.CONTRACTUAL: "Sözleşmesel Risk",
}

ASSESSMENT_TYPE_NAMES: dict[AssessmentType, str] = {
    AssessmentType.CASE: "Dava Risk Değerlendirmesi",
    AssessmentType.CONTRACT: "Sözleşme Risk Değerlendirmesi",
    AssessmentType.COMPLIANCE: "Uyumluluk Risk Değerlendirmesi",
    AssessmentType.GENERAL: "Genel Risk Değerlendirmesi",
}


def _check_choice(field_name: str, value: Optional[str], choices: Sequence[str]) -> None:
    if value is not None and value not in choices:
        raise ValueError(f"{field_name} must be one of {', '.join(choices)}; got {value!r}")


# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------

_STRENGTH = ("strong", "moderate", "weak")


@dataclass(frozen=True)
class CaseRiskInput:
    """Facts about a dispute. ``None`` fields fall back to documented defaults."""

    case_type: str
    evidence_strength: str = "moderate"
    claim_amount: Optional[float] = None
    has_lawyer: Optional[bool] = None
    opposing_party_type: Optional[str] = None
    precedent_support: Optional[str] = None
    opposing_party_strength: Optional[str] = None
    timeline_pressure: Optional[str] = None
    jurisdiction_familiarity: Optional[str] = None
    settlement_possibility: Optional[str] = None
    publicity_risk: Optional[str] = None

    def __post_init__(self) -> None:
        _check_choice("evidence_strength", self.evidence_strength, _STRENGTH)
        _check_choice("opposing_party_type", self.opposing_party_type, ("individual", "company", "government"))
        _check_choice("precedent_support", self.precedent_support, ("favorable", "mixed", "unfavorable", "none"))
        _check_choice("opposing_party_strength", self.opposing_party_strength, _STRENGTH)
        _check_choice("timeline_pressure", self.timeline_pressure, ("urgent", "normal", "flexible"))
        _check_choice(
            "jurisdiction_familiarity", self.jurisdiction_familiarity, ("familiar", "moderate", "unfamiliar")
        )
        _check_choice("settlement_possibility", self.settlement_possibility, ("likely", "possible", "unlikely"))
        _check_choice("publicity_risk", self.publicity_risk, ("high", "moderate", "low"))


@dataclass(frozen=True)
class ContractRiskInput:
    """Commercial features of a contract. ``None`` fields fall back to defaults."""

    contract_type: str
    contract_value: Optional[float] = None
    has_legal_review: Optional[bool] = None
    counterparty_type: Optional[str] = None
    counterparty_reliability: Optional[str] = None
    term_length: Optional[str] = None
    exclusivity_clause: bool = False
    penalty_clause: bool = False
    termination_ease: Optional[str] = None
    jurisdiction_clause: Optional[str] = None
    arbitration_clause: bool = False
    force_majeure_clause: bool = False
    limitation_of_liability: bool = False
    confidentiality_clause: bool = False
    intellectual_property_risk: Optional[str] = None

    def __post_init__(self) -> None:
        _check_choice(
            "counterparty_type",
            self.counterparty_type,
            ("individual", "small_business", "corporation", "government"),
        )
        _check_choice(
            "counterparty_reliability", self.counterparty_reliability, ("high", "moderate", "low", "unknown")
        )
        _check_choice("term_length", self.term_length, ("short", "medium", "long"))
        _check_choice("termination_ease", self.termination_ease, ("easy", "moderate", "difficult"))
        _check_choice("jurisdiction_clause", self.jurisdiction_clause, ("favorable", "neutral", "unfavorable"))
        _check_choice(
            "intellectual_property_risk", self.intellectual_property_risk, ("high", "moderate", "low")
        )

    @classmethod
    def from_extraction(cls, result: ExtractionResult, **overrides) -> ContractRiskInput:
        """Derive clause-presence features from an extraction result.

        Keyword *overrides* replace any derived value.
        """
        types = result.clause_types_found
        rule_ids = {f.rule_id for f in result.risk_flags}
        ip_clauses = result.clauses_in_category(ClauseCategory.INTELLECTUAL_PROPERTY)
        if any(c.is_risky for c in ip_clauses):
            ip_risk = "high"
        elif ip_clauses:
            ip_risk = "moderate"
        else:
            ip_risk = "low"

        if not result.clauses_in_category(ClauseCategory.TERMINATION):
            termination = "difficult"
        elif "fesih_ihbar" in types:
            termination = "easy"
        else:
            termination = "moderate"

        unfavorable = {"yabanci_hukuk", "tahkim_mahkeme_celiskisi"} & rule_ids
        values = {
            "contract_type": result.document_type,
            "exclusivity_clause": "hak_munhasirlik" in types,
            "penalty_clause": "bedel_ceza" in types,
            "arbitration_clause": "uyusmazlik_tahkim" in types,
            "force_majeure_clause": "sorumluluk_mucbir_sebep" in types,
            "limitation_of_liability": "sorumluluk_sinir" in types,
            "confidentiality_clause": bool(result.clauses_in_category(ClauseCategory.CONFIDENTIALITY)),
            "intellectual_property_risk": ip_risk,
            "termination_ease": termination,
            "jurisdiction_clause": "unfavorable" if unfavorable else "neutral",
            "term_length": "long" if "sure_belirsiz" in types else None,
        }
        values.update(overrides)
        return cls(**values)


@dataclass(frozen=True)
class ComplianceRiskInput:
    """Organisational facts for a data-protection compliance review."""

    industry: str
    employee_count: int
    data_processing_volume: str
    international_operations: bool = False
    previous_violations: int = 0
    compliance_officer: bool = False
    regular_audits: bool = False
    documented_policies: bool = False
    employee_training: bool = False
    incident_response_plan: bool = False
    annual_revenue: Optional[float] = None

    def __post_init__(self) -> None:
        _check_choice("data_processing_volume", self.data_processing_volume, ("high", "moderate", "low"))
        if self.employee_count < 0:
            raise ValueError(f"employee_count must be >= 0, got {self.employee_count}")
        if self.previous_violations < 0:
            raise ValueError(f"previous_violations must be >= 0, got {self.previous_violations}")


# ---------------------------------------------------------------------------
# Assessor
# ---------------------------------------------------------------------------


class RiskAssessor:
    """Score cases, contracts and compliance programmes from weighted factors.

    Args:
        id_generator: Assessment id source (optional, sequential by default).
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
    # Case
    # ------------------------------------------------------------------

    def assess_case(self, data: CaseRiskInput) -> RiskAssessment:
        precedent = data.precedent_support or "mixed"
        opposing = data.opposing_party_strength or {
            "government": "strong",
            "company": "moderate",
        }.get(data.opposing_party_type or "", "weak")
        timeline = data.timeline_pressure or "normal"
        settlement = data.settlement_possibility or "possible"
        publicity = data.publicity_risk or "moderate"

        strength_word = {"strong": "güçlü", "moderate": "orta düzeyde", "weak": "zayıf"}
        factors = [
            _factor(
                "evidence_strength",
                "Kanıt Gücü",
                RiskCategory.LEGAL,
                0.25,
                {"strong": 20, "moderate": 50, "weak": 80}[data.evidence_strength],
                f"Kanıt gücü {strength_word[data.evidence_strength]}",
                (
                    "Ek delil toplanması önerilir",
                    "Tanık ifadeleri güçlendirilmeli",
                    "Uzman görüşü alınabilir",
                ),
                threshold=50,
            ),
            _factor(
                "precedent_support",
                "Emsal İçtihat Desteği",
                RiskCategory.LEGAL,
                0.20,
                {"favorable": 15, "mixed": 45, "unfavorable": 75, "none": 60}[precedent],
                "Emsal içtihatlar "
                + {"favorable": "lehte", "mixed": "karışık", "unfavorable": "aleyhte", "none": "yetersiz"}[precedent],
                (
                    "Yargıtay kararları detaylı incelenmeli",
                    "Farklı daire kararları karşılaştırılmalı",
                    "Güncel içtihat değişiklikleri takip edilmeli",
                ),
                threshold=40,
                legal_basis="HMK m. 33 - Hakim Türk Hukukunu re'sen uygular",
            ),
            _factor(
                "opposing_party",
                "Karşı Taraf Gücü",
                RiskCategory.OPERATIONAL,
                0.15,
                {"strong": 70, "moderate": 45, "weak": 25}[opposing],
                f"Karşı taraf {strength_word[opposing]}",
                (
                    "Deneyimli avukat desteği alınmalı",
                    "Alternatif uyuşmazlık çözüm yolları değerlendirilmeli",
                    "Savunma stratejisi güçlendirilmeli",
                ),
                threshold=50,
            ),
            _factor(
                "timeline_pressure",
                "Zaman Baskısı",
                RiskCategory.OPERATIONAL,
                0.10,
                {"urgent": 75, "normal": 35, "flexible": 15}[timeline],
                "Süre baskısı " + {"urgent": "acil", "normal": "normal", "flexible": "esnek"}[timeline],
                (
                    "Süre uzatım talepleri değerlendirilmeli",
                    "Öncelikli işlemler belirlenmeli",
                    "Kaynak planlaması yapılmalı",
                ),
                threshold=50,
            ),
            _factor(
                "settlement",
                "Sulh Olasılığı",
                RiskCategory.FINANCIAL,
                0.15,
                {"likely": 20, "possible": 45, "unlikely": 70}[settlement],
                "Sulh " + {"likely": "muhtemel", "possible": "mümkün", "unlikely": "zor"}[settlement],
                (
                    "Arabuluculuk görüşmeleri başlatılabilir",
                    "Karşı tarafa sulh teklifi sunulabilir",
                    "Uzlaşma koşulları belirlenmeli",
                ),
                threshold=40,
                legal_basis="HMK m. 137-142 - Sulh",
            ),
            _factor(
                "publicity",
                "Kamuoyu Riski",
                RiskCategory.REPUTATIONAL,
                0.15,
                {"high": 80, "moderate": 45, "low": 15}[publicity],
                "Kamuoyu etkisi " + {"high": "yüksek", "moderate": "orta", "low": "düşük"}[publicity],
                (
                    "İletişim stratejisi hazırlanmalı",
                    "Gizlilik tedbirleri değerlendirilmeli",
                    "Kriz yönetim planı oluşturulmalı",
                ),
                threshold=40,
            ),
        ]

        score = weighted_risk_score(factors)
        summary = [f"Bu dava için genel risk seviyesi {_level_word(score)} (%{score}) olarak değerlendirilmiştir."]
        if data.evidence_strength == "weak":
            summary.append("Kanıt gücünün zayıf olması önemli bir risk faktörüdür.")
        if data.precedent_support in ("unfavorable", "none"):
            summary.append("Emsal içtihat desteğinin yetersizliği dikkate alınmalıdır.")
        if data.publicity_risk == "high":
            summary.append("Yüksek kamuoyu ilgisi itibar riski oluşturmaktadır.")

        extra = []
        if settlement != "unlikely":
            extra.append("Sulh/arabuluculuk seçenekleri değerlendirilmelidir")
        recommendations = _recommendations(factors, extra, fallback="Mevcut strateji ile devam edilebilir")
        return self._assemble(AssessmentType.CASE, factors, " ".join(summary), recommendations)

    # ------------------------------------------------------------------
    # Contract
    # ------------------------------------------------------------------

    def assess_contract(self, data: ContractRiskInput) -> RiskAssessment:
        reliability = data.counterparty_reliability or {
            "government": "high",
            "corporation": "moderate",
            "small_business": "low",
        }.get(data.counterparty_type or "", "unknown")
        term = data.term_length or "medium"
        termination = data.termination_ease or "moderate"
        jurisdiction = data.jurisdiction_clause or "neutral"
        ip_risk = data.intellectual_property_risk or "moderate"

        factors = [
            _factor(
                "counterparty_reliability",
                "Karşı Taraf Güvenilirliği",
                RiskCategory.CONTRACTUAL,
                0.20,
                {"high": 15, "moderate": 40, "low": 75, "unknown": 60}[reliability],
                "Karşı taraf güvenilirliği "
                + {"high": "yüksek", "moderate": "orta", "low": "düşük", "unknown": "bilinmiyor"}[reliability],
                (
                    "Karşı taraf hakkında detaylı araştırma yapılmalı",
                    "Referans kontrolü yapılmalı",
                    "Teminat veya depozito talep edilebilir",
                ),
                threshold=40,
            ),
            _factor(
                "term_length",
                "Sözleşme Süresi",
                RiskCategory.CONTRACTUAL,
                0.10,
                {"long": 65, "medium": 40, "short": 20}[term],
                "Sözleşme süresi "
                + {"long": "uzun (5+ yıl)", "medium": "orta (1-5 yıl)", "short": "kısa (< 1 yıl)"}[term],
                (
                    "Periyodik gözden geçirme maddeleri eklenebilir",
                    "Fiyat güncelleme mekanizması önerilir",
                    "Erken fesih koşulları netleştirilmeli",
                ),
                threshold=40,
            ),
        ]
        if data.exclusivity_clause:
            factors.append(
                _factor(
                    "exclusivity",
                    "Münhasırlık Maddesi",
                    RiskCategory.CONTRACTUAL,
                    0.15,
                    70,
                    "Sözleşmede münhasırlık maddesi mevcut",
                    (
                        "Münhasırlık kapsamı sınırlandırılmalı",
                        "Coğrafi veya sektörel sınırlar belirlenmeli",
                        "Performans koşullarına bağlanabilir",
                    ),
                    legal_basis="TBK m. 27 - Aşırı yükümlülük",
                )
            )
        if data.penalty_clause:
            factors.append(
                _factor(
                    "penalty",
                    "Ceza Koşulu",
                    RiskCategory.FINANCIAL,
                    0.15,
                    55,
                    "Sözleşmede ceza koşulu mevcut",
                    (
                        "Ceza miktarının orantılılığı değerlendirilmeli",
                        "Üst limit belirlenmeli",
                        "Karşılıklılık sağlanmalı",
                    ),
                    legal_basis="TBK m. 179-182 - Ceza Koşulu",
                )
            )
        factors.extend(
            [
                _factor(
                    "termination",
                    "Fesih Zorluğu",
                    RiskCategory.OPERATIONAL,
                    0.15,
                    {"difficult": 70, "moderate": 40, "easy": 15}[termination],
                    "Fesih " + {"difficult": "zor", "moderate": "orta düzeyde", "easy": "kolay"}[termination],
                    (
                        "Haklı nedenle fesih halleri genişletilmeli",
                        "İhbar süreleri makul belirlenmeli",
                        "Çıkış stratejisi planlanmalı",
                    ),
                    threshold=40,
                    legal_basis="TBK m. 430 - Haklı nedenle fesih",
                ),
                _factor(
                    "jurisdiction",
                    "Yetki Maddesi",
                    RiskCategory.LEGAL,
                    0.10,
                    {"favorable": 15, "neutral": 35, "unfavorable": 65}[jurisdiction],
                    "Yetki maddesi " + {"favorable": "lehte", "neutral": "nötr", "unfavorable": "aleyhte"}[jurisdiction],
                    (
                        "Yetkili mahkeme değişikliği müzakere edilmeli",
                        "Alternatif yetki maddeleri önerilmeli",
                        "Yargılama maliyetleri değerlendirilmeli",
                    ),
                    threshold=40,
                    legal_basis="HMK m. 17-18 - Yetki Sözleşmesi",
                ),
                _factor(
                    "intellectual_property",
                    "Fikri Mülkiyet Riski",
                    RiskCategory.LEGAL,
                    0.15,
                    {"high": 75, "moderate": 45, "low": 20}[ip_risk],
                    "Fikri mülkiyet riski " + {"high": "yüksek", "moderate": "orta", "low": "düşük"}[ip_risk],
                    (
                        "Fikri mülkiyet hakları netleştirilmeli",
                        "Lisans kapsamı belirlenmeli",
                        "İhlal durumunda tazminat maddeleri eklenmeli",
                    ),
                    threshold=40,
                    legal_basis="FSEK, SMK",
                ),
            ]
        )
        if not data.force_majeure_clause:
            factors.append(
                _factor(
                    "force_majeure_missing",
                    "Mücbir Sebep Maddesi Eksik",
                    RiskCategory.CONTRACTUAL,
                    0.10,
                    55,
                    "Sözleşmede mücbir sebep maddesi bulunmuyor",
                    (
                        "Mücbir sebep maddesi eklenmeli",
                        "Salgın benzeri olağanüstü durumlar kapsanmalı",
                        "Bildirim süreleri belirlenmeli",
                    ),
                    legal_basis="TBK m. 136 - İfa imkânsızlığı",
                )
            )
        if not data.limitation_of_liability:
            factors.append(
                _factor(
                    "liability_limitation_missing",
                    "Sorumluluk Sınırı Eksik",
                    RiskCategory.FINANCIAL,
                    0.10,
                    60,
                    "Sözleşmede sorumluluk sınırı belirlenmemiş",
                    (
                        "Sorumluluk üst limiti belirlenmeli",
                        "Dolaylı zararlar hariç tutulmalı",
                        "Sigorta yaptırılmalı",
                    ),
                )
            )

        score = weighted_risk_score(factors)
        summary = [f"Bu sözleşme için genel risk seviyesi {_level_word(score)} (%{score}) olarak değerlendirilmiştir."]
        if reliability in ("low", "unknown"):
            summary.append("Karşı taraf güvenilirliği konusunda dikkatli olunmalıdır.")
        if data.exclusivity_clause:
            summary.append("Münhasırlık maddesi esnekliği kısıtlamaktadır.")
        if termination == "difficult":
            summary.append("Fesih koşullarının zorluğu uzun vadeli bağlılık riski oluşturmaktadır.")

        extra = []
        if not data.force_majeure_clause:
            extra.append("Mücbir sebep maddesi eklenmesi önerilir")
        if not data.limitation_of_liability:
            extra.append("Sorumluluk sınırı belirlenmesi önerilir")
        if not data.arbitration_clause and jurisdiction == "unfavorable":
            extra.append("Tahkim maddesi alternatif olarak değerlendirilebilir")
        recommendations = _recommendations(
            factors, extra, fallback="Sözleşme koşulları genel olarak uygun görünmektedir"
        )
        return self._assemble(AssessmentType.CONTRACT, factors, " ".join(summary), recommendations)

    # ------------------------------------------------------------------
    # Compliance
    # ------------------------------------------------------------------

    def assess_compliance(self, data: ComplianceRiskInput) -> RiskAssessment:
        volume = data.data_processing_volume
        factors = [
            _factor(
                "data_processing",
                "Veri İşleme Hacmi",
                RiskCategory.COMPLIANCE,
                0.20,
                {"high": 70, "moderate": 45, "low": 20}[volume],
                "Kişisel veri işleme hacmi " + {"high": "yüksek", "moderate": "orta", "low": "düşük"}[volume],
                (
                    "KVKK uyum programı oluşturulmalı",
                    "Veri envanteri çıkarılmalı",
                    "VERBİS kaydı kontrol edilmeli",
                ),
                threshold=40,
                legal_basis="KVKK m. 4 - Genel ilkeler",
            )
        ]
        if data.international_operations:
            factors.append(
                _factor(
                    "international_ops",
                    "Uluslararası Operasyonlar",
                    RiskCategory.COMPLIANCE,
                    0.15,
                    65,
                    "Şirketin uluslararası operasyonları mevcut",
                    (
                        "GDPR uyumluluğu değerlendirilmeli",
                        "Veri transfer mekanizmaları gözden geçirilmeli",
                        "Yerel hukuk danışmanlığı alınmalı",
                    ),
                    legal_basis="KVKK m. 9 - Yurt dışına veri aktarımı",
                )
            )
        if data.previous_violations == 0:
            violation_score = 10
        elif data.previous_violations <= 2:
            violation_score = 50
        else:
            violation_score = 85
        factors.append(
            _factor(
                "previous_violations",
                "Önceki İhlaller",
                RiskCategory.COMPLIANCE,
                0.20,
                violation_score,
                f"{data.previous_violations} adet önceki ihlal kaydı",
                (
                    "Kök neden analizi yapılmalı",
                    "Düzeltici eylem planı oluşturulmalı",
                    "İç kontroller güçlendirilmeli",
                ),
                threshold=30,
            )
        )
        if not data.compliance_officer:
            factors.append(
                _factor(
                    "no_compliance_officer",
                    "Uyum Görevlisi Eksik",
                    RiskCategory.OPERATIONAL,
                    0.10,
                    55,
                    "Atanmış bir uyum görevlisi bulunmuyor",
                    (
                        "Uyum görevlisi atanmalı",
                        "Veri sorumlusu temsilcisi belirlenmeli",
                        "Uyum birimi kurulmalı",
                    ),
                    legal_basis="KVKK m. 13 - Veri sorumlusu",
                )
            )
        factors.extend(
            [
                _factor(
                    "audits",
                    "Düzenli Denetimler",
                    RiskCategory.OPERATIONAL,
                    0.10,
                    20 if data.regular_audits else 60,
                    "Düzenli denetimler yapılıyor" if data.regular_audits else "Düzenli denetim yapılmıyor",
                    (
                        "Yıllık iç denetim programı oluşturulmalı",
                        "Bağımsız denetim yaptırılmalı",
                        "Denetim bulguları takip edilmeli",
                    ),
                    threshold=40,
                ),
                _factor(
                    "policies",
                    "Dokümante Politikalar",
                    RiskCategory.COMPLIANCE,
                    0.10,
                    15 if data.documented_policies else 65,
                    "Politikalar dokümante edilmiş"
                    if data.documented_policies
                    else "Politikalar dokümante edilmemiş",
                    (
                        "Kişisel veri işleme politikası hazırlanmalı",
                        "Bilgi güvenliği politikası oluşturulmalı",
                        "Gizlilik politikası yayınlanmalı",
                    ),
                    threshold=40,
                ),
                _factor(
                    "training",
                    "Çalışan Eğitimi",
                    RiskCategory.OPERATIONAL,
                    0.10,
                    15 if data.employee_training else 55,
                    "Düzenli eğitimler veriliyor" if data.employee_training else "Çalışan eğitimi yetersiz",
                    (
                        "Yıllık KVKK eğitimi planlanmalı",
                        "Farkındalık programı oluşturulmalı",
                        "Eğitim kayıtları tutulmalı",
                    ),
                    threshold=40,
                ),
                _factor(
                    "incident_response",
                    "Olay Müdahale Planı",
                    RiskCategory.OPERATIONAL,
                    0.10,
                    15 if data.incident_response_plan else 70,
                    "Olay müdahale planı mevcut"
                    if data.incident_response_plan
                    else "Olay müdahale planı eksik",
                    (
                        "Veri ihlali müdahale planı hazırlanmalı",
                        "72 saat bildirim prosedürü belirlenmeli",
                        "Olay müdahale ekibi oluşturulmalı",
                    ),
                    threshold=40,
                    legal_basis="KVKK m. 12 - Veri güvenliği, ihlal bildirimi",
                ),
            ]
        )
        if data.employee_count > 50:
            factors.append(
                _factor(
                    "employee_count",
                    "Organizasyon Büyüklüğü",
                    RiskCategory.OPERATIONAL,
                    0.05,
                    55 if data.employee_count > 250 else 40,
                    f"{data.employee_count} çalışan ile büyük organizasyon",
                    (
                        "Departman bazlı uyum sorumluları atanmalı",
                        "İç iletişim kanalları güçlendirilmeli",
                        "Ölçeklendirilebilir uyum programı kurulmalı",
                    ),
                )
            )

        score = weighted_risk_score(factors)
        summary = [f"Uyumluluk risk seviyesi {_level_word(score)} (%{score}) olarak değerlendirilmiştir."]
        if data.previous_violations > 0:
            summary.append(f"Önceki {data.previous_violations} ihlal kaydı dikkate alınmalıdır.")
        if volume == "high":
            summary.append("Yüksek veri işleme hacmi ek önlemler gerektirmektedir.")
        if data.international_operations:
            summary.append("Uluslararası operasyonlar çoklu yargı yetkisi uyumluluğu gerektirmektedir.")

        leading = []
        if not data.compliance_officer:
            leading.append("Uyum görevlisi atanması önceliklidir")
        extra = []
        if not data.incident_response_plan:
            extra.append("Veri ihlali müdahale planı acilen hazırlanmalıdır")
        if volume == "high" and not data.documented_policies:
            extra.append("Kişisel veri işleme politikası derhal dokümante edilmelidir")
        recommendations = _recommendations(
            factors, extra, leading=leading, fallback="Uyumluluk durumu genel olarak iyi seviyededir"
        )
        return self._assemble(AssessmentType.COMPLIANCE, factors, " ".join(summary), recommendations)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _assemble(
        self,
        assessment_type: AssessmentType,
        factors: list[RiskFactor],
        summary: str,
        recommendations: list[str],
    ) -> RiskAssessment:
        score = weighted_risk_score(factors)
        return RiskAssessment(
            id=self._ids("assessment"),
            assessment_type=assessment_type,
            overall_score=score,
            overall_level=risk_level(score),
            factors=tuple(factors),
            category_breakdown=category_breakdown(factors),
            summary=summary,
            recommendations=tuple(recommendations),
            created_at=self._clock(),
        )


def _factor(
    factor_id: str,
    name: str,
    category: RiskCategory,
    weight: float,
    score: int,
    description: str,
    mitigations: tuple[str, ...],
    threshold: int = -1,
    legal_basis: Optional[str] = None,
) -> RiskFactor:
    """Build a factor; mitigations are listed only when score exceeds *threshold*."""
    return RiskFactor(
        id=factor_id,
        name=name,
        category=category,
        description=description,
        weight=weight,
        score=score,
        level=risk_level(score),
        mitigation_suggestions=mitigations if score > threshold else (),
        legal_basis=legal_basis,
    )


def _level_word(score: int) -> str:
    return RISK_LEVEL_NAMES[risk_level(score)].lower()


def _recommendations(
    factors: Sequence[RiskFactor],
    extra: Sequence[str],
    fallback: str,
    leading: Sequence[str] = (),
) -> list[str]:
    """First mitigation of every high-scoring factor plus *extra*, deduplicated and capped."""
    collected = list(leading)
    collected.extend(
        f.mitigation_suggestions[0]
        for f in factors
        if f.score >= HIGH_FACTOR_SCORE and f.mitigation_suggestions
    )
    collected.extend(extra)
    if not collected:
        collected.append(fallback)
    return list(dict.fromkeys(collected))[:MAX_RECOMMENDATIONS]

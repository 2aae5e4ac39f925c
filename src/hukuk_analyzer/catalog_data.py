"""Versioned rule tables for Turkish contract analysis.

These are plain data. ``catalog.PatternCatalog`` validates and compiles them
once; nothing reads these tables directly at analysis time.

Conventions:

* Regex patterns are written in lower case and are matched against text
  folded with Turkish case rules (``text.fold``). Repetition between
  anchors is bounded (``.{0,N}``) to keep matching latency predictable.
* Keywords are plain substrings and must be distinctive phrases; short
  generic words would swallow unrelated paragraphs under first-match-wins.
* **The order of ``CLAUSE_TYPES`` is the match priority.** A paragraph is
  assigned to the first entry whose rules match, so specific entries must
  precede generic ones within a category.
"""

from __future__ import annotations

CATALOG_VERSION = "2024.2"

CATEGORY_NAMES: dict[str, str] = {
    "taraf_bilgileri": "Taraf Bilgileri",
    "sozlesme_konusu": "Sözleşme Konusu",
    "hak_ve_yukumlulukler": "Hak ve Yükümlülükler",
    "mali_hukumler": "Mali Hükümler",
    "sure_ve_vade": "Süre ve Vade",
    "sorumluluk": "Sorumluluk",
    "gizlilik": "Gizlilik",
    "fikri_mulkiyet": "Fikri Mülkiyet",
    "fesih_sona_erme": "Fesih ve Sona Erme",
    "uyusmazlik": "Uyuşmazlık Çözümü",
    "genel_hukumler": "Genel Hükümler",
    "ozel_hukumler": "Özel Hükümler",
}

CLAUSE_TYPES: list[dict] = [
    # -- Taraf Bilgileri ---------------------------------------------------
    {
        "type": "taraf_tanimlama",
        "category": "taraf_bilgileri",
        "title": "Taraf Tanımlaması",
        "patterns": [
            r"sözleşmenin\s+tarafları",
            r"işbu\s+sözleşme.{0,80}?\bile\b.{0,120}?arasında",
            r"taraflar\s+arasında.{0,60}?(?:sözleşme|akdedil|imzalan)",
        ],
        "keywords": ["bir tarafta", "diğer tarafta"],
    },
    {
        "type": "taraf_devir_yasak",
        "category": "taraf_bilgileri",
        "title": "Devir Yasağı",
        "patterns": [r"devr(?:edemez|edilemez)", r"temlik\s+edilemez", r"devir.{0,40}?yasak"],
        "keywords": ["devir ve temlik"],
        "severity": "medium",
    },
    {
        "type": "taraf_kontrol_degisikligi",
        "category": "taraf_bilgileri",
        "title": "Kontrol Değişikliği",
        "patterns": [
            r"kontrol\s+değişikliği",
            r"change\s+of\s+control",
            r"ortaklık\s+yapısı\w*\s+değişiklik",
        ],
        "keywords": ["pay devri"],
        "severity": "high",
    },
    {
        "type": "taraf_alt_yuklenici",
        "category": "taraf_bilgileri",
        "title": "Alt Yüklenici",
        "patterns": [r"alt\s+yüklenici", r"taşeron"],
        "keywords": ["üçüncü kişilere yaptır"],
        "severity": "medium",
    },
    # -- Sözleşme Konusu ---------------------------------------------------
    {
        "type": "konu_kira",
        "category": "sozlesme_konusu",
        "title": "Kiralanan",
        "patterns": [
            r"kiralanan\s+(?:taşınmaz|mal|yer|daire|işyeri|konut)",
            r"kira\s+konusu",
            r"kiraya\s+verilen\s+.{0,40}?(?:taşınmaz|daire|işyeri|konut)",
        ],
        "keywords": [],
    },
    {
        "type": "konu_hizmet",
        "category": "sozlesme_konusu",
        "title": "Hizmet Konusu",
        "patterns": [
            r"hizmet\s+sözleşmesinin\s+konusu",
            r"(?:danışmanlık|yazılım|bakım|destek|temizlik)\s+hizmetlerinin\s+(?:verilmesi|sunulması)",
            r"hizmet\s+kapsamı",
        ],
        "keywords": ["hizmetlerin ifası"],
    },
    {
        "type": "konu_tanim",
        "category": "sozlesme_konusu",
        "title": "Konu Tanımı",
        "patterns": [
            r"sözleşmenin\s+konusu",
            r"işbu\s+sözleşmenin\s+amacı",
            r"sözleşmenin\s+kapsamı",
        ],
        "keywords": ["konusunu oluşturur"],
    },
    {
        "type": "konu_sinirlamalar",
        "category": "sozlesme_konusu",
        "title": "Kapsam Sınırlamaları",
        "patterns": [r"kapsam\s+dışı", r"hariç\s+tutul", r"kapsamına\s+girmez"],
        "keywords": ["istisna olarak"],
    },
    # -- Hak ve Yükümlülükler ----------------------------------------------
    {
        "type": "yukumluluk_ifa",
        "category": "hak_ve_yukumlulukler",
        "title": "İfa Yükümlülüğü",
        "patterns": [
            r"iş\s+görme\s+(?:borcu|edimi)",
            r"edimini\s+.{0,30}?(?:ifa|yerine\s+getir)",
            r"(?:görevlerini|işini|işleri)\s+.{0,60}?(?:özenle|sadakatle)",
        ],
        "keywords": ["görev tanımı", "iş tanımı"],
    },
    {
        "type": "yukumluluk_kalite",
        "category": "hak_ve_yukumlulukler",
        "title": "Kalite Yükümlülüğü",
        "patterns": [r"hizmet\s+seviyesi", r"kalite\s+standart", r"\bsla\b"],
        "keywords": ["kabul kriterleri"],
    },
    {
        "type": "yukumluluk_rekabet_etmeme",
        "category": "hak_ve_yukumlulukler",
        "title": "Rekabet Yasağı",
        "patterns": [
            r"rekabet\s+(?:yasağı|etmeme)",
            r"rakip\s+(?:bir\s+)?(?:işletme|firma|şirket)",
        ],
        "keywords": ["benzer faaliyette bulunmayacak"],
        "severity": "high",
    },
    {
        "type": "yukumluluk_isg",
        "category": "hak_ve_yukumlulukler",
        "title": "İş Sağlığı ve Güvenliği",
        "patterns": [r"iş\s+sağlığı\s+ve\s+güvenliği", r"6331\s+sayılı", r"\bisg\b"],
        "keywords": ["koruyucu donanım"],
    },
    {
        "type": "hak_denetim",
        "category": "hak_ve_yukumlulukler",
        "title": "Denetim Hakkı",
        "patterns": [r"denetim\s+hakkı", r"denetle(?:me|yebilir)", r"kayıtlarını\s+inceleme"],
        "keywords": ["yerinde inceleme"],
    },
    {
        "type": "hak_munhasirlik",
        "category": "hak_ve_yukumlulukler",
        "title": "Münhasırlık",
        "patterns": [
            r"münhasır\s+(?:hak|bayi|distribütör|temsilci|satış)",
            r"münhasırlık",
        ],
        "keywords": ["tek yetkili satıcı"],
        "severity": "medium",
    },
    {
        "type": "hak_degisiklik",
        "category": "hak_ve_yukumlulukler",
        "title": "Tek Taraflı Değişiklik Hakkı",
        "patterns": [r"tek\s+taraflı\s+olarak\s+.{0,60}?değiştir", r"değiştirme\s+hakkı"],
        "keywords": ["dilediği zaman değiştirebilir"],
        "severity": "high",
    },
    {
        "type": "hak_cayma",
        "category": "hak_ve_yukumlulukler",
        "title": "Cayma Hakkı",
        "patterns": [r"cayma\s+hakkı"],
        "keywords": ["cayma bildirimi"],
    },
    # -- Mali Hükümler -----------------------------------------------------
    {
        "type": "bedel_fazla_calisma",
        "category": "mali_hukumler",
        "title": "Fazla Çalışma Ücreti",
        "patterns": [r"fazla\s+(?:çalışma|mesai)", r"haftalık\s+\d+\s+saat"],
        "keywords": ["hafta tatili ücreti"],
    },
    {
        "type": "bedel_ceza",
        "category": "mali_hukumler",
        "title": "Cezai Şart",
        "patterns": [
            r"cezai\s+şart",
            r"ceza\s+koşulu",
            r"tazminat.{0,60}?önceden\s+belirlenen",
        ],
        "keywords": [],
        "severity": "high",
    },
    {
        "type": "odeme_gecikme",
        "category": "mali_hukumler",
        "title": "Gecikme Faizi",
        "patterns": [r"gecikme\s+faizi", r"temerrüt\s+faizi", r"vade\s+farkı"],
        "keywords": [],
        "severity": "medium",
    },
    {
        "type": "bedel_artis",
        "category": "mali_hukumler",
        "title": "Bedel Artışı",
        "patterns": [
            r"fiyat\s+artış",
            r"bedel\s+güncelleme",
            r"yıllık\s+artış",
            r"\b(?:tüfe|üfe)\b",
        ],
        "keywords": ["oranında artırılır"],
        "severity": "medium",
    },
    {
        "type": "bedel_royalti",
        "category": "mali_hukumler",
        "title": "Royalti",
        "patterns": [
            r"royalt[iy]",
            r"lisans\s+(?:ücreti|bedeli)",
            r"satış\s+hasılatının\s+yüzde",
        ],
        "keywords": [],
    },
    {
        "type": "bedel_sabit",
        "category": "mali_hukumler",
        "title": "Sabit Bedel",
        "patterns": [
            r"(?:toplam|sabit|götürü)\s+(?:bedel|ücret)",
            r"(?:brüt|net)\s+\d[\d.,]*\s*(?:tl|₺|türk\s+lirası)",
            r"(?:aylık|yıllık)\s+kira\s+bedeli",
            r"(?:ücret|bedel)\w*\s+.{0,40}?\d[\d.,]*\s*(?:tl|₺|türk\s+lirası|usd|eur)",
        ],
        "keywords": [],
    },
    {
        "type": "odeme_vadesi",
        "category": "mali_hukumler",
        "title": "Ödeme Vadesi",
        "patterns": [
            r"her\s+ayın\s+\d+",
            r"ödeme\s+(?:vadesi|tarihi|günü)",
            r"fatura\s+tarihinden\s+itibaren\s+\d+",
        ],
        "keywords": ["peşin olarak ödenir"],
    },
    {
        "type": "odeme_depozito",
        "category": "mali_hukumler",
        "title": "Depozito",
        "patterns": [r"depozito", r"güvence\s+bedeli", r"teminat\s+olarak\s+.{0,40}?(?:yatır|öde)"],
        "keywords": [],
    },
    # -- Süre ve Vade ------------------------------------------------------
    {
        "type": "sure_deneme",
        "category": "sure_ve_vade",
        "title": "Deneme Süresi",
        "patterns": [r"deneme\s+süresi"],
        "keywords": [],
    },
    {
        "type": "sure_otomatik",
        "category": "sure_ve_vade",
        "title": "Otomatik Yenileme",
        "patterns": [
            r"otomatik(?:man)?\s+(?:olarak\s+)?(?:yenilen|uzar)",
            r"kendiliğinden\s+(?:yenilen|uzar)",
        ],
        "keywords": [],
        "severity": "medium",
    },
    {
        "type": "sure_baslangic",
        "category": "sure_ve_vade",
        "title": "Başlangıç Tarihi",
        "patterns": [
            r"yürürlüğe\s+gir",
            r"(?:başlangıç|işe\s+başlama)\s+tarihi",
            r"tarihinde\s+başla",
        ],
        "keywords": [],
    },
    {
        "type": "sure_belirli",
        "category": "sure_ve_vade",
        "title": "Belirli Süre",
        "patterns": [
            r"belirli\s+süreli",
            r"süresi\s+\d+\s*(?:\(\w+\)\s*)?(?:ay|yıl)",
            r"\d+\s*(?:\(\w+\)\s*)?(?:ay|yıl)\s+süreyle",
        ],
        "keywords": [],
    },
    {
        "type": "sure_belirsiz",
        "category": "sure_ve_vade",
        "title": "Belirsiz Süre",
        "patterns": [r"belirsiz\s+süreli"],
        "keywords": [],
    },
    # -- Sorumluluk --------------------------------------------------------
    {
        "type": "sorumluluk_sinirsiz",
        "category": "sorumluluk",
        "title": "Sınırsız Sorumluluk",
        "patterns": [r"sınırsız\s+(?:olarak\s+)?sorumlu", r"sorumluluğu\s+sınırsız"],
        "keywords": [],
        "severity": "critical",
    },
    {
        "type": "sorumluluk_sinir",
        "category": "sorumluluk",
        "title": "Sorumluluk Sınırı",
        "patterns": [
            r"sorumlulu\w*.{0,60}?sınırlı",
            r"azami\s+sorumluluk",
            r"sorumluluk\s+(?:sınırı|tavanı)",
            r"sorumluluk.{0,60}?aşamaz",
        ],
        "keywords": [],
        "severity": "high",
    },
    {
        "type": "sorumluluk_dolayli",
        "category": "sorumluluk",
        "title": "Dolaylı Zarar Sorumluluğu",
        "patterns": [r"dolaylı\s+zarar", r"k[aâ]r\s+kaybı", r"munzam\s+zarar"],
        "keywords": [],
        "severity": "high",
    },
    {
        "type": "sorumluluk_mucbir_sebep",
        "category": "sorumluluk",
        "title": "Mücbir Sebep",
        "patterns": [r"mücbir\s+sebep", r"force\s+majeure", r"beklenmeyen\s+hal"],
        "keywords": ["doğal afet"],
        "severity": "medium",
    },
    {
        "type": "sorumluluk_tazmin",
        "category": "sorumluluk",
        "title": "Tazmin Yükümlülüğü",
        "patterns": [
            r"tazmin\s+(?:eder|edecek|etmekle)",
            r"zarar\w*\s+.{0,30}?karşılamakla",
        ],
        "keywords": [],
        "severity": "medium",
    },
    {
        "type": "sorumluluk_ayip",
        "category": "sorumluluk",
        "title": "Ayıba Karşı Tekeffül",
        "patterns": [r"\bayıp", r"tekeffül"],
        "keywords": [],
    },
    # -- Gizlilik ----------------------------------------------------------
    {
        "type": "gizlilik_kvkk",
        "category": "gizlilik",
        "title": "KVKK Uyumu",
        "patterns": [r"kişisel\s+veri", r"\bkvkk\b", r"6698\s+sayılı"],
        "keywords": ["aydınlatma metni"],
        "severity": "high",
    },
    {
        "type": "gizlilik_sure",
        "category": "gizlilik",
        "title": "Gizlilik Süresi",
        "patterns": [
            r"gizlilik\s+yükümlülüğü.{0,80}?(?:yıl|süre|devam)",
            r"süresiz\s+.{0,40}?gizlilik",
        ],
        "keywords": [],
        "severity": "medium",
    },
    {
        "type": "gizlilik_tanim",
        "category": "gizlilik",
        "title": "Gizlilik Tanımı",
        "patterns": [r"gizli\s+bilgi", r"gizlilik", r"ticari\s+sır"],
        "keywords": [],
    },
    # -- Fikri Mülkiyet ----------------------------------------------------
    {
        "type": "fm_sahiplik",
        "category": "fikri_mulkiyet",
        "title": "Fikri Mülkiyet Sahipliği",
        "patterns": [
            r"fikri\s+(?:ve\s+sınai\s+)?mülkiyet\s+hakları.{0,80}?(?:ait|sahip)",
            r"telif\s+hak.{0,60}?ait",
            r"mali\s+hakları.{0,40}?ait",
        ],
        "keywords": [],
        "severity": "high",
    },
    {
        "type": "fm_sinir",
        "category": "fikri_mulkiyet",
        "title": "Lisans Sınırları",
        "patterns": [
            r"alt\s+lisans",
            r"münhasır\s+olmayan",
            r"lisans\s+kapsamı\s+dışında",
            r"yalnızca\s+.{0,60}?amacıyla\s+kullan",
        ],
        "keywords": [],
    },
    {
        "type": "fm_lisans",
        "category": "fikri_mulkiyet",
        "title": "Lisans Hakkı",
        "patterns": [
            r"lisans\s+hakkı",
            r"kullanım\s+hakkı",
            r"kullanma\s+izni",
            r"lisans\s+ver",
        ],
        "keywords": [],
    },
    # -- Fesih ve Sona Erme ------------------------------------------------
    {
        "type": "fesih_hakli_neden",
        "category": "fesih_sona_erme",
        "title": "Haklı Nedenle Fesih",
        "patterns": [
            r"haklı\s+(?:neden|sebep)",
            r"derhal\s+fesh",
            r"ihbarsız\s+(?:olarak\s+)?fesh",
        ],
        "keywords": [],
        "severity": "high",
    },
    {
        "type": "fesih_tazminat",
        "category": "fesih_sona_erme",
        "title": "Fesih Tazminatı",
        "patterns": [
            r"fesih\s+tazminatı",
            r"erken\s+fesih.{0,60}?(?:bedel|tazminat)",
            r"kıdem\s+tazminatı",
            r"ihbar\s+tazminatı",
        ],
        "keywords": [],
        "severity": "high",
    },
    {
        "type": "fesih_ihbar",
        "category": "fesih_sona_erme",
        "title": "İhbar Süreli Fesih",
        "patterns": [
            r"ihbar\s+süre",
            r"\d+\s*(?:\(\w+\)\s*)?(?:gün|hafta|ay)\s+önce(?:den)?\s+.{0,40}?(?:bildir|ihbar)",
            r"fesih\s+bildirimi",
        ],
        "keywords": [],
    },
    {
        "type": "fesih_sonuc",
        "category": "fesih_sona_erme",
        "title": "Fesih Sonuçları",
        "patterns": [r"sona\s+ermesi\s+halinde", r"fesih\s+halinde\s+.{0,60}?iade"],
        "keywords": [],
    },
    # -- Uyuşmazlık Çözümü -------------------------------------------------
    {
        "type": "uyusmazlik_arabuluculuk",
        "category": "uyusmazlik",
        "title": "Arabuluculuk",
        "patterns": [r"arabulucu"],
        "keywords": [],
    },
    {
        "type": "uyusmazlik_tahkim",
        "category": "uyusmazlik",
        "title": "Tahkim Şartı",
        "patterns": [r"tahkim", r"\b[iı]sta[cç]\b", r"\b[iı]cc\b", r"hakem\s+heyeti"],
        "keywords": [],
        "severity": "medium",
    },
    {
        "type": "uyusmazlik_yetki",
        "category": "uyusmazlik",
        "title": "Yetki Şartı",
        "patterns": [
            r"mahkemeleri\s+(?:ve\s+icra\s+\w+\s+)?(?:yetkili|münhasıran)",
            r"yetkili\s+mahkeme",
            r"münhasır\s+yetki",
        ],
        "keywords": [],
    },
    {
        "type": "uyusmazlik_uygulanacak_hukuk",
        "category": "uyusmazlik",
        "title": "Uygulanacak Hukuk",
        "patterns": [r"uygulanacak\s+hukuk", r"türk\s+hukuku", r"yabancı\s+hukuk"],
        "keywords": [],
        "severity": "medium",
    },
    # -- Genel Hükümler ----------------------------------------------------
    {
        "type": "genel_butunluk",
        "category": "genel_hukumler",
        "title": "Sözleşmenin Bütünlüğü",
        "patterns": [
            r"sözleşmenin\s+bütünlüğü",
            r"tam\s+anlaşma",
            r"önceki\s+(?:tüm\s+)?(?:anlaşma|mutabakat|yazışma)",
            r"entire\s+agreement",
        ],
        "keywords": [],
    },
    {
        "type": "genel_bolunebilirlik",
        "category": "genel_hukumler",
        "title": "Bölünebilirlik",
        "patterns": [
            r"bölünebilirlik",
            r"hükümlerinden\s+(?:biri|herhangi\s+biri).{0,80}?geçersiz",
        ],
        "keywords": [],
    },
    {
        "type": "genel_tadil",
        "category": "genel_hukumler",
        "title": "Tadil ve Değişiklik",
        "patterns": [r"\btadil", r"değişiklik.{0,40}?yazılı", r"ek\s+protokol"],
        "keywords": [],
    },
    {
        "type": "genel_tebligat",
        "category": "genel_hukumler",
        "title": "Tebligat",
        "patterns": [r"tebli[ğg]", r"bildirim\s+adres", r"yazılı\s+bildirim"],
        "keywords": [],
    },
    {
        "type": "genel_nusha",
        "category": "genel_hukumler",
        "title": "Nüsha ve İmza",
        "patterns": [r"nüsha", r"imza\s+altına\s+alın"],
        "keywords": [],
    },
    # -- Özel Hükümler -----------------------------------------------------
    {
        "type": "ozel_hukum",
        "category": "ozel_hukumler",
        "title": "Özel Hükümler",
        "patterns": [r"özel\s+hüküm", r"\bek\s+madde"],
        "keywords": [],
    },
]

RISK_PATTERNS: list[dict] = [
    {
        "id": "sinirsiz_sorumluluk",
        "type": "high_risk",
        "severity": "critical",
        "patterns": [r"sınırsız\s+(?:olarak\s+)?sorumlu", r"sorumluluğu\s+sınırsız"],
        "description": "Sınırsız sorumluluk kaydı tespit edildi",
        "recommendation": "Sorumluluk sınırı belirlenmeli veya sigorta teminatı alınmalıdır",
    },
    {
        "id": "tek_tarafli_degisiklik",
        "type": "high_risk",
        "severity": "high",
        "patterns": [r"tek\s+taraflı.{0,80}?değiştir"],
        "description": "Tek taraflı değişiklik hakkı mevcut",
        "recommendation": "Değişiklik için karşılıklı onay şartı eklenmelidir",
    },
    {
        "id": "cayma_hakki_yok",
        "type": "high_risk",
        "severity": "critical",
        "patterns": [r"cayma\s+hakkı.{0,80}?(?:yoktur|bulunmaz)"],
        "description": "Cayma hakkı kaldırılmış",
        "recommendation": "Tüketici sözleşmelerinde bu hüküm geçersiz olabilir",
    },
    {
        "id": "suresiz_gizlilik",
        "type": "unusual",
        "severity": "medium",
        "patterns": [r"süresiz.{0,80}?gizlilik", r"gizlilik.{0,80}?süresiz"],
        "description": "Süresiz gizlilik yükümlülüğü",
        "recommendation": "Makul bir gizlilik süresi belirlenmesi önerilir",
    },
    {
        "id": "yabanci_hukuk",
        "type": "unusual",
        "severity": "medium",
        "patterns": [r"yabancı\s+hukuk.{0,80}?uygulan"],
        "description": "Yabancı hukuk uygulanacak",
        "recommendation": "Yabancı hukukun etkilerini avukatınızla değerlendirin",
    },
    {
        "id": "otomatik_yenileme",
        "type": "unusual",
        "severity": "low",
        "patterns": [r"otomatik.{0,60}?yenilen"],
        "description": "Otomatik yenileme maddesi",
        "recommendation": "Yenileme bildirimi ve fesih süresini kontrol edin",
    },
    {
        "id": "makul_sure",
        "type": "ambiguous",
        "severity": "low",
        "patterns": [r"makul\s+(?:bir\s+)?süre"],
        "description": "Belirsiz süre ifadesi (makul süre)",
        "recommendation": "Süre gün veya ay olarak açıkça belirlenmelidir",
    },
    {
        "id": "her_turlu_zarar",
        "type": "high_risk",
        "severity": "high",
        "patterns": [r"her\s+türlü\s+zarar"],
        "description": "Her türlü zarardan sorumluluk öngörülmüş",
        "recommendation": "Tazmin kapsamı doğrudan zararlarla sınırlandırılmalıdır",
    },
    {
        "id": "ihbarsiz_fesih",
        "type": "high_risk",
        "severity": "high",
        "patterns": [
            r"(?:ihbarsız|bildirimsiz)\s+(?:olarak\s+)?fes",
            r"bildirimde\s+bulunmaksızın.{0,40}?fes",
        ],
        "description": "Bildirim süresi olmaksızın fesih imkânı",
        "recommendation": "Fesih için makul bir ihbar süresi öngörülmelidir",
    },
    {
        "id": "tahkim_mahkeme_celiskisi",
        "type": "conflict",
        "severity": "medium",
        "patterns": [
            r"tahkim.{0,300}?mahkemeleri.{0,40}?yetkili",
            r"mahkemeleri.{0,40}?yetkili.{0,300}?tahkim",
        ],
        "description": "Tahkim ve mahkeme yetkisi birlikte düzenlenmiş",
        "recommendation": "Uyuşmazlık çözüm yolu tek ve açık olarak belirlenmelidir",
    },
    {
        "id": "fazla_calisma_ucrete_dahil",
        "type": "high_risk",
        "severity": "high",
        "patterns": [r"fazla\s+(?:çalışma|mesai).{0,120}?ücret\w*\s+dahil"],
        "description": "Fazla çalışma ücreti asıl ücrete dahil edilmiş",
        "recommendation": (
            "Fazla çalışma ücreti yıllık 270 saat sınırı gözetilerek ayrıca "
            "düzenlenmelidir (4857 sayılı İş Kanunu m.41)"
        ),
    },
]

DOCUMENT_TYPES: dict[str, str] = {
    "genel": "Genel Sözleşme",
    "is_sozlesmesi": "İş Sözleşmesi",
    "kira_sozlesmesi": "Kira Sözleşmesi",
    "hizmet_sozlesmesi": "Hizmet Sözleşmesi",
    "lisans_sozlesmesi": "Lisans Sözleşmesi",
}

REQUIRED_CLAUSES: dict[str, list[str]] = {
    "genel": [],
    "is_sozlesmesi": [
        "taraf_tanimlama",
        "konu_tanim",
        "bedel_sabit",
        "sure_baslangic",
        "yukumluluk_ifa",
        "fesih_ihbar",
        "uyusmazlik_yetki",
    ],
    "kira_sozlesmesi": [
        "taraf_tanimlama",
        "konu_kira",
        "bedel_sabit",
        "sure_belirli",
        "odeme_vadesi",
        "fesih_ihbar",
    ],
    "hizmet_sozlesmesi": [
        "taraf_tanimlama",
        "konu_hizmet",
        "bedel_sabit",
        "yukumluluk_kalite",
        "sorumluluk_sinir",
        "gizlilik_tanim",
    ],
    "lisans_sozlesmesi": [
        "taraf_tanimlama",
        "fm_lisans",
        "fm_sahiplik",
        "bedel_royalti",
        "fm_sinir",
        "fesih_hakli_neden",
    ],
}

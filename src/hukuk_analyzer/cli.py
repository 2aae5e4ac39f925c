"""Command-line interface for the Turkish contract analyzer.

Provides ``analyze``, ``assess``, ``explain`` and ``catalog`` commands with
rich terminal output using the ``click`` and ``rich`` libraries.

Usage::

    hukuk-analyzer analyze sozlesme.txt --type is_sozlesmesi
    hukuk-analyzer assess sozlesme.txt --output text
    hukuk-analyzer explain "Kira artış oranı sınırı nedir?" --area kira --fact "Konut kirası"
    hukuk-analyzer catalog
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import NoReturn, Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .analyzer import ClauseAnalyzer
from .assessment import RISK_LEVEL_NAMES, ContractRiskInput, RiskAssessor
from .catalog import HukukAnalyzerError, PatternCatalog
from .config import Settings
from .log import setup_logging
from .models import EvidenceType, ExtractionResult, ReasoningContext, RiskAssessment, RiskLevel, Severity
from .reasoning import UNKNOWN_JURISDICTION, ReasoningEngine, confidence_description
from .report import format_explainable_result, format_extraction_report, format_risk_assessment, format_risk_score

console = Console()
error_console = Console(stderr=True)

MAX_ENTITY_ROWS = 30


def _get_severity_style(severity: Severity) -> str:
    """Return a rich style string for a flag severity."""
    return {
        Severity.CRITICAL: "bold red",
        Severity.HIGH: "bold dark_orange",
        Severity.MEDIUM: "bold yellow",
        Severity.LOW: "dim green",
    }.get(severity, "")


def _get_severity_icon(severity: Severity) -> str:
    """Return an emoji icon for a flag severity."""
    return {
        Severity.CRITICAL: "🔴",
        Severity.HIGH: "🟠",
        Severity.MEDIUM: "🟡",
        Severity.LOW: "🟢",
    }.get(severity, "")


def _get_level_style(level: RiskLevel) -> str:
    return {
        RiskLevel.CRITICAL: "bold red",
        RiskLevel.HIGH: "bold dark_orange",
        RiskLevel.MEDIUM: "bold yellow",
        RiskLevel.LOW: "green",
        RiskLevel.MINIMAL: "dim green",
    }.get(level, "")


def _fail(message: str) -> NoReturn:
    error_console.print(f"[bold red]Hata:[/] {message}")
    sys.exit(1)


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        _fail(f"{path} okunamadı: {e}")


def _analyze_file(ctx: click.Context, file: Path, document_type: Optional[str]) -> ExtractionResult:
    text = _read_text(file)
    try:
        analyzer = ClauseAnalyzer(settings=ctx.obj)
    except HukukAnalyzerError as e:
        _fail(str(e))
    with console.status("[bold blue]Belge inceleniyor...", spinner="dots"):
        return analyzer.analyze(text, document_type=document_type, document_name=file.name)


@click.group()
@click.version_option(package_name="hukuk-analyzer")
@click.option("--log-level", default=None, help="Log level (default: HUKUK_LOG_LEVEL or WARNING).")
@click.pass_context
def main(ctx: click.Context, log_level: Optional[str]) -> None:
    """⚖️ Hukuk Analyzer: kural tabanlı Türkçe sözleşme analizi.

    Extract clauses, entities, obligations and risk flags from contract
    text, score contract risk, and build explainable reasoning reports.
    """
    try:
        settings = Settings.from_env()
    except ValueError as e:
        _fail(str(e))
    setup_logging(log_level or settings.log_level)
    ctx.obj = settings


@main.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--type", "-t", "document_type", default=None,
              help="Document type (genel, is_sozlesmesi, kira_sozlesmesi, hizmet_sozlesmesi, lisans_sozlesmesi).")
@click.option("--output", "-o", type=click.Choice(["rich", "json", "text"]), default="rich",
              help="Output format.")
@click.option("--save", "-s", type=click.Path(dir_okay=False, path_type=Path), default=None,
              help="Save results to a JSON file.")
@click.pass_context
def analyze(ctx: click.Context, file: Path, document_type: Optional[str], output: str, save: Optional[Path]) -> None:
    """Extract clauses and risk flags from a contract text file.

    Example: hukuk-analyzer analyze sozlesme.txt --type kira_sozlesmesi
    """
    result = _analyze_file(ctx, file, document_type)
    payload = json.dumps(result.to_dict(), ensure_ascii=False, indent=2)

    if output == "json":
        click.echo(payload)
    elif output == "text":
        click.echo(format_extraction_report(result))
    else:
        _render_extraction(result)

    if save:
        try:
            save.write_text(payload, encoding="utf-8")
        except OSError as e:
            _fail(f"{save} yazılamadı: {e}")
        console.print(f"\n[dim]Sonuçlar {save} dosyasına kaydedildi[/]")


@main.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--type", "-t", "document_type", default=None, help="Document type.")
@click.option("--output", "-o", type=click.Choice(["rich", "json", "text"]), default="rich",
              help="Output format.")
@click.pass_context
def assess(ctx: click.Context, file: Path, document_type: Optional[str], output: str) -> None:
    """Score contract risk from the clauses found in a text file.

    Example: hukuk-analyzer assess sozlesme.txt --output text
    """
    result = _analyze_file(ctx, file, document_type)
    assessment = RiskAssessor().assess_contract(ContractRiskInput.from_extraction(result))

    if output == "json":
        click.echo(json.dumps(assessment.to_dict(), ensure_ascii=False, indent=2))
    elif output == "text":
        click.echo(format_risk_assessment(assessment))
    else:
        _render_assessment(assessment, file.name)


@main.command()
@click.argument("query")
@click.option("--area", default="genel", show_default=True, help="Legal area (e.g. kira, is, ticaret).")
@click.option("--jurisdiction", default=UNKNOWN_JURISDICTION, show_default=True, help="Jurisdiction.")
@click.option("--fact", "facts", multiple=True, help="Key fact; repeat for several facts.")
@click.option("--evidence-file", type=click.Path(exists=True, dir_okay=False, path_type=Path), default=None,
              help="JSON list of {type, source, citation, content, relevance, verified} objects.")
@click.option("--output", "-o", type=click.Choice(["text", "json"]), default="text", help="Output format.")
def explain(
    query: str,
    area: str,
    jurisdiction: str,
    facts: tuple[str, ...],
    evidence_file: Optional[Path],
    output: str,
) -> None:
    """Build a confidence-scored reasoning report for a legal question.

    Example: hukuk-analyzer explain "Kira artışı nasıl sınırlanır?" --area kira --fact "Konut kirası"
    """
    engine = ReasoningEngine()
    evidences = _load_evidences(engine, evidence_file) if evidence_file else []
    context = ReasoningContext(legal_area=area, jurisdiction=jurisdiction, key_facts=facts)
    result = engine.explain(query, context, evidences)

    if output == "json":
        click.echo(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    else:
        click.echo(format_explainable_result(result))
        console.print(f"[bold]Güvenilirlik:[/] {confidence_description(result.confidence_level)}")


@main.command()
def catalog() -> None:
    """List clause categories and document types known to the catalog."""
    patterns = PatternCatalog.default()

    table = Table(title=f"Madde Kategorileri (katalog {patterns.version})")
    table.add_column("Kod", style="cyan")
    table.add_column("Kategori", style="white")
    table.add_column("Madde Türü", justify="right")
    for entry in patterns.categories():
        table.add_row(entry["id"], entry["name"], str(entry["count"]))
    console.print(table)

    types = Table(title="Belge Türleri")
    types.add_column("Kod", style="cyan")
    types.add_column("Ad", style="white")
    types.add_column("Zorunlu Madde", justify="right")
    for doc_type in patterns.document_types:
        types.add_row(doc_type, patterns.document_type_name(doc_type), str(len(patterns.required_clause_types(doc_type))))
    console.print(types)
    console.print(f"[dim]{len(patterns)} madde türü, {len(patterns.risk_patterns)} risk kalıbı[/]")


# ------------------------------------------------------------------
# Input helpers
# ------------------------------------------------------------------

def _load_evidences(engine: ReasoningEngine, path: Path) -> list:
    try:
        raw = json.loads(_read_text(path))
    except json.JSONDecodeError as e:
        _fail(f"{path} geçerli JSON değil: {e}")
    if not isinstance(raw, list):
        _fail(f"{path} bir JSON listesi içermelidir")

    evidences = []
    for i, item in enumerate(raw, 1):
        if not isinstance(item, dict):
            _fail(f"{path}: {i}. kayıt bir nesne olmalıdır")
        try:
            evidences.append(
                engine.create_evidence(
                    EvidenceType(item.get("type", "")),
                    source=str(item.get("source", "")),
                    citation=str(item.get("citation", "")),
                    content=str(item.get("content", "")),
                    relevance=float(item.get("relevance", 0.8)),
                    is_verified=bool(item.get("verified", False)),
                )
            )
        except (TypeError, ValueError) as e:
            _fail(f"{path}: {i}. kayıt geçersiz: {e}")
    return evidences


# ------------------------------------------------------------------
# Rich rendering helpers
# ------------------------------------------------------------------

def _render_extraction(result: ExtractionResult) -> None:
    """Render a full ExtractionResult with rich formatting."""
    summary = result.summary
    patterns = PatternCatalog.default()
    console.print()

    console.print(Panel(
        f"[bold]{result.document_name}[/] ({patterns.document_type_name(result.document_type)})\n"
        f"Maddeler: {summary.total_clauses} | "
        f"Varlıklar: {summary.total_entities} | "
        f"Yükümlülükler: {summary.total_obligations} | "
        f"Haklar: {summary.total_rights}",
        title="⚖️ Sözleşme Analizi",
        border_style="blue",
    ))
    if result.truncated:
        console.print("[yellow]Belge uzunluk sınırını aştı; kısaltılarak incelendi.[/]")

    if result.clauses:
        table = Table(title="Maddeler", show_lines=True)
        table.add_column("Satır", justify="right", width=6)
        table.add_column("Madde", style="cyan", width=28)
        table.add_column("Metin (özet)", style="white", max_width=60)
        table.add_column("Risk", justify="center", width=10)

        for clause in result.clauses:
            excerpt = clause.content[:120].replace("\n", " ") + ("..." if len(clause.content) > 120 else "")
            worst = min((f.severity for f in clause.risk_flags), key=list(Severity).index, default=None)
            risk_text = Text(worst.value.upper(), style=_get_severity_style(worst)) if worst else Text("-")
            table.add_row(str(clause.line_number), clause.title, excerpt, risk_text)
        console.print(table)

    if result.entities:
        table = Table(title="Varlıklar")
        table.add_column("Tür", style="cyan", width=12)
        table.add_column("Metin", style="white")
        table.add_column("Değer", style="green")
        for entity in result.entities[:MAX_ENTITY_ROWS]:
            normalized = entity.normalized
            if isinstance(normalized, tuple):
                normalized = " ".join(normalized)
            table.add_row(entity.type.value, entity.text[:80], normalized or "-")
        if len(result.entities) > MAX_ENTITY_ROWS:
            table.add_row("...", f"({len(result.entities) - MAX_ENTITY_ROWS} tane daha)", "")
        console.print(table)

    if result.risk_flags:
        console.print("[bold]Risk Bayrakları[/]")
        for flag in result.risk_flags:
            icon = _get_severity_icon(flag.severity)
            style = _get_severity_style(flag.severity)
            console.print(f"  {icon} [{style}]{flag.severity.value.upper()}[/]: {flag.description}")
            console.print(f"      💡 {flag.recommendation}")
        console.print()

    if summary.recommendations:
        console.print(Panel(
            "\n".join(f"• {rec}" for rec in summary.recommendations),
            title="Öneriler",
            border_style="dim",
        ))

    style = _get_severity_style(summary.risk_level)
    console.print(f"Risk Skoru: [{style}]{summary.risk_score}/100 ({summary.risk_level.value.upper()})[/]")
    console.print()


def _render_assessment(assessment: RiskAssessment, name: str) -> None:
    """Render a RiskAssessment as a panel plus a factor table."""
    console.print()
    console.print(Panel(
        f"[bold]{name}[/]\n"
        f"{format_risk_score(assessment.overall_score, assessment.overall_level)}\n\n"
        f"{assessment.summary}",
        title="📊 Risk Değerlendirmesi",
        border_style="blue",
    ))

    table = Table(title="Risk Faktörleri", show_lines=True)
    table.add_column("Faktör", style="cyan", width=28)
    table.add_column("Ağırlık", justify="right", width=8)
    table.add_column("Skor", justify="right", width=6)
    table.add_column("Seviye", justify="center", width=10)
    table.add_column("Açıklama", style="white", max_width=50)
    for factor in sorted(assessment.factors, key=lambda f: f.score, reverse=True):
        table.add_row(
            factor.name,
            f"{factor.weight:.2f}",
            str(factor.score),
            Text(RISK_LEVEL_NAMES[factor.level], style=_get_level_style(factor.level)),
            factor.description,
        )
    console.print(table)

    console.print("[bold]Öneriler[/]")
    for i, rec in enumerate(assessment.recommendations, 1):
        console.print(f"  {i}. {rec}")
    console.print()


if __name__ == "__main__":
    main()

"""Command-line interface for the legal risk engine.

Provides ``assess`` and ``patterns`` commands with rich terminal output
using the ``click`` and ``rich`` libraries.

Usage::

    legal-risk-engine assess lease.txt --type lease --clauses clauses.json
    legal-risk-engine assess contract.txt --output json
    legal-risk-engine patterns --type loan_agreement
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .engine import RiskAssessmentEngine
from .models import Clause, DocumentType, RiskAssessmentResult, Severity
from .patterns import PatternDatabase

console = Console()

_DOCUMENT_TYPES = [t.value for t in DocumentType]


def _get_risk_style(level: Severity) -> str:
    """Return a rich style string for a severity."""
    return {
        Severity.HIGH: "bold red",
        Severity.MEDIUM: "bold yellow",
        Severity.LOW: "dim green",
    }.get(level, "")


def _get_risk_icon(level: Severity) -> str:
    """Return an emoji icon for a severity."""
    return {
        Severity.HIGH: "🔴",
        Severity.MEDIUM: "🟡",
        Severity.LOW: "🟢",
    }.get(level, "")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _load_clauses(path: Path | None) -> list[Clause]:
    """Read a JSON list of clause records."""
    if path is None:
        return []
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise ValueError("Clause file must contain a JSON list of clauses")
    return [Clause.from_dict(item) for item in data]


def _load_patterns(path: Path | None) -> PatternDatabase | None:
    return PatternDatabase.load_json(path) if path else None


@click.group()
@click.version_option(package_name="legal-risk-engine")
def main() -> None:
    """⚖️ Legal Risk Engine: explainable risk reports for legal documents.

    Flags risky clauses in contracts, leases, loan agreements, terms of
    service and privacy policies.
    """
    pass


@main.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--type", "-t", "document_type", type=click.Choice(_DOCUMENT_TYPES),
              default=DocumentType.CONTRACT.value, show_default=True,
              help="Document type.")
@click.option("--jurisdiction", "-j", default="US", show_default=True,
              help="Governing jurisdiction.")
@click.option("--clauses", "-c", "clauses_file", default=None,
              type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help="JSON file with the pre-segmented clause list.")
@click.option("--patterns", "-p", "patterns_file", default=None,
              type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help="JSON file with a replacement pattern catalog.")
@click.option("--output", "-o", type=click.Choice(["rich", "json"]), default="rich",
              help="Output format.")
@click.option("--save", "-s", type=click.Path(path_type=Path), default=None,
              help="Save results to a JSON file.")
@click.option("--verbose", "-v", is_flag=True, help="Log engine activity to stderr.")
def assess(
    file: Path,
    document_type: str,
    jurisdiction: str,
    clauses_file: Path | None,
    patterns_file: Path | None,
    output: str,
    save: Path | None,
    verbose: bool,
) -> None:
    """Assess the risks in a plain-text legal document.

    Example: legal-risk-engine assess lease.txt --type lease
    """
    _configure_logging(verbose)

    try:
        text = file.read_text(encoding="utf-8")
        clauses = _load_clauses(clauses_file)
        engine = RiskAssessmentEngine(patterns=_load_patterns(patterns_file))
        result = engine.assess_document_risks(text, clauses, document_type, jurisdiction)
    except Exception as e:
        console.print(f"[bold red]Error:[/] {e}")
        sys.exit(1)

    if output == "json":
        click.echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    else:
        _render_assessment(result, file.name, document_type)

    if save:
        save.write_text(json.dumps(result.to_dict(), indent=2, ensure_ascii=False),
                        encoding="utf-8")
        console.print(f"\n[dim]Results saved to {save}[/]")


@main.command()
@click.option("--type", "-t", "document_type", type=click.Choice(_DOCUMENT_TYPES),
              default=None, help="Only show patterns that apply to this document type.")
@click.option("--patterns", "-p", "patterns_file", default=None,
              type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help="JSON file with a replacement pattern catalog.")
def patterns(document_type: str | None, patterns_file: Path | None) -> None:
    """List the risk patterns in the active catalog.

    Example: legal-risk-engine patterns --type lease
    """
    try:
        database = _load_patterns(patterns_file) or PatternDatabase()
    except Exception as e:
        console.print(f"[bold red]Error:[/] {e}")
        sys.exit(1)

    selected = database.applicable(document_type) if document_type else list(database)

    table = Table(title=f"Risk Patterns ({len(selected)})", show_lines=False)
    table.add_column("ID", style="cyan")
    table.add_column("Category", width=12)
    table.add_column("Severity", justify="center", width=9)
    table.add_column("Triggers", style="white", max_width=50)
    table.add_column("Types", style="dim")

    for pattern in selected:
        table.add_row(
            pattern.id,
            pattern.category.value,
            Text(pattern.severity.value.upper(), style=_get_risk_style(pattern.severity)),
            ", ".join(pattern.patterns),
            ", ".join(sorted(pattern.document_types)) if pattern.document_types else "all",
        )

    console.print(table)


# ------------------------------------------------------------------
# Rich rendering helpers
# ------------------------------------------------------------------

def _render_assessment(result: RiskAssessmentResult, filename: str, document_type: str) -> None:
    """Render a RiskAssessmentResult with rich formatting."""
    console.print()

    score = result.overall_risk_score
    header = (
        f"[bold]{filename}[/]\n"
        f"Type: {document_type} | "
        f"Risks: {len(result.risks)} | "
        f"High: {len(result.high_risks)} | "
        f"Overall: [{_get_risk_style(score)}]{score.value.upper()}[/]"
    )
    categories = result.risks_by_category()
    if categories:
        header += "\nCategories: " + ", ".join(
            f"{category.value} ({count})" for category, count in categories.items()
        )
    console.print(Panel(
        header,
        title="⚖️ Legal Risk Assessment",
        border_style="blue",
    ))

    console.print(Panel(result.risk_summary, title="Summary", border_style="dim"))

    if result.risks:
        table = Table(title="Findings", show_lines=True)
        table.add_column("#", justify="right", width=4)
        table.add_column("Severity", justify="center", width=10)
        table.add_column("Category", style="cyan", width=12)
        table.add_column("Finding", style="white", max_width=50)
        table.add_column("Excerpt", style="dim", max_width=50)

        for i, risk in enumerate(result.risks, 1):
            table.add_row(
                str(i),
                Text(f"{_get_risk_icon(risk.severity)} {risk.severity.value.upper()}",
                     style=_get_risk_style(risk.severity)),
                risk.category.value,
                risk.description,
                risk.affected_clause.replace("\n", " "),
            )

        console.print(table)
        console.print()

    console.print("[bold]Recommendations[/]")
    for recommendation in result.recommendations:
        console.print(f"  • {recommendation}")
    console.print()


if __name__ == "__main__":
    main()

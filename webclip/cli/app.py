"""CLI application for clipping the readable content of web pages."""

import json
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.markup import escape

from webclip.config import settings, ensure_directories
from webclip.extractor import CANDIDATE_RULES, NOISE_RULES, ContentExtractor, NoiseReport
from webclip.scraper import PageLoader, Clip
from webclip.utils.logger import setup_logging

# Initialize Rich console
console = Console()


class _ReportingExtractor(ContentExtractor):
    """Keeps the noise report of the last extraction for display."""

    last_report: Optional[NoiseReport] = None

    def extract(self, document) -> str:
        result = self.run(document)
        self.last_report = result.report
        return result.text


def _print_report(report: NoiseReport):
    table = Table(title="Noise rules")
    table.add_column("Selector", style="cyan")
    table.add_column("Removed", justify="right")
    table.add_column("Error", style="red")

    for outcome in report.outcomes:
        table.add_row(escape(outcome.selector), str(outcome.removed), escape(outcome.error or ""))

    console.print(table)
    console.print(f"Removed {report.removed_total} elements in total")


def create_app() -> typer.Typer:
    """Create and configure the Typer CLI application."""
    app = typer.Typer(
        name="webclip",
        help="Extract the main readable content of web pages",
        add_completion=False
    )

    @app.callback()
    def main(
        verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
        log_level: Optional[str] = typer.Option(None, "--log-level", help="Set log level for console and file")
    ):
        """Initialize the application."""
        console_level = None
        if verbose:
            settings.log_level = console_level = "DEBUG"
        elif log_level:
            settings.log_level = console_level = log_level.upper()

        ensure_directories()
        setup_logging(console_level)

    @app.command()
    def extract(
        source: str = typer.Argument(..., help="URL or path to a saved HTML page"),
        title: Optional[str] = typer.Option(None, "--title", help="Title for the clip"),
        tag: Optional[List[str]] = typer.Option(None, "--tag", help="Tag for the clip (repeatable)"),
        as_json: bool = typer.Option(False, "--json", help="Print the outbound record as JSON"),
        report: bool = typer.Option(False, "--report", help="Show noise removal details")
    ):
        """Extract the readable content of a page."""
        extractor = _ReportingExtractor()
        loader = PageLoader(extractor=extractor)
        tags = list(tag) if tag else None

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
            transient=True
        ) as progress:
            progress.add_task("Extracting content...", total=None)
            if Path(source).is_file():
                clip: Clip = loader.clip_file(source, title=title, tags=tags)
            else:
                clip = loader.clip(source, title=title, tags=tags)

        if as_json:
            typer.echo(json.dumps(clip.to_record(), ensure_ascii=False, indent=2))
        else:
            console.print(f"[bold green]{escape(clip.title)}[/bold green] ({escape(clip.url)})")
            console.print(clip.content, markup=False, highlight=False)

        if report and extractor.last_report is not None:
            _print_report(extractor.last_report)

        if not clip.success:
            console.print(f"[bold red]Extraction failed:[/bold red] {escape(clip.error_message or '')}")
            raise typer.Exit(1)

    @app.command()
    def rules():
        """Show the candidate and noise rules."""
        candidates = Table(title="Candidate regions (highest priority first)")
        candidates.add_column("#", justify="right")
        candidates.add_column("Selector", style="cyan")
        candidates.add_column("Min length", justify="right")
        for i, rule in enumerate(CANDIDATE_RULES, 1):
            candidates.add_row(str(i), escape(rule.selector), f"> {rule.min_length}")
        console.print(candidates)

        noise = Table(title="Noise rules")
        noise.add_column("Selector", style="cyan")
        noise.add_column("Category")
        for rule in NOISE_RULES:
            noise.add_row(escape(rule.selector), rule.category)
        console.print(noise)

    return app

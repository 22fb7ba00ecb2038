#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
TfIdfAnalyzer - Enhanced CLI Interface
A rich command-line interface for the TF-IDF similarity analysis
"""

import os
import sys
import argparse

# Add the project root directory to Python path
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn, BarColumn, TimeElapsedColumn
from rich.markup import escape
from rich import box

from TfIdfAnalyzer.config import load_config
from TfIdfAnalyzer.main import SimilarityAnalyzer, AnalysisReport
from TfIdfAnalyzer.tfidf.tfidf import EmptyCorpusError

# Initialize rich console
console = Console()


class TfIdfAnalyzerCLI:
    def __init__(self, config=None):
        """Initialize the CLI interface"""
        self.config = config or load_config()
        self.analyzer = SimilarityAnalyzer(self.config)

    def print_header(self):
        """Display the application header"""
        console.print(Panel(
            "[bold blue]TfIdfAnalyzer[/bold blue] [yellow]Similarity Analysis[/yellow]",
            border_style="blue",
            subtitle="TF-IDF vectors ranked by cosine similarity",
            width=80
        ))

    def load_documents(self, documents_path: str) -> bool:
        """Load documents from a corpus file"""
        console.print(f"Loading documents from: [cyan]{escape(documents_path)}[/cyan]")

        try:
            with Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                BarColumn(),
                TimeElapsedColumn(),
                console=console
            ) as progress:
                task = progress.add_task("Loading documents...", total=None)
                self.analyzer.load_documents(documents_path)
                progress.update(task, completed=True)
        except (OSError, UnicodeDecodeError) as e:
            console.print(f"[bold red]Error loading documents:[/bold red] {escape(str(e))}")
            return False

        console.print(f"[green]Successfully loaded [bold]{len(self.analyzer.documents)}[/bold] documents[/green]")
        return True

    def analyze(self, clean_document=None):
        """Run the analysis on the loaded documents"""
        try:
            return self.analyzer.analyze(clean_document)
        except EmptyCorpusError as e:
            console.print(f"[bold red]Error during analysis:[/bold red] {escape(str(e))}")
            return None

    def display_report(self, report: AnalysisReport):
        """Display the analysis report as tables"""
        # Values of the query vector are not displayed
        table = Table(
            box=box.HEAVY_EDGE,
            show_header=True,
            header_style="bold magenta",
            title="[bold]TF-IDF values[/bold]",
            title_style="yellow"
        )
        table.add_column("Text", style="dim", width=6)
        table.add_column("Word", style="cyan bold")
        table.add_column("TF", style="green")
        table.add_column("IDF", style="green")
        table.add_column("TF-IDF", style="yellow")

        for i, vector in enumerate(report.candidate_vectors):
            for value in vector:
                table.add_row(
                    str(i + 1),
                    value.term,
                    f"{value.tf:.4f}",
                    f"{value.idf:.4f}",
                    f"{value.tfidf:.4f}"
                )
        console.print(table)

        table = Table(
            box=box.HEAVY_EDGE,
            show_header=True,
            header_style="bold magenta",
            title=f"[bold]Q vector length: {report.query_length:.4f}[/bold]",
            title_style="yellow"
        )
        table.add_column("Document", style="cyan bold")
        table.add_column("Length", style="green")
        table.add_column("Dot product", style="yellow")

        for i, (length, product) in enumerate(zip(report.candidate_lengths, report.dot_products)):
            table.add_row(f"D{i + 1}", f"{length:.4f}", f"{product:.4f}")
        console.print(table)

        if not report.ranking:
            console.print("[yellow]No candidate documents to compare with the query document.[/yellow]")
            return

        table = Table(
            box=box.HEAVY_EDGE,
            show_header=True,
            header_style="bold magenta",
            title=f"[bold]Similarity Analysis of {len(report.ranking)} document(s)[/bold]",
            title_style="yellow"
        )
        table.add_column("📌", style="dim", width=4)
        table.add_column("Document", style="dim", width=8)
        table.add_column("🔢 Similarity", style="yellow", width=12)
        table.add_column("📝 Content", style="green", no_wrap=False)

        for i, (number, document, similarity) in enumerate(report.ranking):
            # Highlight the row for the top result
            row_style = "on blue" if i == 0 else ""

            # Format score with visual indicator based on value
            score_str = f"{similarity:.4f}"
            if similarity > 0.7:
                score_display = f"[bold green]{score_str}[/bold green]"
            elif similarity > 0.4:
                score_display = f"[yellow]{score_str}[/yellow]"
            else:
                score_display = f"[dim]{score_str}[/dim]"

            table.add_row(
                str(i + 1),
                f"D{number}",
                score_display,
                document or "[dim]<No terms>[/dim]",
                style=row_style
            )

        console.print(table)
        console.print("[dim]Tip: Higher scores indicate documents closer to the query document.[/dim]")

    def run(self, documents_path: str, clean_document=None) -> bool:
        """Load, analyze and display one corpus"""
        if not self.load_documents(documents_path):
            return False

        report = self.analyze(clean_document)
        if report is None:
            return False

        self.display_report(report)
        return True

    def interactive_mode(self):
        """Ask for corpus files until the user quits"""
        console.print("\n[bold]TfIdfAnalyzer Interactive Mode[/bold]")
        console.print("[dim]Type 'quit' to exit[/dim]")

        while True:
            console.rule(style="blue")
            path = input("\nEnter corpus file path: ").strip()

            if path.lower() in ['quit', 'exit', 'q']:
                break

            if not path:
                console.print("[yellow]Empty path. Please try again.[/yellow]")
                continue

            clean_input = input("Remove stop words before vectorization? (y/N): ").strip().lower()
            self.run(path, clean_document=clean_input in ['y', 'yes'])


def main():
    """Main entry point for the CLI application"""
    parser = argparse.ArgumentParser(
        description='TfIdfAnalyzer - TF-IDF similarity of corpus documents to the first (query) document'
    )
    parser.add_argument('path', nargs='?', help='Path to corpus file, one document per line')
    parser.add_argument('--clean', action='store_true',
                        help='Remove configured stop words before vectorization')
    parser.add_argument('--config', help='Path to configuration file')
    parser.add_argument('--interactive', action='store_true',
                        help='Run in interactive mode')
    args = parser.parse_args()

    cli = TfIdfAnalyzerCLI(load_config(args.config))

    console.print("\n")
    console.rule("[bold blue]✦ ✦ ✦ TfIdfAnalyzer ✦ ✦ ✦[/bold blue]", style="blue")
    cli.print_header()
    console.rule(style="blue")

    # Run in interactive mode if specified or if no corpus is given
    if args.interactive or not args.path:
        cli.interactive_mode()
        return

    if not cli.run(args.path, clean_document=True if args.clean else None):
        sys.exit(1)


if __name__ == "__main__":
    main()

# src/yamlvalid/cli/formatter.py
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from yamlvalid.core.reporter import Reporter

# Diagnostics belong on the error stream; CI pipelines read it line by line
console = Console(stderr=True, highlight=False, emoji=False)


class DiagnosticFormatter:
    """
    DiagnosticFormatter: the visual side of the CLI.
    Prints diagnostic lines verbatim and, on request, a summary table.
    """

    def __init__(self, out: Console = console):
        self.console = out

    def print_line(self, text: str):
        """Emits one line exactly as given: no markup, no wrapping."""
        self.console.print(text, markup=False, emoji=False, highlight=False, soft_wrap=True)

    def print_diagnostics(self, reporter: Reporter):
        reporter.flush(self.print_line)

    def print_error(self, message: str):
        """Run-fatal problems (unreadable or unparsable input)."""
        self.print_line(message)

    def print_summary(self, reporter: Reporter):
        """
        Builds the table shown after the diagnostic lines when --summary
        is given.
        """
        if not reporter.has_errors():
            self.console.print(f"[bold green]✅ {escape(reporter.file)}: manifest is valid[/bold green]")
            return

        table = Table(title=Text(f"Validation Report: {reporter.file}"), show_header=True, header_style="bold magenta")
        table.add_column("Line", justify="right", style="cyan")
        table.add_column("Message")

        for diagnostic in reporter:
            line = str(diagnostic.line) if diagnostic.line is not None else "-"
            # User values end up in messages; keep them out of markup parsing
            table.add_row(line, Text(diagnostic.message))

        self.console.print(table)
        self.console.print(f"[bold red]❌ {len(reporter)} problem(s) found[/bold red]")

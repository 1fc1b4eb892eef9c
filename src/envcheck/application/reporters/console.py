"""Console reporter: LintResult → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from envcheck.application.reporters._base import (
    SEVERITY_LABELS,
    BaseReporter,
    format_position,
    format_summary,
)
from envcheck.domain.model.enums import Severity

if TYPE_CHECKING:
    from envcheck.domain.model.lint_result import FileResult, LintResult

_SEVERITY_STYLES = {
    Severity.ERROR: "red",
    Severity.WARNING: "yellow",
}


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    All fields have defaults. Immutable (frozen dataclass).

    Attributes:
        color: Emit ANSI styles.
        width: Console width in columns.
        show_clean_files: List files without diagnostics too.
    """

    color: bool = True
    width: int = 120
    show_clean_files: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width < 40:
            raise ValueError(f"width must be >= 40, got {self.width}")


class ConsoleReporter(BaseReporter):
    """Console reporter: diagnostics grouped per file, one table each.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, result: LintResult) -> str:
        """Format lint result as rich formatted string.

        Args:
            result: Lint result to format.

        Returns:
            Formatted string, styled when config.color is set.
        """
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self._config.color,
            no_color=not self._config.color,
            width=self._config.width,
            highlight=False,
        )

        for file_result in result.files:
            if file_result.clean and not self._config.show_clean_files:
                continue
            self._render_file(console, file_result)

        self._render_footer(console, result)
        return output.getvalue()

    def _render_file(self, console: Console, file_result: FileResult) -> None:
        """Render one file's diagnostics."""
        console.print(f"[underline]{escape(str(file_result.path))}[/underline]")

        if file_result.clean:
            console.print("  [green]clean[/green]")
            console.print()
            return

        table = Table(show_header=False, box=None, padding=(0, 1, 0, 2))
        table.add_column("Position", style="dim", no_wrap=True)
        table.add_column("Severity", no_wrap=True)
        table.add_column("Message", overflow="fold")
        table.add_column("Rule", style="dim", no_wrap=True)

        for diagnostic in file_result.diagnostics:
            style = _SEVERITY_STYLES[diagnostic.severity]
            table.add_row(
                format_position(diagnostic.location),
                f"[{style}]{SEVERITY_LABELS[diagnostic.severity]}[/{style}]",
                escape(diagnostic.message),
                diagnostic.rule_id,
            )

        console.print(table)
        console.print()

    def _render_footer(self, console: Console, result: LintResult) -> None:
        """Render problem summary."""
        summary = escape(format_summary(result))
        if result.error_count:
            console.print(f"[bold red]✖ {summary}[/bold red]")
        elif result.warning_count:
            console.print(f"[bold yellow]⚠ {summary}[/bold yellow]")
        else:
            console.print(f"[bold green]✔ {summary}[/bold green]")

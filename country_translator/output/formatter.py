"""Console output formatting using Rich.

Supports bilingual operation (English/German) via the i18n module.
"""

from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from country_translator.data.schemas import (
    CatalogStats,
    CodeEntry,
    TranslationResult,
    TranslationStatus,
)
from country_translator.i18n import t


class ConsoleFormatter:
    """Formats output for console display using Rich."""

    def __init__(self, console: Optional[Console] = None):
        """Initialize the formatter.

        Args:
            console: Rich Console instance (created if not provided).
        """
        self.console = console or Console()

    def _status_color(self, status: TranslationStatus) -> str:
        """Get color for a status."""
        return {
            TranslationStatus.TRANSLATED: "green",
            TranslationStatus.COUNTRY_NOT_RECOGNIZED: "red",
            TranslationStatus.LANGUAGE_NOT_RECOGNIZED: "red",
            TranslationStatus.TRANSLATION_UNAVAILABLE: "yellow",
        }.get(status, "white")

    def describe_result(self, result: TranslationResult) -> str:
        """One-line description of a translation result."""
        return t(
            f"result.{result.status.value}",
            country=result.country_name,
            language=result.language_name,
            translation=result.translation or "",
        )

    def print_translation_result(self, result: TranslationResult) -> None:
        """Print a translation result.

        Args:
            result: The result to display.
        """
        status_color = self._status_color(result.status)

        body = Text()
        body.append(f"{t('fmt.country')}: ", style="bold")
        body.append(result.country_name)
        if result.country_code:
            body.append(f" ({result.country_code})", style="dim")
        body.append(f"\n{t('fmt.language')}: ", style="bold")
        body.append(result.language_name)
        if result.language_code:
            body.append(f" ({result.language_code})", style="dim")
        body.append(f"\n{t('fmt.status')}: ", style="bold")
        body.append(t(f"status.{result.status.value}"), style=f"bold {status_color}")
        if result.translation is not None:
            body.append(f"\n{t('fmt.translation')}: ", style="bold")
            body.append(result.translation, style=status_color)

        self.console.print(Panel(body, title=t("fmt.panel.title"), border_style=status_color))

        if not result.is_translated:
            self.print_warning(self.describe_result(result))
        if result.suggestions:
            self.print_info(t("result.suggestions", names=", ".join(result.suggestions)))

    def print_entry_list(self, entries: list[CodeEntry], title: Optional[str] = None) -> None:
        """Print a table of names and codes.

        Args:
            entries: Entries to display, in display order.
            title: Title for the table.
        """
        table = Table(title=title)
        table.add_column("#", style="dim")
        table.add_column(t("fmt.name"))
        table.add_column(t("fmt.code"), style="cyan")

        for idx, entry in enumerate(entries, start=1):
            table.add_row(str(idx), entry.display_name, entry.code)

        self.console.print(table)

    def print_names(self, entries: list[CodeEntry]) -> None:
        """Print bare display names, one per line."""
        for entry in entries:
            self.console.print(entry.display_name, highlight=False)

    def print_stats(self, stats: CatalogStats) -> None:
        """Print statistics about the loaded catalog.

        Args:
            stats: Statistics to display.
        """
        table = Table(title=t("fmt.stats.title"), show_header=False)
        table.add_column(t("fmt.metric"), style="bold")
        table.add_column(t("fmt.value"))

        table.add_row(t("fmt.stats.countries"), str(stats.country_count))
        table.add_row(t("fmt.stats.languages"), str(stats.language_count))
        table.add_row(t("fmt.stats.translatable"), f"[green]{stats.translatable_countries}[/green]")
        table.add_row(t("fmt.stats.pairs"), str(stats.translation_pairs))
        table.add_row(t("fmt.stats.backend"), stats.backend.value)

        bundled = f"[dim]{t('fmt.bundled')}[/dim]"
        table.add_row(t("fmt.stats.country_source"), stats.country_codes_source or bundled)
        table.add_row(t("fmt.stats.language_source"), stats.language_codes_source or bundled)
        if stats.translations_source:
            table.add_row(t("fmt.stats.translation_source"), stats.translations_source)

        self.console.print(table)

    def print_success(self, message: str) -> None:
        """Print a success message."""
        self.console.print(f"[green]✓[/green] {message}")

    def print_error(self, message: str) -> None:
        """Print an error message."""
        self.console.print(f"[red]✗[/red] {message}")

    def print_warning(self, message: str) -> None:
        """Print a warning message."""
        self.console.print(f"[yellow]⚠[/yellow] {message}")

    def print_info(self, message: str) -> None:
        """Print an info message."""
        self.console.print(f"[blue]ℹ[/blue] {message}")

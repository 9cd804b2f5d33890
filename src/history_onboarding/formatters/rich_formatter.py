"""Rich terminal formatter for feature reports."""

from typing import Mapping, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..analysis.ownership import OwnershipAttributor
from ..models import Feature
from .base import BaseFormatter, ordered_features, ordered_owners

DATE_FORMAT = "%Y-%m-%d"


def _date(value) -> str:
    return value.strftime(DATE_FORMAT) if value is not None else "-"


class RichFormatter(BaseFormatter):
    """Summary table followed by a detailed section per feature."""

    def __init__(self, include_empty: bool = False, console: Optional[Console] = None):
        super().__init__(include_empty)
        self.console = console or Console()

    def render(self, features: Mapping[str, Feature]) -> None:
        shown = ordered_features(features, self.include_empty)
        if not shown:
            self.console.print("[yellow]No commits matched any feature.[/yellow]")
            return
        self._print_summary(shown)
        for feature in shown:
            self._print_feature(feature)

    def format(self, features: Mapping[str, Feature]) -> str:
        with self.console.capture() as capture:
            self.render(features)
        return capture.get()

    def _print_summary(self, features) -> None:
        table = Table(title="Feature Analysis", show_lines=False, pad_edge=True)
        table.add_column("Feature", style="bold")
        table.add_column("Commits", justify="right")
        table.add_column("Bugs", justify="right", style="yellow")
        table.add_column("Top contributor", style="cyan")
        table.add_column("Last updated", style="green")

        for feature in features:
            top = OwnershipAttributor.top_owners(feature.commits, 1)
            table.add_row(
                escape(feature.name),
                str(feature.commit_count),
                str(feature.bug_count),
                escape(top[0]) if top else "-",
                _date(feature.last_updated),
            )

        self.console.print()
        self.console.print(table)

    def _print_feature(self, feature: Feature) -> None:
        out = self.console
        out.print()
        out.print(f"[bold cyan]Feature: {escape(feature.name)}[/bold cyan]")
        out.print(f"Created: {_date(feature.created_at)}")
        out.print(f"Last Updated: {_date(feature.last_updated)}")

        out.print("Primary Owners:")
        for email, share in ordered_owners(feature.owners):
            out.print(f"  - {escape(email)} ({share * 100:.1f}%)")

        out.print("Backup Owners:")
        for email, share in ordered_owners(feature.backup_owners):
            out.print(f"  - {escape(email)} ({share * 100:.1f}%)")

        out.print(f"Number of Commits: {feature.commit_count}")
        out.print(f"Number of Bugs: {feature.bug_count}")

        if feature.bugs:
            out.print("Bug History:")
            for bug in feature.bugs:
                summary = bug.description.split("\n", 1)[0]
                out.print(
                    f"  - [dim]\\[{_date(bug.fixed_at)}][/dim] by {escape(bug.author_email)}: "
                    f"{escape(summary)}"
                )

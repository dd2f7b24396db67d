"""src/omyb/ui/cli/display/result.py
What: Render user-facing summaries for create/mv CLI flows.
Why: Keep console output formatting consistent across the interface.
"""

from __future__ import annotations

from pathlib import Path
from typing import final

from rich.console import Console
from rich.table import Table

from omyb.application.services import OutlineResult, RelocateOutcome


def _display_path(path: Path, base: Path | None) -> str:
    if base is None:
        return str(path)
    try:
        return str(path.relative_to(base))
    except ValueError:
        return str(path)


@final
class OutlineResultDisplay:
    """Handles outline generation output in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_result(self, result: OutlineResult, *, quiet: bool = False) -> None:
        """Print where the outline went and how many entries it holds."""

        if quiet:
            return

        self.console.print("\n[bold]Summary:[/bold]")
        self.console.print(f"Written to: {result.output_path}")
        self.console.print(f"[green]Entries: {len(result.document)}[/green]")


@final
class RelocationResultDisplay:
    """Render relocation plans and outcomes in the CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_outcome(self, outcome: RelocateOutcome, *, quiet: bool = False) -> None:
        """Print the renames of a relocation, marking dry runs."""

        if quiet:
            return

        relocation = outcome.relocation
        plan = relocation.plan
        base = plan.destination_dir.parent

        header = "Planned renames" if relocation.dry_run else "Renames"
        if plan.is_noop:
            self.console.print("[yellow]Nothing to rename; the entry is already in place.[/yellow]")
        else:
            table = Table(title=header, show_lines=False)
            table.add_column("#", justify="right")
            table.add_column("From")
            table.add_column("To", style="green")
            for sequence, step in enumerate(plan.steps, start=1):
                table.add_row(
                    str(sequence),
                    _display_path(step.source, base),
                    _display_path(step.target, base),
                )
            self.console.print(table)

        if relocation.dry_run:
            self.console.print("[yellow]Dry run: no files were changed.[/yellow]")
        elif plan.final_path is not None:
            self.console.print(f"[green]Moved to: {plan.final_path}[/green]")

        if outcome.outline is not None:
            self.console.print(
                f"Updated {outcome.outline.output_path} ({len(outcome.outline.document)} entries)"
            )

from datetime import datetime

from rich.console import Console
from rich.table import Table

from .models.conversion import ConversionMetrics


class ReportGenerator:
    """Prints the summary of a conversion run."""

    def __init__(self, console: Console = None):
        self.console = console or Console()

    def build_outcome_table(self, metrics: ConversionMetrics) -> Table:
        """One row per conversion outcome, splitting written documents by contract status."""
        written_invalid = metrics.invalid_count - metrics.skip_count

        table = Table(title="Conversion outcome", show_header=True)
        table.add_column("Outcome", style="bold")
        table.add_column("Recipes", style="cyan", justify="right")
        table.add_column("Artifacts")

        table.add_row("Valid Recipe", str(metrics.success_count - written_invalid), "recipe.json (+ full.jpg)")
        table.add_row("Contract violations", str(written_invalid), "recipe.json (+ full.jpg)")
        table.add_row("Skipped (strict)", str(metrics.skip_count), "none")
        table.add_row("Malformed crumb", str(metrics.failure_count), "none")
        return table

    def show_final_report(self, metrics: ConversionMetrics) -> None:
        elapsed = str(datetime.now() - metrics.start_time).split('.')[0]

        self.console.print(
            f"\n[bold]{metrics.total} crumb file(s) processed in[/bold] [cyan]{elapsed}[/cyan]"
        )
        self.console.print(self.build_outcome_table(metrics))

        for error in metrics.errors:
            self.console.print(f"[red]✗ {error.name}[/red]: {error.error}")

        if metrics.failure_count:
            self.console.print("[bold red]Some crumb files could not be converted.[/bold red]")
        elif metrics.invalid_count:
            self.console.print("[bold yellow]All files converted; some documents break the Recipe contract.[/bold yellow]")
        else:
            self.console.print("[bold green]All recipes converted.[/bold green]")

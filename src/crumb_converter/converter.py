import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional, Union

from rich.console import Console
from rich.progress import Progress

from .exceptions import RecipeShapeError
from .models.conversion import ConversionMetrics, RecipeError, SourceRecipe
from .models.schema_org import SchemaViolation
from .services.transformer import transform
from .services.validator import validate
from .writer import write_recipe

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str, str], None]


class RecipeConverter:
    """Converts loaded crumb recipes one by one and writes them to disk."""

    def __init__(
        self,
        output_dir: Union[str, Path],
        strict: bool = False,
        keep_going: bool = False,
        console: Console = None,
        progress_callback: Optional[ProgressCallback] = None,
    ):
        self.output_dir = Path(output_dir)
        self.strict = strict
        self.keep_going = keep_going
        self.console = console or Console()
        self.progress_callback = progress_callback
        self.metrics = ConversionMetrics()

    def _notify(self, name: str, status: str) -> None:
        if self.progress_callback:
            self.progress_callback(name, status)

    def convert_one(self, recipe: SourceRecipe) -> str:
        """
        Transform, validate and write a single recipe.

        Returns:
            str: "success", "invalid" (written despite violations) or "skipped"

        Raises:
            RecipeShapeError: If the crumb record is malformed
        """
        try:
            document = transform(recipe.content)
        except RecipeShapeError as e:
            e.recipe_name = e.recipe_name or recipe.name
            raise

        result = validate(document)
        if isinstance(result, SchemaViolation):
            self.metrics.invalid_count += 1
            logger.warning(f"Recipe '{recipe.name}' violates the Recipe contract: {', '.join(result.fields)}")
            if self.strict:
                self.metrics.skip_count += 1
                return "skipped"

        write_recipe(document, self.output_dir, recipe.name)
        self.metrics.success_count += 1
        return "invalid" if isinstance(result, SchemaViolation) else "success"

    def _record_failure(self, recipe: SourceRecipe, error: Exception) -> None:
        self.metrics.failure_count += 1
        self.metrics.errors.append(
            RecipeError(name=recipe.name, error=str(error), timestamp=datetime.now())
        )

    def convert_all(self, recipes: List[SourceRecipe]) -> ConversionMetrics:
        """Convert every recipe, advancing the progress bar once per recipe."""
        self.output_dir.mkdir(parents=True, exist_ok=True)

        self.console.print("\n[bold cyan]Crumb Converter[/bold cyan]")
        self.console.print("[dim]" + "═" * 50 + "[/dim]")
        self.console.print(f"[cyan]Total recipes:[/cyan] [green]{len(recipes)}[/green] [cyan]| Output:[/cyan] [yellow]{self.output_dir}[/yellow]")
        self.console.print("[dim]" + "═" * 50 + "[/dim]")

        with Progress(console=self.console, transient=True) as progress:
            task = progress.add_task("Converting recipes", total=len(recipes))

            for recipe in recipes:
                try:
                    status = self.convert_one(recipe)
                except RecipeShapeError as e:
                    self._record_failure(recipe, e)
                    self._notify(recipe.name, "error")
                    if not self.keep_going:
                        logger.error(f"Aborting conversion: {e}")
                        raise
                    logger.error(str(e))
                    progress.advance(task)
                    continue

                self._notify(recipe.name, status)
                progress.advance(task)

        self._notify("*", "done")
        logger.info(
            f"Converted {self.metrics.success_count}/{len(recipes)} recipes "
            f"({self.metrics.failure_count} failed, {self.metrics.invalid_count} invalid)"
        )
        return self.metrics

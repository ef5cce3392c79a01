# cli.py

"""Command-line interface for the feedback sentiment service."""

import json

import typer
from rich.console import Console
from rich.table import Table

from .core.heuristic_scorer import count_keywords, score_sentiment

# Create Typer app
app = typer.Typer(
    name="feedback-sentiment",
    help="Feedback sentiment scoring and service runner",
    add_completion=False,
)

# Rich console for pretty output
console = Console()

LABEL_STYLES = {
    "positive": "green",
    "negative": "red",
    "neutral": "yellow",
}


@app.command()
def score(
    text: str = typer.Argument(..., help="Feedback text to score"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
) -> None:
    """Score text with the heuristic sentiment scorer."""
    result = score_sentiment(text)

    if as_json:
        typer.echo(json.dumps(result.model_dump(mode="json")))
        return

    positive_score, negative_score = count_keywords(text)
    label = result.sentiment.value

    table = Table(title="Heuristic Sentiment")
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("Sentiment", f"[{LABEL_STYLES[label]}]{label}[/]")
    table.add_row("Score", f"{result.score:.2f} ({result.percentage}%)")
    table.add_row("Positive hits", str(positive_score))
    table.add_row("Negative hits", str(negative_score))
    console.print(table)


@app.command()
def serve(
    host: str = typer.Option(None, "--host", help="Bind address"),
    port: int = typer.Option(None, "--port", "-p", help="Bind port"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    from .core.config import settings

    uvicorn.run(
        "feedback_sentiment.main:app",
        host=host or settings.host,
        port=port or settings.port,
        reload=reload,
    )


if __name__ == "__main__":
    app()

"""Command-line interface for Bond Desk Intelligence."""

import json
import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from bondcrm.config.settings import get_settings
from bondcrm.logging_config import configure_logging
from bondcrm.models import ActivityRecord, TradeCandidate, TradeDirection, parse_leading_float
from bondcrm.pipeline.graph import run_analysis
from bondcrm.validation import match_direction_rule, validate_candidates

app = typer.Typer(
    name="bondcrm",
    help="Bond Desk Intelligence - Extract trades from client chat transcripts",
    add_completion=False,
)
console = Console()

DIRECTION_STYLES = {
    TradeDirection.BUY.value: "green",
    TradeDirection.SELL.value: "red",
    TradeDirection.TWO_WAY.value: "yellow",
}


@app.command()
def analyze(
    transcript_path: Path = typer.Argument(
        ...,
        help="Path to the chat transcript (plain text)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    output: Path = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file path for the JSON result (default: <transcript>_activities.json)",
    ),
    as_activities: bool = typer.Option(
        False,
        "--activities",
        help="Write activity-log records instead of raw trade candidates",
    ),
    user: str = typer.Option(
        "cli",
        "--user",
        help="Name recorded as the importer when --activities is set",
    ),
    pretty: bool = typer.Option(
        True,
        "--pretty/--compact",
        help="Pretty-print JSON output",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging",
    ),
) -> None:
    """Extract trades from a transcript and validate their directions."""
    configure_logging("DEBUG" if verbose else "WARNING")

    console.print(
        Panel.fit(
            "[bold blue]Bond Desk Intelligence[/bold blue]\n"
            "Analyzing chat transcript...",
            border_style="blue",
        )
    )

    if output is None:
        output = transcript_path.with_name(f"{transcript_path.stem}_activities.json")

    console.print(f"\n[dim]Input:[/dim] {transcript_path}")
    console.print(f"[dim]Output:[/dim] {output}\n")

    transcript = transcript_path.read_text(encoding="utf-8")
    if not transcript.strip():
        console.print("[red]Error:[/red] Transcript is empty")
        sys.exit(1)

    try:
        result = run_analysis(transcript)
    except Exception as e:
        console.print(f"\n[red]Error:[/red] {escape(str(e))}")
        if verbose:
            console.print_exception()
        sys.exit(1)

    if result.failed:
        for error in result.errors:
            console.print(f"[red]Error ({error.stage}):[/red] {escape(error.message)}")
        sys.exit(1)

    if as_activities:
        currency = get_settings().default_currency
        payload = [
            ActivityRecord.from_candidate(c, user, default_currency=currency).model_dump(by_alias=True, mode="json")
            for c in result.activities
        ]
    else:
        payload = [c.to_wire() for c in result.activities]

    _write_json(output, {"activities": payload}, pretty)
    _display_summary(result.activities, result.corrections)

    console.print(f"\n[green]Activities saved to:[/green] {output}")


@app.command()
def validate(
    transcript_path: Path = typer.Argument(
        ...,
        help="Path to the chat transcript (plain text)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    candidates_path: Path = typer.Argument(
        ...,
        help="JSON file with trade candidates (array, or {\"activities\": [...]})",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    output: Path = typer.Option(
        None,
        "--output",
        "-o",
        help="Write validated candidates here instead of printing them",
    ),
) -> None:
    """Re-check candidate directions against a transcript without calling the LLM."""
    configure_logging("WARNING")

    try:
        transcript = transcript_path.read_text(encoding="utf-8")
        with open(candidates_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(1)

    if isinstance(data, dict):
        data = data.get("activities", [])
    if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
        console.print("[red]Error:[/red] Candidates must be a JSON array of objects")
        sys.exit(1)

    candidates = [TradeCandidate.model_validate(item) for item in data]
    validated = validate_candidates(
        transcript,
        candidates,
        get_settings().validation_known_institutions,
    )
    corrections = sum(1 for a, b in zip(candidates, validated) if a.direction != b.direction)

    payload = {"activities": [c.to_wire() for c in validated]}
    if output is not None:
        _write_json(output, payload, pretty=True)
        console.print(f"[green]Validated candidates saved to:[/green] {output}")
    else:
        console.print_json(data=payload)

    _display_summary(validated, corrections)


@app.command()
def classify(
    text: str = typer.Argument(..., help="Chat text to classify"),
    institution: list[str] = typer.Option(
        None,
        "--institution",
        "-i",
        help="Known institution name (repeatable). Defaults to configured list.",
    ),
) -> None:
    """Show the direction the rule engine reads from a piece of chat text."""
    institutions = institution or get_settings().validation_known_institutions
    direction, rule = match_direction_rule(text, institutions)

    style = DIRECTION_STYLES.get(direction.value, "dim")
    console.print(f"[bold {style}]{direction.value}[/bold {style}]")
    console.print(f"[dim]Rule:[/dim] {rule or 'none matched'}")


@app.command()
def info() -> None:
    """Display system information and configuration."""
    from bondcrm import __version__

    settings = get_settings()

    console.print(
        Panel.fit(
            "[bold blue]Bond Desk Intelligence[/bold blue]",
            border_style="blue",
        )
    )

    table = Table(show_header=False, box=None)
    table.add_column("Setting", style="dim")
    table.add_column("Value")

    table.add_row("Version", __version__)
    table.add_row("LLM Model", settings.llm_model_name)
    table.add_row("Fallback Model", settings.llm_fallback_model_name)
    table.add_row("Ollama URL", settings.llm_ollama_base_url)
    table.add_row("Temperature", str(settings.llm_temperature))
    table.add_row("Top P / Top K", f"{settings.llm_top_p} / {settings.llm_top_k}")
    table.add_row("Context Window", str(settings.llm_num_ctx))
    table.add_row("Request Timeout", f"{settings.llm_request_timeout}s")
    table.add_row("Default Currency", settings.default_currency)
    table.add_row("Known Institutions", ", ".join(settings.validation_known_institutions))

    console.print(table)


def _write_json(path: Path, payload: dict, pretty: bool) -> None:
    with open(path, "w", encoding="utf-8") as f:
        if pretty:
            json.dump(payload, f, indent=2, ensure_ascii=False, default=str)
        else:
            json.dump(payload, f, ensure_ascii=False, default=str)


def _display_summary(activities: list[TradeCandidate], corrections: int) -> None:
    """Display a table of the extracted activities.

    Args:
        activities: Validated trade candidates.
        corrections: Number of directions the validator changed.
    """
    console.print("\n[bold]Detected Activities[/bold]")
    console.print("-" * 40)

    if not activities:
        console.print("[yellow]No activities detected in the transcript[/yellow]")
        return

    table = Table()
    table.add_column("Client")
    table.add_column("Bond / ISIN")
    table.add_column("Size", justify="right")
    table.add_column("Ccy")
    table.add_column("Direction")
    table.add_column("Price", justify="right")
    table.add_column("Confidence", style="dim")

    for activity in activities:
        direction = activity.direction or ""
        style = DIRECTION_STYLES.get(direction, "dim")
        size = parse_leading_float(activity.size)
        table.add_row(
            escape(activity.client_name or "UNKNOWN"),
            escape(str(activity.bond_name or activity.isin or "")),
            f"{size:g}MM" if size is not None else "",
            str(activity.currency or ""),
            f"[{style}]{direction}[/{style}]",
            "" if activity.price is None else str(activity.price),
            activity.confidence or "",
        )

    console.print(table)

    if corrections:
        console.print(f"\n[yellow]Directions auto-corrected:[/yellow] {corrections}")


if __name__ == "__main__":
    app()

"""Perceptron CLI utilities built with Typer + Rich."""

from __future__ import annotations

import json
import logging
from enum import Enum
from typing import Any, Dict, List, Optional

import numpy as np
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from .config import settings
from .errors import MaxIterationsExceeded
from .perceptron import train, updates
from .sampling import misclassified, random_separable_dataset

console = Console()
app = typer.Typer(help="Exercise the perceptron learning algorithm on random separable data.")


class OutputFormat(str, Enum):
    TEXT = "text"
    JSON = "json"


def _setup_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _format_vector(vector: Any, limit: int = 6) -> str:
    parts = [f"{v:.3g}" if isinstance(v, float) else str(v) for v in vector[:limit]]
    if len(vector) > limit:
        parts.append("…")
    return "(" + ", ".join(parts) + ")"


def _run_trial(
    trial: int,
    rng: np.random.Generator,
    *,
    dimension: Optional[int],
    size: Optional[int],
    margin: float,
    max_iterations: Optional[int],
) -> Dict[str, Any]:
    try:
        dataset = random_separable_dataset(rng, dimension=dimension, size=size, margin=margin)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    row: Dict[str, Any] = {
        "trial": trial,
        "dimension": len(dataset[0][0]) if dataset else 0,
        "size": len(dataset),
    }
    try:
        hypothesis = train(dataset, max_iterations=max_iterations)
    except MaxIterationsExceeded as exc:
        row.update(updates=exc.max_iterations, ok=False, error=exc.code)
        return row
    wrong = misclassified(dataset, hypothesis)
    row.update(updates=hypothesis.updates, ok=not wrong)
    if wrong:
        row["misclassified"] = wrong
    return row


@app.command()
def check(
    trials: int = typer.Option(100, min=1, help="Number of random datasets to train on."),
    seed: Optional[int] = typer.Option(None, help="Seed for the random generator."),
    dimension: Optional[int] = typer.Option(None, min=1, help="Feature dimension (random in 1..10 if omitted)."),
    size: Optional[int] = typer.Option(None, min=1, help="Examples per dataset (random in 1..100 if omitted)."),
    margin: float = typer.Option(0.0, min=0.0, help="Minimum distance of samples to the target hyperplane."),
    max_iterations: Optional[int] = typer.Option(
        None, min=0, help="Cap on weight updates per dataset (defaults to PLA_MAX_ITERATIONS)."
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat.TEXT,
        "--format",
        "-f",
        case_sensitive=False,
        help="Output format (text or json).",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every weight update."),
):
    """Check that training reproduces every label of random separable datasets."""

    _setup_logging(verbose)
    rng = np.random.default_rng(seed)
    rows = [
        _run_trial(
            trial,
            rng,
            dimension=dimension,
            size=size,
            margin=margin,
            max_iterations=max_iterations,
        )
        for trial in range(1, trials + 1)
    ]
    failures = [row for row in rows if not row["ok"]]

    if output_format is OutputFormat.JSON:
        typer.echo(json.dumps({"trials": rows, "failures": len(failures)}, indent=2))
    else:
        table = Table(show_header=True, header_style="bold blue")
        table.add_column("trial", justify="right")
        table.add_column("n", justify="right")
        table.add_column("m", justify="right")
        table.add_column("updates", justify="right")
        table.add_column("ok")
        for row in rows:
            status = "[green]yes[/green]" if row["ok"] else f"[red]{row.get('error', 'no')}[/red]"
            table.add_row(
                str(row["trial"]),
                str(row["dimension"]),
                str(row["size"]),
                str(row["updates"]),
                status,
            )
        console.print(table)
        summary = f"{len(rows) - len(failures)}/{len(rows)} dataset(s) reproduced every label"
        console.print(Panel(summary, title="Check", border_style="red" if failures else "green"))

    if failures:
        raise typer.Exit(code=1)


@app.command()
def trace(
    seed: Optional[int] = typer.Option(None, help="Seed for the random generator."),
    dimension: Optional[int] = typer.Option(2, min=1, help="Feature dimension."),
    size: Optional[int] = typer.Option(10, min=1, help="Number of examples."),
    margin: float = typer.Option(0.0, min=0.0, help="Minimum distance of samples to the target hyperplane."),
    max_iterations: Optional[int] = typer.Option(
        None, min=0, help="Cap on weight updates (defaults to PLA_MAX_ITERATIONS)."
    ),
):
    """Show every weight update made while training on one random dataset."""

    try:
        dataset = random_separable_dataset(seed, dimension=dimension, size=size, margin=margin)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    table = Table(title="Updates", show_header=True, header_style="bold blue")
    table.add_column("step", justify="right")
    table.add_column("example", justify="right")
    table.add_column("label")
    table.add_column("weights")
    try:
        for update in updates(dataset, max_iterations=max_iterations):
            table.add_row(
                str(update.step),
                str(update.index),
                str(update.label),
                _format_vector(update.weights),
            )
    except MaxIterationsExceeded as exc:
        console.print(table)
        console.print(Panel(str(exc), title="Trace", border_style="red"))
        raise typer.Exit(code=1)

    console.print(table)
    console.print(
        Panel(
            f"Converged after {table.row_count} update(s) on {len(dataset)} example(s)",
            title="Trace",
            border_style="green",
        )
    )


@app.command()
def config():
    """Show the effective training settings and how to override them."""

    current = settings()
    lines: List[str] = [
        f"max_iterations = {current.max_iterations if current.max_iterations is not None else 'unbounded'}",
        f"log_every = {current.log_every}",
        "",
        "export PLA_MAX_ITERATIONS=<updates or none>",
        "export PLA_LOG_EVERY=<updates>",
    ]
    console.print(Panel("\n".join(lines), title="Settings", border_style="cyan"))


def main():  # pragma: no cover
    app()


if __name__ == "__main__":  # pragma: no cover
    main()

"""Grover search command line interface.

Usage:
    quantum-grover run --qubits 15
    quantum-grover run --qubits 3 --key 5 --monitor
    quantum-grover iterations --max-qubits 10
    quantum-grover sweep -q 2 -q 3 -q 4 --keys-per-size 3
"""

from __future__ import annotations

import logging
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from .config import GroverSettings, LOG_FORMAT
from .core import GroverResult, iteration_count
from .experiment_logging import summarize_probability, sweep_qubit_counts
from .runner import random_key, run_grover


app = typer.Typer(help="Grover Search Lab - amplitude amplification experiment CLI")
console = Console()


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Logging level (defaults to GROVER_LOG_LEVEL or WARNING)"
    ),
):
    """Configure logging for all commands."""
    level = (log_level or GroverSettings.from_env().log_level).upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)


@app.command()
def run(
    qubits: int = typer.Option(15, "--qubits", "-n", help="Number of qubits (search space = 2^n)"),
    key: Optional[int] = typer.Option(None, "--key", "-k", help="Marked element (random if omitted)"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for the random key"),
    backend: Optional[str] = typer.Option(None, "--backend", "-b", help="Backend name"),
    iterations: Optional[int] = typer.Option(None, "--iterations", "-r", help="Override iteration count"),
    monitor: bool = typer.Option(False, "--monitor", help="Print the solution probability after every iteration"),
):
    """Run Grover's search for a single marked element."""
    console.print("[bold blue]Running Grover's Search[/bold blue]")

    try:
        num_reps = iterations if iterations is not None else iteration_count(qubits)
        console.print(f"num_qubits: {qubits}, num_elems: {2 ** qubits}, num_reps: {num_reps}")

        if key is None:
            key = random_key(qubits, seed)

        def print_probability(iteration: int, probability: float) -> None:
            console.print(f"prob of solution |{key}> = {probability:.6f}")

        result = run_grover(
            qubits,
            key=key,
            backend=backend,
            num_iterations=iterations,
            monitor=print_probability if monitor else None,
        )

        _print_result(result)

    except Exception as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(code=1)


@app.command()
def iterations(
    max_qubits: int = typer.Option(10, "--max-qubits", help="Largest register size in the table"),
):
    """Compare classical and Grover query counts."""
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Qubits")
    table.add_column("Space")
    table.add_column("Classical")
    table.add_column("Grover")
    table.add_column("Speedup")

    for bits in range(1, max_qubits + 1):
        space = 2 ** bits
        quantum = iteration_count(bits)
        table.add_row(str(bits), str(space), str(space), str(quantum), f"{space / quantum:.1f}x")

    console.print(table)


@app.command()
def sweep(
    qubits: List[int] = typer.Option([2, 3, 4, 5], "--qubits", "-q", help="Register sizes"),
    keys_per_size: int = typer.Option(1, "--keys-per-size", help="Random keys per register size"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for the random keys"),
    backend: Optional[str] = typer.Option(None, "--backend", "-b", help="Backend name"),
):
    """Sweep register sizes and summarize the final solution probability."""
    try:
        df = sweep_qubit_counts(qubits, keys_per_size=keys_per_size, backend=backend, seed=seed)
    except Exception as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(code=1)

    summary = summarize_probability(df)

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Qubits")
    table.add_column("Iterations")
    table.add_column("Mean P")
    table.add_column("Min P")
    table.add_column("Runs")

    for row in summary.itertuples(index=False):
        table.add_row(
            str(row.num_qubits),
            str(row.num_iterations),
            f"{row.mean_probability:.4f}",
            f"{row.min_probability:.4f}",
            str(row.runs),
        )

    console.print(table)


def _print_result(result: GroverResult):
    """Print the result in a nice format."""
    console.print(
        f"[bold green]Done.[/bold green] prob of solution |{result.key}> = {result.probability:.6f}"
    )
    console.print(f"Iterations: {result.num_iterations}, Backend: {result.backend}")


if __name__ == "__main__":
    app()

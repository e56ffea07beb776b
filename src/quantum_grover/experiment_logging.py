"""Experiment utilities for collecting Grover run metrics into pandas DataFrames."""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np
import pandas as pd

from .core import iteration_count
from .runner import run_grover


def sweep_qubit_counts(
    qubit_counts: Sequence[int],
    keys_per_size: int = 1,
    backend: Optional[str] = None,
    seed: Optional[int] = None,
) -> pd.DataFrame:
    """Run Grover search for several register sizes and collect metrics.

    Parameters
    ----------
    qubit_counts : Sequence[int]
        Register sizes evaluated for the sweep.
    keys_per_size : int
        How many random keys to search per register size.
    backend : str, optional
        Backend name. Defaults to the configured backend.
    seed : int, optional
        Seed for the key generator; the same seed gives the same keys.
    """

    rng = np.random.default_rng(seed)
    records: list[dict] = []

    for num_qubits in qubit_counts:
        for repeat in range(keys_per_size):
            key = int(rng.integers(0, 1 << num_qubits))
            result = run_grover(num_qubits, key=key, backend=backend)

            records.append(
                {
                    "num_qubits": num_qubits,
                    "num_states": 1 << num_qubits,
                    "repeat": repeat,
                    "key": result.key,
                    "num_iterations": result.num_iterations,
                    "probability": result.probability,
                    "backend": result.backend,
                }
            )

    return pd.DataFrame.from_records(records)


def iteration_trace(
    num_qubits: int,
    key: int,
    num_iterations: Optional[int] = None,
    backend: Optional[str] = None,
) -> pd.DataFrame:
    """Probability of ``key`` after each iteration, one row per iteration.

    ``num_iterations`` defaults to ``iteration_count(num_qubits)``; pass a
    larger value to watch the amplitude rotate past its maximum.
    """

    if num_iterations is None:
        num_iterations = iteration_count(num_qubits)

    result = run_grover(num_qubits, key=key, backend=backend, num_iterations=num_iterations)
    return pd.DataFrame(
        {
            "iteration": np.arange(1, len(result.history) + 1),
            "probability": result.history,
        }
    )


def summarize_probability(df: pd.DataFrame) -> pd.DataFrame:
    """Aggregate mean and minimum probability per register size."""

    if df.empty:
        return df

    summary = (
        df.groupby("num_qubits", as_index=False)
        .agg(
            num_iterations=("num_iterations", "first"),
            mean_probability=("probability", "mean"),
            min_probability=("probability", "min"),
            runs=("probability", "size"),
        )
    )
    return summary

"""Runner module for Grover search."""

from __future__ import annotations

from typing import Optional

import numpy as np

from .backends import RegisterBackend, get_backend
from .config import GroverSettings
from .core import GroverDriver, GroverResult, IterationMonitor
from .environment import QuantumEnvironment

MAX_RANDOM_KEY_QUBITS = 62  # keys drawn as int64


def random_key(num_qubits: int, seed: Optional[int] = None) -> int:
    """Pick a uniformly random key in ``[0, 2**num_qubits)``."""
    if not 1 <= num_qubits <= MAX_RANDOM_KEY_QUBITS:
        raise ValueError(
            f"random keys need 1 to {MAX_RANDOM_KEY_QUBITS} qubits, got {num_qubits}"
        )
    rng = np.random.default_rng(seed)
    return int(rng.integers(0, 1 << num_qubits))


def run_grover(
    num_qubits: int,
    key: Optional[int] = None,
    backend: str | RegisterBackend | None = None,
    num_iterations: Optional[int] = None,
    seed: Optional[int] = None,
    monitor: Optional[IterationMonitor] = None,
    settings: Optional[GroverSettings] = None,
) -> GroverResult:
    """Run Grover's algorithm on a fresh register.

    Args:
        num_qubits: Register size.
        key: Marked state. Chosen at random when None.
        backend: Backend name or instance. Defaults to ``settings.backend``.
        num_iterations: Override the iteration count.
        seed: Seed for the random key.
        monitor: Called as ``monitor(iteration, probability)``.
        settings: Defaults to ``GroverSettings.from_env()``.

    Returns:
        GroverResult object.

    Raises:
        KeyOutOfBound: If ``key`` is outside the register's key space.
    """
    if settings is None:
        settings = GroverSettings.from_env()

    if backend is None:
        backend = settings.backend
    if isinstance(backend, str):
        backend = get_backend(backend, max_qubits=settings.max_qubits)

    if key is None:
        key = random_key(num_qubits, seed)

    driver = GroverDriver(backend, num_iterations=num_iterations)
    with QuantumEnvironment(backend) as env:
        register = env.create_register(num_qubits)
        return driver.search(register, key, monitor=monitor)

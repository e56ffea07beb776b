"""Grover's algorithm core implementation.

This module provides the Grover search driver. It works against any
``RegisterBackend`` and never touches the backend's state directly.
"""

from __future__ import annotations

import logging
import math
import operator
from dataclasses import dataclass, field
from typing import Callable, Optional, List

from .backends.base import Register, RegisterBackend
from .oracles import apply_diffuser, apply_phase_oracle

logger = logging.getLogger(__name__)

IterationMonitor = Callable[[int, float], None]


class KeyOutOfBound(ValueError):
    """Raised when a search key lies outside ``[0, 2**num_qubits)``."""

    def __init__(self, key: int, num_qubits: int):
        self.key = key
        self.num_qubits = num_qubits
        super().__init__(
            f"key {key} is outside the key space [0, {1 << num_qubits}) of a {num_qubits}-qubit register"
        )


@dataclass
class GroverResult:
    """Result of a Grover search."""
    num_qubits: int
    key: int
    num_iterations: int
    probability: float
    backend: str
    history: List[float] = field(default_factory=list)


def validate_key(num_qubits: int, key: int) -> None:
    """Check that ``key`` addresses a basis state of the register.

    Args:
        num_qubits: Register size
        key: Search key

    Raises:
        KeyOutOfBound: If key is negative or >= 2**num_qubits
    """
    key = operator.index(key)
    if not 0 <= key < (1 << num_qubits):
        raise KeyOutOfBound(key, num_qubits)


def iteration_count(num_qubits: int) -> int:
    """Number of Grover iterations for a single marked state.

    ceil(pi/4 * sqrt(N)) with N = 2^num_qubits. For small registers this
    over-rotates past the maximum (e.g. 2 iterations at n=2), and n=0
    still yields one iteration.

    Args:
        num_qubits: Number of qubits (search space = 2^num_qubits)

    Returns:
        Number of iterations
    """
    if num_qubits < 0:
        raise ValueError(f"num_qubits must be non-negative, got {num_qubits}")
    return math.ceil(math.pi / 4 * math.sqrt(2 ** num_qubits))


class GroverDriver:
    """Grover's quantum search over a backend register.

    Example:
        >>> backend = StatevectorBackend()
        >>> with QuantumEnvironment(backend) as env:
        ...     register = env.create_register(3)
        ...     probability = GroverDriver(backend).run(register, 5)
    """

    def __init__(self, backend: RegisterBackend, num_iterations: Optional[int] = None):
        """Initialize the driver.

        Args:
            backend: Backend that owns the registers passed to ``run``
            num_iterations: Override automatic iteration calculation
        """
        if num_iterations is not None and num_iterations < 0:
            raise ValueError(f"num_iterations must be non-negative, got {num_iterations}")
        self.backend = backend
        self.num_iterations = num_iterations
        self._iteration_cache: dict[int, int] = {}

    def iterations_for(self, num_qubits: int) -> int:
        if self.num_iterations is not None:
            return self.num_iterations
        if num_qubits not in self._iteration_cache:
            self._iteration_cache[num_qubits] = iteration_count(num_qubits)
        return self._iteration_cache[num_qubits]

    def apply_oracle(self, register: Register, key: int) -> None:
        apply_phase_oracle(self.backend, register, key)

    def apply_diffuser(self, register: Register) -> None:
        apply_diffuser(self.backend, register)

    def run(
        self,
        register: Register,
        key: int,
        monitor: Optional[IterationMonitor] = None,
    ) -> float:
        """Amplify ``key`` and return its probability.

        The register is reinitialized on every call, so it can be reused
        for another key.

        Args:
            register: Register allocated on ``self.backend``
            key: Marked basis state
            monitor: Called as ``monitor(iteration, probability)`` after
                each Grover iteration

        Returns:
            Probability of measuring ``key``

        Raises:
            KeyOutOfBound: Before any gate is applied
        """
        try:
            validate_key(register.num_qubits, key)
        except KeyOutOfBound:
            logger.warning("Rejected key %s for %d-qubit register", key, register.num_qubits)
            raise

        n_iterations = self.iterations_for(register.num_qubits)
        logger.info(
            "Searching for %d in 2^%d states with %d iterations",
            key, register.num_qubits, n_iterations,
        )

        # Step 1: Initialize to uniform superposition
        self.backend.init_superposition(register)

        # Step 2: Apply Grover iterations
        for iteration in range(1, n_iterations + 1):
            self.apply_oracle(register, key)
            self.apply_diffuser(register)

            if monitor is not None or logger.isEnabledFor(logging.DEBUG):
                probability = self.backend.probability(register, key)
                logger.debug("prob of solution |%d> = %.6f after iteration %d", key, probability, iteration)
                if monitor is not None:
                    monitor(iteration, probability)

        # Step 3: Read the marked state's probability
        return self.backend.probability(register, key)

    def search(
        self,
        register: Register,
        key: int,
        monitor: Optional[IterationMonitor] = None,
    ) -> GroverResult:
        """Run the search and keep the probability after every iteration."""
        history: list[float] = []

        def record(iteration: int, probability: float) -> None:
            history.append(probability)
            if monitor is not None:
                monitor(iteration, probability)

        probability = self.run(register, key, monitor=record)
        return GroverResult(
            num_qubits=register.num_qubits,
            key=key,
            num_iterations=self.iterations_for(register.num_qubits),
            probability=probability,
            backend=self.backend.name(),
            history=history,
        )

"""Grover Search Lab - amplitude amplification on pluggable state-vector backends.

Grover's algorithm provides quadratic speedup for unstructured search:
- Classical: O(N) queries
- Quantum: O(sqrt(N)) queries

Subpackages:
- quantum_grover.backends: Register backends (NumPy, Qiskit, Qiskit Aer)

Example usage:
    >>> from quantum_grover import GroverDriver, QuantumEnvironment, StatevectorBackend
    >>> backend = StatevectorBackend()
    >>> with QuantumEnvironment(backend) as env:
    ...     register = env.create_register(3)
    ...     probability = GroverDriver(backend).run(register, 5)  # 5 = 0b101
"""

__all__ = [
    # Core algorithm
    "GroverDriver",
    "GroverResult",
    "KeyOutOfBound",
    "iteration_count",
    "validate_key",
    # Oracle construction
    "apply_phase_oracle",
    "apply_diffuser",
    # Resources
    "QuantumEnvironment",
    "Register",
    "RegisterBackend",
    "RegisterAllocationError",
    "StatevectorBackend",
    "get_backend",
    # Runs and experiments
    "GroverSettings",
    "run_grover",
    "sweep_qubit_counts",
    "iteration_trace",
    "summarize_probability",
]

from .backends import (
    Register,
    RegisterAllocationError,
    RegisterBackend,
    StatevectorBackend,
    get_backend,
)
from .config import GroverSettings
from .core import GroverDriver, GroverResult, KeyOutOfBound, iteration_count, validate_key
from .environment import QuantumEnvironment
from .oracles import apply_diffuser, apply_phase_oracle
from .runner import run_grover
from .experiment_logging import iteration_trace, summarize_probability, sweep_qubit_counts

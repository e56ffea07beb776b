"""Qiskit backend: registers are circuits, read out through a statevector simulation."""

from __future__ import annotations

import math
from typing import Any, Sequence

import numpy as np
from qiskit import QuantumCircuit, transpile
from qiskit.quantum_info import Statevector

from .base import Register, RegisterBackend

try:
    from qiskit_aer import AerSimulator
    AER_AVAILABLE = True
except ImportError:
    AER_AVAILABLE = False


METHODS = ("statevector", "aer")


class QiskitBackend(RegisterBackend):
    """Backend that records gates on a Qiskit ``QuantumCircuit``.

    Probabilities are read by simulating the recorded circuit, either with
    ``qiskit.quantum_info.Statevector`` or with Qiskit Aer.
    """

    def __init__(self, method: str = "statevector", max_qubits: int | None = None):
        """Initialize the backend.

        Parameters
        ----------
        method : str
            "statevector" for the exact ``quantum_info`` simulation, or
            "aer" for ``AerSimulator`` with ``save_statevector``.
        max_qubits : int, optional
            Largest register this backend will allocate.
        """
        super().__init__(max_qubits=max_qubits)
        if method not in METHODS:
            raise ValueError(f"Unknown method: {method}. Available: {list(METHODS)}")
        if method == "aer" and not AER_AVAILABLE:
            raise ImportError(
                "qiskit-aer is required. Install with:\n"
                "  pip install qiskit-aer"
            )

        self._method = method
        self._simulator = AerSimulator(method="statevector") if method == "aer" else None

    def _create_handle(self, num_qubits: int) -> QuantumCircuit:
        return QuantumCircuit(num_qubits)

    def init_superposition(self, register: Register) -> None:
        self._check_live(register)
        circuit = QuantumCircuit(register.num_qubits)
        circuit.h(range(register.num_qubits))
        register.handle = circuit

    def bit_flip(self, register: Register, qubit: int) -> None:
        self._check_live(register)
        self._check_qubit(register, qubit)
        register.handle.x(qubit)

    def basis_change(self, register: Register, qubit: int) -> None:
        self._check_live(register)
        self._check_qubit(register, qubit)
        register.handle.h(qubit)

    def multi_controlled_phase_flip(self, register: Register, qubits: Sequence[int]) -> None:
        self._check_live(register)
        if not qubits:
            raise ValueError("multi-controlled phase flip needs at least one qubit")
        for qubit in qubits:
            self._check_qubit(register, qubit)
        _apply_phase_flip(register.handle, list(qubits))

    def probability(self, register: Register, basis_index: int) -> float:
        self._check_live(register)
        self._check_basis_index(register, basis_index)
        amplitudes = self._amplitudes(register.handle)
        return float(abs(amplitudes[basis_index]) ** 2)

    def _amplitudes(self, circuit: QuantumCircuit) -> np.ndarray:
        if self._simulator is None:
            return np.asarray(Statevector.from_instruction(circuit).data)

        qc = circuit.copy()
        qc.save_statevector()
        result = self._simulator.run(transpile(qc, self._simulator)).result()
        return np.asarray(result.get_statevector())

    def name(self) -> str:
        return "qiskit_aer" if self._method == "aer" else "qiskit_statevector"

    def get_info(self) -> dict[str, Any]:
        info = super().get_info()
        info["method"] = self._method
        return info


def _apply_phase_flip(circuit: QuantumCircuit, qubits: list[int]) -> None:
    """Flip the phase of |11...1> on ``qubits``.

    The last qubit is the target; a pi phase on it controlled by the rest
    is the multi-controlled Z.
    """
    *controls, target = qubits

    if not controls:
        circuit.z(target)
    elif len(controls) == 1:
        circuit.cz(controls[0], target)
    else:
        circuit.mcp(math.pi, controls, target)

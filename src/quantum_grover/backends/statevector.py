"""Dense state-vector backend using NumPy."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from .base import Register, RegisterBackend

_INV_SQRT2 = 1 / math.sqrt(2)


class StatevectorBackend(RegisterBackend):
    """In-memory backend holding one complex128 amplitude per basis state.

    Gates act on a ``(high, 2, low)`` reshaped view of the vector, where the
    middle axis is the target qubit.
    """

    def _create_handle(self, num_qubits: int) -> np.ndarray:
        state = np.zeros(1 << num_qubits, dtype=np.complex128)
        state[0] = 1.0
        return state

    def init_superposition(self, register: Register) -> None:
        self._check_live(register)
        register.handle[:] = 1 / math.sqrt(register.num_states)

    def bit_flip(self, register: Register, qubit: int) -> None:
        view = self._qubit_view(register, qubit)
        view[:, [0, 1], :] = view[:, [1, 0], :]

    def basis_change(self, register: Register, qubit: int) -> None:
        view = self._qubit_view(register, qubit)
        zero = view[:, 0, :].copy()
        one = view[:, 1, :].copy()
        view[:, 0, :] = (zero + one) * _INV_SQRT2
        view[:, 1, :] = (zero - one) * _INV_SQRT2

    def multi_controlled_phase_flip(self, register: Register, qubits: Sequence[int]) -> None:
        self._check_live(register)
        if not qubits:
            raise ValueError("multi-controlled phase flip needs at least one qubit")
        mask = 0
        for qubit in qubits:
            self._check_qubit(register, qubit)
            mask |= 1 << qubit

        indices = np.arange(register.num_states)
        register.handle[(indices & mask) == mask] *= -1

    def probability(self, register: Register, basis_index: int) -> float:
        self._check_live(register)
        self._check_basis_index(register, basis_index)
        return float(abs(register.handle[basis_index]) ** 2)

    def probabilities(self, register: Register) -> np.ndarray:
        """Return the full probability distribution of the register."""
        self._check_live(register)
        return np.abs(register.handle) ** 2

    def name(self) -> str:
        return "statevector"

    def _qubit_view(self, register: Register, qubit: int) -> np.ndarray:
        self._check_live(register)
        self._check_qubit(register, qubit)
        return register.handle.reshape(-1, 2, 1 << qubit)

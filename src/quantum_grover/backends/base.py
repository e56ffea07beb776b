"""Base class for register backends."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from ..environment import QuantumEnvironment

logger = logging.getLogger(__name__)


class RegisterAllocationError(MemoryError):
    """Raised when a backend cannot hold a register of the requested size."""


@dataclass(eq=False)
class Register:
    """An n-qubit register whose state is owned by a backend.

    The key space of the register is ``[0, 2**num_qubits)``. ``handle`` is
    backend-specific and must not be touched outside the backend.
    """
    num_qubits: int
    handle: Any = field(repr=False)
    environment: QuantumEnvironment | None = field(default=None, repr=False)
    released: bool = False

    @property
    def num_states(self) -> int:
        return 1 << self.num_qubits


class RegisterBackend(ABC):
    """Abstract base class for state-vector backends.

    Subclasses implement the gate primitives used by the Grover driver.
    Qubit ``q`` corresponds to bit ``q`` of a basis index.
    """

    def __init__(self, max_qubits: int | None = None):
        self._max_qubits = max_qubits

    @property
    def max_qubits(self) -> int | None:
        return self._max_qubits

    def allocate(self, num_qubits: int, environment: QuantumEnvironment | None = None) -> Register:
        """Allocate a register of ``num_qubits`` qubits.

        Parameters
        ----------
        num_qubits : int
            Register size, at least 1.
        environment : QuantumEnvironment, optional
            Environment that owns the register.

        Returns
        -------
        Register
            A register in the all-zero state.

        Raises
        ------
        ValueError
            If ``num_qubits`` is smaller than 1.
        RegisterAllocationError
            If ``num_qubits`` exceeds ``max_qubits``.
        """
        if num_qubits < 1:
            raise ValueError(f"num_qubits must be at least 1, got {num_qubits}")
        if self._max_qubits is not None and num_qubits > self._max_qubits:
            raise RegisterAllocationError(
                f"{self.name()} supports at most {self._max_qubits} qubits, requested {num_qubits}"
            )

        register = Register(
            num_qubits=num_qubits,
            handle=self._create_handle(num_qubits),
            environment=environment,
        )
        logger.debug("Allocated %d-qubit register on %s", num_qubits, self.name())
        return register

    def release(self, register: Register) -> None:
        """Free the backend state held by ``register``. Safe to call twice."""
        if register.released:
            return
        self._free_handle(register.handle)
        register.handle = None
        register.released = True
        logger.debug("Released %d-qubit register on %s", register.num_qubits, self.name())

    @abstractmethod
    def _create_handle(self, num_qubits: int) -> Any:
        """Return backend state for ``num_qubits`` qubits in |0...0>."""
        pass

    def _free_handle(self, handle: Any) -> None:
        pass

    @abstractmethod
    def init_superposition(self, register: Register) -> None:
        """Overwrite the register with the uniform superposition |+...+>."""
        pass

    @abstractmethod
    def bit_flip(self, register: Register, qubit: int) -> None:
        """Apply a Pauli-X gate to ``qubit``."""
        pass

    @abstractmethod
    def basis_change(self, register: Register, qubit: int) -> None:
        """Apply a Hadamard gate to ``qubit``."""
        pass

    @abstractmethod
    def multi_controlled_phase_flip(self, register: Register, qubits: Sequence[int]) -> None:
        """Flip the sign of every basis state in which all ``qubits`` are 1."""
        pass

    @abstractmethod
    def probability(self, register: Register, basis_index: int) -> float:
        """Return ``|amplitude|**2`` of ``basis_index`` without collapsing the state."""
        pass

    @abstractmethod
    def name(self) -> str:
        """Return the backend name."""
        pass

    @property
    def is_simulator(self) -> bool:
        return True

    def get_info(self) -> dict[str, Any]:
        """Return backend information."""
        return {
            "name": self.name(),
            "is_simulator": self.is_simulator,
            "max_qubits": self._max_qubits,
        }

    def _check_live(self, register: Register) -> None:
        if register.released:
            raise RuntimeError("register has already been released")

    def _check_qubit(self, register: Register, qubit: int) -> None:
        if not 0 <= qubit < register.num_qubits:
            raise IndexError(
                f"qubit {qubit} out of range for {register.num_qubits}-qubit register"
            )

    def _check_basis_index(self, register: Register, basis_index: int) -> None:
        if not 0 <= basis_index < register.num_states:
            raise IndexError(
                f"basis index {basis_index} out of range for {register.num_qubits}-qubit register"
            )

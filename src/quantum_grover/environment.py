"""Scoped ownership of backend registers."""

from __future__ import annotations

import logging

from .backends.base import Register, RegisterBackend

logger = logging.getLogger(__name__)


class QuantumEnvironment:
    """Owns every register allocated through it.

    Use as a context manager; leaving the block releases all registers,
    also when the block raises.

    Example:
        >>> with QuantumEnvironment(StatevectorBackend()) as env:
        ...     register = env.create_register(3)
    """

    def __init__(self, backend: RegisterBackend):
        self.backend = backend
        self._registers: list[Register] = []
        self.closed = False

    def create_register(self, num_qubits: int) -> Register:
        if self.closed:
            raise RuntimeError("environment has already been closed")
        register = self.backend.allocate(num_qubits, self)
        self._registers.append(register)
        return register

    @property
    def registers(self) -> list[Register]:
        return list(self._registers)

    def close(self) -> None:
        """Release all registers, newest first. Safe to call twice.

        Every register gets a release attempt; the first failure is
        re-raised once the environment is closed.
        """
        if self.closed:
            return

        first_error: Exception | None = None
        for register in reversed(self._registers):
            try:
                self.backend.release(register)
            except Exception as e:
                logger.error("Failed to release %d-qubit register: %s", register.num_qubits, e)
                if first_error is None:
                    first_error = e

        self._registers.clear()
        self.closed = True
        logger.debug("Closed environment on %s", self.backend.name())

        if first_error is not None:
            raise first_error

    def __enter__(self) -> QuantumEnvironment:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

"""Oracle and diffuser construction for Grover's algorithm.

Both operators are built from X, H and a single multi-controlled phase
flip, the only primitives a register backend provides.
"""

from __future__ import annotations

from .backends.base import Register, RegisterBackend


def oracle_flip_qubits(num_qubits: int, key: int) -> list[int]:
    """Return the qubits whose bit in ``key`` is 0.

    Flipping exactly these qubits maps |key> to |11...1>.

    Example:
        >>> oracle_flip_qubits(3, 5)  # 5 = 0b101
        [1]
    """
    return [q for q in range(num_qubits) if (key >> q) & 1 == 0]


def apply_phase_oracle(backend: RegisterBackend, register: Register, key: int) -> None:
    """Mark ``key`` with phase -1: |key> -> -|key>, other states unchanged.

    Uses X gates to convert the target to |11...1>, applies MCZ,
    then unconverts.
    """
    flips = oracle_flip_qubits(register.num_qubits, key)
    qubits = list(range(register.num_qubits))

    for q in flips:
        backend.bit_flip(register, q)

    backend.multi_controlled_phase_flip(register, qubits)

    for q in flips:
        backend.bit_flip(register, q)


def apply_diffuser(backend: RegisterBackend, register: Register) -> None:
    """Apply Grover diffusion operator: 2|s><s| - I.

    X..X c..cZ X..X = I - 2|0..0><0..0|, so conjugating by H on every
    qubit gives 2|s><s| - I up to a global phase of pi.
    """
    qubits = list(range(register.num_qubits))

    # H on all qubits: |s> -> |0...0>
    for q in qubits:
        backend.basis_change(register, q)

    # X on all qubits: |0...0> -> |1...1>
    for q in qubits:
        backend.bit_flip(register, q)

    # Multi-controlled Z (phase flip on |11...1>)
    backend.multi_controlled_phase_flip(register, qubits)

    for q in qubits:
        backend.bit_flip(register, q)

    for q in qubits:
        backend.basis_change(register, q)

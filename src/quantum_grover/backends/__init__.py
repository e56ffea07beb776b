"""Register backends for the Grover driver.

各バックエンドを名前で登録・管理します。
"""

from typing import Callable

from .base import Register, RegisterAllocationError, RegisterBackend
from .statevector import StatevectorBackend

__all__ = [
    "Register",
    "RegisterAllocationError",
    "RegisterBackend",
    "StatevectorBackend",
    "get_backend",
    "list_backends",
]

REGISTRY: dict[str, Callable[..., RegisterBackend]] = {
    "statevector": StatevectorBackend,
}

# Optional backends
try:
    from .qiskit_backend import QiskitBackend
    __all__.append("QiskitBackend")
    REGISTRY["qiskit"] = QiskitBackend
    REGISTRY["aer"] = lambda max_qubits=None: QiskitBackend(method="aer", max_qubits=max_qubits)
except ImportError:
    pass


def get_backend(name: str, max_qubits: int | None = None) -> RegisterBackend:
    """Instantiate a backend by name.

    Parameters
    ----------
    name : str
        One of ``list_backends()``.
    max_qubits : int, optional
        Largest register the backend will allocate.

    Raises
    ------
    ValueError
        If ``name`` is not registered.
    """
    if name not in REGISTRY:
        raise ValueError(f"Unknown backend: {name}. Available: {list_backends()}")
    return REGISTRY[name](max_qubits=max_qubits)


def list_backends() -> list[str]:
    """登録済みのバックエンド名を返す"""
    return sorted(REGISTRY.keys())

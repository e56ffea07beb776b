"""Configuration defaults for Grover search runs.

Values can be overridden with environment variables:

- ``GROVER_BACKEND``: backend name (see ``backends.list_backends()``)
- ``GROVER_MAX_QUBITS``: largest register a backend may allocate
- ``GROVER_LOG_LEVEL``: logging level used by the CLI
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

# ============================================================================
# 定数定義
# ============================================================================
DEFAULT_BACKEND = "statevector"
DEFAULT_MAX_QUBITS = 24  # 2^24 complex128 amplitudes = 256 MiB
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class GroverSettings:
    """Settings shared by the runner and the CLI."""

    backend: str = DEFAULT_BACKEND
    max_qubits: int = DEFAULT_MAX_QUBITS
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> GroverSettings:
        """Build settings from ``environ`` (defaults to ``os.environ``)."""
        if environ is None:
            environ = os.environ

        max_qubits = environ.get("GROVER_MAX_QUBITS")
        if max_qubits is None:
            max_qubits_value = DEFAULT_MAX_QUBITS
        else:
            try:
                max_qubits_value = int(max_qubits)
            except ValueError:
                raise ValueError(f"GROVER_MAX_QUBITS must be an integer, got {max_qubits!r}") from None
            if max_qubits_value < 1:
                raise ValueError(f"GROVER_MAX_QUBITS must be positive, got {max_qubits_value}")

        return cls(
            backend=environ.get("GROVER_BACKEND", DEFAULT_BACKEND),
            max_qubits=max_qubits_value,
            log_level=environ.get("GROVER_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        )

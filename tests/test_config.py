"""Tests for settings and the run_grover entry point.

GroverSettings は環境変数から設定を読み込みます。
"""

import pytest

from quantum_grover.backends import RegisterAllocationError, StatevectorBackend
from quantum_grover.config import DEFAULT_BACKEND, DEFAULT_MAX_QUBITS, GroverSettings
from quantum_grover.core import KeyOutOfBound
from quantum_grover.runner import random_key, run_grover


class TestGroverSettings:
    """GroverSettings データクラスのテスト."""

    def test_defaults(self):
        settings = GroverSettings.from_env({})
        assert settings.backend == DEFAULT_BACKEND
        assert settings.max_qubits == DEFAULT_MAX_QUBITS
        assert settings.log_level == "WARNING"

    def test_overrides(self):
        settings = GroverSettings.from_env(
            {"GROVER_BACKEND": "qiskit", "GROVER_MAX_QUBITS": "12", "GROVER_LOG_LEVEL": "debug"}
        )
        assert settings.backend == "qiskit"
        assert settings.max_qubits == 12
        assert settings.log_level == "DEBUG"

    @pytest.mark.parametrize("value", ["many", "0", "-3"])
    def test_invalid_max_qubits(self, value):
        with pytest.raises(ValueError):
            GroverSettings.from_env({"GROVER_MAX_QUBITS": value})

    def test_reads_os_environ(self, monkeypatch):
        monkeypatch.setenv("GROVER_MAX_QUBITS", "9")
        assert GroverSettings.from_env().max_qubits == 9

    def test_immutable(self):
        settings = GroverSettings()
        with pytest.raises(AttributeError):
            settings.backend = "changed"  # type: ignore


class TestRunGrover:
    """run_grover のテスト."""

    def test_explicit_key(self):
        result = run_grover(3, key=5, backend="statevector")
        assert result.key == 5
        assert result.num_iterations == 3
        assert len(result.history) == 3

    def test_random_key_seeded(self):
        first = run_grover(4, seed=11, backend="statevector")
        second = run_grover(4, seed=11, backend="statevector")

        assert first.key == second.key == random_key(4, 11)
        assert 0 <= first.key < 16

    @pytest.mark.parametrize("num_qubits", [0, -1, 63, 64])
    def test_random_key_range(self, num_qubits):
        with pytest.raises(ValueError):
            random_key(num_qubits)

    def test_backend_instance(self):
        backend = StatevectorBackend()
        result = run_grover(2, key=0, backend=backend, num_iterations=1)
        assert result.probability == pytest.approx(1.0)

    def test_settings_max_qubits(self):
        settings = GroverSettings(max_qubits=3)
        with pytest.raises(RegisterAllocationError):
            run_grover(4, key=0, settings=settings)

    def test_key_out_of_bound(self):
        with pytest.raises(KeyOutOfBound):
            run_grover(3, key=8, backend="statevector")

    def test_monitor_forwarded(self):
        seen = []
        run_grover(3, key=1, backend="statevector", monitor=lambda i, p: seen.append(i))
        assert seen == [1, 2, 3]

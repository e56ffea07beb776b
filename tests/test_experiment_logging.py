"""Tests for experiment logging utilities.

このファイルは実験データの収集と集計機能をテストします。
主な機能:

1. sweep_qubit_counts: レジスタサイズのスイープ実験とデータ収集
2. iteration_trace: 反復ごとの確率の記録
3. summarize_probability: サイズごとの確率の集計
"""

import pandas as pd
import pytest

from quantum_grover.core import iteration_count
from quantum_grover.experiment_logging import (
    iteration_trace,
    summarize_probability,
    sweep_qubit_counts,
)


class TestSweepQubitCounts:
    """レジスタサイズのスイープのテスト.

    各サイズについてランダムなキーで探索を行い、
    結果を pandas DataFrame として収集します。
    """

    def test_basic_sweep(self):
        """基本的なスイープ機能のテスト.

        - 3つのサイズ [2, 3, 4] で実行
        - 各サイズでキーを2つ (keys_per_size=2)
        - 合計 3×2=6 行
        """
        df = sweep_qubit_counts([2, 3, 4], keys_per_size=2, backend="statevector", seed=7)

        assert isinstance(df, pd.DataFrame)
        assert len(df) == 6
        for column in ["num_qubits", "num_states", "key", "num_iterations", "probability", "backend"]:
            assert column in df.columns
        assert (df["key"] < df["num_states"]).all()
        assert (df["num_iterations"] == df["num_qubits"].map(iteration_count)).all()
        assert df["probability"].between(0.0, 1.0).all()

    def test_seed_reproducible(self):
        """同じシードなら同じキーが選ばれる."""
        first = sweep_qubit_counts([3, 5], keys_per_size=3, backend="statevector", seed=42)
        second = sweep_qubit_counts([3, 5], keys_per_size=3, backend="statevector", seed=42)

        pd.testing.assert_frame_equal(first, second)

    def test_probability_independent_of_key(self):
        """単一解の Grover では成功確率はキーに依存しない."""
        df = sweep_qubit_counts([4], keys_per_size=4, backend="statevector", seed=3)
        assert df["probability"].max() - df["probability"].min() < 1e-9


class TestIterationTrace:
    """反復ごとの確率記録のテスト."""

    def test_default_length(self):
        df = iteration_trace(4, key=6, backend="statevector")

        assert list(df.columns) == ["iteration", "probability"]
        assert list(df["iteration"]) == [1, 2, 3, 4]

    def test_over_rotation_visible(self):
        """最適値を超えて反復すると確率が下がる様子が見える.

        n=3 では2回目で最大 (≈0.945)、その後減少する。
        """
        df = iteration_trace(3, key=5, num_iterations=4, backend="statevector")

        best = df.loc[df["probability"].idxmax()]
        assert best["iteration"] == 2
        assert best["probability"] > 0.9
        assert df["probability"].iloc[-1] < best["probability"]


class TestSummarizeProbability:
    """確率の集計のテスト."""

    def test_summarize(self):
        data = {
            "num_qubits": [2, 2, 3, 3, 3],
            "num_iterations": [2, 2, 3, 3, 3],
            "probability": [0.25, 0.25, 0.3, 0.4, 0.5],
        }
        summary = summarize_probability(pd.DataFrame(data))

        assert list(summary["num_qubits"]) == [2, 3]
        assert list(summary["runs"]) == [2, 3]
        assert summary["mean_probability"].iloc[1] == pytest.approx(0.4)
        assert summary["min_probability"].iloc[1] == pytest.approx(0.3)

    def test_empty_dataframe(self):
        """空の DataFrame でもエラーにならない."""
        summary = summarize_probability(pd.DataFrame())
        assert summary.empty

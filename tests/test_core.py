"""Tests for key validation and the Grover iteration count.

このファイルはドライバーの前処理となる純粋関数をテストします。

1. iteration_count: ceil(π/4 · √(2^n)) による反復回数
2. validate_key: 探索キーがキー空間 [0, 2^n) に収まるかの検証
"""

import math

import pytest

from quantum_grover.core import KeyOutOfBound, iteration_count, validate_key


class TestIterationCount:
    """反復回数の公式のテスト.

    R = ceil(π/4 · √N), N = 2^n.
    小さい n では最適値を超えて回転しすぎる (over-rotation) が、
    公式をそのまま使うのが仕様です。
    """

    def test_known_values(self):
        """公式から直接計算した値.

        - n=1: ceil(0.785 × 1.414) = ceil(1.11) = 2
        - n=2: ceil(0.785 × 2) = ceil(1.57) = 2
        - n=3: ceil(0.785 × 2.83) = ceil(2.22) = 3
        - n=4: ceil(0.785 × 4) = ceil(3.14) = 4
        - n=15: ceil(0.785 × 181.02) = ceil(142.17) = 143
        """
        assert iteration_count(1) == 2
        assert iteration_count(2) == 2
        assert iteration_count(3) == 3
        assert iteration_count(4) == 4
        assert iteration_count(15) == 143

    def test_zero_qubits_keeps_formula(self):
        """n=0 でも特別扱いせず ceil(π/4) = 1 を返す."""
        assert iteration_count(0) == 1

    def test_matches_formula(self):
        for n in range(0, 21):
            assert iteration_count(n) == math.ceil(math.pi / 4 * math.sqrt(2 ** n))

    def test_pure(self):
        """同じ入力には常に同じ結果."""
        assert iteration_count(7) == iteration_count(7)

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            iteration_count(-1)


class TestValidateKey:
    """キー検証のテスト.

    有効範囲は 0 <= key < 2^n. それ以外は KeyOutOfBound.
    """

    def test_valid_keys(self):
        for key in range(8):
            validate_key(3, key)

    @pytest.mark.parametrize("key", [-1, -100, 8, 9, 1 << 20])
    def test_out_of_bound(self, key):
        with pytest.raises(KeyOutOfBound):
            validate_key(3, key)

    def test_error_carries_context(self):
        with pytest.raises(KeyOutOfBound) as excinfo:
            validate_key(2, 4)

        assert excinfo.value.key == 4
        assert excinfo.value.num_qubits == 2
        assert "[0, 4)" in str(excinfo.value)

    def test_is_value_error(self):
        """KeyOutOfBound は ValueError として捕捉できる."""
        with pytest.raises(ValueError):
            validate_key(1, 2)

    def test_non_integer_key(self):
        with pytest.raises(TypeError):
            validate_key(3, 1.5)

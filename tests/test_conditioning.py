"""Tests for conditioning algorithms."""

import numpy as np

from entropic.conditioning import sha256_condition, xor_fold


class TestXorFold:
    def test_halves_length(self):
        data = np.arange(100, dtype=np.uint8)
        assert len(xor_fold(data, 2)) == 50

    def test_fold_8(self):
        data = np.array([1, 2, 4, 8, 16, 32, 64, 128, 255], dtype=np.uint8)
        out = xor_fold(data, 8)
        assert out.tolist() == [255]


class TestSHA256:
    def test_output_length(self):
        assert len(sha256_condition(b"x" * 100, 75)) == 75

    def test_deterministic(self):
        assert sha256_condition(b"test input", 32) == sha256_condition(b"test input", 32)

    def test_array_and_bytes_agree(self):
        raw = bytes(range(50))
        assert sha256_condition(np.frombuffer(raw, dtype=np.uint8), 40) == sha256_condition(raw, 40)

    def test_different_inputs(self):
        assert sha256_condition(b"a", 32) != sha256_condition(b"b", 32)

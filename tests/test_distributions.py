"""Tests for Standard, Uniform and Bernoulli."""

from typing import Optional

import numpy as np
import pytest

from entropic import Bernoulli, InvalidProbabilityError, InvalidRangeError, StdRng, StepRng, Uniform
from entropic.distributions import Array, Distribution, Standard


@pytest.fixture
def rng():
    return StdRng.seed_from_u64(7)


class TestStandard:
    @pytest.mark.parametrize("tp", [np.uint8, np.int8, np.uint16, np.int16,
                                    np.uint32, np.int32, np.uint64, np.int64])
    def test_integer_types_keep_dtype(self, rng, tp):
        v = rng.gen(tp)
        assert isinstance(v, tp)
        info = np.iinfo(tp)
        assert info.min <= v <= info.max

    def test_integer_truncation(self):
        r = StepRng(0xAABB_CCDD_EEFF_1122, 0)
        assert r.gen(np.uint8) == 0x22
        assert r.gen(np.uint16) == 0x1122
        assert r.gen(np.uint32) == 0xEEFF_1122
        assert r.gen(np.uint64) == 0xAABB_CCDD_EEFF_1122
        assert r.gen(np.int8) == 0x22
        assert r.gen(np.int64) == 0xAABB_CCDD_EEFF_1122 - 2 ** 64

    def test_python_int_is_signed_64(self):
        assert StepRng(2 ** 64 - 1, 0).gen(int) == -1
        assert StepRng(5, 0).gen(int) == 5

    def test_bool_uses_top_bit(self):
        assert StepRng(0x8000_0000, 0).gen(bool) is True
        assert StepRng(0x7FFF_FFFF, 0).gen(bool) is False

    def test_floats_in_unit_interval(self, rng):
        for _ in range(1000):
            assert 0.0 <= rng.gen(float) < 1.0
            f32 = rng.gen(np.float32)
            assert isinstance(f32, np.float32)
            assert 0.0 <= f32 < 1.0

    def test_float_extremes(self):
        assert StepRng(0, 0).gen(float) == 0.0
        top = StepRng(2 ** 64 - 1, 0).gen(float)
        assert top == 1.0 - 2 ** -53
        assert StepRng(2 ** 32 - 1, 0).gen(np.float32) == np.float32(1.0 - 2 ** -24)

    def test_default_is_float(self, rng):
        assert isinstance(rng.gen(), float)

    def test_tuple(self, rng):
        v = rng.gen((np.uint8, (float, bool), int))
        assert isinstance(v, tuple) and len(v) == 3
        assert isinstance(v[1], tuple)
        assert isinstance(v[1][1], bool)

    def test_tuple_order(self):
        r = StepRng(1, 1)
        assert r.gen((np.uint64, np.uint64, np.uint64)) == (1, 2, 3)

    def test_optional(self):
        assert StepRng(0, 0).gen(Optional[np.uint8]) is None
        r = StepRng(0x8000_0000, 1)
        # first draw decides presence, second is the value
        assert r.gen(Optional[np.uint32]) == 0x8000_0001

    def test_optional_union_syntax(self, rng):
        v = rng.gen(int | None)
        assert v is None or isinstance(v, int)

    def test_array(self):
        arr = StepRng(10, 1).gen(Array(np.uint16, 4))
        assert arr.dtype == np.uint16
        assert arr.tolist() == [10, 11, 12, 13]

    def test_array_of_tuples_is_list(self, rng):
        v = rng.gen(Array((bool, bool), 3))
        assert isinstance(v, list) and len(v) == 3

    @pytest.mark.parametrize("tp", [str, object, np.float16, np.complex128, Array(str, 2)])
    def test_unsupported_type(self, tp):
        with pytest.raises(TypeError):
            Standard(tp)


class TestUniform:
    def test_reusable(self, rng):
        die = Uniform(1, 7)
        rolls = [die.sample(rng) for _ in range(600)]
        assert min(rolls) == 1 and max(rolls) == 6

    def test_inclusive(self, rng):
        d = Uniform.new_inclusive(0, 3)
        assert {d.sample(rng) for _ in range(400)} == {0, 1, 2, 3}

    def test_inclusive_single_value(self, rng):
        assert Uniform.new_inclusive(5, 5).sample(rng) == 5

    def test_inclusive_full_u32_range(self):
        d = Uniform.new_inclusive(0, 2 ** 32 - 1, dtype=np.uint32)
        assert d.sample(StepRng(2 ** 32 - 1, 0)) == 2 ** 32 - 1

    def test_inclusive_float(self, rng):
        d = Uniform.new_inclusive(0.0, 1.0)
        assert all(0.0 <= d.sample(rng) <= 1.0 for _ in range(500))

    def test_invalid_construction(self):
        with pytest.raises(InvalidRangeError):
            Uniform(10, 10)
        with pytest.raises(InvalidRangeError):
            Uniform.new_inclusive(3, 2)

    def test_properties_and_repr(self):
        d = Uniform(2, 9)
        assert (d.low, d.high) == (2, 9)
        assert "Uniform" in repr(d)

    def test_wide_span_uses_64_bit_draws(self):
        r = StepRng(2 ** 40, 0)
        assert Uniform(0, 2 ** 48).sample(r) == 2 ** 40


class TestBernoulli:
    def test_probability_threshold(self):
        d = Bernoulli(0.5)
        assert d.sample(StepRng(2 ** 63 - 1, 0)) is True
        assert d.sample(StepRng(2 ** 63, 0)) is False

    def test_certain_draw_nothing(self):
        r = StepRng(0, 1)
        assert Bernoulli(1.0).sample(r) is True
        assert Bernoulli(0.0).sample(r) is False
        assert r.next_u64() == 0

    def test_from_ratio(self, rng):
        d = Bernoulli.from_ratio(1, 4)
        assert d.p == 0.25
        hits = sum(d.sample(rng) for _ in range(20_000))
        assert abs(hits / 20_000 - 0.25) < 0.02

    def test_invalid(self):
        with pytest.raises(InvalidProbabilityError):
            Bernoulli(1.01)
        with pytest.raises(InvalidProbabilityError):
            Bernoulli.from_ratio(3, 2)

    def test_repr(self):
        assert repr(Bernoulli.from_ratio(1, 3)) == "Bernoulli.from_ratio(1, 3)"


class TestCustomDistribution:
    def test_user_distribution(self, rng):
        class Coin(Distribution):
            def sample(self, rng):
                return "heads" if rng.gen(bool) else "tails"

        flips = [rng.sample(Coin()) for _ in range(200)]
        assert set(flips) == {"heads", "tails"}

    def test_sample_iter_stops_when_caller_stops(self, rng):
        it = Uniform(0, 10).sample_iter(rng)
        taken = [v for _, v in zip(range(5), it)]
        assert len(taken) == 5
